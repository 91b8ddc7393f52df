"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from cabinet_pricing.web import create_app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _fixture(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestQuoteEndpoint:
    """Tests for POST /api/v1/quote."""

    def test_quote(self, client: TestClient, minimal_config_dict) -> None:
        response = client.post("/api/v1/quote", json={"config": minimal_config_dict})

        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["back_cost"] == pytest.approx(540)
        assert data["breakdown"]["subtotal"] == pytest.approx(1811.4)
        assert data["breakdown"]["total"] == pytest.approx(2092.167)
        assert data["spec"]["door_qty"] == 1
        assert data["line_total"] == pytest.approx(data["breakdown"]["total"])

    def test_quote_from_settings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote", json={"config": _fixture("settings_quote.json")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["door_cost"] == pytest.approx(540)
        assert data["door_rates"]["color_surcharge_rate"] == 1000
        assert data["quantity"] == 2

    def test_invalid_input(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote", json={"config": _fixture("negative_width.json")}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "invalid_input"
        assert data["details"][0]["field"] == "width_mm"

    def test_oversized_quantity(self, client: TestClient, minimal_config_dict) -> None:
        minimal_config_dict["cabinet"]["door_qty"] = 10**400

        response = client.post("/api/v1/quote", json={"config": minimal_config_dict})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "invalid_input"
        assert data["details"][0]["field"] == "door_qty"

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote", json={"config": _fixture("unknown_field.json")}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "cabinet.colour"

    def test_cabinet_type_without_width(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/quote",
            json={
                "config": {
                    "schema_version": "1.0",
                    "cabinet": {"cabinet_type": {"name": "Base 1 Door"}},
                }
            },
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_configuration"

    def test_missing_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/quote", json={})

        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("valid_minimal.json")}
        )

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("valid_with_warnings.json")}
        )

        data = response.json()
        assert data["is_valid"] is True
        assert [w["path"] for w in data["warnings"]] == [
            "rates.wastage_factor",
            "rates.tax_rate",
        ]
        assert data["warnings"][0]["suggestion"]

    def test_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("negative_width.json")}
        )

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "cabinet.width_mm"

    def test_schema_errors_in_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("unknown_field.json")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "cabinet.colour"


class TestPriceListEndpoint:
    """Tests for the price list endpoints."""

    def test_price_list(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list", json={"config": _fixture("price_list.json")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["cabinet_name"] == "Base 2 Door"
        assert data["policy"] == "min"
        assert data["columns"] == ["Laminate", "Shaker"]
        assert data["rows"][0]["prices"] == pytest.approx([243.84, 330.24])

    def test_policy_override(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list",
            json={"config": _fixture("price_list.json"), "policy": "midpoint"},
        )

        assert response.status_code == 200
        assert response.json()["rows"][0]["width_mm"] == pytest.approx(624.5)

    def test_policy_required(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list", json={"config": _fixture("no_policy.json")}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "missing_policy"

    def test_unknown_policy(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list",
            json={"config": _fixture("price_list.json"), "policy": "average"},
        )

        assert response.status_code == 422

    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/price-list/formats")

        assert response.json() == {"formats": ["csv", "json", "text"]}

    def test_csv_export(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list/csv", json={"config": _fixture("price_list.json")}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "price-list.csv" in response.headers["content-disposition"]
        assert response.text.splitlines()[0] == "Cabinet,Size,Width (mm),Laminate,Shaker"

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list/pdf", json={"config": _fixture("price_list.json")}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["csv", "json", "text"]

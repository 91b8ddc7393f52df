"""Pytest configuration and shared fixtures for pricing tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cabinet_pricing.domain import CabinetSpec, DoorRateComponents, RateSettings

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared pricing inputs
# =============================================================================


@pytest.fixture
def standard_spec() -> CabinetSpec:
    """750 x 720 x 560 base cabinet with one door."""
    return CabinetSpec(
        width_mm=750,
        height_mm=720,
        depth_mm=560,
        back_panel_qty=1,
        bottom_panel_qty=1,
        side_panel_qty=2,
        door_qty=1,
    )


@pytest.fixture
def standard_rates() -> RateSettings:
    """Panel rate 1000/m2, 45 hardware, 5% wastage, 10% tax."""
    return RateSettings(
        panel_rate_per_sqm=1000,
        hardware_base_cost=45,
        wastage_factor=0.05,
        tax_rate=0.10,
    )


@pytest.fixture
def no_door_rates() -> DoorRateComponents:
    return DoorRateComponents()


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def minimal_config_dict() -> dict:
    """Smallest configuration that prices the standard cabinet."""
    return {
        "schema_version": "1.0",
        "cabinet": {
            "width_mm": 750,
            "height_mm": 720,
            "depth_mm": 560,
            "door_qty": 1,
        },
        "rates": {
            "panel_rate_per_sqm": 1000,
            "hardware_base_cost": 45,
            "wastage_factor": 0.05,
            "tax_rate": 0.1,
        },
    }


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger changes made by the CLI's --log-level callback."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)

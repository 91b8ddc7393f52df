"""Unit tests for pricing configuration validation."""

from typing import Any

from cabinet_pricing.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)


def _validate(**overrides: Any) -> ValidationResult:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "cabinet": {"width_mm": 600, "height_mm": 720, "depth_mm": 560},
        "rates": {"panel_rate_per_sqm": 85, "wastage_factor": 0.05, "tax_rate": 0.1},
    }
    data.update(overrides)
    return validate_config(load_config_from_dict(data))


def _paths(items) -> list[str]:
    return [item.path for item in items]


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "warn").exit_code == 2
        assert ValidationResult().add_warning("a", "warn").add_error("b", "err").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "err")
        result.merge(ValidationResult().add_warning("b", "warn"))

        assert not result.is_valid
        assert result.has_warnings


class TestErrors:
    """Inputs the price engine would reject."""

    def test_clean_config(self) -> None:
        result = _validate()

        assert result.is_valid
        assert not result.has_warnings

    def test_negative_width(self) -> None:
        result = _validate(cabinet={"width_mm": -100, "height_mm": 720, "depth_mm": 560})

        assert _paths(result.errors) == ["cabinet.width_mm"]
        assert result.errors[0].value == -100
        assert "negative" in result.errors[0].message

    def test_negative_quantity(self) -> None:
        result = _validate(
            cabinet={"width_mm": 600, "height_mm": 720, "depth_mm": 560, "door_qty": -1}
        )

        assert _paths(result.errors) == ["cabinet.door_qty"]

    def test_negative_rate(self) -> None:
        result = _validate(rates={"tax_rate": -0.1})

        assert _paths(result.errors) == ["rates.tax_rate"]

    def test_negative_setting_reports_setting_key(self) -> None:
        result = _validate(rates=None, settings={"gst_rate": "-0.1", "hmr_rate_per_sqm": "85"})

        assert "settings.gst_rate" in _paths(result.errors)

    def test_negative_door_total_rate(self) -> None:
        result = _validate(door={"total_rate": -5})

        assert _paths(result.errors) == ["door.total_rate"]

    def test_all_errors_reported(self) -> None:
        result = _validate(
            cabinet={"width_mm": -1, "height_mm": -1, "depth_mm": 560},
            rates={"wastage_factor": -1},
        )

        assert _paths(result.errors) == [
            "cabinet.width_mm",
            "cabinet.height_mm",
            "rates.wastage_factor",
        ]

    def test_cabinet_type_without_width(self) -> None:
        result = _validate(cabinet={"cabinet_type": {"name": "Base 1 Door"}})

        assert _paths(result.errors) == ["cabinet"]
        assert "No width" in result.errors[0].message

    def test_hardware_discount_from_settings_over_100(self) -> None:
        result = _validate(
            rates=None,
            settings={"hmr_rate_per_sqm": "85", "hardware_discount_percentage": "150"},
            hardware={"hardware_set": {"set_name": "Soft close"}},
        )

        assert _paths(result.errors) == ["hardware"]
        assert "discount" in result.errors[0].message

    def test_cabinet_and_hardware_errors_reported_separately(self) -> None:
        result = _validate(
            cabinet={"cabinet_type": {"name": "Base 1 Door"}},
            rates=None,
            settings={"hardware_markup_percentage": "-10"},
            hardware={"hardware_set": {"set_name": "Soft close"}},
        )

        assert _paths(result.errors) == ["cabinet", "hardware"]

    def test_overflowing_total(self) -> None:
        result = _validate(
            cabinet={"width_mm": 1e200, "height_mm": 1e200, "depth_mm": 1},
            rates={"panel_rate_per_sqm": 1e200},
        )

        assert _paths(result.errors) == ["total"]

    def test_overflowing_line_total(self) -> None:
        result = _validate(quantity=10**400)

        assert _paths(result.errors) == ["quantity"]
        assert "overflows" in result.errors[0].message

    def test_bad_price_list_door_option(self) -> None:
        result = _validate(
            price_list={
                "policy": "min",
                "door_options": [
                    {"label": "Ok", "door": {"total_rate": 100}},
                    {"label": "Bad", "door": {"total_rate": -100}},
                ],
            }
        )

        assert _paths(result.errors) == ["price_list.door_options[1].door.total_rate"]


class TestWarnings:
    """Inputs the engine accepts but that are implausible."""

    def test_wastage_and_tax_over_one(self) -> None:
        result = _validate(rates={"panel_rate_per_sqm": 85, "wastage_factor": 5, "tax_rate": 10})

        assert result.is_valid
        assert _paths(result.warnings) == ["rates.wastage_factor", "rates.tax_rate"]
        assert all(w.suggestion for w in result.warnings)

    def test_exactly_one_is_not_flagged(self) -> None:
        result = _validate(rates={"panel_rate_per_sqm": 85, "wastage_factor": 1, "tax_rate": 1})

        assert not result.has_warnings

    def test_zero_dimension(self) -> None:
        result = _validate(cabinet={"width_mm": 0, "height_mm": 720, "depth_mm": 560})

        assert "cabinet.width_mm" in _paths(result.warnings)
        assert result.exit_code == 2

    def test_zero_panel_rate(self) -> None:
        result = _validate(rates={"hardware_base_cost": 45})

        assert _paths(result.warnings) == ["rates.panel_rate_per_sqm"]

    def test_doors_without_rate(self) -> None:
        result = _validate(
            cabinet={"width_mm": 600, "height_mm": 720, "depth_mm": 560, "door_qty": 2}
        )

        assert _paths(result.warnings) == ["door"]

    def test_doors_with_rate(self) -> None:
        result = _validate(
            cabinet={"width_mm": 600, "height_mm": 720, "depth_mm": 560, "door_qty": 2},
            door={"finish": {"name": "Satin", "rate_per_sqm": 120}},
        )

        assert not result.has_warnings

    def test_missing_settings_keys(self) -> None:
        result = _validate(
            rates=None,
            settings=[
                {"setting_key": "hmr_rate_per_sqm", "setting_value": "85"},
                {"setting_key": "gst_rate", "setting_value": "n/a"},
            ],
        )

        assert result.is_valid
        assert "settings.gst_rate" in _paths(result.warnings)
        assert "settings.wastage_factor" in _paths(result.warnings)
        assert "settings.hmr_rate_per_sqm" not in _paths(result.warnings)

    def test_zero_width_bracket(self) -> None:
        result = _validate(
            price_list={
                "policy": "min",
                "brackets": [{"min_width_mm": 0, "max_width_mm": 300}],
            }
        )

        assert _paths(result.warnings) == ["price_list.brackets[0]"]

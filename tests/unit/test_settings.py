"""Unit tests for the settings-store adapter."""

import logging

import pytest

from cabinet_pricing.application.settings import (
    DEFAULT_HARDWARE_MARKUP_PERCENTAGE,
    SettingRecord,
    parse_hardware_pricing,
    parse_rate_settings,
    settings_to_map,
)
from cabinet_pricing.domain import RateSettings


class TestParseRateSettings:
    """Tests for parse_rate_settings."""

    def test_records_map_to_rate_fields(self) -> None:
        records = [
            {"setting_key": "hmr_rate_per_sqm", "setting_value": "85"},
            {"setting_key": "hardware_base_cost", "setting_value": "45.50"},
            {"setting_key": "wastage_factor", "setting_value": "0.05"},
            {"setting_key": "gst_rate", "setting_value": "0.1"},
        ]

        assert parse_rate_settings(records) == RateSettings(
            panel_rate_per_sqm=85.0,
            hardware_base_cost=45.5,
            wastage_factor=0.05,
            tax_rate=0.1,
        )

    def test_setting_record_models(self) -> None:
        records = [
            SettingRecord(setting_key="hmr_rate_per_sqm", setting_value="90"),
            SettingRecord(
                setting_key="gst_rate", setting_value="0.15", description="NZ GST"
            ),
        ]

        rates = parse_rate_settings(records)

        assert rates.panel_rate_per_sqm == 90
        assert rates.tax_rate == pytest.approx(0.15)

    def test_flat_mapping(self) -> None:
        rates = parse_rate_settings({"hmr_rate_per_sqm": 100, "wastage_factor": "0.1"})

        assert rates.panel_rate_per_sqm == 100
        assert rates.wastage_factor == pytest.approx(0.1)

    def test_absent_keys_default_to_zero(self) -> None:
        assert parse_rate_settings([]) == RateSettings()

    def test_unparseable_values_default_to_zero(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            rates = parse_rate_settings(
                {"hmr_rate_per_sqm": "eighty", "gst_rate": None, "wastage_factor": "nan"}
            )

        assert rates == RateSettings()
        assert "hmr_rate_per_sqm" in caplog.text

    def test_negative_values_pass_through(self) -> None:
        rates = parse_rate_settings({"hardware_base_cost": "-5"})

        assert rates.hardware_base_cost == -5

    def test_unrelated_keys_ignored(self) -> None:
        rates = parse_rate_settings({"site_name": "Kitchens R Us", "gst_rate": "0.1"})

        assert rates == RateSettings(tax_rate=0.1)


class TestSettingsToMap:
    """Tests for settings_to_map."""

    def test_bool_values_dropped(self) -> None:
        assert settings_to_map({"gst_rate": True}) == {}

    def test_numeric_strings_parsed(self) -> None:
        assert settings_to_map([{"setting_key": "a", "setting_value": " 12.5 "}]) == {
            "a": 12.5
        }


class TestParseHardwarePricing:
    """Tests for hardware markup and discount settings."""

    def test_defaults(self) -> None:
        pricing = parse_hardware_pricing({})

        assert pricing.markup_percentage == DEFAULT_HARDWARE_MARKUP_PERCENTAGE == 35
        assert pricing.discount_percentage == 0

    def test_configured_values(self) -> None:
        pricing = parse_hardware_pricing(
            {
                "hardware_markup_percentage": "50",
                "hardware_discount_percentage": "10",
            }
        )

        assert pricing.markup_percentage == 50
        assert pricing.discount_percentage == 10

"""Adapter for the admin settings store.

The settings store hands out flat key/value records with string values. This
module turns them into the immutable RateSettings snapshot the price engine
expects. Missing or unparseable numbers become 0; negative numbers are kept
as-is so the engine can reject them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from cabinet_pricing.domain import RateSettings

logger = logging.getLogger(__name__)

# Settings-store key -> RateSettings field
RATE_SETTING_KEYS: dict[str, str] = {
    "hmr_rate_per_sqm": "panel_rate_per_sqm",
    "hardware_base_cost": "hardware_base_cost",
    "wastage_factor": "wastage_factor",
    "gst_rate": "tax_rate",
}

HARDWARE_MARKUP_KEY = "hardware_markup_percentage"
HARDWARE_DISCOUNT_KEY = "hardware_discount_percentage"
DEFAULT_HARDWARE_MARKUP_PERCENTAGE = 35.0


class SettingRecord(BaseModel):
    """One row of the global settings table."""

    model_config = ConfigDict(extra="ignore")

    setting_key: str
    setting_value: str | float | int | None = None
    description: str | None = None


SettingsInput = Union[
    Iterable[Union[SettingRecord, Mapping[str, Any]]],
    Mapping[str, Any],
]


@dataclass(frozen=True)
class HardwarePricingSettings:
    """Markup and discount applied to hardware set costs, in percent."""

    markup_percentage: float = DEFAULT_HARDWARE_MARKUP_PERCENTAGE
    discount_percentage: float = 0.0


def _parse_number(key: str, raw: Any) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric setting %s=%r", key, raw)
        return None
    if not math.isfinite(value):
        logger.warning("Ignoring non-finite setting %s=%r", key, raw)
        return None
    return value


def settings_to_map(records: SettingsInput) -> dict[str, float]:
    """Flatten settings records into {key: number}, dropping unparseable values.

    Accepts a plain {key: value} mapping, or an iterable of SettingRecord
    instances or dicts with setting_key/setting_value.
    """
    pairs: list[tuple[str, Any]] = []
    if isinstance(records, Mapping):
        pairs = [(str(key), value) for key, value in records.items()]
    else:
        for record in records:
            if not isinstance(record, SettingRecord):
                record = SettingRecord.model_validate(record)
            pairs.append((record.setting_key, record.setting_value))

    parsed: dict[str, float] = {}
    for key, raw in pairs:
        value = _parse_number(key, raw)
        if value is not None:
            parsed[key] = value
    return parsed


def parse_rate_settings(records: SettingsInput) -> RateSettings:
    """Build a RateSettings snapshot from settings-store records.

    Example:
        >>> parse_rate_settings({"hmr_rate_per_sqm": "85", "gst_rate": "0.1"})
        RateSettings(panel_rate_per_sqm=85.0, hardware_base_cost=0.0, wastage_factor=0.0, tax_rate=0.1)
    """
    values = settings_to_map(records)
    kwargs = {
        field: values.get(key, 0.0) for key, field in RATE_SETTING_KEYS.items()
    }
    missing = [key for key in RATE_SETTING_KEYS if key not in values]
    if missing:
        logger.debug("Rate settings missing, defaulting to 0: %s", ", ".join(missing))
    return RateSettings(**kwargs)


def parse_hardware_pricing(records: SettingsInput) -> HardwarePricingSettings:
    """Read hardware markup/discount percentages (35% / 0% when absent)."""
    values = settings_to_map(records)
    return HardwarePricingSettings(
        markup_percentage=values.get(
            HARDWARE_MARKUP_KEY, DEFAULT_HARDWARE_MARKUP_PERCENTAGE
        ),
        discount_percentage=values.get(HARDWARE_DISCOUNT_KEY, 0.0),
    )

"""Application layer - use cases and adapters around the price engine."""

from .catalog import (
    CabinetType,
    Color,
    DoorStyle,
    Finish,
    HardwarePricing,
    HardwareSet,
    HardwareSetItem,
    cabinet_spec_for,
    carcass_material_surcharge,
    price_hardware_set,
    resolve_door_rates,
)
from .commands import PriceListCommand, QuoteCommand
from .dtos import PriceListOutput, PriceListRow, QuoteOutput
from .settings import (
    HardwarePricingSettings,
    SettingRecord,
    parse_hardware_pricing,
    parse_rate_settings,
)

__all__ = [
    "CabinetType",
    "Color",
    "DoorStyle",
    "Finish",
    "HardwarePricing",
    "HardwarePricingSettings",
    "HardwareSet",
    "HardwareSetItem",
    "PriceListCommand",
    "PriceListOutput",
    "PriceListRow",
    "QuoteCommand",
    "QuoteOutput",
    "SettingRecord",
    "cabinet_spec_for",
    "carcass_material_surcharge",
    "parse_hardware_pricing",
    "parse_rate_settings",
    "price_hardware_set",
    "resolve_door_rates",
]

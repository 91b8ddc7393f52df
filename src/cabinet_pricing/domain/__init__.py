"""Domain layer - core pricing logic."""

from .exceptions import InvalidInput
from .price_brackets import (
    BASE_DRAWER_BRACKETS,
    BASE_ONE_DOOR_BRACKETS,
    BASE_TWO_DOOR_BRACKETS,
    DEFAULT_BRACKETS,
    PriceBracket,
    WidthPolicy,
    default_brackets,
)
from .services import (
    PriceEngine,
    compute_line_total,
    compute_price,
    iter_input_errors,
    validate_inputs,
)
from .value_objects import (
    CabinetCategory,
    CabinetSpec,
    DoorRateComponents,
    PriceBreakdown,
    RateSettings,
)

__all__ = [
    "BASE_DRAWER_BRACKETS",
    "BASE_ONE_DOOR_BRACKETS",
    "BASE_TWO_DOOR_BRACKETS",
    "CabinetCategory",
    "CabinetSpec",
    "DEFAULT_BRACKETS",
    "DoorRateComponents",
    "InvalidInput",
    "PriceBracket",
    "PriceBreakdown",
    "PriceEngine",
    "RateSettings",
    "WidthPolicy",
    "compute_line_total",
    "compute_price",
    "default_brackets",
    "iter_input_errors",
    "validate_inputs",
]

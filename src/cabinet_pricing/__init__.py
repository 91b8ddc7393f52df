"""Cabinet configuration pricing: engine, catalog adapters, CLI and REST API."""

from cabinet_pricing.domain import (
    CabinetSpec,
    DoorRateComponents,
    InvalidInput,
    PriceBreakdown,
    RateSettings,
    compute_price,
)

__version__ = "0.1.0"

__all__ = [
    "CabinetSpec",
    "DoorRateComponents",
    "InvalidInput",
    "PriceBreakdown",
    "RateSettings",
    "__version__",
    "compute_price",
]

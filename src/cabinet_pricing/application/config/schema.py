"""Pydantic schema for pricing configuration documents.

A configuration document describes one quote: the cabinet, the rate settings
snapshot, the door selections and optionally a price list to generate.

Dimension and rate fields are unconstrained here. Negative values are
reported by validate_config() and rejected by the price engine with
InvalidInput.

Example:
    {
        "schema_version": "1.0",
        "cabinet": {"width_mm": 600, "height_mm": 720, "depth_mm": 560, "door_qty": 1},
        "rates": {"panel_rate_per_sqm": 85, "wastage_factor": 0.05, "tax_rate": 0.1},
        "door": {"finish": {"name": "Satin", "rate_per_sqm": 120}}
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_pricing.application.catalog import (
    CARCASS_MATERIAL_FRACTION,
    CabinetType,
    Color,
    DoorStyle,
    Finish,
    HardwareSet,
)
from cabinet_pricing.domain import WidthPolicy

# Version 1.0: Initial schema (cabinet, rates, door, hardware, price_list)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CabinetConfig(BaseModel):
    """Cabinet to price, either explicit or derived from a catalog type.

    Either give width_mm, height_mm and depth_mm directly, or give a
    cabinet_type whose quantities and default sizes fill in whatever is
    missing. Explicit quantities always win over the catalog type.
    """

    model_config = ConfigDict(extra="forbid")

    cabinet_type: CabinetType | None = None
    width_mm: float | None = None
    height_mm: float | None = None
    depth_mm: float | None = None
    back_panel_qty: int | None = None
    bottom_panel_qty: int | None = None
    side_panel_qty: int | None = None
    door_qty: int | None = None

    @model_validator(mode="after")
    def validate_dimensions_present(self) -> "CabinetConfig":
        """Require explicit dimensions when no cabinet type is given."""
        if self.cabinet_type is None:
            missing = [
                name
                for name in ("width_mm", "height_mm", "depth_mm")
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(
                    f"{', '.join(missing)} required when cabinet_type is not given"
                )
        return self


class RatesConfig(BaseModel):
    """Explicit rate settings. Unset fields are 0."""

    model_config = ConfigDict(extra="forbid")

    panel_rate_per_sqm: float = 0.0
    hardware_base_cost: float = 0.0
    wastage_factor: float = 0.0
    tax_rate: float = 0.0


class DoorConfig(BaseModel):
    """Door selections for the quote.

    total_rate, when given, is a pre-flattened door rate and replaces the
    style/finish/colour lookup entirely.
    """

    model_config = ConfigDict(extra="forbid")

    door_style: DoorStyle | None = None
    finish: Finish | None = None
    color: Color | None = None
    total_rate: float | None = None
    include_carcass_material: bool = False
    carcass_material_fraction: float = Field(
        default=CARCASS_MATERIAL_FRACTION, ge=0
    )


class HardwareConfig(BaseModel):
    """Hardware set whose marked-up cost replaces hardware_base_cost."""

    model_config = ConfigDict(extra="forbid")

    hardware_set: HardwareSet
    markup_percentage: float | None = Field(default=None, ge=0)
    discount_percentage: float | None = Field(default=None, ge=0, le=100)


class BracketConfig(BaseModel):
    """An explicit price bracket."""

    model_config = ConfigDict(extra="forbid")

    label: str | None = None
    min_width_mm: float = Field(..., ge=0)
    max_width_mm: float = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "BracketConfig":
        if self.max_width_mm < self.min_width_mm:
            raise ValueError(
                f"max_width_mm ({self.max_width_mm}) must be greater than or equal to "
                f"min_width_mm ({self.min_width_mm})"
            )
        return self


class DoorOptionConfig(BaseModel):
    """One priced column of a price list."""

    model_config = ConfigDict(extra="forbid")

    label: str
    door: DoorConfig = Field(default_factory=DoorConfig)


class PriceListConfig(BaseModel):
    """Price list generation settings.

    policy has no default: which width inside a bracket is priced must be
    chosen explicitly.
    """

    model_config = ConfigDict(extra="forbid")

    policy: WidthPolicy
    brackets: list[BracketConfig] | None = Field(default=None, min_length=1)
    door_options: list[DoorOptionConfig] | None = Field(default=None, min_length=1)


class PricingConfiguration(BaseModel):
    """Root configuration document.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet: The cabinet to price
        rates: Explicit rate settings (optional)
        settings: Raw settings-store records, list or mapping (optional).
            Used when rates is not given.
        door: Door selections (optional, no door rate when absent)
        hardware: Hardware set overriding hardware_base_cost (optional)
        quantity: Number of identical cabinets on the quote line
        price_list: Price list generation settings (optional)
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetConfig
    rates: RatesConfig | None = None
    settings: list[dict[str, Any]] | dict[str, Any] | None = None
    door: DoorConfig = Field(default_factory=DoorConfig)
    hardware: HardwareConfig | None = None
    quantity: int = Field(default=1, ge=1)
    price_list: PriceListConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @model_validator(mode="after")
    def validate_rates_source(self) -> "PricingConfiguration":
        """Rates come from exactly one of rates or settings."""
        if self.rates is not None and self.settings is not None:
            raise ValueError("Give either rates or settings, not both")
        return self

"""Adapter for the door-style and cabinet-type catalog.

Catalog rows are modelled with Pydantic so they can be read straight from JSON
configuration or API payloads. The functions here resolve a customer's
selections into the value objects the price engine consumes. Any absent
selection, missing rate or inactive entry resolves to a zero rate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from cabinet_pricing.domain import (
    CabinetCategory,
    CabinetSpec,
    DoorRateComponents,
    RateSettings,
)

from .settings import HardwarePricingSettings

logger = logging.getLogger(__name__)

DEFAULT_HEIGHT_MM = 720.0
DEFAULT_DEPTH_MM = 560.0
DEFAULT_BACKS_QTY = 1
DEFAULT_BOTTOMS_QTY = 1
DEFAULT_SIDES_QTY = 2

# Share of the panel rate charged as door carcass material when a caller
# opts in to the surcharge.
CARCASS_MATERIAL_FRACTION = 0.2


class _CatalogModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class DoorStyle(_CatalogModel):
    """A door style (e.g. Shaker) with its base rate per m2."""

    name: str
    base_rate_per_sqm: float | None = Field(default=None, ge=0)
    active: bool = True


class Finish(_CatalogModel):
    """A door finish with its rate per m2."""

    name: str
    rate_per_sqm: float | None = Field(default=None, ge=0)
    active: bool = True


class Color(_CatalogModel):
    """A door colour with its surcharge per m2."""

    name: str
    surcharge_rate_per_sqm: float | None = Field(default=None, ge=0)
    active: bool = True


class CabinetType(_CatalogModel):
    """A cabinet product as configured by the admin.

    Quantities left unset fall back to the standard carcass: one back, one
    bottom, two sides and no doors.
    """

    name: str
    category: CabinetCategory = CabinetCategory.OTHER
    door_count: int | None = Field(default=None, ge=0)
    door_qty: int | None = Field(default=None, ge=0)
    backs_qty: int | None = Field(default=None, ge=0)
    bottoms_qty: int | None = Field(default=None, ge=0)
    sides_qty: int | None = Field(default=None, ge=0)
    default_width_mm: float | None = Field(default=None, ge=0)
    default_height_mm: float | None = Field(default=None, ge=0)
    default_depth_mm: float | None = Field(default=None, ge=0)

    @property
    def effective_door_qty(self) -> int:
        return self.door_qty or self.door_count or 0


def _active_rate(entry: DoorStyle | Finish | Color | None, rate: float | None) -> float:
    if entry is None or not entry.active or rate is None:
        return 0.0
    return float(rate)


def resolve_door_rates(
    door_style: DoorStyle | None = None,
    finish: Finish | None = None,
    color: Color | None = None,
    carcass_material_rate: float = 0.0,
) -> DoorRateComponents:
    """Resolve door selections into rate addends.

    Args:
        door_style: Selected door style, if any.
        finish: Selected finish, if any.
        color: Selected colour, if any.
        carcass_material_rate: Explicit carcass material addend. Use
            carcass_material_surcharge() to derive it from the panel rate.

    Returns:
        DoorRateComponents with 0 for every absent selection.
    """
    return DoorRateComponents(
        door_style_rate=_active_rate(
            door_style, door_style.base_rate_per_sqm if door_style else None
        ),
        finish_rate=_active_rate(finish, finish.rate_per_sqm if finish else None),
        color_surcharge_rate=_active_rate(
            color, color.surcharge_rate_per_sqm if color else None
        ),
        carcass_material_rate=carcass_material_rate,
    )


def carcass_material_surcharge(
    rates: RateSettings, fraction: float = CARCASS_MATERIAL_FRACTION
) -> float:
    """Door carcass material rate as a share of the panel rate."""
    return rates.panel_rate_per_sqm * fraction


def cabinet_spec_for(
    cabinet_type: CabinetType,
    width_mm: float | None = None,
    height_mm: float | None = None,
    depth_mm: float | None = None,
) -> CabinetSpec:
    """Build the CabinetSpec for a cabinet type at a given size.

    Dimensions not given fall back to the type's defaults, then to 720mm high
    and 560mm deep.

    Raises:
        ValueError: If no width is given and the type has no default width.
    """
    if width_mm is None:
        width_mm = cabinet_type.default_width_mm
    if width_mm is None:
        raise ValueError(f"No width given for cabinet type {cabinet_type.name!r}")
    if height_mm is None:
        height_mm = cabinet_type.default_height_mm or DEFAULT_HEIGHT_MM
    if depth_mm is None:
        depth_mm = cabinet_type.default_depth_mm or DEFAULT_DEPTH_MM

    return CabinetSpec(
        width_mm=width_mm,
        height_mm=height_mm,
        depth_mm=depth_mm,
        back_panel_qty=cabinet_type.backs_qty or DEFAULT_BACKS_QTY,
        bottom_panel_qty=cabinet_type.bottoms_qty or DEFAULT_BOTTOMS_QTY,
        side_panel_qty=cabinet_type.sides_qty or DEFAULT_SIDES_QTY,
        door_qty=cabinet_type.effective_door_qty,
    )


# --- Hardware sets ---


class HardwareSetItem(_CatalogModel):
    """One product inside a hardware set."""

    product_name: str
    cost_per_unit: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=1, ge=0)


class HardwareSet(_CatalogModel):
    """A brand's bundle of hinges or runners."""

    set_name: str
    brand_name: str = ""
    category: str = ""
    items: list[HardwareSetItem] = Field(default_factory=list)

    @property
    def base_cost(self) -> float:
        return sum(item.cost_per_unit * item.quantity for item in self.items)


@dataclass(frozen=True)
class HardwarePricing:
    """Priced hardware set.

    final_cost is the amount to put into RateSettings.hardware_base_cost.
    """

    set_name: str
    brand_name: str
    quantity: int
    markup_percentage: float
    discount_percentage: float
    base_cost: float
    marked_up_cost: float
    final_cost: float


def price_hardware_set(
    hardware_set: HardwareSet,
    pricing: HardwarePricingSettings | None = None,
    quantity: int = 1,
) -> HardwarePricing:
    """Apply markup then discount to a hardware set's cost.

    Raises:
        ValueError: If quantity or either percentage is negative, or the
            discount is over 100%.
    """
    pricing = pricing or HardwarePricingSettings()
    if quantity < 0:
        raise ValueError("Hardware quantity cannot be negative")
    if pricing.markup_percentage < 0 or pricing.discount_percentage < 0:
        raise ValueError("Hardware markup and discount cannot be negative")
    if pricing.discount_percentage > 100:
        raise ValueError("Hardware discount cannot exceed 100%")

    base = hardware_set.base_cost
    marked_up = base * (1 + pricing.markup_percentage / 100)
    final = marked_up * (1 - pricing.discount_percentage / 100)
    logger.debug(
        "Hardware set %s: base=%.2f marked_up=%.2f final=%.2f x%d",
        hardware_set.set_name,
        base,
        marked_up,
        final,
        quantity,
    )
    return HardwarePricing(
        set_name=hardware_set.set_name,
        brand_name=hardware_set.brand_name,
        quantity=quantity,
        markup_percentage=pricing.markup_percentage,
        discount_percentage=pricing.discount_percentage,
        base_cost=base * quantity,
        marked_up_cost=marked_up * quantity,
        final_cost=final * quantity,
    )

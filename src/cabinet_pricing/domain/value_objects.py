"""Value objects for the cabinet pricing domain.

All dimensions are in millimeters and all rates are in currency units. Every
value object here is a frozen snapshot: a price is always computed against the
exact inputs it was handed, never against shared mutable state.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class CabinetCategory(str, Enum):
    """Broad cabinet families used to pick default price brackets."""

    BASE = "base"
    WALL = "wall"
    TALL = "tall"
    PANTRY = "pantry"
    OTHER = "other"


@dataclass(frozen=True)
class CabinetSpec:
    """Physical composition of one cabinet at a single size point.

    Attributes:
        width_mm: Cabinet width in millimeters.
        height_mm: Cabinet height in millimeters.
        depth_mm: Cabinet depth in millimeters.
        back_panel_qty: Number of back panels (width x height).
        bottom_panel_qty: Number of bottom panels (width x depth).
        side_panel_qty: Number of side panels (depth x height).
        door_qty: Number of doors (width x height). Zero means no door cost.
    """

    width_mm: float
    height_mm: float
    depth_mm: float
    back_panel_qty: int = 1
    bottom_panel_qty: int = 1
    side_panel_qty: int = 2
    door_qty: int = 0

    @property
    def width_m(self) -> float:
        return self.width_mm / 1000

    @property
    def height_m(self) -> float:
        return self.height_mm / 1000

    @property
    def depth_m(self) -> float:
        return self.depth_mm / 1000


@dataclass(frozen=True)
class RateSettings:
    """Global pricing parameters, as held by the admin settings store.

    Attributes:
        panel_rate_per_sqm: Carcass board rate applied to back/bottom/side area.
        hardware_base_cost: Flat hardware amount added once per cabinet.
        wastage_factor: Fractional markup on the subtotal (0.05 = 5%).
        tax_rate: Fractional tax applied after wastage (0.10 = 10% GST).
    """

    panel_rate_per_sqm: float = 0.0
    hardware_base_cost: float = 0.0
    wastage_factor: float = 0.0
    tax_rate: float = 0.0


@dataclass(frozen=True)
class DoorRateComponents:
    """Per square meter door rate split into its catalog addends.

    Each addend is 0 when the matching selection is absent. The carcass
    material rate is an explicit opt-in addend; it is never derived here.
    """

    door_style_rate: float = 0.0
    finish_rate: float = 0.0
    color_surcharge_rate: float = 0.0
    carcass_material_rate: float = 0.0

    @classmethod
    def from_total(cls, total_rate: float) -> "DoorRateComponents":
        """Wrap an already flattened door rate."""
        return cls(door_style_rate=total_rate)

    @property
    def total_door_rate(self) -> float:
        return (
            self.door_style_rate
            + self.finish_rate
            + self.color_surcharge_rate
            + self.carcass_material_rate
        )


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized result of a pricing request.

    Values are unrounded; rounding and currency formatting belong to the
    presentation layer.
    """

    back_cost: float
    bottom_cost: float
    side_cost: float
    door_cost: float
    hardware_cost: float
    total_door_rate: float
    subtotal: float
    subtotal_with_wastage: float
    total: float

    @property
    def carcass_cost(self) -> float:
        """Back, bottom and side panel cost combined."""
        return self.back_cost + self.bottom_cost + self.side_cost

    @property
    def wastage_amount(self) -> float:
        return self.subtotal_with_wastage - self.subtotal

    @property
    def tax_amount(self) -> float:
        return self.total - self.subtotal_with_wastage

    def to_dict(self) -> dict[str, Any]:
        """Serialize the breakdown including the derived amounts."""
        data = asdict(self)
        data["carcass_cost"] = self.carcass_cost
        data["wastage_amount"] = self.wastage_amount
        data["tax_amount"] = self.tax_amount
        return data

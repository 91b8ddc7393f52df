"""Cabinet price engine.

Turns a cabinet's part quantities, its dimensions and a snapshot of rate
settings into an itemized price. The computation is a pure function: no I/O,
no logging and no state is kept between calls.

Cost lines, in the order they are computed and summed:

    back     = (width x height) * back_qty   * panel_rate
    bottom   = (width x depth)  * bottom_qty * panel_rate
    side     = (depth x height) * side_qty   * panel_rate
    door     = (width x height) * door_qty   * total_door_rate
    hardware = hardware_base_cost

Areas are in square meters. Wastage is applied to the subtotal and tax is
applied to the wastage-inflated subtotal, so the multipliers compound.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real

from ..exceptions import InvalidInput
from ..value_objects import (
    CabinetSpec,
    DoorRateComponents,
    PriceBreakdown,
    RateSettings,
)


DIMENSION_FIELDS = ("width_mm", "height_mm", "depth_mm")
QUANTITY_FIELDS = ("back_panel_qty", "bottom_panel_qty", "side_panel_qty", "door_qty")
RATE_FIELDS = ("panel_rate_per_sqm", "hardware_base_cost", "wastage_factor", "tax_rate")
DOOR_RATE_FIELDS = (
    "door_style_rate",
    "finish_rate",
    "color_surcharge_rate",
    "carcass_material_rate",
)


def _amount_error(field: str, value: object) -> InvalidInput | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return InvalidInput(field, value, "must be a number")
    try:
        as_float = float(value)
    except OverflowError:
        return InvalidInput(field, value, "is too large")
    if not math.isfinite(as_float):
        return InvalidInput(field, value, "must be finite")
    if as_float < 0:
        return InvalidInput(field, value, "cannot be negative")
    return None


def _quantity_error(field: str, value: object) -> InvalidInput | None:
    error = _amount_error(field, value)
    if error is None and value != int(value):
        error = InvalidInput(field, value, "must be a whole number")
    return error


def iter_input_errors(
    spec: CabinetSpec,
    rates: RateSettings,
    door_rates: DoorRateComponents,
) -> Iterator[InvalidInput]:
    """Yield an InvalidInput for every bad field, in documented field order."""
    checks = (
        [(_amount_error, spec, name) for name in DIMENSION_FIELDS]
        + [(_quantity_error, spec, name) for name in QUANTITY_FIELDS]
        + [(_amount_error, rates, name) for name in RATE_FIELDS]
        + [(_amount_error, door_rates, name) for name in DOOR_RATE_FIELDS]
    )
    for check, source, name in checks:
        error = check(name, getattr(source, name))
        if error is not None:
            yield error


def validate_inputs(
    spec: CabinetSpec,
    rates: RateSettings,
    door_rates: DoorRateComponents,
) -> None:
    """Reject negative, non-finite or non-numeric inputs.

    Zero is always accepted. Raises InvalidInput naming the first bad field.
    """
    for error in iter_input_errors(spec, rates, door_rates):
        raise error


def compute_price(
    spec: CabinetSpec,
    rates: RateSettings,
    door_rates: DoorRateComponents | None = None,
) -> PriceBreakdown:
    """Price one cabinet at one size point.

    Args:
        spec: Cabinet dimensions and part quantities.
        rates: Rate settings snapshot.
        door_rates: Resolved door rate addends. None prices doors at 0/m2.

    Returns:
        A PriceBreakdown with every cost line populated and nothing rounded.

    Raises:
        InvalidInput: If any dimension, quantity or rate is negative or not
            a finite number. Raised before any cost line is computed.
    """
    if door_rates is None:
        door_rates = DoorRateComponents()
    validate_inputs(spec, rates, door_rates)

    width_m, height_m, depth_m = spec.width_m, spec.height_m, spec.depth_m

    back_cost = (width_m * height_m) * spec.back_panel_qty * rates.panel_rate_per_sqm
    bottom_cost = (width_m * depth_m) * spec.bottom_panel_qty * rates.panel_rate_per_sqm
    side_cost = (depth_m * height_m) * spec.side_panel_qty * rates.panel_rate_per_sqm
    total_door_rate = door_rates.total_door_rate
    door_cost = (width_m * height_m) * spec.door_qty * total_door_rate
    hardware_cost = rates.hardware_base_cost

    subtotal = back_cost + bottom_cost + side_cost + door_cost + hardware_cost
    subtotal_with_wastage = subtotal * (1 + rates.wastage_factor)
    total = subtotal_with_wastage * (1 + rates.tax_rate)

    # Huge but finite inputs can still overflow.
    if not math.isfinite(total):
        raise InvalidInput("total", total, "price overflowed")

    return PriceBreakdown(
        back_cost=back_cost,
        bottom_cost=bottom_cost,
        side_cost=side_cost,
        door_cost=door_cost,
        hardware_cost=hardware_cost,
        total_door_rate=total_door_rate,
        subtotal=subtotal,
        subtotal_with_wastage=subtotal_with_wastage,
        total=total,
    )


def compute_line_total(total: float, quantity: int) -> float:
    """Price quantity identical cabinets at total each.

    Raises:
        InvalidInput: If the line total does not fit in a float.
    """
    try:
        line_total = total * quantity
    except OverflowError:
        line_total = math.inf
    if not math.isfinite(line_total):
        raise InvalidInput("quantity", quantity, "overflows the line total")
    return line_total

class PriceEngine:
    """Injectable wrapper around compute_price for application commands."""

    def compute(
        self,
        spec: CabinetSpec,
        rates: RateSettings,
        door_rates: DoorRateComponents | None = None,
    ) -> PriceBreakdown:
        return compute_price(spec, rates, door_rates)

"""Conversion from configuration models to pricing domain objects."""

from __future__ import annotations

import logging

from cabinet_pricing.application.catalog import (
    CabinetType,
    cabinet_spec_for,
    carcass_material_surcharge,
    price_hardware_set,
    resolve_door_rates,
)
from cabinet_pricing.application.settings import (
    HardwarePricingSettings,
    parse_hardware_pricing,
    parse_rate_settings,
)
from cabinet_pricing.domain import (
    CabinetSpec,
    DoorRateComponents,
    PriceBracket,
    RateSettings,
    default_brackets,
)

from .schema import CabinetConfig, DoorConfig, PricingConfiguration

logger = logging.getLogger(__name__)


def config_to_cabinet_spec(
    cabinet: CabinetConfig, width_mm: float | None = None
) -> CabinetSpec:
    """Build the CabinetSpec for a cabinet config.

    Args:
        cabinet: Cabinet configuration.
        width_mm: Width override, used when pricing price-list brackets.
    """
    width = width_mm if width_mm is not None else cabinet.width_mm
    if cabinet.cabinet_type is not None:
        base = cabinet_spec_for(
            cabinet.cabinet_type, width, cabinet.height_mm, cabinet.depth_mm
        )
    else:
        base = CabinetSpec(
            width_mm=width,
            height_mm=cabinet.height_mm,
            depth_mm=cabinet.depth_mm,
        )

    return CabinetSpec(
        width_mm=base.width_mm,
        height_mm=base.height_mm,
        depth_mm=base.depth_mm,
        back_panel_qty=_pick(cabinet.back_panel_qty, base.back_panel_qty),
        bottom_panel_qty=_pick(cabinet.bottom_panel_qty, base.bottom_panel_qty),
        side_panel_qty=_pick(cabinet.side_panel_qty, base.side_panel_qty),
        door_qty=_pick(cabinet.door_qty, base.door_qty),
    )


def _pick(explicit: int | None, fallback: int) -> int:
    return fallback if explicit is None else explicit


def config_to_hardware_pricing(config: PricingConfiguration) -> HardwarePricingSettings:
    """Markup/discount from the hardware block, then settings, then defaults."""
    from_settings = (
        parse_hardware_pricing(config.settings)
        if config.settings is not None
        else HardwarePricingSettings()
    )
    hardware = config.hardware
    if hardware is None:
        return from_settings
    return HardwarePricingSettings(
        markup_percentage=(
            hardware.markup_percentage
            if hardware.markup_percentage is not None
            else from_settings.markup_percentage
        ),
        discount_percentage=(
            hardware.discount_percentage
            if hardware.discount_percentage is not None
            else from_settings.discount_percentage
        ),
    )


def config_to_rate_settings(config: PricingConfiguration) -> RateSettings:
    """Build the RateSettings snapshot for a configuration.

    A configured hardware set replaces hardware_base_cost with the set's
    marked-up, discounted cost for one cabinet.
    """
    if config.rates is not None:
        rates = RateSettings(**config.rates.model_dump())
    elif config.settings is not None:
        rates = parse_rate_settings(config.settings)
    else:
        rates = RateSettings()

    if config.hardware is not None:
        priced = price_hardware_set(
            config.hardware.hardware_set, config_to_hardware_pricing(config)
        )
        logger.debug(
            "Hardware set %r replaces hardware_base_cost %.2f with %.2f",
            priced.set_name,
            rates.hardware_base_cost,
            priced.final_cost,
        )
        rates = RateSettings(
            panel_rate_per_sqm=rates.panel_rate_per_sqm,
            hardware_base_cost=priced.final_cost,
            wastage_factor=rates.wastage_factor,
            tax_rate=rates.tax_rate,
        )
    return rates


def config_to_door_rates(door: DoorConfig, rates: RateSettings) -> DoorRateComponents:
    """Resolve door selections, adding the carcass surcharge only when opted in."""
    carcass_rate = (
        carcass_material_surcharge(rates, door.carcass_material_fraction)
        if door.include_carcass_material
        else 0.0
    )
    if door.total_rate is not None:
        return DoorRateComponents(
            door_style_rate=door.total_rate,
            carcass_material_rate=carcass_rate,
        )
    return resolve_door_rates(
        door_style=door.door_style,
        finish=door.finish,
        color=door.color,
        carcass_material_rate=carcass_rate,
    )


def config_to_brackets(config: PricingConfiguration) -> list[PriceBracket]:
    """Explicit brackets, or the built-in set for the cabinet type."""
    price_list = config.price_list
    if price_list is not None and price_list.brackets:
        return [
            PriceBracket(
                label=bracket.label
                or f"{bracket.min_width_mm:g}-{bracket.max_width_mm:g}mm",
                min_width_mm=bracket.min_width_mm,
                max_width_mm=bracket.max_width_mm,
            )
            for bracket in price_list.brackets
        ]
    cabinet_type: CabinetType | None = config.cabinet.cabinet_type
    if cabinet_type is None:
        return list(default_brackets("", ""))
    return list(default_brackets(cabinet_type.category, cabinet_type.name))


def config_to_door_options(config: PricingConfiguration) -> list[tuple[str, DoorConfig]]:
    """Price-list columns: configured options, or the quote's own door."""
    price_list = config.price_list
    if price_list is not None and price_list.door_options:
        return [(option.label, option.door) for option in price_list.door_options]
    return [(_door_label(config.door), config.door)]


def _door_label(door: DoorConfig) -> str:
    names = [
        entry.name
        for entry in (door.door_style, door.finish, door.color)
        if entry is not None
    ]
    return " / ".join(names) if names else "Price"

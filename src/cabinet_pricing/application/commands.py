"""Application commands (use cases) for pricing."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cabinet_pricing.domain import (
    DoorRateComponents,
    PriceBracket,
    PriceEngine,
    RateSettings,
    WidthPolicy,
    compute_line_total,
)

from .config.adapter import (
    config_to_brackets,
    config_to_cabinet_spec,
    config_to_door_options,
    config_to_door_rates,
    config_to_rate_settings,
)
from .config.schema import CabinetConfig, PricingConfiguration
from .dtos import PriceListOutput, PriceListRow, QuoteOutput

logger = logging.getLogger(__name__)


class QuoteCommand:
    """Price the cabinet described by a configuration."""

    def __init__(self, engine: PriceEngine | None = None) -> None:
        self.engine = engine or PriceEngine()

    def execute(self, config: PricingConfiguration) -> QuoteOutput:
        """Execute the quote.

        Raises:
            InvalidInput: If the configuration resolves to a negative or
                non-finite pricing input, or the quantity overflows the
                line total.
            ValueError: If a catalog cabinet type has no usable width.
        """
        spec = config_to_cabinet_spec(config.cabinet)
        rates = config_to_rate_settings(config)
        door_rates = config_to_door_rates(config.door, rates)

        logger.debug(
            "Pricing %gx%gx%gmm cabinet with door rate %g/m2",
            spec.width_mm,
            spec.height_mm,
            spec.depth_mm,
            door_rates.total_door_rate,
        )
        breakdown = self.engine.compute(spec, rates, door_rates)
        line_total = compute_line_total(breakdown.total, config.quantity)
        output = QuoteOutput(
            spec=spec,
            rates=rates,
            door_rates=door_rates,
            breakdown=breakdown,
            quantity=config.quantity,
        )
        logger.info(
            "Quoted %d cabinet(s) at %.2f each, line total %.2f",
            output.quantity,
            breakdown.total,
            line_total,
        )
        return output


class PriceListCommand:
    """Generate a price table over width brackets and door options.

    The width priced inside each bracket is set by the caller's WidthPolicy.
    """

    def __init__(self, engine: PriceEngine | None = None) -> None:
        self.engine = engine or PriceEngine()

    def execute(
        self,
        config: PricingConfiguration,
        policy: WidthPolicy | None = None,
    ) -> PriceListOutput:
        """Build the price list for a configuration.

        Args:
            config: Pricing configuration. Brackets and door options come from
                its price_list block, falling back to the built-in brackets and
                the quote's own door selection.
            policy: Width policy. Overrides price_list.policy when given.

        Raises:
            ValueError: If no policy is given and the configuration has none.
            InvalidInput: If any bracket resolves to an invalid pricing input.
        """
        if policy is None:
            if config.price_list is None:
                raise ValueError(
                    "A width policy is required: set price_list.policy or pass one"
                )
            policy = config.price_list.policy

        rates = config_to_rate_settings(config)
        options = [
            (label, config_to_door_rates(door, rates))
            for label, door in config_to_door_options(config)
        ]
        return self.price_brackets(
            config.cabinet,
            config_to_brackets(config),
            policy,
            rates,
            options,
        )

    def price_brackets(
        self,
        cabinet: CabinetConfig,
        brackets: Sequence[PriceBracket],
        policy: WidthPolicy,
        rates: RateSettings,
        door_options: Sequence[tuple[str, DoorRateComponents]],
    ) -> PriceListOutput:
        """Price every bracket against every door option."""
        name = cabinet.cabinet_type.name if cabinet.cabinet_type else "Cabinet"
        output = PriceListOutput(
            cabinet_name=name,
            policy=policy,
            columns=[label for label, _ in door_options],
        )
        for bracket in brackets:
            width = bracket.width_for(policy)
            spec = config_to_cabinet_spec(cabinet, width)
            breakdowns = tuple(
                self.engine.compute(spec, rates, door_rates)
                for _, door_rates in door_options
            )
            output.rows.append(
                PriceListRow(label=bracket.label, width_mm=width, breakdowns=breakdowns)
            )
            logger.debug("Bracket %s priced at width %gmm", bracket.label, width)

        logger.info(
            "Generated price list for %s: %d bracket(s) x %d option(s), policy=%s",
            name,
            len(output.rows),
            len(output.columns),
            policy.value,
        )
        return output

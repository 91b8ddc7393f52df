"""Text formatters for price breakdowns and price lists.

This is the only place prices are rounded.
"""

from __future__ import annotations

from cabinet_pricing.application.dtos import PriceListOutput, QuoteOutput
from cabinet_pricing.domain import PriceBreakdown

CURRENCY_SYMBOLS: dict[str, str] = {
    "AUD": "$",
    "NZD": "$",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_price(amount: float, currency: str = "AUD", decimals: int = 2) -> str:
    """Format an amount for display, e.g. ``$1,234.56``.

    Examples:
        >>> format_price(1234.5)
        '$1,234.50'
        >>> format_price(-12)
        '-$12.00'
        >>> format_price(2092.167, decimals=0)
        '$2,092'
    """
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    rounded = round(amount, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


class BreakdownFormatter:
    """Formats a price breakdown as an itemized table."""

    def __init__(self, currency: str = "AUD") -> None:
        self._currency = currency

    def _price(self, amount: float) -> str:
        return format_price(amount, self._currency)

    def format(self, breakdown: PriceBreakdown) -> str:
        lines = [
            "PRICE BREAKDOWN",
            "=" * 40,
            f"{'Back panels':<24} {self._price(breakdown.back_cost):>15}",
            f"{'Bottom panels':<24} {self._price(breakdown.bottom_cost):>15}",
            f"{'Side panels':<24} {self._price(breakdown.side_cost):>15}",
            f"{'Doors':<24} {self._price(breakdown.door_cost):>15}",
            f"{'Hardware':<24} {self._price(breakdown.hardware_cost):>15}",
            "-" * 40,
            f"{'Subtotal':<24} {self._price(breakdown.subtotal):>15}",
            f"{'Wastage':<24} {self._price(breakdown.wastage_amount):>15}",
            f"{'Tax':<24} {self._price(breakdown.tax_amount):>15}",
            "=" * 40,
            f"{'TOTAL':<24} {self._price(breakdown.total):>15}",
        ]
        return "\n".join(lines)

    def format_quote(self, quote: QuoteOutput) -> str:
        """Format a quote: dimensions, door rate, breakdown and line total."""
        spec = quote.spec
        lines = [
            f"Cabinet: {spec.width_mm:g} x {spec.height_mm:g} x {spec.depth_mm:g} mm "
            f"(W x H x D)",
            f"Parts: {spec.back_panel_qty} back, {spec.bottom_panel_qty} bottom, "
            f"{spec.side_panel_qty} side, {spec.door_qty} door",
            f"Door rate: {self._price(quote.door_rates.total_door_rate)}/m2",
            "",
            self.format(quote.breakdown),
        ]
        if quote.quantity != 1:
            lines.append(
                f"{f'LINE TOTAL (x{quote.quantity})':<24} "
                f"{self._price(quote.line_total):>15}"
            )
        return "\n".join(lines)


class PriceListFormatter:
    """Formats a price list as a text table."""

    def __init__(self, currency: str = "AUD", decimals: int = 0) -> None:
        self._currency = currency
        self._decimals = decimals

    def format(self, output: PriceListOutput) -> str:
        if not output.rows:
            return "No brackets in price list."

        label_width = max(len("Size"), *(len(row.label) for row in output.rows)) + 2
        column_width = max(12, *(len(column) + 2 for column in output.columns))
        header = f"{'Size':<{label_width}}" + "".join(
            f"{column:>{column_width}}" for column in output.columns
        )
        rule_width = len(header)
        lines = [
            f"PRICE LIST: {output.cabinet_name} (width policy: {output.policy.value})",
            "=" * rule_width,
            header,
            "-" * rule_width,
        ]
        for row in output.rows:
            cells = "".join(
                f"{format_price(price, self._currency, self._decimals):>{column_width}}"
                for price in row.prices
            )
            lines.append(f"{row.label:<{label_width}}{cells}")
        return "\n".join(lines)

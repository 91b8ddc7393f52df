"""Data transfer objects returned by application commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from cabinet_pricing.domain import (
    CabinetSpec,
    DoorRateComponents,
    PriceBreakdown,
    RateSettings,
    WidthPolicy,
)


@dataclass(frozen=True)
class QuoteOutput:
    """A priced quote line: one cabinet breakdown times a quantity."""

    spec: CabinetSpec
    rates: RateSettings
    door_rates: DoorRateComponents
    breakdown: PriceBreakdown
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.breakdown.total * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "spec": asdict(self.spec),
            "rates": asdict(self.rates),
            "door_rates": {
                **asdict(self.door_rates),
                "total_door_rate": self.door_rates.total_door_rate,
            },
            "breakdown": self.breakdown.to_dict(),
            "quantity": self.quantity,
            "line_total": self.line_total,
        }


@dataclass(frozen=True)
class PriceListRow:
    """One bracket of a price list with a breakdown per door option."""

    label: str
    width_mm: float
    breakdowns: tuple[PriceBreakdown, ...]

    @property
    def prices(self) -> list[float]:
        return [breakdown.total for breakdown in self.breakdowns]


@dataclass
class PriceListOutput:
    """A price table: brackets down, door options across."""

    cabinet_name: str
    policy: WidthPolicy
    columns: list[str]
    rows: list[PriceListRow] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cabinet_name": self.cabinet_name,
            "policy": self.policy.value,
            "columns": list(self.columns),
            "rows": [
                {"label": row.label, "width_mm": row.width_mm, "prices": row.prices}
                for row in self.rows
            ],
        }

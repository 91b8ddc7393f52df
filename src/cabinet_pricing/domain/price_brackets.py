"""Price brackets for published price lists.

A price list publishes one price per width bracket (e.g. "750-799mm"). Which
width inside the bracket gets priced is a caller decision: there is no default
WidthPolicy, every caller has to pick one.
"""

from dataclasses import dataclass
from enum import Enum

from .value_objects import CabinetCategory


class WidthPolicy(str, Enum):
    """Which width inside a bracket is priced.

    Attributes:
        MINIMUM: Price the narrowest cabinet in the bracket.
        MAXIMUM: Price the widest cabinet in the bracket.
        MIDPOINT: Price the arithmetic mean of both bounds.
    """

    MINIMUM = "min"
    MAXIMUM = "max"
    MIDPOINT = "midpoint"


@dataclass(frozen=True)
class PriceBracket:
    """A named interval of cabinet widths in millimeters."""

    label: str
    min_width_mm: float
    max_width_mm: float

    def __post_init__(self) -> None:
        if self.min_width_mm < 0 or self.max_width_mm < 0:
            raise ValueError("Bracket widths cannot be negative")
        if self.min_width_mm > self.max_width_mm:
            raise ValueError(
                f"Bracket {self.label!r}: min width {self.min_width_mm} "
                f"exceeds max width {self.max_width_mm}"
            )

    def contains(self, width_mm: float) -> bool:
        return self.min_width_mm <= width_mm <= self.max_width_mm

    def width_for(self, policy: WidthPolicy) -> float:
        """Return the width to price for this bracket under a policy."""
        if policy is WidthPolicy.MINIMUM:
            return self.min_width_mm
        if policy is WidthPolicy.MAXIMUM:
            return self.max_width_mm
        if policy is WidthPolicy.MIDPOINT:
            return (self.min_width_mm + self.max_width_mm) / 2
        raise ValueError(f"Unknown width policy: {policy!r}")


def _brackets(*ranges: tuple[int, int]) -> tuple[PriceBracket, ...]:
    result = []
    for low, high in ranges:
        label = f"{low}mm" if low == high else f"{low}-{high}mm"
        result.append(PriceBracket(label, low, high))
    return tuple(result)


BASE_ONE_DOOR_BRACKETS = _brackets(
    (150, 199),
    (200, 249),
    (250, 299),
    (300, 349),
    (350, 399),
    (400, 449),
    (450, 499),
    (500, 549),
    (550, 599),
    (600, 600),
)

BASE_TWO_DOOR_BRACKETS = _brackets(
    (400, 449),
    (450, 499),
    (500, 549),
    (600, 649),
    (700, 749),
    (800, 849),
    (900, 949),
    (1000, 1049),
    (1200, 1200),
)

BASE_DRAWER_BRACKETS = _brackets((600, 800), (800, 1000), (1000, 1200))

DEFAULT_BRACKETS = _brackets((300, 600), (600, 900), (900, 1200))


def default_brackets(
    category: CabinetCategory | str, name: str
) -> tuple[PriceBracket, ...]:
    """Pick the built-in bracket set for a cabinet type.

    Only base cabinets have dedicated sets, keyed off the type name; every
    other cabinet gets the generic 300-1200mm set. category is either a
    CabinetCategory or its string value, in any case.
    """
    if isinstance(category, CabinetCategory):
        category = category.value
    if category.lower() == CabinetCategory.BASE.value:
        lowered = name.lower()
        if "1 door" in lowered or "1door" in lowered:
            return BASE_ONE_DOOR_BRACKETS
        if "2 door" in lowered or "2door" in lowered:
            return BASE_TWO_DOOR_BRACKETS
        if "drawer" in lowered:
            return BASE_DRAWER_BRACKETS
    return DEFAULT_BRACKETS

"""Domain services."""

from .price_engine import (
    PriceEngine,
    compute_line_total,
    compute_price,
    iter_input_errors,
    validate_inputs,
)

__all__ = [
    "PriceEngine",
    "compute_line_total",
    "compute_price",
    "iter_input_errors",
    "validate_inputs",
]

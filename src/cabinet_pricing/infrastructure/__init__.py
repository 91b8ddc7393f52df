"""Infrastructure layer - presentation, export and logging."""

from .exporters import (
    CsvPriceListExporter,
    ExporterRegistry,
    JsonPriceListExporter,
    PriceListExporter,
    TextPriceListExporter,
)
from .formatters import BreakdownFormatter, PriceListFormatter, format_price
from .logging_config import JSONFormatter, setup_logging

__all__ = [
    "BreakdownFormatter",
    "CsvPriceListExporter",
    "ExporterRegistry",
    "JSONFormatter",
    "JsonPriceListExporter",
    "PriceListExporter",
    "PriceListFormatter",
    "TextPriceListExporter",
    "format_price",
    "setup_logging",
]

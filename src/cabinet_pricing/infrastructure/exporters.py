"""Price list exporters with a format registry.

Exporters turn a PriceListOutput into text, CSV or JSON. Each registers itself
under its format name so the CLI and REST API can look formats up by name.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from cabinet_pricing.application.dtos import PriceListOutput

from .formatters import PriceListFormatter

logger = logging.getLogger(__name__)


@runtime_checkable
class PriceListExporter(Protocol):
    """Protocol for price list exporters.

    Attributes:
        format_name: Registry name of the format (e.g., "csv").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: PriceListOutput) -> str: ...

    def export(self, output: PriceListOutput, path: Path) -> None: ...


class ExporterRegistry:
    """Registry of price list exporter classes, keyed by format name."""

    _exporters: ClassVar[dict[str, type[PriceListExporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator registering an exporter class under format_name."""

        def decorator(exporter_class: type[PriceListExporter]) -> type[PriceListExporter]:
            if format_name in cls._exporters:
                logger.warning("Overwriting existing exporter for format '%s'", format_name)
            cls._exporters[format_name] = exporter_class
            logger.debug("Registered exporter '%s': %s", format_name, exporter_class.__name__)
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[PriceListExporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())


class _FileExporter(ABC):
    """Base for exporters whose file content is their string export."""

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: PriceListOutput) -> str:
        """Render the price list in this format."""

    def export(self, output: PriceListOutput, path: Path) -> None:
        """Write the exported price list to path."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported %s price list to %s", self.format_name, path)


@ExporterRegistry.register("text")
class TextPriceListExporter(_FileExporter):
    """Plain text table, rounded to whole currency units."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"

    def __init__(self, currency: str = "AUD") -> None:
        self._formatter = PriceListFormatter(currency=currency)

    def export_string(self, output: PriceListOutput) -> str:
        return self._formatter.format(output) + "\n"


@ExporterRegistry.register("csv")
class CsvPriceListExporter(_FileExporter):
    """CSV with one row per bracket and one price column per door option.

    Prices are written rounded to cents, without currency symbols.
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export_string(self, output: PriceListOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Cabinet", "Size", "Width (mm)", *output.columns])
        for row in output.rows:
            writer.writerow(
                [
                    output.cabinet_name,
                    row.label,
                    f"{row.width_mm:g}",
                    *(f"{price:.2f}" for price in row.prices),
                ]
            )
        return buffer.getvalue()


@ExporterRegistry.register("json")
class JsonPriceListExporter(_FileExporter):
    """Unrounded JSON dump of the price list."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def export_string(self, output: PriceListOutput) -> str:
        return json.dumps(output.to_dict(), indent=2)

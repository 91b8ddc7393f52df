"""Price list command.

Prices every width bracket of a cabinet against each door option and prints
or exports the resulting table.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_pricing.application import PriceListCommand
from cabinet_pricing.application.config import ConfigError, load_config
from cabinet_pricing.domain import WidthPolicy
from cabinet_pricing.infrastructure import ExporterRegistry

from .validate import display_load_error


def price_list_command(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
    policy: Annotated[
        WidthPolicy | None,
        typer.Option(
            "--policy",
            "-p",
            help="Width priced inside each bracket (overrides price_list.policy)",
            case_sensitive=False,
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv or json"),
    ] = "text",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
) -> None:
    """Generate a price list over width brackets.

    The bracket width that gets priced is never assumed: pass --policy or set
    price_list.policy in the configuration.

    Examples:
        cabinet-pricing price-list -c quote.json --policy min
        cabinet-pricing price-list -c quote.json -p max -f csv -o prices.csv
    """
    try:
        exporter_class = ExporterRegistry.get(output_format.lower())
    except KeyError:
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    if policy is None and config.price_list is None:
        typer.echo(
            "Error: No width policy. Pass --policy (min, max or midpoint) "
            "or set price_list.policy in the configuration.",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        result = PriceListCommand().execute(config, policy)
    except ValueError as e:  # includes InvalidInput
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    exporter = exporter_class()
    if output is not None:
        try:
            exporter.export(result, output)
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Created: {output}")
    else:
        typer.echo(exporter.export_string(result), nl=False)

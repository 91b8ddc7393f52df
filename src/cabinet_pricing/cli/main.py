"""Typer CLI for cabinet pricing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from cabinet_pricing.application import QuoteCommand
from cabinet_pricing.application.config import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_pricing.cli.commands import (
    price_list_command,
    validate_command,
)
from cabinet_pricing.cli.commands.validate import display_load_error
from cabinet_pricing.infrastructure import BreakdownFormatter, setup_logging

app = typer.Typer(
    name="cabinet-pricing",
    help="Price cabinet configurations and generate bracketed price lists.",
)

app.command(name="validate")(validate_command)
app.command(name="price-list")(price_list_command)


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
    ] = "WARNING",
    log_json: Annotated[
        bool,
        typer.Option("--log-json", help="Emit log lines as JSON"),
    ] = False,
) -> None:
    """Cabinet pricing tools."""
    setup_logging(log_level, json_output=log_json)


def _merge_cli_overrides(
    base: dict[str, Any],
    cabinet: dict[str, Any],
    rates: dict[str, Any],
    door_rate: float | None,
    quantity: int | None,
) -> dict[str, Any]:
    """Overlay explicit CLI options on a configuration dictionary."""
    data = dict(base)
    data.setdefault("schema_version", "1.0")
    data["cabinet"] = {**data.get("cabinet", {}), **cabinet}

    if rates:
        if data.get("settings") is not None:
            raise typer.BadParameter(
                "Rate options cannot be combined with a configuration that uses settings"
            )
        data["rates"] = {**(data.get("rates") or {}), **rates}
    if door_rate is not None:
        data["door"] = {**(data.get("door") or {}), "total_rate": door_rate}
    if quantity is not None:
        data["quantity"] = quantity
    return data


@app.command()
def quote(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Cabinet width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Cabinet height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Cabinet depth in mm")
    ] = None,
    backs: Annotated[int | None, typer.Option("--backs", help="Back panel quantity")] = None,
    bottoms: Annotated[
        int | None, typer.Option("--bottoms", help="Bottom panel quantity")
    ] = None,
    sides: Annotated[int | None, typer.Option("--sides", help="Side panel quantity")] = None,
    doors: Annotated[int | None, typer.Option("--doors", help="Door quantity")] = None,
    panel_rate: Annotated[
        float | None, typer.Option("--panel-rate", help="Panel rate per m2")
    ] = None,
    hardware: Annotated[
        float | None, typer.Option("--hardware", help="Flat hardware cost per cabinet")
    ] = None,
    wastage: Annotated[
        float | None, typer.Option("--wastage", help="Wastage factor, e.g. 0.05")
    ] = None,
    tax: Annotated[float | None, typer.Option("--tax", help="Tax rate, e.g. 0.1")] = None,
    door_rate: Annotated[
        float | None,
        typer.Option("--door-rate", help="Flattened door rate per m2 (replaces door selections)"),
    ] = None,
    quantity: Annotated[
        int | None, typer.Option("--quantity", "-q", help="Number of cabinets")
    ] = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Price a single cabinet.

    Either load a configuration file, give the cabinet on the command line,
    or both (command line values win).

    Examples:
        cabinet-pricing quote -w 750 -h 720 -d 560 --doors 1 --panel-rate 1000 \\
            --hardware 45 --wastage 0.05 --tax 0.1
        cabinet-pricing quote -c quote.json --width 900 --format json
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    cabinet = {
        key: value
        for key, value in {
            "width_mm": width,
            "height_mm": height,
            "depth_mm": depth,
            "back_panel_qty": backs,
            "bottom_panel_qty": bottoms,
            "side_panel_qty": sides,
            "door_qty": doors,
        }.items()
        if value is not None
    }
    rates = {
        key: value
        for key, value in {
            "panel_rate_per_sqm": panel_rate,
            "hardware_base_cost": hardware,
            "wastage_factor": wastage,
            "tax_rate": tax,
        }.items()
        if value is not None
    }

    try:
        base: dict[str, Any] = {}
        if config_file is not None:
            base = load_config(config_file).model_dump(exclude_none=True)
        config = load_config_from_dict(
            _merge_cli_overrides(base, cabinet, rates, door_rate, quantity)
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        result = QuoteCommand().execute(config)
    except ValueError as e:  # includes InvalidInput
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(BreakdownFormatter().format_quote(result))


if __name__ == "__main__":
    app()

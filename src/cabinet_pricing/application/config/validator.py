"""Validation of pricing configurations beyond the schema.

Errors are inputs the price engine would reject. Warnings are inputs the
engine accepts but that almost certainly do not describe a real quote, such
as a wastage factor entered as a percentage instead of a fraction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cabinet_pricing.application.settings import RATE_SETTING_KEYS, settings_to_map
from cabinet_pricing.domain import (
    CabinetSpec,
    DoorRateComponents,
    InvalidInput,
    RateSettings,
    compute_line_total,
    compute_price,
    iter_input_errors,
)
from cabinet_pricing.domain.services.price_engine import DOOR_RATE_FIELDS, RATE_FIELDS

from .adapter import (
    config_to_brackets,
    config_to_cabinet_spec,
    config_to_door_options,
    config_to_door_rates,
    config_to_rate_settings,
)
from .schema import DoorConfig, PricingConfiguration

# Fractions above this are almost always percentages typed as whole numbers.
PLAUSIBLE_FRACTION_LIMIT = 1.0

# Door rate addend -> field of the door configuration it comes from
DOOR_RATE_PATHS: dict[str, str] = {
    "door_style_rate": "door_style.base_rate_per_sqm",
    "finish_rate": "finish.rate_per_sqm",
    "color_surcharge_rate": "color.surcharge_rate_per_sqm",
    "carcass_material_rate": "carcass_material_fraction",
}


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinet.width_mm")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _rate_path(config: PricingConfiguration, name: str) -> str:
    if name == "hardware_base_cost" and config.hardware is not None:
        return "hardware.hardware_set"
    if config.settings is not None:
        keys = {value: key for key, value in RATE_SETTING_KEYS.items()}
        return f"settings.{keys[name]}"
    return f"rates.{name}"


def _door_path(prefix: str, door: DoorConfig, name: str) -> str:
    if name == "door_style_rate" and door.total_rate is not None:
        return f"{prefix}.total_rate"
    return f"{prefix}.{DOOR_RATE_PATHS[name]}"


def _field_path(config: PricingConfiguration, field_name: str) -> str:
    if field_name in DOOR_RATE_FIELDS:
        return _door_path("door", config.door, field_name)
    if field_name in RATE_FIELDS:
        return _rate_path(config, field_name)
    return f"cabinet.{field_name}"


def _check_plausibility(
    config: PricingConfiguration,
    spec: CabinetSpec,
    rates: RateSettings,
    door_rates: DoorRateComponents,
    result: ValidationResult,
) -> None:
    if rates.wastage_factor > PLAUSIBLE_FRACTION_LIMIT:
        result.add_warning(
            _rate_path(config, "wastage_factor"),
            f"Wastage factor {rates.wastage_factor:g} adds more than 100% to the subtotal",
            "Enter wastage as a fraction, e.g. 0.05 for 5%",
        )
    if rates.tax_rate > PLAUSIBLE_FRACTION_LIMIT:
        result.add_warning(
            _rate_path(config, "tax_rate"),
            f"Tax rate {rates.tax_rate:g} is more than 100%",
            "Enter tax as a fraction, e.g. 0.10 for 10% GST",
        )
    for name in ("width_mm", "height_mm", "depth_mm"):
        if getattr(spec, name) == 0:
            result.add_warning(
                f"cabinet.{name}",
                f"{name} is 0; every cost line that depends on it will be 0",
            )
    if rates.panel_rate_per_sqm == 0:
        result.add_warning(
            _rate_path(config, "panel_rate_per_sqm"),
            "Panel rate is 0; carcass panels will be priced at nothing",
            "Check that the hmr_rate_per_sqm setting is configured",
        )
    if spec.door_qty > 0 and door_rates.total_door_rate == 0:
        result.add_warning(
            "door",
            f"Cabinet has {spec.door_qty} door(s) but the door rate is 0",
            "Select a door style, finish or colour with a configured rate",
        )


def _check_missing_settings(config: PricingConfiguration, result: ValidationResult) -> None:
    if config.settings is None:
        return
    present = settings_to_map(config.settings)
    for key in RATE_SETTING_KEYS:
        if key not in present:
            result.add_warning(
                f"settings.{key}",
                f"Setting {key} is missing or not a number and defaults to 0",
            )


def _validate_price_list(
    config: PricingConfiguration, rates: RateSettings, result: ValidationResult
) -> None:
    policy = config.price_list.policy
    for index, bracket in enumerate(config_to_brackets(config)):
        if bracket.width_for(policy) == 0:
            result.add_warning(
                f"price_list.brackets[{index}]",
                f"Bracket {bracket.label!r} prices a zero width cabinet",
            )

    # Rates were already checked; with an all-zero spec only door rates can fail.
    empty_spec = CabinetSpec(width_mm=0, height_mm=0, depth_mm=0)
    for index, (_, door) in enumerate(config_to_door_options(config)):
        prefix = f"price_list.door_options[{index}].door"
        door_rates = config_to_door_rates(door, rates)
        for error in iter_input_errors(empty_spec, rates, door_rates):
            result.add_error(
                _door_path(prefix, door, error.field),
                f"{error.field} {error.reason}",
                error.value,
            )


def validate_config(config: PricingConfiguration) -> ValidationResult:
    """Run all pricing checks on a schema-valid configuration.

    Args:
        config: A configuration that already passed schema validation.

    Returns:
        ValidationResult with blocking errors and advisory warnings.
    """
    result = ValidationResult()
    _check_missing_settings(config, result)

    try:
        spec = config_to_cabinet_spec(config.cabinet)
    except ValueError as e:
        result.add_error("cabinet", str(e))
    try:
        rates = config_to_rate_settings(config)
    except ValueError as e:
        # Only a hardware set can fail to convert.
        result.add_error("hardware", str(e))
    if result.errors:
        return result
    door_rates = config_to_door_rates(config.door, rates)

    for error in iter_input_errors(spec, rates, door_rates):
        result.add_error(
            _field_path(config, error.field),
            f"{error.field} {error.reason}",
            error.value,
        )
    if result.errors:
        return result

    try:
        breakdown = compute_price(spec, rates, door_rates)
        compute_line_total(breakdown.total, config.quantity)
    except InvalidInput as e:
        return result.add_error(e.field, f"{e.field} {e.reason}", e.value)

    _check_plausibility(config, spec, rates, door_rates, result)
    if config.price_list is not None:
        _validate_price_list(config, rates, result)
    return result

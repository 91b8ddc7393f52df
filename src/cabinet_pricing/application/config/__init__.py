"""Configuration schema and loading for pricing documents.

Public API:
    - PricingConfiguration: Root configuration model
    - CabinetConfig, RatesConfig, DoorConfig, HardwareConfig, PriceListConfig
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult, ValidationError, ValidationWarning
    - validate_config: Perform full pricing validation
    - config_to_*: Convert configuration models to domain objects

Example:
    >>> from pathlib import Path
    >>> from cabinet_pricing.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("quote.json"))
    ...     print(f"Cabinet width: {config.cabinet.width_mm}mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_pricing.application.config.adapter import (
    config_to_brackets,
    config_to_cabinet_spec,
    config_to_door_options,
    config_to_door_rates,
    config_to_hardware_pricing,
    config_to_rate_settings,
)
from cabinet_pricing.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_pricing.application.config.schema import (
    SUPPORTED_VERSIONS,
    BracketConfig,
    CabinetConfig,
    DoorConfig,
    DoorOptionConfig,
    HardwareConfig,
    PriceListConfig,
    PricingConfiguration,
    RatesConfig,
)
from cabinet_pricing.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "BracketConfig",
    "CabinetConfig",
    "ConfigError",
    "DoorConfig",
    "DoorOptionConfig",
    "HardwareConfig",
    "PriceListConfig",
    "PricingConfiguration",
    "RatesConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_brackets",
    "config_to_cabinet_spec",
    "config_to_door_options",
    "config_to_door_rates",
    "config_to_hardware_pricing",
    "config_to_rate_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]

"""CLI command implementations for the cabinet-pricing application.

This package contains subcommands for the cabinet-pricing CLI, including:
- validate: Validate a configuration file
- price-list: Generate a bracketed price list
"""

from cabinet_pricing.cli.commands.price_list import price_list_command
from cabinet_pricing.cli.commands.validate import validate_command

__all__ = ["price_list_command", "validate_command"]

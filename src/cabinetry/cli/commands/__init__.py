"""CLI command implementations for the cabinetry application.

This package contains the commands registered on the cabinetry CLI:
- price, hardware, table: pricing
- default, validate, convert, compare: configurations
- templates: saved configuration templates
"""

from cabinetry.cli.commands.configure import (
    compare_command,
    convert_command,
    default_command,
    validate_command,
)
from cabinetry.cli.commands.pricing import hardware_command, price_command, table_command
from cabinetry.cli.commands.templates import templates_app

__all__ = [
    "compare_command",
    "convert_command",
    "default_command",
    "hardware_command",
    "price_command",
    "table_command",
    "templates_app",
    "validate_command",
]

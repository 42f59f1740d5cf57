"""Configuration commands: default, validate, convert and compare.

Configuration files are JSON objects tagged with ``configurationSource``
(``legacy``, ``product`` or ``unified``); untagged files are read as legacy.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application.configuration import (
    ValidationResult,
    compare_configurations,
    configuration_to_dict,
    create_default_configuration,
    migrate_configuration,
    validate_configuration,
)
from cabinetry.domain import CabinetConfiguration, ConfigurationSource

from .common import (
    CatalogOption,
    OptionalCatalogOption,
    OptionalTypeOption,
    TypeOption,
    echo_json,
    find_cabinet_type,
    open_catalog,
    optional_cabinet_type,
    read_configuration,
)

ConfigFileArgument = Annotated[
    Path,
    typer.Argument(help="Path to a JSON configuration file"),
]


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def default_command(
    catalog_path: CatalogOption,
    type_id: TypeOption,
) -> None:
    """Print the default configuration for a cabinet type as JSON.

    Example:
        cabinetry default -c catalog.json -t corner-900 > corner.json
    """
    cabinet_type = find_cabinet_type(open_catalog(catalog_path), type_id)
    echo_json(configuration_to_dict(create_default_configuration(cabinet_type)))


def validate_command(
    config_file: ConfigFileArgument,
    catalog_path: CatalogOption,
    type_id: TypeOption,
) -> None:
    """Validate a configuration against a cabinet type.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be quoted)
        2 - Configuration is valid but has warnings

    Example:
        cabinetry validate my-cabinet.json -c catalog.json -t base-600
    """
    cabinet_type = find_cabinet_type(open_catalog(catalog_path), type_id)
    config = read_configuration(config_file, cabinet_type)

    typer.echo(f"Validating {config_file} against {cabinet_type.name}...")
    typer.echo()
    result = validate_configuration(config, cabinet_type)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def convert_command(
    config_file: ConfigFileArgument,
    target: Annotated[
        ConfigurationSource,
        typer.Option("--to", help="Target representation"),
    ] = ConfigurationSource.UNIFIED,
    catalog_path: OptionalCatalogOption = None,
    type_id: OptionalTypeOption = None,
) -> None:
    """Convert a configuration file between representations.

    Missing dimensions are filled from --type when given.

    Examples:
        cabinetry convert legacy.json --to unified
        cabinetry convert unified.json --to legacy
    """
    cabinet_type = optional_cabinet_type(catalog_path, type_id)
    config = read_configuration(config_file, cabinet_type)
    migrated = migrate_configuration(config, target, cabinet_type)
    if isinstance(migrated, CabinetConfiguration):
        echo_json(configuration_to_dict(migrated))
    else:
        echo_json(migrated)


def compare_command(
    first: ConfigFileArgument,
    second: ConfigFileArgument,
    catalog_path: OptionalCatalogOption = None,
    type_id: OptionalTypeOption = None,
) -> None:
    """Compare two configuration files.

    Exit codes:
        0 - Configurations are identical
        1 - Configurations differ

    Example:
        cabinetry compare before.json after.json
    """
    cabinet_type = optional_cabinet_type(catalog_path, type_id)
    diff = compare_configurations(
        read_configuration(first, cabinet_type),
        read_configuration(second, cabinet_type),
    )
    if diff.identical:
        typer.echo("Configurations are identical.")
        return
    typer.echo("Differences:")
    for difference in diff.differences:
        typer.echo(f"  {difference}")
    raise typer.Exit(code=1)

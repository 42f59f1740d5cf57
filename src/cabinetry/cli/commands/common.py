"""Helpers shared by the CLI commands."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from cabinetry.application.catalog import (
    Catalog,
    ConfigError,
    UnknownRecordError,
    build_catalog,
    load_catalog,
    read_json_file,
)
from cabinetry.application.configuration import configuration_from_dict
from cabinetry.domain import CabinetConfiguration, CabinetType
from cabinetry.domain.services import HardwareSelection

CatalogOption = Annotated[
    Path,
    typer.Option(
        "--catalog",
        "-c",
        envvar="CABINETRY_CATALOG",
        help="Path to the JSON catalog document",
    ),
]

TypeOption = Annotated[
    str,
    typer.Option("--type", "-t", help="Cabinet type id"),
]

OptionalTypeOption = Annotated[
    str | None,
    typer.Option("--type", "-t", help="Cabinet type id used for defaults"),
]

OptionalCatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        "-c",
        envvar="CABINETRY_CATALOG",
        help="Path to the JSON catalog document",
    ),
]


def display_load_error(error: ConfigError) -> None:
    """Display a file loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def open_catalog(path: Path) -> Catalog:
    """Load a catalog document or exit with code 1."""
    try:
        return build_catalog(load_catalog(path))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def find_cabinet_type(catalog: Catalog, type_id: str) -> CabinetType:
    try:
        return catalog.cabinet_type(type_id)
    except UnknownRecordError as e:
        typer.echo(f"Error: {e}", err=True)
        available = ", ".join(sorted(catalog.cabinet_types)) or "none"
        typer.echo(f"Available cabinet types: {available}", err=True)
        raise typer.Exit(code=1)


def optional_cabinet_type(
    catalog_path: Path | None, type_id: str | None
) -> CabinetType | None:
    """Resolve ``--type`` when given; it requires ``--catalog``."""
    if type_id is None:
        return None
    if catalog_path is None:
        typer.echo("Error: --type requires --catalog", err=True)
        raise typer.Exit(code=1)
    return find_cabinet_type(open_catalog(catalog_path), type_id)


def read_configuration(
    path: Path, cabinet_type: CabinetType | None = None
) -> CabinetConfiguration:
    """Read a tagged configuration file or exit with code 1."""
    try:
        data = read_json_file(path)
        if not isinstance(data, dict):
            raise ConfigError(
                message=f"Configuration file must contain a JSON object: {path}",
                error_type="validation",
                path=path,
            )
        return configuration_from_dict(data, cabinet_type)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def parse_option_pairs(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``requirement=option`` arguments."""
    pairs: dict[str, str] = {}
    for value in values or []:
        requirement, sep, option = value.partition("=")
        if not sep or not requirement or not option:
            raise typer.BadParameter(
                f"Expected REQUIREMENT=OPTION, got {value!r}", param_hint="--option"
            )
        pairs[requirement.strip()] = option.strip()
    return pairs


def build_selection(brand: str | None, options: dict[str, str]) -> HardwareSelection:
    """Per-requirement options take precedence over a brand."""
    if options:
        return HardwareSelection.per_requirement(options)
    return HardwareSelection.for_brand(brand)


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))

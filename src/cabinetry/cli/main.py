"""Typer CLI for cabinet pricing and configuration."""

import logging
from typing import Annotated

import typer

from cabinetry.cli.commands import (
    compare_command,
    convert_command,
    default_command,
    hardware_command,
    price_command,
    table_command,
    templates_app,
    validate_command,
)

app = typer.Typer(
    name="cabinetry",
    help="Price and configure made-to-order cabinets.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Price and configure made-to-order cabinets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="price")(price_command)
app.command(name="hardware")(hardware_command)
app.command(name="table")(table_command)
app.command(name="default")(default_command)
app.command(name="validate")(validate_command)
app.command(name="convert")(convert_command)
app.command(name="compare")(compare_command)

app.add_typer(templates_app, name="templates")


if __name__ == "__main__":
    app()

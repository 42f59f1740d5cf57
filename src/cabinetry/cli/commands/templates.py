"""Templates commands for listing, saving and deleting saved configurations.

Templates are stored in a JSON file, ``cabinetry-templates.json`` in the
current directory unless --store or CABINETRY_TEMPLATES says otherwise.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application.templates import (
    JsonFileTemplateRepository,
    TemplateManager,
    TemplateStoreError,
)

from .common import (
    OptionalCatalogOption,
    find_cabinet_type,
    open_catalog,
    read_configuration,
)

DEFAULT_STORE = Path("cabinetry-templates.json")

templates_app = typer.Typer(
    name="templates",
    help="Manage saved configuration templates.",
)

StoreOption = Annotated[
    Path,
    typer.Option("--store", envvar="CABINETRY_TEMPLATES", help="Template store file"),
]
UserOption = Annotated[
    str | None,
    typer.Option("--user", "-u", help="Owning user id"),
]


def _manager(store: Path) -> TemplateManager:
    return TemplateManager(JsonFileTemplateRepository(store))


@templates_app.command(name="list")
def list_templates(
    store: StoreOption = DEFAULT_STORE,
    type_id: Annotated[
        str | None, typer.Option("--type", "-t", help="Only this cabinet type")
    ] = None,
    user: UserOption = None,
) -> None:
    """List visible templates, newest first.

    Without --user only default templates are listed.

    Example:
        cabinetry templates list --type base-600 --user u-42
    """
    try:
        templates = _manager(store).load_templates(type_id, user)
    except TemplateStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not templates:
        typer.echo("No templates found.")
        return

    max_name_width = max(len(t.name) for t in templates)
    for template in templates:
        marker = "*" if template.is_default else " "
        line = f"{marker} {template.id}  {template.name:<{max_name_width}}  [{template.cabinet_type_id}]"
        if template.description:
            line += f" - {template.description}"
        typer.echo(line)


@templates_app.command(name="save")
def save_template(
    name: Annotated[str, typer.Argument(help="Template name")],
    config_file: Annotated[Path, typer.Argument(help="Configuration file to save")],
    type_id: Annotated[str, typer.Option("--type", "-t", help="Cabinet type id")],
    store: StoreOption = DEFAULT_STORE,
    description: Annotated[
        str | None, typer.Option("--description", help="Template description")
    ] = None,
    is_default: Annotated[
        bool, typer.Option("--default", help="Make visible to every user")
    ] = False,
    user: UserOption = None,
    catalog_path: OptionalCatalogOption = None,
) -> None:
    """Save a configuration file as a template.

    With --catalog, missing dimensions in legacy and product files are filled
    from the --type cabinet type.

    Example:
        cabinetry templates save "Standard base" base.json --type base-600 --default
    """
    cabinet_type = None
    if catalog_path is not None:
        cabinet_type = find_cabinet_type(open_catalog(catalog_path), type_id)
    config = read_configuration(config_file, cabinet_type)
    try:
        template = _manager(store).save_template(
            name,
            type_id,
            config,
            description=description,
            is_default=is_default,
            user_id=user,
        )
    except (ValueError, TemplateStoreError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Saved template {template.id}")


@templates_app.command(name="delete")
def delete_template(
    template_id: Annotated[str, typer.Argument(help="Template id")],
    store: StoreOption = DEFAULT_STORE,
) -> None:
    """Delete a template by id.

    Example:
        cabinetry templates delete 1b4e28ba-2fa1-11d2-883f-0016d3cca427
    """
    try:
        removed = _manager(store).delete_template(template_id)
    except TemplateStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if not removed:
        typer.echo(f"Error: Template not found: {template_id}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted template {template_id}")

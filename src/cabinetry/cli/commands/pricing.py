"""Pricing commands: price, hardware and price tables.

These commands load a catalog document, assemble the pricing inputs for one
cabinet type and print the result as text or JSON.
"""

from typing import Annotated

import typer

from cabinetry.application import (
    calculate_hardware_cost,
    calculate_price,
    compare_hardware_brands,
    generate_price_table,
)
from cabinetry.application.catalog import UnknownRecordError
from cabinetry.domain.services import HardwareCostResult, PriceQuote, format_price

from .common import (
    CatalogOption,
    TypeOption,
    build_selection,
    echo_json,
    find_cabinet_type,
    open_catalog,
    parse_option_pairs,
)

BrandOption = Annotated[
    str | None,
    typer.Option("--brand", "-b", help="Hardware brand applied to every requirement"),
]
HardwareOptionsOption = Annotated[
    list[str] | None,
    typer.Option(
        "--option",
        help="Per-requirement hardware choice as REQUIREMENT=OPTION (repeatable)",
    ),
]
QuantityOption = Annotated[
    int,
    typer.Option("--quantity", "-q", min=1, help="Number of cabinets ordered"),
]
JsonFlag = Annotated[
    bool,
    typer.Option("--json", help="Print machine-readable JSON"),
]


def _display_quote(quote: PriceQuote, quantity: int = 1) -> None:
    breakdown = quote.breakdown
    carcass = breakdown.carcass
    doors = breakdown.doors
    q = carcass.quantities
    typer.echo(
        f"Cabinet {carcass.width_mm:g} x {carcass.height_mm:g} x {carcass.depth_mm:g} mm"
    )
    typer.echo()
    typer.echo(f"  Backs   ({q.backs})      {format_price(carcass.backs):>12}")
    typer.echo(f"  Bottoms ({q.bottoms})      {format_price(carcass.bottoms):>12}")
    typer.echo(f"  Sides   ({q.sides})      {format_price(carcass.sides):>12}")
    typer.echo(f"  Doors   ({q.doors})      {format_price(doors.total):>12}")
    typer.echo(f"  Hardware         {format_price(breakdown.hardware_cost):>12}")
    typer.echo(f"  Subtotal         {format_price(breakdown.subtotal):>12}")
    typer.echo(
        f"  GST ({breakdown.gst_rate:.0%})        {format_price(breakdown.gst_amount):>12}"
    )
    typer.echo(f"  Total            {format_price(breakdown.total):>12}")
    if quantity > 1:
        order_total = format_price(breakdown.total * quantity)
        typer.echo(f"  Order of {quantity:<7} {order_total:>12}")

    if breakdown.warnings:
        typer.echo()
        typer.echo("Warnings:")
        for warning in breakdown.warnings:
            typer.echo(f"  {warning.message}")


def price_command(
    catalog_path: CatalogOption,
    type_id: TypeOption,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Width in mm")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", "-h", help="Height in mm")
    ] = None,
    depth: Annotated[
        float | None, typer.Option("--depth", "-d", help="Depth in mm")
    ] = None,
    door_style: Annotated[
        str | None, typer.Option("--door-style", help="Door style id")
    ] = None,
    finish: Annotated[str | None, typer.Option("--finish", help="Finish id")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Colour id")] = None,
    brand: BrandOption = None,
    options: HardwareOptionsOption = None,
    quantity: QuantityOption = 1,
    hardware_cost: Annotated[
        float | None,
        typer.Option(
            "--hardware-cost",
            help="Flat hardware amount instead of resolving requirements",
        ),
    ] = None,
    as_json: JsonFlag = False,
) -> None:
    """Price one cabinet.

    Dimensions default to the cabinet type's defaults. Hardware is resolved
    for one cabinet from the type's requirements using --option choices, else
    --brand, else the type's default brand, unless a per-cabinet
    --hardware-cost is given. --quantity adds an order total of that many
    cabinets.

    Example:
        cabinetry price -c catalog.json -t base-600 --door-style shaker --color white
    """
    catalog = open_catalog(catalog_path)
    cabinet_type = find_cabinet_type(catalog, type_id)
    try:
        door_style_finish = catalog.door_style_finish(door_style, finish)
        selected_color = catalog.color(color)
    except UnknownRecordError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if hardware_cost is not None:
        hardware: float | HardwareCostResult = hardware_cost
    else:
        selection = build_selection(
            brand or cabinet_type.default_hardware_brand_id, parse_option_pairs(options)
        )
        hardware = calculate_hardware_cost(
            cabinet_type, catalog.requirements_for(type_id), selection
        )

    quote = calculate_price(
        cabinet_type,
        width if width is not None else cabinet_type.default_width_mm,
        height if height is not None else cabinet_type.default_height_mm,
        depth if depth is not None else cabinet_type.default_depth_mm,
        door_style_finish=door_style_finish,
        color=selected_color,
        cabinet_parts=catalog.parts_for(type_id),
        global_settings=catalog.global_settings,
        hardware_cost=hardware,
    )

    if as_json:
        echo_json(
            {
                "price": quote.price,
                "quantity": quantity,
                "order_total": quote.price * quantity,
                "breakdown": quote.breakdown.to_dict(),
            }
        )
    else:
        _display_quote(quote, quantity)


def hardware_command(
    catalog_path: CatalogOption,
    type_id: TypeOption,
    brand: BrandOption = None,
    options: HardwareOptionsOption = None,
    quantity: QuantityOption = 1,
    compare: Annotated[
        bool,
        typer.Option("--compare", help="Compare every brand offered for the type"),
    ] = False,
    as_json: JsonFlag = False,
) -> None:
    """Resolve and price a cabinet type's hardware requirements.

    Exit codes:
        0 - Every requirement was priced
        2 - At least one requirement is a gap (priced at zero)

    Examples:
        cabinetry hardware -c catalog.json -t base-600 --brand blum
        cabinetry hardware -c catalog.json -t base-600 --compare
    """
    catalog = open_catalog(catalog_path)
    cabinet_type = find_cabinet_type(catalog, type_id)
    requirements = catalog.requirements_for(type_id)

    if compare:
        results = compare_hardware_brands(
            cabinet_type, requirements, catalog.brand_ids_for(type_id), quantity
        )
        if as_json:
            echo_json({brand_id: r.to_dict() for brand_id, r in results.items()})
            return
        if not results:
            typer.echo("No hardware brands offered for this cabinet type.")
            return
        width = max(len(brand_id) for brand_id in results)
        for brand_id, result in results.items():
            status = "" if result.is_complete else f"  ({len(result.gaps)} gap(s))"
            typer.echo(f"  {brand_id:<{width}}  {format_price(result.total):>12}{status}")
        return

    selection = build_selection(brand, parse_option_pairs(options))
    result = calculate_hardware_cost(cabinet_type, requirements, selection, quantity)

    if as_json:
        echo_json(result.to_dict())
    else:
        for line in result.lines:
            typer.echo(
                f"  {line.hardware_type}: {line.product_name} "
                f"{line.quantity:g} x {format_price(line.unit_cost)} = {format_price(line.cost)}"
            )
        if result.gaps:
            typer.echo()
            typer.echo("Gaps (not included in total):")
            for gap in result.gaps:
                typer.echo(f"  {gap.message}")
        typer.echo()
        typer.echo(f"Hardware total: {format_price(result.total)}")

    if not result.is_complete:
        raise typer.Exit(code=2)


def table_command(
    catalog_path: CatalogOption,
    type_id: TypeOption,
    widths: Annotated[
        str,
        typer.Option("--widths", help="Comma-separated widths in mm, e.g. 300,450,600"),
    ],
    hardware_cost: Annotated[
        float | None,
        typer.Option(
            "--hardware-cost",
            help="Flat hardware amount (default: the hardware_base_cost setting)",
        ),
    ] = None,
) -> None:
    """Print a price list for a cabinet type across widths and door finishes.

    Example:
        cabinetry table -c catalog.json -t base-600 --widths 300,450,600,900
    """
    try:
        width_values = [float(w) for w in widths.split(",") if w.strip()]
    except ValueError:
        raise typer.BadParameter(f"Invalid width list: {widths}", param_hint="--widths")

    catalog = open_catalog(catalog_path)
    cabinet_type = find_cabinet_type(catalog, type_id)
    combos = catalog.all_door_style_finishes()
    if not combos:
        typer.echo("Error: catalog has no door styles", err=True)
        raise typer.Exit(code=1)

    rows = generate_price_table(
        cabinet_type,
        width_values,
        combos,
        cabinet_parts=catalog.parts_for(type_id),
        global_settings=catalog.global_settings,
        hardware_cost=hardware_cost,
    )

    labels = [
        combo.door_style.name + (f" / {combo.finish.name}" if combo.finish else "")
        for combo in combos
    ]
    typer.echo("Width (mm)  " + "  ".join(f"{label:>20}" for label in labels))
    for row in rows:
        prices = "  ".join(f"{format_price(p):>20}" for p in row.prices)
        typer.echo(f"{row.width_mm:>10g}  {prices}")

"""Pricing endpoints."""

from fastapi import APIRouter

from cabinetry.application import (
    calculate_hardware_cost,
    calculate_price,
    compare_hardware_brands,
)
from cabinetry.domain.services import HardwareCostResult, HardwareSelection, format_price
from cabinetry.web.dependencies import CatalogDep
from cabinetry.web.schemas.requests import (
    HardwareCompareRequest,
    HardwareRequest,
    PriceRequest,
)
from cabinetry.web.schemas.responses import (
    HardwareComparisonSchema,
    HardwareCostSchema,
    PriceResponseSchema,
)

router = APIRouter(tags=["pricing"])


def _selection(brand_id: str | None, options: dict[str, str] | None) -> HardwareSelection:
    if options:
        return HardwareSelection.per_requirement(options)
    return HardwareSelection.for_brand(brand_id)


@router.post("/price", response_model=PriceResponseSchema)
async def price_cabinet(
    request: PriceRequest,
    catalog: CatalogDep,
) -> PriceResponseSchema:
    """Price one cabinet and the order total for ``quantity`` of them.

    Dimensions default to the cabinet type's defaults. Unless a flat
    per-cabinet ``hardware_cost`` is given, hardware is resolved for a single
    cabinet from the type's requirements and any gaps are returned as
    warnings.

    Raises:
        UnknownRecordError: If a referenced record does not exist (404).
    """
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    door_style_finish = catalog.door_style_finish(request.door_style_id, request.finish_id)
    color = catalog.color(request.color_id)

    if request.hardware_cost is not None:
        hardware: float | HardwareCostResult = request.hardware_cost
    else:
        hardware = calculate_hardware_cost(
            cabinet_type,
            catalog.requirements_for(cabinet_type.id),
            _selection(
                request.hardware_brand_id or cabinet_type.default_hardware_brand_id,
                request.hardware_options,
            ),
        )

    quote = calculate_price(
        cabinet_type,
        request.width or cabinet_type.default_width_mm,
        request.height or cabinet_type.default_height_mm,
        request.depth or cabinet_type.default_depth_mm,
        door_style_finish=door_style_finish,
        color=color,
        cabinet_parts=catalog.parts_for(cabinet_type.id),
        global_settings=catalog.global_settings,
        hardware_cost=hardware,
    )
    return PriceResponseSchema(
        price=quote.price,
        formatted_price=format_price(quote.price),
        quantity=request.quantity,
        order_total=quote.price * request.quantity,
        breakdown=quote.breakdown.to_dict(),
        warnings=[warning.message for warning in quote.breakdown.warnings],
    )


@router.post("/hardware", response_model=HardwareCostSchema)
async def resolve_hardware(
    request: HardwareRequest,
    catalog: CatalogDep,
) -> HardwareCostSchema:
    """Resolve and price a cabinet type's hardware requirements."""
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    result = calculate_hardware_cost(
        cabinet_type,
        catalog.requirements_for(cabinet_type.id),
        _selection(request.hardware_brand_id, request.hardware_options),
        request.quantity,
    )
    return HardwareCostSchema.model_validate(result.to_dict())


@router.post("/hardware/compare", response_model=HardwareComparisonSchema)
async def compare_hardware(
    request: HardwareCompareRequest,
    catalog: CatalogDep,
) -> HardwareComparisonSchema:
    """Price the same requirements once per brand."""
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    brand_ids = request.brand_ids or catalog.brand_ids_for(cabinet_type.id)
    results = compare_hardware_brands(
        cabinet_type,
        catalog.requirements_for(cabinet_type.id),
        brand_ids,
        request.quantity,
    )
    return HardwareComparisonSchema(
        brands={
            brand_id: HardwareCostSchema.model_validate(result.to_dict())
            for brand_id, result in results.items()
        }
    )

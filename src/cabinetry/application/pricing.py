"""Pricing entry points.

Thin functions over the domain calculators. Every call builds its result
from the inputs alone, so callers may recompute as often as they like.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cabinetry.domain import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyleFinish,
    GlobalSetting,
    HardwareRequirement,
)
from cabinetry.domain.services import (
    HardwareCostCalculator,
    HardwareCostResult,
    HardwareSelection,
    PriceCalculator,
    PriceQuote,
    PriceTableRow,
    PricingSettings,
)

__all__ = [
    "calculate_hardware_cost",
    "calculate_price",
    "compare_hardware_brands",
    "generate_price_table",
]


def calculate_price(
    cabinet_type: CabinetType,
    width: float,
    height: float,
    depth: float,
    door_style_finish: DoorStyleFinish | None = None,
    color: Color | None = None,
    cabinet_parts: Iterable[CabinetPart] | None = None,
    global_settings: Iterable[GlobalSetting] | PricingSettings | None = None,
    hardware_cost: float | HardwareCostResult = 0.0,
) -> PriceQuote:
    """Price one cabinet and return the price with its breakdown.

    ``hardware_cost`` is the hardware for this one cabinet; pass the
    HardwareCostResult from calculate_hardware_cost with an order quantity of
    1 to carry its gaps into the breakdown warnings.
    """
    return PriceCalculator().calculate(
        cabinet_type,
        width,
        height,
        depth,
        door_style_finish=door_style_finish,
        color=color,
        cabinet_parts=cabinet_parts,
        global_settings=global_settings,
        hardware_cost=hardware_cost,
    )


def calculate_hardware_cost(
    cabinet_type: CabinetType,
    requirements: Iterable[HardwareRequirement],
    selection: HardwareSelection | None = None,
    order_quantity: int = 1,
) -> HardwareCostResult:
    """Resolve and price hardware; unresolved requirements become gaps."""
    return HardwareCostCalculator().calculate(
        cabinet_type,
        requirements,
        selection or HardwareSelection.none(),
        order_quantity,
    )


def compare_hardware_brands(
    cabinet_type: CabinetType,
    requirements: Sequence[HardwareRequirement],
    brand_ids: Iterable[str],
    order_quantity: int = 1,
) -> dict[str, HardwareCostResult]:
    return HardwareCostCalculator().compare_brands(
        cabinet_type, requirements, brand_ids, order_quantity
    )


def generate_price_table(
    cabinet_type: CabinetType,
    widths: Iterable[float],
    door_style_finishes: Sequence[DoorStyleFinish],
    cabinet_parts: Iterable[CabinetPart] | None = None,
    global_settings: Iterable[GlobalSetting] | PricingSettings | None = None,
    hardware_cost: float | None = None,
) -> list[PriceTableRow]:
    """Price a cabinet type across width bands and door style/finish pairs.

    Rows follow ``widths``; each row's prices follow ``door_style_finishes``.
    """
    return PriceCalculator().price_table(
        cabinet_type,
        widths,
        door_style_finishes,
        cabinet_parts=cabinet_parts,
        global_settings=global_settings,
        hardware_cost=hardware_cost,
    )

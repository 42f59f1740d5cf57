"""Pure pricing services."""

from .door_cost import DoorCost, DoorCostCalculator
from .hardware_cost import (
    GapReason,
    HardwareCostCalculator,
    HardwareCostResult,
    HardwareGap,
    HardwareLine,
    HardwareSelection,
    SelectionMode,
    scope_multiplier,
)
from .material_cost import (
    CarcassCost,
    CarcassQuantities,
    MaterialCostCalculator,
    resolve_part_quantities,
)
from .price_aggregator import (
    PriceBreakdown,
    PriceCalculator,
    PriceQuote,
    PriceTableRow,
    PricingWarning,
    format_price,
)
from .settings import (
    DEFAULT_GST_RATE,
    DEFAULT_HARDWARE_BASE_COST,
    DEFAULT_MATERIAL_RATE,
    PricingSettings,
    parse_global_settings,
)

__all__ = [
    "CarcassCost",
    "CarcassQuantities",
    "DEFAULT_GST_RATE",
    "DEFAULT_HARDWARE_BASE_COST",
    "DEFAULT_MATERIAL_RATE",
    "DoorCost",
    "DoorCostCalculator",
    "GapReason",
    "HardwareCostCalculator",
    "HardwareCostResult",
    "HardwareGap",
    "HardwareLine",
    "HardwareSelection",
    "MaterialCostCalculator",
    "PriceBreakdown",
    "PriceCalculator",
    "PriceQuote",
    "PriceTableRow",
    "PricingSettings",
    "PricingWarning",
    "SelectionMode",
    "format_price",
    "parse_global_settings",
    "resolve_part_quantities",
    "scope_multiplier",
]

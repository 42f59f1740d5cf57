"""Price aggregation.

PriceCalculator combines carcass, door and hardware costs, applies GST and
returns the price together with a breakdown of every line and its inputs.
There is no retained state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..value_objects import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyleFinish,
    GlobalSetting,
    as_amount,
)
from .door_cost import DoorCost, DoorCostCalculator
from .hardware_cost import HardwareCostResult, HardwareGap
from .material_cost import CarcassCost, MaterialCostCalculator, resolve_part_quantities
from .settings import PricingSettings, parse_global_settings

__all__ = [
    "PriceBreakdown",
    "PriceCalculator",
    "PriceQuote",
    "PriceTableRow",
    "PricingWarning",
    "format_price",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingWarning:
    """A non-blocking data gap that lowered the computed price."""

    code: str
    message: str


@dataclass(frozen=True)
class PriceBreakdown:
    """Every line item of a price and the inputs behind it."""

    carcass: CarcassCost
    doors: DoorCost
    hardware_cost: float
    gst_rate: float
    hardware_gaps: tuple[HardwareGap, ...] = ()
    warnings: tuple[PricingWarning, ...] = ()

    @property
    def subtotal(self) -> float:
        return self.carcass.total + self.doors.total + self.hardware_cost

    @property
    def gst_amount(self) -> float:
        return self.subtotal * self.gst_rate

    @property
    def total(self) -> float:
        return self.subtotal + self.gst_amount

    def to_dict(self) -> dict[str, Any]:
        """Flatten the breakdown for audit output."""
        quantities = self.carcass.quantities
        return {
            "dimensions": {
                "width": self.carcass.width_mm,
                "height": self.carcass.height_mm,
                "depth": self.carcass.depth_mm,
            },
            "quantities": {
                "backs": quantities.backs,
                "bottoms": quantities.bottoms,
                "sides": quantities.sides,
                "doors": quantities.doors,
            },
            "carcass": {
                "material_rate": self.carcass.material_rate,
                "backs": self.carcass.backs,
                "bottoms": self.carcass.bottoms,
                "sides": self.carcass.sides,
                "total": self.carcass.total,
            },
            "doors": {
                "style_rate": self.doors.style_rate,
                "finish_rate": self.doors.finish_rate,
                "color_surcharge": self.doors.color_surcharge,
                "total_rate": self.doors.total_rate,
                "area": self.doors.area_sqm,
                "total": self.doors.total,
            },
            "hardware": {
                "total": self.hardware_cost,
                "gaps": [gap.message for gap in self.hardware_gaps],
            },
            "subtotal": self.subtotal,
            "gst_rate": self.gst_rate,
            "gst": self.gst_amount,
            "total": self.total,
            "warnings": [w.message for w in self.warnings],
        }


@dataclass(frozen=True)
class PriceQuote:
    """Result of a price calculation: the price and how it was reached."""

    price: float
    breakdown: PriceBreakdown


@dataclass(frozen=True)
class PriceTableRow:
    """Prices for one width across door style/finish combinations."""

    width_mm: float
    prices: tuple[float, ...] = field(default_factory=tuple)


def format_price(amount: float) -> str:
    """Render an amount as Australian dollars, e.g. ``$1,234.50``."""
    value = as_amount(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


class PriceCalculator:
    """Orchestrates the material, door and hardware calculators."""

    def __init__(
        self,
        material_calculator: MaterialCostCalculator | None = None,
        door_calculator: DoorCostCalculator | None = None,
    ) -> None:
        self.material_calculator = material_calculator or MaterialCostCalculator()
        self.door_calculator = door_calculator or DoorCostCalculator()

    def calculate(
        self,
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
        """Price one cabinet.

        Args:
            cabinet_type: Cabinet type being priced.
            width: Width in mm.
            height: Height in mm.
            depth: Depth in mm.
            door_style_finish: Selected door style and optional finish.
            color: Selected colour; must belong to the selected door style.
            cabinet_parts: Optional parts list refining carcass quantities.
            global_settings: Raw settings rows or already-parsed settings.
            hardware_cost: A plain amount, or a HardwareCostResult whose gaps
                are carried into the breakdown.

        Returns:
            PriceQuote whose price equals ``breakdown.total``.
        """
        settings = (
            global_settings
            if isinstance(global_settings, PricingSettings)
            else parse_global_settings(global_settings)
        )
        quantities = resolve_part_quantities(cabinet_type, cabinet_parts)
        warnings: list[PricingWarning] = []

        carcass = self.material_calculator.calculate(
            width, height, depth, quantities, settings.material_rate
        )

        base_rate = finish_rate = 0.0
        if door_style_finish is not None:
            base_rate = door_style_finish.base_rate
            finish_rate = door_style_finish.finish_rate
        elif quantities.doors > 0:
            warnings.append(
                PricingWarning(
                    code="no_door_style",
                    message="No door style selected; door facing priced at zero rate",
                )
            )

        surcharge = 0.0
        if color is not None:
            if door_style_finish is not None and (
                color.door_style_id == door_style_finish.door_style.id
            ):
                surcharge = as_amount(color.surcharge_rate_per_sqm)
            else:
                warnings.append(
                    PricingWarning(
                        code="color_style_mismatch",
                        message=(
                            f"Colour {color.name} does not belong to the selected "
                            "door style; surcharge not applied"
                        ),
                    )
                )

        doors = self.door_calculator.calculate(
            width, height, quantities.doors, base_rate, finish_rate, surcharge
        )

        gaps: Sequence[HardwareGap] = ()
        if isinstance(hardware_cost, HardwareCostResult):
            gaps = hardware_cost.gaps
            hardware_amount = hardware_cost.total
            warnings.extend(
                PricingWarning(code=f"hardware_{gap.reason.value}", message=gap.message)
                for gap in gaps
            )
        else:
            hardware_amount = as_amount(hardware_cost)

        breakdown = PriceBreakdown(
            carcass=carcass,
            doors=doors,
            hardware_cost=hardware_amount,
            gst_rate=settings.gst_rate,
            hardware_gaps=tuple(gaps),
            warnings=tuple(warnings),
        )
        for warning in warnings:
            logger.warning(f"Pricing {cabinet_type.id}: {warning.message}")
        logger.debug(
            f"Priced {cabinet_type.id} {carcass.width_mm:g}x{carcass.height_mm:g}x"
            f"{carcass.depth_mm:g}: subtotal={breakdown.subtotal:.2f} "
            f"gst={breakdown.gst_amount:.2f} total={breakdown.total:.2f}"
        )
        return PriceQuote(price=breakdown.total, breakdown=breakdown)

    def price_table(
        self,
        cabinet_type: CabinetType,
        widths: Iterable[float],
        door_style_finishes: Sequence[DoorStyleFinish],
        cabinet_parts: Iterable[CabinetPart] | None = None,
        global_settings: Iterable[GlobalSetting] | PricingSettings | None = None,
        hardware_cost: float | None = None,
    ) -> list[PriceTableRow]:
        """Price a cabinet type across widths and door style/finish pairs.

        Height and depth are the type's defaults. When ``hardware_cost`` is
        None the settings' flat hardware allowance is used.
        """
        settings = (
            global_settings
            if isinstance(global_settings, PricingSettings)
            else parse_global_settings(global_settings)
        )
        parts = tuple(cabinet_parts or ())
        hardware = settings.hardware_base_cost if hardware_cost is None else hardware_cost
        rows: list[PriceTableRow] = []
        for width in widths:
            prices = tuple(
                self.calculate(
                    cabinet_type,
                    width,
                    cabinet_type.default_height_mm,
                    cabinet_type.default_depth_mm,
                    door_style_finish=combo,
                    cabinet_parts=parts,
                    global_settings=settings,
                    hardware_cost=hardware,
                ).price
                for combo in door_style_finishes
            )
            rows.append(PriceTableRow(width_mm=as_amount(width), prices=prices))
        return rows

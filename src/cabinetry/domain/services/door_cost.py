"""Door facing costing."""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import as_amount
from .material_cost import MM_PER_M

__all__ = ["DoorCost", "DoorCostCalculator"]


@dataclass(frozen=True)
class DoorCost:
    """Door facing cost and its rate components.

    Attributes:
        style_rate: Door style base rate per m².
        finish_rate: Finish rate per m².
        color_surcharge: Colour surcharge per m².
        area_sqm: Door area in m², already multiplied by door quantity.
        door_quantity: Door panels priced.
        total: Door facing cost.
    """

    style_rate: float
    finish_rate: float
    color_surcharge: float
    area_sqm: float
    door_quantity: int
    total: float

    @property
    def total_rate(self) -> float:
        return self.style_rate + self.finish_rate + self.color_surcharge


class DoorCostCalculator:
    """Prices door facings as area x door quantity x combined rate."""

    def calculate(
        self,
        width: float,
        height: float,
        door_quantity: int,
        base_rate: float = 0.0,
        finish_rate: float = 0.0,
        color_surcharge: float = 0.0,
    ) -> DoorCost:
        style_rate = as_amount(base_rate)
        finish = as_amount(finish_rate)
        surcharge = as_amount(color_surcharge)
        doors = int(as_amount(door_quantity))

        if doors <= 0:
            return DoorCost(
                style_rate=style_rate,
                finish_rate=finish,
                color_surcharge=surcharge,
                area_sqm=0.0,
                door_quantity=0,
                total=0.0,
            )

        area = (as_amount(width) / MM_PER_M) * (as_amount(height) / MM_PER_M) * doors
        return DoorCost(
            style_rate=style_rate,
            finish_rate=finish,
            color_surcharge=surcharge,
            area_sqm=area,
            door_quantity=doors,
            total=area * (style_rate + finish + surcharge),
        )

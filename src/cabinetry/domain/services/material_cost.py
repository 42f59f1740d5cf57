"""Carcass material costing."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..value_objects import CabinetPart, CabinetType, as_amount

__all__ = [
    "CarcassCost",
    "CarcassQuantities",
    "MaterialCostCalculator",
    "resolve_part_quantities",
]

logger = logging.getLogger(__name__)

MM_PER_M = 1000.0

# Part-name keyword -> CarcassQuantities field
_PART_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("back", "backs"),
    ("bottom", "bottoms"),
    ("side", "sides"),
)


@dataclass(frozen=True)
class CarcassQuantities:
    """Panel counts used to price one cabinet."""

    backs: int = 1
    bottoms: int = 1
    sides: int = 2
    doors: int = 0


def resolve_part_quantities(
    cabinet_type: CabinetType,
    parts: Iterable[CabinetPart] | None = None,
) -> CarcassQuantities:
    """Resolve panel quantities for a cabinet type.

    Starts from the type's own counts. Non-door parts whose name contains
    ``back``, ``bottom`` or ``side`` replace that category's count with the
    sum of their quantities. Door quantity always comes from the type.

    Args:
        cabinet_type: The cabinet type being priced.
        parts: Optional parts list for the type.

    Returns:
        CarcassQuantities for one cabinet.
    """
    counts = {
        "backs": cabinet_type.backs_qty,
        "bottoms": cabinet_type.bottoms_qty,
        "sides": cabinet_type.sides_qty,
    }
    from_parts: dict[str, int] = {}
    for part in parts or ():
        if part.is_door or part.is_hardware:
            continue
        name = part.part_name.lower()
        for keyword, category in _PART_KEYWORDS:
            if keyword in name:
                from_parts[category] = from_parts.get(category, 0) + int(
                    as_amount(part.quantity)
                )
                break
    if from_parts:
        logger.debug(f"Part-derived carcass quantities for {cabinet_type.id}: {from_parts}")
    counts.update(from_parts)
    return CarcassQuantities(doors=cabinet_type.resolved_door_qty, **counts)


@dataclass(frozen=True)
class CarcassCost:
    """Carcass panel costs and the inputs that produced them."""

    backs: float
    bottoms: float
    sides: float
    material_rate: float
    quantities: CarcassQuantities
    width_mm: float
    height_mm: float
    depth_mm: float

    @property
    def total(self) -> float:
        return self.backs + self.bottoms + self.sides


class MaterialCostCalculator:
    """Area-based carcass costing.

    Backs use width x height; bottoms and sides use width x depth. No
    wastage allowance is added.
    """

    def calculate(
        self,
        width: float,
        height: float,
        depth: float,
        quantities: CarcassQuantities,
        material_rate: float,
    ) -> CarcassCost:
        """Price the carcass panels of one cabinet.

        Args:
            width: Cabinet width in mm.
            height: Cabinet height in mm.
            depth: Cabinet depth in mm.
            quantities: Panel counts.
            material_rate: Board rate per square metre.

        Returns:
            CarcassCost with per-panel lines.
        """
        width_mm, height_mm, depth_mm = as_amount(width), as_amount(height), as_amount(depth)
        rate = as_amount(material_rate)
        width_m = width_mm / MM_PER_M
        height_m = height_mm / MM_PER_M
        depth_m = depth_mm / MM_PER_M

        return CarcassCost(
            backs=width_m * height_m * quantities.backs * rate,
            bottoms=width_m * depth_m * quantities.bottoms * rate,
            sides=width_m * depth_m * quantities.sides * rate,
            material_rate=rate,
            quantities=quantities,
            width_mm=width_mm,
            height_mm=height_mm,
            depth_mm=depth_mm,
        )

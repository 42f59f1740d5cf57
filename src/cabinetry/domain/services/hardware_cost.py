"""Hardware cost resolution.

This module provides HardwareCostCalculator, which resolves each hardware
requirement of a cabinet type to a concrete product and prices it by
unit scope (per cabinet, per door or per drawer).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..value_objects import (
    CabinetType,
    HardwareOption,
    HardwareRequirement,
    UnitScope,
    as_amount,
)

__all__ = [
    "GapReason",
    "HardwareCostCalculator",
    "HardwareCostResult",
    "HardwareGap",
    "HardwareLine",
    "HardwareSelection",
    "SelectionMode",
    "scope_multiplier",
]

logger = logging.getLogger(__name__)


class SelectionMode(str, Enum):
    """How options are chosen for a cabinet's requirements."""

    NONE = "none"
    BRAND = "brand"
    PER_REQUIREMENT = "per_requirement"


class GapReason(str, Enum):
    """Why a requirement could not be priced."""

    NO_SELECTION = "no_selection"
    NO_BRAND_PRODUCT = "no_brand_product"
    NO_OPTION_SELECTED = "no_option_selected"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_PRODUCT = "missing_product"


_GAP_MESSAGES: dict[GapReason, str] = {
    GapReason.NO_SELECTION: "no hardware selected",
    GapReason.NO_BRAND_PRODUCT: "selected brand has no product for this requirement",
    GapReason.NO_OPTION_SELECTED: "no option chosen for this requirement",
    GapReason.UNKNOWN_OPTION: "chosen option does not belong to this requirement",
    GapReason.MISSING_PRODUCT: "option has no linked product",
}


@dataclass(frozen=True)
class HardwareSelection:
    """The customer's hardware choice.

    Use the constructors rather than building instances directly:

        HardwareSelection.none()
        HardwareSelection.for_brand("blum")
        HardwareSelection.per_requirement({"req-hinge": "opt-blum-hinge"})
    """

    mode: SelectionMode = SelectionMode.NONE
    brand_id: str | None = None
    option_ids: Mapping[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def none(cls) -> HardwareSelection:
        return cls()

    @classmethod
    def for_brand(cls, brand_id: str | None) -> HardwareSelection:
        """Apply one brand across every requirement.

        A blank or ``"none"`` brand id means no hardware was selected.
        """
        if not brand_id or brand_id == "none":
            return cls()
        return cls(mode=SelectionMode.BRAND, brand_id=brand_id)

    @classmethod
    def per_requirement(cls, option_ids: Mapping[str, str]) -> HardwareSelection:
        """Choose an explicit option for each requirement id."""
        return cls(mode=SelectionMode.PER_REQUIREMENT, option_ids=dict(option_ids))


@dataclass(frozen=True)
class HardwareLine:
    """A priced hardware requirement."""

    requirement_id: str
    hardware_type: str
    unit_scope: UnitScope
    units_per_scope: float
    quantity: float
    option_id: str
    brand_id: str
    product_id: str
    product_name: str
    unit_cost: float

    @property
    def cost(self) -> float:
        return self.quantity * self.unit_cost


@dataclass(frozen=True)
class HardwareGap:
    """A requirement that contributed nothing to the total."""

    requirement_id: str
    hardware_type: str
    reason: GapReason
    brand_id: str | None = None

    @property
    def message(self) -> str:
        text = f"{self.hardware_type}: {_GAP_MESSAGES[self.reason]}"
        if self.brand_id:
            text += f" (brand {self.brand_id})"
        return text


@dataclass(frozen=True)
class HardwareCostResult:
    """Hardware total with its priced lines and unpriced gaps."""

    lines: tuple[HardwareLine, ...] = ()
    gaps: tuple[HardwareGap, ...] = ()

    @property
    def total(self) -> float:
        return sum((line.cost for line in self.lines), 0.0)

    @property
    def is_complete(self) -> bool:
        return not self.gaps

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "is_complete": self.is_complete,
            "lines": [
                {
                    "requirement_id": line.requirement_id,
                    "hardware_type": line.hardware_type,
                    "unit_scope": line.unit_scope.value,
                    "option_id": line.option_id,
                    "brand_id": line.brand_id,
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity,
                    "unit_cost": line.unit_cost,
                    "cost": line.cost,
                }
                for line in self.lines
            ],
            "gaps": [
                {
                    "requirement_id": gap.requirement_id,
                    "hardware_type": gap.hardware_type,
                    "reason": gap.reason.value,
                    "message": gap.message,
                }
                for gap in self.gaps
            ],
        }


def scope_multiplier(scope: UnitScope, cabinet_type: CabinetType) -> int:
    """Return the count a requirement's units multiply by."""
    if scope == UnitScope.PER_DOOR:
        return cabinet_type.door_count
    if scope == UnitScope.PER_DRAWER:
        return cabinet_type.drawer_count
    return 1


class HardwareCostCalculator:
    """Service for pricing a cabinet type's hardware requirements.

    For each requirement the resolved quantity is
    ``units_per_scope x scope multiplier x order quantity`` and the line
    cost is that quantity times the selected product's unit cost.
    Requirements that cannot be resolved add nothing to the total and are
    reported as gaps.
    """

    def calculate(
        self,
        cabinet_type: CabinetType,
        requirements: Iterable[HardwareRequirement],
        selection: HardwareSelection,
        order_quantity: int = 1,
    ) -> HardwareCostResult:
        """Price every requirement under the given selection.

        Args:
            cabinet_type: Source of door and drawer counts.
            requirements: Hardware requirements for the type.
            selection: Brand-wide or per-requirement choice.
            order_quantity: Number of cabinets ordered.

        Returns:
            HardwareCostResult with lines and gaps in requirement order.
        """
        lines: list[HardwareLine] = []
        gaps: list[HardwareGap] = []
        quantity = as_amount(order_quantity)

        for requirement in requirements:
            option, reason = self._resolve_option(requirement, selection)
            if option is not None and option.product is None:
                reason = GapReason.MISSING_PRODUCT
            if option is None or option.product is None:
                gap = HardwareGap(
                    requirement_id=requirement.id,
                    hardware_type=requirement.hardware_type,
                    reason=reason or GapReason.NO_SELECTION,
                    brand_id=selection.brand_id,
                )
                logger.warning(f"Hardware gap for {cabinet_type.id}: {gap.message}")
                gaps.append(gap)
                continue

            resolved = (
                as_amount(requirement.units_per_scope)
                * scope_multiplier(requirement.unit_scope, cabinet_type)
                * quantity
            )
            line = HardwareLine(
                requirement_id=requirement.id,
                hardware_type=requirement.hardware_type,
                unit_scope=requirement.unit_scope,
                units_per_scope=as_amount(requirement.units_per_scope),
                quantity=resolved,
                option_id=option.id,
                brand_id=option.brand_id,
                product_id=option.product.id,
                product_name=option.product.name,
                unit_cost=as_amount(option.product.cost_per_unit),
            )
            logger.debug(
                f"Hardware {line.hardware_type}: {line.quantity:g} x "
                f"{line.unit_cost:.2f} = {line.cost:.2f}"
            )
            lines.append(line)

        return HardwareCostResult(lines=tuple(lines), gaps=tuple(gaps))

    def compare_brands(
        self,
        cabinet_type: CabinetType,
        requirements: Sequence[HardwareRequirement],
        brand_ids: Iterable[str],
        order_quantity: int = 1,
    ) -> dict[str, HardwareCostResult]:
        """Price the same requirements once per brand.

        Returns:
            Mapping of brand id to its HardwareCostResult, in input order.
        """
        return {
            brand_id: self.calculate(
                cabinet_type,
                requirements,
                HardwareSelection.for_brand(brand_id),
                order_quantity,
            )
            for brand_id in brand_ids
        }

    def _resolve_option(
        self,
        requirement: HardwareRequirement,
        selection: HardwareSelection,
    ) -> tuple[HardwareOption | None, GapReason | None]:
        if selection.mode == SelectionMode.BRAND:
            option = requirement.option_for_brand(selection.brand_id or "")
            if option is None:
                return None, GapReason.NO_BRAND_PRODUCT
            return option, None

        if selection.mode == SelectionMode.PER_REQUIREMENT:
            option_id = selection.option_ids.get(requirement.id)
            if not option_id:
                return None, GapReason.NO_OPTION_SELECTED
            option = requirement.option_by_id(option_id)
            if option is None:
                return None, GapReason.UNKNOWN_OPTION
            return option, None

        return None, GapReason.NO_SELECTION

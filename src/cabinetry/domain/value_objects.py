"""Catalog records consumed by the pricing core.

Every record here is an immutable snapshot of a row supplied by the data
access layer. Required fields are positional; everything the catalog may
leave blank is optional with a documented default.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "CabinetCategory",
    "CabinetPart",
    "CabinetStyle",
    "CabinetType",
    "Color",
    "ConfigurationSource",
    "DoorStyle",
    "DoorStyleFinish",
    "Finish",
    "GlobalSetting",
    "HardwareOption",
    "HardwareProduct",
    "HardwareRequirement",
    "UnitScope",
    "as_amount",
]


def as_amount(value: Any) -> float:
    """Coerce an upstream numeric field to a finite float.

    ``None``, booleans, NaN, infinities and unparsable text all become 0.0 so
    a single bad field degrades the price instead of failing the calculation.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


class CabinetCategory(str, Enum):
    """Catalog grouping of cabinet types."""

    BASE = "base"
    WALL = "wall"
    PANTRY = "pantry"
    DRESS_PANEL = "dress_panel"


class CabinetStyle(str, Enum):
    """Geometry family of a cabinet type."""

    STANDARD = "standard"
    CORNER = "corner"


class UnitScope(str, Enum):
    """Basis on which a hardware requirement's quantity multiplies."""

    PER_CABINET = "per_cabinet"
    PER_DOOR = "per_door"
    PER_DRAWER = "per_drawer"


class ConfigurationSource(str, Enum):
    """Provenance tag of a configuration record."""

    LEGACY = "legacy"
    PRODUCT = "product"
    UNIFIED = "unified"


@dataclass(frozen=True)
class CabinetType:
    """A configurable cabinet type with its dimension envelope in millimetres.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        category: Catalog grouping.
        default_width_mm / default_height_mm / default_depth_mm: Starting size.
        min_*_mm / max_*_mm: Inclusive bounds for each dimension. Unset bounds
            collapse to the default.
        door_count: Number of doors fitted (drives per-door hardware).
        drawer_count: Number of drawers fitted (drives per-drawer hardware).
        backs_qty / bottoms_qty / sides_qty: Carcass panel counts.
        door_qty: Door panels priced as door facing; falls back to door_count.
        cabinet_style: ``standard`` or ``corner``.
        left/right_side_*_mm: Corner defaults; fall back to width/depth.
    """

    id: str
    name: str
    default_width_mm: float
    default_height_mm: float
    default_depth_mm: float
    category: CabinetCategory = CabinetCategory.BASE
    min_width_mm: float | None = None
    max_width_mm: float | None = None
    min_height_mm: float | None = None
    max_height_mm: float | None = None
    min_depth_mm: float | None = None
    max_depth_mm: float | None = None
    door_count: int = 0
    drawer_count: int = 0
    backs_qty: int = 1
    bottoms_qty: int = 1
    sides_qty: int = 2
    door_qty: int | None = None
    cabinet_style: CabinetStyle = CabinetStyle.STANDARD
    left_side_width_mm: float | None = None
    right_side_width_mm: float | None = None
    left_side_depth_mm: float | None = None
    right_side_depth_mm: float | None = None
    default_hardware_brand_id: str | None = None

    def __post_init__(self) -> None:
        for dim in ("width", "height", "depth"):
            low, default, high = self.bounds(dim)
            if not low <= default <= high:
                raise ValueError(
                    f"{dim} bounds must satisfy min <= default <= max "
                    f"(got {low} <= {default} <= {high})"
                )

    @property
    def is_corner(self) -> bool:
        return self.cabinet_style == CabinetStyle.CORNER

    @property
    def resolved_door_qty(self) -> int:
        """Door panel quantity, defaulting from door_count when unset."""
        if self.door_qty is None:
            return self.door_count
        return self.door_qty

    def bounds(self, dimension: str) -> tuple[float, float, float]:
        """Return ``(min, default, max)`` for width, height or depth."""
        default = getattr(self, f"default_{dimension}_mm")
        low = getattr(self, f"min_{dimension}_mm")
        high = getattr(self, f"max_{dimension}_mm")
        return (
            default if low is None else low,
            default,
            default if high is None else high,
        )

    def corner_defaults(self) -> dict[str, float]:
        """Default left/right width and depth for corner geometry."""
        return {
            "left_side_width": self.left_side_width_mm or self.default_width_mm,
            "right_side_width": self.right_side_width_mm or self.default_width_mm,
            "left_side_depth": self.left_side_depth_mm or self.default_depth_mm,
            "right_side_depth": self.right_side_depth_mm or self.default_depth_mm,
        }


@dataclass(frozen=True)
class CabinetPart:
    """A named physical part of a cabinet type."""

    part_name: str
    quantity: int = 1
    is_door: bool = False
    is_hardware: bool = False
    cabinet_type_id: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class GlobalSetting:
    """A raw ``{key, value}`` settings row as stored."""

    setting_key: str
    setting_value: str | None


@dataclass(frozen=True)
class DoorStyle:
    """A door design priced per square metre."""

    id: str
    name: str
    base_rate_per_sqm: float = 0.0


@dataclass(frozen=True)
class Finish:
    """A surface treatment adding a rate per square metre."""

    id: str
    name: str
    rate_per_sqm: float = 0.0
    finish_type: str | None = None
    brand_id: str | None = None


@dataclass(frozen=True)
class DoorStyleFinish:
    """A door style paired with an optional finish."""

    door_style: DoorStyle
    finish: Finish | None = None

    @property
    def base_rate(self) -> float:
        return as_amount(self.door_style.base_rate_per_sqm)

    @property
    def finish_rate(self) -> float:
        if self.finish is None:
            return 0.0
        return as_amount(self.finish.rate_per_sqm)


@dataclass(frozen=True)
class Color:
    """A colour choice belonging to exactly one door style."""

    id: str
    name: str
    door_style_id: str
    surcharge_rate_per_sqm: float = 0.0
    hex_code: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class HardwareProduct:
    """A purchasable hardware item."""

    id: str
    name: str
    brand_id: str
    cost_per_unit: float = 0.0
    model_number: str | None = None


@dataclass(frozen=True)
class HardwareOption:
    """A brand's product satisfying one hardware requirement.

    ``product`` may be absent when the catalog row lost its product link;
    such options cannot be priced and surface as gaps.
    """

    id: str
    requirement_id: str
    brand_id: str
    product: HardwareProduct | None = None


@dataclass(frozen=True)
class HardwareRequirement:
    """A hardware type a cabinet needs, scoped per cabinet, door or drawer."""

    id: str
    hardware_type: str
    unit_scope: UnitScope = UnitScope.PER_CABINET
    units_per_scope: float = 1.0
    options: tuple[HardwareOption, ...] = field(default_factory=tuple)
    notes: str | None = None

    def option_for_brand(self, brand_id: str) -> HardwareOption | None:
        """Return the first option offered by ``brand_id``."""
        for option in self.options:
            if option.brand_id == brand_id:
                return option
        return None

    def option_by_id(self, option_id: str) -> HardwareOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

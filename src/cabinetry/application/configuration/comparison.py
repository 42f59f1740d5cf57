"""Cloning and comparing configurations."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from cabinetry.domain import CabinetConfiguration, utcnow

__all__ = ["ConfigurationDiff", "clone_configuration", "compare_configurations"]

# (attribute, label) pairs compared as millimetre values, in report order.
_DIMENSION_FIELDS: tuple[tuple[str, str], ...] = (
    ("width", "Width"),
    ("height", "Height"),
    ("depth", "Depth"),
    ("right_side_width", "Right Side Width"),
    ("left_side_width", "Left Side Width"),
    ("right_side_depth", "Right Side Depth"),
    ("left_side_depth", "Left Side Depth"),
)

_SELECTION_FIELDS: tuple[tuple[str, str], ...] = (
    ("door_style_id", "Door style"),
    ("color_id", "Color"),
    ("finish_id", "Finish"),
    ("hardware_brand_id", "Hardware brand"),
)


@dataclass
class ConfigurationDiff:
    """Result of comparing configuration ``a`` to ``b``."""

    differences: list[str] = field(default_factory=list)

    @property
    def identical(self) -> bool:
        return not self.differences


def clone_configuration(
    base: CabinetConfiguration,
    overrides: dict[str, Any] | None = None,
    now: Callable[[], datetime] = utcnow,
) -> CabinetConfiguration:
    """Return a copy of ``base`` with ``overrides`` applied.

    ``updated_at`` is refreshed unless the overrides set it explicitly.
    The base configuration is left untouched.

    Raises:
        TypeError: If an override names a field the configuration lacks.
    """
    changes = dict(overrides or {})
    changes.setdefault("updated_at", now())
    return dataclasses.replace(base, **changes)


def _mm(value: float | None) -> str:
    return "unset" if value is None else f"{value:g}mm"


def _same_mm(before: float | None, after: float | None) -> bool:
    if before == after:
        return True
    # NaN never equals itself; two unreadable values are the same value.
    return (
        isinstance(before, float)
        and isinstance(after, float)
        and math.isnan(before)
        and math.isnan(after)
    )


def _describe_selection(label: str, before: str | None, after: str | None) -> str:
    if before is None:
        return f"{label} added"
    if after is None:
        return f"{label} removed"
    return f"{label} changed"


def compare_configurations(
    a: CabinetConfiguration, b: CabinetConfiguration
) -> ConfigurationDiff:
    """Diff two configurations field by field.

    Timestamps and provenance are ignored. Difference strings read from
    ``a`` to ``b`` (e.g. ``"Width: 600mm → 900mm"``).
    """
    diff = ConfigurationDiff()
    for attr, label in _DIMENSION_FIELDS:
        before, after = getattr(a, attr), getattr(b, attr)
        if not _same_mm(before, after):
            diff.differences.append(f"{label}: {_mm(before)} → {_mm(after)}")

    for attr, label in _SELECTION_FIELDS:
        before, after = getattr(a, attr), getattr(b, attr)
        if before != after:
            diff.differences.append(_describe_selection(label, before, after))

    if a.quantity != b.quantity:
        diff.differences.append(f"Quantity: {a.quantity} → {b.quantity}")
    return diff

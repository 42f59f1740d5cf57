"""Canonical configuration entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .value_objects import ConfigurationSource

__all__ = ["CabinetConfiguration", "ConfigurationTemplate", "utcnow"]


def utcnow() -> datetime:
    """Timezone-aware current time used for configuration timestamps."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CabinetConfiguration:
    """A customer's selections for one cabinet line.

    Dimensions are millimetres. Corner cabinets additionally carry left and
    right side width/depth pairs. Instances are never mutated; edits produce
    new instances via ``clone_configuration``.
    ``selected_options`` is compared for equality but left out of the hash.
    """

    width: float
    height: float
    depth: float
    quantity: int = 1
    left_side_width: float | None = None
    right_side_width: float | None = None
    left_side_depth: float | None = None
    right_side_depth: float | None = None
    door_style_id: str | None = None
    color_id: str | None = None
    finish_id: str | None = None
    hardware_brand_id: str | None = None
    notes: str | None = None
    product_id: str | None = None
    product_variant_id: str | None = None
    selected_options: dict[str, str] | None = field(default=None, hash=False)
    configuration_source: ConfigurationSource = ConfigurationSource.UNIFIED
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def has_corner_dimensions(self) -> bool:
        return all(
            value is not None
            for value in (
                self.left_side_width,
                self.right_side_width,
                self.left_side_depth,
                self.right_side_depth,
            )
        )


@dataclass(frozen=True)
class ConfigurationTemplate:
    """A named, saved configuration bound to one cabinet type."""

    id: str
    name: str
    cabinet_type_id: str
    configuration: CabinetConfiguration
    description: str | None = None
    is_default: bool = False
    user_id: str | None = None
    created_at: datetime = field(default_factory=utcnow)

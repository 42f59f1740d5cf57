"""Default construction and validation of cabinet configurations."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from cabinetry.domain import (
    CabinetConfiguration,
    CabinetType,
    ConfigurationSource,
    utcnow,
)

from .validators import (
    CornerDimensionValidator,
    DimensionRangeValidator,
    QuantityValidator,
    SelectionValidator,
    ValidationResult,
    ValidatorRegistry,
)


def create_default_configuration(
    cabinet_type: CabinetType,
    now: Callable[[], datetime] = utcnow,
) -> CabinetConfiguration:
    """Build a unified configuration from a cabinet type's defaults.

    Corner cabinet types also receive their left/right side defaults,
    falling back to the default width and depth.

    Args:
        cabinet_type: The cabinet type to start from.
        now: Clock used for the timestamps.

    Returns:
        A new CabinetConfiguration with quantity 1.
    """
    timestamp = now()
    corner = cabinet_type.corner_defaults() if cabinet_type.is_corner else {}
    return CabinetConfiguration(
        width=cabinet_type.default_width_mm,
        height=cabinet_type.default_height_mm,
        depth=cabinet_type.default_depth_mm,
        quantity=1,
        hardware_brand_id=cabinet_type.default_hardware_brand_id,
        configuration_source=ConfigurationSource.UNIFIED,
        created_at=timestamp,
        updated_at=timestamp,
        **corner,
    )


def default_registry() -> ValidatorRegistry:
    """A fresh registry holding the built-in rules."""
    return ValidatorRegistry(
        [
            DimensionRangeValidator(),
            CornerDimensionValidator(),
            QuantityValidator(),
            SelectionValidator(),
        ]
    )


def validate_configuration(
    config: CabinetConfiguration,
    cabinet_type: CabinetType,
    registry: ValidatorRegistry | None = None,
) -> ValidationResult:
    """Validate a configuration against its cabinet type.

    Never raises for invalid input and never corrects values; problems are
    returned as errors (blocking) or warnings (advisory).
    """
    return (registry or default_registry()).validate_all(config, cabinet_type)

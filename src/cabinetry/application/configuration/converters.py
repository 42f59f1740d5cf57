"""Conversion between legacy, product-catalog and canonical configurations.

Conversions are explicit and one-directional: legacy and product payloads
convert into a canonical CabinetConfiguration tagged with their source, and a
canonical configuration can be exported back into either shape as a new,
separately-tagged payload for interop. Nothing converts implicitly.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cabinetry.application.catalog.loader import (
    ConfigError,
    extract_validation_errors,
    format_validation_error_message,
)

from cabinetry.domain import (
    CabinetConfiguration,
    CabinetType,
    ConfigurationSource,
    utcnow,
)

from .payloads import LegacyConfigurationPayload, ProductConfigurationPayload

__all__ = [
    "FALLBACK_DEPTH_MM",
    "FALLBACK_HEIGHT_MM",
    "FALLBACK_WIDTH_MM",
    "MigrationCheck",
    "SourceSummary",
    "configuration_from_dict",
    "configuration_to_dict",
    "convert_legacy_configuration",
    "convert_product_configuration",
    "migrate_configuration",
    "promote_to_unified",
    "source_tag",
    "summarize_sources",
    "to_legacy_payload",
    "to_product_payload",
    "validate_migration",
]

logger = logging.getLogger(__name__)

# Used only when neither the payload nor a cabinet type supplies a size.
FALLBACK_WIDTH_MM = 300.0
FALLBACK_HEIGHT_MM = 720.0
FALLBACK_DEPTH_MM = 560.0

RawPayload = Mapping[str, Any] | BaseModel | None

_CANONICAL = TypeAdapter(CabinetConfiguration)
_CANONICAL_FIELDS = frozenset(f.name for f in dataclasses.fields(CabinetConfiguration))


def _positive(value: float | None) -> float | None:
    return value if value is not None and value > 0 else None


def _first(*values: float | None) -> float:
    return next(value for value in values if value is not None)


def _load(model: type[BaseModel], raw: RawPayload) -> Any:
    if isinstance(raw, model):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        return model()
    return model.model_validate(dict(raw))


def _resolve_dimensions(
    width: float | None,
    height: float | None,
    depth: float | None,
    type_defaults: tuple[float | None, float | None, float | None],
) -> tuple[float, float, float]:
    default_w, default_h, default_d = type_defaults
    return (
        _first(_positive(width), _positive(default_w), FALLBACK_WIDTH_MM),
        _first(_positive(height), _positive(default_h), FALLBACK_HEIGHT_MM),
        _first(_positive(depth), _positive(default_d), FALLBACK_DEPTH_MM),
    )


def _type_defaults(
    cabinet_type: CabinetType | None,
) -> tuple[float | None, float | None, float | None]:
    if cabinet_type is None:
        return (None, None, None)
    return (
        cabinet_type.default_width_mm,
        cabinet_type.default_height_mm,
        cabinet_type.default_depth_mm,
    )


def _quantity(value: int | None) -> int:
    return value if value is not None and value >= 1 else 1


def _corner_sides(
    cabinet_type: CabinetType | None, **sides: float | None
) -> dict[str, float | None]:
    """Fill missing corner sides from a corner cabinet type's defaults."""
    if cabinet_type is None or not cabinet_type.is_corner:
        return sides
    defaults = cabinet_type.corner_defaults()
    return {
        name: _first(_positive(value), defaults[name]) for name, value in sides.items()
    }


def convert_legacy_configuration(
    raw: RawPayload,
    cabinet_type: CabinetType | None = None,
    now: Callable[[], datetime] = utcnow,
) -> CabinetConfiguration:
    """Convert a legacy configurator payload into the canonical form.

    Missing or non-positive dimensions fall back to ``cabinet_type``'s
    defaults, then to the cabinet type embedded in the payload, then to the
    module fallbacks. When ``cabinet_type`` is a corner type, missing side
    widths and depths take its corner defaults. Style, colour, finish and
    hardware brand ids are kept when present.

    Args:
        raw: Legacy payload as a mapping or LegacyConfigurationPayload.
        cabinet_type: Optional authoritative cabinet type for defaults.
        now: Clock used for the timestamps.

    Returns:
        CabinetConfiguration tagged ``legacy``.
    """
    payload: LegacyConfigurationPayload = _load(LegacyConfigurationPayload, raw)
    defaults = _type_defaults(cabinet_type)
    if cabinet_type is None and payload.cabinet_type is not None:
        embedded = payload.cabinet_type
        defaults = (
            embedded.default_width_mm,
            embedded.default_height_mm,
            embedded.default_depth_mm,
        )
    width, height, depth = _resolve_dimensions(
        payload.width, payload.height, payload.depth, defaults
    )
    sides = _corner_sides(
        cabinet_type,
        left_side_width=payload.left_side_width,
        right_side_width=payload.right_side_width,
        left_side_depth=payload.left_side_depth,
        right_side_depth=payload.right_side_depth,
    )
    timestamp = now()

    config = CabinetConfiguration(
        width=width,
        height=height,
        depth=depth,
        quantity=_quantity(payload.quantity),
        **sides,
        door_style_id=payload.door_style.id if payload.door_style else None,
        color_id=payload.color.id if payload.color else None,
        finish_id=payload.finish.id if payload.finish else None,
        hardware_brand_id=payload.hardware_brand.id if payload.hardware_brand else None,
        notes=payload.notes,
        configuration_source=ConfigurationSource.LEGACY,
        created_at=timestamp,
        updated_at=timestamp,
    )
    logger.debug(f"Converted legacy payload to {width:g}x{height:g}x{depth:g}")
    return config


def convert_product_configuration(
    raw: RawPayload,
    cabinet_type: CabinetType | None = None,
    now: Callable[[], datetime] = utcnow,
) -> CabinetConfiguration:
    """Convert a product-catalog payload into the canonical form.

    Product payloads carry no style selections; they keep the product,
    variant and selected option map instead.

    Returns:
        CabinetConfiguration tagged ``product``.
    """
    payload: ProductConfigurationPayload = _load(ProductConfigurationPayload, raw)
    dims = payload.dimensions
    width, height, depth = _resolve_dimensions(
        dims.width if dims else None,
        dims.height if dims else None,
        dims.depth if dims else None,
        _type_defaults(cabinet_type),
    )
    timestamp = now()
    return CabinetConfiguration(
        width=width,
        height=height,
        depth=depth,
        quantity=_quantity(payload.quantity),
        **_corner_sides(
            cabinet_type,
            left_side_width=None,
            right_side_width=None,
            left_side_depth=None,
            right_side_depth=None,
        ),
        product_id=payload.product_id,
        product_variant_id=payload.product_variant.id if payload.product_variant else None,
        selected_options=payload.selected_options,
        notes=payload.notes,
        configuration_source=ConfigurationSource.PRODUCT,
        created_at=timestamp,
        updated_at=timestamp,
    )


def promote_to_unified(
    config: CabinetConfiguration,
    now: Callable[[], datetime] = utcnow,
) -> CabinetConfiguration:
    """Return a copy tagged ``unified``; unified configurations pass through."""
    if config.configuration_source == ConfigurationSource.UNIFIED:
        return config
    return dataclasses.replace(
        config,
        configuration_source=ConfigurationSource.UNIFIED,
        updated_at=now(),
    )


def _reference(value: str | None) -> dict[str, str] | None:
    return {"id": value} if value else None


def to_legacy_payload(config: CabinetConfiguration) -> dict[str, Any]:
    """Export a configuration in the legacy configurator's shape."""
    return {
        "width": config.width,
        "height": config.height,
        "depth": config.depth,
        "quantity": config.quantity,
        "rightSideWidth": config.right_side_width,
        "leftSideWidth": config.left_side_width,
        "rightSideDepth": config.right_side_depth,
        "leftSideDepth": config.left_side_depth,
        "doorStyle": _reference(config.door_style_id),
        "color": _reference(config.color_id),
        "finish": _reference(config.finish_id),
        "hardwareBrand": _reference(config.hardware_brand_id),
        "notes": config.notes,
        "configurationSource": ConfigurationSource.LEGACY.value,
    }


def to_product_payload(config: CabinetConfiguration) -> dict[str, Any]:
    """Export a configuration in the product-catalog flow's shape."""
    return {
        "productId": config.product_id,
        "productVariant": _reference(config.product_variant_id),
        "selectedOptions": dict(config.selected_options or {}),
        "dimensions": {
            "width": config.width,
            "height": config.height,
            "depth": config.depth,
        },
        "quantity": config.quantity,
        "notes": config.notes,
        "configurationSource": ConfigurationSource.PRODUCT.value,
    }


def source_tag(data: Mapping[str, Any]) -> str:
    """Return the provenance tag of a raw payload, defaulting to legacy."""
    tag = data.get("configurationSource") or data.get("configuration_source")
    return str(tag or ConfigurationSource.LEGACY.value)


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _canonical_document(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase keys onto configuration fields, rejecting unknown keys."""
    document: dict[str, Any] = {}
    unknown: list[dict[str, Any]] = []
    for key, value in data.items():
        name = _snake_case(str(key))
        if name in _CANONICAL_FIELDS:
            document[name] = value
        else:
            unknown.append(
                {
                    "path": str(key),
                    "message": "Unknown configuration field",
                    "value": value,
                    "error_type": "extra_forbidden",
                }
            )
    if unknown:
        raise ConfigError(
            message=format_validation_error_message(
                unknown, title="Configuration validation failed:"
            ),
            error_type="validation",
            details=unknown,
        )
    return document


def configuration_from_dict(
    data: Mapping[str, Any],
    cabinet_type: CabinetType | None = None,
) -> CabinetConfiguration:
    """Build a configuration from any tagged payload.

    Legacy and product payloads go through their lenient converters.
    Unified documents are validated strictly; their keys may be snake_case
    or camelCase but must name configuration fields.

    Raises:
        ConfigError: If a unified document has unknown keys or fails
            validation.
    """
    tag = source_tag(data)
    if tag == ConfigurationSource.UNIFIED.value:
        document = _canonical_document(data)
        try:
            return _CANONICAL.validate_python(document)
        except PydanticValidationError as e:
            details = extract_validation_errors(e)
            raise ConfigError(
                message=format_validation_error_message(
                    details, title="Configuration validation failed:"
                ),
                error_type="validation",
                details=details,
            ) from e
    if tag == ConfigurationSource.PRODUCT.value:
        return convert_product_configuration(data, cabinet_type)
    return convert_legacy_configuration(data, cabinet_type)


def configuration_to_dict(config: CabinetConfiguration) -> dict[str, Any]:
    """Serialise a configuration in its canonical JSON-ready shape."""
    return _CANONICAL.dump_python(config, mode="json")


def migrate_configuration(
    source: CabinetConfiguration | Mapping[str, Any],
    target: ConfigurationSource,
    cabinet_type: CabinetType | None = None,
) -> CabinetConfiguration | dict[str, Any]:
    """Move a configuration to the target representation.

    - ``unified``: raw payloads are read according to their
      ``configurationSource`` tag (default legacy) and then promoted.
    - ``legacy`` / ``product``: a canonical configuration (or raw payload,
      converted first) is exported as a new payload of that shape.
    """
    target = ConfigurationSource(target)
    if isinstance(source, CabinetConfiguration):
        config = source
    else:
        config = configuration_from_dict(source, cabinet_type)

    if target == ConfigurationSource.UNIFIED:
        return promote_to_unified(config)
    if target == ConfigurationSource.LEGACY:
        return to_legacy_payload(config)
    return to_product_payload(config)


@dataclass
class MigrationCheck:
    """Outcome of comparing a source payload with its migrated form."""

    warnings: list[str] = field(default_factory=list)
    has_essential_data: bool = True

    @property
    def is_valid(self) -> bool:
        # Minor drift is tolerated; three or more drifted fields is not.
        return self.has_essential_data and len(self.warnings) < 3


def validate_migration(
    original: Mapping[str, Any], migrated: CabinetConfiguration
) -> MigrationCheck:
    """Report dimension and quantity drift introduced by a migration."""
    check = MigrationCheck()
    dims = original.get("dimensions")
    if not isinstance(dims, Mapping):
        dims = original
    for name in ("width", "height", "depth"):
        if dims.get(name) != getattr(migrated, name):
            check.warnings.append(
                f"{name.capitalize()} dimension changed during migration"
            )
    if original.get("quantity") != migrated.quantity:
        check.warnings.append("Quantity changed during migration")
    check.has_essential_data = (
        migrated.width > 0 and migrated.height > 0 and migrated.depth > 0
    )
    return check


@dataclass(frozen=True)
class SourceSummary:
    """Number of configurations per provenance tag."""

    legacy: int = 0
    product: int = 0
    unified: int = 0

    @property
    def total(self) -> int:
        return self.legacy + self.product + self.unified


def summarize_sources(
    configs: Iterable[CabinetConfiguration | Mapping[str, Any]],
) -> SourceSummary:
    """Count configurations by source tag.

    Untagged payloads count as legacy; unrecognised tags are skipped.
    """
    counts = {source.value: 0 for source in ConfigurationSource}
    for config in configs:
        if isinstance(config, CabinetConfiguration):
            tag = config.configuration_source.value
        else:
            tag = source_tag(config)
        if tag in counts:
            counts[tag] += 1
    return SourceSummary(**counts)

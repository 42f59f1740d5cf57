"""Pydantic schemas for externally-shaped configuration payloads.

Legacy and product-catalog payloads arrive as camelCase JSON. Every field is
optional and malformed scalars are coerced to None, so conversion never fails
on a partially-populated record.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "DimensionsPayload",
    "LegacyCabinetTypePayload",
    "LegacyConfigurationPayload",
    "ProductConfigurationPayload",
    "ReferencePayload",
]


def _coerce_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _coerce_count(value: Any) -> int | None:
    number = _coerce_number(value)
    if number is None:
        return None
    return int(number)


def _coerce_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ReferencePayload(_Payload):
    """A nested ``{"id": ...}`` reference to a catalog record."""

    id: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _text_id(cls, value: Any) -> str | None:
        return _coerce_text(value)


def _coerce_reference(value: Any) -> Any:
    # Some legacy rows store the bare id instead of a nested object.
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return {"id": value}
    if isinstance(value, dict):
        return value
    return None


class LegacyCabinetTypePayload(_Payload):
    """The cabinet type snapshot embedded in legacy payloads."""

    id: str | None = None
    default_width_mm: float | None = None
    default_height_mm: float | None = None
    default_depth_mm: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _text_id(cls, value: Any) -> str | None:
        return _coerce_text(value)

    @field_validator(
        "default_width_mm", "default_height_mm", "default_depth_mm", mode="before"
    )
    @classmethod
    def _numbers(cls, value: Any) -> float | None:
        return _coerce_number(value)


class LegacyConfigurationPayload(_Payload):
    """Configuration as produced by the legacy configurator."""

    width: float | None = None
    height: float | None = None
    depth: float | None = None
    quantity: int | None = None
    right_side_width: float | None = Field(default=None, alias="rightSideWidth")
    left_side_width: float | None = Field(default=None, alias="leftSideWidth")
    right_side_depth: float | None = Field(default=None, alias="rightSideDepth")
    left_side_depth: float | None = Field(default=None, alias="leftSideDepth")
    door_style: ReferencePayload | None = Field(default=None, alias="doorStyle")
    color: ReferencePayload | None = None
    finish: ReferencePayload | None = None
    hardware_brand: ReferencePayload | None = Field(default=None, alias="hardwareBrand")
    cabinet_type: LegacyCabinetTypePayload | None = Field(
        default=None, alias="cabinetType"
    )
    notes: str | None = None
    configuration_source: str | None = Field(default="legacy", alias="configurationSource")

    @field_validator(
        "width",
        "height",
        "depth",
        "right_side_width",
        "left_side_width",
        "right_side_depth",
        "left_side_depth",
        mode="before",
    )
    @classmethod
    def _numbers(cls, value: Any) -> float | None:
        return _coerce_number(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int | None:
        return _coerce_count(value)

    @field_validator("door_style", "color", "finish", "hardware_brand", mode="before")
    @classmethod
    def _references(cls, value: Any) -> Any:
        return _coerce_reference(value)

    @field_validator("cabinet_type", mode="before")
    @classmethod
    def _cabinet_type(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("notes", "configuration_source", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _coerce_text(value)


class DimensionsPayload(_Payload):
    width: float | None = None
    height: float | None = None
    depth: float | None = None

    @field_validator("width", "height", "depth", mode="before")
    @classmethod
    def _numbers(cls, value: Any) -> float | None:
        return _coerce_number(value)


class ProductConfigurationPayload(_Payload):
    """Configuration as produced by the product-catalog flow."""

    product_id: str | None = Field(default=None, alias="productId")
    product_variant: ReferencePayload | None = Field(default=None, alias="productVariant")
    selected_options: dict[str, str] | None = Field(default=None, alias="selectedOptions")
    dimensions: DimensionsPayload | None = None
    quantity: int | None = None
    notes: str | None = None
    configuration_source: str | None = Field(default="product", alias="configurationSource")

    @field_validator("product_id", "notes", "configuration_source", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _coerce_text(value)

    @field_validator("product_variant", mode="before")
    @classmethod
    def _reference(cls, value: Any) -> Any:
        return _coerce_reference(value)

    @field_validator("selected_options", mode="before")
    @classmethod
    def _options(cls, value: Any) -> dict[str, str] | None:
        if not isinstance(value, dict):
            return None
        return {
            str(key): str(option)
            for key, option in value.items()
            if option is not None and not isinstance(option, (dict, list))
        }

    @field_validator("dimensions", mode="before")
    @classmethod
    def _dimensions(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("quantity", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int | None:
        return _coerce_count(value)

"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinetry.domain import ConfigurationSource


class PriceRequest(BaseModel):
    """Request for pricing one cabinet."""

    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")
    width: float | None = Field(default=None, gt=0, description="Width in mm")
    height: float | None = Field(default=None, gt=0, description="Height in mm")
    depth: float | None = Field(default=None, gt=0, description="Depth in mm")
    door_style_id: str | None = Field(default=None, description="Door style id")
    finish_id: str | None = Field(default=None, description="Finish id")
    color_id: str | None = Field(default=None, description="Colour id")
    hardware_brand_id: str | None = Field(
        default=None, description="Brand applied to every hardware requirement"
    )
    hardware_options: dict[str, str] | None = Field(
        default=None, description="Per-requirement option ids, keyed by requirement id"
    )
    quantity: int = Field(default=1, ge=1, description="Number of cabinets ordered")
    hardware_cost: float | None = Field(
        default=None, ge=0, description="Flat hardware amount instead of resolving requirements"
    )


class HardwareRequest(BaseModel):
    """Request for resolving hardware requirements."""

    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")
    hardware_brand_id: str | None = Field(default=None, description="Brand id")
    hardware_options: dict[str, str] | None = Field(
        default=None, description="Per-requirement option ids"
    )
    quantity: int = Field(default=1, ge=1, description="Number of cabinets ordered")


class HardwareCompareRequest(BaseModel):
    """Request for comparing hardware brands."""

    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")
    brand_ids: list[str] | None = Field(
        default=None, description="Brands to compare (default: every brand offered)"
    )
    quantity: int = Field(default=1, ge=1, description="Number of cabinets ordered")


class DefaultConfigurationRequest(BaseModel):
    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")


class ValidateConfigurationRequest(BaseModel):
    """Request for validating a configuration against a cabinet type."""

    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")
    configuration: dict[str, Any] = Field(
        ..., description="Tagged configuration payload (legacy, product or unified)"
    )


class ConvertConfigurationRequest(BaseModel):
    """Request for converting a configuration between representations."""

    configuration: dict[str, Any] = Field(..., description="Tagged configuration payload")
    target: ConfigurationSource = Field(
        default=ConfigurationSource.UNIFIED, description="Target representation"
    )
    cabinet_type_id: str | None = Field(
        default=None, description="Cabinet type used to fill missing dimensions"
    )


class CompareConfigurationsRequest(BaseModel):
    """Request for comparing two configurations (differences read a -> b)."""

    a: dict[str, Any] = Field(..., description="First configuration payload")
    b: dict[str, Any] = Field(..., description="Second configuration payload")
    cabinet_type_id: str | None = Field(default=None, description="Cabinet type id")


class SaveTemplateRequest(BaseModel):
    """Request for saving a configuration template."""

    name: str = Field(..., min_length=1, description="Template name")
    cabinet_type_id: str = Field(..., min_length=1, description="Cabinet type id")
    configuration: dict[str, Any] = Field(..., description="Tagged configuration payload")
    description: str | None = Field(default=None, description="Template description")
    is_default: bool = Field(default=False, description="Visible to every user")
    user_id: str | None = Field(default=None, description="Owning user id")

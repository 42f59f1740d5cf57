"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")


class HardwareLineSchema(BaseModel):
    """A priced hardware requirement."""

    requirement_id: str
    hardware_type: str
    unit_scope: str
    option_id: str
    brand_id: str
    product_id: str
    product_name: str
    quantity: float = Field(..., description="Resolved unit quantity")
    unit_cost: float
    cost: float


class HardwareGapSchema(BaseModel):
    """A requirement that could not be priced."""

    requirement_id: str
    hardware_type: str
    reason: str
    message: str


class HardwareCostSchema(BaseModel):
    """Response for hardware resolution."""

    total: float = Field(..., description="Sum of priced lines")
    is_complete: bool = Field(..., description="Whether every requirement was priced")
    lines: list[HardwareLineSchema] = Field(default_factory=list)
    gaps: list[HardwareGapSchema] = Field(default_factory=list)


class HardwareComparisonSchema(BaseModel):
    """Hardware results per brand."""

    brands: dict[str, HardwareCostSchema] = Field(default_factory=dict)


class PriceResponseSchema(BaseModel):
    """Response for pricing one cabinet."""

    price: float = Field(..., description="Price of one cabinet including GST")
    formatted_price: str = Field(..., description="Price of one cabinet as currency text")
    quantity: int = Field(default=1, ge=1, description="Number of cabinets ordered")
    order_total: float = Field(..., description="Price of one cabinet times quantity")
    breakdown: dict[str, Any] = Field(..., description="Every line item and its inputs")
    warnings: list[str] = Field(default_factory=list, description="Data-gap warnings")


class ConfigurationResponseSchema(BaseModel):
    """A configuration in canonical or exported form."""

    configuration: dict[str, Any]


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ComparisonSchema(BaseModel):
    """Response for configuration comparison."""

    identical: bool
    differences: list[str] = Field(default_factory=list)


class TemplateSchema(BaseModel):
    """A saved configuration template."""

    id: str
    name: str
    cabinet_type_id: str
    description: str | None = None
    is_default: bool = False
    user_id: str | None = None
    created_at: datetime
    configuration: dict[str, Any]


class TemplateListSchema(BaseModel):
    """Response for listing templates."""

    templates: list[TemplateSchema] = Field(default_factory=list)

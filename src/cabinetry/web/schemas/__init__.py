"""Pydantic schemas for the REST API."""

from cabinetry.web.schemas.requests import (
    CompareConfigurationsRequest,
    ConvertConfigurationRequest,
    DefaultConfigurationRequest,
    HardwareCompareRequest,
    HardwareRequest,
    PriceRequest,
    SaveTemplateRequest,
    ValidateConfigurationRequest,
)
from cabinetry.web.schemas.responses import (
    ComparisonSchema,
    ConfigurationResponseSchema,
    ErrorResponseSchema,
    HardwareComparisonSchema,
    HardwareCostSchema,
    HardwareGapSchema,
    HardwareLineSchema,
    PriceResponseSchema,
    TemplateListSchema,
    TemplateSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CompareConfigurationsRequest",
    "ConvertConfigurationRequest",
    "DefaultConfigurationRequest",
    "HardwareCompareRequest",
    "HardwareRequest",
    "PriceRequest",
    "SaveTemplateRequest",
    "ValidateConfigurationRequest",
    # Responses
    "ComparisonSchema",
    "ConfigurationResponseSchema",
    "ErrorResponseSchema",
    "HardwareComparisonSchema",
    "HardwareCostSchema",
    "HardwareGapSchema",
    "HardwareLineSchema",
    "PriceResponseSchema",
    "TemplateListSchema",
    "TemplateSchema",
    "ValidationResultSchema",
]

"""Application layer - pricing entry points, configuration and templates."""

from cabinetry.application.configuration import (
    ConfigurationDiff,
    ConfigurationHistory,
    ValidationResult,
    clone_configuration,
    compare_configurations,
    convert_legacy_configuration,
    convert_product_configuration,
    create_default_configuration,
    migrate_configuration,
    validate_configuration,
)
from cabinetry.application.pricing import (
    calculate_hardware_cost,
    calculate_price,
    compare_hardware_brands,
    generate_price_table,
)
from cabinetry.application.templates import (
    InMemoryTemplateRepository,
    JsonFileTemplateRepository,
    TemplateManager,
    TemplateNotFoundError,
    TemplateStoreError,
)

__all__ = [
    "ConfigurationDiff",
    "ConfigurationHistory",
    "InMemoryTemplateRepository",
    "JsonFileTemplateRepository",
    "TemplateManager",
    "TemplateNotFoundError",
    "TemplateStoreError",
    "ValidationResult",
    "calculate_hardware_cost",
    "calculate_price",
    "clone_configuration",
    "compare_configurations",
    "compare_hardware_brands",
    "convert_legacy_configuration",
    "convert_product_configuration",
    "create_default_configuration",
    "generate_price_table",
    "migrate_configuration",
    "validate_configuration",
]

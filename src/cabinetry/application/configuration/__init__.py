"""Configuration model, validation and reconciliation.

This package owns the canonical CabinetConfiguration lifecycle:
- default construction from a cabinet type and validation against it
- conversion from legacy and product-catalog payloads (and back, for interop)
- cloning, comparison and in-session history
"""

from cabinetry.application.configuration.comparison import (
    ConfigurationDiff,
    clone_configuration,
    compare_configurations,
)
from cabinetry.application.configuration.converters import (
    FALLBACK_DEPTH_MM,
    FALLBACK_HEIGHT_MM,
    FALLBACK_WIDTH_MM,
    MigrationCheck,
    SourceSummary,
    configuration_from_dict,
    configuration_to_dict,
    convert_legacy_configuration,
    convert_product_configuration,
    migrate_configuration,
    promote_to_unified,
    summarize_sources,
    to_legacy_payload,
    to_product_payload,
    validate_migration,
)
from cabinetry.application.configuration.history import (
    DEFAULT_HISTORY_LIMIT,
    ConfigurationHistory,
)
from cabinetry.application.configuration.model import (
    create_default_configuration,
    default_registry,
    validate_configuration,
)
from cabinetry.application.configuration.payloads import (
    LegacyConfigurationPayload,
    ProductConfigurationPayload,
)
from cabinetry.application.configuration.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    ValidatorRegistry,
)

__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "FALLBACK_DEPTH_MM",
    "FALLBACK_HEIGHT_MM",
    "FALLBACK_WIDTH_MM",
    "ConfigurationDiff",
    "ConfigurationHistory",
    "LegacyConfigurationPayload",
    "MigrationCheck",
    "ProductConfigurationPayload",
    "SourceSummary",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "clone_configuration",
    "compare_configurations",
    "configuration_from_dict",
    "configuration_to_dict",
    "convert_legacy_configuration",
    "convert_product_configuration",
    "create_default_configuration",
    "default_registry",
    "migrate_configuration",
    "promote_to_unified",
    "summarize_sources",
    "to_legacy_payload",
    "to_product_payload",
    "validate_configuration",
    "validate_migration",
]

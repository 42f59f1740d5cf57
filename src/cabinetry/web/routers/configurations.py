"""Configuration endpoints: defaults, validation, conversion and comparison."""

from fastapi import APIRouter

from cabinetry.application.configuration import (
    compare_configurations,
    configuration_from_dict,
    configuration_to_dict,
    create_default_configuration,
    migrate_configuration,
    validate_configuration,
)
from cabinetry.domain import CabinetConfiguration
from cabinetry.web.dependencies import CatalogDep
from cabinetry.web.schemas.requests import (
    CompareConfigurationsRequest,
    ConvertConfigurationRequest,
    DefaultConfigurationRequest,
    ValidateConfigurationRequest,
)
from cabinetry.web.schemas.responses import (
    ComparisonSchema,
    ConfigurationResponseSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/configurations", tags=["configurations"])


@router.post("/default", response_model=ConfigurationResponseSchema)
async def default_configuration(
    request: DefaultConfigurationRequest,
    catalog: CatalogDep,
) -> ConfigurationResponseSchema:
    """Build the default configuration for a cabinet type."""
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    config = create_default_configuration(cabinet_type)
    return ConfigurationResponseSchema(configuration=configuration_to_dict(config))


@router.post("/validate", response_model=ValidationResultSchema)
async def validate(
    request: ValidateConfigurationRequest,
    catalog: CatalogDep,
) -> ValidationResultSchema:
    """Validate a configuration against its cabinet type.

    An invalid configuration is a normal 200 response with ``is_valid``
    false; only unreadable payloads produce error responses.
    """
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    config = configuration_from_dict(request.configuration, cabinet_type)
    result = validate_configuration(config, cabinet_type)
    return ValidationResultSchema.model_validate(result.to_dict())


@router.post("/convert", response_model=ConfigurationResponseSchema)
async def convert(
    request: ConvertConfigurationRequest,
    catalog: CatalogDep,
) -> ConfigurationResponseSchema:
    """Convert a configuration to the target representation."""
    cabinet_type = (
        catalog.cabinet_type(request.cabinet_type_id) if request.cabinet_type_id else None
    )
    migrated = migrate_configuration(request.configuration, request.target, cabinet_type)
    if isinstance(migrated, CabinetConfiguration):
        return ConfigurationResponseSchema(configuration=configuration_to_dict(migrated))
    return ConfigurationResponseSchema(configuration=migrated)


@router.post("/compare", response_model=ComparisonSchema)
async def compare(
    request: CompareConfigurationsRequest,
    catalog: CatalogDep,
) -> ComparisonSchema:
    """Compare two configurations; differences read from ``a`` to ``b``."""
    cabinet_type = (
        catalog.cabinet_type(request.cabinet_type_id) if request.cabinet_type_id else None
    )
    diff = compare_configurations(
        configuration_from_dict(request.a, cabinet_type),
        configuration_from_dict(request.b, cabinet_type),
    )
    return ComparisonSchema(identical=diff.identical, differences=diff.differences)

"""Template management endpoints."""

from fastapi import APIRouter, Response, status

from cabinetry.application.configuration import (
    configuration_from_dict,
    configuration_to_dict,
)
from cabinetry.application.templates import TemplateNotFoundError
from cabinetry.domain import ConfigurationTemplate
from cabinetry.web.dependencies import CatalogDep, TemplateManagerDep
from cabinetry.web.schemas.requests import SaveTemplateRequest
from cabinetry.web.schemas.responses import TemplateListSchema, TemplateSchema

router = APIRouter(prefix="/templates", tags=["templates"])


def _to_schema(template: ConfigurationTemplate) -> TemplateSchema:
    return TemplateSchema(
        id=template.id,
        name=template.name,
        cabinet_type_id=template.cabinet_type_id,
        description=template.description,
        is_default=template.is_default,
        user_id=template.user_id,
        created_at=template.created_at,
        configuration=configuration_to_dict(template.configuration),
    )


@router.get("", response_model=TemplateListSchema)
async def list_templates(
    manager: TemplateManagerDep,
    cabinet_type_id: str | None = None,
    user_id: str | None = None,
) -> TemplateListSchema:
    """List visible templates, newest first.

    Without ``user_id`` only default templates are returned.
    """
    templates = manager.load_templates(cabinet_type_id, user_id)
    return TemplateListSchema(templates=[_to_schema(t) for t in templates])


@router.post("", response_model=TemplateSchema, status_code=status.HTTP_201_CREATED)
async def save_template(
    request: SaveTemplateRequest,
    manager: TemplateManagerDep,
    catalog: CatalogDep,
) -> TemplateSchema:
    """Save a configuration as a template.

    Legacy and product payloads take missing dimensions from the template's
    cabinet type.

    Raises:
        UnknownRecordError: If the cabinet type does not exist (404).
    """
    cabinet_type = catalog.cabinet_type(request.cabinet_type_id)
    template = manager.save_template(
        request.name,
        request.cabinet_type_id,
        configuration_from_dict(request.configuration, cabinet_type),
        description=request.description,
        is_default=request.is_default,
        user_id=request.user_id,
    )
    return _to_schema(template)


@router.get("/{template_id}", response_model=TemplateSchema)
async def get_template(
    template_id: str,
    manager: TemplateManagerDep,
) -> TemplateSchema:
    """Get one template.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    return _to_schema(manager.get_template(template_id))


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: str,
    manager: TemplateManagerDep,
) -> Response:
    """Delete a template; 404 when no template has this id."""
    if not manager.delete_template(template_id):
        raise TemplateNotFoundError(template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

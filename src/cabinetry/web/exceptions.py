"""Error handlers for the REST API.

Every handled error is returned as ``{"error", "error_type", "details"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinetry.application.catalog import ConfigError, UnknownRecordError
from cabinetry.application.templates import TemplateNotFoundError, TemplateStoreError

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, error: str, error_type: str, details: object = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        if exc.error_type == "validation":
            return _error_response(422, exc.message, exc.error_type, exc.details)
        logger.error(f"Catalog error: {exc.message}")
        return _error_response(500, exc.message, exc.error_type, exc.details or None)

    @app.exception_handler(UnknownRecordError)
    async def unknown_record_handler(
        request: Request, exc: UnknownRecordError
    ) -> JSONResponse:
        return _error_response(
            404, str(exc), "not_found", {"kind": exc.kind, "id": exc.record_id}
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return _error_response(404, str(exc), "not_found", {"id": exc.template_id})

    @app.exception_handler(TemplateStoreError)
    async def template_store_handler(
        request: Request, exc: TemplateStoreError
    ) -> JSONResponse:
        logger.error(f"Template store error: {exc}")
        return _error_response(500, str(exc), "template_store")

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return _error_response(422, str(exc), "invalid_value")

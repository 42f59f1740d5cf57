"""API routers for the REST API."""

from cabinetry.web.routers.configurations import router as configurations_router
from cabinetry.web.routers.pricing import router as pricing_router
from cabinetry.web.routers.templates import router as templates_router

__all__ = [
    "configurations_router",
    "pricing_router",
    "templates_router",
]

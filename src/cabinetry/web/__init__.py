"""FastAPI REST API for cabinet pricing and configuration.

Usage:
    CABINETRY_CATALOG=catalog.json uvicorn cabinetry.web:app --reload
"""

from cabinetry.web.app import app, create_app

__all__ = ["app", "create_app"]

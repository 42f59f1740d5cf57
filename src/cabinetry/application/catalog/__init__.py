"""Catalog documents: JSON loading, schema validation and domain adaptation."""

from cabinetry.application.catalog.adapter import Catalog, UnknownRecordError, build_catalog
from cabinetry.application.catalog.loader import (
    ConfigError,
    extract_validation_errors,
    format_validation_error_message,
    load_catalog,
    load_catalog_from_dict,
    read_json_file,
)
from cabinetry.application.catalog.schemas import CatalogSchema

__all__ = [
    "Catalog",
    "CatalogSchema",
    "ConfigError",
    "UnknownRecordError",
    "build_catalog",
    "extract_validation_errors",
    "format_validation_error_message",
    "load_catalog",
    "load_catalog_from_dict",
    "read_json_file",
]

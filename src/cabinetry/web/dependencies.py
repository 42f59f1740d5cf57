"""FastAPI dependency injection for the catalog and template store.

The catalog document is read from the path in ``CABINETRY_CATALOG``.
Templates persist to ``CABINETRY_TEMPLATES`` when set, otherwise they live
in memory for the life of the process.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from cabinetry.application.catalog import Catalog, ConfigError, build_catalog, load_catalog
from cabinetry.application.templates import (
    InMemoryTemplateRepository,
    JsonFileTemplateRepository,
    TemplateManager,
)

CATALOG_ENV = "CABINETRY_CATALOG"
TEMPLATES_ENV = "CABINETRY_TEMPLATES"


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Get the cached Catalog.

    Raises:
        ConfigError: If no catalog path is configured or it fails to load.
    """
    path = os.environ.get(CATALOG_ENV)
    if not path:
        raise ConfigError(
            message=f"No catalog configured; set {CATALOG_ENV}",
            error_type="catalog_unavailable",
        )
    return build_catalog(load_catalog(Path(path)))


@lru_cache(maxsize=1)
def get_template_manager() -> TemplateManager:
    """Get the cached TemplateManager."""
    path = os.environ.get(TEMPLATES_ENV)
    if path:
        return TemplateManager(JsonFileTemplateRepository(Path(path)))
    return TemplateManager(InMemoryTemplateRepository())


# Type aliases for cleaner endpoint signatures
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]

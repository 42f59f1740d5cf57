"""Saved configuration templates.

This package provides TemplateManager, which scopes saved templates by
cabinet type and owning user, and the repositories it persists through.
"""

from cabinetry.application.templates.manager import (
    TemplateManager,
    TemplateNotFoundError,
    TemplateStoreError,
)
from cabinetry.application.templates.repositories import (
    InMemoryTemplateRepository,
    JsonFileTemplateRepository,
)

__all__ = [
    "InMemoryTemplateRepository",
    "JsonFileTemplateRepository",
    "TemplateManager",
    "TemplateNotFoundError",
    "TemplateStoreError",
]

"""Persistence protocol for configuration templates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinetry.domain import ConfigurationTemplate


@runtime_checkable
class TemplateRepository(Protocol):
    """Storage for ConfigurationTemplate records.

    Implementations are thin pass-throughs to an external store and hold
    no pricing or visibility logic; TemplateManager applies scoping.
    """

    def add(self, template: ConfigurationTemplate) -> ConfigurationTemplate:
        """Persist a new template and return the stored record."""
        ...

    def list_all(self) -> list[ConfigurationTemplate]:
        """Return every stored template."""
        ...

    def remove(self, template_id: str) -> bool:
        """Delete a template; return whether a record was removed."""
        ...

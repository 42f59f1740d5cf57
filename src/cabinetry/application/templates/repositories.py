"""Template repositories.

InMemoryTemplateRepository keeps records for the lifetime of the process;
JsonFileTemplateRepository persists them to a single JSON document.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cabinetry.domain import ConfigurationTemplate

from .manager import TemplateStoreError

logger = logging.getLogger(__name__)

_TEMPLATES = TypeAdapter(list[ConfigurationTemplate])


class InMemoryTemplateRepository:
    """Process-local template storage."""

    def __init__(self, templates: list[ConfigurationTemplate] | None = None) -> None:
        self._templates: dict[str, ConfigurationTemplate] = {
            template.id: template for template in templates or []
        }

    def add(self, template: ConfigurationTemplate) -> ConfigurationTemplate:
        self._templates[template.id] = template
        return template

    def list_all(self) -> list[ConfigurationTemplate]:
        return list(self._templates.values())

    def remove(self, template_id: str) -> bool:
        return self._templates.pop(template_id, None) is not None


class JsonFileTemplateRepository:
    """Template storage backed by a JSON file.

    The file holds a list of template records. A missing file reads as an
    empty store and is created on the first write.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def add(self, template: ConfigurationTemplate) -> ConfigurationTemplate:
        templates = [t for t in self.list_all() if t.id != template.id]
        templates.append(template)
        self._write(templates)
        return template

    def list_all(self) -> list[ConfigurationTemplate]:
        if not self.path.exists():
            return []
        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise TemplateStoreError(f"Error reading template store: {self.path}: {e}") from e
        if not content.strip():
            return []
        try:
            return _TEMPLATES.validate_json(content)
        except PydanticValidationError as e:
            raise TemplateStoreError(
                f"Invalid template store: {self.path}: {e.error_count()} error(s)"
            ) from e

    def remove(self, template_id: str) -> bool:
        templates = self.list_all()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            return False
        self._write(remaining)
        return True

    def _write(self, templates: list[ConfigurationTemplate]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_TEMPLATES.dump_json(templates, indent=2))
        except OSError as e:
            raise TemplateStoreError(f"Error writing template store: {self.path}: {e}") from e
        logger.debug(f"Wrote {len(templates)} template(s) to {self.path}")

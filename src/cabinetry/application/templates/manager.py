"""Template manager for saved cabinet configurations.

This module provides the TemplateManager class, which saves, lists and
deletes ConfigurationTemplate records through a TemplateRepository.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from cabinetry.contracts import TemplateRepository
from cabinetry.domain import CabinetConfiguration, ConfigurationTemplate, utcnow

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id}")


class TemplateStoreError(Exception):
    """Raised when the template store cannot be read or written."""


def _new_id() -> str:
    return str(uuid.uuid4())


class TemplateManager:
    """Manager for saved configuration templates.

    Visibility rules when listing:
    - with a user id: that user's templates plus every default template
    - without a user id: default templates only

    Example:
        manager = TemplateManager(InMemoryTemplateRepository())
        manager.save_template("Standard base", "base-600", config, is_default=True)
        for template in manager.load_templates("base-600"):
            print(template.name)
    """

    def __init__(
        self,
        repository: TemplateRepository,
        id_factory: Callable[[], str] = _new_id,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository
        self._id_factory = id_factory
        self._now = now

    def save_template(
        self,
        name: str,
        cabinet_type_id: str,
        configuration: CabinetConfiguration,
        description: str | None = None,
        is_default: bool = False,
        user_id: str | None = None,
    ) -> ConfigurationTemplate:
        """Store a configuration as a named template.

        Args:
            name: Display name.
            cabinet_type_id: Cabinet type the template applies to.
            configuration: Configuration snapshot to store.
            description: Optional description.
            is_default: Whether the template is visible to every user.
            user_id: Owning user, if any.

        Returns:
            The stored ConfigurationTemplate with its generated id.

        Raises:
            ValueError: If the name or cabinet type id is blank.
            TemplateStoreError: If the repository cannot persist the record.
        """
        if not name or not name.strip():
            raise ValueError("Template name is required")
        if not cabinet_type_id:
            raise ValueError("Template cabinet type is required")

        template = ConfigurationTemplate(
            id=self._id_factory(),
            name=name.strip(),
            cabinet_type_id=cabinet_type_id,
            configuration=configuration,
            description=description,
            is_default=is_default,
            user_id=user_id,
            created_at=self._now(),
        )
        stored = self.repository.add(template)
        logger.info(f"Saved template {stored.id} ({stored.name}) for {cabinet_type_id}")
        return stored

    def load_templates(
        self,
        cabinet_type_id: str | None = None,
        user_id: str | None = None,
    ) -> list[ConfigurationTemplate]:
        """List visible templates, newest first.

        Args:
            cabinet_type_id: Restrict to one cabinet type when given.
            user_id: Include this user's own templates alongside defaults.

        Returns:
            Matching templates ordered by creation time, newest first.
        """
        templates = [
            template
            for template in self.repository.list_all()
            if (cabinet_type_id is None or template.cabinet_type_id == cabinet_type_id)
            and (
                template.is_default
                or (user_id is not None and template.user_id == user_id)
            )
        ]
        return sorted(templates, key=lambda t: t.created_at, reverse=True)

    def get_template(self, template_id: str) -> ConfigurationTemplate:
        """Get a template by id.

        Raises:
            TemplateNotFoundError: If no template has this id.
        """
        for template in self.repository.list_all():
            if template.id == template_id:
                return template
        raise TemplateNotFoundError(template_id)

    def delete_template(self, template_id: str) -> bool:
        """Delete a template.

        Returns:
            True if a template was removed, False if none had this id.
        """
        removed = self.repository.remove(template_id)
        if removed:
            logger.info(f"Deleted template {template_id}")
        else:
            logger.debug(f"No template {template_id} to delete")
        return removed

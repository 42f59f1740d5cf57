"""Protocols at the seams between the core and its collaborators."""

from cabinetry.contracts.repositories import TemplateRepository
from cabinetry.contracts.validators import Validator

__all__ = ["TemplateRepository", "Validator"]

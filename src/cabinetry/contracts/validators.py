"""Validator protocol for cabinet configuration validation.

This module defines the protocol that all configuration validators must
implement so the registry can run them uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinetry.application.configuration.validators.base import ValidationResult
    from cabinetry.domain import CabinetConfiguration, CabinetType


@runtime_checkable
class Validator(Protocol):
    """Protocol for configuration validators.

    Validators check one aspect of a CabinetConfiguration against its
    CabinetType and return a ValidationResult. They never correct values.

    Example:
        class QuantityValidator:
            @property
            def name(self) -> str:
                return "quantity"

            def validate(self, config, cabinet_type) -> ValidationResult:
                result = ValidationResult()
                if config.quantity < 1:
                    result.add_error("quantity", "Quantity must be at least 1")
                return result
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(
        self, config: CabinetConfiguration, cabinet_type: CabinetType
    ) -> ValidationResult:
        """Validate the configuration against its cabinet type."""
        ...

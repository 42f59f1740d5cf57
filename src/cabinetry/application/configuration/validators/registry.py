"""Validator registry for running configuration validators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import ValidationResult

if TYPE_CHECKING:
    from cabinetry.contracts.validators import Validator
    from cabinetry.domain import CabinetConfiguration, CabinetType

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """An ordered set of validators that can be enabled or disabled.

    Each registry is an independent instance, so callers building their own
    rule set never affect one another.

    Example:
        registry = ValidatorRegistry()
        registry.register(QuantityValidator())
        result = registry.validate_all(config, cabinet_type)
    """

    def __init__(self, validators: "list[Validator] | None" = None) -> None:
        self._validators: dict[str, Validator] = {}
        self._disabled: set[str] = set()
        for validator in validators or []:
            self.register(validator)

    def register(self, validator: "Validator") -> None:
        """Register a validator instance, replacing any with the same name."""
        name = validator.name
        if name in self._validators:
            logger.warning(f"Overwriting existing validator '{name}'")
        self._validators[name] = validator
        logger.debug(f"Registered validator '{name}': {type(validator).__name__}")

    def get(self, name: str) -> "Validator":
        """Get a validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in self._validators:
            available = ", ".join(self.available())
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {available or 'none'}"
            )
        return self._validators[name]

    def available(self) -> list[str]:
        """Registered validator names in registration order."""
        return list(self._validators)

    def enable(self, name: str) -> None:
        if name not in self._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        self._disabled.discard(name)

    def disable(self, name: str) -> None:
        """Skip a validator in validate_all().

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in self._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        self._disabled.add(name)
        logger.debug(f"Disabled validator '{name}'")

    def is_enabled(self, name: str) -> bool:
        return name in self._validators and name not in self._disabled

    def validate_all(
        self, config: "CabinetConfiguration", cabinet_type: "CabinetType"
    ) -> ValidationResult:
        """Run every enabled validator and merge their results.

        A validator that raises is reported as an error on the
        ``validation`` path instead of aborting the run.
        """
        result = ValidationResult()
        for name, validator in self._validators.items():
            if name in self._disabled:
                logger.debug(f"Skipping disabled validator '{name}'")
                continue
            try:
                result.merge(validator.validate(config, cabinet_type))
            except Exception as e:
                logger.error(f"Validator '{name}' raised an exception: {e}")
                result.add_error(
                    path="validation",
                    message=f"Validator '{name}' failed: {e}",
                )
        return result

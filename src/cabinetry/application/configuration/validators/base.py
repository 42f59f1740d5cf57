"""Validation outcomes for cabinet configurations.

Each issue names the CabinetConfiguration field it concerns (``width``,
``left_side_depth``, ``hardware_brand_id``), or the validator's own name when
that validator failed to run. Errors block a configuration from being quoted;
warnings are advisory.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ValidationError(ValidationIssue):
    """A blocking problem, carrying the offending field value."""

    value: Any = None


@dataclass(frozen=True)
class ValidationWarning(ValidationIssue):
    """An advisory, optionally with what the customer should do next."""

    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected by the validators, in report order."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append ``other``'s issues after this result's own."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "exit_code": self.exit_code,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

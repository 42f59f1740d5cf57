"""Configuration validators.

ValidatorRegistry runs a set of focused validators against a
configuration and its cabinet type:
- DimensionRangeValidator: dimension bounds
- CornerDimensionValidator: corner side dimensions
- QuantityValidator: order quantity
- SelectionValidator: missing style/hardware advisories
"""

from .base import ValidationError, ValidationIssue, ValidationResult, ValidationWarning
from .registry import ValidatorRegistry
from .rules import (
    CornerDimensionValidator,
    DimensionRangeValidator,
    QuantityValidator,
    SelectionValidator,
)

__all__ = [
    "CornerDimensionValidator",
    "DimensionRangeValidator",
    "QuantityValidator",
    "SelectionValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
]

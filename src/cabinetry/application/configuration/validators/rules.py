"""Built-in configuration rules.

- DimensionRangeValidator: width, height and depth inside the type's bounds
- CornerDimensionValidator: corner cabinets carry all four side dimensions
- QuantityValidator: at least one cabinet ordered
- SelectionValidator: advisories for missing door style or hardware brand
"""

from __future__ import annotations

from cabinetry.domain import CabinetConfiguration, CabinetType

from .base import ValidationResult

_CORNER_FIELDS: tuple[tuple[str, str], ...] = (
    ("left_side_width", "left side width"),
    ("right_side_width", "right side width"),
    ("left_side_depth", "left side depth"),
    ("right_side_depth", "right side depth"),
)


class DimensionRangeValidator:
    """Checks each dimension against the cabinet type's inclusive bounds."""

    @property
    def name(self) -> str:
        return "dimensions"

    def validate(
        self, config: CabinetConfiguration, cabinet_type: CabinetType
    ) -> ValidationResult:
        result = ValidationResult()
        for dimension in ("width", "height", "depth"):
            low, _, high = cabinet_type.bounds(dimension)
            value = getattr(config, dimension)
            if value is None or not low <= value <= high:
                result.add_error(
                    dimension,
                    f"{dimension.capitalize()} must be between {low:g}mm and {high:g}mm",
                    value,
                )
        return result


class CornerDimensionValidator:
    """Corner cabinets need both side widths and both side depths."""

    @property
    def name(self) -> str:
        return "corner"

    def validate(
        self, config: CabinetConfiguration, cabinet_type: CabinetType
    ) -> ValidationResult:
        result = ValidationResult()
        if not cabinet_type.is_corner:
            return result

        for field_name, label in _CORNER_FIELDS:
            value = getattr(config, field_name)
            if value is None:
                result.add_error(field_name, f"Corner cabinets require a {label}")
            elif value <= 0:
                result.add_error(
                    field_name, f"Corner {label} must be greater than 0mm", value
                )
        return result


class QuantityValidator:
    @property
    def name(self) -> str:
        return "quantity"

    def validate(
        self, config: CabinetConfiguration, cabinet_type: CabinetType
    ) -> ValidationResult:
        result = ValidationResult()
        if config.quantity is None or config.quantity < 1:
            result.add_error("quantity", "Quantity must be at least 1", config.quantity)
        return result


class SelectionValidator:
    """Warns when selections that affect price are still missing."""

    @property
    def name(self) -> str:
        return "selections"

    def validate(
        self, config: CabinetConfiguration, cabinet_type: CabinetType
    ) -> ValidationResult:
        result = ValidationResult()
        if cabinet_type.resolved_door_qty > 0 and not config.door_style_id:
            result.add_warning(
                "door_style_id",
                "No door style selected; doors will be priced at zero rate",
                "Select a door style before adding to cart",
            )
        if config.color_id and not config.door_style_id:
            result.add_warning(
                "color_id",
                "Colour selected without a door style; surcharge cannot be applied",
            )
        has_hardware = cabinet_type.door_count > 0 or cabinet_type.drawer_count > 0
        if has_hardware and not config.hardware_brand_id:
            result.add_warning(
                "hardware_brand_id",
                "No hardware brand selected; hardware is not included in the price",
            )
        return result

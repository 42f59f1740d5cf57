"""Unit tests for default configurations and configuration validation.

These tests verify:
- Defaults are taken from the cabinet type, including corner geometry
- Each built-in rule reports errors and warnings on the right paths
- ValidatorRegistry enable/disable and failure isolation
"""

import logging
from collections.abc import Callable
from datetime import datetime

import pytest

from cabinetry.application.configuration import (
    ValidationResult,
    ValidatorRegistry,
    create_default_configuration,
    default_registry,
    validate_configuration,
)
from cabinetry.application.configuration.validators import (
    DimensionRangeValidator,
    QuantityValidator,
)
from cabinetry.domain import CabinetConfiguration, CabinetType, ConfigurationSource

from conftest import EPOCH


def _config(**overrides) -> CabinetConfiguration:
    values = {
        "width": 600,
        "height": 720,
        "depth": 560,
        "door_style_id": "shaker",
        "hardware_brand_id": "blum",
    }
    values.update(overrides)
    return CabinetConfiguration(**values)


class TestCreateDefaultConfiguration:
    """Tests for create_default_configuration."""

    def test_uses_type_defaults(self, base_type: CabinetType, clock: Callable[[], datetime]) -> None:
        config = create_default_configuration(base_type, now=clock)
        assert (config.width, config.height, config.depth) == (600, 720, 560)
        assert config.quantity == 1
        assert config.configuration_source == ConfigurationSource.UNIFIED
        assert config.created_at == EPOCH
        assert config.updated_at == EPOCH

    def test_standard_type_has_no_corner_dimensions(self, base_type: CabinetType) -> None:
        config = create_default_configuration(base_type)
        assert config.left_side_width is None
        assert not config.has_corner_dimensions

    def test_corner_type_gets_side_defaults(self, corner_type: CabinetType) -> None:
        config = create_default_configuration(corner_type)
        assert config.left_side_width == 900
        assert config.right_side_width == 600
        assert config.left_side_depth == 560
        assert config.right_side_depth == 560

    def test_carries_default_hardware_brand(self) -> None:
        cabinet_type = CabinetType(
            "wall-600", "Wall 600", 600, 720, 300, default_hardware_brand_id="hettich"
        )
        assert create_default_configuration(cabinet_type).hardware_brand_id == "hettich"

    def test_default_configuration_is_valid(self, corner_type: CabinetType) -> None:
        config = create_default_configuration(corner_type)
        result = validate_configuration(config, corner_type)
        assert result.is_valid


class TestCabinetConfigurationValue:
    def test_hashable_with_selected_options(self) -> None:
        config = _config(selected_options={"handle": "bar"}, created_at=EPOCH, updated_at=EPOCH)
        same = _config(selected_options={"handle": "bar"}, created_at=EPOCH, updated_at=EPOCH)
        assert config == same
        assert hash(config) == hash(same)

    def test_selected_options_still_compared(self) -> None:
        config = _config(selected_options={"handle": "bar"}, created_at=EPOCH, updated_at=EPOCH)
        other = _config(selected_options={"handle": "knob"}, created_at=EPOCH, updated_at=EPOCH)
        assert config != other


class TestDimensionRules:
    def test_in_range_is_clean(self, base_type: CabinetType) -> None:
        result = validate_configuration(_config(), base_type)
        assert result.is_valid
        assert result.exit_code == 0

    @pytest.mark.parametrize("width", [300, 1200])
    def test_bounds_are_inclusive(self, base_type: CabinetType, width: float) -> None:
        assert validate_configuration(_config(width=width), base_type).is_valid

    def test_width_too_large(self, base_type: CabinetType) -> None:
        result = validate_configuration(_config(width=1500), base_type)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].path == "width"
        assert result.errors[0].value == 1500
        assert "300mm" in result.errors[0].message
        assert "1200mm" in result.errors[0].message

    def test_each_dimension_reported(self, base_type: CabinetType) -> None:
        result = validate_configuration(_config(width=10, height=10, depth=10), base_type)
        assert [e.path for e in result.errors] == ["width", "height", "depth"]

    def test_unset_bounds_collapse_to_default(self, drawer_type: CabinetType) -> None:
        result = validate_configuration(_config(width=450, height=800), drawer_type)
        assert [e.path for e in result.errors] == ["height"]


class TestCornerRules:
    def test_missing_side_dimensions(self, corner_type: CabinetType) -> None:
        config = _config(width=900, left_side_width=900)
        result = validate_configuration(config, corner_type)
        assert [e.path for e in result.errors] == [
            "right_side_width",
            "left_side_depth",
            "right_side_depth",
        ]

    def test_non_positive_side_dimension(self, corner_type: CabinetType) -> None:
        config = _config(
            width=900,
            left_side_width=900,
            right_side_width=0,
            left_side_depth=560,
            right_side_depth=560,
        )
        result = validate_configuration(config, corner_type)
        assert len(result.errors) == 1
        assert result.errors[0].path == "right_side_width"

    def test_standard_type_ignores_corner_fields(self, base_type: CabinetType) -> None:
        assert validate_configuration(_config(), base_type).is_valid


class TestQuantityAndSelectionRules:
    def test_zero_quantity(self, base_type: CabinetType) -> None:
        result = validate_configuration(_config(quantity=0), base_type)
        assert [e.path for e in result.errors] == ["quantity"]

    def test_missing_door_style_is_a_warning(self, base_type: CabinetType) -> None:
        result = validate_configuration(_config(door_style_id=None), base_type)
        assert result.is_valid
        assert result.exit_code == 2
        assert [w.path for w in result.warnings] == ["door_style_id"]

    def test_colour_without_style(self, base_type: CabinetType) -> None:
        result = validate_configuration(
            _config(door_style_id=None, color_id="white"), base_type
        )
        assert "color_id" in [w.path for w in result.warnings]

    def test_missing_hardware_brand(self, drawer_type: CabinetType) -> None:
        result = validate_configuration(
            _config(width=450, hardware_brand_id=None), drawer_type
        )
        assert [w.path for w in result.warnings] == ["hardware_brand_id"]

    def test_errors_and_warnings_together(self, base_type: CabinetType) -> None:
        result = validate_configuration(
            _config(width=5000, door_style_id=None), base_type
        )
        assert result.exit_code == 1
        assert result.has_warnings


class _ExplodingValidator:
    @property
    def name(self) -> str:
        return "exploding"

    def validate(self, config, cabinet_type) -> ValidationResult:
        raise RuntimeError("boom")


class TestValidatorRegistry:
    """Tests for ValidatorRegistry."""

    def test_default_registry_order(self) -> None:
        assert default_registry().available() == [
            "dimensions",
            "corner",
            "quantity",
            "selections",
        ]

    def test_registries_are_independent(self) -> None:
        first = default_registry()
        second = default_registry()
        first.disable("dimensions")
        assert second.is_enabled("dimensions")

    def test_disable_and_enable(self, base_type: CabinetType) -> None:
        registry = default_registry()
        registry.disable("dimensions")
        config = _config(width=5000)
        assert validate_configuration(config, base_type, registry).is_valid

        registry.enable("dimensions")
        assert not validate_configuration(config, base_type, registry).is_valid

    def test_unknown_name(self) -> None:
        registry = ValidatorRegistry()
        with pytest.raises(KeyError, match="No validator registered"):
            registry.get("missing")
        with pytest.raises(KeyError):
            registry.disable("missing")

    def test_register_replaces_same_name(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = ValidatorRegistry([QuantityValidator()])
        with caplog.at_level(logging.WARNING):
            registry.register(QuantityValidator())
        assert registry.available() == ["quantity"]
        assert "Overwriting" in caplog.text

    def test_raising_validator_becomes_error(self, base_type: CabinetType) -> None:
        registry = ValidatorRegistry([_ExplodingValidator(), DimensionRangeValidator()])
        result = registry.validate_all(_config(), base_type)
        assert len(result.errors) == 1
        assert result.errors[0].path == "validation"
        assert "boom" in result.errors[0].message


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("door_style_id", "No door style").exit_code == 2
        assert ValidationResult().add_error("width", "Too wide", 2000).exit_code == 1

    def test_to_dict_reports_fields_in_order(self, base_type: CabinetType) -> None:
        config = _config(width=2000, quantity=0, door_style_id=None)
        data = validate_configuration(config, base_type).to_dict()
        assert data["is_valid"] is False
        assert data["exit_code"] == 1
        assert data["errors"] == [
            {"path": "width", "message": "Width must be between 300mm and 1200mm", "value": 2000},
            {"path": "quantity", "message": "Quantity must be at least 1", "value": 0},
        ]
        assert [w["path"] for w in data["warnings"]] == ["door_style_id"]

    def test_issues_are_immutable(self) -> None:
        result = ValidationResult().add_error("width", "Too wide", 2000)
        with pytest.raises(AttributeError):
            result.errors[0].path = "height"  # type: ignore[misc]

"""Unit tests for catalog records and numeric coercion.

These tests verify:
- as_amount degrades bad numbers to zero
- CabinetType bounds, door quantity fallback and corner defaults
- HardwareRequirement option lookups
"""

import math

import pytest

from cabinetry.domain import (
    CabinetStyle,
    CabinetType,
    DoorStyle,
    DoorStyleFinish,
    Finish,
    HardwareRequirement,
    as_amount,
)


class TestAsAmount:
    """Tests for as_amount coercion."""

    @pytest.mark.parametrize("value", [None, "", "abc", math.nan, math.inf, -math.inf, True])
    def test_bad_values_become_zero(self, value: object) -> None:
        """Missing, non-numeric and non-finite values should coerce to 0.0."""
        assert as_amount(value) == 0.0

    def test_numeric_strings_are_parsed(self) -> None:
        assert as_amount("85.5") == 85.5

    def test_numbers_pass_through(self) -> None:
        assert as_amount(12) == 12.0
        assert as_amount(-3.5) == -3.5


class TestCabinetType:
    """Tests for CabinetType."""

    def test_bounds_default_to_the_default_dimension(self) -> None:
        """Unset min/max should collapse to the default."""
        cabinet_type = CabinetType("t", "T", 600, 720, 560)
        assert cabinet_type.bounds("width") == (600, 600, 600)

    def test_bounds_use_explicit_limits(self, base_type: CabinetType) -> None:
        assert base_type.bounds("width") == (300, 600, 1200)
        assert base_type.bounds("depth") == (300, 560, 650)

    def test_default_outside_bounds_is_rejected(self) -> None:
        """min <= default <= max must hold for every dimension."""
        with pytest.raises(ValueError) as exc_info:
            CabinetType("t", "T", 600, 720, 560, min_width_mm=700)
        assert "width" in str(exc_info.value)

    def test_door_qty_falls_back_to_door_count(self) -> None:
        cabinet_type = CabinetType("t", "T", 600, 720, 560, door_count=2)
        assert cabinet_type.resolved_door_qty == 2

    def test_explicit_door_qty_wins(self) -> None:
        cabinet_type = CabinetType("t", "T", 600, 720, 560, door_count=2, door_qty=0)
        assert cabinet_type.resolved_door_qty == 0

    def test_corner_defaults_fall_back_to_width_and_depth(self) -> None:
        cabinet_type = CabinetType(
            "c", "C", 900, 720, 560,
            cabinet_style=CabinetStyle.CORNER,
            left_side_width_mm=900,
        )
        assert cabinet_type.is_corner
        assert cabinet_type.corner_defaults() == {
            "left_side_width": 900,
            "right_side_width": 900,
            "left_side_depth": 560,
            "right_side_depth": 560,
        }

    def test_cabinet_type_is_frozen(self, base_type: CabinetType) -> None:
        with pytest.raises(AttributeError):
            base_type.door_count = 4  # type: ignore


class TestDoorStyleFinish:
    def test_rates_without_finish(self) -> None:
        combo = DoorStyleFinish(DoorStyle("s", "S", 150))
        assert combo.base_rate == 150
        assert combo.finish_rate == 0.0

    def test_rates_with_finish(self) -> None:
        combo = DoorStyleFinish(DoorStyle("s", "S", 150), Finish("f", "F", 30))
        assert combo.finish_rate == 30

    def test_bad_rate_is_zero(self) -> None:
        combo = DoorStyleFinish(DoorStyle("s", "S", math.nan))  # type: ignore[arg-type]
        assert combo.base_rate == 0.0


class TestHardwareRequirement:
    """Tests for option lookups."""

    def test_option_for_brand(self, hinge_requirement: HardwareRequirement) -> None:
        option = hinge_requirement.option_for_brand("hettich")
        assert option is not None
        assert option.id == "opt-hettich-hinge"

    def test_option_for_unknown_brand(self, hinge_requirement: HardwareRequirement) -> None:
        assert hinge_requirement.option_for_brand("grass") is None

    def test_option_by_id(self, hinge_requirement: HardwareRequirement) -> None:
        option = hinge_requirement.option_by_id("opt-blum-hinge")
        assert option is not None
        assert option.brand_id == "blum"
        assert hinge_requirement.option_by_id("opt-missing") is None

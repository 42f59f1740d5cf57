"""Pytest configuration and shared fixtures for cabinetry tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from cabinetry.domain import (
    CabinetPart,
    CabinetStyle,
    CabinetType,
    Color,
    DoorStyle,
    DoorStyleFinish,
    Finish,
    GlobalSetting,
    HardwareOption,
    HardwareProduct,
    HardwareRequirement,
    UnitScope,
)

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or web adapters end to end"
    )


# =============================================================================
# Domain records
# =============================================================================


@pytest.fixture
def base_type() -> CabinetType:
    """A 600mm two-door base cabinet."""
    return CabinetType(
        id="base-600",
        name="Base 600",
        default_width_mm=600,
        default_height_mm=720,
        default_depth_mm=560,
        min_width_mm=300,
        max_width_mm=1200,
        min_height_mm=600,
        max_height_mm=900,
        min_depth_mm=300,
        max_depth_mm=650,
        door_count=2,
        drawer_count=0,
    )


@pytest.fixture
def drawer_type() -> CabinetType:
    """A door-less three-drawer base cabinet."""
    return CabinetType(
        id="drawer-450",
        name="Drawer 450",
        default_width_mm=450,
        default_height_mm=720,
        default_depth_mm=560,
        min_width_mm=300,
        max_width_mm=900,
        door_count=0,
        drawer_count=3,
    )


@pytest.fixture
def corner_type() -> CabinetType:
    """An L-shaped corner base cabinet."""
    return CabinetType(
        id="corner-900",
        name="Corner 900",
        default_width_mm=900,
        default_height_mm=720,
        default_depth_mm=560,
        min_width_mm=800,
        max_width_mm=1000,
        door_count=2,
        cabinet_style=CabinetStyle.CORNER,
        left_side_width_mm=900,
        right_side_width_mm=600,
    )


@pytest.fixture
def shaker() -> DoorStyle:
    return DoorStyle(id="shaker", name="Shaker", base_rate_per_sqm=150.0)


@pytest.fixture
def satin() -> Finish:
    return Finish(id="satin", name="Satin", rate_per_sqm=30.0)


@pytest.fixture
def shaker_white() -> Color:
    return Color(id="white", name="White", door_style_id="shaker", surcharge_rate_per_sqm=20.0)


@pytest.fixture
def shaker_unfinished(shaker: DoorStyle) -> DoorStyleFinish:
    return DoorStyleFinish(door_style=shaker)


@pytest.fixture
def standard_settings() -> list[GlobalSetting]:
    return [
        GlobalSetting("hmr_rate_per_sqm", "85"),
        GlobalSetting("gst_rate", "0.10"),
        GlobalSetting("hardware_base_cost", "45"),
    ]


@pytest.fixture
def carcass_parts() -> list[CabinetPart]:
    return [
        CabinetPart("Back Panel", 1, cabinet_type_id="base-600"),
        CabinetPart("Bottom Panel", 1, cabinet_type_id="base-600"),
        CabinetPart("Side Panel", 2, cabinet_type_id="base-600"),
        CabinetPart("Door", 2, is_door=True, cabinet_type_id="base-600"),
    ]


def _product(product_id: str, brand_id: str, cost: float) -> HardwareProduct:
    return HardwareProduct(
        id=product_id,
        name=product_id.replace("-", " ").title(),
        brand_id=brand_id,
        cost_per_unit=cost,
    )


@pytest.fixture
def hinge_requirement() -> HardwareRequirement:
    """Two hinges per door, offered by blum and hettich."""
    return HardwareRequirement(
        id="req-hinge",
        hardware_type="hinge",
        unit_scope=UnitScope.PER_DOOR,
        units_per_scope=2,
        options=(
            HardwareOption("opt-blum-hinge", "req-hinge", "blum", _product("blum-hinge", "blum", 8.5)),
            HardwareOption(
                "opt-hettich-hinge", "req-hinge", "hettich", _product("hettich-hinge", "hettich", 6.0)
            ),
        ),
    )


@pytest.fixture
def runner_requirement() -> HardwareRequirement:
    """One runner pair per drawer, offered by blum only."""
    return HardwareRequirement(
        id="req-runner",
        hardware_type="drawer runner",
        unit_scope=UnitScope.PER_DRAWER,
        units_per_scope=1,
        options=(
            HardwareOption(
                "opt-blum-runner", "req-runner", "blum", _product("blum-runner", "blum", 42.0)
            ),
        ),
    )


@pytest.fixture
def leg_requirement() -> HardwareRequirement:
    """Four legs per cabinet, offered by blum and hettich."""
    return HardwareRequirement(
        id="req-leg",
        hardware_type="leg",
        unit_scope=UnitScope.PER_CABINET,
        units_per_scope=4,
        options=(
            HardwareOption("opt-blum-leg", "req-leg", "blum", _product("blum-leg", "blum", 2.5)),
            HardwareOption(
                "opt-hettich-leg", "req-leg", "hettich", _product("hettich-leg", "hettich", 2.0)
            ),
        ),
    )


# =============================================================================
# Clocks
# =============================================================================


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock that advances one minute per call."""
    ticks = iter(range(10_000))

    def now() -> datetime:
        return EPOCH + timedelta(minutes=next(ticks))

    return now


# =============================================================================
# Catalog documents
# =============================================================================


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """A small but complete catalog document."""
    return {
        "cabinet_types": [
            {
                "id": "base-600",
                "name": "Base 600",
                "category": "base",
                "default_width_mm": 600,
                "default_height_mm": 720,
                "default_depth_mm": 560,
                "min_width_mm": 300,
                "max_width_mm": 1200,
                "min_height_mm": 600,
                "max_height_mm": 900,
                "min_depth_mm": 300,
                "max_depth_mm": 650,
                "door_count": 2,
                "default_hardware_brand_id": "blum",
            },
            {
                "id": "corner-900",
                "name": "Corner 900",
                "default_width_mm": 900,
                "default_height_mm": 720,
                "default_depth_mm": 560,
                "door_count": 2,
                "cabinet_style": "corner",
                "left_side_width_mm": 900,
                "right_side_width_mm": 600,
            },
        ],
        "cabinet_parts": [
            {"cabinet_type_id": "base-600", "part_name": "Back Panel", "quantity": 1},
            {"cabinet_type_id": "base-600", "part_name": "Bottom Panel", "quantity": 1},
            {"cabinet_type_id": "base-600", "part_name": "Side Panel", "quantity": 2},
            {"cabinet_type_id": "base-600", "part_name": "Door", "quantity": 2, "is_door": True},
        ],
        "global_settings": [
            {"setting_key": "hmr_rate_per_sqm", "setting_value": "85"},
            {"setting_key": "gst_rate", "setting_value": 0.1},
            {"setting_key": "hardware_base_cost", "setting_value": "45"},
        ],
        "door_styles": [{"id": "shaker", "name": "Shaker", "base_rate_per_sqm": 150}],
        "finishes": [{"id": "satin", "name": "Satin", "rate_per_sqm": 30}],
        "colors": [
            {"id": "white", "name": "White", "door_style_id": "shaker", "surcharge_rate_per_sqm": 20}
        ],
        "hardware_products": [
            {"id": "blum-hinge", "name": "Blum Hinge", "brand_id": "blum", "cost_per_unit": 8.5},
            {"id": "hettich-hinge", "name": "Hettich Hinge", "brand_id": "hettich", "cost_per_unit": 6},
            {"id": "blum-leg", "name": "Blum Leg", "brand_id": "blum", "cost_per_unit": 2.5},
        ],
        "hardware_requirements": [
            {
                "id": "req-hinge",
                "cabinet_type_id": "base-600",
                "hardware_type": "hinge",
                "unit_scope": "per_door",
                "units_per_scope": 2,
                "options": [
                    {"id": "opt-blum-hinge", "brand_id": "blum", "product_id": "blum-hinge"},
                    {"id": "opt-hettich-hinge", "brand_id": "hettich", "product_id": "hettich-hinge"},
                ],
            },
            {
                "id": "req-leg",
                "cabinet_type_id": "base-600",
                "hardware_type": "leg",
                "unit_scope": "per_cabinet",
                "units_per_scope": 4,
                "options": [
                    {"id": "opt-blum-leg", "brand_id": "blum", "product_id": "blum-leg"},
                ],
            },
        ],
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict[str, Any]) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path

"""Unit tests for catalog loading and the domain catalog adapter.

These tests verify:
- File and JSON errors map to ConfigError categories
- Schema validation reports JSON paths for bad fields
- build_catalog produces domain records and tolerates missing products
- Catalog lookups raise UnknownRecordError for unknown ids
"""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from cabinetry.application.catalog import (
    Catalog,
    ConfigError,
    UnknownRecordError,
    build_catalog,
    load_catalog,
    load_catalog_from_dict,
)
from cabinetry.domain import CabinetStyle, UnitScope


@pytest.fixture
def catalog(catalog_data: dict[str, Any]) -> Catalog:
    return build_catalog(load_catalog_from_dict(catalog_data))


class TestLoadCatalog:
    """Tests for load_catalog error handling."""

    def test_loads_file(self, catalog_file: Path) -> None:
        schema = load_catalog(catalog_file)
        assert [t.id for t in schema.cabinet_types] == ["base-600", "corner-900"]

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "File not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"cabinet_types": [', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_unknown_field(self, tmp_path: Path, catalog_data: dict[str, Any]) -> None:
        catalog_data["cabinet_types"][0]["colour"] = "red"
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog_data), encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path
        assert exc_info.value.details[0]["path"] == "cabinet_types[0].colour"

    def test_negative_dimension(self, catalog_data: dict[str, Any]) -> None:
        catalog_data["cabinet_types"][0]["default_width_mm"] = -600
        with pytest.raises(ConfigError) as exc_info:
            load_catalog_from_dict(catalog_data)
        assert "cabinet_types[0].default_width_mm" in exc_info.value.message

    def test_default_outside_bounds(self, catalog_data: dict[str, Any]) -> None:
        catalog_data["cabinet_types"][0]["max_width_mm"] = 500
        with pytest.raises(ConfigError, match="max_width_mm"):
            load_catalog_from_dict(catalog_data)

    def test_duplicate_type_ids(self, catalog_data: dict[str, Any]) -> None:
        catalog_data["cabinet_types"][1]["id"] = "base-600"
        with pytest.raises(ConfigError, match="Duplicate cabinet type id"):
            load_catalog_from_dict(catalog_data)

    def test_numeric_setting_values_are_stringified(self, catalog_data: dict[str, Any]) -> None:
        schema = load_catalog_from_dict(catalog_data)
        assert schema.global_settings[1].setting_value == "0.1"

    def test_empty_document(self) -> None:
        catalog = build_catalog(load_catalog_from_dict({}))
        assert catalog.cabinet_types == {}


class TestBuildCatalog:
    """Tests for build_catalog."""

    def test_cabinet_types(self, catalog: Catalog) -> None:
        corner = catalog.cabinet_type("corner-900")
        assert corner.cabinet_style == CabinetStyle.CORNER
        assert corner.bounds("width") == (900, 900, 900)
        assert catalog.cabinet_type("base-600").default_hardware_brand_id == "blum"

    def test_parts_for(self, catalog: Catalog) -> None:
        parts = catalog.parts_for("base-600")
        assert [p.part_name for p in parts] == [
            "Back Panel",
            "Bottom Panel",
            "Side Panel",
            "Door",
        ]
        assert catalog.parts_for("corner-900") == []

    def test_requirements_resolve_products(self, catalog: Catalog) -> None:
        hinge, leg = catalog.requirements_for("base-600")
        assert hinge.unit_scope == UnitScope.PER_DOOR
        assert hinge.option_for_brand("hettich").product.cost_per_unit == 6.0
        assert leg.option_for_brand("blum").product.name == "Blum Leg"

    def test_brand_ids_in_catalog_order(self, catalog: Catalog) -> None:
        assert catalog.brand_ids_for("base-600") == ["blum", "hettich"]
        assert catalog.brand_ids_for("corner-900") == []

    def test_missing_product_becomes_empty_option(
        self, catalog_data: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        catalog_data["hardware_requirements"][1]["options"][0]["product_id"] = "ghost"
        with caplog.at_level(logging.WARNING):
            catalog = build_catalog(load_catalog_from_dict(catalog_data))
        leg = catalog.requirements_for("base-600")[1]
        assert leg.options[0].product is None
        assert "opt-blum-leg" in caplog.text


class TestCatalogLookups:
    def test_unknown_cabinet_type(self, catalog: Catalog) -> None:
        with pytest.raises(UnknownRecordError) as exc_info:
            catalog.cabinet_type("tall-2100")
        assert exc_info.value.kind == "cabinet type"
        assert exc_info.value.record_id == "tall-2100"

    def test_door_style_finish(self, catalog: Catalog) -> None:
        combo = catalog.door_style_finish("shaker", "satin")
        assert combo.base_rate == 150
        assert combo.finish_rate == 30

    def test_no_door_style(self, catalog: Catalog) -> None:
        assert catalog.door_style_finish(None, "satin") is None

    @pytest.mark.parametrize(("style", "finish"), [("flat", None), ("shaker", "gloss")])
    def test_unknown_style_or_finish(
        self, catalog: Catalog, style: str, finish: str | None
    ) -> None:
        with pytest.raises(UnknownRecordError):
            catalog.door_style_finish(style, finish)

    def test_color(self, catalog: Catalog) -> None:
        assert catalog.color("white").door_style_id == "shaker"
        assert catalog.color(None) is None
        with pytest.raises(UnknownRecordError):
            catalog.color("black")

    def test_all_door_style_finishes(self, catalog: Catalog) -> None:
        combos = catalog.all_door_style_finishes()
        assert [(c.door_style.id, c.finish.id if c.finish else None) for c in combos] == [
            ("shaker", None),
            ("shaker", "satin"),
        ]

"""Integration tests for the REST API.

The catalog and template manager dependencies are overridden so each test
runs against the shared catalog fixture and a fresh in-memory store.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from cabinetry.application.catalog import build_catalog, load_catalog_from_dict
from cabinetry.application.templates import InMemoryTemplateRepository, TemplateManager
from cabinetry.web.app import create_app
from cabinetry.web.dependencies import get_catalog, get_template_manager

pytestmark = pytest.mark.integration


@pytest.fixture
def client(catalog_data: dict[str, Any]) -> Iterator[TestClient]:
    app = create_app()
    catalog = build_catalog(load_catalog_from_dict(catalog_data))
    manager = TemplateManager(InMemoryTemplateRepository())
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_template_manager] = lambda: manager
    with TestClient(app) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestPriceEndpoint:
    """Tests for POST /api/v1/price."""

    def test_worked_example(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price",
            json={
                "cabinet_type_id": "base-600",
                "door_style_id": "shaker",
                "color_id": "white",
                "hardware_cost": 45,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["price"] == pytest.approx(345.708)
        assert data["formatted_price"] == "$345.71"
        assert data["breakdown"]["subtotal"] == pytest.approx(314.28)
        assert data["warnings"] == []

    def test_resolves_default_brand(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price",
            json={"cabinet_type_id": "base-600", "door_style_id": "shaker"},
        )
        assert response.json()["breakdown"]["hardware"]["total"] == pytest.approx(44.0)

    def test_quantity_scales_order_total_only(self, client: TestClient) -> None:
        body = {
            "cabinet_type_id": "base-600",
            "door_style_id": "shaker",
            "hardware_brand_id": "blum",
        }
        single = client.post("/api/v1/price", json=body).json()
        triple = client.post("/api/v1/price", json={**body, "quantity": 3}).json()
        assert triple["price"] == single["price"]
        assert triple["breakdown"] == single["breakdown"]
        assert single["order_total"] == single["price"]
        assert triple["quantity"] == 3
        assert triple["order_total"] == pytest.approx(3 * single["price"])

    def test_gaps_are_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price",
            json={
                "cabinet_type_id": "base-600",
                "door_style_id": "shaker",
                "hardware_brand_id": "hettich",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["hardware"]["total"] == pytest.approx(24.0)
        assert any("leg" in warning for warning in data["warnings"])

    def test_unknown_cabinet_type(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={"cabinet_type_id": "tall"})
        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "not_found"
        assert data["details"] == {"kind": "cabinet type", "id": "tall"}

    def test_unknown_colour(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price", json={"cabinet_type_id": "base-600", "color_id": "black"}
        )
        assert response.status_code == 404

    def test_rejects_non_positive_width(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price", json={"cabinet_type_id": "base-600", "width": 0}
        )
        assert response.status_code == 422


class TestHardwareEndpoints:
    def test_brand(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/hardware",
            json={"cabinet_type_id": "base-600", "hardware_brand_id": "blum", "quantity": 3},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_complete"] is True
        assert [line["quantity"] for line in data["lines"]] == [12, 12]
        assert data["total"] == pytest.approx(12 * 8.5 + 12 * 2.5)

    def test_no_selection(self, client: TestClient) -> None:
        response = client.post("/api/v1/hardware", json={"cabinet_type_id": "base-600"})
        data = response.json()
        assert data["total"] == 0.0
        assert [gap["reason"] for gap in data["gaps"]] == ["no_selection", "no_selection"]

    def test_compare_every_brand(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/hardware/compare", json={"cabinet_type_id": "base-600"}
        )
        assert response.status_code == 200
        brands = response.json()["brands"]
        assert list(brands) == ["blum", "hettich"]
        assert brands["hettich"]["is_complete"] is False

    def test_compare_named_brands(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/hardware/compare",
            json={"cabinet_type_id": "base-600", "brand_ids": ["grass"]},
        )
        assert list(response.json()["brands"]) == ["grass"]


class TestConfigurationEndpoints:
    """Tests for the /api/v1/configurations endpoints."""

    def test_default_corner(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/configurations/default", json={"cabinet_type_id": "corner-900"}
        )
        assert response.status_code == 200
        config = response.json()["configuration"]
        assert config["right_side_width"] == 600
        assert config["configuration_source"] == "unified"

    def test_validate_invalid_is_ok_response(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/configurations/validate",
            json={"cabinet_type_id": "base-600", "configuration": {"width": 5000}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["exit_code"] == 1
        assert data["errors"][0]["path"] == "width"

    def test_validate_malformed_unified(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/configurations/validate",
            json={
                "cabinet_type_id": "base-600",
                "configuration": {"configurationSource": "unified", "width": "wide"},
            },
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"

    def test_convert_to_legacy(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/configurations/convert",
            json={
                "configuration": {"productId": "p-1", "configurationSource": "product"},
                "target": "legacy",
                "cabinet_type_id": "base-600",
            },
        )
        assert response.status_code == 200
        config = response.json()["configuration"]
        assert config["configurationSource"] == "legacy"
        assert config["width"] == 600

    def test_compare(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/configurations/compare",
            json={"a": {"width": 600}, "b": {"width": 750}, "cabinet_type_id": "base-600"},
        )
        assert response.json() == {
            "identical": False,
            "differences": ["Width: 600mm → 750mm"],
        }


class TestTemplateEndpoints:
    """Tests for the /api/v1/templates endpoints."""

    def _save(self, client: TestClient, **overrides: Any) -> dict[str, Any]:
        body = {
            "name": "Standard base",
            "cabinet_type_id": "base-600",
            "configuration": {"width": 600, "height": 720, "depth": 560},
            "is_default": True,
        }
        body.update(overrides)
        response = client.post("/api/v1/templates", json=body)
        assert response.status_code == 201
        return response.json()

    def test_save_and_get(self, client: TestClient) -> None:
        saved = self._save(client)
        response = client.get(f"/api/v1/templates/{saved['id']}")
        assert response.status_code == 200
        assert response.json()["configuration"]["width"] == 600

    def test_save_fills_dimensions_from_bound_type(self, client: TestClient) -> None:
        saved = self._save(
            client, cabinet_type_id="corner-900", configuration={"quantity": 2}
        )
        config = saved["configuration"]
        assert (config["width"], config["height"], config["depth"]) == (900, 720, 560)
        assert (config["left_side_width"], config["right_side_width"]) == (900, 600)

    def test_save_unknown_cabinet_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/templates",
            json={"name": "Tall", "cabinet_type_id": "tall", "configuration": {}},
        )
        assert response.status_code == 404
        assert response.json()["details"] == {"kind": "cabinet type", "id": "tall"}

    def test_list_visibility(self, client: TestClient) -> None:
        self._save(client, name="Shared")
        self._save(client, name="Private", is_default=False, user_id="alice")

        anonymous = client.get("/api/v1/templates").json()["templates"]
        assert [t["name"] for t in anonymous] == ["Shared"]

        alice = client.get("/api/v1/templates", params={"user_id": "alice"}).json()
        assert {t["name"] for t in alice["templates"]} == {"Shared", "Private"}

    def test_get_missing(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/nope")
        assert response.status_code == 404
        assert response.json()["details"] == {"id": "nope"}

    def test_delete(self, client: TestClient) -> None:
        saved = self._save(client)
        assert client.delete(f"/api/v1/templates/{saved['id']}").status_code == 204
        assert client.delete(f"/api/v1/templates/{saved['id']}").status_code == 404

    def test_blank_name(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/templates",
            json={"name": "  ", "cabinet_type_id": "base-600", "configuration": {}},
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_value"


def test_catalog_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CABINETRY_CATALOG", raising=False)
    get_catalog.cache_clear()
    with TestClient(create_app()) as client:
        response = client.post("/api/v1/price", json={"cabinet_type_id": "base-600"})
    get_catalog.cache_clear()
    assert response.status_code == 500
    assert response.json()["error_type"] == "catalog_unavailable"

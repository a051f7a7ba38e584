"""
Tests for the web viewer JSON API.
"""

import pytest

import viewer
from config.settings import SwitcherConfig
from switcher.session import SwitcherSession


@pytest.fixture
def client(selector):
    viewer.init_viewer(SwitcherSession(selector, settings=SwitcherConfig()))
    viewer.app.config["TESTING"] = True
    with viewer.app.test_client() as client:
        yield client
    viewer.session = None


class TestTemplatesEndpoint:
    def test_default_lists_everything(self, client):
        data = client.get("/api/templates").get_json()
        assert data["tab"] == "all"
        assert data["visible_count"] == data["total_count"] == 7
        assert data["count_label"] == "7 templates available"
        assert data["is_empty"] is False

    def test_search(self, client):
        data = client.get("/api/templates?q=doc").get_json()
        assert [t["key"] for t in data["templates"]] == ["docmed", "dento"]
        assert data["templates"][0]["score"] == 10
        assert data["order"][:2] == ["docmed", "dento"]
        assert data["count_label"] == "2 of 7 templates"

    def test_facets(self, client):
        data = client.get("/api/templates?category=medical&color=blue").get_json()
        assert [t["key"] for t in data["templates"]] == ["dento"]

    def test_popular_tab_ignores_search(self, client):
        data = client.get("/api/templates?tab=popular&q=coffee").get_json()
        assert [t["key"] for t in data["templates"]] == ["dento", "cozastore"]

    def test_empty_state(self, client):
        data = client.get("/api/templates?tab=favorites").get_json()
        assert data["is_empty"] is True
        assert data["empty_message"].startswith("No favorites yet")

    def test_unknown_tab(self, client):
        response = client.get("/api/templates?tab=trending")
        assert response.status_code == 400


class TestTemplateEndpoint:
    def test_frame(self, client):
        data = client.get("/api/templates/coffeeblend").get_json()
        assert data["name"] == "Coffee Blend"
        assert data["viewport_enabled"] is False

    def test_unknown_template(self, client):
        assert client.get("/api/templates/missing").status_code == 404

    def test_purchase(self, client, recorder):
        data = client.get("/api/templates/dento/purchase").get_json()
        assert data["url"] == "https://colorlib.com/wp/template/dento/#pricing"
        assert recorder.names() == ["purchase_click"]
        assert viewer.session.current_key is None

    def test_purchase_unknown_template(self, client):
        assert client.get("/api/templates/missing/purchase").status_code == 404


class TestFavoritesEndpoints:
    def test_toggle(self, client):
        data = client.post("/api/favorites/dento").get_json()
        assert data == {"key": "dento", "favorited": True, "count": 1}

        assert client.get("/api/favorites").get_json() == {"favorites": ["dento"]}

        listed = client.get("/api/templates?tab=favorites").get_json()
        assert [t["key"] for t in listed["templates"]] == ["dento"]
        assert listed["templates"][0]["favorited"] is True

        data = client.post("/api/favorites/dento").get_json()
        assert data["favorited"] is False

    def test_unknown_key(self, client):
        assert client.post("/api/favorites/missing").status_code == 404


class TestFacetsEndpoint:
    def test_categories_and_colors(self, client):
        data = client.get("/api/facets").get_json()
        assert data["categories"][0] == ["All", 7]
        assert ["medical", 2] in data["categories"]
        assert data["colors"][0] == ["all", 7]


class TestIndexPage:
    def test_renders(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert b"template-search" in response.data
        assert b"150" in response.data

    def test_initial_key_defaults_to_first_template(self, client):
        response = client.get("/")
        assert b"'cozastore'," in response.data

    def test_initial_key_from_product_param(self, client):
        response = client.get("/?product=dento")
        assert b"'dento'," in response.data

    def test_unknown_product_param_falls_back(self, client):
        response = client.get("/?product=bogus")
        assert b"'cozastore'," in response.data
        assert b"bogus" not in response.data

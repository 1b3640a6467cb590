"""
Tests for the Flask API and the EntityResolverApp facade.
"""
import json

import pytest

from entity_resolver.api import create_app
from entity_resolver.app import EntityResolverApp
from entity_resolver.config import ResolverConfig
from entity_resolver.exceptions import ServiceNotInitializedError


@pytest.fixture
def client(service):
    app = create_app(service)
    app.config["TESTING"] = True
    return app.test_client()


class TestResolveEndpoint:
    """Tests for POST /resolve."""

    def test_resolved(self, client):
        """Test a successful resolution payload."""
        response = client.post("/resolve", json={"query": "kc royals"})
        data = response.get_json()

        assert response.status_code == 200
        assert data["resolved"] is True
        assert data["team"]["name"] == "Kansas City Royals"
        assert data["team"]["colors"]["accent"]["rgb"] == [255, 255, 255]
        assert data["matchType"] == "exact"
        assert data["matchedAlias"] == "kc royals"

    def test_unresolved(self, client):
        """Test that garbage input is a normal 200 response."""
        response = client.post("/resolve", json={"query": "###"})

        assert response.status_code == 200
        assert response.get_json() == {"resolved": False}

    def test_user_context(self, client):
        """Test that location and saved teams reach the resolver."""
        response = client.post("/resolve", json={
            "query": "kings",
            "user_lat": 34.0522,
            "user_lon": -118.2437,
        })
        data = response.get_json()

        assert data["team"]["league"] == "NHL"
        assert data["matchType"] == "location_boosted"
        assert data["alternatives"][0]["name"] == "Sacramento Kings"

    def test_my_team_query(self, client):
        response = client.post("/resolve", json={"query": "my team", "user_teams": ["Seahawks"]})

        assert response.get_json()["matchType"] == "my_team_boosted"

    @pytest.mark.parametrize("payload", [
        {},
        {"query": 5},
        {"query": "kings", "user_lat": 34.0},
        {"query": "kings", "user_teams": "Chiefs"},
    ])
    def test_invalid_payloads(self, client, payload):
        """Test that malformed requests return 400."""
        response = client.post("/resolve", json=payload)

        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_non_json_body(self, client):
        response = client.post("/resolve", data="kings", content_type="text/plain")

        assert response.status_code == 400


class TestOtherEndpoints:
    """Tests for /health, /my-teams, /overlay and /categories."""

    def test_health(self, client):
        data = client.get("/health").get_json()

        assert data["status"] == "ok"
        assert data["entities"] == 6
        assert data["catalog_version"] == 1

    def test_my_teams(self, client):
        response = client.post("/my-teams", json={"user_teams": ["Chiefs", "zzzz", "la kings"]})
        teams = response.get_json()["teams"]

        assert [t["team"]["name"] for t in teams] == ["Kansas City Chiefs", "Los Angeles Kings"]

    def test_my_teams_invalid(self, client):
        assert client.post("/my-teams", json={"user_teams": [1, 2]}).status_code == 400
        assert client.post("/my-teams", json=["Chiefs"]).status_code == 400

    def test_overlay_applied(self, client):
        """Test that an overlay is merged and immediately resolvable."""
        overlay = {
            "version": 2,
            "teams_additions": [{
                "id": "wrexham",
                "officialName": "Wrexham AFC",
                "city": "Wrexham",
                "league": "EFL",
                "aliases": ["red dragons"],
                "colors": [{"name": "Red", "r": 200, "g": 16, "b": 46}],
            }],
        }

        report = client.post("/overlay", json=overlay).get_json()

        assert report["applied"] is True
        assert report["added"] == 1
        resolved = client.post("/resolve", json={"query": "red dragons"}).get_json()
        assert resolved["team"]["name"] == "Wrexham AFC"
        assert client.get("/health").get_json()["catalog_version"] == 2

    def test_overlay_force(self, client):
        overlay = {"version": 1, "holidays_additions": [
            {"id": "pride", "name": "Pride", "colors": [{"r": 228, "g": 3, "b": 3}]},
        ]}

        assert client.post("/overlay", json=overlay).get_json()["applied"] is False
        assert client.post("/overlay?force=true", json=overlay).get_json()["applied"] is True

    def test_overlay_must_be_object(self, client):
        assert client.post("/overlay", json=[1, 2]).status_code == 400

    def test_categories(self, client):
        categories = client.get("/categories").get_json()["categories"]

        assert categories == ["MLB", "NBA", "NFL", "NHL", "popular"]


class TestEntityResolverApp:
    """Tests for the application facade."""

    def test_requires_initialize(self):
        """Test that resolving before initialize() raises."""
        app = EntityResolverApp()

        with pytest.raises(ServiceNotInitializedError):
            app.resolve("chiefs")

    def test_bundled_catalog(self):
        app = EntityResolverApp()
        app.initialize()

        assert app.resolve("chiefs colors").entity.id == "chiefs"
        assert [r.entity.id for r in app.resolve_my_teams(["Royals"])] == ["royals"]

    def test_initialize_is_idempotent(self):
        app = EntityResolverApp()
        app.initialize()
        service = app.service

        app.initialize()

        assert app.service is service

    def test_cached_overlay_replayed(self, tmp_path):
        """Test that a cached overlay is applied on startup."""
        cache_path = tmp_path / "overlay.json"
        cache_path.write_text(json.dumps({
            "version": 99,
            "holidays_additions": [{
                "id": "pi_day",
                "name": "Pi Day",
                "aliases": ["pi day"],
                "colors": [{"name": "Blue", "r": 0, "g": 0, "b": 255}],
            }],
        }))

        app = EntityResolverApp(ResolverConfig(overlay_cache_path=str(cache_path)))
        app.initialize()

        assert app.service.snapshot.version == 99
        assert app.resolve("pi day").entity.id == "pi_day"

    def test_apply_overlay_persists(self, tmp_path):
        cache_path = tmp_path / "cache" / "overlay.json"
        app = EntityResolverApp(ResolverConfig(overlay_cache_path=str(cache_path)))
        app.initialize()

        report = app.apply_overlay({"version": 50, "teams_additions": []})

        assert report.applied is True
        assert json.loads(cache_path.read_text())["version"] == 50

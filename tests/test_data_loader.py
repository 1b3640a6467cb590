"""
Tests for EntityCatalogLoader.
"""
import json

import pytest

from entity_resolver.data_loader import EntityCatalogLoader
from entity_resolver.exceptions import CatalogLoadError


def write_catalog(tmp_path, data):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


COLOR = [{"name": "Navy", "r": 0, "g": 34, "b": 68}]


class TestBundledCatalog:
    """Tests for the catalog shipped with the package."""

    def test_loads_teams_and_holidays(self):
        """Test that the bundled catalog parses cleanly."""
        entities = EntityCatalogLoader().load_entities()
        kinds = {e.kind for e in entities}

        assert len(entities) >= 30
        assert kinds == {"team", "holiday"}

    def test_ids_unique(self):
        """Test that catalog ids are unique."""
        entities = EntityCatalogLoader().load_entities()

        assert len({e.id for e in entities}) == len(entities)

    def test_color_bounds(self):
        """Test that every entity has one to four valid colors."""
        for entity in EntityCatalogLoader().load_entities():
            assert 1 <= len(entity.colors) <= 4
            assert all(0 <= v <= 255 for c in entity.colors for v in c.rgb)

    def test_version_read(self):
        """Test that the catalog version is exposed."""
        loader = EntityCatalogLoader()
        loader.load_entities()

        assert loader.version >= 1


class TestCustomCatalog:
    """Tests for catalogs loaded from a path."""

    def test_team_defaults(self, tmp_path):
        """Test that optional team fields take their defaults."""
        path = write_catalog(tmp_path, {"teams": [
            {"id": "t", "officialName": "Test Team", "city": "Test", "league": "TL", "colors": COLOR},
        ]})

        entity = EntityCatalogLoader(path).load_entities()[0]

        assert entity.aliases == ()
        assert entity.default_speed == 85
        assert entity.default_intensity == 180
        assert entity.suggested_effects == (12, 41, 65, 0)

    def test_invalid_records_skipped(self, tmp_path):
        """Test that invalid records are dropped and the rest kept."""
        path = write_catalog(tmp_path, {
            "version": 4,
            "teams": [
                {"id": "ok", "officialName": "Ok", "colors": COLOR},
                {"id": "no_colors", "officialName": "No Colors", "colors": []},
            ],
            "holidays": [{"id": "h", "name": "Holiday", "colors": COLOR}],
        })
        loader = EntityCatalogLoader(path)

        entities = loader.load_entities()

        assert [e.id for e in entities] == ["ok", "h"]
        assert loader.version == 4

    def test_duplicate_ids_first_wins(self, tmp_path):
        """Test that a repeated id keeps the first record."""
        path = write_catalog(tmp_path, {"teams": [
            {"id": "dup", "officialName": "First", "colors": COLOR},
            {"id": "dup", "officialName": "Second", "colors": COLOR},
        ]})

        entities = EntityCatalogLoader(path).load_entities()

        assert [e.official_name for e in entities] == ["First"]

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError, match="not found"):
            EntityCatalogLoader(str(tmp_path / "missing.json")).load_entities()

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises CatalogLoadError."""
        path = write_catalog(tmp_path, "{broken")

        with pytest.raises(CatalogLoadError):
            EntityCatalogLoader(path).load_entities()

    def test_top_level_must_be_object(self, tmp_path):
        """Test that a JSON array is rejected."""
        path = write_catalog(tmp_path, [])

        with pytest.raises(CatalogLoadError, match="must be a JSON object"):
            EntityCatalogLoader(path).load_entities()

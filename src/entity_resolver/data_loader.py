import json
import logging
from pathlib import Path
from typing import List, Optional

from .exceptions import CatalogLoadError
from .models import Entity
from .records import HolidayRecord, TeamRecord, parse_records

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.json"


class EntityCatalogLoader:
    """
    Loads and validates the entity catalog from JSON.

    The file holds ``teams`` and ``holidays`` arrays. Invalid records are
    skipped with a warning; an unreadable file raises CatalogLoadError.
    """
    def __init__(self, catalog_path: Optional[str] = None):
        self.catalog_path = Path(catalog_path) if catalog_path else BUNDLED_CATALOG_PATH
        self.version = 1

    def load_entities(self) -> List[Entity]:
        data = self._read()

        version = data.get("version", 1)
        if isinstance(version, int) and not isinstance(version, bool):
            self.version = version

        teams, team_failures = parse_records(data.get("teams"), TeamRecord, "teams")
        holidays, holiday_failures = parse_records(data.get("holidays"), HolidayRecord, "holidays")

        entities = self._dedupe(teams + holidays)
        skipped = len(team_failures) + len(holiday_failures)
        logger.info(
            f"Loaded {len(entities)} entities from {self.catalog_path.name}"
            + (f" ({skipped} invalid records skipped)" if skipped else "")
        )
        return entities

    def _read(self) -> dict:
        try:
            with open(self.catalog_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CatalogLoadError(f"Catalog file not found: {self.catalog_path}")
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Could not read catalog {self.catalog_path}: {e}")

        if not isinstance(data, dict):
            raise CatalogLoadError(
                f"Catalog {self.catalog_path} must be a JSON object with 'teams' and 'holidays'"
            )
        return data

    def _dedupe(self, entities: List[Entity]) -> List[Entity]:
        """Keep the first record for each id."""
        seen = set()
        unique = []
        for entity in entities:
            if entity.id in seen:
                logger.warning(f"Duplicate catalog id '{entity.id}' ignored")
                continue
            seen.add(entity.id)
            unique.append(entity)
        return unique

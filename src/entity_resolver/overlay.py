"""
Overlay documents: additive and corrective catalog patches.

An overlay document looks like::

    {
        "version": 3,
        "teams_additions": [{"id": "chiefs", "officialName": ..., ...}],
        "holidays_additions": [{"id": "diwali", "name": ..., ...}]
    }

Records whose id already exists replace the catalog entry in place;
new ids are appended.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from .models import Entity
from .records import HolidayRecord, TeamRecord, parse_records
from .schemas import OverlayRecordFailure

logger = logging.getLogger(__name__)

TEAMS_SECTION = "teams_additions"
HOLIDAYS_SECTION = "holidays_additions"


@dataclass(frozen=True)
class ParsedOverlay:
    version: int
    entities: Tuple[Entity, ...]
    failures: Tuple[OverlayRecordFailure, ...]


def parse_overlay_document(document: Any) -> ParsedOverlay:
    """
    Validate an overlay document record by record.

    :param document: Decoded JSON object
    :return: ParsedOverlay with valid entities and per-record failures
    """
    if not isinstance(document, dict):
        failure = OverlayRecordFailure("document", -1, "overlay must be a JSON object")
        logger.warning(f"Rejected overlay: {failure.message}")
        return ParsedOverlay(version=0, entities=(), failures=(failure,))

    failures: List[OverlayRecordFailure] = []
    version = document.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int):
        failures.append(OverlayRecordFailure("version", -1, f"version must be an integer, got {version!r}"))
        logger.warning(f"Overlay version {version!r} is not an integer; treating as 0")
        version = 0

    teams, team_failures = parse_records(document.get(TEAMS_SECTION), TeamRecord, TEAMS_SECTION)
    holidays, holiday_failures = parse_records(
        document.get(HOLIDAYS_SECTION), HolidayRecord, HOLIDAYS_SECTION
    )
    failures.extend(team_failures)
    failures.extend(holiday_failures)

    return ParsedOverlay(
        version=version,
        entities=tuple(teams + holidays),
        failures=tuple(failures),
    )


def merge_entities(
    current: Sequence[Entity],
    overlay: Sequence[Entity],
) -> Tuple[List[Entity], int, int]:
    """
    Copy-on-write merge of overlay entities into a catalog.

    ``current`` is never modified.

    :return: (merged list, number added, number replaced)
    """
    merged = list(current)
    positions = {entity.id: i for i, entity in enumerate(merged)}
    added = replaced = 0

    for entity in overlay:
        if entity.id in positions:
            merged[positions[entity.id]] = entity
            replaced += 1
        else:
            positions[entity.id] = len(merged)
            merged.append(entity)
            added += 1

    return merged, added, replaced

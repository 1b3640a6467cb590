"""
Per-query scored candidates.
"""
from dataclasses import dataclass
from typing import List

from ..models import Entity
from .match_types import MatchType


@dataclass
class Candidate:
    """
    Provisional match produced during one resolution call.

    Mutable: boosters adjust ``score`` and ``match_type`` in place.
    """
    entity: Entity
    matched_alias: str
    score: float
    match_type: MatchType


class CandidateList:
    """
    Ordered candidates with at most one entry per entity id.
    """

    def __init__(self):
        self._items: List[Candidate] = []
        self._seen = set()

    def add(
        self,
        entity: Entity,
        matched_alias: str,
        score: float,
        match_type: MatchType,
    ) -> bool:
        """
        Append a candidate unless the entity is already present.

        :return: True if the candidate was added
        """
        if entity.id in self._seen:
            return False
        self._seen.add(entity.id)
        self._items.append(Candidate(entity, matched_alias, score, match_type))
        return True

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._seen

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def to_list(self) -> List[Candidate]:
        return list(self._items)

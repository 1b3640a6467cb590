"""
Immutable catalog snapshot read by every resolution call.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..models import Entity
from .alias_index import AliasIndex


@dataclass(frozen=True)
class CatalogSnapshot:
    """
    Entities, their alias index and the catalog version, published together.

    A snapshot is never mutated; catalog changes produce a new one.
    """
    entities: Tuple[Entity, ...]
    index: AliasIndex
    version: int = 1
    _by_id: dict = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {e.id: e for e in self.entities})

    @classmethod
    def build(cls, entities: Iterable[Entity], version: int = 1) -> "CatalogSnapshot":
        """Build a snapshot and its alias index from an entity list."""
        entities = tuple(entities)
        return cls(entities=entities, index=AliasIndex.build(entities), version=version)

    def get(self, entity_id: str) -> Optional[Entity]:
        return self._by_id.get(entity_id)

    def get_by_category(self, category: str) -> List[Entity]:
        """Entities whose category matches (case-insensitive)."""
        wanted = category.lower()
        return [e for e in self.entities if e.category.lower() == wanted]

    def search(self, text: str) -> List[Entity]:
        """
        Plain contains-search over name, city, category and aliases.

        Unlike resolution this does no scoring; it backs autocomplete lists.
        """
        q = text.strip().lower()
        if not q:
            return []

        matches = []
        for entity in self.entities:
            fields = (entity.official_name, entity.city, entity.category) + tuple(entity.aliases)
            if any(q in value.lower() for value in fields):
                matches.append(entity)
        return matches

    @property
    def categories(self) -> List[str]:
        return sorted({e.category for e in self.entities})

    def __len__(self) -> int:
        return len(self.entities)

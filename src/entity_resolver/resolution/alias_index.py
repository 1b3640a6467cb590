"""
Alias index for entity resolution.

Maps every normalized name, city, team-name portion and alias to the
entities that claim it.
"""
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..models import Entity
from .normalizer import normalize


class AliasIndex:
    """
    Read-only lookup from normalized alias to entities.

    Collisions are preserved: "kings" maps to every entity that claims it.
    An entity is listed at most once per key.

    Usage:
        index = AliasIndex.build(entities)
        index.lookup("chiefs")  # (Entity(id="chiefs", ...),)
    """

    def __init__(self, entries: Mapping[str, Tuple[Entity, ...]]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def build(cls, entities: Iterable[Entity]) -> "AliasIndex":
        """
        Build an index from an entity list.

        :param entities: Catalog entities
        :return: New AliasIndex
        """
        index: Dict[str, List[Entity]] = {}

        def add(key: str, entity: Entity) -> None:
            k = normalize(key)
            if not k:
                return
            bucket = index.setdefault(k, [])
            if all(existing.id != entity.id for existing in bucket):
                bucket.append(entity)

        for entity in entities:
            add(entity.official_name, entity)
            add(entity.city, entity)
            add(entity.team_name, entity)
            for alias in entity.aliases:
                add(alias, entity)

        return cls({key: tuple(bucket) for key, bucket in index.items()})

    def lookup(self, key: str) -> Tuple[Entity, ...]:
        """Entities registered under an already-normalized key (empty if none)."""
        return self._entries.get(key, ())

    def keys(self) -> Iterable[str]:
        return self._entries.keys()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

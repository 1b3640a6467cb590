import logging
import threading
from typing import Any, List, Optional, Sequence, Tuple

from .config import ResolverConfig
from .models import Entity, UserContext
from .overlay import merge_entities, parse_overlay_document
from .overlay_cache import OverlayCache
from .resolution import CatalogSnapshot, EntityResolver, ResolverResult, create_entity_resolver
from .schemas import OverlayReport

logger = logging.getLogger(__name__)


def _as_team_tuple(user_teams) -> Tuple[str, ...]:
    """A bare string is one saved team, not a sequence of characters."""
    if not user_teams:
        return ()
    if isinstance(user_teams, str):
        return (user_teams,)
    return tuple(user_teams)


class ResolverService:
    """
    Owns the current catalog snapshot and answers resolution queries.

    Readers take the snapshot reference once per call. Overlay merges build
    a new snapshot off to the side and publish it with one assignment, so
    a resolve() running concurrently sees either the old or the new catalog.
    """

    def __init__(
        self,
        entities: Sequence[Entity],
        config: Optional[ResolverConfig] = None,
        resolver: Optional[EntityResolver] = None,
        overlay_cache: Optional[OverlayCache] = None,
        version: int = 1,
    ):
        """
        Composition root.

        :param entities: Base catalog
        :param config: ResolverConfig (defaults when None)
        :param resolver: Pre-built resolver; built from config when None
        :param overlay_cache: Where applied overlays are persisted
        :param version: Version of the base catalog
        """
        self.config = config or ResolverConfig()
        self._resolver = resolver or create_entity_resolver(self.config)
        self._overlay_cache = overlay_cache
        self._snapshot = CatalogSnapshot.build(entities, version=version)
        self._write_lock = threading.Lock()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    # ----------------------------
    # Query handling
    # ----------------------------
    def resolve(
        self,
        query: str,
        user_teams: Sequence[str] = (),
        user_lat: Optional[float] = None,
        user_lon: Optional[float] = None,
        user_location: Optional[str] = None,
    ) -> Optional[ResolverResult]:
        """
        Resolve free text to a catalog entity.

        :return: ResolverResult, or None when nothing plausible matches
        """
        context = UserContext(
            user_teams=_as_team_tuple(user_teams),
            user_lat=user_lat,
            user_lon=user_lon,
            user_location=user_location,
        )
        return self._resolver.resolve(query, self._snapshot, context)

    def resolve_my_teams(self, user_teams: Sequence[str]) -> List[ResolverResult]:
        """Resolve each of the user's saved teams."""
        return self._resolver.resolve_my_teams(list(_as_team_tuple(user_teams)), self._snapshot)

    # ----------------------------
    # Overlay merge
    # ----------------------------
    def apply_overlay(self, document: Any, force: bool = False, persist: bool = True) -> OverlayReport:
        """
        Merge an overlay document into the catalog.

        Documents at or below the current catalog version are ignored unless
        ``force`` is set. Invalid records are skipped and reported.

        :param document: Decoded overlay JSON
        :param force: Apply regardless of version
        :param persist: Save the document to the overlay cache when applied
        :return: OverlayReport
        """
        parsed = parse_overlay_document(document)

        with self._write_lock:
            current = self._snapshot

            if not force and parsed.version <= current.version:
                logger.info(
                    f"Overlay v{parsed.version} ignored; catalog already at v{current.version}"
                )
                return OverlayReport(applied=False, version=current.version, failures=parsed.failures)

            merged, added, replaced = merge_entities(current.entities, parsed.entities)
            new_version = max(parsed.version, current.version)
            self._snapshot = CatalogSnapshot.build(merged, version=new_version)

            # Cache writes stay in the same order as snapshot publication
            if persist and self._overlay_cache is not None:
                self._overlay_cache.save(document)

        logger.info(
            f"Applied overlay v{parsed.version}: {added} added, {replaced} replaced, "
            f"{len(parsed.failures)} skipped"
        )

        return OverlayReport(
            applied=True,
            version=new_version,
            added=added,
            replaced=replaced,
            failures=parsed.failures,
        )

    def load_cached_overlay(self) -> Optional[OverlayReport]:
        """Replay the cached overlay, if any. Returns None when there is no cache."""
        if self._overlay_cache is None:
            return None
        document = self._overlay_cache.load()
        if document is None:
            return None
        return self.apply_overlay(document, persist=False)

"""
Public application facade for Entity Resolver Service.

This is the single stable entry point for the library.
"""
import logging
from typing import Any, List, Optional, Sequence

from .config import ResolverConfig
from .config_validator import validate_config
from .data_loader import EntityCatalogLoader
from .exceptions import ServiceNotInitializedError
from .overlay_cache import OverlayCache
from .resolution import ResolverResult
from .schemas import OverlayReport
from .service import ResolverService

logger = logging.getLogger(__name__)


class EntityResolverApp:
    """
    Public application facade for Entity Resolver Service.

    All dependency wiring is encapsulated here.

    Usage:
        config = load_config_from_env()
        app = EntityResolverApp(config)
        app.initialize()
        result = app.resolve("kc royals")
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        """
        :param config: ResolverConfig instance (defaults when None)
        """
        self._config = config or ResolverConfig()
        self._service: Optional[ResolverService] = None

    def initialize(self) -> None:
        """
        Load the catalog, build the resolver and replay any cached overlay.

        Call this once before using resolve().
        """
        if self._service:
            return

        validate_config(self._config)

        loader = EntityCatalogLoader(self._config.catalog_path)
        entities = loader.load_entities()

        overlay_cache = None
        if self._config.overlay_cache_path:
            overlay_cache = OverlayCache(self._config.overlay_cache_path)

        self._service = ResolverService(
            entities,
            config=self._config,
            overlay_cache=overlay_cache,
            version=loader.version,
        )

        report = self._service.load_cached_overlay()
        if report is not None and report.applied:
            logger.info(f"Replayed cached overlay v{report.version}")

    @property
    def service(self) -> ResolverService:
        if not self._service:
            raise ServiceNotInitializedError("Resolver is not initialized. Call initialize() first.")
        return self._service

    def resolve(
        self,
        query: str,
        user_teams: Sequence[str] = (),
        user_lat: Optional[float] = None,
        user_lon: Optional[float] = None,
        user_location: Optional[str] = None,
    ) -> Optional[ResolverResult]:
        return self.service.resolve(
            query,
            user_teams=user_teams,
            user_lat=user_lat,
            user_lon=user_lon,
            user_location=user_location,
        )

    def resolve_my_teams(self, user_teams: Sequence[str]) -> List[ResolverResult]:
        return self.service.resolve_my_teams(user_teams)

    def apply_overlay(self, document: Any, force: bool = False) -> OverlayReport:
        return self.service.apply_overlay(document, force=force)

"""
Concrete entity resolver.

Combines normalization, strategies, boosters and ranking into the full
resolution pipeline.
"""
import logging
from typing import List, Optional

from ..config import ScoringConfig
from ..models import UserContext
from .boosters import LocationBooster, MyTeamBooster
from .match_types import MatchType
from .normalizer import normalize
from .ranker import Ranker
from .resolution_policy import ResolutionPolicy
from .resolver_result import ResolverResult
from .snapshot import CatalogSnapshot

logger = logging.getLogger(__name__)

MY_TEAM_PHRASES = (
    "my team",
    "my teams",
    "our team",
    "our teams",
    "my favorite team",
    "my favourite team",
)


def is_my_team_phrase(normalized: str) -> bool:
    """True for "my team" style queries, including "my team colors"."""
    return any(normalized == p or normalized.startswith(f"{p} ") for p in MY_TEAM_PHRASES)


class EntityResolver:
    """
    Stateless resolution pipeline.

    Normalize -> my-team shortcut -> strategies -> boosts -> rank.
    The catalog is passed per call so callers control which snapshot is read.

    Usage:
        resolver = EntityResolver(policy)
        result = resolver.resolve("kc royals", snapshot)
        if result and result.is_high_confidence:
            entity = result.entity
    """

    def __init__(
        self,
        policy: ResolutionPolicy,
        scoring: ScoringConfig = ScoringConfig(),
    ):
        """
        :param policy: Ordered candidate strategies
        :param scoring: Boost and ranking constants
        """
        self._policy = policy
        self._my_team_booster = MyTeamBooster(scoring)
        self._location_booster = LocationBooster(scoring)
        self._ranker = Ranker(scoring)

    def resolve(
        self,
        query: str,
        snapshot: CatalogSnapshot,
        context: Optional[UserContext] = None,
    ) -> Optional[ResolverResult]:
        """
        Resolve free text to a catalog entity.

        :param query: Raw user text (e.g. "chiefs colors", "seahwks")
        :param snapshot: Catalog snapshot to resolve against
        :param context: Optional saved teams and location
        :return: ResolverResult, or None when nothing plausible matches
        """
        context = context or UserContext()
        normalized = normalize(query)
        if not normalized:
            return None

        if is_my_team_phrase(normalized):
            results = self.resolve_my_teams(context.user_teams, snapshot)
            return results[0] if results else None

        candidates = self._policy.generate(normalized, snapshot).to_list()
        if not candidates:
            logger.debug(f"No candidates for '{normalized}'")
            return None

        if context.user_teams:
            self._my_team_booster.apply(candidates, context.user_teams)

        if context.has_coordinates:
            self._location_booster.apply(candidates, context.user_lat, context.user_lon)
        elif context.user_location:
            self._location_booster.apply_from_name(candidates, context.user_location)

        return self._ranker.rank(candidates)

    def resolve_my_teams(
        self,
        user_teams: List[str],
        snapshot: CatalogSnapshot,
    ) -> List[ResolverResult]:
        """
        Resolve every saved team name independently.

        Saved names are resolved without personalization, and a saved name
        that is itself a "my team" phrase resolves to nothing.

        :return: One MY_TEAM_BOOSTED result per saved name that resolved
        """
        results = []
        for name in user_teams:
            normalized = normalize(name)
            if not normalized or is_my_team_phrase(normalized):
                continue

            result = self._ranker.rank(self._policy.generate(normalized, snapshot).to_list())
            if result is None:
                continue

            results.append(ResolverResult(
                entity=result.entity,
                confidence=1.0,
                matched_alias=name,
                match_type=MatchType.MY_TEAM_BOOSTED,
                raw_score=result.raw_score,
            ))
        return results

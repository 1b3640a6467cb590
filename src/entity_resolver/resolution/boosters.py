"""
Score boosters applied after candidate generation.

Personalization ("my teams") and geographic proximity adjust candidate
scores in place before ranking.
"""
import logging
from typing import Iterable, Sequence

from ..config import ScoringConfig
from .candidate import Candidate
from .geo import haversine_km, locate, lookup_city
from .match_types import MatchType
from .normalizer import normalize

logger = logging.getLogger(__name__)


class MyTeamBooster:
    """
    Boosts candidates that overlap the user's saved team names.

    A saved name overlaps when it contains or is contained in the official
    name, is contained in "city + last word of name", or equals an alias.
    """

    def __init__(self, scoring: ScoringConfig = ScoringConfig()):
        self._scoring = scoring

    def apply(self, candidates: Iterable[Candidate], user_teams: Sequence[str]) -> None:
        saved = {normalize(t) for t in user_teams}
        saved.discard("")
        if not saved:
            return

        for c in candidates:
            if self._is_my_team(c, saved):
                c.score += self._scoring.my_team_boost
                c.match_type = MatchType.MY_TEAM_BOOSTED
                logger.debug(f"My-team boost applied to '{c.entity.official_name}'")

    @staticmethod
    def _is_my_team(candidate: Candidate, saved: set) -> bool:
        entity = candidate.entity
        official = normalize(entity.official_name)
        last_word = official.split(" ")[-1] if official else ""
        city_and_name = normalize(f"{entity.city} {last_word}")
        aliases = {normalize(a) for a in entity.aliases}

        for team in saved:
            if team in official or official in team:
                return True
            if team in aliases:
                return True
            if team in city_and_name:
                return True
        return False


class LocationBooster:
    """
    Boosts candidates whose city is near the user.

    Within ``near_distance_km`` a candidate gains ``near_boost`` and is tagged
    LOCATION_BOOSTED (a MY_TEAM_BOOSTED tag is kept). Within
    ``regional_distance_km`` it gains ``regional_boost`` with its tag unchanged.
    Cities missing from the gazetteer are left alone.
    """

    def __init__(self, scoring: ScoringConfig = ScoringConfig()):
        self._scoring = scoring

    def apply(self, candidates: Iterable[Candidate], user_lat: float, user_lon: float) -> None:
        s = self._scoring
        for c in candidates:
            coords = lookup_city(c.entity.city)
            if coords is None:
                continue

            dist_km = haversine_km(user_lat, user_lon, coords.lat, coords.lon)
            if dist_km < s.near_distance_km:
                c.score += s.near_boost
                if c.match_type != MatchType.MY_TEAM_BOOSTED:
                    c.match_type = MatchType.LOCATION_BOOSTED
            elif dist_km < s.regional_distance_km:
                c.score += s.regional_boost

    def apply_from_name(self, candidates: Iterable[Candidate], location_name: str) -> None:
        """Boost using a free-text location; unknown places apply no boost."""
        coords = locate(location_name)
        if coords is None:
            logger.debug(f"No gazetteer entry for location '{location_name}'")
            return
        self.apply(candidates, coords.lat, coords.lon)

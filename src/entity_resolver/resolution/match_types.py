"""
Match provenance tags for resolved entities.
"""
from enum import Enum


class MatchType(Enum):
    """How a candidate was found or last boosted."""
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    LOCATION_BOOSTED = "location_boosted"
    MY_TEAM_BOOSTED = "my_team_boosted"

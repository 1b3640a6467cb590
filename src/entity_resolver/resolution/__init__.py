"""
Entity resolution layer.

Converts loose user text ("kc royals", "seahwks", "my team") into one
canonical catalog entity with a confidence score.

Key components:
- AliasIndex: normalized alias -> entities lookup
- CandidateStrategy: one candidate-generation phase
- Matchers: Exact, Containment and Fuzzy strategies
- ResolutionPolicy: first productive strategy wins
- Boosters: my-team and location score adjustments
- Ranker: confidence normalization and alternatives
"""
from .match_types import MatchType
from .normalizer import normalize
from .alias_index import AliasIndex
from .snapshot import CatalogSnapshot
from .string_distance import levenshtein, get_distance_function
from .geo import haversine_km, lookup_city, locate, CITY_COORDINATES
from .candidate import Candidate, CandidateList
from .candidate_strategy import CandidateStrategy
from .exact_matcher import ExactAliasMatcher
from .containment_matcher import ContainmentMatcher
from .fuzzy_matcher import FuzzyAliasMatcher
from .resolution_policy import ResolutionPolicy
from .boosters import MyTeamBooster, LocationBooster
from .resolver_result import ResolverResult, Alternative
from .ranker import Ranker
from .entity_resolver import EntityResolver, is_my_team_phrase
from .resolver_factory import create_entity_resolver

__all__ = [
    "MatchType",
    "normalize",
    "AliasIndex",
    "CatalogSnapshot",
    "levenshtein",
    "get_distance_function",
    "haversine_km",
    "lookup_city",
    "locate",
    "CITY_COORDINATES",
    "Candidate",
    "CandidateList",
    "CandidateStrategy",
    "ExactAliasMatcher",
    "ContainmentMatcher",
    "FuzzyAliasMatcher",
    "ResolutionPolicy",
    "MyTeamBooster",
    "LocationBooster",
    "ResolverResult",
    "Alternative",
    "Ranker",
    "EntityResolver",
    "is_my_team_phrase",
    "create_entity_resolver",
]

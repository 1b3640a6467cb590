"""
Factory for creating entity resolvers.

Wires the strategy chain and scoring constants from configuration.
"""
from typing import Optional

from ..config import ResolverConfig
from .containment_matcher import ContainmentMatcher
from .entity_resolver import EntityResolver
from .exact_matcher import ExactAliasMatcher
from .fuzzy_matcher import FuzzyAliasMatcher
from .resolution_policy import ResolutionPolicy
from .string_distance import get_distance_function


def create_entity_resolver(config: Optional[ResolverConfig] = None) -> EntityResolver:
    """
    Build an EntityResolver with the standard exact -> containment -> fuzzy chain.

    :param config: ResolverConfig instance (defaults used when None)
    :return: Configured EntityResolver
    """
    config = config or ResolverConfig()
    scoring = config.scoring

    policy = ResolutionPolicy(strategies=[
        ExactAliasMatcher(scoring),
        ContainmentMatcher(scoring),
        FuzzyAliasMatcher(scoring, distance=get_distance_function(config.distance_backend)),
    ])

    return EntityResolver(policy, scoring)

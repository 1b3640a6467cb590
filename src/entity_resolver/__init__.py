"""
Entity Resolver Service.

Resolves loose natural-language references ("kc royals", "my team",
"seahwks") to canonical team and holiday entities.
"""
from .config import ResolverConfig, ScoringConfig
from .models import Entity, EntityColor, UserContext
from .resolution import MatchType, ResolverResult, Alternative
from .service import ResolverService
from .app import EntityResolverApp

__all__ = [
    "ResolverConfig",
    "ScoringConfig",
    "Entity",
    "EntityColor",
    "UserContext",
    "MatchType",
    "ResolverResult",
    "Alternative",
    "ResolverService",
    "EntityResolverApp",
]

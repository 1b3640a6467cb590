from dataclasses import dataclass, field
from typing import Optional


DISTANCE_BACKENDS = ("builtin", "rapidfuzz")


@dataclass(frozen=True)
class ScoringConfig:
    """
    Hand-tuned scoring constants for candidate generation and boosting.

    Every value can be overridden through ``RESOLVER_<FIELD_NAME>``.
    """
    # Phase 1: exact alias
    exact_full_base: float = 100.0
    exact_window_base: float = 80.0
    max_window_size: int = 3

    # Phase 2: containment
    containment_name_base: float = 90.0
    containment_partial_base: float = 75.0

    # Phase 3: fuzzy
    fuzzy_min_length: int = 3
    fuzzy_word_base: float = 60.0
    fuzzy_word_penalty: float = 15.0
    fuzzy_short_word_length: int = 5
    fuzzy_short_word_max_distance: int = 1
    fuzzy_long_word_max_distance: int = 2
    fuzzy_phrase_base: float = 55.0
    fuzzy_phrase_penalty: float = 10.0
    fuzzy_phrase_min_query_length: int = 4
    fuzzy_phrase_short_alias_length: int = 8
    fuzzy_phrase_short_max_distance: int = 2
    fuzzy_phrase_long_max_distance: int = 3

    # Boosts
    my_team_boost: float = 20.0
    near_distance_km: float = 150.0
    near_boost: float = 15.0
    regional_distance_km: float = 400.0
    regional_boost: float = 5.0

    # Ranking
    alternative_min_confidence: float = 0.3
    max_alternatives: int = 3


@dataclass
class ResolverConfig:
    # Catalog
    catalog_path: Optional[str] = None
    overlay_cache_path: Optional[str] = None

    # Matching
    distance_backend: str = "builtin"
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    # Logging
    log_level: str = "INFO"

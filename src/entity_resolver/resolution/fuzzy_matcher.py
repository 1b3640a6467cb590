"""
Fuzzy matching strategy based on Levenshtein distance.

Handles typos and near-misses ("seahwks" -> "seahawks").
"""
from typing import Callable

from ..config import ScoringConfig
from .candidate import CandidateList
from .candidate_strategy import CandidateStrategy
from .match_types import MatchType
from .snapshot import CatalogSnapshot
from .string_distance import levenshtein


class FuzzyAliasMatcher(CandidateStrategy):
    """
    Fuzzy match strategy. Used as the last phase.

    Compares each query word against every alias key, and the whole query
    against multi-word aliases. Distance 0 never matches here; exact hits
    belong to the exact phase.
    """

    name = "fuzzy"

    def __init__(
        self,
        scoring: ScoringConfig = ScoringConfig(),
        distance: Callable[[str, str], int] = levenshtein,
    ):
        """
        :param scoring: Scoring constants and distance ceilings
        :param distance: Edit distance implementation
        """
        self._scoring = scoring
        self._distance = distance

    def generate(self, query: str, snapshot: CatalogSnapshot) -> CandidateList:
        s = self._scoring
        candidates = CandidateList()
        words = [w for w in query.split(" ") if len(w) >= s.fuzzy_min_length]
        index = snapshot.index

        for alias in index.keys():
            if len(alias) < s.fuzzy_min_length:
                continue

            for word in words:
                max_dist = (
                    s.fuzzy_short_word_max_distance
                    if len(word) <= s.fuzzy_short_word_length
                    else s.fuzzy_long_word_max_distance
                )
                dist = self._distance(word, alias)
                if 0 < dist <= max_dist:
                    score = s.fuzzy_word_base - dist * s.fuzzy_word_penalty + len(alias)
                    for entity in index.lookup(alias):
                        candidates.add(entity, alias, score, MatchType.FUZZY)

            if " " in alias and len(query) >= s.fuzzy_phrase_min_query_length:
                max_dist = (
                    s.fuzzy_phrase_short_max_distance
                    if len(alias) <= s.fuzzy_phrase_short_alias_length
                    else s.fuzzy_phrase_long_max_distance
                )
                dist = self._distance(query, alias)
                if 0 < dist <= max_dist:
                    score = s.fuzzy_phrase_base - dist * s.fuzzy_phrase_penalty + len(alias)
                    for entity in index.lookup(alias):
                        candidates.add(entity, alias, score, MatchType.FUZZY)

        return candidates

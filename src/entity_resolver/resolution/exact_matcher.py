"""
Exact alias matching strategy.

Fast, deterministic lookups against the alias index.
"""
from typing import List

from ..config import ScoringConfig
from .candidate import CandidateList
from .candidate_strategy import CandidateStrategy
from .match_types import MatchType
from .snapshot import CatalogSnapshot


class ExactAliasMatcher(CandidateStrategy):
    """
    Exact alias strategy. Used as the first phase.

    Tries the whole query first; failing that, every contiguous word window
    of three, two and one words ("show me kc royals colors" -> "kc royals").
    """

    name = "exact"

    def __init__(self, scoring: ScoringConfig = ScoringConfig()):
        self._scoring = scoring

    def generate(self, query: str, snapshot: CatalogSnapshot) -> CandidateList:
        candidates = CandidateList()
        index = snapshot.index

        if query in index:
            for entity in index.lookup(query):
                candidates.add(
                    entity,
                    query,
                    self._scoring.exact_full_base + len(query),
                    MatchType.EXACT,
                )
            return candidates

        for phrase in self._word_windows(query):
            for entity in index.lookup(phrase):
                candidates.add(
                    entity,
                    phrase,
                    self._scoring.exact_window_base + len(phrase),
                    MatchType.EXACT,
                )

        return candidates

    def _word_windows(self, query: str) -> List[str]:
        """Contiguous word windows, longest first."""
        words = query.split(" ")
        windows = []
        for size in range(self._scoring.max_window_size, 0, -1):
            for i in range(len(words) - size + 1):
                windows.append(" ".join(words[i:i + size]))
        return windows

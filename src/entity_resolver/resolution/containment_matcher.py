"""
Multi-word containment strategy.

Finds entities whose full name, or city plus an alias, appear inside a
longer sentence ("turn on the kansas city chiefs lights").
"""
from ..config import ScoringConfig
from .candidate import CandidateList
from .candidate_strategy import CandidateStrategy
from .match_types import MatchType
from .normalizer import normalize
from .snapshot import CatalogSnapshot


class ContainmentMatcher(CandidateStrategy):
    """
    Substring strategy over the full catalog. Used when no alias matched exactly.
    """

    name = "containment"

    def __init__(self, scoring: ScoringConfig = ScoringConfig()):
        self._scoring = scoring

    def generate(self, query: str, snapshot: CatalogSnapshot) -> CandidateList:
        candidates = CandidateList()

        for entity in snapshot.entities:
            official = normalize(entity.official_name)
            if official and official in query:
                candidates.add(
                    entity,
                    official,
                    self._scoring.containment_name_base + len(official),
                    MatchType.EXACT,
                )
                continue

            city = normalize(entity.city)
            if not city or city not in query:
                continue

            for raw_alias in entity.aliases:
                alias = normalize(raw_alias)
                # A bare city is too ambiguous on its own
                if not alias or alias == city:
                    continue
                if alias in query:
                    candidates.add(
                        entity,
                        f"{city} {alias}",
                        self._scoring.containment_partial_base + len(city) + len(alias),
                        MatchType.PARTIAL,
                    )
                    break

        return candidates

"""
Ranking and confidence normalization.
"""
from typing import List, Optional

from ..config import ScoringConfig
from .candidate import Candidate
from .resolver_result import Alternative, ResolverResult


class Ranker:
    """
    Turns boosted candidates into a ResolverResult.

    The top score is rescaled to 1.0 and every other score proportionally.
    Runner-ups at or above ``alternative_min_confidence`` become alternatives.
    """

    def __init__(self, scoring: ScoringConfig = ScoringConfig()):
        self._scoring = scoring

    def rank(self, candidates: List[Candidate]) -> Optional[ResolverResult]:
        """
        :param candidates: Scored candidates in generation order
        :return: ResolverResult, or None when nothing usable remains
        """
        if not candidates:
            return None

        ordered = sorted(candidates, key=lambda c: c.score, reverse=True)
        max_score = ordered[0].score
        if max_score <= 0:
            return None

        scaled = [min(max(c.score / max_score, 0.0), 1.0) for c in ordered]

        alternatives = []
        for candidate, confidence in zip(ordered[1:], scaled[1:]):
            if len(alternatives) >= self._scoring.max_alternatives:
                break
            if confidence < self._scoring.alternative_min_confidence:
                continue
            alternatives.append(Alternative(
                entity=candidate.entity,
                confidence=round(confidence, 2),
                reason=f"{candidate.entity.official_name} ({candidate.entity.category})",
            ))

        best = ordered[0]
        return ResolverResult(
            entity=best.entity,
            confidence=round(scaled[0], 2),
            matched_alias=best.matched_alias,
            match_type=best.match_type,
            alternatives=tuple(alternatives),
            raw_score=best.score,
        )

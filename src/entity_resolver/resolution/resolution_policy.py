"""
Resolution policy for strategy escalation.

Implements the escalation logic: exact -> containment -> fuzzy.
"""
import logging
from typing import List

from .candidate import CandidateList
from .candidate_strategy import CandidateStrategy
from .snapshot import CatalogSnapshot

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Policy for escalating through candidate strategies.

    Tries strategies in order and stops at the first one that yields any
    candidate. Later strategies are never invoked once an earlier one hits.
    """

    def __init__(self, strategies: List[CandidateStrategy]):
        """
        :param strategies: Strategies to try in order
        """
        if not strategies:
            raise ValueError("At least one strategy must be provided")

        self._strategies = list(strategies)

    @property
    def strategies(self) -> List[CandidateStrategy]:
        return list(self._strategies)

    def generate(self, query: str, snapshot: CatalogSnapshot) -> CandidateList:
        """
        Run strategies in order until one produces candidates.

        :param query: Normalized query
        :param snapshot: Catalog snapshot to search
        :return: Candidates from the first productive strategy, or empty
        """
        for strategy in self._strategies:
            candidates = strategy.generate(query, snapshot)
            if candidates:
                logger.debug(f"Strategy '{strategy.name}' produced {len(candidates)} candidates for '{query}'")
                return candidates
            logger.debug(f"Strategy '{strategy.name}' found nothing for '{query}'")

        return CandidateList()

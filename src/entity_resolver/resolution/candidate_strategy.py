"""
Core abstraction for candidate generation phases.
"""
from abc import ABC, abstractmethod

from .candidate import CandidateList
from .snapshot import CatalogSnapshot


class CandidateStrategy(ABC):
    """
    One phase of candidate generation.

    Strategies are tried in order by ResolutionPolicy; the first one that
    returns a non-empty CandidateList ends the search.
    """

    name: str = "strategy"

    @abstractmethod
    def generate(
        self,
        query: str,
        snapshot: CatalogSnapshot,
    ) -> CandidateList:
        """
        Produce scored candidates for a normalized query.

        :param query: Normalized, non-empty query
        :param snapshot: Catalog snapshot to search
        :return: Candidates, possibly empty
        """
        pass

"""
Result types returned by entity resolution.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..models import Entity
from .match_types import MatchType

HIGH_CONFIDENCE_THRESHOLD = 0.8
_COLOR_SLOTS = ("primary", "secondary", "accent")


@dataclass(frozen=True)
class Alternative:
    entity: Entity
    confidence: float
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.entity.official_name,
            "league": self.entity.category,
            "confidence": self.confidence,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ResolverResult:
    """
    Immutable outcome of resolving one query.

    Attributes:
        entity: The primary resolved entity
        confidence: Normalized confidence between 0.0 and 1.0
        matched_alias: The alias text that produced the match
        match_type: Provenance tag of the primary match
        alternatives: Up to three runner-up entities, best first
        raw_score: Primary candidate score before normalization
    """
    entity: Entity
    confidence: float
    matched_alias: str
    match_type: MatchType
    alternatives: Tuple[Alternative, ...] = ()
    raw_score: Optional[float] = None
    resolved: bool = True

    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence >= HIGH_CONFIDENCE_THRESHOLD

    def to_dict(self, include_provenance: bool = False) -> Dict[str, Any]:
        """
        Serialize for downstream consumers.

        :param include_provenance: Also emit ``matchType`` and ``matchedAlias``
        """
        colors = {
            slot: {"name": color.name, "rgb": color.rgb}
            for slot, color in zip(_COLOR_SLOTS, self.entity.colors)
        }
        result: Dict[str, Any] = {
            "resolved": self.resolved,
            "team": {
                "name": self.entity.official_name,
                "league": self.entity.category,
                "colors": colors,
            },
            "confidence": self.confidence,
            "alternatives": [alt.to_dict() for alt in self.alternatives],
        }

        if include_provenance:
            result["matchType"] = self.match_type.value
            result["matchedAlias"] = self.matched_alias

        return result

from dataclasses import dataclass
from typing import Any, Dict, Tuple


def unresolved_dict() -> Dict[str, Any]:
    """Serialized form of a query that matched nothing."""
    return {"resolved": False}


@dataclass(frozen=True)
class OverlayRecordFailure:
    section: str
    position: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"section": self.section, "position": self.position, "message": self.message}


@dataclass(frozen=True)
class OverlayReport:
    """Summary of one overlay document application."""
    applied: bool
    version: int
    added: int = 0
    replaced: int = 0
    failures: Tuple[OverlayRecordFailure, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "applied": self.applied,
            "version": self.version,
            "added": self.added,
            "replaced": self.replaced,
            "failures": [f.to_dict() for f in self.failures],
        }

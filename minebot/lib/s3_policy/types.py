"""Types pour le module s3_policy."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from minebot.lib.s1_snapshot.types import Position


class DecisionKind(str, Enum):
    """Type de décision."""
    REVEAL = "reveal"
    NO_CELLS_AVAILABLE = "no_cells_available"


@dataclass(frozen=True)
class Decision:
    """Résultat d'un cycle : révéler une case, ou plus rien à jouer."""
    kind: DecisionKind
    position: Optional[Position] = None
    risk: Optional[float] = None
    eligible_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.kind == DecisionKind.NO_CELLS_AVAILABLE

    @classmethod
    def reveal(cls, position: Position, risk: float, eligible_count: int) -> "Decision":
        return cls(DecisionKind.REVEAL, position, risk, eligible_count)

    @classmethod
    def exhausted(cls) -> "Decision":
        return cls(DecisionKind.NO_CELLS_AVAILABLE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "position": list(self.position) if self.position else None,
            "risk": self.risk,
            "eligible_count": self.eligible_count,
        }

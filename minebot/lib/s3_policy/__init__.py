"""Module s3_policy : Choix de la prochaine case à révéler."""

from .types import Decision, DecisionKind
from .policy import decide

__all__ = [
    "Decision",
    "DecisionKind",
    "decide",
]

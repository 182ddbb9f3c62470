"""Moteur d'inférence : répartition des indices sur les voisins non ouverts.

Heuristique locale en une passe : chaque case ouverte portant un indice k
répartit k à parts égales entre ses voisins non ouverts. Les contributions
s'additionnent. Aucune propagation jusqu'au point fixe, aucune normalisation :
le risque sert uniquement à classer les cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from minebot.lib.s1_snapshot.types import Board, Position

RiskMap = Dict[Position, float]


@dataclass
class InferenceStats:
    """Statistiques d'une passe d'inférence."""
    clued_cells: int = 0
    contributing_cells: int = 0
    touched_cells: int = 0
    max_risk: float = 0.0


class InferenceEngine:
    """Calcule la carte de risque d'un Board."""

    def __init__(self):
        self.last_stats = InferenceStats()

    def infer(self, board: Board, risk: Optional[RiskMap] = None) -> RiskMap:
        """Accumule le risque de chaque case et retourne la carte.

        Si `risk` est fourni il est complété en place (cases absentes à 0),
        sinon une nouvelle carte est allouée pour ce cycle.
        """
        if risk is None:
            risk = {}
        for position in board.cells:
            risk.setdefault(position, 0.0)

        stats = InferenceStats()
        touched = set()
        for cell in board.clued_cells:
            stats.clued_cells += 1
            candidates = [n for n in board.neighbors(cell.position) if not n.is_opened]
            if not candidates:
                continue

            share = cell.clue / len(candidates)
            if share > 0:
                stats.contributing_cells += 1
            for neighbor in candidates:
                risk[neighbor.position] += share
                if share > 0:
                    touched.add(neighbor.position)

        stats.touched_cells = len(touched)
        stats.max_risk = max(risk.values(), default=0.0)
        self.last_stats = stats
        return risk


# === API fonctionnelle ===

_default_engine: Optional[InferenceEngine] = None


def _get_engine() -> InferenceEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = InferenceEngine()
    return _default_engine


def infer(board: Board, risk: Optional[RiskMap] = None) -> RiskMap:
    """Calcule la carte de risque d'un Board (API fonctionnelle)."""
    return _get_engine().infer(board, risk)

"""Politique de décision : choix de la case la moins risquée."""

from typing import Optional

from minebot.lib.s1_snapshot.types import Board, Cell
from minebot.lib.s2_inference.engine import RiskMap
from .types import Decision


def decide(board: Board, risk: RiskMap) -> Decision:
    """Sélectionne la case éligible de risque strictement minimal.

    En cas d'égalité, la première case rencontrée dans l'ordre
    d'énumération du Board est conservée. Les cases absentes de la
    carte de risque comptent pour 0.
    """
    best: Optional[Cell] = None
    best_risk = 0.0
    eligible = 0

    for cell in board:
        if not cell.is_eligible:
            continue
        eligible += 1
        cell_risk = risk.get(cell.position, 0.0)
        if best is None or cell_risk < best_risk:
            best = cell
            best_risk = cell_risk

    if best is None:
        return Decision.exhausted()
    return Decision.reveal(best.position, best_risk, eligible)

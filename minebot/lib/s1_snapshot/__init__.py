"""Module s1_snapshot : Construction du snapshot de la grille."""

from .types import Board, Cell, CellStatus, Position, RawObservation, NEIGHBOR_OFFSETS
from .builder import build_board, MalformedObservation

__all__ = [
    # Types
    "Board",
    "Cell",
    "CellStatus",
    "Position",
    "RawObservation",
    "NEIGHBOR_OFFSETS",
    # Builder
    "build_board",
    "MalformedObservation",
]

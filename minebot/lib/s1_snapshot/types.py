"""Types pour le module s1_snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

Position = Tuple[int, int]

# Ordre d'énumération des 8 voisins (dx, dy)
NEIGHBOR_OFFSETS: Tuple[Position, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class CellStatus(str, Enum):
    """État observé d'une case."""
    OPENED = "opened"
    COVERED = "covered"
    FLAGGED = "flagged"
    MINE = "mine"


@dataclass(frozen=True)
class RawObservation:
    """Observation brute d'une case fournie par la surface de jeu."""
    x: int
    y: int
    status: Union[CellStatus, str]
    clue: Optional[object] = None

    @property
    def position(self) -> Position:
        return (self.x, self.y)


@dataclass(frozen=True)
class Cell:
    """Case validée d'un snapshot."""
    position: Position
    status: CellStatus
    clue: Optional[int] = None

    @property
    def is_opened(self) -> bool:
        return self.status == CellStatus.OPENED

    @property
    def is_clued(self) -> bool:
        return self.is_opened and self.clue is not None

    @property
    def is_eligible(self) -> bool:
        """Case ni ouverte ni minée : peut encore être révélée."""
        return self.status in (CellStatus.COVERED, CellStatus.FLAGGED)


@dataclass
class Board:
    """Snapshot indexé de la grille pour un cycle.

    L'ordre d'insertion des cases est l'ordre d'énumération, utilisé
    pour départager les égalités de risque.
    """
    cells: Dict[Position, Cell] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells.values())

    def __contains__(self, position: Position) -> bool:
        return position in self.cells

    def get(self, position: Position) -> Optional[Cell]:
        return self.cells.get(position)

    def neighbors(self, position: Position) -> List[Cell]:
        """Retourne les voisins présents sur la grille (bords inclus)."""
        x, y = position
        found = []
        for dx, dy in NEIGHBOR_OFFSETS:
            cell = self.cells.get((x + dx, y + dy))
            if cell is not None:
                found.append(cell)
        return found

    @property
    def clued_cells(self) -> List[Cell]:
        return [c for c in self.cells.values() if c.is_clued]

    @property
    def eligible_cells(self) -> List[Cell]:
        return [c for c in self.cells.values() if c.is_eligible]

    def count_by_status(self) -> Dict[str, int]:
        counts = {status.value: 0 for status in CellStatus}
        for cell in self.cells.values():
            counts[cell.status.value] += 1
        return counts

"""Surface de jeu en mémoire : une vraie partie de démineur, sans navigateur."""

from __future__ import annotations

import random
from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Set

from minebot.lib.s0_interface.api import GameOutcome
from minebot.lib.s0_interface.errors import ActionRejected, SurfaceUnavailable
from minebot.lib.s1_snapshot.types import NEIGHBOR_OFFSETS, CellStatus, Position, RawObservation


class MemoryBoardSurface:
    """Grille width x height avec des mines placées à l'avance.

    Règles : révéler une mine perd la partie (toutes les mines sont alors
    montrées), révéler un 0 ouvre sa zone par propagation, la partie est
    gagnée quand toutes les cases sans mine sont ouvertes.
    """

    def __init__(self, width: int, height: int, mines: Iterable[Position]):
        if width <= 0 or height <= 0:
            raise ValueError("width et height doivent être positifs.")
        self.width = width
        self.height = height
        self.mines: Set[Position] = set(mines)
        for position in self.mines:
            if not self._in_bounds(position):
                raise ValueError(f"Mine hors grille: {position}")
        if len(self.mines) >= width * height:
            raise ValueError("Il faut au moins une case sans mine.")

        self.clues: Dict[Position, int] = {
            (x, y): sum(1 for n in self._neighbors((x, y)) if n in self.mines)
            for y in range(height)
            for x in range(width)
        }
        self.revealed: Set[Position] = set()
        self.exploded: Optional[Position] = None
        self.started = False
        self.reveal_count = 0

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        mines_count: int,
        seed: Optional[int] = None,
    ) -> "MemoryBoardSurface":
        """Place `mines_count` mines uniformément au hasard."""
        if mines_count < 0 or mines_count >= width * height:
            raise ValueError("mines_count doit être dans [0, width*height).")
        rng = random.Random(seed)
        cells = [(x, y) for y in range(height) for x in range(width)]
        return cls(width, height, rng.sample(cells, mines_count))

    # --- Contrat de surface ---

    def start_game(self, target: Optional[str] = None) -> None:
        self.revealed.clear()
        self.exploded = None
        self.reveal_count = 0
        self.started = True

    def observe(self) -> List[RawObservation]:
        if not self.started:
            raise SurfaceUnavailable("Partie non démarrée")

        observations = []
        for y in range(self.height):
            for x in range(self.width):
                position = (x, y)
                if position in self.mines and (self.exploded or position in self.revealed):
                    observations.append(RawObservation(x, y, CellStatus.MINE))
                elif position in self.revealed:
                    observations.append(RawObservation(x, y, CellStatus.OPENED, self.clues[position]))
                else:
                    observations.append(RawObservation(x, y, CellStatus.COVERED))
        return observations

    def reveal(self, position: Position) -> None:
        if not self.started:
            raise SurfaceUnavailable("Partie non démarrée")
        if self.outcome() != GameOutcome.IN_PROGRESS:
            raise ActionRejected(f"Partie terminée, {position} ignorée")
        if not self._in_bounds(position):
            raise ActionRejected(f"Aucune case en {position}")
        if position in self.revealed:
            raise ActionRejected(f"Case {position} déjà révélée")

        self.reveal_count += 1
        if position in self.mines:
            self.revealed.add(position)
            self.exploded = position
            return
        self._flood_fill(position)

    def outcome(self) -> GameOutcome:
        if self.exploded is not None:
            return GameOutcome.LOST
        if self.started and len(self.revealed) == self.width * self.height - len(self.mines):
            return GameOutcome.WON
        return GameOutcome.IN_PROGRESS

    # --- Interne ---

    def _in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def _neighbors(self, position: Position) -> List[Position]:
        x, y = position
        return [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOR_OFFSETS
            if self._in_bounds((x + dx, y + dy))
        ]

    def _flood_fill(self, start: Position) -> None:
        """Ouvre la case et propage sur les zones à indice 0."""
        frontier: Deque[Position] = deque([start])
        while frontier:
            position = frontier.popleft()
            if position in self.revealed:
                continue
            self.revealed.add(position)
            if self.clues[position] != 0:
                continue
            for neighbor in self._neighbors(position):
                if neighbor not in self.revealed and neighbor not in self.mines:
                    frontier.append(neighbor)

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Sequence

from minebot.lib.s1_snapshot.types import Position, RawObservation


class GameOutcome(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class BoardSurfaceApi(Protocol):
    """Contrat de la surface de jeu consommée par la boucle."""

    def start_game(self, target: Optional[str] = None) -> None: ...

    def observe(self) -> Sequence[RawObservation]: ...

    def reveal(self, position: Position) -> None: ...

    def outcome(self) -> GameOutcome: ...

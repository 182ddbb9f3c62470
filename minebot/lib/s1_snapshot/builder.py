"""Construction du snapshot : observations brutes → Board validé."""

from __future__ import annotations

from typing import Iterable, Optional

from .types import Board, Cell, CellStatus, Position, RawObservation


class MalformedObservation(ValueError):
    """Snapshot inutilisable (position dupliquée, indice invalide, statut inconnu)."""


def _parse_status(label: object, position: Position) -> CellStatus:
    if isinstance(label, CellStatus):
        return label
    try:
        return CellStatus(label)
    except ValueError:
        raise MalformedObservation(f"Statut inconnu {label!r} en {position}") from None


def _parse_clue(value: object, position: Position) -> Optional[int]:
    """Valide un indice : entier >= 0 (ou chaîne de chiffres)."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedObservation(f"Indice non numérique {value!r} en {position}")
    if isinstance(value, int):
        clue = value
    elif isinstance(value, str) and value.isdecimal() and value.isascii():
        clue = int(value)
    else:
        raise MalformedObservation(f"Indice non numérique {value!r} en {position}")
    if clue < 0:
        raise MalformedObservation(f"Indice négatif {clue} en {position}")
    return clue


def _parse_position(observation: RawObservation) -> Position:
    x, y = observation.x, observation.y
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, int):
            raise MalformedObservation(f"Coordonnées invalides ({x!r}, {y!r})")
    return (x, y)


def build_board(observations: Iterable[RawObservation]) -> Board:
    """Construit un Board à partir des observations de la surface.

    Un indice porté par une case non ouverte est ignoré, mais il doit
    rester numérique et positif pour que l'observation soit acceptée.

    Raises:
        MalformedObservation: position répétée, statut inconnu ou indice invalide.
    """
    board = Board()
    for observation in observations:
        position = _parse_position(observation)
        if position in board:
            raise MalformedObservation(f"Position dupliquée {position}")

        status = _parse_status(observation.status, position)
        clue = _parse_clue(observation.clue, position)
        if status != CellStatus.OPENED:
            clue = None

        board.cells[position] = Cell(position=position, status=status, clue=clue)
    return board

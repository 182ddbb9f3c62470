"""Module s0_interface : Contrat et implémentation DOM de la surface de jeu."""

from .api import BoardSurfaceApi, GameOutcome
from .errors import SurfaceError, SurfaceUnavailable, SurfaceTimeout, ActionRejected
from .dom_surface import DomBoardSurface, parse_cell_classes

__all__ = [
    "BoardSurfaceApi",
    "GameOutcome",
    "SurfaceError",
    "SurfaceUnavailable",
    "SurfaceTimeout",
    "ActionRejected",
    "DomBoardSurface",
    "parse_cell_classes",
]

"""Module s4_simulator : Partie de démineur hors-ligne."""

from .board import MemoryBoardSurface

__all__ = ["MemoryBoardSurface"]

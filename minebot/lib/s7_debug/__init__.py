"""Module s7_debug : Traces structurées de la boucle de jeu."""

from .logger import (
    DebugLogger,
    CycleLog,
    ActionLog,
    get_logger,
    log_cycle,
    log_action,
    log_termination,
)

__all__ = [
    "DebugLogger",
    "CycleLog",
    "ActionLog",
    "get_logger",
    "log_cycle",
    "log_action",
    "log_termination",
]

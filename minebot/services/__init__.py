"""Services du bot démineur."""

from .s0_session_service import (
    Session,
    create_session,
    create_simulated_session,
    close_session,
    get_current_session,
)
from .s9_game_loop import (
    GameLoop,
    LoopState,
    RunReport,
    TerminationReason,
    run,
    run_game,
)

__all__ = [
    "Session",
    "create_session",
    "create_simulated_session",
    "close_session",
    "get_current_session",
    "GameLoop",
    "LoopState",
    "RunReport",
    "TerminationReason",
    "run",
    "run_game",
]

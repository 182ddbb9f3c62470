"""Boucle de jeu : orchestration séquentielle observe → infer → decide → act.

La boucle ne gère que :
- L'ordre d'appel des modules
- Les itérations et l'arrêt propre (annulation, garde-fou)
- La conversion des erreurs de surface en raison de fin

Un seul cycle est en cours à la fois : l'observation suivante n'est
demandée qu'après confirmation de l'action précédente par la surface.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from minebot.config import LOOP_CONFIG, WAIT_TIMES
from minebot.lib.s0_interface import BoardSurfaceApi, GameOutcome, SurfaceError
from minebot.lib.s1_snapshot import build_board, MalformedObservation
from minebot.lib.s2_inference import InferenceEngine
from minebot.lib.s3_policy import Decision, decide
from minebot.lib.s7_debug import DebugLogger


class LoopState(str, Enum):
    """États de la boucle."""
    STARTING = "starting"
    OBSERVING = "observing"
    DECIDING = "deciding"
    ACTING = "acting"
    TERMINATED = "terminated"


class TerminationReason(str, Enum):
    """Raison de fin de la boucle."""
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"
    SURFACE_ERROR = "surface_error"
    GAME_OVER = "game_over"


@dataclass
class RunReport:
    """Bilan d'une partie, produit une seule fois en fin de boucle."""
    reason: TerminationReason
    iterations: int
    actions: int
    duration: float
    last_decision: Optional[Decision] = None
    outcome: Optional[GameOutcome] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.reason in (TerminationReason.EXHAUSTED, TerminationReason.GAME_OVER)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reason": self.reason.value,
            "iterations": self.iterations,
            "actions": self.actions,
            "duration": self.duration,
            "last_decision": self.last_decision.to_dict() if self.last_decision else None,
            "outcome": self.outcome.value if self.outcome else None,
            "error": self.error,
        }


class GameLoop:
    """Machine à états de la boucle de jeu."""

    def __init__(
        self,
        surface: BoardSurfaceApi,
        *,
        logger: Optional[DebugLogger] = None,
        max_iterations: Optional[int] = LOOP_CONFIG['max_iterations'],
        delay: float = WAIT_TIMES['between_cycles'],
        stop_on_outcome: bool = LOOP_CONFIG['stop_on_outcome'],
        trace: bool = LOOP_CONFIG['trace'],
    ):
        self.surface = surface
        self.logger = logger
        self.max_iterations = max_iterations
        self.delay = delay
        self.stop_on_outcome = stop_on_outcome
        self.trace = trace

        self.engine = InferenceEngine()
        self.state = LoopState.STARTING
        self.iteration_count = 0
        self.total_actions = 0
        self.last_decision: Optional[Decision] = None
        self.report: Optional[RunReport] = None
        self._cancel_event = threading.Event()
        self._start_time = 0.0

    def cancel(self) -> None:
        """Demande un arrêt propre au début du prochain cycle."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self, start_target: Optional[str] = None) -> RunReport:
        """Démarre la partie puis enchaîne les cycles jusqu'à une condition de fin."""
        self._start_time = time.time()
        self.state = LoopState.STARTING

        try:
            self.surface.start_game(start_target)
        except SurfaceError as e:
            return self._terminate(TerminationReason.SURFACE_ERROR, error=e)

        self.state = LoopState.OBSERVING
        while True:
            if self.cancelled:
                return self._terminate(TerminationReason.CANCELLED)

            if self.max_iterations is not None and self.iteration_count >= self.max_iterations:
                print(f"[LOOP] Garde-fou atteint ({self.max_iterations} cycles)")
                return self._terminate(TerminationReason.CANCELLED)

            if self.stop_on_outcome:
                try:
                    outcome = self.surface.outcome()
                except SurfaceError as e:
                    return self._terminate(TerminationReason.SURFACE_ERROR, error=e)
                if outcome != GameOutcome.IN_PROGRESS:
                    return self._terminate(TerminationReason.GAME_OVER, outcome=outcome)

            try:
                decision = self.run_cycle()
            except (SurfaceError, MalformedObservation) as e:
                return self._terminate(TerminationReason.SURFACE_ERROR, error=e)

            if decision.is_terminal:
                return self._terminate(TerminationReason.EXHAUSTED)

            if self.delay > 0:
                self._cancel_event.wait(self.delay)

    def run_cycle(self) -> Decision:
        """Exécute un cycle complet et retourne la décision prise.

        Raises:
            SurfaceError: la surface n'a pas pu être lue ou a refusé l'action.
            MalformedObservation: le snapshot observé est inutilisable.
        """
        start_time = time.time()
        self.iteration_count += 1
        iteration = self.iteration_count

        # 1. OBSERVE
        self.state = LoopState.OBSERVING
        board = build_board(self.surface.observe())

        # 2. INFER + DECIDE
        self.state = LoopState.DECIDING
        risk = self.engine.infer(board)
        decision = decide(board, risk)
        self.last_decision = decision

        stats = self.engine.last_stats
        if self.trace:
            target = f"{decision.position} risque={decision.risk:.3f}" if not decision.is_terminal else "aucune case"
            print(f"[CYCLE {iteration}] cases={len(board)} éligibles={decision.eligible_count} "
                  f"indices={stats.clued_cells} → {target}")

        if self.logger:
            self.logger.log_cycle(
                iteration=iteration,
                duration=time.time() - start_time,
                cell_count=len(board),
                eligible_count=decision.eligible_count,
                clued_count=stats.clued_cells,
                decision=decision.kind.value,
                position=decision.position,
                risk=decision.risk,
            )

        if decision.is_terminal:
            return decision

        # 3. ACT
        self.state = LoopState.ACTING
        try:
            self.surface.reveal(decision.position)
        except SurfaceError as e:
            if self.logger:
                self.logger.log_action(iteration, decision.position, decision.risk, success=False, error=str(e))
            raise

        self.total_actions += 1
        if self.logger:
            self.logger.log_action(iteration, decision.position, decision.risk)

        self.state = LoopState.OBSERVING
        return decision

    def _terminate(
        self,
        reason: TerminationReason,
        outcome: Optional[GameOutcome] = None,
        error: Optional[Exception] = None,
    ) -> RunReport:
        self.state = LoopState.TERMINATED
        self.report = RunReport(
            reason=reason,
            iterations=self.iteration_count,
            actions=self.total_actions,
            duration=time.time() - self._start_time,
            last_decision=self.last_decision,
            outcome=outcome,
            error=f"{type(error).__name__}: {error}" if error else None,
        )

        if error:
            print(f"[ERREUR] {self.report.error}")
        if self.last_decision and not self.last_decision.is_terminal:
            last = f"{self.last_decision.position} (risque={self.last_decision.risk:.3f})"
        else:
            last = "aucune"
        suffix = f", issue={outcome.value}" if outcome else ""
        print(f"[GAME] Fin: {reason.value}{suffix} après {self.iteration_count} cycles, "
              f"{self.total_actions} actions, dernière décision: {last}")

        if self.logger:
            self.logger.log_termination(self.report.to_dict())
        return self.report


# === API fonctionnelle ===

def run(
    adapter: BoardSurfaceApi,
    start_target: Optional[str] = None,
    **options: Any,
) -> TerminationReason:
    """Joue une partie sur `adapter` et retourne la raison de fin."""
    return GameLoop(adapter, **options).run(start_target).reason


def run_game(session, **options: Any) -> RunReport:
    """Joue une partie sur la surface d'une session et retourne le bilan complet."""
    loop = GameLoop(session.surface, **options)
    session.loop = loop
    return loop.run(session.url)

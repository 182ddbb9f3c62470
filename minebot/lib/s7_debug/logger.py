"""Logger structuré pour le debug."""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any

from minebot.config import PATHS


@dataclass
class CycleLog:
    """Log d'un cycle observe → infer → decide."""
    iteration: int
    timestamp: str
    duration: float
    cell_count: int
    eligible_count: int
    clued_count: int
    decision: str
    position: Optional[tuple]
    risk: Optional[float]


@dataclass
class ActionLog:
    """Log d'une action."""
    timestamp: str
    iteration: int
    position: tuple
    risk: float
    success: bool
    error: Optional[str] = None


class DebugLogger:
    """Logger structuré : une ligne JSON par cycle et par action."""

    def __init__(self, log_dir: str = PATHS['logs']):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.reset()

    def reset(self) -> None:
        """Démarre une nouvelle session : nouvel identifiant, historique vidé."""
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.cycles: List[CycleLog] = []
        self.actions: List[ActionLog] = []
        self.termination: Optional[Dict[str, Any]] = None

    def log_cycle(
        self,
        iteration: int,
        duration: float,
        cell_count: int,
        eligible_count: int,
        clued_count: int,
        decision: str,
        position: Optional[tuple] = None,
        risk: Optional[float] = None,
    ) -> None:
        """Log un cycle."""
        log = CycleLog(
            iteration=iteration,
            timestamp=datetime.now().isoformat(),
            duration=duration,
            cell_count=cell_count,
            eligible_count=eligible_count,
            clued_count=clued_count,
            decision=decision,
            position=position,
            risk=risk,
        )
        self.cycles.append(log)
        self._write_log("cycles", asdict(log))

    def log_action(
        self,
        iteration: int,
        position: tuple,
        risk: float,
        success: bool = True,
        error: Optional[str] = None,
    ) -> None:
        """Log une action."""
        log = ActionLog(
            timestamp=datetime.now().isoformat(),
            iteration=iteration,
            position=position,
            risk=risk,
            success=success,
            error=error,
        )
        self.actions.append(log)
        self._write_log("actions", asdict(log))

    def log_termination(self, report: Dict[str, Any]) -> None:
        """Log la fin de la boucle (une seule fois par partie)."""
        self.termination = {"timestamp": datetime.now().isoformat(), **report}
        self._write_log("termination", self.termination)

    def save_session(self) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "total_cycles": len(self.cycles),
            "total_actions": len(self.actions),
            "termination": self.termination,
            "cycles": [asdict(c) for c in self.cycles],
            "actions": [asdict(a) for a in self.actions],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        risks = [a.risk for a in self.actions]
        return {
            "session_id": self.session_id,
            "cycles": len(self.cycles),
            "actions": len(self.actions),
            "failed_actions": sum(1 for a in self.actions if not a.success),
            "zero_risk_actions": sum(1 for r in risks if r == 0),
            "mean_risk": sum(risks) / len(risks) if risks else 0.0,
            "total_duration": sum(c.duration for c in self.cycles),
            "reason": self.termination.get("reason") if self.termination else None,
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")


# === API fonctionnelle ===

_logger: Optional[DebugLogger] = None


def get_logger(log_dir: Optional[str] = None) -> DebugLogger:
    """Retourne le logger global (créé au premier appel)."""
    global _logger
    if _logger is None or (log_dir is not None and Path(log_dir) != _logger.log_dir):
        _logger = DebugLogger(log_dir or PATHS['logs'])
    return _logger


def log_cycle(iteration: int, duration: float, cell_count: int, eligible_count: int,
              clued_count: int, decision: str, **kwargs) -> None:
    """Log un cycle via le logger global."""
    get_logger().log_cycle(iteration, duration, cell_count, eligible_count,
                           clued_count, decision, **kwargs)


def log_action(
    iteration: int,
    position: tuple,
    risk: float,
    success: bool = True,
    error: Optional[str] = None,
) -> None:
    """Log une action via le logger global."""
    get_logger().log_action(iteration, position, risk, success, error)


def log_termination(report: Dict[str, Any]) -> None:
    """Log la fin de partie via le logger global."""
    get_logger().log_termination(report)

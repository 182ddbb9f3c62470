"""Bot démineur : session + boucle de jeu + nettoyage."""

from __future__ import annotations

from typing import Optional

from minebot.lib.s7_debug import get_logger
from minebot.services import (
    Session,
    RunReport,
    create_session,
    create_simulated_session,
    close_session,
    run_game,
)


class MinesweeperBot:
    """Bot de démineur : observe la grille, choisit la case la moins risquée, clique."""

    def __init__(self, log_dir: Optional[str] = None):
        self.session: Optional[Session] = None
        self.logger = get_logger(log_dir)

    def play_online(
        self,
        url: str,
        *,
        headless: bool = False,
        **loop_options,
    ) -> RunReport:
        """Joue une partie dans le navigateur."""
        try:
            self.session = create_session(url=url, headless=headless)
        except Exception as e:
            print(f"[ERREUR] Session impossible: {e}")
            self.cleanup()
            raise
        return self._play(**loop_options)

    def play_simulated(
        self,
        width: int,
        height: int,
        mines: int,
        *,
        seed: Optional[int] = None,
        **loop_options,
    ) -> RunReport:
        """Joue une partie sur une grille simulée en mémoire."""
        self.session = create_simulated_session(width, height, mines, seed=seed)
        return self._play(**loop_options)

    def _play(self, **loop_options) -> RunReport:
        self.logger.reset()
        report = run_game(self.session, logger=self.logger, **loop_options)
        session_file = self.logger.save_session()
        summary = self.logger.get_summary()
        print(f"[DEBUG] Session sauvegardée: {session_file} "
              f"(actions={summary['actions']}, risque moyen={summary['mean_risk']:.3f})")
        return report

    def stop(self) -> None:
        """Demande l'arrêt de la boucle en cours (pris en compte au prochain cycle)."""
        if self.session and self.session.loop:
            self.session.loop.cancel()

    def cleanup(self) -> None:
        """Ferme proprement la session."""
        if self.session:
            close_session(self.session)
            self.session = None

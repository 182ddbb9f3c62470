"""Service de session : initialisation et nettoyage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from minebot.config import GAME_CONFIG, SIMULATOR_CONFIG
from minebot.lib.s0_browser import BrowserConfig, BrowserHandle, start_browser, stop_browser
from minebot.lib.s0_interface import BoardSurfaceApi, DomBoardSurface
from minebot.lib.s4_simulator import MemoryBoardSurface
from .s9_game_loop import GameLoop


@dataclass
class Session:
    """Session de jeu active."""
    surface: BoardSurfaceApi
    url: Optional[str] = None
    browser: Optional[BrowserHandle] = None
    loop: Optional[GameLoop] = None

    @property
    def driver(self):
        return self.browser.driver if self.browser else None


_current_session: Optional[Session] = None


def create_session(
    url: str = GAME_CONFIG['url'],
    headless: bool = False,
) -> Session:
    """Démarre le navigateur et prépare la surface DOM."""
    global _current_session

    config = BrowserConfig(headless=headless)
    browser = start_browser(config)
    surface = DomBoardSurface(browser.driver)

    session = Session(surface=surface, url=url, browser=browser)
    _current_session = session
    print(f"[SESSION] Session créée pour: {url}")
    return session


def create_simulated_session(
    width: int = SIMULATOR_CONFIG['width'],
    height: int = SIMULATOR_CONFIG['height'],
    mines: int = SIMULATOR_CONFIG['mines'],
    seed: Optional[int] = None,
) -> Session:
    """Prépare une session hors-ligne sur une grille simulée."""
    global _current_session

    surface = MemoryBoardSurface.random(width, height, mines, seed=seed)
    session = Session(surface=surface)
    _current_session = session
    print(f"[SESSION] Session simulée {width}x{height}, {mines} mines (seed={seed})")
    return session


def close_session(session: Optional[Session] = None) -> None:
    """Ferme une session proprement (annule la boucle, arrête le navigateur)."""
    global _current_session

    session = session or _current_session
    if session is None:
        return
    if session.loop is not None:
        session.loop.cancel()
    if session.browser:
        stop_browser(session.browser)
        print("[SESSION] Session fermée")

    if session is _current_session:
        _current_session = None


def get_current_session() -> Optional[Session]:
    """Retourne la session courante."""
    return _current_session

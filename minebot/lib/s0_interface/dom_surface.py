"""Surface de jeu DOM (minesweeper.online) pilotée par Selenium."""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Sequence, Tuple, Union

from selenium.common.exceptions import (
    ElementNotInteractableException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from minebot.config import DOM_CLASSES, GAME_CONFIG, WAIT_TIMES
from minebot.lib.s1_snapshot.types import CellStatus, Position, RawObservation
from .api import GameOutcome
from .errors import ActionRejected, SurfaceTimeout, SurfaceUnavailable


def parse_cell_classes(
    classes: Sequence[str],
    dom_classes: Optional[Dict] = None,
) -> Tuple[Union[CellStatus, str], Optional[int]]:
    """Traduit la liste de classes CSS d'une case en (statut, indice).

    Une combinaison inconnue est retournée telle quelle comme libellé,
    le builder la rejettera.
    """
    dom_classes = dom_classes or DOM_CLASSES
    prefix = dom_classes["type_prefix"]

    type_code = None
    for name in classes:
        suffix = name[len(prefix):]
        if name.startswith(prefix) and suffix.isascii() and suffix.isdecimal():
            type_code = int(suffix)
            break

    if type_code is not None and type_code in dom_classes["mine_types"]:
        return CellStatus.MINE, None
    if dom_classes["opened"] in classes:
        return CellStatus.OPENED, type_code
    if dom_classes["flag"] in classes:
        return CellStatus.FLAGGED, None
    if dom_classes["closed"] in classes:
        return CellStatus.COVERED, None
    return " ".join(classes), None


def _parse_coord(value):
    """Attribut data-x/data-y → int ; une valeur illisible reste brute pour le builder."""
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value


class DomBoardSurface:
    """Surface de jeu lisant et cliquant les cases du DOM."""

    # Lecture groupée de toutes les cases en un seul aller-retour
    OBSERVE_SCRIPT = """
    const cells = document.querySelectorAll(arguments[0]);
    return Array.from(cells).map((cell) => ({
        x: cell.getAttribute('data-x'),
        y: cell.getAttribute('data-y'),
        classes: Array.from(cell.classList),
    }));
    """

    READY_SCRIPT = "return document.readyState;"

    def __init__(
        self,
        driver: WebDriver,
        selectors: Optional[Dict] = None,
        dom_classes: Optional[Dict] = None,
        wait_times: Optional[Dict] = None,
    ):
        self.driver = driver
        self.selectors = {**GAME_CONFIG, **(selectors or {})}
        self.dom_classes = {**DOM_CLASSES, **(dom_classes or {})}
        self.wait_times = {**WAIT_TIMES, **(wait_times or {})}

    def start_game(self, target: Optional[str] = None) -> None:
        """Charge la page (si une URL est donnée) et lance la partie via le smiley."""
        try:
            if target:
                print(f"[SURFACE] Navigation vers: {target}")
                self.driver.get(target)

            wait = WebDriverWait(self.driver, self.wait_times["page_load"])
            wait.until(EC.presence_of_element_located(
                (By.CSS_SELECTOR, self.selectors["board_selector"])
            ))
            face = wait.until(EC.element_to_be_clickable(
                (By.CSS_SELECTOR, self.selectors["face_selector"])
            ))
            self._press(face)
        except TimeoutException as e:
            raise SurfaceTimeout(f"Grille introuvable: {e}") from e
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Impossible de démarrer la partie: {e}") from e

        self._wait_settled()
        print("[SURFACE] Partie démarrée")

    def observe(self) -> List[RawObservation]:
        """Lit l'état de toutes les cases exposées par la page."""
        try:
            WebDriverWait(self.driver, self.wait_times["element"]).until(
                EC.presence_of_element_located((By.CSS_SELECTOR, self.selectors["cell_selector"]))
            )
            raw_cells = self.driver.execute_script(self.OBSERVE_SCRIPT, self.selectors["cell_selector"])
        except TimeoutException as e:
            raise SurfaceTimeout(f"Aucune case visible: {e}") from e
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Lecture de la grille impossible: {e}") from e

        observations = []
        for raw in raw_cells or []:
            status, clue = parse_cell_classes(raw.get("classes") or [], self.dom_classes)
            observations.append(RawObservation(
                x=_parse_coord(raw.get("x")),
                y=_parse_coord(raw.get("y")),
                status=status,
                clue=clue,
            ))
        return observations

    def reveal(self, position: Position) -> None:
        """Clique la case puis attend que la page se stabilise."""
        x, y = position
        selector = f'{self.selectors["cell_selector"]}[data-x="{x}"][data-y="{y}"]'
        try:
            elements = self.driver.find_elements(By.CSS_SELECTOR, selector)
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Recherche de la case {position} impossible: {e}") from e
        if not elements:
            raise ActionRejected(f"Aucune case en {position}")

        element = elements[0]
        try:
            classes = (element.get_attribute("class") or "").split()
            status, _ = parse_cell_classes(classes, self.dom_classes)
            if status in (CellStatus.OPENED, CellStatus.MINE):
                raise ActionRejected(f"Case {position} déjà révélée")
            self._press(element)
        except (StaleElementReferenceException, ElementNotInteractableException) as e:
            raise ActionRejected(f"Case {position} non actionnable: {e}") from e
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Clic sur {position} impossible: {e}") from e

        self._wait_settled()

    def outcome(self) -> GameOutcome:
        """Lit l'état de la partie sur le smiley."""
        try:
            faces = self.driver.find_elements(By.CSS_SELECTOR, self.selectors["face_selector"])
            if not faces:
                return GameOutcome.IN_PROGRESS
            classes = (faces[0].get_attribute("class") or "").split()
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Lecture du smiley impossible: {e}") from e

        if self.dom_classes["face_win"] in classes:
            return GameOutcome.WON
        if self.dom_classes["face_lose"] in classes:
            return GameOutcome.LOST
        return GameOutcome.IN_PROGRESS

    def _press(self, element: WebElement) -> None:
        """Appui maintenu puis relâché sur un élément."""
        (
            ActionChains(self.driver)
            .move_to_element(element)
            .click_and_hold()
            .pause(self.wait_times["click_hold"])
            .release()
            .perform()
        )

    def _wait_settled(self) -> None:
        try:
            WebDriverWait(self.driver, self.wait_times["settle"]).until(
                lambda d: d.execute_script(self.READY_SCRIPT) == "complete"
            )
        except TimeoutException as e:
            raise SurfaceTimeout(f"La page ne s'est pas stabilisée: {e}") from e
        except WebDriverException as e:
            raise SurfaceUnavailable(f"Attente de stabilisation impossible: {e}") from e
        if self.wait_times["settle_pause"] > 0:
            time.sleep(self.wait_times["settle_pause"])

"""Gestion du navigateur Selenium."""

from typing import Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager
from selenium.webdriver.chrome.options import Options

from .types import BrowserConfig, BrowserHandle


class BrowserManager:
    """Gestionnaire du navigateur web."""

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self.handle: Optional[BrowserHandle] = None

    def build_options(self) -> Options:
        """Construit les options Chrome à partir de la configuration."""
        options = Options()

        if self.config.headless:
            options.add_argument("--headless")
            options.add_argument("--disable-gpu")
            options.add_argument("--window-size=1920,1080")

        if self.config.maximize:
            options.add_argument("--start-maximized")

        options.add_argument("--disable-blink-features=AutomationControlled")
        options.add_experimental_option("excludeSwitches", ["enable-automation"])
        options.add_experimental_option("useAutomationExtension", False)
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")

        if self.config.user_agent:
            options.add_argument(f'user-agent={self.config.user_agent}')
        return options

    def start(self) -> BrowserHandle:
        """Démarre le navigateur Chrome."""
        try:
            options = self.build_options()

            print("[BROWSER] Installation du pilote Chrome...")
            service = Service(ChromeDriverManager().install())

            print("[BROWSER] Démarrage de Chrome...")
            driver = webdriver.Chrome(service=service, options=options)
            driver.set_page_load_timeout(self.config.page_load_timeout)

            driver.execute_script("Object.defineProperty(navigator, 'webdriver', {get: () => undefined})")

            if self.config.maximize and not self.config.headless:
                driver.maximize_window()

            print("[BROWSER] Navigateur démarré")
            self.handle = BrowserHandle(driver=driver, is_started=True)
            return self.handle

        except WebDriverException as e:
            print(f"[ERREUR] Erreur lors du démarrage du navigateur: {e}")
            raise


def start_browser(config: Optional[BrowserConfig] = None) -> BrowserHandle:
    """Démarre un navigateur et retourne un handle."""
    manager = BrowserManager(config)
    return manager.start()


def stop_browser(handle: Optional[BrowserHandle]) -> None:
    """Arrête un navigateur via son handle."""
    if handle:
        handle.close()

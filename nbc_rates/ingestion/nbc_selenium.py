"""Browser automation for loading the NBC exchange rate table."""

from __future__ import annotations

from dataclasses import dataclass

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from nbc_rates.config import BROWSER_TIMEOUT_SECONDS
from nbc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class NBCPageLocators:
    """Selectors used to interact with the NBC exchange rate form."""

    date_input: tuple[str, str] = (By.CSS_SELECTOR, "#datepicker")
    submit_button: tuple[str, str] = (By.CSS_SELECTOR, 'input[type="submit"]')
    results_table: tuple[str, str] = (By.CSS_SELECTOR, ".tbl-responsive")


class NBCSeleniumClient:
    """Selenium-based client that renders the NBC rate table.

    Each instance launches its own headless Chrome unless a ``driver`` is
    supplied; only self-launched browsers are quit on :meth:`close`.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        timeout: int = BROWSER_TIMEOUT_SECONDS,
        window_size: tuple[int, int] = (1080, 1024),
        locators: NBCPageLocators | None = None,
        driver: webdriver.Chrome | None = None,
    ) -> None:
        self.timeout = timeout
        self.window_size = window_size
        self.locators = locators or NBCPageLocators()
        self._owns_driver = driver is None
        if driver is None:
            options = Options()
            if headless:
                options.add_argument("--headless=new")
            options.add_argument("--disable-gpu")
            options.add_argument("--no-sandbox")
            options.add_argument("--disable-dev-shm-usage")
            # Return from ``get`` once the DOM is parsed, not after every resource.
            options.page_load_strategy = "eager"
            self.driver = webdriver.Chrome(options=options)
        else:
            self.driver = driver

    def close(self) -> None:
        """Quit the browser if this client launched it."""

        if getattr(self, "driver", None) is not None and self._owns_driver:
            self.driver.quit()
            self.driver = None

    def __enter__(self) -> "NBCSeleniumClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fetch_page_source(self, url: str) -> str:
        """Submit the rate form at ``url`` and return the rendered HTML."""

        LOGGER.info("Loading NBC exchange rate page %s", url)
        self.driver.get(url)
        self.driver.set_window_size(*self.window_size)
        wait = WebDriverWait(self.driver, self.timeout)
        self._clear_date_field(wait)
        self.driver.find_element(*self.locators.submit_button).click()
        wait.until(EC.presence_of_element_located(self.locators.results_table))
        return self.driver.page_source

    def _clear_date_field(self, wait: WebDriverWait) -> None:
        # The date picker ignores direct ``value`` writes.
        element = wait.until(EC.presence_of_element_located(self.locators.date_input))
        self.driver.execute_script("arguments[0].focus();", element)
        (
            ActionChains(self.driver)
            .key_down(Keys.CONTROL)
            .send_keys("a")
            .key_up(Keys.CONTROL)
            .send_keys(Keys.BACKSPACE)
            .perform()
        )


__all__ = ["NBCPageLocators", "NBCSeleniumClient"]

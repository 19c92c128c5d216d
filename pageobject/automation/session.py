"""
Chrome session factory for page object tests.

PageObject never owns the driver; BrowserSession is the piece of test setup
that does. It launches Chrome through webdriver-manager and quits it on exit.
"""

import logging
from pathlib import Path
from typing import Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager

from .browser_config import BrowserConfig


logger = logging.getLogger(__name__)


def build_chrome_options(config: BrowserConfig) -> Options:
    """Translate a BrowserConfig into Chrome command-line options."""
    options = Options()

    if config.headless:
        options.add_argument("--headless=new")
        options.add_argument("--disable-gpu")

    width, height = config.window_size
    options.add_argument(f"--window-size={width},{height}")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")

    if config.user_agent:
        options.add_argument(f"--user-agent={config.user_agent}")

    if config.download_dir:
        prefs = {
            "download.default_directory": str(Path(config.download_dir).absolute()),
            "download.prompt_for_download": False,
        }
        options.add_experimental_option("prefs", prefs)

    return options


class BrowserSession:
    """
    Owns one Chrome WebDriver for the duration of a test.

    Examples:
        >>> with BrowserSession(BrowserConfig.for_testing()) as driver:
        ...     page = LoginPage(driver, PageObjectConfig.from_env())
        ...     page.open("/login").unwrap()
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Launch Chrome.

        Raises:
            WebDriverException: If ChromeDriver initialization fails
        """
        self.config = config or BrowserConfig()
        self.driver: Optional[WebDriver] = None

        try:
            service = Service(ChromeDriverManager().install())
            self.driver = webdriver.Chrome(
                service=service,
                options=build_chrome_options(self.config)
            )
            self.driver.set_page_load_timeout(self.config.page_load_timeout)
            self.driver.implicitly_wait(0)

            logger.info(
                f"Browser session started (headless={self.config.headless}, "
                f"window_size={self.config.window_size})"
            )

        except Exception as e:
            logger.error(f"Failed to start browser session: {e}", exc_info=True)
            self.close()
            raise WebDriverException(f"Browser initialization failed: {e}") from e

    def close(self):
        """Quit the browser. Never raises."""
        if self.driver is None:
            return
        try:
            self.driver.quit()
            logger.info("Browser session closed")
        except WebDriverException as e:
            logger.warning(f"Error closing browser: {e}")
        finally:
            self.driver = None

    def __enter__(self) -> WebDriver:
        return self.driver

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

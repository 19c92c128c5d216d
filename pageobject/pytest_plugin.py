"""
pytest fixtures for page object suites.

Enable in a suite's conftest.py:

    pytest_plugins = ["pageobject.pytest_plugin"]

Then:

    def test_login(browser_session, page_config):
        page = LoginPage(browser_session, page_config)
        page.open("/login").unwrap()
"""

import logging
from typing import Generator

import pytest
from selenium.webdriver.remote.webdriver import WebDriver

from .automation.browser_config import BrowserConfig
from .automation.session import BrowserSession
from .utils.config import PageObjectConfig


logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def page_config() -> PageObjectConfig:
    """Page object settings read once per test session."""
    config = PageObjectConfig.from_env()
    logger.info(f"Page object config: {config.to_dict()}")
    return config


@pytest.fixture(scope="session")
def browser_config() -> BrowserConfig:
    return BrowserConfig.from_env()


@pytest.fixture
def browser_session(browser_config: BrowserConfig) -> Generator[WebDriver, None, None]:
    """A fresh Chrome session per test, quit afterwards."""
    with BrowserSession(browser_config) as driver:
        yield driver

"""
Page Object layer for Selenium UI tests.

Usage:
    >>> from pageobject import PageObject, Element, PageObjectConfig
    >>>
    >>> class SearchPage(PageObject[Element]):
    ...     query = Element.name("q")
    ...     result_link = Element.xpath("(//a[@class='result'])[{0}]")
    >>>
    >>> page = SearchPage(driver, PageObjectConfig.from_env())
    >>> page.send_keys(SearchPage.query, "selenium").unwrap()
    >>> page.click(SearchPage.result_link, "1").unwrap()
"""

from .automation.browser_config import BrowserConfig
from .automation.element import DropDownOption, Element, Placeholders
from .automation.interfaces import DropDownValue, Locator, PageElement, PlaceholdersProvider
from .automation.page_object import PageObject
from .automation.session import BrowserSession
from .models.errors import (
    AlertMismatchError,
    DriverError,
    ElementAssertionError,
    InvalidSelectionError,
    PageObjectError,
    UnexpectedAlertError,
    WaitTimeoutError,
)
from .models.result import FailureKind, Result, ResultStatus
from .utils.config import PageObjectConfig
from .utils.logger import setup_logger

__all__ = [
    "AlertMismatchError",
    "BrowserConfig",
    "BrowserSession",
    "DriverError",
    "DropDownOption",
    "DropDownValue",
    "Element",
    "ElementAssertionError",
    "FailureKind",
    "InvalidSelectionError",
    "Locator",
    "PageElement",
    "PageObject",
    "PageObjectConfig",
    "PageObjectError",
    "Placeholders",
    "PlaceholdersProvider",
    "Result",
    "ResultStatus",
    "UnexpectedAlertError",
    "WaitTimeoutError",
    "setup_logger",
]

__version__ = "0.1.0"

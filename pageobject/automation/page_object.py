"""
Page Object base class over Selenium WebDriver.

This module provides PageObject, the single entry point test pages use to
talk to the browser:
- Explicit clickability wait before every interaction
- Result<T> pattern instead of raised driver exceptions
- Placeholder-based locator templates for repeated controls
- Native alert detection with its own, shorter timeout
"""

import logging
from typing import Generic, Optional, TypeVar, Union

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.alert import Alert
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from .interfaces import DropDownValue, PageElement, PlaceholdersProvider
from ..models.result import FailureKind, Result
from ..utils.config import PageObjectConfig
from ..utils.logger import mask_text


logger = logging.getLogger(__name__)

E = TypeVar('E', bound=PageElement)


def _describe(element: PageElement, placeholders) -> str:
    by, expression = element.get_by(*placeholders)
    return f"{by}='{expression}'"


class PageObject(Generic[E]):
    """
    Base class for page objects.

    Subclasses declare their elements and build page-level actions out of
    the operations below. Each operation takes an element plus optional
    placeholder strings for templated locators, waits for the element to
    become clickable, and reports the outcome as a Result.

    The driver session is owned by test setup; a page object only borrows
    it and never quits it. Page objects are not thread-safe: one session,
    one thread.

    Examples:
        >>> class LoginPage(PageObject[Element]):
        ...     email = Element.id("email")
        ...     password = Element.id("password")
        ...     submit = Element.css("button[type='submit']")
        ...
        ...     def login(self, email, password):
        ...         self.send_keys(self.email, email).unwrap()
        ...         self.send_keys(self.password, password).unwrap()
        ...         return self.click_and_wait_for_page_to_load(self.submit)

        >>> page = LoginPage(driver, PageObjectConfig.from_env())
        >>> page.open("/login").unwrap()
        >>> page.login("user@example.com", "secret").unwrap()
    """

    def __init__(self, session: WebDriver, config: PageObjectConfig):
        """
        Initialize PageObject.

        Args:
            session: Live WebDriver session, owned by the caller
            config: Timeouts and base URL
        """
        self.session = session
        self.config = config

    def _wait(self, timeout: Optional[float] = None) -> WebDriverWait:
        if timeout is None:
            timeout = self.config.default_timeout
        return WebDriverWait(
            self.session,
            timeout,
            poll_frequency=self.config.poll_frequency
        )

    def _timeout_failure(self, what: str, error: TimeoutException) -> Result:
        message = f"Timed out after {self.config.default_timeout}s waiting for {what}"
        logger.warning(message)
        return Result.failure(FailureKind.TIMEOUT, message, error)

    def _driver_failure(self, what: str, error: WebDriverException) -> Result:
        message = f"{what} failed: {error.msg or type(error).__name__}"
        logger.error(message)
        return Result.failure(FailureKind.DRIVER_ERROR, message, error)

    def _get_web_element(self, element: E, *placeholders: str) -> Result[WebElement]:
        """Wait until the element is present and clickable, then return it."""
        locator = element.get_by(*placeholders)
        target = f"{locator[0]}='{locator[1]}'"

        try:
            logger.debug(f"Waiting for clickable element: {target}")
            web_element = self._wait().until(EC.element_to_be_clickable(locator))
            return Result.success(web_element, f"Element clickable: {target}")

        except TimeoutException as e:
            return self._timeout_failure(f"clickable element {target}", e)

        except WebDriverException as e:
            return self._driver_failure(f"Locating {target}", e)

    def _interact(self, action: str, element: E, placeholders, operation) -> Result:
        """Resolve the element and apply ``operation`` to it."""
        element_result = self._get_web_element(element, *placeholders)
        if element_result.is_failure:
            return element_result

        target = _describe(element, placeholders)
        try:
            value = operation(element_result.value)
            return Result.success(value, f"{action}: {target}")

        except WebDriverException as e:
            return self._driver_failure(f"{action} on {target}", e)

    def _perform(self, action: str, element: E, placeholders, operation) -> Result[None]:
        """Like ``_interact``, for actions whose return value is irrelevant."""
        return self._interact(action, element, placeholders, operation).map(lambda _: None)

    def _wait_get_alert(self) -> Optional[Alert]:
        """
        Return the open alert, or None if none shows up in time.

        Absence of an alert is a normal outcome here, so the timeout is
        translated to None instead of a failure.
        """
        try:
            return self._wait(self.config.alert_timeout).until(EC.alert_is_present())
        except TimeoutException:
            logger.debug(f"No alert within {self.config.alert_timeout}s")
            return None

    def open(self, path: str = "") -> Result[None]:
        """
        Navigate to ``path`` under the configured base URL.

        The path is appended to the base URL, keeping any path the base
        URL already has: ``https://host/app`` + ``login`` opens
        ``https://host/app/login``.
        """
        if not self.config.url:
            return Result.failure(
                FailureKind.DRIVER_ERROR,
                "Cannot open page: no base URL configured"
            )

        url = self.config.url
        if path:
            url = url.rstrip("/") + "/" + path.lstrip("/")
        try:
            logger.debug(f"Navigating to: {url}")
            self.session.get(url)
            return Result.success(None, f"Navigated to {url}")

        except WebDriverException as e:
            return self._driver_failure(f"Navigation to {url}", e)

    def wait_for_element_to_be_visible(self, element: E, *placeholders: str) -> Result[None]:
        locator = element.get_by(*placeholders)
        target = f"{locator[0]}='{locator[1]}'"
        try:
            logger.debug(f"Waiting for element to be visible: {target}")
            self._wait().until(EC.visibility_of_element_located(locator))
            return Result.success(None, f"Element visible: {target}")

        except TimeoutException as e:
            return self._timeout_failure(f"visible element {target}", e)

        except WebDriverException as e:
            return self._driver_failure(f"Visibility wait on {target}", e)

    def wait_for_element_to_be_not_visible(self, element: E, *placeholders: str) -> Result[None]:
        locator = element.get_by(*placeholders)
        target = f"{locator[0]}='{locator[1]}'"
        try:
            logger.debug(f"Waiting for element to disappear: {target}")
            self._wait().until(EC.invisibility_of_element_located(locator))
            return Result.success(None, f"Element not visible: {target}")

        except TimeoutException as e:
            return self._timeout_failure(f"element {target} to disappear", e)

        except WebDriverException as e:
            return self._driver_failure(f"Invisibility wait on {target}", e)

    def is_enabled(self, element: E, *placeholders: str) -> Result[bool]:
        return self._interact("Is enabled", element, placeholders, lambda el: el.is_enabled())

    def is_visible(self, element: E, *placeholders: str) -> Result[bool]:
        return self._interact("Is visible", element, placeholders, lambda el: el.is_displayed())

    def get_text(self, element: E, *placeholders: str) -> Result[str]:
        return self._interact("Get text", element, placeholders, lambda el: el.text)

    def set_selected_option(
        self,
        element: E,
        value: Union[str, DropDownValue],
        *placeholders: str
    ) -> Result[None]:
        """
        Select the option whose visible text equals ``value`` exactly.

        Args:
            element: Select element
            value: Visible text, or a DropDownValue carrying it
            *placeholders: Locator placeholders

        Returns:
            Result with None on success; INVALID_SELECTION listing every
            available option text when nothing matches
        """
        visible_text = value.value if isinstance(value, DropDownValue) else value

        element_result = self._get_web_element(element, *placeholders)
        if element_result.is_failure:
            return element_result

        target = _describe(element, placeholders)
        try:
            select = Select(element_result.value)
            options_texts = [option.text for option in select.options]

            if visible_text not in options_texts:
                message = (
                    f"There is no option with visible text equal to {visible_text} "
                    f"in drop down. Visible options: {options_texts}."
                )
                logger.warning(message)
                return Result.failure(FailureKind.INVALID_SELECTION, message)

            select.select_by_visible_text(visible_text)
            return Result.success(None, f"Selected '{visible_text}' in {target}")

        except WebDriverException as e:
            return self._driver_failure(f"Selecting '{visible_text}' in {target}", e)

    def get_selected_option(self, element: E, *placeholders: str) -> Result[str]:
        return self._interact(
            "Get selected option",
            element,
            placeholders,
            lambda el: Select(el).first_selected_option.text
        )

    def click(self, element: E, *placeholders: str) -> Result[None]:
        return self._perform("Click", element, placeholders, lambda el: el.click())

    def click_and_wait_for_page_to_load(self, element: E, *placeholders: str) -> Result[None]:
        """
        Click the element and wait until it detaches from the document.

        Staleness of the clicked element only tells that the page transition
        started; wait for an element of the next page before relying on it.
        """
        element_result = self._get_web_element(element, *placeholders)
        if element_result.is_failure:
            return element_result

        control_element = element_result.value
        target = _describe(element, placeholders)
        try:
            control_element.click()
            self._wait().until(EC.staleness_of(control_element))
            return Result.success(None, f"Clicked and left page: {target}")

        except TimeoutException as e:
            return self._timeout_failure(f"page transition after clicking {target}", e)

        except WebDriverException as e:
            return self._driver_failure(f"Click on {target}", e)

    def send_keys(self, element: E, text: str, *placeholders: str) -> Result[None]:
        """Replace the element's content with ``text``."""
        def _type(el: WebElement):
            logger.debug(f"Typing {mask_text(text)} into {_describe(element, placeholders)}")
            el.clear()
            el.send_keys(text)

        return self._perform("Send keys", element, placeholders, _type)

    def press_tab_key(self, element: E, *placeholders: str) -> Result[None]:
        return self._perform("Press tab", element, placeholders, lambda el: el.send_keys(Keys.TAB))

    def clear(self, element: E, *placeholders: str) -> Result[None]:
        return self._perform("Clear", element, placeholders, lambda el: el.clear())

    def _adjust_checkbox_state(self, element: E, state: bool, placeholders) -> Result[None]:
        def _adjust(checkbox: WebElement):
            if checkbox.is_selected() != state:
                checkbox.click()

        return self._perform("Set checkbox" if state else "Unset checkbox", element, placeholders, _adjust)

    def tick_checkbox(self, element: E, *placeholders: str) -> Result[None]:
        return self._adjust_checkbox_state(element, True, placeholders)

    def untick_checkbox(self, element: E, *placeholders: str) -> Result[None]:
        return self._adjust_checkbox_state(element, False, placeholders)

    def should_have(
        self,
        element: E,
        *placeholders: Union[str, PlaceholdersProvider]
    ) -> Result[None]:
        """
        Assert the element is present and clickable.

        Placeholders may be given as strings or as a single
        PlaceholdersProvider.
        """
        if len(placeholders) == 1 and isinstance(placeholders[0], PlaceholdersProvider):
            placeholders = tuple(placeholders[0].placeholders)

        return self._get_web_element(element, *placeholders).map(lambda _: None)

    def should_have_enabled(self, element: E, *placeholders: str) -> Result[None]:
        enabled_result = self.is_enabled(element, *placeholders)
        if enabled_result.is_failure:
            return enabled_result

        if not enabled_result.value:
            _, expression = element.get_by(*placeholders)
            message = f"Element located by {element.type} = '{expression}' is not enabled."
            logger.warning(message)
            return Result.failure(FailureKind.ASSERTION_FAILED, message)

        return Result.success(None, enabled_result.message)

    def close_alert(self, alert_message: str) -> Result[None]:
        """Accept the open alert if its text equals ``alert_message``."""
        alert = self._wait_get_alert()
        if alert is None:
            message = f"Expected alert with '{alert_message}' message but no alert appeared."
            logger.warning(message)
            return Result.failure(FailureKind.ALERT_MISMATCH, message)

        try:
            actual = alert.text
            if actual != alert_message:
                message = (
                    f"Expected alert with '{alert_message}' message "
                    f"but got '{actual}' message."
                )
                logger.warning(message)
                return Result.failure(FailureKind.ALERT_MISMATCH, message)

            alert.accept()
            return Result.success(None, f"Alert accepted: '{actual}'")

        except WebDriverException as e:
            return self._driver_failure("Closing alert", e)

    def no_alert_present(self) -> Result[None]:
        alert = self._wait_get_alert()
        if alert is None:
            return Result.success(None, "No alert present")

        try:
            message = f"Alert with '{alert.text}' message appeared."
        except WebDriverException as e:
            return self._driver_failure("Reading alert", e)

        logger.warning(message)
        return Result.failure(FailureKind.UNEXPECTED_ALERT, message)

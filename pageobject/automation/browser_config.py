"""
Browser configuration dataclass.

Describes how the Chrome session behind a test run is launched. Page-level
timeouts live in PageObjectConfig; this only covers the browser process.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be one of {', '.join(_TRUE_VALUES + _FALSE_VALUES)}, got: {raw!r}"
    )


@dataclass
class BrowserConfig:
    """
    Configuration for BrowserSession.

    Implicit waits are always disabled: PageObject relies on explicit waits
    only, and mixing both makes timeouts unpredictable.

    Attributes:
        headless: Run browser in headless mode
        window_size: Browser window size (width, height)
        page_load_timeout: Seconds a navigation may take
        user_agent: Custom user agent string
        download_dir: Custom download directory

    Examples:
        >>> config = BrowserConfig(headless=True, window_size=(1280, 720))
        >>> with BrowserSession(config) as driver:
        ...     page = LoginPage(driver, PageObjectConfig.from_env())
    """

    headless: bool = False
    window_size: Tuple[int, int] = (1920, 1080)
    page_load_timeout: int = 60
    user_agent: Optional[str] = None
    download_dir: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if len(self.window_size) != 2:
            raise ValueError(
                f"window_size must be a tuple of (width, height), "
                f"got: {self.window_size}"
            )

        width, height = self.window_size
        if width < 800 or height < 600:
            raise ValueError(
                f"window_size too small (minimum 800x600), "
                f"got: {self.window_size}"
            )

        if self.page_load_timeout <= 0:
            raise ValueError(
                f"page_load_timeout must be positive, got: {self.page_load_timeout}"
            )

        if self.download_dir:
            path = Path(self.download_dir)
            if path.exists() and not path.is_dir():
                raise ValueError(
                    f"download_dir must be a directory, got: {self.download_dir}"
                )

    @classmethod
    def for_testing(cls) -> 'BrowserConfig':
        """Headless browser with a short page-load timeout, for CI."""
        return cls(headless=True, page_load_timeout=30)

    @classmethod
    def for_development(cls) -> 'BrowserConfig':
        """Visible browser for writing and debugging tests."""
        return cls(headless=False, page_load_timeout=60)

    @classmethod
    def from_env(cls) -> 'BrowserConfig':
        """
        Build configuration from ``BROWSER_HEADLESS``,
        ``BROWSER_PAGE_LOAD_TIMEOUT`` and ``BROWSER_USER_AGENT`` (``.env``
        file loaded first).

        Raises:
            ValueError: If a variable is malformed or validation fails
        """
        load_dotenv()

        raw_timeout = os.getenv("BROWSER_PAGE_LOAD_TIMEOUT", "60")
        try:
            page_load_timeout = int(raw_timeout)
        except ValueError:
            raise ValueError(
                f"BROWSER_PAGE_LOAD_TIMEOUT must be an integer, got: {raw_timeout!r}"
            ) from None

        return cls(
            headless=_bool_from_env("BROWSER_HEADLESS", False),
            page_load_timeout=page_load_timeout,
            user_agent=os.getenv("BROWSER_USER_AGENT") or None,
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "headless": self.headless,
            "window_size": self.window_size,
            "page_load_timeout": self.page_load_timeout,
            "user_agent": self.user_agent,
            "download_dir": self.download_dir,
        }

"""
Page object configuration.

Timeouts and the base URL are read once, at session start, and handed to
every PageObject through its constructor.
"""

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


def _validate_url(url: str, name: str) -> str:
    """
    Validate URL format and scheme.

    Args:
        url: URL to validate
        name: Setting name for error message

    Returns:
        Validated URL

    Raises:
        ValueError: If URL is invalid
    """
    parsed = urlparse(url)

    if not parsed.scheme:
        raise ValueError(f"{name} must include URL scheme (http/https)")

    if parsed.scheme not in ['http', 'https']:
        raise ValueError(f"{name} must use http or https scheme, got: {parsed.scheme}")

    if not parsed.netloc:
        raise ValueError(f"{name} must have a valid domain")

    return url


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw!r}") from None


@dataclass(frozen=True)
class PageObjectConfig:
    """
    Settings shared by all page objects of a test session.

    Attributes:
        default_timeout: Seconds every element wait may take
        alert_timeout: Seconds to wait for a native alert to appear
        url: Base URL of the application under test
        poll_frequency: Seconds between two checks of a wait condition

    Examples:
        >>> config = PageObjectConfig(url="https://shop.example.com")
        >>> page = LoginPage(driver, config)

        >>> # Load from environment / .env file
        >>> config = PageObjectConfig.from_env()
    """

    default_timeout: float = 30.0
    alert_timeout: float = 3.0
    url: Optional[str] = None
    poll_frequency: float = 0.5

    def __post_init__(self):
        """Validate configuration after initialization."""
        errors = []

        if self.default_timeout <= 0:
            errors.append(f"default_timeout must be positive, got: {self.default_timeout}")

        if self.alert_timeout <= 0:
            errors.append(f"alert_timeout must be positive, got: {self.alert_timeout}")
        elif self.alert_timeout > self.default_timeout:
            errors.append(
                f"alert_timeout ({self.alert_timeout}) must not exceed "
                f"default_timeout ({self.default_timeout})"
            )

        if self.poll_frequency <= 0:
            errors.append(f"poll_frequency must be positive, got: {self.poll_frequency}")

        if self.url is not None:
            try:
                _validate_url(self.url, "url")
            except ValueError as e:
                errors.append(str(e))

        if errors:
            raise ValueError(
                "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            )

    @classmethod
    def from_env(cls) -> 'PageObjectConfig':
        """
        Build configuration from environment variables.

        A ``.env`` file is loaded first if present. Recognized variables:
        ``PAGEOBJECT_DEFAULT_TIMEOUT``, ``PAGEOBJECT_ALERT_TIMEOUT``,
        ``PAGEOBJECT_URL`` and ``PAGEOBJECT_POLL_FREQUENCY``.

        Raises:
            ValueError: If a variable is malformed or validation fails
        """
        load_dotenv()

        return cls(
            default_timeout=_float_from_env("PAGEOBJECT_DEFAULT_TIMEOUT", 30.0),
            alert_timeout=_float_from_env("PAGEOBJECT_ALERT_TIMEOUT", 3.0),
            url=os.getenv("PAGEOBJECT_URL") or None,
            poll_frequency=_float_from_env("PAGEOBJECT_POLL_FREQUENCY", 0.5),
        )

    @classmethod
    def for_testing(cls, url: Optional[str] = None) -> 'PageObjectConfig':
        """Short timeouts for unit tests against a mocked driver."""
        return cls(
            default_timeout=0.2,
            alert_timeout=0.1,
            url=url,
            poll_frequency=0.05
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "default_timeout": self.default_timeout,
            "alert_timeout": self.alert_timeout,
            "url": self.url,
            "poll_frequency": self.poll_frequency,
        }

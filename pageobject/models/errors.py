"""
Exceptions raised when a page interaction result is unwrapped.

Every failed ``Result`` carries a ``FailureKind``; ``Result.unwrap()`` maps
that kind onto one of the exception types below so that a test can either
inspect the result or let the exception fail the test.
"""


class PageObjectError(Exception):
    """Base exception for all page interaction failures."""

    pass


class WaitTimeoutError(PageObjectError):
    """An explicit wait ran out of time."""

    pass


class InvalidSelectionError(PageObjectError):
    """Requested dropdown text is not one of the available options."""

    pass


class ElementAssertionError(PageObjectError):
    """Element was located but is not in the asserted state."""

    pass


class AlertMismatchError(PageObjectError):
    """Alert text differs from the expected message, or no alert appeared."""

    pass


class UnexpectedAlertError(PageObjectError):
    """An alert appeared where none was expected."""

    pass


class DriverError(PageObjectError):
    """The WebDriver reported an error other than a wait timeout."""

    pass

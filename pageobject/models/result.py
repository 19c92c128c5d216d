"""
Result<T> pattern for page interactions.

Every page operation returns a Result instead of raising, so a test can
branch on ``result.kind`` or call ``unwrap()`` to turn a failure into the
matching ``PageObjectError`` subclass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, Type, TypeVar

from .errors import (
    AlertMismatchError,
    DriverError,
    ElementAssertionError,
    InvalidSelectionError,
    PageObjectError,
    UnexpectedAlertError,
    WaitTimeoutError,
)


T = TypeVar('T')
U = TypeVar('U')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"


class FailureKind(Enum):
    """Why a page interaction failed."""

    TIMEOUT = "timeout"
    INVALID_SELECTION = "invalid_selection"
    ASSERTION_FAILED = "assertion_failed"
    ALERT_MISMATCH = "alert_mismatch"
    UNEXPECTED_ALERT = "unexpected_alert"
    DRIVER_ERROR = "driver_error"

    @property
    def exception_type(self) -> Type[PageObjectError]:
        """Exception raised by ``Result.unwrap()`` for this kind."""
        return _EXCEPTION_TYPES[self]


_EXCEPTION_TYPES = {
    FailureKind.TIMEOUT: WaitTimeoutError,
    FailureKind.INVALID_SELECTION: InvalidSelectionError,
    FailureKind.ASSERTION_FAILED: ElementAssertionError,
    FailureKind.ALERT_MISMATCH: AlertMismatchError,
    FailureKind.UNEXPECTED_ALERT: UnexpectedAlertError,
    FailureKind.DRIVER_ERROR: DriverError,
}


@dataclass
class Result(Generic[T]):
    """
    Outcome of a page interaction.

    Attributes:
        status: Result status (SUCCESS or FAILURE)
        value: The result value if successful (None if failure)
        kind: Failure category (None if success)
        error: The driver exception behind the failure, if any
        message: Human-readable description of the outcome

    Examples:
        >>> result = page.get_text(LoginElements.banner)
        >>> if result.is_success:
        ...     print(result.value)

        >>> result = page.set_selected_option(color, "Purple")
        >>> result.kind
        <FailureKind.INVALID_SELECTION: 'invalid_selection'>
        >>> result.unwrap()
        Traceback (most recent call last):
        ...
        InvalidSelectionError: There is no option with visible text ...
    """

    status: ResultStatus
    value: Optional[T] = None
    kind: Optional[FailureKind] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents failure."""
        return self.status == ResultStatus.FAILURE

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """
        Create a successful result.

        Args:
            value: The result value
            message: Optional success message

        Returns:
            Result instance with SUCCESS status
        """
        return cls(
            status=ResultStatus.SUCCESS,
            value=value,
            message=message
        )

    @classmethod
    def failure(
        cls,
        kind: FailureKind,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """
        Create a failure result.

        Args:
            kind: Failure category
            message: Error message describing the failure
            error: Optional driver exception that caused the failure

        Returns:
            Result instance with FAILURE status
        """
        return cls(
            status=ResultStatus.FAILURE,
            kind=kind,
            message=message,
            error=error
        )

    def unwrap(self) -> T:
        """
        Unwrap the result value.

        Returns:
            The result value if successful

        Raises:
            PageObjectError: Subclass matching ``kind`` if the result is a failure
        """
        if self.is_failure:
            raise self.kind.exception_type(self.message) from self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value if successful, otherwise ``default``."""
        return self.value if self.is_success else default

    def map(self, func: Callable[[T], U]) -> 'Result[U]':
        """
        Map a function over the success value.

        A failure passes through untouched. Exceptions raised by ``func`` are
        not caught; they are programming errors, not page-state failures.
        """
        if self.is_failure:
            return Result.failure(self.kind, self.message, self.error)
        return Result.success(func(self.value), self.message)

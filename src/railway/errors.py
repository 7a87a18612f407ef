"""Built-in failure kinds: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    "OperationTimeoutError",
    "RailwayError",
    "RetryExhausted",
    "RetryExhaustedError",
    "Timeout",
    "UnwrapError",
]


class RailwayError(Exception):
    """Base class for exceptions raised by railway itself."""


class UnwrapError(RailwayError):
    """A value was unwrapped from the wrong variant.

    Raised by ``unwrap``/``expect`` on a failure variant when the stored error
    is not itself an exception, and by ``unwrap_err`` on a success variant.

    Attributes:
        value: The payload that was found instead of the requested one.
    """

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)


# --- Timeout ---


class Timeout(msgspec.Struct, frozen=True, gc=False):
    """Operation timed out - struct variant for Result[T, Timeout]."""

    seconds: float
    operation: str | None = None

    def to_exception(self) -> OperationTimeoutError:
        """Convert to exception for raise-based code."""
        return OperationTimeoutError(self.seconds, self.operation)


class OperationTimeoutError(RailwayError):
    """Operation timed out - exception variant."""

    def __init__(self, seconds: float, operation: str | None = None) -> None:
        self.seconds = seconds
        self.operation = operation
        msg = f"Operation timed out after {seconds}s"
        if operation:
            msg = f"{operation}: {msg}"
        super().__init__(msg)

    def to_struct(self) -> Timeout:
        """Convert to struct for Result-based code."""
        return Timeout(self.seconds, self.operation)


# --- Retry ---


class RetryExhausted(msgspec.Struct, frozen=True, gc=False):
    """Every retry attempt failed - struct variant for Result[T, RetryExhausted].

    ``last_error`` is the error payload of the final attempt, kept as data so
    the real cause is not lost behind the summary.
    """

    attempts: int
    last_error: object = None

    def to_exception(self) -> RetryExhaustedError:
        """Convert to exception for raise-based code."""
        return RetryExhaustedError(self.attempts, self.last_error)


class RetryExhaustedError(RailwayError):
    """Every retry attempt failed - exception variant."""

    def __init__(self, attempts: int, last_error: object = None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Failed after {attempts} attempts: {last_error!r}")
        if isinstance(last_error, BaseException):
            self.__cause__ = last_error

    def to_struct(self) -> RetryExhausted:
        """Convert to struct for Result-based code."""
        return RetryExhausted(self.attempts, self.last_error)

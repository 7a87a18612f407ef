"""Retrying Result-returning operations."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import anyio

from railway._logging import get_logger
from railway.async_.result import AsyncResult
from railway.errors import RetryExhausted
from railway.types.result import Err, Ok, Result

__all__ = ["RetryPolicy", "retry"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """How often and how patiently to retry.

    Attributes:
        max_attempts: Total number of calls, including the first one. At least 1.
        delay: Constant pause in seconds between failed attempts.
    """

    max_attempts: int = 3
    delay: float = 0.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {self.max_attempts}"
            raise ValueError(msg)
        if not self.delay >= 0:
            msg = f"delay must be a non-negative number of seconds, got {self.delay}"
            raise ValueError(msg)


def retry[T, E](
    fn: Callable[[], Result[T, E] | Awaitable[Result[T, E]]],
    max_attempts: int = 3,
    delay: float = 0.0,
    *,
    policy: RetryPolicy | None = None,
) -> AsyncResult[T, RetryExhausted]:
    """Call ``fn`` until it returns Ok or the attempts run out.

    ``fn`` may return a Result or an awaitable of one. The first Ok is
    returned immediately. Between failed attempts the task sleeps for
    ``delay`` seconds; there is no sleep after the last attempt. Exceptions
    raised by ``fn`` are not caught.

    Args:
        fn: Zero-argument operation to retry.
        max_attempts: Total number of calls. Ignored when ``policy`` is given.
        delay: Seconds between attempts. Ignored when ``policy`` is given.
        policy: A RetryPolicy, e.g. from ``Settings.retry_policy()``.

    Returns:
        AsyncResult of the first Ok, or of
        ``Err(RetryExhausted(attempts, last_error))`` keeping the last error.

    Raises:
        ValueError: If ``max_attempts`` is below 1 or ``delay`` is negative.

    Example:
        ```python
        result = await retry(lambda: fetch(url), max_attempts=5, delay=0.5)
        match result:
            case Err(RetryExhausted(attempts=n, last_error=cause)):
                ...
        ```
    """
    resolved = policy if policy is not None else RetryPolicy(max_attempts, delay)

    async def _run() -> Result[T, RetryExhausted]:
        last_error: E | None = None
        for attempt in range(1, resolved.max_attempts + 1):
            outcome = fn()
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if isinstance(outcome, Ok):
                return outcome
            last_error = outcome.error
            logger.debug(
                "retry_attempt_failed",
                attempt=attempt,
                max_attempts=resolved.max_attempts,
                error=repr(last_error),
            )
            if attempt < resolved.max_attempts:
                await anyio.sleep(resolved.delay)

        logger.debug("retry_exhausted", attempts=resolved.max_attempts)
        return Err(RetryExhausted(resolved.max_attempts, last_error))

    return AsyncResult(_run())

"""@safe and @safe_async: turn raised exceptions into Err values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from railway.types.result import Err, Ok

__all__ = ["safe", "safe_async"]


def _catching(exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    if exceptions is None:
        return (Exception,)
    if not exceptions:
        raise ValueError("exceptions must name at least one exception type")
    return exceptions


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, X: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[X], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[X]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Make a function return ``Ok(value)`` or ``Err(exception)``.

    Works bare or with arguments:

        @safe
        def load(path): ...

        @safe(exceptions=(KeyError,))
        def lookup(key): ...

    Exceptions outside ``exceptions`` (default ``(Exception,)``) propagate.
    Methods, staticmethods and classmethods are supported through wrapt.

    Example:
        ```python
        @safe
        def ratio(a: int, b: int) -> float:
            return a / b

        ratio(1, 0)  # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = _catching(exceptions)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as exc:
            return Err(exc)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, X: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[X], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[X]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Coroutine-function counterpart of ``safe``.

    The wrapped function stays a coroutine function; awaiting it gives
    ``Ok(value)`` or ``Err(exception)``.
    """
    catch = _catching(exceptions)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(await wrapped(*args, **kwargs))
        except catch as exc:
            return Err(exc)

    if func is not None:
        return wrapper(func)
    return wrapper

"""Async composition of Results.

Every public function here is a plain function returning an AsyncResult (or an
async iterator), so nothing runs until the caller awaits.

Entries for ``all_``, ``any_`` and ``sequence_object`` may be Results or
awaitables of Results. Awaitables are started together in an anyio task group,
optionally throttled with ``aiologic.CapacityLimiter``; the outcome is always
decided by input position, never by completion order, and every entry is
allowed to settle first.

Example:
    ```python
    async def fetch(n: int) -> Result[int, str]:
        await anyio.sleep(0.01 * (3 - n))
        return Ok(n)

    async def example():
        assert await all_([fetch(1), Ok(2), fetch(3)]) == Ok((1, 2, 3))
    ```
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Mapping
from typing import Any

import aiologic
import anyio

from railway._logging import get_logger
from railway.async_.result import AsyncResult
from railway.errors import Timeout
from railway.types.result import Err, Ok, Result

__all__ = [
    "all_",
    "any_",
    "async_flat_map",
    "async_map",
    "collect_async_results",
    "flatten_async_result",
    "from_awaitable",
    "is_async_result",
    "map_async_iter",
    "pipeline",
    "sequence_object",
    "to_async",
    "try_async",
    "with_timeout",
]

logger = get_logger(__name__)

type ResultOrAwaitable[T, E] = Result[T, E] | Awaitable[Result[T, E]]

# Operations abandoned by with_timeout, kept referenced until they settle
_background: set[asyncio.Future[Any]] = set()


async def _resolve[T, E](value: ResultOrAwaitable[T, E]) -> Result[T, E]:
    if inspect.isawaitable(value):
        return await value
    return value


async def _settle[T, E](
    entries: Iterable[ResultOrAwaitable[T, E]],
    limit: int | None,
) -> list[Result[T, E]]:
    """Resolve every entry concurrently, keeping input order."""
    results: list[Any] = list(entries)
    for entry in results:
        if not isinstance(entry, Ok | Err) and not inspect.isawaitable(entry):
            raise TypeError(f"Expected a Result or an awaitable, got {type(entry).__name__}")
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

    async def run_one(i: int, aw: Awaitable[Result[T, E]]) -> None:
        if limiter is None:
            results[i] = await aw
            return
        async with limiter:
            results[i] = await aw

    async with anyio.create_task_group() as tg:
        for i, entry in enumerate(results):
            if not isinstance(entry, Ok | Err):
                tg.start_soon(run_one, i, entry)

    return results


def from_awaitable[T](aw: Awaitable[T]) -> AsyncResult[T, Exception]:
    """Capture the outcome of an awaitable as a Result.

    Resolves to ``Ok(value)`` on completion or ``Err(exc)`` when the awaitable
    raises an ``Exception``. Cancellation propagates.
    """

    async def _captured() -> Result[T, Exception]:
        try:
            return Ok(await aw)
        except Exception as exc:
            return Err(exc)

    return AsyncResult(_captured())


def to_async[T, E](result: Result[T, E]) -> AsyncResult[T, E]:
    """Lift an already computed Result into an AsyncResult."""
    return AsyncResult.from_result(result)


def is_async_result(value: object) -> bool:
    """Return True for AsyncResults and any other awaitable.

    Results themselves are not awaitable, so this tells the two kinds of
    pipeline input apart.
    """
    return isinstance(value, AsyncResult) or inspect.isawaitable(value)


def try_async[T](f: Callable[[], Awaitable[T]]) -> AsyncResult[T, Exception]:
    """Await ``f()``, returning ``Ok(value)`` or ``Err(exception)``."""

    async def _attempt() -> Result[T, Exception]:
        try:
            return Ok(await f())
        except Exception as exc:
            return Err(exc)

    return AsyncResult(_attempt())


def all_[T, E](
    entries: Iterable[ResultOrAwaitable[T, E]],
    *,
    limit: int | None = None,
) -> AsyncResult[tuple[T, ...], E]:
    """Combine Results, failing with the first Err by position.

    Every awaitable runs to completion before the outcome is decided, so a
    later-positioned error that settles first never wins over an earlier one.

    Args:
        entries: Results and/or awaitables of Results.
        limit: Maximum number of awaitables in flight. None means unlimited.

    Returns:
        AsyncResult of ``Ok(tuple of values)`` or the first Err by index.

    Raises:
        TypeError: If an entry is neither a Result nor awaitable.
        ValueError: If ``limit`` is below 1.
    """

    async def _all() -> Result[tuple[T, ...], E]:
        values: list[T] = []
        for result in await _settle(entries, limit):
            if isinstance(result, Err):
                return result
            values.append(result.value)
        return Ok(tuple(values))

    return AsyncResult(_all())


def any_[T, E](
    entries: Iterable[ResultOrAwaitable[T, E]],
    *,
    limit: int | None = None,
) -> AsyncResult[T, list[E]]:
    """Return the first Ok by position, or every error in order.

    Like ``all_``, waits for every entry to settle.

    Examples:
        >>> # any_([Err("x"), Ok(1), Err("y")])  -> Ok(1)
        >>> # any_([Err("x"), Err("y")])         -> Err(["x", "y"])
    """

    async def _any() -> Result[T, list[E]]:
        errors: list[E] = []
        for result in await _settle(entries, limit):
            if isinstance(result, Ok):
                return result
            errors.append(result.error)
        return Err(errors)

    return AsyncResult(_any())


def sequence_object[K, T, E](
    mapping: Mapping[K, ResultOrAwaitable[T, E]],
    *,
    limit: int | None = None,
) -> AsyncResult[dict[K, T], E]:
    """Keyed ``all_``: resolve a mapping of Results into a Result of dict.

    Returns:
        AsyncResult of ``Ok(dict)`` with the same keys, or the first Err in
        key-iteration order.
    """
    keys = list(mapping)
    entries = [mapping[key] for key in keys]

    async def _sequenced() -> Result[dict[K, T], E]:
        values: dict[K, T] = {}
        for key, result in zip(keys, await _settle(entries, limit), strict=True):
            if isinstance(result, Err):
                return result
            values[key] = result.value
        return Ok(values)

    return AsyncResult(_sequenced())


def _discard_late(task: asyncio.Future[Any]) -> None:
    _background.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("late_failure_discarded", error=repr(exc))


def with_timeout[T, E](
    aw: Awaitable[Result[T, E]],
    seconds: float,
    *,
    operation: str | None = None,
) -> AsyncResult[T, E | Timeout]:
    """Race an awaitable against a timer.

    If the timer wins, resolves to ``Err(Timeout(seconds, operation))``. The
    inner operation is not cancelled: it keeps running in the background, its
    result is discarded, and an exception it raises later is retrieved and
    logged at DEBUG level instead of surfacing as "never retrieved".

    Note:
        Background execution relies on asyncio tasks, so this combinator
        requires the asyncio backend.

    Args:
        aw: Awaitable producing a Result.
        seconds: Time budget in seconds.
        operation: Optional label carried into the Timeout error.

    Returns:
        AsyncResult of the inner Result, or of a Timeout error.
    """

    async def _raced() -> Result[T, E | Timeout]:
        task = asyncio.ensure_future(aw)
        try:
            done, _ = await asyncio.wait({task}, timeout=seconds)
        finally:
            if not task.done():
                _background.add(task)
                task.add_done_callback(_discard_late)
        if task in done:
            return task.result()
        logger.debug("operation_timed_out", seconds=seconds, operation=operation)
        return Err(Timeout(seconds, operation))

    return AsyncResult(_raced())


def flatten_async_result[T, E, F](
    aw: Awaitable[Result[ResultOrAwaitable[T, F], E]],
) -> AsyncResult[T, E | F]:
    """Collapse an awaitable Result whose Ok value is itself (awaitable) Result."""

    async def _flattened() -> Result[T, E | F]:
        outer = await aw
        if isinstance(outer, Err):
            return outer
        return await _resolve(outer.value)

    return AsyncResult(_flattened())


def async_map[T, U, E](aw: Awaitable[Result[T, E]], f: Callable[[T], U]) -> AsyncResult[U, E]:
    """Apply ``map(f)`` once the awaitable resolves."""
    return AsyncResult(aw).amap(f)


def async_flat_map[T, U, E, F](
    aw: Awaitable[Result[T, E]],
    f: Callable[[T], ResultOrAwaitable[U, F]],
) -> AsyncResult[U, E | F]:
    """Apply a Result-returning (sync or async) function once the awaitable resolves."""

    async def _bound() -> Result[U, E | F]:
        result = await aw
        if isinstance(result, Err):
            return result
        return await _resolve(f(result.value))

    return AsyncResult(_bound())


async def map_async_iter[T, U, E](
    items: AsyncIterable[T],
    f: Callable[[T], ResultOrAwaitable[U, E]],
) -> AsyncIterator[Result[U, E]]:
    """Yield ``f(item)`` for every item, awaiting it when it is awaitable.

    Items are processed one at a time, in order.
    """
    async for item in items:
        yield await _resolve(f(item))


def collect_async_results[T, E](
    results: AsyncIterable[Result[T, E]],
) -> AsyncResult[list[T], E]:
    """Consume an async iterable of Results into a Result of list.

    Stops pulling from the iterable at the first Err.
    """

    async def _collected() -> Result[list[T], E]:
        values: list[T] = []
        async for result in results:
            if isinstance(result, Err):
                return result
            values.append(result.value)
        return Ok(values)

    return AsyncResult(_collected())


def pipeline[T, E](
    *steps: Callable[[T], ResultOrAwaitable[T, E]],
) -> Callable[[T], AsyncResult[T, E]]:
    """Build an async pipeline of Result-returning steps.

    The returned function starts from ``Ok(value)`` and feeds each step the
    current success value. Steps may be sync or async. The first Err stops
    the pipeline; remaining steps are never called.

    Example:
        ```python
        run = pipeline(
            lambda x: Ok(x + 10),
            lambda x: Err("too big") if x > 10 else Ok(x),
            lambda x: Ok(x * 2),
        )
        assert await run(1) == Err("too big")
        ```
    """

    def run(value: T) -> AsyncResult[T, E]:
        async def _run() -> Result[T, E]:
            result: Result[T, E] = Ok(value)
            for step in steps:
                if isinstance(result, Err):
                    break
                result = await _resolve(step(result.value))
            return result

        return AsyncResult(_run())

    return run

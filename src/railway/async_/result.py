"""AsyncResult: an awaitable that resolves to a Result.

Every chaining method returns a new AsyncResult without running anything;
work happens when the outermost AsyncResult is awaited.

Example:
    ```python
    async def load(key: str) -> Result[bytes, OSError]:
        ...

    size = await AsyncResult(load("a")).amap(len).aunwrap_or(0)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import TYPE_CHECKING, Any

import anyio

from railway.types.result import Err, Ok, Result

if TYPE_CHECKING:
    from railway.types.option import Option

__all__ = ["AsyncResult"]


class AsyncResult[T, E]:
    """Wrapper around an ``Awaitable[Result[T, E]]`` with lifted combinators.

    An AsyncResult is never an ``Ok`` or ``Err`` itself; await it to get one.

    Note:
        Wrapping a coroutine makes the AsyncResult single-shot: awaiting it a
        second time raises RuntimeError. Wrap a Task or Future when the value
        has to be awaited from several places.

    Example:
        ```python
        async def main():
            result = await AsyncResult.from_ok(21).amap(lambda x: x * 2)
            assert result == Ok(42)
        ```
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """AsyncResult resolving to ``Ok(value)``."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """AsyncResult resolving to ``Err(error)``."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """AsyncResult resolving to an already computed Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Lift ``map``: apply a sync function to the Ok value.

        Example:
            ```python
            assert await AsyncResult.from_ok(5).amap(str) == Ok("5")
            ```
        """

        async def _mapped() -> Result[U, E]:
            return (await self._awaitable).map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value; Err skips it."""

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(await f(result.value))
            return result

        return AsyncResult(_mapped())

    def amap_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Lift ``map_err``: apply a sync function to the Err value."""

        async def _mapped() -> Result[T, F]:
            return (await self._awaitable).map_err(f)

        return AsyncResult(_mapped())

    def aand_then[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Lift ``and_then`` for a sync, Result-returning function.

        Example:
            ```python
            def positive(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err("not positive")

            assert await AsyncResult.from_ok(-1).aand_then(positive) == Err("not positive")
            ```
        """

        async def _chained() -> Result[U, E]:
            return (await self._awaitable).and_then(f)

        return AsyncResult(_chained())

    def aand_then_async[U](
        self, f: Callable[[T], Awaitable[Result[U, E]]]
    ) -> AsyncResult[U, E]:
        """Chain with an async, Result-returning function; Err skips it."""

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return await f(result.value)
            return result

        return AsyncResult(_chained())

    def aor_else[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Lift ``or_else``: recover from Err with a sync function."""

        async def _recovered() -> Result[T, F]:
            return (await self._awaitable).or_else(f)

        return AsyncResult(_recovered())

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or ``default``."""

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or(default)

        return _unwrap()

    def aunwrap_or_else(self, f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or ``f(error)``."""

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or_else(f)

        return _unwrap()

    def aok(self) -> Coroutine[Any, Any, Option[T]]:
        """Coroutine producing ``Some(value)`` for Ok, Nothing for Err."""

        async def _ok() -> Option[T]:
            return (await self._awaitable).ok()

        return _ok()

    def aerr(self) -> Coroutine[Any, Any, Option[E]]:
        """Coroutine producing ``Some(error)`` for Err, Nothing for Ok."""

        async def _err() -> Option[E]:
            return (await self._awaitable).err()

        return _err()

    def azip[U](self, other: Awaitable[Result[U, E]]) -> AsyncResult[tuple[T, U], E]:
        """Await self and ``other`` concurrently and pair their values.

        Both sides always run to completion. When both fail, self's error
        wins (left-biased, like ``Result.zip``).

        Args:
            other: Another AsyncResult, or any awaitable of a Result.

        Returns:
            AsyncResult of ``Ok((a, b))`` or the first Err by position.
        """

        async def _zipped() -> Result[tuple[T, U], E]:
            results: list[Any] = [None, None]

            async def run(i: int, aw: Awaitable[Any]) -> None:
                results[i] = await aw

            async with anyio.create_task_group() as tg:
                tg.start_soon(run, 0, self._awaitable)
                tg.start_soon(run, 1, other)

            first, second = results
            return first.zip(second)

        return AsyncResult(_zipped())

    def __repr__(self) -> str:
        return f"AsyncResult({self._awaitable!r})"

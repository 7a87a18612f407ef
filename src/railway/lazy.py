"""Lazy: a value computed at most once, on first access.

Initialization is guarded by an ``aiologic.Lock``, which works from both
threads and async tasks, so concurrent first accesses still run the
initializer once.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

from railway.types.option import Nothing, Option, Some

__all__ = ["Lazy"]


class Lazy[T]:
    """A lazily initialized value.

    If the initializer raises, nothing is cached: the exception propagates
    and the next access tries again.

    Examples:
        >>> calls = []
        >>> lazy = Lazy(lambda: calls.append(1) or 42)
        >>> lazy.is_initialized()
        False
        >>> lazy.get(), lazy.get()
        (42, 42)
        >>> len(calls)
        1
    """

    __slots__ = ("_init", "_initialized", "_lock", "_value")

    def __init__(self, init: Callable[[], T]) -> None:
        self._init = init
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._initialized = False

    def get(self) -> T:
        """Return the value, computing it on the first call."""
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._value = self._init()
                    self._initialized = True
        return self._value  # type: ignore[return-value]

    async def get_async(self) -> T:
        """Like get, but waits for the lock without blocking the event loop.

        The initializer itself is still called synchronously.
        """
        if not self._initialized:
            async with self._lock:
                if not self._initialized:
                    self._value = self._init()
                    self._initialized = True
        return self._value  # type: ignore[return-value]

    def peek(self) -> Option[T]:
        """Return Some(value) if already computed, else Nothing. Never computes."""
        if self._initialized:
            return Some(self._value)  # type: ignore[arg-type]
        return Nothing

    def is_initialized(self) -> bool:
        return self._initialized

    def __repr__(self) -> str:
        if self._initialized:
            return f"Lazy({self._value!r})"
        return "Lazy(<uninitialized>)"

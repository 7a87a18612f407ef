"""Free-function combinators over Result and Option.

``chain``, ``map_`` and ``tap`` build *stages*: single-argument callables that
accept either a Result or an awaitable of one. A Result in gives a Result out;
an awaitable in gives an AsyncResult out.

Example:
    ```python
    parse_then_double = compose(chain(parse_number), map_(lambda n: n * 2))
    parse_then_double(Ok("21"))  # Ok(42)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Any, overload

from railway.async_.result import AsyncResult
from railway.types.option import Nothing, NothingType, Option, Some
from railway.types.result import Err, Ok, Result

__all__ = [
    "chain",
    "collect_options",
    "combine",
    "compose",
    "map_",
    "map_error",
    "recover",
    "tap",
    "try_fn",
    "validate",
    "validate_chain",
]


def _stage[T, E, U, F](
    step: Callable[[Result[T, E]], Result[U, F]],
) -> Callable[[Result[T, E] | Awaitable[Result[T, E]]], Any]:
    def apply(result: Result[T, E] | Awaitable[Result[T, E]]) -> Any:
        if isinstance(result, Ok | Err):
            return step(result)
        if inspect.isawaitable(result):

            async def _deferred() -> Result[U, F]:
                return step(await result)

            return AsyncResult(_deferred())
        raise TypeError(f"Expected a Result or an awaitable, got {type(result).__name__}")

    return apply


def chain[T, U, E](
    f: Callable[[T], Result[U, E]],
) -> Callable[[Result[T, E] | Awaitable[Result[T, E]]], Any]:
    """Stage applying ``and_then(f)``.

    Examples:
        >>> chain(lambda x: Ok(x + 1))(Ok(1))
        Ok(value=2)
        >>> chain(lambda x: Ok(x + 1))(Err("e"))
        Err(error='e')
    """
    return _stage(lambda result: result.and_then(f))


def map_[T, U, E](f: Callable[[T], U]) -> Callable[[Result[T, E] | Awaitable[Result[T, E]]], Any]:
    """Stage applying ``map(f)``."""
    return _stage(lambda result: result.map(f))


def tap[T, E](f: Callable[[T], Any]) -> Callable[[Result[T, E] | Awaitable[Result[T, E]]], Any]:
    """Stage running ``f(value)`` on Ok for its side effect.

    The original Result is passed on whatever ``f`` returns; a coroutine
    returned by ``f`` is not awaited.
    """
    return _stage(lambda result: result.inspect(f))


@overload
def recover[T, E](result: Result[T, E], fallback: Callable[[E], T]) -> Ok[T]: ...


@overload
def recover[T, E](result: Result[T, E], fallback: T) -> Ok[T]: ...


def recover(result: Result[Any, Any], fallback: Any) -> Ok[Any]:
    """Turn an Err into an Ok.

    Args:
        result: The Result to recover.
        fallback: A plain value, or a callable receiving the error.

    Returns:
        ``result`` itself when Ok, otherwise ``Ok(fallback)`` or
        ``Ok(fallback(error))``.
    """
    if isinstance(result, Ok):
        return result
    if callable(fallback):
        return Ok(fallback(result.error))
    return Ok(fallback)


def map_error[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Free-function form of ``Result.map_err``."""
    return result.map_err(f)


def collect_options[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect Options into an Option of list; the first Nothing wins.

    Examples:
        >>> collect_options([Some(1), Some(2)])
        Some(value=[1, 2])
        >>> collect_options([Some(1), Nothing])
        NothingType()
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return Nothing
        values.append(option.value)
    return Some(values)


def combine[T, E](results: Iterable[Result[T, E]]) -> Result[tuple[T, ...], E]:
    """Combine Results into a Result of tuple; the first Err short-circuits."""
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(tuple(values))


def validate[T, E](value: T, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
    """Return ``Ok(value)`` if the predicate holds, otherwise ``Err(error)``."""
    if predicate(value):
        return Ok(value)
    return Err(error)


def validate_chain[T, E](
    value: T, validators: Sequence[Callable[[T], Result[T, E]]]
) -> Result[T, E]:
    """Thread a value through Result-returning validators, stopping at the first Err.

    Examples:
        >>> positive = lambda x: validate(x, lambda n: n > 0, "not positive")
        >>> small = lambda x: validate(x, lambda n: n < 10, "too big")
        >>> validate_chain(5, [positive, small])
        Ok(value=5)
        >>> validate_chain(50, [positive, small])
        Err(error='too big')
    """
    result: Result[T, E] = Ok(value)
    for validator in validators:
        result = result.and_then(validator)
    return result


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: ``compose(f, g)(x) == g(f(x))``.

    With no functions the result is the identity.
    """

    def composed(arg: Any) -> Any:
        for fn in fns:
            arg = fn(arg)
        return arg

    return composed


def try_fn[T](f: Callable[[], T]) -> Result[T, Exception]:
    """Run ``f()``, returning ``Ok(value)`` or ``Err(exception)``.

    Only ``Exception`` subclasses are captured.
    """
    try:
        return Ok(f())
    except Exception as exc:
        return Err(exc)

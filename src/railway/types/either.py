"""Either type: Left[L] | Right[R], a two-sided union with no failure bias.

By convention ``Right`` carries the value that continues through ``map`` and
``chain`` while ``Left`` passes through untouched. Unlike Result, neither side
raises on ``unwrap``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

if TYPE_CHECKING:
    from railway.types.option import NothingType, Some
    from railway.types.result import Err, Ok

__all__ = [
    "Either",
    "Left",
    "Right",
    "either_from_result",
    "is_left",
    "is_right",
    "left",
    "right",
    "try_catch",
]


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either.

    Examples:
        >>> Left("boom").map(lambda x: x + 1)
        Left(value='boom')
        >>> Left("boom").fold(len, str)
        4
    """

    value: L

    def is_left(self) -> TypeIs[Left[L]]:
        return True

    def is_right(self) -> TypeIs[Right[Any]]:
        return False

    def map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged; only Right is mapped."""
        return self

    def map_left[M](self, f: Callable[[L], M]) -> Left[M]:
        """Apply f to the Left value."""
        return Left(f(self.value))

    def fold[U](self, on_left: Callable[[L], U], _on_right: Callable[[Any], U]) -> U:
        """Collapse to a single value by calling ``on_left``."""
        return on_left(self.value)

    def match[U](self, *, left: Callable[[L], U], right: Callable[[Any], U]) -> U:
        """Keyword form of fold: calls ``left`` with the value."""
        return left(self.value)

    def chain(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged; only Right continues the chain."""
        return self

    flat_map = chain

    def ap(self, _arg: Left[Any] | Right[Any]) -> Left[L]:
        """Return self; a Left holds no function to apply."""
        return self

    def unwrap(self) -> L:
        """Return the Left value. Never raises."""
        return self.value

    def get_or_else[U](self, default: U) -> U:
        """Return the default since this is Left."""
        return default

    def swap(self) -> Right[L]:
        """Turn Left(x) into Right(x)."""
        return Right(self.value)

    def to_result(self) -> Err[L]:
        """Convert to Result: Left becomes Err."""
        from railway.types.result import Err

        return Err(self.value)

    def to_option(self) -> NothingType:
        """Convert to Option: Left becomes Nothing."""
        from railway.types.option import Nothing

        return Nothing


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either.

    Examples:
        >>> Right(2).map(lambda x: x + 1)
        Right(value=3)
        >>> Right(lambda x: x * 10).ap(Right(4))
        Right(value=40)
    """

    value: R

    def is_left(self) -> TypeIs[Left[Any]]:
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        return True

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply f to the Right value."""
        return Right(f(self.value))

    def map_left(self, _f: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged; only Left is mapped by map_left."""
        return self

    def fold[U](self, _on_left: Callable[[Any], U], on_right: Callable[[R], U]) -> U:
        """Collapse to a single value by calling ``on_right``."""
        return on_right(self.value)

    def match[U](self, *, left: Callable[[Any], U], right: Callable[[R], U]) -> U:
        """Keyword form of fold: calls ``right`` with the value."""
        return right(self.value)

    def chain[L, U](self, f: Callable[[R], Left[L] | Right[U]]) -> Left[L] | Right[U]:
        """Apply an Either-returning function to the Right value."""
        return f(self.value)

    flat_map = chain

    def ap[A, U, L](
        self: Right[Callable[[A], U]], arg: Left[L] | Right[A]
    ) -> Left[L] | Right[U]:
        """Apply the contained function to another Either.

        Args:
            arg: Either holding the argument. A Left argument is returned as-is.

        Returns:
            Right(f(a)) when arg is Right(a), otherwise arg.
        """
        return arg.map(self.value)

    def unwrap(self) -> R:
        """Return the Right value."""
        return self.value

    def get_or_else(self, _default: object) -> R:
        """Return the Right value, ignoring the default."""
        return self.value

    def swap(self) -> Left[R]:
        """Turn Right(x) into Left(x)."""
        return Left(self.value)

    def to_result(self) -> Ok[R]:
        """Convert to Result: Right becomes Ok."""
        from railway.types.result import Ok

        return Ok(self.value)

    def to_option(self) -> Some[R]:
        """Convert to Option: Right becomes Some."""
        from railway.types.option import Some

        return Some(self.value)


type Either[L, R] = Left[L] | Right[R]


def left[L](value: L) -> Left[L]:
    """Wrap a value in Left."""
    return Left(value)


def right[R](value: R) -> Right[R]:
    """Wrap a value in Right."""
    return Right(value)


def is_left[L, R](either: Either[L, R]) -> TypeIs[Left[L]]:
    """Return True if the Either is Left."""
    return isinstance(either, Left)


def is_right[L, R](either: Either[L, R]) -> TypeIs[Right[R]]:
    """Return True if the Either is Right."""
    return isinstance(either, Right)


def try_catch[L, R](f: Callable[[], R], on_error: Callable[[Exception], L]) -> Either[L, R]:
    """Run f, returning Right(value) or Left(on_error(exc)) if it raises.

    Only ``Exception`` subclasses are caught; ``KeyboardInterrupt`` and
    friends propagate.

    Examples:
        >>> try_catch(lambda: int("7"), str)
        Right(value=7)
        >>> try_catch(lambda: int("x"), type)
        Left(value=<class 'ValueError'>)
    """
    try:
        return Right(f())
    except Exception as exc:
        return Left(on_error(exc))


def either_from_result[T, E](result: Ok[T] | Err[E]) -> Either[E, T]:
    """Convert a Result into an Either: Ok becomes Right, Err becomes Left."""
    from railway.types.result import Ok

    if isinstance(result, Ok):
        return Right(result.value)
    return Left(result.error)

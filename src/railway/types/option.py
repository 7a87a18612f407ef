"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from railway.errors import UnwrapError

if TYPE_CHECKING:
    from railway.types.result import Err, Ok

__all__ = [
    "Nothing",
    "NothingType",
    "Option",
    "Some",
    "from_nullable",
    "is_none",
    "is_some",
    "none",
    "some",
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value, including ``None`` itself:
    ``Some(None)`` is present and is not ``Nothing``.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.filter(lambda x: x > 100)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies the predicate."""
        return pred(self.value)

    def contains(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies the predicate."""
        return pred(self.value)

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Dispatch on the variant: calls ``some`` with the value."""
        return some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the value; the default is unused for Some."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    flat_map = and_then

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from railway.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from railway.types.result import Ok

        return Ok(self.value)

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return self if exactly one of self and other is Some, else Nothing."""
        if isinstance(other, Some):
            return Nothing
        return self

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def transpose[U, E](self: Some[Ok[U] | Err[E]]) -> Ok[Some[U]] | Err[E]:
        """Swap an Option of a Result into a Result of an Option.

        Some(Ok(v)) becomes Ok(Some(v)); Some(Err(e)) becomes Err(e).
        """
        return self.value.map(Some)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant (or ``none()``) instead
    of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no value to test."""
        return False

    def contains(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no value to test."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError("Called unwrap on Nothing")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:
        """Dispatch on the variant: calls ``none``."""
        return none()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    flat_map = and_then

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing unchanged."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from railway.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from railway.types.result import Err

        return Err(f())

    def and_(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other if it is Some, else Nothing."""
        return other

    def zip(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def transpose(self) -> Ok[NothingType]:
        """Swap into a Result of an Option: Nothing becomes Ok(Nothing)."""
        from railway.types.result import Ok

        return Ok(self)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Wrap a value in Some."""
    return Some(value)


def none() -> NothingType:
    """Return the shared Nothing instance."""
    return Nothing


def from_nullable[T](value: T | None) -> Some[T] | NothingType:
    """Return Nothing when value is None, otherwise Some(value).

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(0)
        Some(value=0)
    """
    if value is None:
        return Nothing
    return Some(value)


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if the Option is Some."""
    return isinstance(option, Some)


def is_none(option: Option[Any]) -> TypeIs[NothingType]:
    """Return True if the Option is Nothing."""
    return isinstance(option, NothingType)

"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from railway.errors import UnwrapError

if TYPE_CHECKING:
    from railway.types.option import NothingType, Option, Some

__all__ = ["Err", "Ok", "Result", "collect", "err", "is_err", "is_ok", "is_result", "ok"]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies the predicate."""
        return pred(self.value)

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no error to test."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to unwrap.

        Raises:
            UnwrapError: Always, carrying the Ok value.
        """
        raise UnwrapError(f"Called unwrap_err on Ok: {self.value!r}", self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def safe_unwrap(self) -> T:
        """Return the contained value, whichever variant this is."""
        return self.value

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Dispatch on the variant: calls ``ok`` with the value."""
        return ok(self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the value; the default is unused for Ok."""
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the value; the default factory is unused for Ok."""
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    flat_map = and_then

    def or_else(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from railway.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from railway.types.option import Nothing

        return Nothing

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def or_(self, _other: Ok[T] | Err[Any]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def zip[U, E](self, other: Ok[U] | Err[E]) -> Ok[tuple[T, U]] | Err[E]:
        """Combine two Ok values into a tuple.

        If both are Ok, returns Ok((self.value, other.value)).
        If other is Err, returns it.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value

    def transpose[U](self: Ok[Option[U]]) -> Option[Ok[U]]:
        """Swap a Result of an Option into an Option of a Result.

        Ok(Some(v)) becomes Some(Ok(v)); Ok(Nothing) becomes Nothing.
        """
        return self.value.map(Ok)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated. Every
    pass-through operation returns the same instance, so the payload is never
    altered on the failure path.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no value to test."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the error satisfies the predicate."""
        return pred(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        An exception payload is raised as-is; any other payload is wrapped
        in UnwrapError.

        Raises:
            BaseException: The contained error, when it is an exception.
            UnwrapError: Otherwise, carrying the error value.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(f"Called unwrap on Err: {self.error!r}", self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, chained from the error when it is an exception.
        """
        exc = UnwrapError(f"{msg}: {self.error!r}", self.error)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def safe_unwrap(self) -> E:
        """Return the contained error, whichever variant this is."""
        return self.error

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Dispatch on the variant: calls ``err`` with the error."""
        return err(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there is no value to map."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Compute the default since there is no value to map."""
        return default()

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    flat_map = and_then

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for its side effect and return self."""
        f(self.error)
        return self

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from railway.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from railway.types.option import Some

        return Some(self.error)

    def and_(self, _other: Ok[Any] | Err[Any]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def zip(self, _other: Ok[Any] | Err[Any]) -> Err[E]:
        """Return self since this is Err; the left error wins."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def transpose(self) -> Some[Err[E]]:
        """Swap into an Option of a Result: Err(e) becomes Some(Err(e))."""
        from railway.types.option import Some

        return Some(self)


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Wrap a value in Ok."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap an error in Err."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if the Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if the Result is Err."""
    return isinstance(result, Err)


def is_result(value: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if value is an Ok or an Err."""
    return isinstance(value, Ok | Err)


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; later entries are not
    consumed from the iterable.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)

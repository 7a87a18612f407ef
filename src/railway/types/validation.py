"""Validation type: Valid[T] | Invalid[E], accumulating every failure.

Where Result stops at the first Err, combining Validations keeps going and
collects the errors of every Invalid, in input order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from railway.errors import UnwrapError

if TYPE_CHECKING:
    from railway.types.option import NothingType, Option, Some
    from railway.types.result import Err, Ok, Result

__all__ = [
    "Invalid",
    "Valid",
    "Validation",
    "combine_validations",
    "from_option",
    "from_result",
    "invalid",
    "is_invalid",
    "is_valid",
    "valid",
    "validate_all",
]


class Valid[T](msgspec.Struct, frozen=True, gc=False):
    """A value that passed validation.

    Examples:
        >>> Valid(3).map(str)
        Valid(value='3')
        >>> Valid(1).zip(Valid("a"))
        Valid(value=(1, 'a'))
    """

    value: T

    def is_valid(self) -> TypeIs[Valid[T]]:
        return True

    def is_invalid(self) -> TypeIs[Invalid[Any]]:
        return False

    def unwrap(self) -> T:
        """Return the validated value."""
        return self.value

    def unwrap_errors(self) -> NoReturn:
        """Raise since a Valid has no errors.

        Raises:
            UnwrapError: Always, carrying the value.
        """
        raise UnwrapError(f"Called unwrap_errors on Valid: {self.value!r}", self.value)

    def map[U](self, f: Callable[[T], U]) -> Valid[U]:
        """Apply f to the value."""
        return Valid(f(self.value))

    def map_errors(self, _f: Callable[[tuple[Any, ...]], Sequence[Any]]) -> Valid[T]:
        """Return self unchanged; there are no errors to map."""
        return self

    def and_[U, E](self, other: Valid[U] | Invalid[E]) -> Valid[U] | Invalid[E]:
        """Return other, since self is Valid."""
        return other

    def or_(self, _other: Valid[T] | Invalid[Any]) -> Valid[T]:
        """Return self, since self is Valid."""
        return self

    def zip[U, E](self, other: Valid[U] | Invalid[E]) -> Valid[tuple[T, U]] | Invalid[E]:
        """Pair two values, or return other's errors when it is Invalid."""
        if isinstance(other, Valid):
            return Valid((self.value, other.value))
        return other

    def match[U](
        self, *, valid: Callable[[T], U], invalid: Callable[[tuple[Any, ...]], U]
    ) -> U:
        """Dispatch on the variant: calls ``valid`` with the value."""
        return valid(self.value)

    def to_result(self) -> Ok[T]:
        """Convert to Result: Valid becomes Ok."""
        from railway.types.result import Ok

        return Ok(self.value)

    def to_option(self) -> Some[T]:
        """Convert to Option: Valid becomes Some."""
        from railway.types.option import Some

        return Some(self.value)


class Invalid[E](msgspec.Struct, frozen=True, gc=False):
    """One or more validation failures.

    ``errors`` is a non-empty tuple; constructing an Invalid without errors
    raises ValueError. Prefer the ``invalid(*errors)`` helper.

    Examples:
        >>> invalid("a").zip(invalid("b"))
        Invalid(errors=('a', 'b'))
    """

    errors: tuple[E, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            raise TypeError(f"Invalid errors must be a tuple, got {type(self.errors).__name__}")
        if not self.errors:
            raise ValueError("Invalid requires at least one error")

    def is_valid(self) -> TypeIs[Valid[Any]]:
        return False

    def is_invalid(self) -> TypeIs[Invalid[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise since an Invalid has no value.

        Raises:
            UnwrapError: Always, carrying the errors tuple.
        """
        raise UnwrapError(f"Called unwrap on Invalid: {self.errors!r}", self.errors)

    def unwrap_errors(self) -> tuple[E, ...]:
        """Return the accumulated errors."""
        return self.errors

    def map(self, _f: Callable[[Any], Any]) -> Invalid[E]:
        """Return self unchanged; there is no value to map."""
        return self

    def map_errors[F](self, f: Callable[[tuple[E, ...]], Sequence[F]]) -> Invalid[F]:
        """Transform the whole errors tuple at once.

        Args:
            f: Receives the errors tuple and returns a non-empty sequence.

        Returns:
            Invalid holding the new errors.
        """
        return Invalid(tuple(f(self.errors)))

    def and_(self, _other: Valid[Any] | Invalid[Any]) -> Invalid[E]:
        """Return self, since self is Invalid."""
        return self

    def or_[T, F](self, other: Valid[T] | Invalid[F]) -> Valid[T] | Invalid[F]:
        """Return other, since self is Invalid."""
        return other

    def zip(self, other: Valid[Any] | Invalid[E]) -> Invalid[E]:
        """Keep self's errors, followed by other's when it is Invalid too."""
        if isinstance(other, Invalid):
            return Invalid(self.errors + other.errors)
        return self

    def match[U](
        self, *, valid: Callable[[Any], U], invalid: Callable[[tuple[E, ...]], U]
    ) -> U:
        """Dispatch on the variant: calls ``invalid`` with the errors tuple."""
        return invalid(self.errors)

    def to_result(self) -> Err[tuple[E, ...]]:
        """Convert to Result: Invalid becomes Err of the errors tuple."""
        from railway.types.result import Err

        return Err(self.errors)

    def to_option(self) -> NothingType:
        """Convert to Option: Invalid becomes Nothing."""
        from railway.types.option import Nothing

        return Nothing


type Validation[T, E = Exception] = Valid[T] | Invalid[E]


def valid[T](value: T) -> Valid[T]:
    """Wrap a value in Valid."""
    return Valid(value)


def invalid[E](*errors: E) -> Invalid[E]:
    """Build an Invalid from one or more errors.

    Raises:
        ValueError: If no errors are given.
    """
    return Invalid(errors)


def is_valid[T, E](validation: Validation[T, E]) -> TypeIs[Valid[T]]:
    """Return True if the Validation is Valid."""
    return isinstance(validation, Valid)


def is_invalid[T, E](validation: Validation[T, E]) -> TypeIs[Invalid[E]]:
    """Return True if the Validation is Invalid."""
    return isinstance(validation, Invalid)


def combine_validations[T, E](
    validations: Iterable[Valid[T] | Invalid[E]],
) -> Valid[list[T]] | Invalid[E]:
    """Combine Validations, accumulating every error.

    Unlike ``collect`` for Result, every entry is inspected.

    Args:
        validations: An iterable of Validation values.

    Returns:
        Valid(list of values in order) if every entry is Valid, otherwise an
        Invalid holding the errors of every Invalid entry, in input order.

    Examples:
        >>> combine_validations([invalid("a"), valid(1), invalid("b")])
        Invalid(errors=('a', 'b'))
    """
    values: list[T] = []
    errors: list[E] = []
    for validation in validations:
        if isinstance(validation, Valid):
            values.append(validation.value)
        else:
            errors.extend(validation.errors)
    if errors:
        return Invalid(tuple(errors))
    return Valid(values)


def validate_all[T, U, E](
    items: Iterable[T], validator: Callable[[T], Valid[U] | Invalid[E]]
) -> Valid[list[U]] | Invalid[E]:
    """Validate every item and combine the outcomes."""
    return combine_validations(validator(item) for item in items)


def from_result[T, E](result: Result[T, E]) -> Valid[T] | Invalid[E]:
    """Convert a Result: Ok(v) -> Valid(v), Err(e) -> Invalid((e,))."""
    from railway.types.result import Ok

    if isinstance(result, Ok):
        return Valid(result.value)
    return Invalid((result.error,))


def from_option[T, E](option: Option[T], error: E) -> Valid[T] | Invalid[E]:
    """Convert an Option: Some(v) -> Valid(v), Nothing -> Invalid((error,))."""
    from railway.types.option import Some

    if isinstance(option, Some):
        return Valid(option.value)
    return Invalid((error,))

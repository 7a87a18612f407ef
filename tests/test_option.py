"""Tests for Option type (Some and Nothing)."""

import pytest
from hypothesis import given

from railway import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Some,
    UnwrapError,
    from_nullable,
    is_none,
    is_some,
    none,
    some,
)
from tests.strategies import integers, options


class TestOptionCreation:
    """Tests for Some/Nothing construction."""

    def test_some_holds_value(self):
        """Some wraps a value."""
        assert some(3) == Some(3)
        assert Some(3).value == 3

    def test_none_is_singleton(self):
        """none() returns the shared Nothing instance."""
        assert none() is Nothing
        assert isinstance(Nothing, NothingType)

    def test_some_none_is_present(self):
        """Some(None) is a present value, not Nothing."""
        assert Some(None).is_some()
        assert Some(None) != Nothing

    def test_from_nullable(self):
        """from_nullable maps only None to Nothing."""
        assert from_nullable(None) is Nothing
        assert from_nullable(0) == Some(0)
        assert from_nullable("") == Some("")

    def test_guards(self):
        """Module guards narrow the variant."""
        assert is_some(Some(1)) and not is_none(Some(1))
        assert is_none(Nothing) and not is_some(Nothing)


class TestOptionUnwrap:
    """Tests for unwrap and friends."""

    def test_unwrap(self):
        """unwrap returns the value or raises UnwrapError."""
        assert Some(1).unwrap() == 1
        with pytest.raises(UnwrapError):
            Nothing.unwrap()

    def test_expect(self):
        """expect raises with the custom message."""
        with pytest.raises(UnwrapError, match="need a value"):
            Nothing.expect("need a value")
        assert Some(1).expect("unused") == 1

    def test_unwrap_or(self):
        """unwrap_or and unwrap_or_else supply defaults for Nothing."""
        assert Nothing.unwrap_or(5) == 5
        assert Nothing.unwrap_or_else(lambda: 6) == 6
        assert Some(1).unwrap_or_else(lambda: pytest.fail("not called")) == 1


class TestOptionTransform:
    """Tests for map, and_then, filter, or_else."""

    def test_map(self):
        """map applies only to Some."""
        assert Some(2).map(str) == Some("2")
        assert Nothing.map(str) is Nothing

    def test_map_or(self):
        """map_or folds to a plain value."""
        assert Some(2).map_or(0, lambda x: x * 2) == 4
        assert Nothing.map_or(0, lambda x: x * 2) == 0

    def test_and_then(self):
        """and_then/flat_map chain Option-returning functions."""
        half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
        assert Some(4).and_then(half) == Some(2)
        assert Some(3).and_then(half) is Nothing
        assert Nothing.flat_map(half) is Nothing

    def test_or_else(self):
        """or_else recovers Nothing."""
        assert Nothing.or_else(lambda: Some(1)) == Some(1)
        assert Some(2).or_else(lambda: Some(1)) == Some(2)

    def test_filter(self):
        """filter keeps values satisfying the predicate."""
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing

    def test_inspect(self):
        """inspect sees only Some values."""
        seen = []
        Some(1).inspect(seen.append)
        Nothing.inspect(seen.append)
        assert seen == [1]

    def test_predicates(self):
        """is_some_and and contains test the contained value."""
        assert Some(3).is_some_and(lambda x: x == 3)
        assert Some(3).contains(lambda x: x > 2)
        assert not Some(1).contains(lambda x: x > 2)
        assert not Nothing.contains(lambda x: True)
        assert not Nothing.is_some_and(lambda x: True)


class TestOptionCombine:
    """Tests for and_, or_, xor, zip, flatten, match."""

    def test_and_or(self):
        """and_ and or_ follow boolean semantics."""
        assert Some(1).and_(Some(2)) == Some(2)
        assert Nothing.and_(Some(2)) is Nothing
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)

    def test_xor(self):
        """xor returns a Some only when exactly one side is Some."""
        assert Some(1).xor(Nothing) == Some(1)
        assert Nothing.xor(Some(2)) == Some(2)
        assert Some(1).xor(Some(2)) is Nothing
        assert Nothing.xor(Nothing) is Nothing

    def test_zip(self):
        """zip pairs Some values; any Nothing wins."""
        assert Some(1).zip(Some("a")) == Some((1, "a"))
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some(1)) is Nothing

    def test_flatten(self):
        """flatten removes one level of nesting."""
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(Nothing).flatten() is Nothing

    def test_match(self):
        """match runs exactly one handler."""
        assert Some(2).match(some=lambda x: x * 2, none=lambda: 0) == 4
        assert Nothing.match(some=lambda x: x * 2, none=lambda: 0) == 0


class TestOptionToResult:
    """Tests for conversion to Result."""

    def test_ok_or(self):
        """ok_or turns Nothing into Err."""
        assert Some(1).ok_or("missing") == Ok(1)
        assert Nothing.ok_or("missing") == Err("missing")

    def test_ok_or_else(self):
        """ok_or_else only builds the error for Nothing."""
        assert Nothing.ok_or_else(lambda: "missing") == Err("missing")
        assert Some(1).ok_or_else(lambda: pytest.fail("not called")) == Ok(1)

    def test_transpose(self):
        """transpose swaps Option and Result."""
        assert Some(Ok(1)).transpose() == Ok(Some(1))
        assert Some(Err("e")).transpose() == Err("e")
        assert Nothing.transpose() == Ok(Nothing)


class TestOptionLaws:
    """Property-based laws."""

    @given(options)
    def test_map_identity(self, option):
        """Mapping identity changes nothing."""
        assert option.map(lambda v: v) == option

    @given(integers)
    def test_left_identity(self, x):
        """some(x).and_then(some) == some(x)."""
        assert some(x).and_then(some) == some(x)

    @given(options)
    def test_transpose_round_trip(self, option):
        """Option -> Result -> Option round trip."""
        wrapped = option.map(Ok)
        assert wrapped.transpose().transpose() == wrapped

"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from railway import (
    Err,
    Nothing,
    Ok,
    Result,
    Some,
    UnwrapError,
    collect,
    err,
    is_err,
    is_ok,
    is_result,
    ok,
)
from tests.strategies import integers, result_functions, results, texts


class TestResultCreation:
    """Tests for Ok/Err instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_err_with_exception(self):
        """Err keeps the very exception object it was given."""
        exc = ValueError("something went wrong")
        assert Err(exc).error is exc

    def test_constructors(self):
        """ok() and err() build the variants."""
        assert ok(1) == Ok(1)
        assert err("e") == Err("e")

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 100  # type: ignore[misc]

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        result = Err("error")
        with pytest.raises(AttributeError):
            result.error = "new error"  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_value_equality(self):
        """Variants compare by value."""
        assert Ok(42) == Ok(42)
        assert Err("e") == Err("e")
        assert Ok(42) != Ok(43)

    def test_ok_not_equal_to_err(self):
        """Ok is never equal to Err, even with the same payload."""
        assert Ok(42) != Err(42)

    def test_hashable(self):
        """Results can be used as dict keys."""
        assert {Ok(1): "a", Err(1): "b"}[Ok(1)] == "a"


class TestResultQuerying:
    """Tests for is_ok/is_err and their predicate forms."""

    def test_tags(self):
        """is_ok and is_err are mutually exclusive."""
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False
        assert Err("e").is_ok() is False
        assert Err("e").is_err() is True

    def test_is_ok_and(self):
        """is_ok_and tests the value only on Ok."""
        assert Ok(2).is_ok_and(lambda x: x > 1) is True
        assert Ok(0).is_ok_and(lambda x: x > 1) is False
        assert Err(2).is_ok_and(lambda x: True) is False

    def test_is_err_and(self):
        """is_err_and tests the error only on Err."""
        assert Err("boom").is_err_and(lambda e: e == "boom") is True
        assert Ok("boom").is_err_and(lambda e: True) is False

    def test_module_guards(self):
        """Module-level guards agree with the methods."""
        assert is_ok(Ok(1)) and not is_err(Ok(1))
        assert is_err(Err(1)) and not is_ok(Err(1))

    def test_is_result(self):
        """is_result recognises both variants and nothing else."""
        assert is_result(Ok(1))
        assert is_result(Err(1))
        assert not is_result(Some(1))
        assert not is_result(1)

    def test_structural_match(self):
        """Results work with match statements."""

        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f"ok {value}"
                case Err(error):
                    return f"err {error}"

        assert describe(Ok(1)) == "ok 1"
        assert describe(Err("x")) == "err x"


class TestResultUnwrap:
    """Tests for unwrap, expect, unwrap_err and the non-raising forms."""

    def test_ok_unwrap(self):
        """unwrap returns the value on Ok."""
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises_stored_exception(self):
        """An exception payload is raised as-is."""
        exc = KeyError("missing")
        with pytest.raises(KeyError) as info:
            Err(exc).unwrap()
        assert info.value is exc

    def test_err_unwrap_wraps_plain_payload(self):
        """A non-exception payload raises UnwrapError carrying it."""
        with pytest.raises(UnwrapError) as info:
            Err("bad").unwrap()
        assert info.value.value == "bad"

    def test_expect_message(self):
        """expect raises UnwrapError with the custom message."""
        with pytest.raises(UnwrapError, match="config missing"):
            Err("bad").expect("config missing")

    def test_expect_chains_exception(self):
        """expect chains from an exception payload."""
        exc = ValueError("inner")
        with pytest.raises(UnwrapError) as info:
            Err(exc).expect("outer")
        assert info.value.__cause__ is exc

    def test_ok_expect(self):
        """expect returns the value on Ok."""
        assert Ok(1).expect("never shown") == 1

    def test_unwrap_err(self):
        """unwrap_err returns the error on Err and raises on Ok."""
        assert Err("e").unwrap_err() == "e"
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_unwrap_or(self):
        """unwrap_or falls back only on Err."""
        assert Ok(1).unwrap_or(0) == 1
        assert Err("e").unwrap_or(0) == 0

    def test_unwrap_or_else_receives_error(self):
        """unwrap_or_else computes the default from the error."""
        assert Err("abc").unwrap_or_else(len) == 3
        assert Ok(1).unwrap_or_else(lambda e: pytest.fail("not called")) == 1

    def test_safe_unwrap(self):
        """safe_unwrap returns whatever is inside without raising."""
        assert Ok(1).safe_unwrap() == 1
        assert Err("e").safe_unwrap() == "e"


class TestResultTransform:
    """Tests for map, map_err, map_or, and_then, or_else."""

    def test_map(self):
        """map applies to Ok only."""
        assert Ok(2).map(lambda x: x * 3) == Ok(6)
        assert Err("e").map(lambda x: x * 3) == Err("e")

    def test_map_err_passes_same_object(self):
        """Pass-through on Err returns the very same instance."""
        original = Err(ValueError("keep me"))
        assert original.map(lambda x: x) is original
        assert original.and_then(lambda x: Ok(x)) is original

    def test_map_err(self):
        """map_err applies to Err only."""
        assert Err("e").map_err(str.upper) == Err("E")
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_map_or(self):
        """map_or folds to a plain value."""
        assert Ok(2).map_or(0, lambda x: x + 1) == 3
        assert Err("e").map_or(0, lambda x: x + 1) == 0

    def test_map_or_else(self):
        """map_or_else computes the default lazily."""
        assert Err("e").map_or_else(lambda: -1, lambda x: x) == -1
        assert Ok(5).map_or_else(lambda: pytest.fail("not called"), lambda x: x) == 5

    def test_and_then(self):
        """and_then returns f's Result directly on Ok."""
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda x: Err("no")) == Err("no")

    def test_and_then_skips_on_err(self):
        """and_then never calls f on Err."""
        calls = []
        Err("e").and_then(lambda x: calls.append(x))
        assert calls == []

    def test_flat_map_alias(self):
        """flat_map behaves like and_then."""
        assert Ok(1).flat_map(lambda x: Ok(x * 10)) == Ok(10)

    def test_or_else(self):
        """or_else recovers on Err only."""
        assert Err("e").or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)

    def test_and_or(self):
        """and_ and or_ pick between two Results."""
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Err("a").and_(Ok(2)) == Err("a")
        assert Ok(1).or_(Ok(2)) == Ok(1)
        assert Err("a").or_(Ok(2)) == Ok(2)

    def test_inspect(self):
        """inspect/inspect_err run side effects and return self."""
        seen = []
        ok_result = Ok(1)
        err_result = Err("e")
        assert ok_result.inspect(seen.append) is ok_result
        assert err_result.inspect(seen.append) is err_result
        assert err_result.inspect_err(seen.append) is err_result
        assert seen == [1, "e"]


class TestResultMatch:
    """Tests for keyword match dispatch."""

    def test_exactly_one_handler_runs(self):
        """Only the handler for the actual variant is called."""
        calls = []
        Ok(1).match(ok=lambda v: calls.append(("ok", v)), err=lambda e: calls.append(("err", e)))
        Err(2).match(ok=lambda v: calls.append(("ok", v)), err=lambda e: calls.append(("err", e)))
        assert calls == [("ok", 1), ("err", 2)]

    def test_handlers_are_required(self):
        """Both handlers must be passed by keyword."""
        with pytest.raises(TypeError):
            Ok(1).match(ok=lambda v: v)  # type: ignore[call-arg]


class TestResultCombine:
    """Tests for zip, flatten, transpose and conversions."""

    def test_zip(self):
        """zip pairs two Ok values."""
        assert Ok(1).zip(Ok("a")) == Ok((1, "a"))

    def test_zip_left_biased(self):
        """When both fail, self's error wins."""
        assert Err("left").zip(Err("right")) == Err("left")
        assert Ok(1).zip(Err("right")) == Err("right")

    def test_flatten(self):
        """flatten removes one level of nesting."""
        assert Ok(Ok(1)).flatten() == Ok(1)
        assert Ok(Err("e")).flatten() == Err("e")
        assert Err("e").flatten() == Err("e")

    def test_transpose(self):
        """transpose swaps Result and Option."""
        assert Ok(Some(1)).transpose() == Some(Ok(1))
        assert Ok(Nothing).transpose() is Nothing
        assert Err("e").transpose() == Some(Err("e"))

    def test_to_option(self):
        """ok() and err() convert to Option."""
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() is Nothing
        assert Err("e").ok() is Nothing
        assert Err("e").err() == Some("e")


class TestCollect:
    """Tests for collect."""

    def test_all_ok(self):
        """All Ok gives Ok of list in order."""
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_err_short_circuits(self):
        """The first Err is returned and later entries are not consumed."""
        consumed = []

        def gen():
            for item in [Ok(1), Err("first"), Err("second")]:
                consumed.append(item)
                yield item

        assert collect(gen()) == Err("first")
        assert len(consumed) == 2

    def test_empty(self):
        """An empty iterable collects to Ok([])."""
        assert collect([]) == Ok([])


class TestResultLaws:
    """Property-based monad laws."""

    @given(integers)
    def test_map_identity(self, x):
        """Mapping identity changes nothing."""
        assert ok(x).map(lambda v: v) == ok(x)

    @given(integers)
    def test_left_identity(self, x):
        """ok(x).and_then(ok) == ok(x)."""
        assert ok(x).and_then(ok) == ok(x)

    @given(results)
    def test_right_identity(self, result):
        """result.and_then(ok) == result."""
        assert result.and_then(ok) == result

    @given(results, result_functions, result_functions)
    def test_associativity(self, result, f, g):
        """Nesting of and_then does not matter."""
        assert result.and_then(f).and_then(g) == result.and_then(lambda x: f(x).and_then(g))

    @given(texts)
    def test_err_short_circuits(self, e):
        """map/and_then on Err keep the error and never call f."""

        def explode(_):
            raise AssertionError("must not be called")

        assert err(e).map(explode) == err(e)
        assert err(e).and_then(explode) == err(e)

    @given(st.one_of(integers.map(lambda v: Some(v)), st.just(Nothing)), texts, st.booleans())
    def test_transpose_round_trip(self, option, e, failed):
        """transpose is its own inverse."""
        result = Err(e) if failed else Ok(option)
        assert result.transpose().transpose() == result

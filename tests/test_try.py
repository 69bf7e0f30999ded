"""Tests for Try type (Success and Failure) and attempt()."""

import gc
import weakref

import pytest
from hypothesis import given

from klaw_either import (
    CheckedException,
    Failure,
    Left,
    NoSuchElementError,
    Nothing,
    PreconditionError,
    Right,
    Some,
    Success,
    UnsupportedOperationError,
    attempt,
    flatten_try,
)
from strategies import exceptions, integers, tries, values


def _raise(exc):
    raise exc


class TestAttempt:
    """Tests for attempt()."""

    def test_success(self):
        """A thunk that returns becomes Success."""
        assert attempt(lambda: int("12")) == Success(12)

    def test_failure(self):
        """A thunk that raises becomes Failure holding the exception."""
        outcome = attempt(lambda: int("pancake"))
        assert outcome.is_failure()
        assert isinstance(outcome.exception, ValueError)

    def test_none_result(self):
        """A thunk returning None becomes Success(None)."""
        assert attempt(lambda: None) == Success(None)

    def test_rejects_none_thunk(self):
        """attempt(None) fails the precondition."""
        with pytest.raises(PreconditionError):
            attempt(None)

    def test_keyboard_interrupt_escapes(self):
        """Fatal exceptions are re-raised, not captured."""
        with pytest.raises(KeyboardInterrupt):
            attempt(lambda: _raise(KeyboardInterrupt()))

    def test_system_exit_escapes(self):
        """SystemExit is fatal."""
        with pytest.raises(SystemExit):
            attempt(lambda: _raise(SystemExit(1)))

    def test_memory_error_escapes(self):
        """MemoryError is fatal."""
        with pytest.raises(MemoryError):
            attempt(lambda: _raise(MemoryError()))


class TestCheckedException:
    """Tests for the deprecated CheckedException carrier."""

    def test_construction_warns(self):
        """Instantiating CheckedException emits a DeprecationWarning."""
        with pytest.warns(DeprecationWarning):
            CheckedException(ValueError("boom"))

    def test_rejects_none_cause(self):
        """A None cause fails the precondition."""
        with pytest.warns(DeprecationWarning), pytest.raises(PreconditionError):
            CheckedException(None)

    def test_rejects_non_exception_cause(self):
        """A cause that is not an exception is rejected at construction."""
        with pytest.warns(DeprecationWarning), pytest.raises(TypeError, match="requires an exception"):
            CheckedException("boom")

    def test_attempt_unwraps_cause(self):
        """attempt stores the cause, not the wrapper."""
        cause = ValueError("Not enough pancakes")
        with pytest.warns(DeprecationWarning):
            outcome = attempt(lambda: _raise(CheckedException(cause)))
        assert outcome == Failure(cause)
        assert outcome.exception is cause

    def test_attempt_fatal_cause_escapes(self):
        """A fatal cause re-raises the wrapper untouched."""
        with pytest.warns(DeprecationWarning), pytest.raises(CheckedException) as info:
            attempt(lambda: _raise(CheckedException(KeyboardInterrupt())))
        assert isinstance(info.value.cause, KeyboardInterrupt)


class TestTryCreation:
    """Tests for Success/Failure instantiation."""

    def test_success_allows_none(self):
        """Success may hold None."""
        assert Success(None).get() is None

    def test_failure_rejects_none(self):
        """Failure(None) fails the precondition."""
        with pytest.raises(PreconditionError):
            Failure(None)

    def test_failure_rejects_non_exception(self):
        """Failure requires an exception instance."""
        with pytest.raises(TypeError, match="requires an exception"):
            Failure("boom")

    def test_failure_rejects_fatal(self):
        """Constructing a Failure from a fatal exception re-raises it."""
        with pytest.raises(KeyboardInterrupt):
            Failure(KeyboardInterrupt())

    def test_failure_equality_by_identity_of_exception(self, sample_failure):
        """Failures holding the same exception object are equal."""
        assert sample_failure == Failure(sample_failure.exception)

    def test_success_not_equal_failure(self):
        """Success and Failure are never equal."""
        exc = ValueError("x")
        assert Success(exc) != Failure(exc)

    def test_success_and_failure_hash_apart(self):
        """Success(e) and Failure(e) hash differently; equal instances hash equally."""
        exc = ValueError("x")
        assert hash(Success(exc)) != hash(Failure(exc))
        assert hash(Failure(exc)) == hash(Failure(exc))
        assert len({Success(exc), Failure(exc)}) == 2

    def test_frozen(self, sample_success):
        """Try instances are immutable."""
        with pytest.raises(AttributeError):
            sample_success.value = 1  # type: ignore[misc]


class TestTryMemory:
    """Tests that captured exceptions are released once unreachable."""

    def test_failure_in_local_is_collected(self):
        """A Failure kept in a local does not pin its exception after return."""
        refs: list[weakref.ref[BaseException]] = []

        def parse_or_zero():
            outcome = attempt(lambda: 1 // 0)
            refs.append(weakref.ref(outcome.exception))
            return outcome.get_or_else(0)

        assert parse_or_zero() == 0
        gc.collect()
        assert refs[0]() is None

    def test_left_of_exception_is_collected(self):
        """A Left built from a Failure is released the same way."""
        refs: list[weakref.ref[BaseException]] = []

        def to_left():
            left = attempt(lambda: int("pancake")).to_either()
            refs.append(weakref.ref(left.value))
            return left.is_left()

        assert to_left() is True
        gc.collect()
        assert refs[0]() is None


class TestTryQuerying:
    """Tests for is_success, is_failure, get."""

    def test_success(self, sample_success):
        """Success reports itself and returns its value."""
        assert sample_success.is_success() is True
        assert sample_success.is_failure() is False
        assert sample_success.get() == 42

    def test_failure(self, sample_failure):
        """Failure reports itself."""
        assert sample_failure.is_failure() is True
        assert sample_failure.is_success() is False

    def test_failure_get_raises_unsupported(self, sample_failure):
        """Failure.get raises UnsupportedOperationError, not the stored exception."""
        with pytest.raises(UnsupportedOperationError, match="Failure.get"):
            sample_failure.get()


class TestTryMap:
    """Tests for map, flat_map, filter."""

    def test_success_map(self):
        """map transforms the value."""
        assert Success(1).map(lambda x: x + 1) == Success(2)

    def test_success_map_captures(self):
        """An exception raised by f becomes a Failure."""
        outcome = Success(0).map(lambda x: 1 // x)
        assert isinstance(outcome.exception, ZeroDivisionError)

    def test_success_map_fatal_escapes(self):
        """A fatal exception raised by f escapes map."""
        with pytest.raises(KeyboardInterrupt):
            Success(0).map(lambda x: _raise(KeyboardInterrupt()))

    def test_failure_map(self, sample_failure):
        """map leaves a Failure unchanged without calling f."""
        assert sample_failure.map(lambda x: pytest.fail("called")) is sample_failure

    def test_success_flat_map(self):
        """flat_map returns the Try produced by f."""
        assert Success(2).flat_map(lambda x: Success(x * 2)) == Success(4)

    def test_success_flat_map_propagates(self):
        """flat_map does not capture exceptions raised by f."""
        with pytest.raises(ZeroDivisionError):
            Success(0).flat_map(lambda x: Success(1 // x))

    def test_failure_flat_map(self, sample_failure):
        """flat_map leaves a Failure unchanged."""
        assert sample_failure.flat_map(lambda x: Success(x)) is sample_failure

    def test_filter_passing(self):
        """A passing predicate keeps the Success."""
        assert Success(12).filter(lambda x: x > 10) == Success(12)

    def test_filter_failing(self):
        """A failing predicate yields Failure(NoSuchElementError)."""
        outcome = Success(7).filter(lambda x: x > 10)
        assert isinstance(outcome.exception, NoSuchElementError)
        assert str(outcome.exception) == "Predicate does not hold for 7"

    def test_filter_captures_predicate_exception(self):
        """An exception raised by the predicate becomes the Failure."""
        outcome = Success("pancake").filter(lambda x: int(x) > 0)
        assert isinstance(outcome.exception, ValueError)

    def test_failure_filter(self, sample_failure):
        """filter leaves a Failure unchanged."""
        assert sample_failure.filter(lambda x: True) is sample_failure

    def test_map_rejects_none(self, sample_success, sample_failure):
        """map(None) fails the precondition on both variants."""
        with pytest.raises(PreconditionError):
            sample_success.map(None)
        with pytest.raises(PreconditionError):
            sample_failure.map(None)


class TestTryRecover:
    """Tests for recover, recover_with, transform."""

    def test_failure_recover(self, sample_failure):
        """recover turns a Failure into a Success."""
        assert sample_failure.recover(lambda e: 1) == Success(1)

    def test_failure_recover_captures(self, sample_failure):
        """An exception raised by the recovery function becomes a Failure."""
        outcome = sample_failure.recover(lambda e: _raise(RuntimeError("still broken")))
        assert isinstance(outcome.exception, RuntimeError)

    def test_success_recover(self, sample_success):
        """recover leaves a Success unchanged."""
        assert sample_success.recover(lambda e: 1) is sample_success

    def test_failure_recover_with(self, sample_failure):
        """recover_with returns the Try produced from the exception."""
        assert sample_failure.recover_with(lambda e: Success(str(e))) == Success("Not enough pancakes")

    def test_failure_recover_with_propagates(self, sample_failure):
        """recover_with does not capture exceptions raised by f."""
        with pytest.raises(RuntimeError):
            sample_failure.recover_with(lambda e: _raise(RuntimeError("nope")))

    def test_transform_success(self, sample_success):
        """transform calls only on_success for a Success."""
        calls: list[str] = []

        def on_success(x):
            calls.append("success")
            return Success(x + 1)

        def on_failure(e):
            calls.append("failure")
            return Success(0)

        assert sample_success.transform(on_success, on_failure) == Success(43)
        assert calls == ["success"]

    def test_transform_failure(self, sample_failure):
        """transform calls only on_failure for a Failure."""
        calls: list[str] = []

        def on_success(x):
            calls.append("success")
            return Success(x)

        def on_failure(e):
            calls.append("failure")
            return Success(-1)

        assert sample_failure.transform(on_success, on_failure) == Success(-1)
        assert calls == ["failure"]


class TestTryFold:
    """Tests for fold and for_each."""

    def test_failure_fold(self, sample_failure):
        """fold applies on_failure to the exception."""
        assert sample_failure.fold(lambda e: f"fail: {e}", lambda v: f"ok: {v}") == "fail: Not enough pancakes"

    def test_success_fold(self, sample_success):
        """fold applies on_success to the value."""
        assert sample_success.fold(lambda e: f"fail: {e}", lambda v: f"ok: {v}") == "ok: 42"

    def test_for_each_single(self, sample_success, sample_failure):
        """Single-consumer for_each runs only for a Success."""
        seen: list[object] = []
        sample_success.for_each(seen.append)
        sample_failure.for_each(seen.append)
        assert seen == [42]

    def test_for_each_both(self, sample_success, sample_failure):
        """Two-consumer for_each dispatches to exactly one consumer."""
        successes: list[object] = []
        failures: list[BaseException] = []
        sample_success.for_each(successes.append, failures.append)
        sample_failure.for_each(successes.append, failures.append)
        assert successes == [42]
        assert failures == [sample_failure.exception]


class TestTryFallbacks:
    """Tests for get_or_else and or_else."""

    def test_get_or_else(self, sample_success, sample_failure):
        """get_or_else returns the value or the fallback."""
        assert sample_success.get_or_else(0) == 42
        assert sample_failure.get_or_else(0) == 0

    def test_or_else(self, sample_success, sample_failure):
        """or_else returns self for Success and the alternative for Failure."""
        assert sample_success.or_else(Success(0)) is sample_success
        assert sample_failure.or_else(Success(0)) == Success(0)


class TestTryConversion:
    """Tests for to_option, to_either, failed, stream, flatten."""

    def test_to_option(self, sample_success, sample_failure):
        """to_option is Some for a Success and Nothing for a Failure."""
        assert sample_success.to_option() == Some(42)
        assert sample_failure.to_option() is Nothing

    def test_success_none_to_option(self):
        """A Success holding None converts to Nothing."""
        assert Success(None).to_option() is Nothing

    def test_to_either(self, sample_success, sample_failure):
        """to_either maps Success to Right and Failure to Left."""
        assert sample_success.to_either() == Right(42)
        assert sample_failure.to_either() == Left(sample_failure.exception)

    def test_success_none_to_either_raises(self):
        """A Success holding None cannot become a Right."""
        with pytest.raises(PreconditionError):
            Success(None).to_either()

    def test_failure_failed(self, sample_failure):
        """failed exposes the exception as a Success."""
        assert sample_failure.failed() == Success(sample_failure.exception)

    def test_success_failed(self, sample_success):
        """failed on a Success is a Failure(UnsupportedOperationError)."""
        outcome = sample_success.failed()
        assert isinstance(outcome.exception, UnsupportedOperationError)
        assert str(outcome.exception) == "Success.failed"

    def test_stream(self, sample_success, sample_failure):
        """stream yields the value of a Success, nothing for a Failure."""
        assert list(sample_success.stream()) == [42]
        assert list(sample_failure.stream()) == []

    def test_flatten(self, sample_failure):
        """flatten removes one layer of nesting."""
        assert flatten_try(Success(Success(1))) == Success(1)
        assert flatten_try(Success(sample_failure)) is sample_failure
        assert flatten_try(sample_failure) is sample_failure

    def test_flatten_non_nested_raises(self):
        """flatten on a Success holding a plain value raises TypeError."""
        with pytest.raises(TypeError):
            flatten_try(Success(1))

    def test_repr(self):
        """Variants render with their payload."""
        assert repr(Success(1)) == "Success(1)"
        assert repr(Failure(ValueError("x"))) == "Failure(ValueError('x'))"


class TestTryPatternMatching:
    """Tests for pattern matching support."""

    def test_match(self, sample_failure):
        """Pattern matching extracts the value or the exception."""
        match sample_failure:
            case Success(_):
                pytest.fail("Should not match Success")
            case Failure(exc):
                assert isinstance(exc, ValueError)


class TestTryLaws:
    """Property-based tests for the Try laws."""

    @given(integers)
    def test_attempt_of_value(self, value):
        """attempt(() -> x) == Success(x)."""
        assert attempt(lambda: value) == Success(value)

    @given(exceptions)
    def test_attempt_of_raise(self, exc):
        """attempt(() -> raise e) == Failure(e)."""
        assert attempt(lambda: _raise(exc)) == Failure(exc)

    @given(tries(successes=integers))
    def test_map_composition(self, outcome):
        """t.map(f).map(g) == t.map(g . f)."""

        def f(x):
            return x * 2

        def g(x):
            return x - 3

        assert outcome.map(f).map(g) == outcome.map(lambda x: g(f(x)))

    @given(tries())
    def test_failed_swaps_variant(self, outcome):
        """failed() exposes a Failure's exception and fails on a Success."""
        if outcome.is_failure():
            assert outcome.failed().get() is outcome.exception
        else:
            assert outcome.failed().is_failure()

    @given(integers)
    def test_success_flat_map_identity(self, value):
        """Success(x).flat_map(f) == f(x)."""

        def f(x):
            return Success(x + 1)

        assert Success(value).flat_map(f) == f(value)

    @given(tries(successes=integers))
    def test_transform_matches_flat_map_recover_with(self, outcome):
        """t.transform(ok, err) == t.flat_map(ok).recover_with(err) for a non-failing ok."""

        def ok(x):
            return Success(x * 2)

        def err(e):
            return Success(type(e).__name__)

        assert outcome.transform(ok, err) == outcome.flat_map(ok).recover_with(err)

    @given(values)
    def test_to_either_to_try(self, value):
        """Success(x).to_either().to_try() == Success(x)."""
        assert Success(value).to_either().to_try() == Success(value)

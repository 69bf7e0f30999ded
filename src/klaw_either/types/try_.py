"""Try type: Success[T] | Failure[T], the outcome of a fallible computation.

``attempt`` runs a thunk and captures any non-fatal exception as a Failure.
``map``, ``filter`` and ``recover`` run their functions inside the same
boundary; ``flat_map``, ``recover_with`` and ``transform`` do not.

Example:
    ```python
    from klaw_either import attempt

    size = attempt(lambda: int(raw)).filter(lambda n: n > 0).get_or_else(1)

    attempt(lambda: int("pancake")).fold(
        lambda e: f"fail: {e}",
        lambda v: f"ok: {v}",
    )
    # "fail: invalid literal for int() with base 10: 'pancake'"
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, NoReturn, TypeIs, overload

import msgspec

from klaw_either._internal.checks import require
from klaw_either._logging import get_logger
from klaw_either.errors import CheckedException, NoSuchElementError, UnsupportedOperationError
from klaw_either.fatal import is_fatal
from klaw_either.types.either import Left, Right
from klaw_either.types.option import Nothing, NothingType, Some

__all__ = ["Failure", "Success", "Try", "attempt", "flatten"]

log = get_logger(__name__)


class Success[T](msgspec.Struct, frozen=True):
    """Success variant of Try holding the computed value.

    The value may be None.

    Examples:
        >>> Success(1).map(lambda x: x + 1)
        Success(2)
        >>> Success(1).failed()
        Failure(UnsupportedOperationError('Success.failed'))
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return False since this is Success."""
        return False

    def get(self) -> T:
        """Return the value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Success[U] | Failure[U]:
        """Apply ``f`` to the value, capturing a raised exception as Failure.

        Args:
            f: Function (or CheckedFunction) applied to the value.

        Returns:
            Success(f(value)), or Failure if f raised a non-fatal exception.
        """
        require(f, "f")
        return attempt(lambda: f(self.value))

    def flat_map[U](self, f: Callable[[T], Success[U] | Failure[U]]) -> Success[U] | Failure[U]:
        """Apply a function returning a Try. Exceptions from ``f`` propagate."""
        require(f, "f")
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Success[T] | Failure[T]:
        """Keep this Success if the predicate holds.

        Returns:
            self if predicate(value) is true; Failure(NoSuchElementError) if it
            is false; Failure(exc) if the predicate raised.
        """
        require(predicate, "predicate")
        return attempt(lambda: predicate(self.value)).flat_map(
            lambda held: self if held else Failure(NoSuchElementError(f"Predicate does not hold for {self.value!r}"))
        )

    def recover(self, f: Callable[[BaseException], T]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require(f, "f")
        return self

    def recover_with(self, f: Callable[[BaseException], Success[T] | Failure[T]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        require(f, "f")
        return self

    def transform[U](
        self,
        on_success: Callable[[T], Success[U] | Failure[U]],
        on_failure: Callable[[BaseException], Success[U] | Failure[U]],
    ) -> Success[U] | Failure[U]:
        """Apply ``on_success`` to the value; ``on_failure`` is not called."""
        require(on_success, "on_success")
        require(on_failure, "on_failure")
        return on_success(self.value)

    def fold[U](self, on_failure: Callable[[BaseException], U], on_success: Callable[[T], U]) -> U:
        """Apply ``on_success`` to the value."""
        require(on_failure, "on_failure")
        require(on_success, "on_success")
        return on_success(self.value)

    @overload
    def for_each(self, f: Callable[[T], Any], /) -> None: ...
    @overload
    def for_each(self, on_success: Callable[[T], Any], on_failure: Callable[[BaseException], Any], /) -> None: ...
    def for_each(self, f: Callable[[T], Any], g: Callable[[BaseException], Any] | None = None, /) -> None:
        """Call the success consumer with the value."""
        require(f, "consumer")
        f(self.value)

    def get_or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the value, ignoring the fallback."""
        return self.value

    def or_else(self, alternative: Success[T] | Failure[T]) -> Success[T]:
        """Return self since this is Success."""
        require(alternative, "alternative")
        return self

    def to_option(self) -> Some[T] | NothingType:
        """Return Some(value), or Nothing when the value is None."""
        if self.value is None:
            return Nothing
        return Some(self.value)

    def to_either(self) -> Right[BaseException, T]:
        """Return Right(value).

        Raises:
            PreconditionError: If the value is None.
        """
        return Right(self.value)

    def failed(self) -> Failure[BaseException]:
        """Return a Failure, since a Success has no exception to expose."""
        return Failure(UnsupportedOperationError("Success.failed"))

    def stream(self) -> Iterator[T]:
        """Return an iterator over the value."""
        return iter((self.value,))

    def flatten(self) -> Any:
        """Return the inner Try held by this Success."""
        if not isinstance(self.value, Success | Failure):
            msg = f"flatten expects a Try nested in Success, got {self!r}"
            raise TypeError(msg)
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def __hash__(self) -> int:
        return hash(("Success", self.value))


class Failure[T](msgspec.Struct, frozen=True):
    """Failure variant of Try holding the raised exception.

    Constructing a Failure from a fatal exception re-raises it.

    Examples:
        >>> Failure(ValueError("Not enough pancakes")).get_or_else(0)
        0
    """

    exception: BaseException

    def __post_init__(self) -> None:
        require(self.exception, "exception")
        if not isinstance(self.exception, BaseException):
            msg = f"Failure requires an exception, got {self.exception!r}"
            raise TypeError(msg)
        if is_fatal(self.exception):
            log.debug("attempt.fatal", exc_type=type(self.exception).__name__)
            raise self.exception

    def is_success(self) -> TypeIs[Success[T]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return True since this is Failure."""
        return True

    def get(self) -> NoReturn:
        """Raise; use ``fold`` or pattern matching to reach the exception.

        Raises:
            UnsupportedOperationError: Always. The stored exception is not re-raised.
        """
        raise UnsupportedOperationError("Failure.get")

    def map[U](self, f: Callable[[T], U]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        require(f, "f")
        return self  # type: ignore[return-value]

    def flat_map[U](self, f: Callable[[T], Success[U] | Failure[U]]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        require(f, "f")
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Failure[T]:
        """Return self unchanged since this is Failure."""
        require(predicate, "predicate")
        return self

    def recover(self, f: Callable[[BaseException], T]) -> Success[T] | Failure[T]:
        """Compute a value from the exception, capturing a raise from ``f``."""
        require(f, "f")
        return attempt(lambda: f(self.exception))

    def recover_with(self, f: Callable[[BaseException], Success[T] | Failure[T]]) -> Success[T] | Failure[T]:
        """Return the Try computed from the exception. Exceptions from ``f`` propagate."""
        require(f, "f")
        return f(self.exception)

    def transform[U](
        self,
        on_success: Callable[[T], Success[U] | Failure[U]],
        on_failure: Callable[[BaseException], Success[U] | Failure[U]],
    ) -> Success[U] | Failure[U]:
        """Apply ``on_failure`` to the exception; ``on_success`` is not called."""
        require(on_success, "on_success")
        require(on_failure, "on_failure")
        return on_failure(self.exception)

    def fold[U](self, on_failure: Callable[[BaseException], U], on_success: Callable[[T], U]) -> U:
        """Apply ``on_failure`` to the exception."""
        require(on_failure, "on_failure")
        require(on_success, "on_success")
        return on_failure(self.exception)

    @overload
    def for_each(self, f: Callable[[T], Any], /) -> None: ...
    @overload
    def for_each(self, on_success: Callable[[T], Any], on_failure: Callable[[BaseException], Any], /) -> None: ...
    def for_each(self, f: Callable[[T], Any], g: Callable[[BaseException], Any] | None = None, /) -> None:
        """Call the failure consumer, if given, with the exception."""
        require(f, "consumer")
        if g is not None:
            g(self.exception)

    def get_or_else(self, fallback: T) -> T:
        """Return the fallback since this is Failure."""
        return fallback

    def or_else(self, alternative: Success[T] | Failure[T]) -> Success[T] | Failure[T]:
        """Return the alternative since this is Failure."""
        return require(alternative, "alternative")

    def to_option(self) -> NothingType:
        """Return Nothing."""
        return Nothing

    def to_either(self) -> Left[BaseException, T]:
        """Return Left(exception)."""
        return Left(self.exception)

    def failed(self) -> Success[BaseException]:
        """Return Success(exception)."""
        return Success(self.exception)

    def stream(self) -> Iterator[T]:
        """Return an empty iterator."""
        return iter(())

    def flatten(self) -> Failure[Any]:
        """Return self since the outer value is Failure."""
        return self

    def __repr__(self) -> str:
        return f"Failure({self.exception!r})"

    def __hash__(self) -> int:
        return hash(("Failure", self.exception))


type Try[T] = Success[T] | Failure[T]


def attempt[T](thunk: Callable[[], T]) -> Try[T]:
    """Run ``thunk`` and capture its outcome.

    Args:
        thunk: Nullary callable that may raise.

    Returns:
        Success(result), or Failure(exc) for a non-fatal exception. A raised
        CheckedException is unwrapped to its cause.

    Raises:
        BaseException: Fatal exceptions (see ``klaw_either.fatal``) are re-raised.

    Examples:
        >>> attempt(lambda: int("12"))
        Success(12)
        >>> attempt(lambda: int("pancake")).is_failure()
        True
    """
    require(thunk, "thunk")
    try:
        return Success(thunk())
    except CheckedException as wrapped:
        cause = wrapped.cause
        if is_fatal(cause):
            log.debug("attempt.fatal", exc_type=type(cause).__name__)
            raise
        log.debug("attempt.captured", exc_type=type(cause).__name__)
        return Failure(cause)
    except BaseException as exc:
        if is_fatal(exc):
            log.debug("attempt.fatal", exc_type=type(exc).__name__)
            raise
        log.debug("attempt.captured", exc_type=type(exc).__name__)
        return Failure(exc)


def flatten[T](outer: Try[Try[T]]) -> Try[T]:
    """Collapse one layer of nesting.

    Examples:
        >>> flatten(Success(Success(1)))
        Success(1)
    """
    return require(outer, "outer").flatten()

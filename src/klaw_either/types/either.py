"""Either type: Left[A] | Right[B], a right-biased disjoint union.

Right-biased combinators (``map``, ``flat_map``, ``filter_or_else``,
``exists``, ``contains``, ``for_all``, ``get_or_else``, ``to_option``,
``stream`` and single-argument ``for_each``) act on Right and pass Left
through unchanged. ``left()`` gives the left-biased projection.

Example:
    ```python
    from klaw_either import Left, Right, cond

    Right(12).filter_or_else(lambda x: x > 10, -1)  # Right(12)
    Right(7).filter_or_else(lambda x: x > 10, -1)   # Left(-1)

    parsed = cond(text.isdigit(), lambda: int(text), lambda: f"not a number: {text}")
    parsed.fold(print_error, use_number)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

import msgspec

from klaw_either._internal.checks import require
from klaw_either.errors import NoSuchElementError
from klaw_either.types.option import Nothing, NothingType, Some

if TYPE_CHECKING:
    from klaw_either.types.projection import LeftProjection
    from klaw_either.types.try_ import Failure, Success

__all__ = [
    "Either",
    "Left",
    "Right",
    "cond",
    "flatten",
    "join_left",
    "join_right",
    "left_values",
    "merge",
    "right_values",
]


class Left[A, B](msgspec.Struct, frozen=True):
    """Left variant of Either holding a value of type A.

    Examples:
        >>> Left(7).map(lambda x: x + 1)
        Left(7)
        >>> Left("cookie").get_or_else("pancake")
        'pancake'
    """

    value: A

    def __post_init__(self) -> None:
        require(self.value, "Left value")

    def is_left(self) -> TypeIs[Left[A, B]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[A, B]]:
        """Return False since this is Left."""
        return False

    def get_left(self) -> A:
        """Return the left value."""
        return self.value

    def get_right(self) -> NoReturn:
        """Raise since a Left has no right value.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError("No right value present")

    def contains(self, elem: B) -> bool:
        """Return False; a Left never contains a right value."""
        require(elem, "elem")
        return False

    def exists(self, predicate: Callable[[B], bool]) -> bool:
        """Return False without calling the predicate."""
        require(predicate, "predicate")
        return False

    def for_all(self, predicate: Callable[[B], bool]) -> bool:
        """Return True without calling the predicate."""
        require(predicate, "predicate")
        return True

    def filter_or_else(self, predicate: Callable[[B], bool], fallback: A) -> Left[A, B]:  # noqa: ARG002
        """Return self unchanged since this is Left."""
        require(predicate, "predicate")
        return self

    def flat_map[B1](self, f: Callable[[B], Left[A, B1] | Right[A, B1]]) -> Left[A, B1]:
        """Return self unchanged since this is Left."""
        require(f, "f")
        return self  # type: ignore[return-value]

    def map[B1](self, f: Callable[[B], B1]) -> Left[A, B1]:
        """Return self unchanged since this is Left."""
        require(f, "f")
        return self  # type: ignore[return-value]

    def map_left[A1](self, f: Callable[[A], A1]) -> Left[A1, B]:
        """Apply a function to the left value."""
        require(f, "f")
        return Left(f(self.value))

    def bi_map[A1, B1](self, on_left: Callable[[A], A1], on_right: Callable[[B], B1]) -> Left[A1, B1]:
        """Map the left value with ``on_left``; ``on_right`` is not called."""
        require(on_left, "on_left")
        require(on_right, "on_right")
        return Left(on_left(self.value))

    def fold[C](self, on_left: Callable[[A], C], on_right: Callable[[B], C]) -> C:
        """Apply ``on_left`` to the left value."""
        require(on_left, "on_left")
        require(on_right, "on_right")
        return on_left(self.value)

    @overload
    def for_each(self, f: Callable[[B], Any], /) -> None: ...
    @overload
    def for_each(self, on_left: Callable[[A], Any], on_right: Callable[[B], Any], /) -> None: ...
    def for_each(self, f: Callable[..., Any], g: Callable[[B], Any] | None = None, /) -> None:
        """Run a consumer for its side effects.

        With one consumer this is a no-op, since it would receive the right
        value. With two, the first receives the left value.
        """
        require(f, "consumer")
        if g is not None:
            f(self.value)

    def get_or_else(self, fallback: B) -> B:
        """Return the fallback since this is Left."""
        return fallback

    def or_else[A1, B1](self, alternative: Left[A1, B1] | Right[A1, B1]) -> Left[A1, B1] | Right[A1, B1]:
        """Return the alternative since this is Left."""
        return require(alternative, "alternative")

    def left(self) -> LeftProjection[A, B]:
        """Return the left-biased projection of this Either."""
        from klaw_either.types.projection import LeftProjection

        return LeftProjection(self)

    def stream(self) -> Iterator[B]:
        """Return an empty iterator."""
        return iter(())

    def swap(self) -> Right[B, A]:
        """Return a Right holding the same value."""
        return Right(self.value)

    def to_option(self) -> NothingType:
        """Return Nothing since there is no right value."""
        return Nothing

    def to_try(self) -> Failure[B]:
        """Convert to a Failure carrying the left value.

        Raises:
            TypeError: If the left value is not an exception.
        """
        from klaw_either.types.try_ import Failure

        if not isinstance(self.value, BaseException):
            msg = f"Left value is not an exception: {self.value!r}"
            raise TypeError(msg)
        return Failure(self.value)

    def flatten(self) -> Left[A, Any]:
        """Return self since the outer value is Left."""
        return self

    def join_left(self) -> Any:
        """Return the inner Either held by this Left."""
        return _inner(self, "join_left")

    def join_right(self) -> Left[A, Any]:
        """Return self since the outer value is Left."""
        return self

    def merge(self) -> A:
        """Return the left value."""
        return self.value

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    def __hash__(self) -> int:
        return hash(("Left", self.value))


class Right[A, B](msgspec.Struct, frozen=True):
    """Right variant of Either holding a value of type B.

    Examples:
        >>> Right(12).map(lambda x: x * 2)
        Right(24)
        >>> Right("Hello ").fold(lambda x: x + 1, lambda x: x + "world")
        'Hello world'
    """

    value: B

    def __post_init__(self) -> None:
        require(self.value, "Right value")

    def is_left(self) -> TypeIs[Left[A, B]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[A, B]]:
        """Return True since this is Right."""
        return True

    def get_left(self) -> NoReturn:
        """Raise since a Right has no left value.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError("No left value present")

    def get_right(self) -> B:
        """Return the right value."""
        return self.value

    def contains(self, elem: B) -> bool:
        """Return True if the right value equals ``elem``."""
        require(elem, "elem")
        return self.value == elem

    def exists(self, predicate: Callable[[B], bool]) -> bool:
        """Return the predicate applied to the right value."""
        require(predicate, "predicate")
        return predicate(self.value)

    def for_all(self, predicate: Callable[[B], bool]) -> bool:
        """Return the predicate applied to the right value."""
        require(predicate, "predicate")
        return predicate(self.value)

    def filter_or_else(self, predicate: Callable[[B], bool], fallback: A) -> Left[A, B] | Right[A, B]:
        """Keep this Right if the predicate holds, else return Left(fallback).

        Args:
            predicate: Test applied to the right value.
            fallback: Left value used when the test fails.

        Returns:
            self, or Left(fallback).
        """
        require(predicate, "predicate")
        if predicate(self.value):
            return self
        return Left(fallback)

    def flat_map[A1, B1](self, f: Callable[[B], Left[A1, B1] | Right[A1, B1]]) -> Left[A1, B1] | Right[A1, B1]:
        """Apply a function that returns an Either to the right value.

        Args:
            f: Function that takes B and returns Either[A, B1].

        Returns:
            The Either returned by f.
        """
        require(f, "f")
        return f(self.value)

    def map[B1](self, f: Callable[[B], B1]) -> Right[A, B1]:
        """Apply a function to the right value."""
        require(f, "f")
        return Right(f(self.value))

    def map_left[A1](self, f: Callable[[A], A1]) -> Right[A1, B]:
        """Return self unchanged since this is Right."""
        require(f, "f")
        return self  # type: ignore[return-value]

    def bi_map[A1, B1](self, on_left: Callable[[A], A1], on_right: Callable[[B], B1]) -> Right[A1, B1]:
        """Map the right value with ``on_right``; ``on_left`` is not called."""
        require(on_left, "on_left")
        require(on_right, "on_right")
        return Right(on_right(self.value))

    def fold[C](self, on_left: Callable[[A], C], on_right: Callable[[B], C]) -> C:
        """Apply ``on_right`` to the right value."""
        require(on_left, "on_left")
        require(on_right, "on_right")
        return on_right(self.value)

    @overload
    def for_each(self, f: Callable[[B], Any], /) -> None: ...
    @overload
    def for_each(self, on_left: Callable[[A], Any], on_right: Callable[[B], Any], /) -> None: ...
    def for_each(self, f: Callable[..., Any], g: Callable[[B], Any] | None = None, /) -> None:
        """Run a consumer with the right value.

        With one consumer it receives the right value. With two, the second
        one does and the first is not called.
        """
        require(f, "consumer")
        if g is None:
            f(self.value)
        else:
            g(self.value)

    def get_or_else(self, fallback: B) -> B:  # noqa: ARG002
        """Return the right value, ignoring the fallback."""
        return self.value

    def or_else(self, alternative: Left[A, B] | Right[A, B]) -> Right[A, B]:
        """Return self since this is Right."""
        require(alternative, "alternative")
        return self

    def left(self) -> LeftProjection[A, B]:
        """Return the left-biased projection of this Either."""
        from klaw_either.types.projection import LeftProjection

        return LeftProjection(self)

    def stream(self) -> Iterator[B]:
        """Return an iterator over the right value."""
        return iter((self.value,))

    def swap(self) -> Left[B, A]:
        """Return a Left holding the same value."""
        return Left(self.value)

    def to_option(self) -> Some[B]:
        """Return Some(right value)."""
        return Some(self.value)

    def to_try(self) -> Success[B]:
        """Convert to a Success holding the right value."""
        from klaw_either.types.try_ import Success

        return Success(self.value)

    def flatten(self) -> Any:
        """Return the inner Either held by this Right."""
        return _inner(self, "flatten")

    def join_left(self) -> Right[Any, B]:
        """Return self since the outer value is Right."""
        return self

    def join_right(self) -> Any:
        """Return the inner Either held by this Right."""
        return _inner(self, "join_right")

    def merge(self) -> B:
        """Return the right value."""
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    def __hash__(self) -> int:
        return hash(("Right", self.value))


type Either[A, B] = Left[A, B] | Right[A, B]


def _inner(outer: Left[Any, Any] | Right[Any, Any], operation: str) -> Any:
    """Return the Either nested inside ``outer``."""
    if not isinstance(outer.value, Left | Right):
        msg = f"{operation} expects an Either nested in {type(outer).__name__}, got {outer!r}"
        raise TypeError(msg)
    return outer.value


def cond[A, B](condition: bool, if_true: Callable[[], B], if_false: Callable[[], A]) -> Either[A, B]:  # noqa: FBT001
    """Build an Either from a condition, evaluating only the chosen supplier.

    Args:
        condition: Selects the variant.
        if_true: Supplies the Right value when the condition holds.
        if_false: Supplies the Left value otherwise.

    Returns:
        Right(if_true()) or Left(if_false()).

    Examples:
        >>> cond(True, lambda: 1, lambda: "no")
        Right(1)
        >>> cond(False, lambda: 1, lambda: "no")
        Left('no')
    """
    require(if_true, "if_true")
    require(if_false, "if_false")
    if condition:
        return Right(if_true())
    return Left(if_false())


def flatten[A, B](either: Either[A, Either[A, B]]) -> Either[A, B]:
    """Collapse one layer of nesting on the right.

    Examples:
        >>> flatten(Right(Right(7)))
        Right(7)
        >>> flatten(Right(Left("cookie")))
        Left('cookie')
        >>> flatten(Left("pancake"))
        Left('pancake')
    """
    return require(either, "either").flatten()


def join_left[B, C](either: Either[Either[C, B], B]) -> Either[C, B]:
    """Collapse one layer of nesting on the left.

    An outer Left yields its inner Either; an outer Right passes through.
    """
    return require(either, "either").join_left()


def join_right[A, C](either: Either[A, Either[A, C]]) -> Either[A, C]:
    """Collapse one layer of nesting on the right.

    An outer Right yields its inner Either; an outer Left passes through.
    """
    return require(either, "either").join_right()


def merge[T](either: Either[T, T]) -> T:
    """Return the value of whichever side is present."""
    return require(either, "either").merge()


def left_values[A, B](eithers: Iterable[Either[A, B]]) -> list[A]:
    """Collect the values of every Left, in order."""
    return [e.value for e in require(eithers, "eithers") if isinstance(e, Left)]


def right_values[A, B](eithers: Iterable[Either[A, B]]) -> list[B]:
    """Collect the values of every Right, in order."""
    return [e.value for e in require(eithers, "eithers") if isinstance(e, Right)]

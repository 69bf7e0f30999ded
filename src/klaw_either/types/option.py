"""Option type: Some[T] | Nothing, the result of the ``to_option`` conversions.

Uses the same vocabulary as Either and Try (``get``, ``get_or_else``,
``flat_map``, ``or_else``, ``stream``) so an Option reads like a Right/Left
pair that drops the left payload.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_either._internal.checks import require
from klaw_either.errors import NoSuchElementError

if TYPE_CHECKING:
    from klaw_either.types.either import Left, Right

__all__ = ["Nothing", "NothingType", "Option", "Some"]


class Some[T](msgspec.Struct, frozen=True):
    """Present Option holding a value of type T.

    Examples:
        >>> Some(12).map(lambda x: x + 1)
        Some(13)
        >>> list(Some("pancake"))
        ['pancake']
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def get(self) -> T:
        """Return the value."""
        return self.value

    def get_or_else(self, fallback: T) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        require(f, "f")
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function returning an Option to the value."""
        require(f, "f")
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep this Some only if the predicate holds."""
        require(predicate, "predicate")
        return self if predicate(self.value) else Nothing

    def or_else(self, alternative: Some[T] | NothingType) -> Some[T]:
        require(alternative, "alternative")
        return self

    def stream(self) -> Iterator[T]:
        return iter((self.value,))

    def to_either[A](self, if_nothing: Callable[[], A]) -> Right[A, T]:
        """Return Right(value); ``if_nothing`` is not called."""
        from klaw_either.types.either import Right

        require(if_nothing, "if_nothing")
        return Right(self.value)

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent Option. Use the ``Nothing`` singleton."""

    def is_some(self) -> TypeIs[Some[Any]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError("No value present")

    def get_or_else[T](self, fallback: T) -> T:
        return fallback

    def map(self, f: Callable[[Any], Any]) -> NothingType:
        require(f, "f")
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> NothingType:
        require(f, "f")
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> NothingType:
        require(predicate, "predicate")
        return self

    def or_else[T](self, alternative: Some[T] | NothingType) -> Some[T] | NothingType:
        return require(alternative, "alternative")

    def stream(self) -> Iterator[Any]:
        return iter(())

    def to_either[A](self, if_nothing: Callable[[], A]) -> Left[A, Any]:
        """Return Left(if_nothing())."""
        from klaw_either.types.either import Left

        require(if_nothing, "if_nothing")
        return Left(if_nothing())

    def __iter__(self) -> Iterator[Any]:
        return self.stream()

    def __repr__(self) -> str:
        return "Nothing"


Nothing: NothingType = NothingType()

type Option[T] = Some[T] | NothingType

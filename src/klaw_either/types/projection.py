"""LeftProjection: left-biased view of an Either."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import msgspec

from klaw_either._internal.checks import require
from klaw_either.errors import NoSuchElementError
from klaw_either.types.either import Either, Left, Right
from klaw_either.types.option import Nothing, NothingType, Some

__all__ = ["LeftProjection"]


class LeftProjection[A, B](msgspec.Struct, frozen=True, eq=False):
    """Left-biased replay of the Either combinators.

    Obtained from ``either.left()``. Operations act on a Left and pass a
    Right through unchanged.

    Examples:
        >>> Left(12).left().map(lambda x: x + 2)
        Left(14)
        >>> Right(12).left().map(lambda x: x + 2)
        Right(12)
    """

    either: Either[A, B]

    def get(self) -> A:
        """Return the left value.

        Raises:
            NoSuchElementError: If the projected Either is Right.
        """
        if isinstance(self.either, Left):
            return self.either.value
        raise NoSuchElementError("No left value present")

    def contains(self, elem: A) -> bool:
        """Return True if the Either is Left and its value equals ``elem``."""
        require(elem, "elem")
        return isinstance(self.either, Left) and self.either.value == elem

    def exists(self, predicate: Callable[[A], bool]) -> bool:
        """Return True if the Either is Left and the predicate holds."""
        require(predicate, "predicate")
        return isinstance(self.either, Left) and predicate(self.either.value)

    def for_all(self, predicate: Callable[[A], bool]) -> bool:
        """Return True if the Either is Right or the predicate holds."""
        require(predicate, "predicate")
        return isinstance(self.either, Right) or predicate(self.either.value)

    def filter_to_option(self, predicate: Callable[[A], bool]) -> Some[Either[A, B]] | NothingType:
        """Return Some(either) if it is Left and the predicate holds, else Nothing.

        The projected Either itself is returned, not the projection.
        """
        require(predicate, "predicate")
        if isinstance(self.either, Left) and predicate(self.either.value):
            return Some(self.either)
        return Nothing

    def flat_map[A1](self, f: Callable[[A], Either[A1, B]]) -> Either[A1, B]:
        """Apply a function returning an Either to the left value."""
        require(f, "f")
        if isinstance(self.either, Left):
            return f(self.either.value)
        return self.either  # type: ignore[return-value]

    def map[A1](self, f: Callable[[A], A1]) -> Either[A1, B]:
        """Apply a function to the left value."""
        require(f, "f")
        if isinstance(self.either, Left):
            return Left(f(self.either.value))
        return self.either  # type: ignore[return-value]

    def for_each(self, f: Callable[[A], Any]) -> None:
        """Call ``f`` with the left value, if any."""
        require(f, "f")
        if isinstance(self.either, Left):
            f(self.either.value)

    def get_or_else(self, fallback: A) -> A:
        """Return the left value, or the fallback for a Right."""
        if isinstance(self.either, Left):
            return self.either.value
        return fallback

    def stream(self) -> Iterator[A]:
        """Return an iterator over the left value, empty for a Right."""
        if isinstance(self.either, Left):
            return iter((self.either.value,))
        return iter(())

    def to_option(self) -> Some[A] | NothingType:
        """Return Some(left value), or Nothing for a Right."""
        if isinstance(self.either, Left):
            return Some(self.either.value)
        return Nothing

    def __repr__(self) -> str:
        return f"LeftProjection({self.either!r})"

"""Precondition helpers shared by the variant types."""

from __future__ import annotations

from klaw_either.errors import PreconditionError

__all__ = ["require"]


def require[T](value: T | None, name: str) -> T:
    """Return ``value`` unchanged, raising PreconditionError if it is None."""
    if value is None:
        raise PreconditionError(name)
    return value

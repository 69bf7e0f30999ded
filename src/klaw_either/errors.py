"""Library error types and the legacy wrapped-carrier exception."""

from __future__ import annotations

from warnings import deprecated

__all__ = [
    "CheckedException",
    "NoSuchElementError",
    "PreconditionError",
    "UnsupportedOperationError",
]


class PreconditionError(ValueError):
    """A library precondition was violated.

    Raised when ``None`` is given where a value is required: an Either
    payload, a Failure carrier, or a combinator argument.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class NoSuchElementError(LookupError):
    """Inspection of a variant that does not hold the requested value."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


class UnsupportedOperationError(RuntimeError):
    """Operation is not supported by this variant (e.g. ``Failure.get``)."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(operation)


@deprecated("Raise the original exception directly; attempt() captures any exception.")
class CheckedException(Exception):  # noqa: N818
    """Wrapper that tunnels an exception through non-raising call sites.

    ``attempt`` unwraps it and treats ``cause`` as if it had been raised
    directly. Kept for compatibility with callers written against the
    early API.
    """

    def __init__(self, cause: BaseException) -> None:
        if cause is None:
            raise PreconditionError("cause")
        if not isinstance(cause, BaseException):
            msg = f"CheckedException requires an exception cause, got {cause!r}"
            raise TypeError(msg)
        self.cause = cause
        super().__init__(cause)
        self.__cause__ = cause

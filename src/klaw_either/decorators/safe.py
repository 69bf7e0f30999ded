"""@safe decorator: run a function through ``attempt`` and return a Try."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from klaw_either.types.try_ import Failure, Success, attempt

__all__ = ["safe"]

P = ParamSpec("P")
T = TypeVar("T")


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[T]]: ...


@overload
def safe(
    *,
    exceptions: tuple[type[BaseException], ...],
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that returns Success(result) or Failure(exception).

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Anything else is re-raised.
            Defaults to every non-fatal exception.

    Returns:
        A wrapped function that returns Try[T] instead of T.

    Example:
        ```python
        @safe
        def parse(text: str) -> int:
            return int(text)

        parse("12")       # Success(12)
        parse("pancake")  # Failure(ValueError("invalid literal for int() ..."))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[T]:
        outcome = attempt(lambda: wrapped(*args, **kwargs))
        if (
            exceptions is not None
            and isinstance(outcome, Failure)
            and not isinstance(outcome.exception, exceptions)
        ):
            raise outcome.exception
        return outcome

    if func is not None:
        return wrapper(func)
    return wrapper

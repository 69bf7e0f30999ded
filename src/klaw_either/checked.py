"""Callables permitted to raise: CheckedFunction and CheckedSupplier.

Any Python callable may raise, so these exist for composition: a
CheckedFunction chains with ``compose``/``and_then`` and relays whatever
either step raises. ``Try.map`` accepts one anywhere it accepts a plain
callable.

Example:
    ```python
    from klaw_either import Success, checked

    parse = checked(int).and_then(lambda n: 100 // n)
    Success("4").map(parse)  # Success(25)
    Success("0").map(parse)  # Failure(ZeroDivisionError('integer division or modulo by zero'))
    ```
"""

from __future__ import annotations

from collections.abc import Callable

import msgspec

from klaw_either._internal.checks import require

__all__ = ["CheckedFunction", "CheckedSupplier", "checked"]

type CheckedSupplier[T] = Callable[[], T]
"""Nullary callable that may raise any exception."""


class CheckedFunction[T, R](msgspec.Struct, frozen=True):
    """Unary callable that may raise any exception.

    Attributes:
        fn: The wrapped function.
    """

    fn: Callable[[T], R]

    def __post_init__(self) -> None:
        require(self.fn, "fn")

    def __call__(self, value: T) -> R:
        return self.fn(value)

    def compose[V](self, before: Callable[[V], T]) -> CheckedFunction[V, R]:
        """Return a function that applies ``before`` and then this function.

        Raises:
            PreconditionError: If ``before`` is None.
        """
        require(before, "before")
        return CheckedFunction(lambda v: self.fn(before(v)))

    def and_then[V](self, after: Callable[[R], V]) -> CheckedFunction[T, V]:
        """Return a function that applies this function and then ``after``.

        Raises:
            PreconditionError: If ``after`` is None.
        """
        require(after, "after")
        return CheckedFunction(lambda t: after(self.fn(t)))


def checked[T, R](fn: Callable[[T], R]) -> CheckedFunction[T, R]:
    """Wrap ``fn`` as a CheckedFunction. Usable as a decorator."""
    if isinstance(fn, CheckedFunction):
        return fn
    return CheckedFunction(fn)

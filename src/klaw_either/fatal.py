"""Classification of exceptions that combinators must never swallow.

The default fatal list, configurable through ``klaw_either.init``:

- ``KeyboardInterrupt``: cooperative interruption
- ``SystemExit``: interpreter or thread exit
- ``GeneratorExit``: generator close signal
- ``asyncio.CancelledError``: task cancellation
- ``MemoryError``, ``RecursionError``, ``SystemError``: runtime integrity

Link and load failures are deliberately not on the list. In Python they
surface as ``ImportError``, which behaves like a recoverable lookup failure
(optional imports are routinely caught) rather than a broken runtime. Callers
that want load failures to escape can add it with
``init(extra_fatal=(ImportError,))``.
"""

from __future__ import annotations

from klaw_either._config import get_config

__all__ = ["is_fatal"]


def is_fatal(exc: BaseException) -> bool:
    """Return True if ``exc`` must escape instead of becoming a Failure.

    Examples:
        >>> is_fatal(KeyboardInterrupt())
        True
        >>> is_fatal(ValueError("bad input"))
        False
    """
    return isinstance(exc, get_config().fatal_exceptions)

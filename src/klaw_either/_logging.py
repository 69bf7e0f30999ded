"""Structured logging for klaw-either.

The library emits two debug events from the capture boundary:

- ``attempt.captured``: a thunk raised and the exception became a Failure
- ``attempt.fatal``: a fatal exception is about to escape

Both carry ``exc_type``. Library loggers wrap stdlib loggers and check the
stdlib level first, so nothing is emitted until the application turns
logging on with ``configure_logging`` or ``init(log_level=...)``.

Failure observers register with ``add_log_hook``. A hook sees every event
that passes the level check, as a plain dict, before it is rendered.

Example:
    ```python
    from collections import Counter

    from klaw_either import add_log_hook, init

    captured = Counter()
    add_log_hook(lambda e: e["event"] == "attempt.captured" and captured.update([e["exc_type"]]))
    init(log_level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    type LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of each event that passes the level check."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for hook in tuple(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S110
            # Logging from here would re-enter this processor; a broken observer
            # must not turn a captured failure into a raised one
            pass
    return event_dict


def _event_processors() -> list[Any]:
    """Processors that enrich an event; shared with foreign stdlib records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _library_chain() -> list[Any]:
    """Full chain for library loggers, level check first."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_event_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Args:
        level: Root logging level name.
        json_output: Render JSON lines; otherwise structlog's console renderer.
    """
    import structlog

    structlog.configure(
        processors=_library_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_event_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog BoundLogger over the stdlib logger ``name``.

    The processor chain is bound here instead of read from the global
    structlog configuration, so the stdlib level applies even when the
    application never configures structlog.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_library_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

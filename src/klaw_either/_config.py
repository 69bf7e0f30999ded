"""Library configuration: EitherConfig, init() and get_config()."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any

from klaw_either._logging import configure_logging

__all__ = [
    "DEFAULT_FATAL_EXCEPTIONS",
    "EitherConfig",
    "get_config",
    "init",
]

DEFAULT_FATAL_EXCEPTIONS: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
    MemoryError,
    RecursionError,
    SystemError,
)
"""Exception types never captured by ``attempt`` or stored in a Failure."""

LOG_LEVEL_ENV = "KLAW_EITHER_LOG_LEVEL"


@dataclass(frozen=True)
class EitherConfig:
    """Configuration for klaw-either.

    Attributes:
        fatal_exceptions: Exception types that combinators re-raise instead of
            capturing as Failure.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or console output (False).
    """

    fatal_exceptions: tuple[type[BaseException], ...] = DEFAULT_FATAL_EXCEPTIONS
    log_level: str | None = None
    json_logs: bool = True


_config: EitherConfig = EitherConfig()


def _detect_log_level() -> str | None:
    """Read the log level from the environment, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not level:
        return None
    if level not in logging.getLevelNamesMapping():
        logging.warning("Unknown %s value '%s', logging stays disabled", LOG_LEVEL_ENV, level)
        return None
    return level


def _validate_fatal(types: tuple[Any, ...]) -> tuple[type[BaseException], ...]:
    for t in types:
        if not (isinstance(t, type) and issubclass(t, BaseException)):
            msg = f"fatal exception types must be BaseException subclasses, got {t!r}"
            raise TypeError(msg)
    return tuple(types)


def init(
    fatal_exceptions: tuple[type[BaseException], ...] | None = None,
    *,
    extra_fatal: tuple[type[BaseException], ...] = (),
    log_level: str | None = None,
    json_logs: bool = True,
) -> EitherConfig:
    """Install a new library configuration.

    Args:
        fatal_exceptions: Replaces the fatal exception list. Defaults to
            DEFAULT_FATAL_EXCEPTIONS if None.
        extra_fatal: Types appended to the fatal list.
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to the
            KLAW_EITHER_LOG_LEVEL environment variable. None = silent.
        json_logs: Emit JSON logs when logging is configured.

    Returns:
        The EitherConfig that was set.

    Raises:
        TypeError: If a fatal type is not a BaseException subclass.

    Example:
        ```python
        from klaw_either import init

        # Treat failed imports as fatal, log captured failures
        init(extra_fatal=(ImportError,), log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    base = DEFAULT_FATAL_EXCEPTIONS if fatal_exceptions is None else fatal_exceptions
    resolved_fatal = _validate_fatal((*base, *extra_fatal))
    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = EitherConfig(
        fatal_exceptions=resolved_fatal,
        log_level=resolved_level,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> EitherConfig:
    """Get the current library configuration.

    A default configuration is in place before ``init()`` is called.
    """
    return _config

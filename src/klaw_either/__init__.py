"""klaw-either: Either and Try types for Python 3.13+.

Flat imports (preferred):
    from klaw_either import Either, Left, Right, Try, Success, Failure, attempt
    from klaw_either import cond, flatten, join_left, join_right, safe, checked

Submodule imports (for organization):
    from klaw_either.types import Either, Try, LeftProjection, Option
    from klaw_either.decorators import safe
    from klaw_either.fatal import is_fatal
"""

# Configuration and logging
from klaw_either._config import DEFAULT_FATAL_EXCEPTIONS, EitherConfig, get_config, init
from klaw_either._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Checked callables
from klaw_either.checked import CheckedFunction, CheckedSupplier, checked

# Decorators
from klaw_either.decorators import safe

# Errors
from klaw_either.errors import (
    CheckedException,
    NoSuchElementError,
    PreconditionError,
    UnsupportedOperationError,
)
from klaw_either.fatal import is_fatal

# Types
from klaw_either.types import (
    Either,
    Failure,
    Left,
    LeftProjection,
    Nothing,
    NothingType,
    Option,
    Right,
    Some,
    Success,
    Try,
    attempt,
    cond,
    flatten,
    flatten_try,
    join_left,
    join_right,
    left_values,
    merge,
    right_values,
)

__all__ = [
    "DEFAULT_FATAL_EXCEPTIONS",
    "CheckedException",
    "CheckedFunction",
    "CheckedSupplier",
    "Either",
    "EitherConfig",
    "Failure",
    "Left",
    "LeftProjection",
    "NoSuchElementError",
    "Nothing",
    "NothingType",
    "Option",
    "PreconditionError",
    "Right",
    "Some",
    "Success",
    "Try",
    "UnsupportedOperationError",
    "add_log_hook",
    "attempt",
    "checked",
    "clear_log_hooks",
    "cond",
    "configure_logging",
    "flatten",
    "flatten_try",
    "get_config",
    "get_logger",
    "init",
    "is_fatal",
    "join_left",
    "join_right",
    "left_values",
    "merge",
    "remove_log_hook",
    "right_values",
    "safe",
]

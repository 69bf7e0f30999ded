"""Core types: Either, LeftProjection, Try, Option."""

from klaw_either.types.either import (
    Either,
    Left,
    Right,
    cond,
    flatten,
    join_left,
    join_right,
    left_values,
    merge,
    right_values,
)
from klaw_either.types.option import Nothing, NothingType, Option, Some
from klaw_either.types.projection import LeftProjection
from klaw_either.types.try_ import Failure, Success, Try, attempt
from klaw_either.types.try_ import flatten as flatten_try

__all__ = [
    "Either",
    "Failure",
    "Left",
    "LeftProjection",
    "Nothing",
    "NothingType",
    "Option",
    "Right",
    "Some",
    "Success",
    "Try",
    "attempt",
    "cond",
    "flatten",
    "flatten_try",
    "join_left",
    "join_right",
    "left_values",
    "merge",
    "right_values",
]

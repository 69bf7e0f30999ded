"""Decorators: @safe."""

from klaw_either.decorators.safe import safe

__all__ = ["safe"]

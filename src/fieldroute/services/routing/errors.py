"""Routing error types."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Caller supplied coordinates, windows or labels the optimizer cannot use."""


class ComputationError(RuntimeError):
    """Internal failure while constructing or improving a route."""

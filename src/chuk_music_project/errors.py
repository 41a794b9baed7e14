"""
Error types for the project model.

There is a single error kind: anything that would break an invariant
raises InvalidArgumentError at the point of construction or call.
"""


class MusicProjectError(Exception):
    """Base class for all errors raised by the project model."""


class InvalidArgumentError(MusicProjectError, ValueError):
    """An argument violates a value, event, track, or project invariant."""

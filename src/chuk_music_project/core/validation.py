"""
Raw-value checks shared by the value objects.

Every check raises InvalidArgumentError; bool is never accepted as a number.
"""

from __future__ import annotations

import math
from numbers import Real

from chuk_music_project.constants import ErrorMessages
from chuk_music_project.errors import InvalidArgumentError


def require_int(kind: str, value: object) -> int:
    """Return value if it is a plain integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(ErrorMessages.NOT_AN_INTEGER.format(kind=kind, value=value))
    return value


def require_real(kind: str, value: object) -> float | int:
    """Return value if it is a finite real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(ErrorMessages.NOT_A_NUMBER.format(kind=kind, value=value))
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # ints beyond the float range
        finite = False
    if not finite:
        raise InvalidArgumentError(ErrorMessages.NOT_A_NUMBER.format(kind=kind, value=value))
    return value


def require_between(kind: str, value: float, low: float, high: float) -> None:
    """Check low <= value <= high."""
    if not low <= value <= high:
        raise InvalidArgumentError(
            ErrorMessages.OUT_OF_RANGE.format(kind=kind, low=low, high=high, value=value)
        )


def require_ticks_per_beat(value: object) -> int:
    """Return value if it is a positive integer resolution."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(ErrorMessages.TICKS_PER_BEAT.format(value=value))
    return value

"""
Mix primitives - Volume and Pan.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_music_project.constants import PAN_LEFT, PAN_RIGHT, VOLUME_MAX, VOLUME_MIN
from chuk_music_project.core.validation import require_between, require_real


@dataclass(frozen=True)
class Volume:
    """Linear gain from 0 (silence) to 1 (full level)."""

    value: float

    def __post_init__(self) -> None:
        require_real("Volume", self.value)
        require_between("Volume", self.value, VOLUME_MIN, VOLUME_MAX)


@dataclass(frozen=True)
class Pan:
    """
    Stereo position.

    -1 is full left, 0 is center, 1 is full right.
    """

    value: float

    def __post_init__(self) -> None:
        require_real("Pan", self.value)
        require_between("Pan", self.value, PAN_LEFT, PAN_RIGHT)

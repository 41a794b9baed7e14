"""
Pitch primitives - Pitch and Velocity.

Both are 7-bit MIDI data values (0-127).
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_music_project.constants import MIDI_MAX, MIDI_MIN
from chuk_music_project.core.validation import require_between, require_int


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A MIDI note number.

    60 is middle C. Immutable and hashable.
    """

    value: int

    def __post_init__(self) -> None:
        require_int("Pitch", self.value)
        require_between("Pitch", self.value, MIDI_MIN, MIDI_MAX)


@dataclass(frozen=True, order=True)
class Velocity:
    """
    Note-on intensity.

    0 typically means silence and 127 maximum intensity.
    """

    value: int

    def __post_init__(self) -> None:
        require_int("Velocity", self.value)
        require_between("Velocity", self.value, MIDI_MIN, MIDI_MAX)

"""
Time primitives - Ticks and Seconds.

Ticks are the canonical unit for every event position and duration.
Seconds exist for real-time conversions only:

    seconds = (ticks / ticks_per_beat) * (60 / bpm)

and the inverse rounds to the nearest tick (halves round up).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from chuk_music_project.constants import DEFAULT_TEMPO_BPM, TICKS_PER_BEAT, ErrorMessages
from chuk_music_project.core.rhythm import Tempo
from chuk_music_project.core.validation import require_int, require_real, require_ticks_per_beat
from chuk_music_project.errors import InvalidArgumentError


@dataclass(frozen=True, order=True)
class Ticks:
    """
    A position or duration in MIDI ticks.

    Non-negative integer. Immutable, hashable and ordered.
    """

    value: int

    def __post_init__(self) -> None:
        require_int("Ticks", self.value)
        if self.value < 0:
            raise InvalidArgumentError(
                ErrorMessages.NEGATIVE.format(kind="Ticks", value=self.value)
            )

    def to_seconds(
        self,
        ticks_per_beat: int = TICKS_PER_BEAT,
        tempo: Tempo | float = DEFAULT_TEMPO_BPM,
    ) -> Seconds:
        """
        Convert to seconds.

        Args:
            ticks_per_beat: Resolution of a quarter note (default 480)
            tempo: Tempo or raw BPM

        Returns:
            Seconds at the given tempo
        """
        require_ticks_per_beat(ticks_per_beat)
        bpm = Tempo.coerce(tempo).value
        try:
            seconds = (self.value / ticks_per_beat) * (60 / bpm)
        except OverflowError:
            seconds = math.inf
        if not math.isfinite(seconds):
            raise InvalidArgumentError(
                ErrorMessages.CONVERSION_OVERFLOW.format(kind="Ticks", value=self.value)
            )
        return Seconds(seconds)

    def __add__(self, other: Ticks) -> Ticks:
        if not isinstance(other, Ticks):
            return NotImplemented
        return Ticks(self.value + other.value)

    def __sub__(self, other: Ticks) -> Ticks:
        if not isinstance(other, Ticks):
            return NotImplemented
        # Negative results are rejected by the constructor
        return Ticks(self.value - other.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class Seconds:
    """A position or duration in seconds (finite, non-negative)."""

    value: float

    def __post_init__(self) -> None:
        require_real("Seconds", self.value)
        if self.value < 0:
            raise InvalidArgumentError(
                ErrorMessages.NEGATIVE.format(kind="Seconds", value=self.value)
            )

    def to_ticks(
        self,
        ticks_per_beat: int = TICKS_PER_BEAT,
        tempo: Tempo | float = DEFAULT_TEMPO_BPM,
    ) -> Ticks:
        """
        Convert to ticks, rounded to the nearest tick.

        Args:
            ticks_per_beat: Resolution of a quarter note (default 480)
            tempo: Tempo or raw BPM

        Returns:
            Ticks at the given tempo
        """
        require_ticks_per_beat(ticks_per_beat)
        bpm = Tempo.coerce(tempo).value
        try:
            ticks = (self.value * bpm / 60) * ticks_per_beat
        except OverflowError:
            ticks = math.inf
        if not math.isfinite(ticks):
            raise InvalidArgumentError(
                ErrorMessages.CONVERSION_OVERFLOW.format(kind="Seconds", value=self.value)
            )
        return Ticks(math.floor(ticks + 0.5))

    def __add__(self, other: Seconds) -> Seconds:
        if not isinstance(other, Seconds):
            return NotImplemented
        return Seconds(self.value + other.value)

    def __sub__(self, other: Seconds) -> Seconds:
        if not isinstance(other, Seconds):
            return NotImplemented
        return Seconds(self.value - other.value)

    def __float__(self) -> float:
        return float(self.value)

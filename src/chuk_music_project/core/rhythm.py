"""
Rhythm primitives - Tempo and TimeSignature.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar

from chuk_music_project.constants import ErrorMessages
from chuk_music_project.core.validation import require_real, require_ticks_per_beat
from chuk_music_project.errors import InvalidArgumentError


@dataclass(frozen=True, order=True)
class Tempo:
    """
    Tempo in beats (quarter notes) per minute.

    Must be finite and strictly positive.
    """

    value: float

    def __post_init__(self) -> None:
        require_real("Tempo", self.value)
        if self.value <= 0:
            raise InvalidArgumentError(
                ErrorMessages.NOT_POSITIVE.format(kind="Tempo", value=self.value)
            )

    @property
    def bpm(self) -> float:
        return self.value

    @classmethod
    def coerce(cls, tempo: Tempo | float) -> Tempo:
        """Accept a Tempo or a raw BPM number (validated by wrapping it)."""
        if isinstance(tempo, Tempo):
            return tempo
        return cls(tempo)


@dataclass(frozen=True)
class TimeSignature:
    """
    A time signature: beats per bar over the note value of one beat.

    Examples:
        TimeSignature(4, 4) = 4/4
        TimeSignature(6, 8) = 6/8
    """

    numerator: int
    denominator: int

    # Common time signatures (defined after class)
    COMMON_TIME: ClassVar[TimeSignature]  # 4/4
    CUT_TIME: ClassVar[TimeSignature]  # 2/2
    WALTZ: ClassVar[TimeSignature]  # 3/4
    SIX_EIGHT: ClassVar[TimeSignature]  # 6/8

    def __post_init__(self) -> None:
        num = self.numerator
        if isinstance(num, bool) or not isinstance(num, int) or num <= 0:
            raise InvalidArgumentError(ErrorMessages.NUMERATOR.format(value=num))

        # Denominator must be a power of 2 (1, 2, 4, 8, 16, ...)
        den = self.denominator
        if isinstance(den, bool) or not isinstance(den, int) or den <= 0 or den & (den - 1):
            raise InvalidArgumentError(ErrorMessages.DENOMINATOR.format(value=den))

    @property
    def beat_fraction(self) -> Fraction:
        """Length of one beat in quarter notes (6/8 -> 1/2)."""
        return Fraction(4, self.denominator)

    def bar_ticks(self, ticks_per_beat: int) -> int:
        """
        Get the number of ticks in one bar.

        Args:
            ticks_per_beat: Resolution of a quarter note

        Returns:
            Bar length in ticks

        Raises:
            InvalidArgumentError: If the bar isn't a whole number of ticks
                (e.g. 1/8 at 1 tick per beat)
        """
        require_ticks_per_beat(ticks_per_beat)
        length = self.numerator * self.beat_fraction * ticks_per_beat
        if length.denominator != 1:
            raise InvalidArgumentError(
                ErrorMessages.BAR_TICKS.format(signature=self, ticks_per_beat=ticks_per_beat)
            )
        return int(length)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @classmethod
    def parse(cls, notation: str) -> TimeSignature:
        """
        Parse a time signature from notation like '4/4', '3/4', '6/8'.

        Args:
            notation: Time signature string

        Returns:
            TimeSignature object
        """
        parts = notation.split("/") if isinstance(notation, str) else []
        if len(parts) != 2:
            raise InvalidArgumentError(ErrorMessages.TIME_SIGNATURE_FORMAT.format(value=notation))

        try:
            numerator = int(parts[0])
            denominator = int(parts[1])
        except ValueError as exc:
            raise InvalidArgumentError(
                ErrorMessages.TIME_SIGNATURE_FORMAT.format(value=notation)
            ) from exc

        return cls(numerator, denominator)


# Define common time signatures
TimeSignature.COMMON_TIME = TimeSignature(4, 4)
TimeSignature.CUT_TIME = TimeSignature(2, 2)
TimeSignature.WALTZ = TimeSignature(3, 4)
TimeSignature.SIX_EIGHT = TimeSignature(6, 8)

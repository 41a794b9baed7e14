"""
Timing context - resolution, tempo and meter for tick conversions.

The project model itself is tick-based and tempo-free. A playback or export
collaborator pairs a project with a TimingContext to turn ticks into
seconds or bars into tick windows for get_events_in_range.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from chuk_music_project.constants import DEFAULT_TEMPO_BPM, TICKS_PER_BEAT, ErrorMessages
from chuk_music_project.core.rhythm import Tempo, TimeSignature
from chuk_music_project.core.time import Seconds, Ticks
from chuk_music_project.core.validation import require_int
from chuk_music_project.errors import InvalidArgumentError


class TimingContext(BaseModel):
    """
    Global timing for converting between ticks, seconds and bars.

    Raw values are accepted and wrapped: tempo as BPM, time signature as
    notation like '6/8'. A bar must span a whole number of ticks at the
    chosen resolution. Construction and model_validate both raise
    InvalidArgumentError for invalid settings.
    """

    ticks_per_beat: int = Field(TICKS_PER_BEAT, gt=0, description="Ticks per quarter note")
    tempo: Tempo = Field(default_factory=lambda: Tempo(DEFAULT_TEMPO_BPM), description="Tempo")
    time_signature: TimeSignature = Field(
        default_factory=lambda: TimeSignature.COMMON_TIME, description="Time signature"
    )

    model_config = {"frozen": True}

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(ErrorMessages.TIMING_CONTEXT.format(error=exc)) from exc

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> TimingContext:
        """Validate a mapping or instance, raising InvalidArgumentError on failure."""
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as exc:
            # Mappings are validated through __init__, whose error is already converted
            for error in exc.errors():
                inner = error.get("ctx", {}).get("error")
                if isinstance(inner, InvalidArgumentError):
                    raise InvalidArgumentError(str(inner)) from exc
            raise InvalidArgumentError(ErrorMessages.TIMING_CONTEXT.format(error=exc)) from exc

    @field_validator("ticks_per_beat", mode="before")
    @classmethod
    def validate_ticks_per_beat(cls, v: Any) -> int:
        """Reject bools and floats that pydantic would otherwise coerce."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(ErrorMessages.TICKS_PER_BEAT.format(value=v))
        return v

    @field_validator("tempo", mode="plain")
    @classmethod
    def validate_tempo(cls, v: Any) -> Tempo:
        """Wrap raw BPM values."""
        return Tempo.coerce(v)

    @field_validator("time_signature", mode="plain")
    @classmethod
    def validate_time_signature(cls, v: Any) -> TimeSignature:
        """Parse notation strings."""
        if isinstance(v, str):
            return TimeSignature.parse(v)
        if not isinstance(v, TimeSignature):
            raise ValueError(f"Expected a TimeSignature or notation string, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_bar_length(self) -> TimingContext:
        """Require a whole number of ticks per bar."""
        self.time_signature.bar_ticks(self.ticks_per_beat)
        return self

    @property
    def bar_ticks(self) -> int:
        """Length of one bar in ticks."""
        return self.time_signature.bar_ticks(self.ticks_per_beat)

    def ticks_to_seconds(self, ticks: Ticks | int) -> Seconds:
        """Convert a tick position or duration to seconds."""
        if not isinstance(ticks, Ticks):
            ticks = Ticks(ticks)
        return ticks.to_seconds(self.ticks_per_beat, self.tempo)

    def seconds_to_ticks(self, seconds: Seconds | float) -> Ticks:
        """Convert seconds to the nearest tick."""
        if not isinstance(seconds, Seconds):
            seconds = Seconds(seconds)
        return seconds.to_ticks(self.ticks_per_beat, self.tempo)

    def bar_range(self, bar: int) -> tuple[int, int]:
        """
        Get the inclusive tick window covered by a bar.

        Args:
            bar: 0-indexed bar number

        Returns:
            (start_ticks, end_ticks), ready for get_events_in_range
        """
        require_int("Bar", bar)
        if bar < 0:
            raise InvalidArgumentError(ErrorMessages.NEGATIVE.format(kind="Bar", value=bar))
        start = bar * self.bar_ticks
        return start, start + self.bar_ticks - 1

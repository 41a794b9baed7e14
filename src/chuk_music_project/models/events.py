"""
Event model - timestamped occurrences inside a track.

Events are a tagged union: every variant is a frozen dataclass carrying an
``id``, a ``time`` (Ticks) and a ``kind`` discriminant. Code that needs
variant-specific behavior dispatches on ``kind``. A new event type is a new
variant added to ``Event`` and ``EVENT_TYPES``, not a subclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from chuk_music_project.constants import ErrorMessages
from chuk_music_project.core.pitch import Pitch, Velocity
from chuk_music_project.core.time import Ticks
from chuk_music_project.errors import InvalidArgumentError
from chuk_music_project.ids import IdGenerator, generate_id


class EventKind(str, Enum):
    """Discriminant for the event variants."""

    NOTE = "note"


def _check_header(event_id: object, time: object) -> None:
    """Validate the fields shared by every variant."""
    if not isinstance(event_id, str) or not event_id:
        raise InvalidArgumentError(ErrorMessages.EVENT_ID.format(value=event_id))
    if not isinstance(time, Ticks):
        raise InvalidArgumentError(ErrorMessages.EVENT_TIME.format(value=time))


@dataclass(frozen=True)
class Note:
    """
    A note event.

    Starts at ``time`` and lasts ``duration`` ticks (strictly positive).

    Example:
        note = Note.create(Ticks(480), Pitch(60), Velocity(100), Ticks(240))
    """

    id: str
    time: Ticks
    pitch: Pitch
    velocity: Velocity
    duration: Ticks
    kind: EventKind = field(default=EventKind.NOTE, init=False)

    def __post_init__(self) -> None:
        _check_header(self.id, self.time)

        if not isinstance(self.pitch, Pitch):
            raise InvalidArgumentError(ErrorMessages.NOTE_PITCH.format(value=self.pitch))

        if not isinstance(self.velocity, Velocity):
            raise InvalidArgumentError(ErrorMessages.NOTE_VELOCITY.format(value=self.velocity))

        if not isinstance(self.duration, Ticks):
            raise InvalidArgumentError(ErrorMessages.NOTE_DURATION.format(value=self.duration))
        if self.duration.value <= 0:
            raise InvalidArgumentError(
                ErrorMessages.NOTE_DURATION_POSITIVE.format(value=self.duration.value)
            )

    @classmethod
    def create(
        cls,
        time: Ticks,
        pitch: Pitch,
        velocity: Velocity,
        duration: Ticks,
        *,
        id_generator: IdGenerator = generate_id,
    ) -> Note:
        """
        Create a note with a freshly generated id.

        Args:
            time: Start position
            pitch: MIDI note number
            velocity: Note-on velocity
            duration: Length in ticks (must be positive)
            id_generator: Source of the new id

        Returns:
            The new Note
        """
        return cls(id_generator(), time, pitch, velocity, duration)

    @property
    def end(self) -> Ticks:
        """Tick at which the note stops sounding."""
        return self.time + self.duration


# Union of all event variants
Event: TypeAlias = Note

EVENT_TYPES: tuple[type, ...] = (Note,)


def is_event(obj: object) -> bool:
    """Return True if obj is an instance of any event variant."""
    return isinstance(obj, EVENT_TYPES)


def event_end(event: Event) -> Ticks:
    """
    Get the tick at which an event finishes.

    Notes end after their duration; variants without a duration end where
    they start.
    """
    if event.kind is EventKind.NOTE:
        return event.end
    return event.time

"""
Track model - an ordered collection of events for one instrument/channel.

Tracks are immutable: add_event/remove_event return new Track instances and
leave the receiver untouched. Events are always kept sorted by time; the
sort is stable, so co-timed events keep the order they were added in.

Outside code receives tracks through the read-only TrackView protocol.
Updates go through Project, which rebuilds itself around the new track.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Protocol

from pydantic import BaseModel, Field, ValidationError

from chuk_music_project.constants import ErrorMessages
from chuk_music_project.core.time import Ticks
from chuk_music_project.errors import InvalidArgumentError
from chuk_music_project.ids import IdGenerator, generate_id
from chuk_music_project.models.events import Event, event_end, is_event

logger = logging.getLogger(__name__)


class TrackProps(BaseModel):
    """Properties accepted when creating a track."""

    name: str = Field("", description="Track name")

    model_config = {"frozen": True, "extra": "forbid"}


def coerce_track_props(props: TrackProps | Mapping[str, Any] | None) -> TrackProps:
    """Accept TrackProps, a plain mapping, or None (all defaults)."""
    if props is None:
        return TrackProps()
    if isinstance(props, TrackProps):
        return props
    if isinstance(props, Mapping):
        try:
            return TrackProps.model_validate(dict(props))
        except ValidationError as exc:
            raise InvalidArgumentError(ErrorMessages.TRACK_PROPS.format(error=exc)) from exc
    raise InvalidArgumentError(ErrorMessages.TRACK_PROPS.format(error=f"got {props!r}"))


def _range_bound(value: object) -> float | int:
    if isinstance(value, Ticks):
        return value.value
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise InvalidArgumentError(ErrorMessages.RANGE_BOUND.format(value=value))
    return value


def validate_range(start_ticks: object, end_ticks: object) -> tuple[float | int, float | int]:
    """
    Check a tick window used by range queries.

    Bounds may be raw numbers or Ticks. Zero-width windows are valid.

    Raises:
        InvalidArgumentError: If start < 0 or end < start
    """
    start = _range_bound(start_ticks)
    end = _range_bound(end_ticks)
    if start < 0 or end < start:
        raise InvalidArgumentError(ErrorMessages.INVALID_RANGE.format(start=start, end=end))
    return start, end


def _time_value(event: Event) -> int:
    return event.time.value


class TrackView(Protocol):
    """Read-only projection of a track, as handed out by Project."""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    def get_events(self) -> tuple[Event, ...]: ...

    def get_events_in_range(
        self, start_ticks: int | Ticks, end_ticks: int | Ticks
    ) -> tuple[Event, ...]: ...

    def get_event(self, event_id: str) -> Event | None: ...

    def get_event_count(self) -> int: ...


@dataclass(frozen=True)
class Track:
    """
    A named, time-sorted sequence of events with unique ids.

    Construct directly with an explicit id when reconstructing a known
    track; use Track.create to get a generated id.
    """

    id: str
    name: str = ""
    events: tuple[Event, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise InvalidArgumentError(ErrorMessages.TRACK_ID.format(value=self.id))
        if not isinstance(self.name, str):
            raise InvalidArgumentError(ErrorMessages.TRACK_NAME.format(value=self.name))
        if not isinstance(self.events, Iterable):
            raise InvalidArgumentError(ErrorMessages.TRACK_EVENT.format(value=self.events))

        events = tuple(self.events)
        seen: set[str] = set()
        for index, event in enumerate(events):
            if not is_event(event):
                raise InvalidArgumentError(
                    ErrorMessages.TRACK_EVENT_AT.format(index=index, value=event)
                )
            if event.id in seen:
                raise InvalidArgumentError(ErrorMessages.DUPLICATE_EVENT.format(event_id=event.id))
            seen.add(event.id)

        # sorted() is stable: equal times keep their input order
        object.__setattr__(self, "events", tuple(sorted(events, key=_time_value)))

    @classmethod
    def create(
        cls,
        props: TrackProps | Mapping[str, Any] | None = None,
        events: Iterable[Event] = (),
        *,
        id_generator: IdGenerator = generate_id,
    ) -> Track:
        """
        Create a track with a generated id.

        Args:
            props: Optional TrackProps or mapping (e.g. {"name": "Piano"})
            events: Optional initial events
            id_generator: Source of the new id

        Returns:
            The new Track
        """
        track_props = coerce_track_props(props)
        return cls(id_generator(), track_props.name, tuple(events))

    def add_event(self, event: Event) -> Track:
        """
        Return a new track with the event added.

        The event sorts after any existing events at the same time.

        Raises:
            InvalidArgumentError: If event is not an Event or its id is taken
        """
        if not is_event(event):
            raise InvalidArgumentError(ErrorMessages.TRACK_EVENT.format(value=event))

        logger.debug(f"Track {self.id}: adding {event.kind.value} {event.id} at {event.time.value}")
        return Track(self.id, self.name, (*self.events, event))

    def remove_event(self, event_id: str) -> Track:
        """
        Return a new track without the event with this id.

        Removing an id that isn't present is a no-op: the result is equal to
        this track.
        """
        remaining = tuple(e for e in self.events if e.id != event_id)
        if len(remaining) == len(self.events):
            logger.debug(f"Track {self.id}: no event {event_id} to remove")
        return Track(self.id, self.name, remaining)

    def get_events_in_range(
        self, start_ticks: int | Ticks, end_ticks: int | Ticks
    ) -> tuple[Event, ...]:
        """
        Get events with start_ticks <= time <= end_ticks, in time order.

        Args:
            start_ticks: Window start (inclusive)
            end_ticks: Window end (inclusive)

        Returns:
            Matching events, ascending by time

        Raises:
            InvalidArgumentError: If start_ticks < 0 or end_ticks < start_ticks
        """
        start, end = validate_range(start_ticks, end_ticks)
        lo = bisect_left(self.events, start, key=_time_value)
        hi = bisect_right(self.events, end, key=_time_value)
        return self.events[lo:hi]

    def get_events(self) -> tuple[Event, ...]:
        """Get all events, ascending by time."""
        return self.events

    def get_event(self, event_id: str) -> Event | None:
        """Get an event by id, or None if not found."""
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    def get_event_count(self) -> int:
        """Get the number of events in this track."""
        return len(self.events)

    def end_ticks(self) -> Ticks:
        """Tick at which the last event finishes (0 for an empty track)."""
        return max((event_end(e) for e in self.events), default=Ticks(0))

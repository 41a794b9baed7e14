"""
Project model - the aggregate root.

A Project indexes its tracks by id (insertion order preserved) and is the
only entry point for changing a track's contents. Every update returns a new
Project built from a fresh index that shares all unchanged tracks by
reference and replaces only the affected entry. Earlier Project values stay
valid, which gives callers cheap snapshots for undo/redo or comparison.

Error contract:
- Operations addressed to a track that must exist (add_note_event,
  remove_event) raise InvalidArgumentError for an unknown track id.
- Removals of absent tracks/events are no-ops and never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from itertools import chain
from types import MappingProxyType
from typing import Any

from chuk_music_project.constants import ErrorMessages
from chuk_music_project.core.pitch import Pitch, Velocity
from chuk_music_project.core.time import Ticks
from chuk_music_project.errors import InvalidArgumentError
from chuk_music_project.ids import IdGenerator, generate_id
from chuk_music_project.models.events import Event, Note
from chuk_music_project.models.track import Track, TrackProps, TrackView, validate_range

logger = logging.getLogger(__name__)


def _time_value(event: Event) -> int:
    return event.time.value


class Project:
    """
    A composition: an ordered, id-indexed collection of tracks.

    Example:
        project = Project()
        project, piano = project.add_track({"name": "Piano"})
        project, note = project.add_note_event(
            piano.id, Ticks(480), Pitch(60), Velocity(100), Ticks(240)
        )
        project.get_events()  # (note,)
    """

    __slots__ = ("_tracks", "_id_generator")

    _tracks: Mapping[str, Track]
    _id_generator: IdGenerator

    def __init__(
        self,
        tracks: Iterable[Track] = (),
        *,
        id_generator: IdGenerator = generate_id,
    ) -> None:
        """
        Create a project.

        Args:
            tracks: Initial tracks (ids must be unique)
            id_generator: Id source for tracks and events created through
                this project and every project derived from it

        Raises:
            InvalidArgumentError: If an element is not a Track or ids repeat
        """
        index: dict[str, Track] = {}
        for i, track in enumerate(tracks):
            if not isinstance(track, Track):
                raise InvalidArgumentError(
                    ErrorMessages.PROJECT_TRACK_AT.format(index=i, value=track)
                )
            if track.id in index:
                raise InvalidArgumentError(ErrorMessages.DUPLICATE_TRACK.format(track_id=track.id))
            index[track.id] = track

        object.__setattr__(self, "_tracks", MappingProxyType(index))
        object.__setattr__(self, "_id_generator", id_generator)

    @classmethod
    def _from_index(cls, index: dict[str, Track], id_generator: IdGenerator) -> Project:
        """Wrap an already-valid index without re-checking it."""
        project = cls.__new__(cls)
        object.__setattr__(project, "_tracks", MappingProxyType(index))
        object.__setattr__(project, "_id_generator", id_generator)
        return project

    def _replace_track(self, track: Track) -> Project:
        """New project with one entry swapped; every other track is shared."""
        index = dict(self._tracks)
        index[track.id] = track  # existing key keeps its position
        return Project._from_index(index, self._id_generator)

    def _require_track(self, track_id: str, action: str) -> Track:
        track = self._tracks.get(track_id)
        if track is None:
            raise InvalidArgumentError(
                f"Cannot {action}: " + ErrorMessages.TRACK_NOT_FOUND.format(track_id=track_id)
            )
        return track

    # Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Project is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Project is immutable; cannot delete {name!r}")

    # Track operations

    @property
    def tracks(self) -> Mapping[str, TrackView]:
        """Read-only mapping of track id to track, in insertion order."""
        return self._tracks

    def add_track(
        self, props: TrackProps | Mapping[str, Any] | None = None
    ) -> tuple[Project, TrackView]:
        """
        Create a track and add it to the project.

        Args:
            props: Optional TrackProps or mapping (e.g. {"name": "Piano"})

        Returns:
            (new project, created track) so the caller can keep the track id
        """
        track = Track.create(props, id_generator=self._id_generator)
        if track.id in self._tracks:
            raise InvalidArgumentError(ErrorMessages.DUPLICATE_TRACK.format(track_id=track.id))

        index = dict(self._tracks)
        index[track.id] = track
        logger.debug(f"Added track {track.id} ({track.name!r})")
        return Project._from_index(index, self._id_generator), track

    def remove_track(self, track_id: str) -> Project:
        """
        Return a new project without the track.

        An unknown track id is a no-op: the result equals this project.
        """
        if track_id not in self._tracks:
            logger.debug(f"No track {track_id} to remove")
        index = {tid: track for tid, track in self._tracks.items() if tid != track_id}
        return Project._from_index(index, self._id_generator)

    def get_track(self, track_id: str) -> TrackView | None:
        """Get a track by id, or None if not found."""
        return self._tracks.get(track_id)

    def get_tracks(self) -> tuple[TrackView, ...]:
        """Get all tracks in insertion order."""
        return tuple(self._tracks.values())

    def get_track_count(self) -> int:
        """Get the number of tracks."""
        return len(self._tracks)

    # Event operations

    def add_note_event(
        self,
        track_id: str,
        time: Ticks,
        pitch: Pitch,
        velocity: Velocity,
        duration: Ticks,
    ) -> tuple[Project, Note]:
        """
        Create a note and add it to a track.

        Args:
            track_id: Target track (must exist)
            time: Note start
            pitch: MIDI note number
            velocity: Note-on velocity
            duration: Length in ticks (must be positive)

        Returns:
            (new project, created note)

        Raises:
            InvalidArgumentError: If the track doesn't exist or a value is invalid
        """
        self._require_track(track_id, "add event to track")
        note = Note.create(time, pitch, velocity, duration, id_generator=self._id_generator)
        return self._add_event(track_id, note), note

    def _add_event(self, track_id: str, event: Event) -> Project:
        track = self._require_track(track_id, "add event to track")
        return self._replace_track(track.add_event(event))

    def remove_event(self, track_id: str, event_id: str) -> Project:
        """
        Return a new project with the event removed from the track.

        An unknown event id is a no-op; an unknown track id is an error.

        Raises:
            InvalidArgumentError: If the track doesn't exist
        """
        track = self._require_track(track_id, "remove event from track")
        logger.debug(f"Removing event {event_id} from track {track_id}")
        return self._replace_track(track.remove_event(event_id))

    def get_events_in_range(
        self, start_ticks: int | Ticks, end_ticks: int | Ticks
    ) -> tuple[Event, ...]:
        """
        Get events from every track with start_ticks <= time <= end_ticks.

        Results are sorted by time. Ties keep track order, then the order
        within each track.

        Raises:
            InvalidArgumentError: If start_ticks < 0 or end_ticks < start_ticks
        """
        start, end = validate_range(start_ticks, end_ticks)
        per_track = (track.get_events_in_range(start, end) for track in self._tracks.values())
        return tuple(sorted(chain.from_iterable(per_track), key=_time_value))

    def get_events(self) -> tuple[Event, ...]:
        """Get the events of every track, sorted by time (same tie rule)."""
        per_track = (track.get_events() for track in self._tracks.values())
        return tuple(sorted(chain.from_iterable(per_track), key=_time_value))

    def end_ticks(self) -> Ticks:
        """Tick at which the last event of any track finishes."""
        return max((track.end_ticks() for track in self._tracks.values()), default=Ticks(0))

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return tuple(self._tracks.values()) == tuple(other._tracks.values())

    def __hash__(self) -> int:
        return hash(tuple(self._tracks.values()))

    def __repr__(self) -> str:
        return f"Project(tracks={list(self._tracks.values())!r})"

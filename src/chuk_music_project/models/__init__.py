"""
The persistent project model.

This module provides:
- Project: Aggregate root indexing tracks by id
- Track / TrackView: Time-sorted event collection and its read-only view
- TrackProps: Track creation properties
- Note / Event / EventKind: Event variants and their discriminant
- TimingContext: Tick/second/bar conversions for collaborators
"""

from chuk_music_project.models.events import (
    EVENT_TYPES,
    Event,
    EventKind,
    Note,
    event_end,
    is_event,
)
from chuk_music_project.models.project import Project
from chuk_music_project.models.timing import TimingContext
from chuk_music_project.models.track import Track, TrackProps, TrackView

__all__ = [
    "EVENT_TYPES",
    "Event",
    "EventKind",
    "Note",
    "Project",
    "TimingContext",
    "Track",
    "TrackProps",
    "TrackView",
    "event_end",
    "is_event",
]

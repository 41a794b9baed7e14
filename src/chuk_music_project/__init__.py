"""
CHUK Music Project - a persistent, immutable composition model.

A Project owns named Tracks, each holding time-sorted Events (Notes).
Every update returns a new Project; earlier values remain valid snapshots.
"""

from chuk_music_project.core import (
    Pan,
    Pitch,
    Seconds,
    Tempo,
    Ticks,
    TimeSignature,
    Velocity,
    Volume,
)
from chuk_music_project.errors import InvalidArgumentError, MusicProjectError
from chuk_music_project.ids import IdGenerator, generate_id
from chuk_music_project.models import (
    Event,
    EventKind,
    Note,
    Project,
    TimingContext,
    Track,
    TrackProps,
    TrackView,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "MusicProjectError",
    "InvalidArgumentError",
    # Ids
    "IdGenerator",
    "generate_id",
    # Values
    "Ticks",
    "Seconds",
    "Pitch",
    "Velocity",
    "Volume",
    "Pan",
    "Tempo",
    "TimeSignature",
    # Model
    "Event",
    "EventKind",
    "Note",
    "Track",
    "TrackProps",
    "TrackView",
    "Project",
    "TimingContext",
]

"""
Value objects - the validated scalars everything else is built from.

- Ticks: canonical integer time unit
- Seconds: real-time unit used for conversions
- Pitch, Velocity: 7-bit MIDI data values
- Volume, Pan: mix values
- Tempo: beats per minute
- TimeSignature: beats per bar over beat unit

Each type validates on construction and is immutable afterwards.
"""

from chuk_music_project.core.mix import Pan, Volume
from chuk_music_project.core.pitch import Pitch, Velocity
from chuk_music_project.core.rhythm import Tempo, TimeSignature
from chuk_music_project.core.time import Seconds, Ticks

__all__ = [
    # Time
    "Ticks",
    "Seconds",
    # Pitch
    "Pitch",
    "Velocity",
    # Mix
    "Volume",
    "Pan",
    # Rhythm
    "Tempo",
    "TimeSignature",
]

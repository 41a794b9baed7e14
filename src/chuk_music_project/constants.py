"""
Constants for the project model.

No magic numbers - ranges and defaults live here.
"""

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_TEMPO_BPM = 120

# MIDI 7-bit data range (pitch, velocity)
MIDI_MIN = 0
MIDI_MAX = 127

VOLUME_MIN = 0.0
VOLUME_MAX = 1.0

PAN_LEFT = -1.0
PAN_RIGHT = 1.0


class ErrorMessages:
    """Standardized error messages."""

    NOT_AN_INTEGER = "{kind} value must be an integer. Received: {value!r}"
    NOT_A_NUMBER = "{kind} value must be a finite number. Received: {value!r}"
    NEGATIVE = "{kind} value cannot be negative. Received: {value!r}"
    OUT_OF_RANGE = "{kind} value must be between {low} and {high}. Received: {value!r}"
    NOT_POSITIVE = "{kind} value must be positive. Received: {value!r}"
    NUMERATOR = "Time signature numerator must be a positive integer. Received: {value!r}"
    DENOMINATOR = (
        "Time signature denominator must be a positive power of 2. Received: {value!r}"
    )
    TIME_SIGNATURE_FORMAT = "Invalid time signature format: {value!r}"
    TICKS_PER_BEAT = "Ticks per beat must be a positive integer. Received: {value!r}"
    BAR_TICKS = (
        "Time signature {signature} does not fill a whole number of ticks "
        "at {ticks_per_beat} ticks per beat"
    )
    CONVERSION_OVERFLOW = "{kind} value {value!r} is too large to convert"

    EVENT_ID = "Event id must be a non-empty string. Received: {value!r}"
    EVENT_TIME = "Event time must be a Ticks instance. Received: {value!r}"
    NOTE_PITCH = "Note pitch must be a Pitch instance. Received: {value!r}"
    NOTE_VELOCITY = "Note velocity must be a Velocity instance. Received: {value!r}"
    NOTE_DURATION = "Note duration must be a Ticks instance. Received: {value!r}"
    NOTE_DURATION_POSITIVE = "Note duration must be positive. Received: {value!r}"

    TRACK_ID = "Track id must be a non-empty string. Received: {value!r}"
    TRACK_NAME = "Track name must be a string. Received: {value!r}"
    TRACK_EVENT = "Track event must be an Event. Received: {value!r}"
    TRACK_EVENT_AT = "All track events must be Events. Invalid event at index {index}: {value!r}"
    DUPLICATE_EVENT = "Duplicate event id in track: {event_id!r}"
    TRACK_PROPS = "Invalid track properties: {error}"

    PROJECT_TRACK_AT = (
        "All project tracks must be Track instances. Invalid track at index {index}: {value!r}"
    )
    DUPLICATE_TRACK = "Duplicate track id in project: {track_id!r}"
    TRACK_NOT_FOUND = "Track with ID {track_id!r} not found"

    RANGE_BOUND = "Time range bounds must be numbers or Ticks. Received: {value!r}"
    INVALID_RANGE = "Invalid time range: start={start}, end={end}"
    TIMING_CONTEXT = "Invalid timing context: {error}"

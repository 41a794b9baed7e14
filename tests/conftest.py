"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable
from itertools import count

import pytest

from chuk_music_project import Note, Pitch, Ticks, Track, Velocity


class SequentialIds:
    """Deterministic id generator: prefix-1, prefix-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self._counter = count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


@pytest.fixture
def ids() -> SequentialIds:
    """A fresh deterministic id generator."""
    return SequentialIds()


@pytest.fixture
def make_note(ids: SequentialIds) -> Callable[..., Note]:
    """Factory for notes at a given tick."""

    def _make(time: int, pitch: int = 60, velocity: int = 100, duration: int = 240) -> Note:
        return Note.create(
            Ticks(time), Pitch(pitch), Velocity(velocity), Ticks(duration), id_generator=ids
        )

    return _make


@pytest.fixture
def make_track(ids: SequentialIds, make_note: Callable[..., Note]) -> Callable[..., Track]:
    """Factory for tracks holding one note per given tick."""

    def _make(note_times: list[int] | None = None, name: str = "") -> Track:
        notes = [make_note(t) for t in note_times or []]
        return Track.create({"name": name}, notes, id_generator=ids)

    return _make

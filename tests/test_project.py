"""
Tests for the Project aggregate root.

Tests cover:
- Construction and track indexing
- add_track/remove_track
- add_note_event/remove_event and the error contract
- Structural sharing and snapshot immutability
- Cross-track event queries
"""

import pytest

from chuk_music_project import (
    InvalidArgumentError,
    Pitch,
    Project,
    Ticks,
    Track,
    TrackProps,
    Velocity,
)


def add_note(project: Project, track_id: str, time: int, pitch: int = 60):
    return project.add_note_event(track_id, Ticks(time), Pitch(pitch), Velocity(100), Ticks(240))


def times(events) -> list[int]:
    return [e.time.value for e in events]


class TestConstruction:
    """Tests for Project construction."""

    def test_empty_project(self) -> None:
        """No tracks by default."""
        project = Project()
        assert project.get_tracks() == ()
        assert project.get_track_count() == 0
        assert project.get_events() == ()

    def test_with_tracks(self, make_track) -> None:
        """Tracks are indexed and keep their order."""
        track1 = make_track([480])
        track2 = make_track([960])
        project = Project([track1, track2])
        assert project.get_track_count() == 2
        assert project.get_tracks()[0] is track1
        assert project.get_tracks()[1] is track2
        assert list(project.tracks) == [track1.id, track2.id]

    def test_rejects_non_tracks(self, make_track) -> None:
        """Every element must be a Track."""
        with pytest.raises(InvalidArgumentError, match="index 1"):
            Project([make_track([480]), "not a track"])  # type: ignore[list-item]

    def test_rejects_duplicate_ids(self) -> None:
        """Track ids are unique within a project."""
        with pytest.raises(InvalidArgumentError, match="Duplicate track id"):
            Project([Track("same"), Track("same", "Other")])


class TestTracks:
    """Tests for add_track, remove_track and track lookups."""

    def test_add_track(self) -> None:
        """add_track returns the new project and the created track."""
        project = Project()
        updated, track = project.add_track({"name": "Test Track"})

        assert project.get_track_count() == 0
        assert updated.get_track_count() == 1
        assert updated.get_tracks()[0] is track
        assert track.name == "Test Track"
        assert track.get_events() == ()

    def test_add_track_defaults(self) -> None:
        """Without props the track has an empty name."""
        _, track = Project().add_track()
        assert track.name == ""

    def test_add_track_accepts_track_props(self) -> None:
        """TrackProps work as well as mappings."""
        _, track = Project().add_track(TrackProps(name="Drums"))
        assert track.name == "Drums"

    def test_add_track_uses_injected_generator(self, ids) -> None:
        """Track ids come from the project's id generator."""
        project = Project(id_generator=ids)
        project, first = project.add_track()
        project, second = project.add_track()
        assert (first.id, second.id) == ("id-1", "id-2")
        assert [t.id for t in project.get_tracks()] == ["id-1", "id-2"]

    def test_add_track_invalid_props(self) -> None:
        """Invalid props raise."""
        with pytest.raises(InvalidArgumentError):
            Project().add_track({"name": 42})

    def test_remove_track(self, make_track) -> None:
        """remove_track drops the track from the new project only."""
        track1 = make_track([480])
        track2 = make_track([960])
        project = Project([track1, track2])

        updated = project.remove_track(track1.id)

        assert project.get_track_count() == 2
        assert updated.get_tracks() == (track2,)
        assert updated.get_tracks()[0] is track2

    def test_remove_missing_track_is_noop(self, make_track) -> None:
        """Removing an unknown id returns an equal project without raising."""
        track = make_track([480])
        project = Project([track])

        updated = project.remove_track("non-existent-id")

        assert updated == project
        assert updated.get_track_count() == 1
        assert updated.get_tracks()[0] is track

    def test_get_track(self, make_track) -> None:
        """Look up by id."""
        track = make_track()
        project = Project([track])
        assert project.get_track(track.id) is track
        assert project.get_track("missing") is None


class TestNoteEvents:
    """Tests for add_note_event and remove_event."""

    def test_add_note_event(self) -> None:
        """The note is created, added and returned."""
        project, track = Project().add_track({"name": "Piano"})
        updated, note = add_note(project, track.id, 480)

        stored = updated.get_track(track.id)
        assert stored.get_events() == (note,)
        assert note.time == Ticks(480)
        assert project.get_track(track.id).get_events() == ()

    def test_add_note_event_ids(self, ids) -> None:
        """Event ids come from the same injected generator."""
        project, track = Project(id_generator=ids).add_track()
        project, note = add_note(project, track.id, 0)
        assert note.id == "id-2"

    def test_add_note_event_unknown_track(self) -> None:
        """An unknown track id is an error."""
        with pytest.raises(InvalidArgumentError, match="not found"):
            add_note(Project(), "missing", 480)

    def test_add_note_event_invalid_values(self) -> None:
        """Invalid value objects propagate from Note construction."""
        project, track = Project().add_track()
        with pytest.raises(InvalidArgumentError):
            project.add_note_event(
                track.id, 480, Pitch(60), Velocity(100), Ticks(240)  # type: ignore[arg-type]
            )
        with pytest.raises(InvalidArgumentError, match="positive"):
            project.add_note_event(track.id, Ticks(0), Pitch(60), Velocity(100), Ticks(0))

    def test_remove_event(self) -> None:
        """The event is removed from the owning track."""
        project, track = Project().add_track()
        project, note = add_note(project, track.id, 480)

        updated = project.remove_event(track.id, note.id)

        assert updated.get_track(track.id).get_events() == ()
        assert project.get_track(track.id).get_events() == (note,)

    def test_remove_missing_event_is_noop(self) -> None:
        """An unknown event id is not an error."""
        project, track = Project().add_track()
        project, _ = add_note(project, track.id, 480)

        updated = project.remove_event(track.id, "missing")

        assert updated == project

    def test_remove_event_unknown_track(self) -> None:
        """An unknown track id is an error, even for removals."""
        with pytest.raises(InvalidArgumentError, match="not found"):
            Project().remove_event("missing", "event")


class TestSnapshots:
    """Tests for immutability and structural sharing."""

    def test_unchanged_tracks_are_shared(self, make_track) -> None:
        """Updating one track reuses every other track by reference."""
        piano = make_track([0], name="Piano")
        bass = make_track([0], name="Bass")
        project = Project([piano, bass])

        updated, _ = add_note(project, piano.id, 480)

        assert updated.get_track(bass.id) is bass
        assert updated.get_track(piano.id) is not piano
        assert [t.id for t in updated.get_tracks()] == [piano.id, bass.id]

    def test_snapshots_stay_valid(self) -> None:
        """Every intermediate project keeps its own contents."""
        p0 = Project()
        p1, track = p0.add_track()
        p2, first = add_note(p1, track.id, 100)
        p3, second = add_note(p2, track.id, 50)
        p4 = p3.remove_event(track.id, first.id)

        assert p0.get_events() == ()
        assert p1.get_events() == ()
        assert p2.get_events() == (first,)
        assert p3.get_events() == (second, first)
        assert p4.get_events() == (second,)

    def test_project_is_immutable(self) -> None:
        """Attributes and the track mapping can't be modified."""
        project, track = Project().add_track()
        with pytest.raises(AttributeError):
            project.extra = 1  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            project.tracks[track.id] = track  # type: ignore[index]

    def test_equality_and_hash(self, make_track) -> None:
        """Projects compare by their tracks."""
        track = make_track([480])
        assert Project([track]) == Project([track])
        assert hash(Project([track])) == hash(Project([track]))
        assert Project([track]) != Project()


class TestEventQueries:
    """Tests for cross-track queries."""

    def test_range_across_tracks(self, make_track) -> None:
        """Results from every track are merged in time order."""
        project = Project([make_track([100, 300, 500]), make_track([200, 400])])
        assert times(project.get_events_in_range(150, 350)) == [200, 300]

    def test_range_is_inclusive(self, make_track) -> None:
        """Both bounds are inclusive."""
        project = Project([make_track([480, 960])])
        assert times(project.get_events_in_range(480, 960)) == [480, 960]
        assert project.get_events_in_range(500, 700) == ()

    @pytest.mark.parametrize(("start", "end"), [(-1, 10), (10, 5)])
    def test_invalid_range(self, start: int, end: int) -> None:
        """Invalid ranges raise even for an empty project."""
        with pytest.raises(InvalidArgumentError, match="Invalid time range"):
            Project().get_events_in_range(start, end)

    def test_get_events_sorted(self, make_track) -> None:
        """All events, globally sorted."""
        project = Project([make_track([500, 100]), make_track([300, 0])])
        assert times(project.get_events()) == [0, 100, 300, 500]

    def test_ties_follow_track_order(self, make_track) -> None:
        """Co-timed events keep track order, then per-track order."""
        first = make_track([100, 100])
        second = make_track([100])
        project = Project([first, second])
        expected = (*first.get_events(), *second.get_events())
        assert project.get_events() == expected
        assert project.get_events_in_range(100, 100) == expected

    def test_end_ticks(self, make_track) -> None:
        """Latest note end over all tracks."""
        project = Project([make_track([0]), make_track([960])])
        assert project.end_ticks() == Ticks(1200)
        assert Project().end_ticks() == Ticks(0)


class TestScenarios:
    """End-to-end usage."""

    def test_piano_scenario(self) -> None:
        """Add a track, add a note, query, remove the track."""
        project = Project()
        assert project.get_track_count() == 0

        project, piano = project.add_track({"name": "Piano"})
        assert project.get_track_count() == 1
        assert project.get_track(piano.id).name == "Piano"
        assert project.get_track(piano.id).get_events() == ()

        project, note = project.add_note_event(
            piano.id, Ticks(480), Pitch(60), Velocity(100), Ticks(240)
        )
        events = project.get_track(piano.id).get_events()
        assert len(events) == 1
        assert events[0].time.value == 480
        assert project.get_events() == (note,)

        project = project.remove_track(piano.id)
        assert project.get_track_count() == 0
        assert project.get_events() == ()

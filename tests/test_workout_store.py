from __future__ import annotations

from mapty.workout.model import Coordinates, Cycling, Running
from mapty.workout.store import WorkoutStore

COORDS = Coordinates(lat=48.85, lng=2.35)


def test_append_keeps_insertion_order() -> None:
    store = WorkoutStore()
    first = Running(5, 30, COORDS, cadence=180)
    second = Cycling(20, 60, COORDS, elevation_gain_m=300)

    store.append(first)
    store.append(second)

    assert store.all() == (first, second)
    assert len(store) == 2


def test_find_by_id_returns_same_record_or_none() -> None:
    store = WorkoutStore()
    run = Running(5, 30, COORDS, cadence=180)
    store.append(run)

    assert store.find_by_id(run.id) is run
    assert store.find_by_id("missing") is None


def test_replace_all_discards_previous_records() -> None:
    old = Running(5, 30, COORDS, cadence=180)
    store = WorkoutStore([old])
    fresh = [Cycling(10, 40, COORDS, elevation_gain_m=150), Running(3, 20, COORDS, cadence=170)]

    store.replace_all(fresh)

    assert list(store) == fresh
    assert store.find_by_id(old.id) is None


def test_snapshot_is_not_affected_by_later_appends() -> None:
    store = WorkoutStore()
    snapshot = store.all()

    store.append(Running(5, 30, COORDS, cadence=180))

    assert snapshot == ()
    assert len(store.all()) == 1

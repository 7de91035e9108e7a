from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from mapty.workout.model import Coordinates, Cycling, Running, Workout, describe

LONDON = Coordinates(lat=51.5, lng=-0.12)


@pytest.mark.parametrize(
    ("distance", "duration"),
    [(5.0, 30.0), (10.0, 42.5), (0.4, 2.0), (42.195, 180.0)],
)
def test_running_pace_is_duration_over_distance(distance: float, duration: float) -> None:
    run = Running(distance, duration, LONDON, cadence=178)

    assert run.pace == pytest.approx(duration / distance)
    assert run.type == "running"


@pytest.mark.parametrize(
    ("distance", "duration"),
    [(10.0, 40.0), (60.0, 120.0), (1.5, 3.0)],
)
def test_cycling_speed_is_km_per_hour(distance: float, duration: float) -> None:
    ride = Cycling(distance, duration, LONDON, elevation_gain_m=150)

    assert ride.speed == pytest.approx(distance / (duration / 60))
    assert ride.type == "cycling"


def test_workouts_are_immutable() -> None:
    run = Running(5, 30, LONDON, cadence=180)

    with pytest.raises(FrozenInstanceError):
        run.pace = 1.0  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        run.distance_km = 10  # type: ignore[misc]


def test_base_workout_cannot_be_built() -> None:
    with pytest.raises(TypeError):
        Workout(5, 30, LONDON)


def test_ids_are_unique_for_workouts_created_together() -> None:
    ids = {Running(5, 30, LONDON, cadence=180).id for _ in range(500)}

    assert len(ids) == 500


def test_title_uses_month_and_day_of_month() -> None:
    run = Running(5, 30, LONDON, cadence=180, created_at="2026-04-14T08:30:00+00:00")

    assert run.title == "Running on April 14"
    assert describe("cycling", "2026-12-01T00:00:00+00:00") == "Cycling on December 1"
    assert describe("cycling", "not a date") == "Cycling"


def test_to_plain_includes_type_tag_and_derived_metric() -> None:
    ride = Cycling(10, 40, LONDON, elevation_gain_m=150, id="abc")

    plain = ride.to_plain()

    assert plain["type"] == "cycling"
    assert plain["id"] == "abc"
    assert plain["coords"] == [51.5, -0.12]
    assert plain["elevation_gain_m"] == 150
    assert plain["speed"] == pytest.approx(15.0)
    assert "pace" not in plain

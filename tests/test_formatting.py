from __future__ import annotations

from mapty.ui.formatting import ICONS, detail_rows, popup_content, popup_options, summary_line
from mapty.workout.model import Coordinates, Cycling, Running, StoredWorkout

COORDS = Coordinates(lat=51.5, lng=-0.12)


def test_running_rows_use_pace_and_cadence_units() -> None:
    run = Running(5, 30, COORDS, cadence=180)

    rows = detail_rows(run)

    assert [(row.value, row.unit) for row in rows] == [
        ("5", "km"),
        ("30", "min"),
        ("6", "min/km"),
        ("180", "spm"),
    ]


def test_cycling_rows_use_speed_and_elevation_units() -> None:
    ride = Cycling(10, 40, COORDS, elevation_gain_m=150)

    assert summary_line(ride) == "10 km | 40 min | 15 km/h | 150 m"


def test_stored_workout_without_metric_shows_placeholder() -> None:
    stored = StoredWorkout(
        type="running",
        id="a",
        created_at="2026-04-14T08:30:00+00:00",
        distance_km=5.0,
        duration_min=30.0,
        coords=COORDS,
    )

    assert detail_rows(stored)[2].value == "--"


def test_popup_for_cycling() -> None:
    ride = Cycling(10, 40, COORDS, elevation_gain_m=150, created_at="2026-04-14T08:30:00+00:00")

    assert popup_content(ride) == f"{ICONS['cycling']} Cycling on April 14"
    assert popup_options(ride) == {
        "maxWidth": 250,
        "minWidth": 100,
        "autoClose": False,
        "closeOnClick": False,
        "className": "cycling-popup",
    }

"""Text shown for a workout in the list and in map popups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mapty.workout.model import WorkoutEntry

ICONS = {"running": "🏃‍♂️", "cycling": "🚴‍♀️"}


@dataclass(frozen=True)
class DetailRow:
    icon: str
    value: str
    unit: str


def _fmt_number(value: float | None, digits: int = 1) -> str:
    if value is None:
        return "--"
    text = f"{value:.{digits}f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def workout_icon(workout_type: str) -> str:
    return ICONS.get(workout_type, "📍")


def popup_content(record: WorkoutEntry) -> str:
    return f"{workout_icon(record.type)} {record.title}"


def popup_options(record: WorkoutEntry) -> dict[str, Any]:
    return {
        "maxWidth": 250,
        "minWidth": 100,
        "autoClose": False,
        "closeOnClick": False,
        "className": f"{record.type}-popup",
    }


def detail_rows(record: WorkoutEntry) -> list[DetailRow]:
    rows = [
        DetailRow(workout_icon(record.type), _fmt_number(record.distance_km, 2), "km"),
        DetailRow("⏱", _fmt_number(record.duration_min), "min"),
    ]
    if record.type == "running":
        rows.append(DetailRow("⚡️", _fmt_number(getattr(record, "pace", None)), "min/km"))
        rows.append(DetailRow("🦶🏼", _fmt_number(getattr(record, "cadence", None), 0), "spm"))
    else:
        rows.append(DetailRow("⚡️", _fmt_number(getattr(record, "speed", None)), "km/h"))
        rows.append(
            DetailRow("⛰", _fmt_number(getattr(record, "elevation_gain_m", None), 0), "m")
        )
    return rows


def summary_line(record: WorkoutEntry) -> str:
    return " | ".join(f"{row.value} {row.unit}" for row in detail_rows(record))

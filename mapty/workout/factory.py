"""Build workouts from raw form input or stored data."""

from __future__ import annotations

import math
import re

from mapty.workout.model import (
    WORKOUT_TYPES,
    Coordinates,
    Cycling,
    Running,
    StoredWorkout,
)

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

FIELD_LABELS = {
    "distance": "Distance",
    "duration": "Duration",
    "cadence": "Cadence",
    "elevation": "Elevation gain",
}


class WorkoutValidationError(ValueError):
    """Raised when form input cannot become a workout."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


def create_workout(
    workout_type: str,
    raw_distance: object,
    raw_duration: object,
    coords: Coordinates,
    raw_type_specific: object,
    *,
    workout_id: str | None = None,
    created_at: str | None = None,
) -> Running | Cycling:
    if workout_type not in WORKOUT_TYPES:
        raise WorkoutValidationError(
            f"Unknown workout type '{workout_type}'. Use running or cycling",
            field="type",
        )

    distance_km = _parse_positive_field(raw=raw_distance, field_name="distance")
    duration_min = _parse_positive_field(raw=raw_duration, field_name="duration")
    metric_field = "cadence" if workout_type == "running" else "elevation"
    metric = _parse_positive_field(raw=raw_type_specific, field_name=metric_field)

    extra: dict[str, str] = {}
    if workout_id is not None:
        extra["id"] = workout_id
    if created_at is not None:
        extra["created_at"] = created_at

    if workout_type == "running":
        return Running(distance_km, duration_min, coords, cadence=metric, **extra)
    return Cycling(distance_km, duration_min, coords, elevation_gain_m=metric, **extra)


def restore_workout(stored: StoredWorkout) -> Running | Cycling:
    """Rebuild a live workout from stored data, recomputing its derived metric."""
    metric = stored.cadence if stored.type == "running" else stored.elevation_gain_m
    return create_workout(
        stored.type,
        stored.distance_km,
        stored.duration_min,
        stored.coords,
        metric,
        workout_id=stored.id,
        created_at=stored.created_at,
    )


def _parse_positive_field(*, raw: object, field_name: str) -> float:
    label = FIELD_LABELS.get(field_name, field_name)
    if raw is None or isinstance(raw, bool):
        raise WorkoutValidationError(f"{label} has to be a positive number", field=field_name)
    text = str(raw).strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise WorkoutValidationError(f"{label} has to be a positive number", field=field_name)
    value = float(text)

    if not math.isfinite(value) or value <= 0:
        raise WorkoutValidationError(f"{label} has to be a positive number", field=field_name)
    return value

"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar
from uuid import uuid4

WORKOUT_TYPES: tuple[str, ...] = ("running", "cycling")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def new_workout_id() -> str:
    return uuid4().hex


def now_utc_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


def describe(workout_type: str, created_at: str) -> str:
    """Return a list/popup title such as ``Running on April 14``."""
    label = workout_type.capitalize()
    try:
        created = datetime.fromisoformat(created_at)
    except ValueError:
        return label
    return f"{label} on {MONTHS[created.month - 1]} {created.day}"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    def as_list(self) -> list[float]:
        return [self.lat, self.lng]


@dataclass(frozen=True)
class Workout:
    """A recorded session; concrete types add their metric and derived value."""

    type: ClassVar[str] = ""

    distance_km: float
    duration_min: float
    coords: Coordinates
    id: str = field(default_factory=new_workout_id, kw_only=True)
    created_at: str = field(default_factory=now_utc_iso, kw_only=True)

    def __post_init__(self) -> None:
        if type(self) is Workout:
            raise TypeError("Workout is abstract; use Running or Cycling")

    @property
    def title(self) -> str:
        return describe(self.type, self.created_at)

    def to_plain(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "created_at": self.created_at,
            "distance_km": self.distance_km,
            "duration_min": self.duration_min,
            "coords": self.coords.as_list(),
        }


@dataclass(frozen=True)
class Running(Workout):
    type: ClassVar[str] = "running"

    cadence: float
    pace: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        # min/km
        object.__setattr__(self, "pace", self.duration_min / self.distance_km)

    def to_plain(self) -> dict[str, Any]:
        plain = super().to_plain()
        plain["cadence"] = self.cadence
        plain["pace"] = self.pace
        return plain


@dataclass(frozen=True)
class Cycling(Workout):
    type: ClassVar[str] = "cycling"

    elevation_gain_m: float
    speed: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        # km/h
        object.__setattr__(self, "speed", self.distance_km / (self.duration_min / 60))

    def to_plain(self) -> dict[str, Any]:
        plain = super().to_plain()
        plain["elevation_gain_m"] = self.elevation_gain_m
        plain["speed"] = self.speed
        return plain


@dataclass(frozen=True)
class StoredWorkout:
    """Workout data read back from storage.

    Only the field values survive the round trip: derived metrics are kept
    exactly as they were saved and are never recomputed here. Use
    ``restore_workout`` to turn one back into a ``Running``/``Cycling``.
    """

    type: str
    id: str
    created_at: str
    distance_km: float
    duration_min: float
    coords: Coordinates
    cadence: float | None = None
    pace: float | None = None
    elevation_gain_m: float | None = None
    speed: float | None = None

    @property
    def title(self) -> str:
        return describe(self.type, self.created_at)

    def to_plain(self) -> dict[str, Any]:
        plain: dict[str, Any] = {
            "type": self.type,
            "id": self.id,
            "created_at": self.created_at,
            "distance_km": self.distance_km,
            "duration_min": self.duration_min,
            "coords": self.coords.as_list(),
        }
        for name in ("cadence", "pace", "elevation_gain_m", "speed"):
            value = getattr(self, name)
            if value is not None:
                plain[name] = value
        return plain


WorkoutEntry = Workout | StoredWorkout

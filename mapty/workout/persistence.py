"""Local persistence for the workout list.

The whole collection is stored as one JSON array under a single key. Reading it
back yields ``StoredWorkout`` values: plain field data with the derived metric
as it was saved, not live ``Running``/``Cycling`` instances.
"""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Iterable, Protocol

from mapty.core.config import default_data_dir
from mapty.workout.model import Coordinates, StoredWorkout, WorkoutEntry

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "workout"

_OPTIONAL_NUMBERS = ("cadence", "pace", "elevation_gain_m", "speed")


class PersistenceDecodeError(ValueError):
    """Raised when a stored workout blob cannot be decoded."""


class StorageSlot(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class FileStorage:
    """One file per key; writes replace the file in a single rename."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir or default_data_dir()

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        target = self.path_for(key)
        if not target.exists():
            return None
        try:
            return target.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PersistenceDecodeError(f"{target.name} is not valid UTF-8: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        target = self.path_for(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class MappingStorage:
    """Adapter over a str -> str mapping (a dict, NiceGUI ``app.storage.general``)."""

    def __init__(self, mapping: MutableMapping[str, Any] | None = None) -> None:
        self.mapping: MutableMapping[str, Any] = {} if mapping is None else mapping

    def get_item(self, key: str) -> str | None:
        value = self.mapping.get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        self.mapping[key] = value


def encode_workouts(records: Iterable[WorkoutEntry]) -> str:
    return json.dumps([record.to_plain() for record in records], ensure_ascii=True)


def decode_workouts(text: str) -> list[StoredWorkout]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise PersistenceDecodeError(f"Invalid JSON: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise PersistenceDecodeError("Stored workouts must be a JSON array")
    return [_decode_item(raw, index=i) for i, raw in enumerate(data)]


def _decode_item(raw: object, *, index: int) -> StoredWorkout:
    if not isinstance(raw, dict):
        raise PersistenceDecodeError(f"Workout {index + 1}: must be an object")

    coords_obj = raw.get("coords")
    if not isinstance(coords_obj, (list, tuple)) or len(coords_obj) != 2:
        raise PersistenceDecodeError(f"Workout {index + 1}: coords must be [lat, lng]")

    optional = {
        name: _number(raw.get(name), name=name, index=index)
        for name in _OPTIONAL_NUMBERS
        if raw.get(name) is not None
    }
    return StoredWorkout(
        type=_text(raw.get("type"), name="type", index=index),
        id=_text(raw.get("id"), name="id", index=index),
        created_at=_text(raw.get("created_at"), name="created_at", index=index),
        distance_km=_number(raw.get("distance_km"), name="distance_km", index=index),
        duration_min=_number(raw.get("duration_min"), name="duration_min", index=index),
        coords=Coordinates(
            lat=_number(coords_obj[0], name="coords", index=index),
            lng=_number(coords_obj[1], name="coords", index=index),
        ),
        **optional,
    )


def _text(raw: object, *, name: str, index: int) -> str:
    if not isinstance(raw, str) or not raw:
        raise PersistenceDecodeError(f"Workout {index + 1}: invalid {name}")
    return raw


def _number(raw: object, *, name: str, index: int) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise PersistenceDecodeError(f"Workout {index + 1}: invalid {name}")
    value = float(raw)
    if not math.isfinite(value):
        raise PersistenceDecodeError(f"Workout {index + 1}: invalid {name}")
    return value


class WorkoutGateway:
    def __init__(self, storage: StorageSlot, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self.key = key

    def save(self, records: Iterable[WorkoutEntry]) -> None:
        items = list(records)
        self._storage.set_item(self.key, encode_workouts(items))
        logger.debug("Saved %d workouts under %r", len(items), self.key)

    def load(self) -> list[StoredWorkout]:
        try:
            raw = self._storage.get_item(self.key)
            if raw is None:
                return []
            records = decode_workouts(raw)
        except PersistenceDecodeError as exc:
            logger.warning("Ignoring stored workouts under %r: %s", self.key, exc)
            return []
        logger.debug("Loaded %d workouts from %r", len(records), self.key)
        return records

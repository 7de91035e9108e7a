"""Ordered in-memory workout collection."""

from __future__ import annotations

from typing import Iterable, Iterator

from mapty.workout.model import WorkoutEntry


class WorkoutStore:
    def __init__(self, records: Iterable[WorkoutEntry] = ()) -> None:
        self._records: list[WorkoutEntry] = list(records)

    def append(self, record: WorkoutEntry) -> None:
        self._records.append(record)

    def replace_all(self, records: Iterable[WorkoutEntry]) -> None:
        self._records = list(records)

    def find_by_id(self, workout_id: str) -> WorkoutEntry | None:
        for record in self._records:
            if record.id == workout_id:
                return record
        return None

    def all(self) -> tuple[WorkoutEntry, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WorkoutEntry]:
        return iter(tuple(self._records))

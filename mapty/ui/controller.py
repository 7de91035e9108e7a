"""Workout controller shared by the web UI and tests.

The controller owns the workout store and drives the map/form/list
collaborators. It never touches NiceGUI directly; ``web_app`` provides the
adapters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from mapty.core.state import ControllerState
from mapty.ui.formatting import popup_content, popup_options
from mapty.workout.factory import WorkoutValidationError, create_workout
from mapty.workout.model import Coordinates, Workout, WorkoutEntry
from mapty.workout.persistence import WorkoutGateway
from mapty.workout.store import WorkoutStore

logger = logging.getLogger(__name__)

PAN_OPTIONS: dict[str, Any] = {"animate": True, "pan": {"duration": 1}}


class GeolocationError(RuntimeError):
    """Raised/reported when the browser cannot provide a location fix."""


class MapHandle(Protocol):
    def on_click(self, callback: Callable[[Coordinates], None]) -> None: ...

    def set_view(self, coords: Coordinates, zoom: int, options: dict[str, Any]) -> None: ...

    def add_marker(
        self, coords: Coordinates, popup_options: dict[str, Any], content: str
    ) -> Any: ...


class WorkoutListView(Protocol):
    def render_workout(self, record: WorkoutEntry) -> None: ...


class WorkoutForm(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...

    def toggle_type_fields(self, workout_type: str) -> None: ...


class Notifier(Protocol):
    def alert(self, message: str) -> None: ...


@dataclass(frozen=True)
class WorkoutFormFields:
    workout_type: str
    distance: str
    duration: str
    cadence: str = ""
    elevation: str = ""

    @property
    def type_specific(self) -> str:
        return self.cadence if self.workout_type == "running" else self.elevation


class WorkoutController:
    def __init__(
        self,
        gateway: WorkoutGateway,
        list_view: WorkoutListView,
        form: WorkoutForm,
        notifier: Notifier,
        zoom_level: int = 13,
    ) -> None:
        self._gateway = gateway
        self._list_view = list_view
        self._form = form
        self._notifier = notifier
        self._zoom_level = zoom_level
        self._store = WorkoutStore()
        self._map: MapHandle | None = None
        self.state = ControllerState()

    @property
    def workouts(self) -> tuple[WorkoutEntry, ...]:
        return self._store.all()

    @property
    def map_ready(self) -> bool:
        return self._map is not None

    def start(self) -> None:
        records = self._gateway.load()
        self._store.replace_all(records)
        for record in self._store:
            self._list_view.render_workout(record)
        logger.info("Restored %d workouts", len(records))

    def on_map_ready(self, map_handle: MapHandle) -> None:
        self._map = map_handle
        map_handle.on_click(self.on_map_click)
        # Workouts restored before the map existed get their markers now.
        for record in self._store:
            self._render_marker(record)

    def on_location_error(self, error: Exception) -> None:
        logger.warning("Location unavailable, map disabled: %s", error)
        self._map = None

    def on_map_click(self, coords: Coordinates) -> None:
        self.state.open_form(coords)
        self._form.show()

    def on_type_change(self, workout_type: str) -> None:
        self._form.toggle_type_fields(workout_type)

    def on_form_cancel(self) -> None:
        self.state.close_form()
        self._form.hide()

    def on_form_submit(self, fields: WorkoutFormFields) -> Workout | None:
        coords = self.state.pending_location
        if coords is None:
            logger.debug("Form submitted without a pending location, ignoring")
            return None

        try:
            workout = create_workout(
                fields.workout_type,
                fields.distance,
                fields.duration,
                coords,
                fields.type_specific,
            )
        except WorkoutValidationError as exc:
            self._notifier.alert(exc.message)
            return None

        self._store.append(workout)
        self._render_marker(workout)
        self._list_view.render_workout(workout)
        self._gateway.save(self._store.all())
        self._form.hide()
        self.state.close_form()
        logger.info("Recorded %s workout %s", workout.type, workout.id)
        return workout

    def on_workout_list_click(self, workout_id: str) -> None:
        record = self._store.find_by_id(workout_id)
        if record is None or self._map is None:
            return
        self._map.set_view(record.coords, self._zoom_level, PAN_OPTIONS)

    def _render_marker(self, record: WorkoutEntry) -> None:
        if self._map is None:
            return
        self._map.add_marker(record.coords, popup_options(record), popup_content(record))

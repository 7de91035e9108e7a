"""NiceGUI web UI for Mapty."""

from __future__ import annotations

import logging
from typing import Any, Callable

from nicegui import Client, ui

from mapty.core.config import MaptySettings
from mapty.ui.controller import GeolocationError, WorkoutController, WorkoutFormFields
from mapty.ui.formatting import detail_rows
from mapty.workout.model import Coordinates, WorkoutEntry
from mapty.workout.persistence import FileStorage, WorkoutGateway

logger = logging.getLogger(__name__)

GEOLOCATION_JS = """
new Promise((resolve, reject) => {
  if (!navigator.geolocation) {
    reject("Geolocation not supported");
    return;
  }
  navigator.geolocation.getCurrentPosition(
    (pos) => resolve([pos.coords.latitude, pos.coords.longitude]),
    (err) => reject(err.message),
  );
})
"""

TYPE_OPTIONS = {"running": "Running", "cycling": "Cycling"}


class LeafletMap:
    def __init__(self, leaflet: ui.leaflet) -> None:
        self._leaflet = leaflet

    def on_click(self, callback: Callable[[Coordinates], None]) -> None:
        def _on_click(e: Any) -> None:
            latlng = e.args["latlng"]
            callback(Coordinates(lat=float(latlng["lat"]), lng=float(latlng["lng"])))

        self._leaflet.on("map-click", _on_click)

    def set_view(self, coords: Coordinates, zoom: int, options: dict[str, Any]) -> None:
        self._leaflet.run_map_method("setView", coords.as_list(), zoom, options)

    def add_marker(self, coords: Coordinates, popup_options: dict[str, Any], content: str) -> Any:
        marker = self._leaflet.marker(latlng=(coords.lat, coords.lng))
        marker.run_method("bindPopup", content, popup_options)
        marker.run_method("openPopup")
        return marker


class CardWorkoutList:
    def __init__(self, container: ui.column) -> None:
        self._container = container
        self.on_select: Callable[[str], None] | None = None

    def render_workout(self, record: WorkoutEntry) -> None:
        with self._container:
            with ui.card().classes(f"w-full cursor-pointer workout workout--{record.type}") as card:
                ui.label(record.title).classes("text-base font-semibold")
                with ui.row().classes("w-full gap-4"):
                    for row in detail_rows(record):
                        ui.label(f"{row.icon} {row.value} {row.unit}").classes("text-sm")
        card.on("click", lambda _e, workout_id=record.id: self._select(workout_id))

    def _select(self, workout_id: str) -> None:
        if self.on_select is not None:
            self.on_select(workout_id)


class NiceGUIWorkoutForm:
    def __init__(self) -> None:
        with ui.card().classes("w-full") as self.card:
            with ui.row().classes("w-full items-end gap-2"):
                self.type_select = ui.select(TYPE_OPTIONS, value="running", label="Type")
                self.distance_input = ui.input("Distance (km)")
                self.duration_input = ui.input("Duration (min)")
                self.cadence_input = ui.input("Cadence (step/min)")
                self.elevation_input = ui.input("Elevation gain (m)")
            with ui.row().classes("gap-2"):
                self.submit_btn = ui.button("OK").props("color=primary")
                self.cancel_btn = ui.button("Cancel").props("outline")
        self.toggle_type_fields("running")
        self.card.set_visibility(False)

    def show(self) -> None:
        self.card.set_visibility(True)
        self.distance_input.run_method("focus")

    def hide(self) -> None:
        for field in (
            self.distance_input,
            self.duration_input,
            self.cadence_input,
            self.elevation_input,
        ):
            field.value = ""
        self.card.set_visibility(False)

    def toggle_type_fields(self, workout_type: str) -> None:
        self.cadence_input.set_visibility(workout_type == "running")
        self.elevation_input.set_visibility(workout_type == "cycling")

    def fields(self) -> WorkoutFormFields:
        return WorkoutFormFields(
            workout_type=str(self.type_select.value or "running"),
            distance=str(self.distance_input.value or ""),
            duration=str(self.duration_input.value or ""),
            cadence=str(self.cadence_input.value or ""),
            elevation=str(self.elevation_input.value or ""),
        )


class NotifyAlert:
    def alert(self, message: str) -> None:
        ui.notify(message, color="negative")


async def locate(timeout: float) -> Coordinates:
    try:
        result = await ui.run_javascript(GEOLOCATION_JS, timeout=timeout)
    except TimeoutError as exc:
        raise GeolocationError(f"No location fix after {timeout:.0f}s") from exc
    if not isinstance(result, list) or len(result) != 2:
        raise GeolocationError("Location request denied or unavailable")
    return Coordinates(lat=float(result[0]), lng=float(result[1]))


def build_page(settings: MaptySettings) -> Callable[[Client], Any]:
    async def index(client: Client) -> None:
        ui.add_head_html(
            """
            <style>
              .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid #00c46a; }
              .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid #ffb545; }
              .workout--running { border-left: 5px solid #00c46a; }
              .workout--cycling { border-left: 5px solid #ffb545; }
            </style>
            """
        )
        with ui.row().classes("w-full no-wrap gap-4"):
            with ui.column().classes("w-1/3 gap-2"):
                ui.label("MAPTY").classes("text-xl font-semibold tracking-wide")
                form = NiceGUIWorkoutForm()
                workout_list = CardWorkoutList(ui.column().classes("w-full gap-2"))
            map_box = ui.column().classes("w-2/3 h-[90vh]")

        gateway = WorkoutGateway(FileStorage(settings.data_dir), key=settings.storage_key)
        controller = WorkoutController(
            gateway,
            workout_list,
            form,
            NotifyAlert(),
            zoom_level=settings.zoom_level,
        )
        workout_list.on_select = controller.on_workout_list_click
        form.type_select.on_value_change(
            lambda e: controller.on_type_change(str(e.value or "running"))
        )
        form.submit_btn.on_click(lambda: controller.on_form_submit(form.fields()))
        form.cancel_btn.on_click(controller.on_form_cancel)
        controller.start()

        await client.connected()
        try:
            center = await locate(settings.geolocation_timeout_sec)
        except GeolocationError as exc:
            controller.on_location_error(exc)
            return

        with map_box:
            leaflet = ui.leaflet(center=(center.lat, center.lng), zoom=settings.zoom_level)
            leaflet.classes("w-full h-full")
        await leaflet.initialized()
        controller.on_map_ready(LeafletMap(leaflet))

    return index


def run_web_ui(settings: MaptySettings | None = None) -> int:
    settings = settings or MaptySettings()
    ui.page("/")(build_page(settings))
    logger.info("Storing workouts in %s", settings.data_dir)
    ui.run(
        host=settings.web_host,
        port=settings.web_port,
        reload=False,
        title="Mapty",
    )
    return 0

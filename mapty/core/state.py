"""Session state for the workout controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mapty.workout.model import Coordinates

Phase = Literal["awaiting_location", "form_open"]


@dataclass
class ControllerState:
    pending_location: Coordinates | None = None

    @property
    def phase(self) -> Phase:
        return "awaiting_location" if self.pending_location is None else "form_open"

    def open_form(self, coords: Coordinates) -> None:
        self.pending_location = coords

    def close_form(self) -> None:
        self.pending_location = None

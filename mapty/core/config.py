"""Runtime settings and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_data_dir() -> Path:
    return Path.home() / ".mapty"


@dataclass(frozen=True)
class MaptySettings:
    data_dir: Path = field(default_factory=default_data_dir)
    storage_key: str = "workout"
    zoom_level: int = 13
    web_host: str = "127.0.0.1"
    web_port: int = 8088
    geolocation_timeout_sec: float = 10.0


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)

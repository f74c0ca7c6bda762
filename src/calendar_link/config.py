from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class WebConfig:
    host: str
    port: int
    log_level: str


def default_timezone() -> str:
    # naive datetimes are read in this zone
    return os.getenv("CALENDAR_LINK_DEFAULT_TZ", "UTC")


def load_web_config() -> WebConfig:
    return WebConfig(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "10000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

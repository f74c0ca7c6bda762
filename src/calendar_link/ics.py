from __future__ import annotations

import base64
import hashlib
from datetime import datetime

from .escaping import fold_line, ics_escape
from .models import Event
from .timeutil import (
    format_date_basic,
    format_local_basic,
    format_utc_basic,
    next_day,
    zone_name,
)

DATA_URI_PREFIX = "data:text/calendar;charset=utf8;base64,"
CRLF = "\r\n"


def event_uid(event: Event) -> str:
    """Same title/start/end always gives the same UID."""
    base = f"{event.title}|{format_utc_basic(event.start)}|{format_utc_basic(event.end)}"
    return hashlib.md5(base.encode("utf-8")).hexdigest()


def _dt_lines(event: Event) -> list[str]:
    if event.all_day:
        return [
            f"DTSTART;VALUE=DATE:{format_date_basic(event.start)}",
            f"DTEND;VALUE=DATE:{format_date_basic(next_day(event.end))}",
        ]
    return [_dt_line("DTSTART", event.start), _dt_line("DTEND", event.end)]


def _dt_line(name: str, dt: datetime) -> str:
    tzid = zone_name(dt)
    if tzid is None:
        # fixed offsets have no TZID; write the instant in UTC
        return f"{name}:{format_utc_basic(dt)}"
    return f"{name};TZID={tzid}:{format_local_basic(dt)}"


def build_ics(event: Event) -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "BEGIN:VEVENT",
        f"UID:{event_uid(event)}",
        f"SUMMARY:{ics_escape(event.title)}",
    ]
    lines.extend(_dt_lines(event))
    if event.description:
        lines.append(f"DESCRIPTION:{ics_escape(event.description)}")
    if event.address:
        lines.append(f"LOCATION:{ics_escape(event.address)}")
    lines.extend([
        "END:VEVENT",
        "END:VCALENDAR",
    ])
    return "".join(fold_line(line) + CRLF for line in lines)


def to_data_uri(body: str) -> str:
    payload = base64.b64encode(body.encode("utf-8")).decode("ascii")
    return f"{DATA_URI_PREFIX}{payload}"


def ics_data_uri(event: Event) -> str:
    return to_data_uri(build_ics(event))

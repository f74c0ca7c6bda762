from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import default_timezone
from .errors import UnsupportedZoneError

# +01:00 / -0530 / UTC+02:00 / GMT-03
OFFSET_RE = re.compile(r"(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?", re.IGNORECASE)

UTC_BASIC = "%Y%m%dT%H%M%SZ"
LOCAL_BASIC = "%Y%m%dT%H%M%S"
UTC_ISO = "%Y-%m-%dT%H:%M:%SZ"
DATE_BASIC = "%Y%m%d"
DATE_ISO = "%Y-%m-%d"


def resolve_zone(zone: str | tzinfo | None = None) -> tzinfo:
    """
    Turn a zone identifier into a tzinfo.

    None or "" falls back to the configured default zone. Strings are tried
    as a fixed UTC offset first and then as an IANA name.
    """
    if isinstance(zone, tzinfo):
        return zone
    if zone is None or zone == "":
        zone = default_timezone()
    if not isinstance(zone, str):
        raise UnsupportedZoneError(f"Zone must be a string, got {type(zone).__name__}")

    name = zone.strip()
    m = OFFSET_RE.fullmatch(name)
    if m:
        sign, hours, minutes = m.group(1), int(m.group(2)), int(m.group(3) or 0)
        if hours > 23 or minutes > 59:
            raise UnsupportedZoneError(f"Offset out of range: {zone!r}")
        delta = timedelta(hours=hours, minutes=minutes)
        return timezone(-delta if sign == "-" else delta)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnsupportedZoneError(f"Unknown time zone: {zone!r}") from e


def localize(dt: datetime, zone: str | tzinfo | None = None) -> datetime:
    """
    naive datetime はゾーン(省略時は既定ゾーン)のものとみなす。
    tz-aware の場合、zone 指定があればそのゾーンに変換する。
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=resolve_zone(zone))
    if zone is None or zone == "":
        return dt
    return dt.astimezone(resolve_zone(zone))


def to_utc(dt: datetime) -> datetime:
    return localize(dt).astimezone(timezone.utc)


def zone_name(dt: datetime) -> str | None:
    """IANA name of the zone, or None for fixed offsets that no TZID can name."""
    return getattr(localize(dt).tzinfo, "key", None) or None


def format_utc_basic(dt: datetime) -> str:
    return to_utc(dt).strftime(UTC_BASIC)


def format_utc_iso(dt: datetime) -> str:
    return to_utc(dt).strftime(UTC_ISO)


def format_local_basic(dt: datetime) -> str:
    return localize(dt).strftime(LOCAL_BASIC)


def format_date_basic(dt: datetime) -> str:
    return localize(dt).strftime(DATE_BASIC)


def format_date_iso(dt: datetime) -> str:
    return localize(dt).strftime(DATE_ISO)


def next_day(dt: datetime) -> datetime:
    # 終日の end は「翌日」
    return localize(dt) + timedelta(days=1)

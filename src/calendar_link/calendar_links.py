from __future__ import annotations

from .escaping import encode_query
from .models import Event
from .timeutil import (
    format_date_basic,
    format_date_iso,
    format_utc_basic,
    format_utc_iso,
    next_day,
)

GOOGLE_BASE = "https://calendar.google.com/calendar/render"
YAHOO_BASE = "https://calendar.yahoo.com/"
OUTLOOK_BASE = "https://outlook.live.com/calendar/deeplink/compose"


def _add_optional(params: dict[str, str], key: str, value: str) -> None:
    # 空の項目は key= すら出さない
    if value:
        params[key] = value


def google_template_url(event: Event) -> str:
    """
    Googleカレンダーの template URL を返す。
    - all_day=True: dates=YYYYMMDD/YYYYMMDD(翌日)
    - all_day=False: dates=YYYYMMDDTHHMMSSZ/YYYYMMDDTHHMMSSZ (UTC)
    """
    params: dict[str, str] = {"action": "TEMPLATE"}

    if event.all_day:
        s = format_date_basic(event.start)
        # 終日は「翌日」を end にするのがGoogleの作法
        e = format_date_basic(next_day(event.end))
    else:
        s = format_utc_basic(event.start)
        e = format_utc_basic(event.end)
    params["dates"] = f"{s}/{e}"
    params["text"] = event.title

    _add_optional(params, "details", event.description)
    _add_optional(params, "location", event.address)

    return f"{GOOGLE_BASE}?{encode_query(params)}"


def yahoo_url(event: Event) -> str:
    params: dict[str, str] = {"v": "60", "view": "d", "type": "20"}

    if event.all_day:
        params["ST"] = format_date_basic(event.start)
        params["DUR"] = "allday"
    else:
        params["ST"] = format_utc_basic(event.start)
        params["ET"] = format_utc_basic(event.end)
    params["TITLE"] = event.title

    _add_optional(params, "DESC", event.description)
    _add_optional(params, "in_loc", event.address)

    return f"{YAHOO_BASE}?{encode_query(params)}"


def outlook_web_url(event: Event) -> str:
    """Outlook.com compose deep link; dates are ISO 8601 in UTC."""
    params: dict[str, str] = {"path": "/calendar/action/compose", "rru": "addevent"}

    if event.all_day:
        params["startdt"] = format_date_iso(event.start)
        params["enddt"] = format_date_iso(next_day(event.end))
        params["allday"] = "true"
    else:
        params["startdt"] = format_utc_iso(event.start)
        params["enddt"] = format_utc_iso(event.end)
    params["subject"] = event.title

    _add_optional(params, "body", event.description)
    _add_optional(params, "location", event.address)

    return f"{OUTLOOK_BASE}?{encode_query(params)}"

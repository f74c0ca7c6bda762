from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Callable

from .calendar_links import google_template_url, outlook_web_url, yahoo_url
from .errors import UnknownProviderError
from .ics import ics_data_uri
from .models import Event, LinkResult

logger = logging.getLogger(__name__)


class Provider(Enum):
    """Calendar types a link can be generated for, in display order."""

    GOOGLE = "google"
    ICS = "ics"
    YAHOO = "yahoo"
    WEB_OUTLOOK = "webOutlook"

    @classmethod
    def from_key(cls, key: str | Provider) -> Provider:
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            raise UnknownProviderError(f"Invalid calendar link type: {key!r}") from None

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


DISPLAY_NAMES = MappingProxyType({
    Provider.GOOGLE: "Google",
    Provider.ICS: "iCal",
    Provider.YAHOO: "Yahoo!",
    Provider.WEB_OUTLOOK: "Outlook.com",
})

BUILDERS: MappingProxyType[Provider, Callable[[Event], str]] = MappingProxyType({
    Provider.GOOGLE: google_template_url,
    Provider.ICS: ics_data_uri,
    Provider.YAHOO: yahoo_url,
    Provider.WEB_OUTLOOK: outlook_web_url,
})


def generate(provider: str | Provider, event: Event) -> str:
    p = Provider.from_key(provider)
    url = BUILDERS[p](event)
    logger.debug("Generated %s link for %r", p.value, event.title)
    return url


def generate_all(event: Event) -> list[LinkResult]:
    return [
        LinkResult(type_key=p.value, type_name=p.display_name, url=generate(p, event))
        for p in Provider
    ]


def calendar_link(
    type: str,
    title: str,
    start: datetime,
    end: datetime,
    all_day: bool = False,
    description: str = "",
    address: str = "",
) -> str:
    """
    Create a calendar link of the given type.

    The provider key is checked before the event is built, so an unknown
    type is reported even when the event data is also bad.
    """
    p = Provider.from_key(type)
    event = Event(title, start, end, all_day=all_day, description=description or "", address=address or "")
    return generate(p, event)


def calendar_links(
    title: str,
    start: datetime,
    end: datetime,
    all_day: bool = False,
    description: str = "",
    address: str = "",
) -> list[dict[str, str]]:
    """Links for every calendar type, in display order, ready for a template loop."""
    event = Event(title, start, end, all_day=all_day, description=description or "", address=address or "")
    return [r.as_dict() for r in generate_all(event)]

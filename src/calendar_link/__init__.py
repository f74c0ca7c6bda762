from .errors import (
    CalendarLinkError,
    InvalidEventError,
    UnknownProviderError,
    UnsupportedZoneError,
)
from .models import Event, LinkResult
from .providers import Provider, calendar_link, calendar_links, generate, generate_all
from .sources import EventSource, MappingEventSource, event_from_source

__all__ = [
    "CalendarLinkError",
    "Event",
    "EventSource",
    "InvalidEventError",
    "LinkResult",
    "MappingEventSource",
    "Provider",
    "UnknownProviderError",
    "UnsupportedZoneError",
    "calendar_link",
    "calendar_links",
    "event_from_source",
    "generate",
    "generate_all",
]

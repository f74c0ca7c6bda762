class CalendarLinkError(Exception):
    """Base class for everything the link generator raises."""


class InvalidEventError(CalendarLinkError):
    """Event data that cannot be turned into a calendar entry."""


class UnsupportedZoneError(InvalidEventError):
    """A zone identifier that cannot be normalised to UTC."""


class UnknownProviderError(CalendarLinkError):
    """A provider key outside the known set."""

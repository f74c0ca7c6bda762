from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Protocol

from .errors import InvalidEventError
from .models import Event
from .timeutil import localize

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"", "0", "false", "no", "off"}


class EventSource(Protocol):
    """Whatever a host hands us, reduced to the fields of an Event."""

    def resolve_title(self) -> str: ...

    def resolve_start(self) -> datetime: ...

    def resolve_end(self) -> datetime: ...

    def resolve_all_day(self) -> bool: ...

    def resolve_description(self) -> str: ...

    def resolve_address(self) -> str: ...


class MappingEventSource:
    """
    EventSource over a plain mapping: query args, form data, decoded JSON.

    start/end are datetimes or ISO 8601 strings. A naive value is read in
    the zone named by the "zone" key (or the default zone when absent); an
    aware value is converted to that zone when one is given.
    """

    def __init__(self, data: Mapping[str, Any]):
        self.data = data

    def _text(self, key: str, *, required: bool = False) -> str:
        value = self.data.get(key)
        if value is None:
            if required:
                raise InvalidEventError(f"Missing required field: {key}")
            return ""
        if not isinstance(value, str):
            raise InvalidEventError(f"{key} must be a string, got {type(value).__name__}")
        return value

    def _instant(self, key: str) -> datetime:
        value = self.data.get(key)
        if value is None or value == "":
            raise InvalidEventError(f"Missing required field: {key}")
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip())
            except ValueError as e:
                raise InvalidEventError(f"{key} is not a valid timestamp: {value!r}") from e
        if not isinstance(value, datetime):
            raise InvalidEventError(f"{key} must be a timestamp, got {type(value).__name__}")
        return localize(value, self.data.get("zone"))

    def resolve_title(self) -> str:
        return self._text("title", required=True)

    def resolve_start(self) -> datetime:
        return self._instant("start")

    def resolve_end(self) -> datetime:
        return self._instant("end")

    def resolve_all_day(self) -> bool:
        value = self.data.get("all_day", False)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            v = value.strip().lower()
            if v in TRUE_VALUES:
                return True
            if v in FALSE_VALUES:
                return False
        raise InvalidEventError(f"all_day must be a boolean, got {value!r}")

    def resolve_description(self) -> str:
        return self._text("description")

    def resolve_address(self) -> str:
        return self._text("address")


def event_from_source(source: EventSource) -> Event:
    return Event(
        title=source.resolve_title(),
        start=source.resolve_start(),
        end=source.resolve_end(),
        all_day=source.resolve_all_day(),
        description=source.resolve_description(),
        address=source.resolve_address(),
    )

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import InvalidEventError
from .timeutil import localize, to_utc


@dataclass(frozen=True)
class Event:
    title: str
    start: datetime
    end: datetime
    all_day: bool = False
    description: str = ""
    address: str = ""

    def __post_init__(self) -> None:
        for name in ("title", "description", "address"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidEventError(f"{name} must be a string, got {type(value).__name__}")

        for name in ("start", "end"):
            value = getattr(self, name)
            if not isinstance(value, datetime):
                raise InvalidEventError(f"{name} must be a datetime, got {type(value).__name__}")
            # naive は既定ゾーンのものとして固定しておく
            object.__setattr__(self, name, localize(value))

        object.__setattr__(self, "all_day", bool(self.all_day))

        if to_utc(self.end) < to_utc(self.start):
            raise InvalidEventError(
                f"Event end ({self.end.isoformat()}) is before its start ({self.start.isoformat()})"
            )


@dataclass(frozen=True)
class LinkResult:
    type_key: str
    type_name: str
    url: str

    def as_dict(self) -> dict[str, str]:
        return {"type_key": self.type_key, "type_name": self.type_name, "url": self.url}

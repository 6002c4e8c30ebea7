"""Read-only records returned by the Clockify API.

Entries and projects are immutable snapshots: nothing in the dashboard
mutates them after parsing.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Optional

from dateutil import parser

# PT1H30M15S, PT45M, PT0S ... (Clockify never sends date components)
_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$"
)


class MalformedEntryError(ValueError):
    """Raised when an API record does not have the expected entry shape."""


def parse_iso_duration(duration: Optional[str]) -> int:
    """Parse an ISO 8601 duration such as ``PT6H30M`` into whole seconds.

    ``None`` (a running timer) and empty strings count as zero.
    """
    if not duration:
        return 0
    match = _ISO_DURATION.match(duration)
    if match is None or duration in ("P", "PT"):
        raise MalformedEntryError(f"Unrecognised duration: {duration!r}")
    parts = {k: float(v) if v else 0.0 for k, v in match.groupdict().items()}
    total = (parts["days"] * 86400 + parts["hours"] * 3600
             + parts["minutes"] * 60 + parts["seconds"])
    return int(round(total))


def parse_instant(value: str) -> datetime.datetime:
    """Parse an ISO instant, treating naive values as UTC."""
    try:
        dt = parser.isoparse(value)
    except (TypeError, ValueError) as e:
        raise MalformedEntryError(f"Unrecognised instant: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return dt


@dataclass(frozen=True)
class Project:
    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict) -> "Project":
        return cls(id=str(data["id"]), name=data.get("name") or "")


@dataclass(frozen=True)
class TimeEntry:
    """One recorded span of tracked time."""
    id: str
    project_id: Optional[str]
    description: str
    start: datetime.datetime
    end: datetime.datetime
    duration_seconds: int

    @property
    def duration_hours(self) -> float:
        return self.duration_seconds / 3600.0

    @classmethod
    def from_api(cls, data: dict) -> "TimeEntry":
        """Build an entry from the Clockify JSON shape.

        A running timer has no end and no duration; it is read as a
        zero-length entry ending where it started.
        """
        if not isinstance(data, dict) or "id" not in data:
            raise MalformedEntryError("Entry has no id")
        interval = data.get("timeInterval") or {}
        if not interval.get("start"):
            raise MalformedEntryError(f"Entry {data['id']} has no start")

        start = parse_instant(interval["start"])
        end = parse_instant(interval["end"]) if interval.get("end") else start
        if interval.get("end") and not interval.get("duration"):
            duration = max(0, int((end - start).total_seconds()))
        else:
            duration = parse_iso_duration(interval.get("duration"))

        return cls(
            id=str(data["id"]),
            project_id=data.get("projectId") or None,
            description=data.get("description") or "",
            start=start,
            end=end,
            duration_seconds=duration,
        )

"""Time-entry bucketing.

Turns raw entries into per-bucket hour totals for a resolved period. This
module is intentionally free of any Qt / network dependencies so it can be
unit-tested easily.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, NamedTuple, Optional, Protocol

from .models import TimeEntry
from .periods import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    Granularity,
    LabelFormat,
    PeriodRange,
    format_label,
)

OTHERS_LABEL = "Others"


class Bucket(NamedTuple):
    label: str
    total_hours: float


class NameResolver(Protocol):
    def resolve(self, project_id: Optional[str]) -> str: ...


def split_interval_by_local_hour(start: datetime.datetime, end: datetime.datetime,
                                 tz: Optional[datetime.tzinfo] = None
                                 ) -> list[tuple[datetime.date, int, float]]:
    """Split a time interval into local-hour buckets.

    Args:
        start: Aware start of the interval.
        end: Aware end of the interval. Must be >= start.
        tz: Zone used for clock hours; ``None`` means system local time.

    Returns:
        List of (date, hour, seconds) segments, where each segment lies wholly
        within a single local clock hour.

    Notes:
        - Guards against pathological DST/clock issues that could cause non-
          increasing boundaries.
    """
    start_ts = start.timestamp()
    end_ts = end.timestamp()
    if end_ts <= start_ts:
        return []

    segments: list[tuple[datetime.date, int, float]] = []
    cursor = start_ts

    while cursor < end_ts:
        dt = datetime.datetime.fromtimestamp(cursor, tz)
        hour_start = dt.replace(minute=0, second=0, microsecond=0)
        next_boundary = (hour_start + datetime.timedelta(hours=1)).timestamp()

        # Safety: avoid infinite loops if boundary is not advancing (DST weirdness)
        if next_boundary <= cursor:
            next_boundary = cursor + 3600.0

        slice_end = min(end_ts, next_boundary)
        seconds = slice_end - cursor
        if seconds > 0:
            segments.append((dt.date(), dt.hour, seconds))

        cursor = slice_end

    return segments


def _local(moment: datetime.datetime, tz: Optional[datetime.tzinfo]) -> datetime.datetime:
    return moment.astimezone(tz)


def _hour_totals(entries: Iterable[TimeEntry], period_range: PeriodRange, tz) -> dict[str, float]:
    """Unrounded hours per clock hour; split fragments outside the range are dropped."""
    totals = {f"{hour:02d}:00": 0.0 for hour in range(24)}
    for entry in entries:
        start = _local(entry.start, tz)
        end = _local(entry.end, tz)
        same_hour = start.date() == end.date() and start.hour == end.hour
        if same_hour or entry.duration_seconds < 3600:
            totals[format_label(start, LabelFormat.HOUR)] += entry.duration_hours
            continue
        # The stored duration is authoritative, so walk start -> start + duration.
        stop = entry.start.astimezone(datetime.timezone.utc) + datetime.timedelta(seconds=entry.duration_seconds)
        lo = max(entry.start, period_range.start)
        hi = min(stop, period_range.end)
        for _day, hour, seconds in split_interval_by_local_hour(lo, hi, tz):
            totals[f"{hour:02d}:00"] += seconds / 3600.0
    return dict(sorted(totals.items()))


def _weekday_totals(entries: Iterable[TimeEntry], tz) -> dict[str, float]:
    totals = {label: 0.0 for label in WEEKDAY_LABELS}
    for entry in entries:
        label = format_label(_local(entry.start, tz), LabelFormat.WEEKDAY)
        totals[label] += entry.duration_hours
    return totals


def _day_totals(entries: Iterable[TimeEntry], period_range: PeriodRange, tz) -> dict[str, float]:
    totals: dict[str, float] = {}
    dates: dict[str, datetime.date] = {}
    for day in period_range.days():
        label = f"{day.day:02d}/{day.month:02d}"
        totals[label] = 0.0
        dates[label] = day

    for entry in entries:
        start = _local(entry.start, tz)
        label = format_label(start, LabelFormat.DAY_MONTH)
        totals[label] = totals.get(label, 0.0) + entry.duration_hours
        dates.setdefault(label, start.date())

    return {label: totals[label] for label in sorted(totals, key=dates.__getitem__)}


def _month_totals(entries: Iterable[TimeEntry], tz) -> dict[str, float]:
    totals = {label: 0.0 for label in MONTH_LABELS}
    for entry in entries:
        label = format_label(_local(entry.start, tz), LabelFormat.MONTH_NAME)
        totals[label] += entry.duration_hours
    return totals


def aggregate(entries: Iterable[TimeEntry], period_range: PeriodRange,
              tz: Optional[datetime.tzinfo] = None) -> list[Bucket]:
    """Sum entry durations into the buckets of ``period_range``.

    Every bucket of the period appears, zero-filled, in canonical order:
    hours 00-23, weekdays Monday first, calendar days chronologically and
    months January first. Totals are rounded to two decimals only on output.
    """
    entries = list(entries)
    granularity = period_range.granularity

    if granularity is Granularity.HOUR:
        totals = _hour_totals(entries, period_range, tz)
    elif granularity is Granularity.DAY and period_range.label_format is LabelFormat.WEEKDAY:
        totals = _weekday_totals(entries, tz)
    elif granularity is Granularity.DAY:
        totals = _day_totals(entries, period_range, tz)
    elif granularity is Granularity.MONTH:
        totals = _month_totals(entries, tz)
    else:
        raise ValueError(f"Unknown granularity: {granularity!r}")

    return [Bucket(label, round(hours, 2)) for label, hours in totals.items()]


def aggregate_by_project(entries: Iterable[TimeEntry], directory: NameResolver) -> list[Bucket]:
    """Hours per project name, largest first."""
    totals: dict[str, float] = defaultdict(float)
    for entry in entries:
        totals[directory.resolve(entry.project_id)] += entry.duration_hours
    items = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [Bucket(name, round(hours, 2)) for name, hours in items]


def collapse_small_slices(items: list[Bucket], max_slices: int = 6) -> list[Bucket]:
    """Keep the ``max_slices`` largest items and fold the rest into one slice."""
    items = [item for item in items if item.total_hours > 0]
    if len(items) <= max_slices:
        return items
    top = items[:max_slices]
    others = sum(item.total_hours for item in items[max_slices:])
    if others > 0:
        top.append(Bucket(OTHERS_LABEL, round(others, 2)))
    return top

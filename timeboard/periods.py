"""Reporting periods and their concrete date ranges.

A period plus a reference date resolves to a half-open ``[start, end)``
range anchored on local calendar boundaries, together with the bucketing
granularity and bucket label format used to chart it.
"""

from __future__ import annotations

import datetime
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class Granularity(enum.Enum):
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


class LabelFormat(enum.Enum):
    HOUR = "HH:00"
    DAY_MONTH = "DD/MM"
    WEEKDAY = "ddd"
    MONTH_NAME = "MMM"


class Period(enum.Enum):
    TODAY = "today"
    LAST_3_DAYS = "3days"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_key(cls, key: str, default: Optional["Period"] = None) -> "Period":
        """Look up a period by its UI key.

        Unknown keys raise ``ValueError`` unless a ``default`` is given, in
        which case a warning is logged and the default returned.
        """
        try:
            return cls(key)
        except ValueError:
            if default is None:
                raise ValueError(f"Unknown period: {key!r}") from None
            logger.warning("Unknown period %r, using %r", key, default.value)
            return default

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Period.TODAY: "Today",
    Period.LAST_3_DAYS: "Last 3 Days",
    Period.WEEK: "This Week",
    Period.MONTH: "This Month",
    Period.YEAR: "This Year",
}


@dataclass(frozen=True)
class PeriodRange:
    period: Period
    start: datetime.datetime
    end: datetime.datetime
    granularity: Granularity
    label_format: LabelFormat

    def days(self) -> list[datetime.date]:
        """Every calendar date touched by the range, in order."""
        day = self.start.date()
        last = (self.end - datetime.timedelta(microseconds=1)).date()
        out = []
        while day <= last:
            out.append(day)
            day += datetime.timedelta(days=1)
        return out


def start_of_day(day: datetime.date, tz: Optional[datetime.tzinfo] = None) -> datetime.datetime:
    """Local midnight of ``day`` as an aware datetime.

    With ``tz=None`` the system local zone is attached.
    """
    naive = datetime.datetime.combine(day, datetime.time.min)
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def resolve(period: Period, reference_date: datetime.date,
            tz: Optional[datetime.tzinfo] = None) -> PeriodRange:
    """Resolve ``period`` around ``reference_date``."""
    if isinstance(reference_date, datetime.datetime):
        reference_date = reference_date.date()

    if period is Period.TODAY:
        first, last = reference_date, reference_date + datetime.timedelta(days=1)
        granularity, label = Granularity.HOUR, LabelFormat.HOUR
    elif period is Period.LAST_3_DAYS:
        first = reference_date - datetime.timedelta(days=2)
        last = reference_date + datetime.timedelta(days=1)
        granularity, label = Granularity.DAY, LabelFormat.DAY_MONTH
    elif period is Period.WEEK:
        # ISO weeks start on Monday
        first = reference_date - datetime.timedelta(days=reference_date.weekday())
        last = first + datetime.timedelta(days=7)
        granularity, label = Granularity.DAY, LabelFormat.WEEKDAY
    elif period is Period.MONTH:
        first = reference_date.replace(day=1)
        last = first + relativedelta(months=1)
        granularity, label = Granularity.DAY, LabelFormat.DAY_MONTH
    elif period is Period.YEAR:
        first = reference_date.replace(month=1, day=1)
        last = first + relativedelta(years=1)
        granularity, label = Granularity.MONTH, LabelFormat.MONTH_NAME
    else:
        raise ValueError(f"Unknown period: {period!r}")

    return PeriodRange(
        period=period,
        start=start_of_day(first, tz),
        end=start_of_day(last, tz),
        granularity=granularity,
        label_format=label,
    )


def format_label(moment: datetime.datetime, label_format: LabelFormat) -> str:
    """Bucket label for a local datetime."""
    if label_format is LabelFormat.HOUR:
        return f"{moment.hour:02d}:00"
    if label_format is LabelFormat.DAY_MONTH:
        return f"{moment.day:02d}/{moment.month:02d}"
    if label_format is LabelFormat.WEEKDAY:
        return WEEKDAY_LABELS[moment.weekday()]
    if label_format is LabelFormat.MONTH_NAME:
        return MONTH_LABELS[moment.month - 1]
    raise ValueError(f"Unknown label format: {label_format!r}")

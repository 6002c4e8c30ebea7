"""Dashboard view state owned by the main window."""

from __future__ import annotations

import datetime
import itertools
from dataclasses import dataclass, field
from typing import Optional

from .aggregator import Bucket, aggregate
from .models import TimeEntry
from .periods import Period, PeriodRange, resolve
from .projects import ProjectDirectory

PROJECTS = "projects"


class RequestSequencer:
    """Hands out monotonic tokens per data category.

    Only the most recently issued token of a category is current; responses
    carrying an older token are stale and should be dropped.
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = {}

    def issue(self, category: str) -> int:
        token = next(self._counter)
        self._latest[category] = token
        return token

    def is_current(self, category: str, token: int) -> bool:
        return self._latest.get(category) == token


def entries_category(period: Period) -> str:
    return f"entries:{period.value}"


@dataclass
class DashboardSession:
    selected_period: Period = Period.WEEK
    selected_date: datetime.date = field(default_factory=datetime.date.today)
    directory: ProjectDirectory = field(default_factory=ProjectDirectory)
    tz: Optional[datetime.tzinfo] = None
    sequencer: RequestSequencer = field(default_factory=RequestSequencer)
    entries_by_period: dict[Period, list[TimeEntry]] = field(default_factory=dict)

    def range_for(self, period: Period) -> PeriodRange:
        return resolve(period, self.selected_date, self.tz)

    def select_period(self, period: Period):
        """Switch the selected period; cached entries stay valid for the same date."""
        self.selected_period = period

    def select_date(self, day: datetime.date):
        """Switch the reference date; entries cached for the old date are dropped."""
        if day != self.selected_date:
            self.entries_by_period.clear()
        self.selected_date = day

    def plan_refresh(self) -> list[tuple[Period, PeriodRange, int]]:
        """Issue a fresh token for every period to be fetched."""
        return [
            (period, self.range_for(period), self.sequencer.issue(entries_category(period)))
            for period in Period
        ]

    def accept_entries(self, period: Period, token: int) -> bool:
        return self.sequencer.is_current(entries_category(period), token)

    def store_entries(self, period: Period, token: int, entries) -> bool:
        """Cache a response; returns False if it is stale."""
        if not self.accept_entries(period, token):
            return False
        self.entries_by_period[period] = list(entries)
        return True

    def discard_entries(self, period: Period, token: int) -> bool:
        """Forget a period's entries after its current request failed."""
        if not self.accept_entries(period, token):
            return False
        self.entries_by_period.pop(period, None)
        return True

    def entries_for(self, period: Period) -> list[TimeEntry]:
        return self.entries_by_period.get(period, [])

    def buckets_for(self, period: Period) -> list[Bucket]:
        return aggregate(self.entries_for(period), self.range_for(period), self.tz)

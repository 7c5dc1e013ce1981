from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date
from itertools import groupby

from .models import DayContribution, DayTotal, RawEntry, TimeInterval
from .parser import to_interval
from .splitter import split_interval


class DayAggregator:
    """Accumulates per-day seconds from intervals that may cross midnight."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._seconds_by_day: dict[date, int] = {}

    def add_contribution(self, contribution: DayContribution) -> None:
        day = contribution.day
        self._seconds_by_day[day] = self._seconds_by_day.get(day, 0) + contribution.seconds

    def add_interval(self, interval: TimeInterval) -> int:
        total_seconds = 0
        for contribution in split_interval(interval):
            self.add_contribution(contribution)
            total_seconds += contribution.seconds
        return total_seconds

    def add_entries(self, entries: Iterable[RawEntry], year: int) -> int:
        # Convert everything up front so a bad record leaves no partial totals behind.
        intervals: list[TimeInterval] = []
        for entry in entries:
            interval = to_interval(entry, year)
            self.logger.debug("Entry %r -> %s .. %s", entry, interval.start, interval.end)
            intervals.append(interval)

        total_seconds = 0
        for interval in intervals:
            total_seconds += self.add_interval(interval)

        self.logger.info(
            "Aggregated %d entries into %d days (%ss)",
            len(intervals),
            len(self._seconds_by_day),
            total_seconds,
        )
        return total_seconds

    def day_totals(self) -> list[DayTotal]:
        return [DayTotal(day=day, seconds=seconds) for day, seconds in sorted(self._seconds_by_day.items())]


def group_by_month(totals: Iterable[DayTotal]) -> Iterator[tuple[tuple[int, int], list[DayTotal]]]:
    """Yield contiguous runs of date-sorted totals sharing a (year, month)."""
    for key, run in groupby(totals, key=lambda item: item.year_month):
        yield key, list(run)


def group_by_week(totals: Iterable[DayTotal]) -> Iterator[tuple[int, list[DayTotal]]]:
    """Yield contiguous runs sharing an ISO week number.

    Feed this one month at a time: a week straddling two months then comes
    out as two partial weeks.
    """
    for key, run in groupby(totals, key=lambda item: item.iso_week):
        yield key, list(run)


def month_total(totals: Iterable[DayTotal], year: int, month: int) -> int:
    return sum(item.seconds for item in totals if item.year_month == (year, month))


def week_total(totals: Iterable[DayTotal], year: int, month: int, week: int) -> int:
    return sum(item.seconds for item in totals if item.year_month == (year, month) and item.iso_week == week)

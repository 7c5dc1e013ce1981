from __future__ import annotations

from datetime import datetime, time, timedelta

from .errors import InvertedIntervalError
from .models import DayContribution, TimeInterval

SECONDS_PER_DAY = 86400


def split_interval_by_day(start: datetime, end: datetime) -> list[DayContribution]:
    """Break [start, end) into one contribution per calendar date it touches.

    Every date from start's to end's is present, so an interval ending exactly
    at midnight still yields a zero-second slice for its end date.
    """
    if end < start:
        raise InvertedIntervalError(start, end)

    segments: list[DayContribution] = []
    cursor = start

    while True:
        day = cursor.date()
        next_midnight = datetime.combine(day + timedelta(days=1), time.min)

        chunk_end = min(end, next_midnight)
        segments.append(DayContribution(day=day, seconds=int((chunk_end - cursor).total_seconds())))

        if next_midnight > end:
            break
        cursor = next_midnight

    return segments


def split_interval(interval: TimeInterval) -> list[DayContribution]:
    if interval.end < interval.start:
        raise InvertedIntervalError(interval.start, interval.end, interval.activity)
    return split_interval_by_day(interval.start, interval.end)

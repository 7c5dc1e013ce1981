from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


@dataclass(frozen=True, slots=True)
class RawEntry:
    activity: str
    duration: str
    from_: str
    to: str
    comment: str


@dataclass(frozen=True, slots=True)
class TimeInterval:
    start: datetime
    end: datetime
    activity: str = ""

    @property
    def seconds(self) -> int:
        return int((self.end - self.start).total_seconds())


@dataclass(frozen=True, slots=True)
class DayContribution:
    day: date
    seconds: int


@dataclass(frozen=True, slots=True)
class DayTotal:
    day: date
    seconds: int

    @property
    def year_month(self) -> tuple[int, int]:
        return (self.day.year, self.day.month)

    @property
    def iso_week(self) -> int:
        return self.day.isocalendar()[1]


@dataclass(frozen=True, slots=True)
class RoundedDuration:
    """Minutes rounded down to the reporting unit, plus what rounding dropped."""

    minutes: int
    remainder: int = 0

    def __add__(self, other: RoundedDuration) -> RoundedDuration:
        return RoundedDuration(self.minutes + other.minutes, self.remainder + other.remainder)

    @property
    def hours_minutes(self) -> tuple[int, int]:
        return divmod(self.minutes, 60)


class ReportLevel(str, Enum):
    month = "month"
    week = "week"
    day = "day"


@dataclass(frozen=True, slots=True)
class ReportLine:
    level: ReportLevel
    label: str
    hours: int
    minutes: int
    remainder: int

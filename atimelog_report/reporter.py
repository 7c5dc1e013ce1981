from __future__ import annotations

import logging
from collections.abc import Iterable

from .aggregator import DayAggregator, group_by_month, group_by_week
from .config import ReportConfig
from .models import DayTotal, ReportLevel, ReportLine, RoundedDuration
from .parser import parse_entries

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# (indent, hours width, gap between label and duration)
_LAYOUT = {
    ReportLevel.month: ("", 3, "   "),
    ReportLevel.week: ("  ", 2, "   "),
    ReportLevel.day: ("    ", 2, "  "),
}


def round_seconds(seconds: int, minutes_per_unit: int) -> RoundedDuration:
    """Round a duration down to whole reporting units.

    Sub-minute seconds are dropped for good; the minutes that do not fill a
    whole unit are kept as the remainder.
    """
    if minutes_per_unit <= 0:
        raise ValueError("minutes_per_unit must be positive")

    total_minutes = max(0, int(seconds)) // 60
    units, remainder = divmod(total_minutes, minutes_per_unit)
    return RoundedDuration(minutes=units * minutes_per_unit, remainder=remainder)


def _make_line(level: ReportLevel, label: str, duration: RoundedDuration) -> ReportLine:
    hours, minutes = duration.hours_minutes
    return ReportLine(level=level, label=label, hours=hours, minutes=minutes, remainder=duration.remainder)


class Reporter:
    def __init__(self, config: ReportConfig, logger: logging.Logger | None = None) -> None:
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    def summarize(self, text: str) -> list[ReportLine]:
        entries = parse_entries(text)
        self.logger.info("Parsed %d entries", len(entries))

        aggregator = DayAggregator(logger=self.logger)
        aggregator.add_entries(entries, self.config.year)
        return self.build_lines(aggregator.day_totals())

    def build_lines(self, day_totals: Iterable[DayTotal]) -> list[ReportLine]:
        unit = self.config.minutes_per_unit
        lines: list[ReportLine] = []

        for (year, month), month_days in group_by_month(day_totals):
            # Each day is rounded on its own; rollups add up the rounded days.
            rounded = {item.day: round_seconds(item.seconds, unit) for item in month_days}
            month_duration = sum(rounded.values(), RoundedDuration(0))
            lines.append(_make_line(ReportLevel.month, f"{MONTH_NAMES[month - 1]} {year}", month_duration))

            for week, week_days in group_by_week(month_days):
                week_duration = sum((rounded[item.day] for item in week_days), RoundedDuration(0))
                lines.append(_make_line(ReportLevel.week, f"Week {week:02}", week_duration))

                for item in week_days:
                    label = f"{item.day.day:02} {WEEKDAY_NAMES[item.day.weekday()]}"
                    lines.append(_make_line(ReportLevel.day, label, rounded[item.day]))

        return lines

    def render_line(self, line: ReportLine) -> str:
        indent, hours_width, gap = _LAYOUT[line.level]
        duration = f"{line.hours:0{hours_width}}:{line.minutes:02}"
        text = f"{indent}{line.label}{gap}{duration}"
        if self.config.verbose:
            text += f" +{line.remainder}"
        return text

    def build_report_content(self, lines: Iterable[ReportLine]) -> str:
        return "\n".join(self.render_line(line) for line in lines)

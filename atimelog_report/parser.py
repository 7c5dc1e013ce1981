from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from .errors import InputReadError, InvertedIntervalError, MalformedTimestampError, UnknownMonthError
from .models import RawEntry, TimeInterval

HEADER_ACTIVITY = "Activity type"
FIELD_COUNT = 5

# Fixed vocabulary; strptime's %b would follow the process locale.
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NUMBERS = {name: index for index, name in enumerate(MONTH_ABBREVIATIONS, start=1)}

_TIMESTAMP_RE = re.compile(r"^(\d{1,2}) ([A-Za-z]+) (\d{1,2}):(\d{2})$")


def read_report_file(path: str | Path) -> str:
    """Read the whole export in one go."""
    report_path = Path(path)
    try:
        return report_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise InputReadError(report_path, reason) from exc


def parse_entries(text: str) -> list[RawEntry]:
    entries: list[RawEntry] = []
    for line in text.splitlines():
        tokens = line.split(";")
        # The export ends its table with a summary block of a different shape.
        if len(tokens) != FIELD_COUNT:
            break
        if tokens[0] == HEADER_ACTIVITY:
            continue
        entries.append(RawEntry(*tokens))
    return entries


def parse_timestamp(year: int, text: str) -> datetime:
    """Combine a reference year with "D Mon HH:MM" text from the export."""
    match = _TIMESTAMP_RE.match(text.strip())
    if match is None:
        raise MalformedTimestampError(text)

    day, month_name, hour, minute = match.groups()
    month = _MONTH_NUMBERS.get(month_name)
    if month is None:
        raise UnknownMonthError(text, month_name)

    try:
        return datetime(year, month, int(day), int(hour), int(minute))
    except ValueError as exc:
        raise MalformedTimestampError(text, str(exc)) from exc


def to_interval(entry: RawEntry, year: int) -> TimeInterval:
    start = parse_timestamp(year, entry.from_)
    end = parse_timestamp(year, entry.to)
    if end < start:
        raise InvertedIntervalError(start, end, entry.activity)
    return TimeInterval(start=start, end=end, activity=entry.activity)

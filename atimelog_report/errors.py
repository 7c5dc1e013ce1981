"""Fatal error conditions raised while building a report."""

from __future__ import annotations

from pathlib import Path


class ReportError(Exception):
    """Base class for every condition that aborts a report run."""


class InputReadError(ReportError):
    """The export file is missing or cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to read report file {self.path}: {reason}")


class MalformedTimestampError(ReportError, ValueError):
    """Timestamp text is not of the form "D Mon HH:MM" or names an impossible time."""

    def __init__(self, text: str, reason: str = "expected 'D Mon HH:MM'") -> None:
        self.text = text
        super().__init__(f"Malformed timestamp {text!r}: {reason}")


class UnknownMonthError(MalformedTimestampError):
    """Month text is not one of the twelve three-letter abbreviations."""

    def __init__(self, text: str, month: str) -> None:
        self.month = month
        super().__init__(text, f"unknown month {month!r}")


class InvertedIntervalError(ReportError, ValueError):
    """An interval ends before it starts."""

    def __init__(self, start, end, activity: str = "") -> None:
        self.start = start
        self.end = end
        self.activity = activity
        label = f" for {activity!r}" if activity else ""
        super().__init__(f"Interval{label} ends before it starts: {start} > {end}")

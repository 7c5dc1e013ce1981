import logging
from datetime import date, datetime

import pytest

from atimelog_report.aggregator import DayAggregator, group_by_month, group_by_week, month_total, week_total
from atimelog_report.errors import MalformedTimestampError
from atimelog_report.models import DayContribution, DayTotal, RawEntry, TimeInterval
from atimelog_report.parser import parse_entries


def test_contributions_for_same_date_are_summed() -> None:
    aggregator = DayAggregator()

    aggregator.add_contribution(DayContribution(date(2020, 2, 1), 90))
    aggregator.add_contribution(DayContribution(date(2020, 2, 1), 30))

    assert aggregator.day_totals() == [DayTotal(date(2020, 2, 1), 120)]


def test_day_totals_are_chronological() -> None:
    aggregator = DayAggregator()

    aggregator.add_contribution(DayContribution(date(2020, 3, 1), 10))
    aggregator.add_contribution(DayContribution(date(2020, 1, 5), 20))
    aggregator.add_contribution(DayContribution(date(2020, 2, 9), 30))

    assert [item.day for item in aggregator.day_totals()] == [date(2020, 1, 5), date(2020, 2, 9), date(2020, 3, 1)]


def test_add_interval_returns_tracked_seconds() -> None:
    aggregator = DayAggregator()

    tracked = aggregator.add_interval(TimeInterval(datetime(2020, 1, 1, 23, 0), datetime(2020, 1, 2, 1, 0)))

    assert tracked == 7200
    assert aggregator.day_totals() == [DayTotal(date(2020, 1, 1), 3600), DayTotal(date(2020, 1, 2), 3600)]


def test_entry_spanning_two_midnights() -> None:
    aggregator = DayAggregator()

    aggregator.add_entries(parse_entries("Work;0:02;1 Jan 23:59;3 Jan 00:02;"), 2020)

    assert aggregator.day_totals() == [
        DayTotal(date(2020, 1, 1), 60),
        DayTotal(date(2020, 1, 2), 86400),
        DayTotal(date(2020, 1, 3), 120),
    ]


def test_bad_entry_leaves_no_partial_totals() -> None:
    aggregator = DayAggregator()
    entries = [
        RawEntry("Work", "1:00", "2 Jan 09:00", "2 Jan 10:00", ""),
        RawEntry("Work", "1:00", "2 Jan 09:00", "2 Jam 10:00", ""),
    ]

    with pytest.raises(MalformedTimestampError):
        aggregator.add_entries(entries, 2020)

    assert aggregator.day_totals() == []


def test_parsing_is_deterministic() -> None:
    text = "Work;1:00;5 Mar 09:00;5 Mar 10:00;\nRest;0:30;4 Mar 23:45;5 Mar 00:15;\n"

    first = DayAggregator()
    first.add_entries(parse_entries(text), 2020)
    second = DayAggregator()
    second.add_entries(parse_entries(text), 2020)

    assert first.day_totals() == second.day_totals()


def test_add_entries_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    aggregator = DayAggregator()

    with caplog.at_level(logging.DEBUG, logger="atimelog_report.aggregator"):
        aggregator.add_entries([RawEntry("Work", "0:01", "1 Jan 10:00", "1 Jan 10:01", "")], 2020)

    assert "Aggregated 1 entries into 1 days" in caplog.text
    assert "Work" in caplog.text


def test_cross_month_week_is_split_per_month() -> None:
    # ISO week 5 of 2020 runs Mon 27 Jan .. Sun 2 Feb.
    totals = [
        DayTotal(date(2020, 1, 30), 100),
        DayTotal(date(2020, 1, 31), 200),
        DayTotal(date(2020, 2, 1), 400),
        DayTotal(date(2020, 2, 3), 800),
    ]

    months = list(group_by_month(totals))

    assert [key for key, _ in months] == [(2020, 1), (2020, 2)]
    assert [(week, [item.seconds for item in run]) for week, run in group_by_week(months[0][1])] == [(5, [100, 200])]
    assert [(week, [item.seconds for item in run]) for week, run in group_by_week(months[1][1])] == [
        (5, [400]),
        (6, [800]),
    ]

    assert week_total(totals, 2020, 1, 5) == 300
    assert week_total(totals, 2020, 2, 5) == 400
    assert month_total(totals, 2020, 2) == 1200

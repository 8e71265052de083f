"""Tests for period keys, bucketing and per-period summaries."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from fleetcare.exceptions import ValidationException
from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.trends import (
    group_by_period,
    parse_timeframe,
    period_key,
    summarize,
)


class TestPeriodKey:
    def test_monthly(self) -> None:
        assert period_key(datetime(2024, 3, 9, tzinfo=UTC), Timeframe.MONTHLY) == "2024-03"

    def test_yearly(self) -> None:
        assert period_key(datetime(2024, 3, 9, tzinfo=UTC), "yearly") == "2024"

    def test_weekly_uses_day_of_year(self) -> None:
        assert period_key(datetime(2024, 1, 1, tzinfo=UTC), "weekly") == "2024-W01"
        assert period_key(datetime(2024, 1, 7, tzinfo=UTC), "weekly") == "2024-W01"
        assert period_key(datetime(2024, 1, 8, tzinfo=UTC), "weekly") == "2024-W02"
        # day 366 of a leap year
        assert period_key(datetime(2024, 12, 31, tzinfo=UTC), "weekly") == "2024-W53"

    def test_unknown_timeframe(self) -> None:
        with pytest.raises(ValidationException, match="Unsupported timeframe"):
            period_key(datetime(2024, 1, 1, tzinfo=UTC), "daily")


class TestParseTimeframe:
    def test_accepts_enum_and_value(self) -> None:
        assert parse_timeframe("weekly") == Timeframe.WEEKLY
        assert parse_timeframe(Timeframe.YEARLY) == Timeframe.YEARLY

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValidationException):
            parse_timeframe("quarterly")


class TestGroupByPeriod:
    def test_sorted_keys_and_skipped_missing_timestamps(self) -> None:
        records = [
            ("b", datetime(2024, 5, 2, tzinfo=UTC)),
            ("x", None),
            ("a", datetime(2024, 1, 15, tzinfo=UTC)),
            ("c", datetime(2024, 5, 30, tzinfo=UTC)),
        ]
        buckets = group_by_period(records, lambda r: r[1], Timeframe.MONTHLY)

        assert list(buckets) == ["2024-01", "2024-05"]
        assert [name for name, _ in buckets["2024-05"]] == ["b", "c"]

    def test_weekly_same_day_of_month_stays_separate(self) -> None:
        records = [
            datetime(2024, 1, 3, tzinfo=UTC),
            datetime(2024, 2, 3, tzinfo=UTC),
            datetime(2024, 3, 3, tzinfo=UTC),
        ]
        buckets = group_by_period(records, lambda r: r, Timeframe.WEEKLY)

        assert list(buckets) == ["2024-W01", "2024-W05", "2024-W09"]
        assert all(len(bucket) == 1 for bucket in buckets.values())

    def test_weekly_bucket_spans_month_boundary(self) -> None:
        records = [datetime(2024, 1, 31, tzinfo=UTC), datetime(2024, 2, 1, tzinfo=UTC)]
        buckets = group_by_period(records, lambda r: r, "weekly")

        assert list(buckets) == ["2024-W05"]
        assert len(buckets["2024-W05"]) == 2

    def test_empty(self) -> None:
        assert group_by_period([], lambda r: r, "monthly") == {}


class TestSummarize:
    def test_mean_and_count(self) -> None:
        buckets = {"2024-02": [4.0, None, 8.0], "2024-01": [1.0]}
        points = summarize(buckets, lambda v: v)

        assert [p.period for p in points] == ["2024-01", "2024-02"]
        assert points[1].value == pytest.approx(6.0)
        assert points[1].count == 3

    def test_all_missing_values(self) -> None:
        points = summarize({"2024": [None, None]}, lambda v: v)
        assert points[0].value == 0.0
        assert points[0].count == 2

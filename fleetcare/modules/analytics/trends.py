"""Period bucketing and per-period summary statistics."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from fleetcare.exceptions import ValidationException
from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.schemas import TrendPoint

T = TypeVar("T")


def parse_timeframe(value: str | Timeframe) -> Timeframe:
    try:
        return Timeframe(value)
    except ValueError:
        raise ValidationException(
            f"Unsupported timeframe {value!r}",
            details=[{"field": "timeframe", "message": "expected weekly, monthly or yearly"}],
        ) from None


def period_key(timestamp: datetime, timeframe: str | Timeframe) -> str:
    """Sortable bucket key: ``YYYY-Www``, ``YYYY-MM`` or ``YYYY``."""
    timeframe = parse_timeframe(timeframe)
    if timeframe == Timeframe.WEEKLY:
        week = math.ceil(timestamp.timetuple().tm_yday / 7)
        return f"{timestamp.year:04d}-W{week:02d}"
    if timeframe == Timeframe.YEARLY:
        return f"{timestamp.year:04d}"
    return f"{timestamp.year:04d}-{timestamp.month:02d}"


def group_by_period(
    records: Iterable[T],
    timestamp_of: Callable[[T], datetime | None],
    timeframe: str | Timeframe,
) -> dict[str, list[T]]:
    """Bucket records by period, keys in ascending order.

    Records without a timestamp are skipped.
    """
    timeframe = parse_timeframe(timeframe)
    buckets: dict[str, list[T]] = {}
    for record in records:
        timestamp = timestamp_of(record)
        if timestamp is None:
            continue
        buckets.setdefault(period_key(timestamp, timeframe), []).append(record)
    return {key: buckets[key] for key in sorted(buckets)}


def summarize(
    buckets: dict[str, list[T]], metric: Callable[[T], float | None]
) -> list[TrendPoint]:
    """Mean of ``metric`` per bucket; records yielding ``None`` are left out."""
    points = []
    for period in sorted(buckets):
        values = [v for v in (metric(r) for r in buckets[period]) if v is not None]
        points.append(
            TrendPoint(
                period=period,
                value=sum(values) / len(values) if values else 0.0,
                count=len(buckets[period]),
            )
        )
    return points

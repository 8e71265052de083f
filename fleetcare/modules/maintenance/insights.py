"""Maintenance insights over a ship's completed maintenance history."""

from __future__ import annotations

from collections import Counter

from fleetcare.models.enums import MaintenanceStatus, Timeframe
from fleetcare.modules.analytics.trends import group_by_period
from fleetcare.modules.maintenance.constants import COMMON_ISSUES_LIMIT
from fleetcare.modules.maintenance.schemas import (
    CommonIssue,
    MaintenanceInsights,
    MaintenanceTrendPoint,
)
from fleetcare.schemas.fleet import MaintenanceRecord


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _cost_efficiency(record: MaintenanceRecord) -> float:
    if not record.cost.estimated:
        return 0.0
    return (record.cost.estimated - (record.cost.actual or 0.0)) / record.cost.estimated


def _time_efficiency(record: MaintenanceRecord) -> float:
    estimated = record.estimated_duration_hours
    actual = record.duration_hours
    if not estimated or actual is None:
        return 0.0
    return (estimated - actual) / estimated


def calculate_maintenance_trends(
    records: list[MaintenanceRecord],
) -> list[MaintenanceTrendPoint]:
    """Monthly averages of actual cost and duration, oldest month first."""
    dated = [r for r in records if r.completed_at is not None]
    buckets = group_by_period(dated, lambda r: r.completed_at, Timeframe.MONTHLY)
    return [
        MaintenanceTrendPoint(
            month=period,
            average_cost=_mean([r.cost.actual or 0.0 for r in bucket]),
            average_duration=_mean([r.duration_hours or 0.0 for r in bucket]),
            maintenance_count=len(bucket),
        )
        for period, bucket in buckets.items()
    ]


def get_maintenance_insights(history: list[MaintenanceRecord]) -> MaintenanceInsights:
    completed = [m for m in history if m.status == MaintenanceStatus.COMPLETED]
    if not completed:
        return MaintenanceInsights()

    task_counts = Counter(task.name for m in completed for task in m.tasks)
    # Counter.most_common keeps first-seen order among ties
    common_issues = [
        CommonIssue(name=name, frequency=count)
        for name, count in task_counts.most_common(COMMON_ISSUES_LIMIT)
    ]

    return MaintenanceInsights(
        average_cost=_mean([m.cost.actual or 0.0 for m in completed]),
        average_duration=_mean([m.duration_hours or 0.0 for m in completed]),
        common_issues=common_issues,
        efficiency=_mean(
            [(_cost_efficiency(m) + _time_efficiency(m)) / 2 for m in completed]
        ),
        trends=calculate_maintenance_trends(completed),
    )

"""Tests for maintenance insights over completed history."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from fleetcare.models.enums import MaintenanceStatus
from fleetcare.modules.maintenance.insights import (
    calculate_maintenance_trends,
    get_maintenance_insights,
)
from fleetcare.schemas.fleet import MaintenanceCost, MaintenanceRecord, TaskRecord


def _completed(
    started: datetime,
    hours: float,
    estimated_cost: float,
    actual_cost: float,
    task_names: list[str],
    task_hours: float = 2.0,
) -> MaintenanceRecord:
    return MaintenanceRecord(
        status=MaintenanceStatus.COMPLETED,
        date=started,
        tasks=[TaskRecord(name=n, estimated_duration=task_hours) for n in task_names],
        cost=MaintenanceCost(estimated=estimated_cost, actual=actual_cost),
        started_at=started,
        completed_at=started + timedelta(hours=hours),
    )


class TestGetMaintenanceInsights:
    def test_no_completed_history(self) -> None:
        scheduled = MaintenanceRecord(
            date=datetime(2024, 1, 1, tzinfo=UTC), cost=MaintenanceCost(estimated=1000)
        )
        insights = get_maintenance_insights([scheduled])
        assert insights.average_cost == 0.0
        assert insights.common_issues == []
        assert insights.trends == []

    def test_averages_and_efficiency(self) -> None:
        jan = datetime(2024, 1, 10, tzinfo=UTC)
        history = [
            # cost eff 0.2, time eff (4 - 2) / 4 = 0.5
            _completed(jan, hours=2, estimated_cost=2000, actual_cost=1600, task_names=["A", "B"]),
            # cost eff 0.0, time eff (2 - 4) / 2 = -1.0
            _completed(jan + timedelta(days=40), hours=4, estimated_cost=1000, actual_cost=1000, task_names=["A"]),
        ]

        insights = get_maintenance_insights(history)

        assert insights.average_cost == pytest.approx(1300.0)
        assert insights.average_duration == pytest.approx(3.0)
        # mean of (0.2 + 0.5) / 2 and (0.0 - 1.0) / 2
        assert insights.efficiency == pytest.approx(-0.075)

    def test_common_issues_ranked_and_capped(self) -> None:
        start = datetime(2024, 3, 1, tzinfo=UTC)
        history = [
            _completed(start, 1, 1000, 900, ["Hull", "Engine", "Paint"]),
            _completed(start, 1, 1000, 900, ["Engine", "Radar", "Pump", "Valve"]),
            _completed(start, 1, 1000, 900, ["Engine", "Hull"]),
        ]

        issues = get_maintenance_insights(history).common_issues

        assert len(issues) == 5
        assert (issues[0].name, issues[0].frequency) == ("Engine", 3)
        assert (issues[1].name, issues[1].frequency) == ("Hull", 2)


class TestCalculateMaintenanceTrends:
    def test_monthly_buckets_oldest_first(self) -> None:
        records = [
            _completed(datetime(2024, 2, 5, tzinfo=UTC), 6, 1000, 1200, ["A"]),
            _completed(datetime(2024, 1, 5, tzinfo=UTC), 2, 1000, 800, ["A"]),
            _completed(datetime(2024, 1, 20, tzinfo=UTC), 4, 1000, 1000, ["A"]),
        ]

        trends = calculate_maintenance_trends(records)

        assert [t.month for t in trends] == ["2024-01", "2024-02"]
        assert trends[0].maintenance_count == 2
        assert trends[0].average_cost == pytest.approx(900.0)
        assert trends[0].average_duration == pytest.approx(3.0)
        assert trends[1].average_cost == pytest.approx(1200.0)

"""Tests for the fleet performance rollup."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from fleetcare.modules.analytics.performance import get_performance_metrics, overall_score
from fleetcare.modules.analytics.schemas import (
    FuelConsumptionAnalytics,
    FuelTrendPoint,
    RouteAnalytics,
    RouteTrendPoint,
)
from fleetcare.modules.maintenance.schemas import (
    CommonIssue,
    MaintenanceInsights,
    MaintenanceTrendPoint,
)

NOW = datetime(2024, 7, 1, 12, 0, tzinfo=UTC)


class TestOverallScore:
    def test_mean_of_route_and_fuel_scores(self) -> None:
        score = overall_score(
            RouteAnalytics(route_optimization=8.0),
            FuelConsumptionAnalytics(average_fuel_efficiency=-2.0),
        )
        assert score == pytest.approx(3.0)

    def test_empty_history_scores_zero(self) -> None:
        assert overall_score(RouteAnalytics(), FuelConsumptionAnalytics()) == 0.0


class TestGetPerformanceMetrics:
    def test_sections_carry_source_analytics(self) -> None:
        route_trends = [
            RouteTrendPoint(
                period="2024-06",
                fuel_consumption=11000,
                duration=24,
                efficiency=4.5,
                route_count=2,
            )
        ]
        fuel_trends = [FuelTrendPoint(period="2024-06", consumption=22000, efficiency=6.0)]
        insights = MaintenanceInsights(
            average_cost=1400,
            average_duration=3,
            common_issues=[CommonIssue(name="Hull Inspection", frequency=2)],
            efficiency=0.1,
            trends=[
                MaintenanceTrendPoint(
                    month="2024-06",
                    average_cost=1400,
                    average_duration=3,
                    maintenance_count=2,
                )
            ],
        )

        metrics = get_performance_metrics(
            RouteAnalytics(total_routes=2, route_optimization=10.0, trends=route_trends),
            FuelConsumptionAnalytics(average_fuel_efficiency=6.0, trends=fuel_trends),
            insights,
            now=NOW,
        )

        assert metrics.overall.score == pytest.approx(8.0)
        assert metrics.overall.last_updated == NOW
        assert metrics.route_efficiency.score == pytest.approx(10.0)
        assert metrics.route_efficiency.trends == route_trends
        assert metrics.fuel_efficiency.score == pytest.approx(6.0)
        assert metrics.fuel_efficiency.trends == fuel_trends
        assert metrics.maintenance_health.efficiency == pytest.approx(0.1)
        assert metrics.maintenance_health.common_issues[0].name == "Hull Inspection"
        assert metrics.maintenance_health.trends[0].maintenance_count == 2

    def test_defaults_timestamp_to_now(self) -> None:
        before = datetime.now(tz=UTC)
        metrics = get_performance_metrics(
            RouteAnalytics(), FuelConsumptionAnalytics(), MaintenanceInsights()
        )
        assert metrics.overall.last_updated >= before
        assert metrics.maintenance_health.common_issues == []

"""Fleet performance rollup over route, fuel and maintenance analytics."""

from __future__ import annotations

from datetime import UTC, datetime

from fleetcare.modules.analytics.schemas import (
    FuelConsumptionAnalytics,
    FuelEfficiencyScore,
    MaintenanceHealth,
    OverallScore,
    PerformanceMetrics,
    RouteAnalytics,
    RouteEfficiencyScore,
)
from fleetcare.modules.maintenance.schemas import MaintenanceInsights


def overall_score(route_analytics: RouteAnalytics, fuel_analytics: FuelConsumptionAnalytics) -> float:
    """Mean of route optimisation and average fuel efficiency, both in percent."""
    return (route_analytics.route_optimization + fuel_analytics.average_fuel_efficiency) / 2


def get_performance_metrics(
    route_analytics: RouteAnalytics,
    fuel_analytics: FuelConsumptionAnalytics,
    insights: MaintenanceInsights,
    now: datetime | None = None,
) -> PerformanceMetrics:
    now = now or datetime.now(tz=UTC)
    return PerformanceMetrics(
        overall=OverallScore(
            score=overall_score(route_analytics, fuel_analytics), last_updated=now
        ),
        route_efficiency=RouteEfficiencyScore(
            score=route_analytics.route_optimization, trends=route_analytics.trends
        ),
        fuel_efficiency=FuelEfficiencyScore(
            score=fuel_analytics.average_fuel_efficiency, trends=fuel_analytics.trends
        ),
        maintenance_health=MaintenanceHealth(
            efficiency=insights.efficiency,
            common_issues=insights.common_issues,
            trends=insights.trends,
        ),
    )

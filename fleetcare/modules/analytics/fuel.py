"""Fuel consumption analytics and a trailing-average next-period forecast."""

from __future__ import annotations

from collections.abc import Iterable

from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.constants import FORECAST_CONFIDENCE, FORECAST_PERIODS
from fleetcare.modules.analytics.route_metrics import analyzable_routes, average_fuel_efficiency
from fleetcare.modules.analytics.schemas import (
    FuelConsumptionAnalytics,
    FuelForecast,
    FuelTrendPoint,
)
from fleetcare.modules.analytics.trends import group_by_period, parse_timeframe
from fleetcare.schemas.fleet import RouteRecord


def forecast_next_period(trends: list[FuelTrendPoint]) -> FuelForecast:
    """Mean consumption of the last three periods."""
    recent = trends[-FORECAST_PERIODS:]
    if not recent:
        return FuelForecast()
    return FuelForecast(
        next_period=sum(t.consumption for t in recent) / len(recent),
        confidence=FORECAST_CONFIDENCE,
    )


def get_fuel_consumption_analytics(
    routes: Iterable[RouteRecord], timeframe: str | Timeframe = Timeframe.MONTHLY
) -> FuelConsumptionAnalytics:
    timeframe = parse_timeframe(timeframe)
    qualifying = analyzable_routes(routes)
    if not qualifying:
        return FuelConsumptionAnalytics()

    buckets = group_by_period(qualifying, lambda r: r.actual_departure, timeframe)
    trends = [
        FuelTrendPoint(
            period=period,
            consumption=sum(r.fuel_consumption.actual for r in bucket),
            efficiency=average_fuel_efficiency(bucket),
        )
        for period, bucket in buckets.items()
    ]

    return FuelConsumptionAnalytics(
        average_fuel_efficiency=average_fuel_efficiency(qualifying),
        total_consumption=sum(r.fuel_consumption.actual for r in qualifying),
        trends=trends,
        predictions=forecast_next_period(trends),
    )

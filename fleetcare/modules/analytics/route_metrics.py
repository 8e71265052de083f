"""Per-route and aggregate voyage efficiency metrics.

Only completed routes with actual times and actual fuel are scored. A route
whose metric would divide by zero is left out of that metric's sample rather
than producing infinity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.correlation import pearson_correlation
from fleetcare.modules.analytics.schemas import (
    RouteAnalytics,
    RouteTrendPoint,
    WeatherCorrelation,
)
from fleetcare.modules.analytics.trends import group_by_period, parse_timeframe, summarize
from fleetcare.schemas.fleet import RouteRecord

logger = logging.getLogger(__name__)


def _mean(values: Iterable[float | None]) -> float:
    sample = [v for v in values if v is not None]
    return sum(sample) / len(sample) if sample else 0.0


def analyzable_routes(routes: Iterable[RouteRecord]) -> list[RouteRecord]:
    return [r for r in routes if r.is_analyzable]


# ---------------------------------------------------------------------------
# Per-route metrics
# ---------------------------------------------------------------------------


def fuel_efficiency(route: RouteRecord) -> float | None:
    """Percent of estimated fuel saved; positive means better than predicted."""
    estimated = route.fuel_consumption.estimated
    actual = route.fuel_consumption.actual
    if actual is None or estimated <= 0:
        return None
    return (estimated - actual) / estimated * 100


def route_optimization(route: RouteRecord) -> float | None:
    """Percent of estimated voyage time saved."""
    estimated = route.estimated_duration_hours
    actual = route.actual_duration_hours
    if actual is None or estimated <= 0:
        return None
    return (estimated - actual) / estimated * 100


def performance_score(route: RouteRecord) -> float | None:
    """Blend of fuel efficiency (fraction) and time efficiency (ratio).

    The time term is ``estimated / actual`` rather than a percent difference;
    the two halves are deliberately on different scales.
    """
    estimated_fuel = route.fuel_consumption.estimated
    actual_fuel = route.fuel_consumption.actual
    actual_hours = route.actual_duration_hours
    if actual_fuel is None or estimated_fuel <= 0 or not actual_hours or actual_hours <= 0:
        return None
    fuel_fraction = (estimated_fuel - actual_fuel) / estimated_fuel
    time_ratio = route.estimated_duration_hours / actual_hours
    return (fuel_fraction + time_ratio) / 2 * 100


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


def average_fuel_efficiency(routes: Iterable[RouteRecord]) -> float:
    return _mean(fuel_efficiency(r) for r in routes)


def average_route_optimization(routes: Iterable[RouteRecord]) -> float:
    return _mean(route_optimization(r) for r in routes)


def weather_correlation(routes: Iterable[RouteRecord]) -> WeatherCorrelation:
    """Correlate wind speed and wave height against performance score."""
    wind, wave, scores = [], [], []
    for route in routes:
        score = performance_score(route)
        if route.weather is None or score is None:
            continue
        wind.append(route.weather.wind_speed)
        wave.append(route.weather.wave_height)
        scores.append(score)

    return WeatherCorrelation(
        wind_speed_correlation=pearson_correlation(wind, scores),
        wave_height_correlation=pearson_correlation(wave, scores),
        sample_size=len(scores),
    )


def route_trends(
    routes: Iterable[RouteRecord], timeframe: str | Timeframe
) -> list[RouteTrendPoint]:
    """Per-period mean fuel burn, duration and fuel efficiency."""
    buckets = group_by_period(routes, lambda r: r.actual_departure, timeframe)
    fuel = summarize(buckets, lambda r: r.fuel_consumption.actual)
    duration = summarize(buckets, lambda r: r.actual_duration_hours)
    efficiency = summarize(buckets, fuel_efficiency)
    return [
        RouteTrendPoint(
            period=f.period,
            fuel_consumption=f.value,
            duration=d.value,
            efficiency=e.value,
            route_count=f.count,
        )
        for f, d, e in zip(fuel, duration, efficiency)
    ]


def get_route_analytics(
    routes: Iterable[RouteRecord], timeframe: str | Timeframe = Timeframe.MONTHLY
) -> RouteAnalytics:
    """Efficiency, optimisation, weather correlation and trends for a route set."""
    timeframe = parse_timeframe(timeframe)
    qualifying = analyzable_routes(routes)
    if not qualifying:
        return RouteAnalytics(timeframe=timeframe)

    analytics = RouteAnalytics(
        total_routes=len(qualifying),
        average_fuel_efficiency=average_fuel_efficiency(qualifying),
        route_optimization=average_route_optimization(qualifying),
        weather_impact=weather_correlation(qualifying),
        timeframe=timeframe,
        trends=route_trends(qualifying, timeframe),
    )
    logger.debug(
        "Route analytics over %d routes (%s): fuel %.2f%%, time %.2f%%",
        analytics.total_routes,
        timeframe.value,
        analytics.average_fuel_efficiency,
        analytics.route_optimization,
    )
    return analytics

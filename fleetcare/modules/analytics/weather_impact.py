"""Weather impact analysis — effects, deviations, fuel penalty, recommendations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fleetcare.modules.analytics.constants import (
    CONDITION_EXTREME_TEMPERATURE,
    CONDITION_HIGH_WAVES,
    CONDITION_MODERATE,
    CONDITION_STRONG_WINDS,
    CONDITION_UNKNOWN,
    EXTREME_TEMPERATURE_DEVIATION,
    HIGH_WAVE_THRESHOLD,
    SEVERITY_RECOMMENDATIONS,
    STRONG_WIND_THRESHOLD,
)
from fleetcare.modules.analytics.route_metrics import analyzable_routes, weather_correlation
from fleetcare.modules.analytics.schemas import (
    FuelEfficiencyImpact,
    RouteDeviation,
    WeatherImpactReport,
)
from fleetcare.modules.maintenance.constants import (
    MAX_TEMPERATURE_DEVIATION,
    OPTIMAL_TEMPERATURE,
)
from fleetcare.modules.maintenance.factors import weather_severity
from fleetcare.schemas.fleet import RouteRecord, WeatherReading

logger = logging.getLogger(__name__)


def summarize_weather_condition(weather: WeatherReading | None) -> str:
    if weather is None:
        return CONDITION_UNKNOWN
    if weather.wind_speed > STRONG_WIND_THRESHOLD:
        return CONDITION_STRONG_WINDS
    if weather.wave_height > HIGH_WAVE_THRESHOLD:
        return CONDITION_HIGH_WAVES
    if abs(weather.temperature - OPTIMAL_TEMPERATURE) > EXTREME_TEMPERATURE_DEVIATION:
        return CONDITION_EXTREME_TEMPERATURE
    return CONDITION_MODERATE


def calculate_route_deviation(route: RouteRecord) -> float:
    """Distance sailed beyond (or short of) the plan, 0 without a voyage log."""
    if route.actual_distance is None:
        return 0.0
    return abs(route.actual_distance - route.distance)


def calculate_temperature_effect(routes: list[RouteRecord]) -> float:
    readings = [r.weather for r in routes if r.weather is not None]
    if not readings:
        return 0.0
    deviation = sum(abs(w.temperature - OPTIMAL_TEMPERATURE) for w in readings) / len(readings)
    return deviation / MAX_TEMPERATURE_DEVIATION * 100


def calculate_fuel_efficiency_impact(routes: list[RouteRecord]) -> FuelEfficiencyImpact:
    increases = [
        (r.fuel_consumption.actual - r.fuel_consumption.estimated)
        / r.fuel_consumption.estimated
        * 100
        for r in routes
        if r.fuel_consumption.actual is not None and r.fuel_consumption.estimated > 0
    ]
    if not increases:
        return FuelEfficiencyImpact()
    return FuelEfficiencyImpact(
        average_increase=sum(increases) / len(increases),
        peak_increase=max(increases),
    )


def generate_weather_recommendations(average_severity: float) -> list[str]:
    """Every threshold the severity exceeds adds its recommendation."""
    return [
        message
        for threshold, message in SEVERITY_RECOMMENDATIONS
        if average_severity > threshold
    ]


def _effect(correlation: float | None) -> float | None:
    return correlation * 100 if correlation is not None else None


def analyze_weather_impact(routes: Iterable[RouteRecord]) -> WeatherImpactReport:
    """How weather exposure relates to voyage performance for a route set.

    Wind and wave effects are ``None`` when their correlation is undefined.
    """
    qualifying = [r for r in analyzable_routes(routes) if r.weather is not None]
    if not qualifying:
        return WeatherImpactReport()

    correlation = weather_correlation(qualifying)
    average_severity = sum(weather_severity(r.weather) for r in qualifying) / len(qualifying)

    report = WeatherImpactReport(
        wind_speed_effect=_effect(correlation.wind_speed_correlation),
        wave_height_effect=_effect(correlation.wave_height_correlation),
        temperature_effect=calculate_temperature_effect(qualifying),
        average_severity=average_severity,
        route_deviations=[
            RouteDeviation(
                date=r.actual_departure,
                deviation=calculate_route_deviation(r),
                weather_condition=summarize_weather_condition(r.weather),
            )
            for r in qualifying
        ],
        fuel_efficiency_impact=calculate_fuel_efficiency_impact(qualifying),
        recommendations=generate_weather_recommendations(average_severity),
    )
    logger.debug(
        "Weather impact over %d routes: severity %.3f, %d recommendations",
        len(qualifying),
        average_severity,
        len(report.recommendations),
    )
    return report

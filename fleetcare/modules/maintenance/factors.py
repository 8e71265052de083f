"""Risk-factor extraction from a ship's route and maintenance history.

Every extractor degrades to zero-valued output on sparse history so that the
risk scorer never has to guard against missing data.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fleetcare.modules.maintenance.constants import (
    DAYS_PER_ROUTE_ESTIMATE,
    ENGINE_SERVICE_HOURS,
    MAX_TEMPERATURE_DEVIATION,
    MAX_WAVE_HEIGHT,
    MAX_WIND_SPEED,
    NO_HISTORY_MAINTENANCE_AGE_DAYS,
    OPTIMAL_TEMPERATURE,
    RECENT_ROUTE_MONTHS,
    RECENT_ROUTE_WINDOW,
)
from fleetcare.modules.maintenance.schemas import EngineHours, RiskFactors, RouteIntensity
from fleetcare.schemas.fleet import (
    MaintenanceRecord,
    RouteRecord,
    ShipSnapshot,
    WeatherReading,
)

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400.0


def extract_risk_factors(ship: ShipSnapshot, now: datetime | None = None) -> RiskFactors:
    """Build the factor bundle consumed by :func:`calculate_risk_score`."""
    now = now or datetime.now(tz=UTC)
    factors = RiskFactors(
        engine_hours=calculate_engine_hours(ship),
        route_intensity=calculate_route_intensity(ship.routes),
        weather_impact=calculate_weather_impact(ship.routes),
        last_maintenance_age=calculate_last_maintenance_age(ship.maintenance_history, now),
    )
    logger.debug("Extracted risk factors for ship %s: %s", ship.id, factors)
    return factors


def calculate_engine_hours(ship: ShipSnapshot) -> EngineHours:
    total = ship.engine_hours
    route_count = len(ship.routes)
    hours_per_day = total / (route_count * DAYS_PER_ROUTE_ESTIMATE) if route_count > 0 else 0.0
    return EngineHours(
        total=total,
        since_last_maintenance=total % ENGINE_SERVICE_HOURS,
        hours_per_day=hours_per_day,
    )


def recent_completed_routes(
    routes: list[RouteRecord], require_weather: bool = False
) -> list[RouteRecord]:
    """Return up to the 10 most recently arrived completed routes, newest first."""
    eligible = [
        r
        for r in routes
        if r.is_completed
        and r.has_actual_times
        and (not require_weather or r.weather is not None)
    ]
    eligible.sort(key=lambda r: r.actual_arrival, reverse=True)
    return eligible[:RECENT_ROUTE_WINDOW]


def calculate_route_intensity(routes: list[RouteRecord]) -> RouteIntensity:
    recent = recent_completed_routes(routes)
    if not recent:
        return RouteIntensity()

    total_distance = sum(r.distance for r in recent)
    speeds = []
    for route in recent:
        duration = route.actual_duration_hours
        # Zero-length voyages carry no speed information
        speeds.append(route.distance / duration if duration and duration > 0 else 0.0)

    return RouteIntensity(
        average_distance=total_distance / len(recent),
        average_speed=sum(speeds) / len(recent),
        routes_per_month=len(recent) / RECENT_ROUTE_MONTHS,
    )


def weather_severity(weather: WeatherReading | None) -> float:
    """Normalised severity of a single voyage's averaged weather."""
    if weather is None:
        return 0.0
    wind_factor = weather.wind_speed / MAX_WIND_SPEED
    wave_factor = weather.wave_height / MAX_WAVE_HEIGHT
    temp_factor = abs(weather.temperature - OPTIMAL_TEMPERATURE) / MAX_TEMPERATURE_DEVIATION
    return (wind_factor + wave_factor + temp_factor) / 3


def calculate_weather_impact(routes: list[RouteRecord]) -> float:
    recent = recent_completed_routes(routes, require_weather=True)
    if not recent:
        return 0.0
    return sum(weather_severity(r.weather) for r in recent) / len(recent)


def calculate_last_maintenance_age(
    history: list[MaintenanceRecord], now: datetime
) -> float:
    """Days since the most recent maintenance date, 180 with no history."""
    if not history:
        return NO_HISTORY_MAINTENANCE_AGE_DAYS
    latest = max(history, key=lambda m: m.date)
    return (now - latest.date).total_seconds() / _SECONDS_PER_DAY

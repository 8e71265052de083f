"""Rule-based route predictor.

A stand-in for a trained voyage model: great-circle distance, a per-ship-type
cruising speed, and a linear fuel model. Nothing in the scoring or analytics
engines depends on it.
"""

from __future__ import annotations

import math
from typing import Protocol

from fleetcare.modules.analytics.constants import (
    CARGO_FUEL_DIVISOR,
    DEFAULT_FUEL_RATE,
    DEFAULT_SPEED_KMH,
    EARTH_RADIUS_KM,
    FUEL_RATE_BY_SHIP_TYPE,
    SPEED_BY_SHIP_TYPE,
)
from fleetcare.modules.analytics.schemas import RouteEstimate


def haversine_distance_km(
    origin: tuple[float, float], destination: tuple[float, float]
) -> float:
    """Great-circle distance between two ``(longitude, latitude)`` pairs."""
    lon1, lat1 = origin
    lon2, lat2 = destination
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class RoutePredictor(Protocol):
    def estimate(
        self,
        ship_type: str | None,
        origin: tuple[float, float],
        destination: tuple[float, float],
        cargo_weight: float = 0.0,
    ) -> RouteEstimate: ...


class RuleBasedRoutePredictor:
    """Predict distance, duration and fuel from lookup tables."""

    def estimate(
        self,
        ship_type: str | None,
        origin: tuple[float, float],
        destination: tuple[float, float],
        cargo_weight: float = 0.0,
    ) -> RouteEstimate:
        distance = haversine_distance_km(origin, destination)
        type_key = str(getattr(ship_type, "value", ship_type) or "").upper()
        speed = SPEED_BY_SHIP_TYPE.get(type_key, DEFAULT_SPEED_KMH)
        fuel_rate = FUEL_RATE_BY_SHIP_TYPE.get(type_key, DEFAULT_FUEL_RATE)
        return RouteEstimate(
            distance=distance,
            duration_hours=distance / speed,
            fuel_consumption=fuel_rate * distance * (1 + cargo_weight / CARGO_FUEL_DIVISOR),
        )

"""Weighted risk scoring and maintenance-interval derivation."""

from __future__ import annotations

import logging
import math

from fleetcare.exceptions import ValidationException
from fleetcare.modules.maintenance.constants import (
    BASE_INTERVAL_DAYS,
    ENGINE_SERVICE_HOURS,
    MAX_MAINTENANCE_AGE_DAYS,
    MAX_ROUTES_PER_MONTH,
    MIN_INTERVAL_DAYS,
    RISK_WEIGHTS,
)
from fleetcare.modules.maintenance.schemas import RiskFactors

logger = logging.getLogger(__name__)


def _require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise ValidationException(
            f"Risk factor {name} must be a finite number",
            details=[{"field": name, "message": f"got {value!r}"}],
        )
    return value


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def normalize_factors(factors: RiskFactors) -> dict[str, float]:
    """Map each factor onto [0, 1] with capped ratios."""
    since_last = _require_finite(
        "engine_hours.since_last_maintenance", factors.engine_hours.since_last_maintenance
    )
    routes_per_month = (
        _require_finite("route_intensity.routes_per_month", factors.route_intensity.routes_per_month)
        if factors.route_intensity is not None
        else 0.0
    )
    weather = (
        _require_finite("weather_impact", factors.weather_impact)
        if factors.weather_impact is not None
        else 0.0
    )
    age = _require_finite("last_maintenance_age", factors.last_maintenance_age)

    return {
        "engine_hours": _clamp_unit(since_last / ENGINE_SERVICE_HOURS),
        "route_intensity": _clamp_unit(routes_per_month / MAX_ROUTES_PER_MONTH),
        "weather_impact": _clamp_unit(weather),
        "last_maintenance_age": _clamp_unit(age / MAX_MAINTENANCE_AGE_DAYS),
    }


def calculate_risk_score(factors: RiskFactors) -> float:
    """Combine normalised factors into a risk score in [0, 1]."""
    scores = normalize_factors(factors)
    risk = sum(scores[name] * weight for name, weight in RISK_WEIGHTS.items())
    return _clamp_unit(risk)


def maintenance_interval_days(risk_score: float) -> int:
    """Linear interpolation: risk 0 → 180 days, risk 1 → 30 days."""
    risk = _clamp_unit(_require_finite("risk_score", risk_score))
    # half-up rounding
    return max(MIN_INTERVAL_DAYS, math.floor(BASE_INTERVAL_DAYS * (1 - risk) + 0.5))

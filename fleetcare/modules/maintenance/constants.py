"""Maintenance engine constants — risk weights, intervals, task catalogue, pricing."""

from __future__ import annotations

# ── Factor extraction ───────────────────────────────────────────────────────
ENGINE_SERVICE_HOURS = 5000  # engine overhaul cycle
RECENT_ROUTE_WINDOW = 10  # most recent completed routes consulted
RECENT_ROUTE_MONTHS = 3  # window assumed to cover the recent routes
DAYS_PER_ROUTE_ESTIMATE = 30  # rough sea days attributed to each route
NO_HISTORY_MAINTENANCE_AGE_DAYS = 180.0

# Weather severity normalisers
MAX_WIND_SPEED = 50.0  # m/s
MAX_WAVE_HEIGHT = 10.0  # m
OPTIMAL_TEMPERATURE = 20.0  # °C
MAX_TEMPERATURE_DEVIATION = 40.0  # °C

# ── Risk scoring ────────────────────────────────────────────────────────────
# Weights must sum to 1.0 so the weighted sum stays within [0, 1].
RISK_WEIGHTS: dict[str, float] = {
    "engine_hours": 0.4,
    "route_intensity": 0.3,
    "weather_impact": 0.2,
    "last_maintenance_age": 0.1,
}
MAX_ROUTES_PER_MONTH = 10.0
MAX_MAINTENANCE_AGE_DAYS = 180.0

# ── Interval ────────────────────────────────────────────────────────────────
BASE_INTERVAL_DAYS = 180
MIN_INTERVAL_DAYS = 30

# ── Task planning ───────────────────────────────────────────────────────────
ENGINE_INSPECTION = "Engine Inspection"
HULL_INSPECTION = "Hull Inspection"
SAFETY_EQUIPMENT_CHECK = "Safety Equipment Check"
ENGINE_OIL_CHANGE = "Engine Oil Change"
WEATHER_DAMAGE_INSPECTION = "Weather Damage Inspection"
PROPULSION_SYSTEM_CHECK = "Propulsion System Check"

# (name, estimated hours): always scheduled, in this order
BASELINE_TASKS: list[tuple[str, float]] = [
    (ENGINE_INSPECTION, 4),
    (HULL_INSPECTION, 3),
    (SAFETY_EQUIPMENT_CHECK, 2),
]
TASK_DURATIONS: dict[str, float] = {
    **dict(BASELINE_TASKS),
    ENGINE_OIL_CHANGE: 2,
    WEATHER_DAMAGE_INSPECTION: 3,
    PROPULSION_SYSTEM_CHECK: 4,
}

OIL_CHANGE_HOURS_THRESHOLD = 4000
WEATHER_INSPECTION_THRESHOLD = 0.7
PROPULSION_CHECK_SPEED_THRESHOLD = 20.0  # km/h

# ── Cost estimation ─────────────────────────────────────────────────────────
BASE_FACILITY_COST = 1000.0
LABOR_RATE_PER_HOUR = 50.0
DEFAULT_PARTS_COST = 100.0
PARTS_COST: dict[str, float] = {
    ENGINE_OIL_CHANGE: 500.0,
    ENGINE_INSPECTION: 300.0,
    HULL_INSPECTION: 200.0,
}

# ── Insights ────────────────────────────────────────────────────────────────
COMMON_ISSUES_LIMIT = 5

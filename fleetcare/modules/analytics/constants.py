"""Analytics constants — weather thresholds, recommendations, predictor tables."""

from __future__ import annotations

# ── Weather condition labels (first match wins, in this order) ─────────────
STRONG_WIND_THRESHOLD = 15.0  # m/s
HIGH_WAVE_THRESHOLD = 3.0  # m
EXTREME_TEMPERATURE_DEVIATION = 15.0  # °C from optimal

CONDITION_STRONG_WINDS = "Strong Winds"
CONDITION_HIGH_WAVES = "High Waves"
CONDITION_EXTREME_TEMPERATURE = "Extreme Temperature"
CONDITION_MODERATE = "Moderate"
CONDITION_UNKNOWN = "Unknown"

# ── Recommendations (cumulative: every threshold exceeded contributes) ─────
SEVERITY_RECOMMENDATIONS: list[tuple[float, str]] = [
    (0.7, "Consider alternative routes during severe weather conditions"),
    (0.5, "Implement weather-based route optimization"),
    (0.3, "Monitor fuel consumption patterns in varying weather conditions"),
]

# ── Fuel forecasting ───────────────────────────────────────────────────────
FORECAST_PERIODS = 3  # trailing periods averaged for the next-period forecast
FORECAST_CONFIDENCE = 0.85

# ── Route predictor stand-in ───────────────────────────────────────────────
EARTH_RADIUS_KM = 6371.0
DEFAULT_SPEED_KMH = 20.0
SPEED_BY_SHIP_TYPE: dict[str, float] = {
    "CARGO": 20.0,
    "PASSENGER": 25.0,
    "TANKER": 15.0,
}
DEFAULT_FUEL_RATE = 30.0  # litres per km at zero cargo
FUEL_RATE_BY_SHIP_TYPE: dict[str, float] = {
    "CARGO": 30.0,
    "PASSENGER": 35.0,
    "TANKER": 40.0,
}
CARGO_FUEL_DIVISOR = 10000.0

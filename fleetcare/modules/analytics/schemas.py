"""Pydantic v2 schemas for fleet analytics results."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from fleetcare.models.enums import ShipType, Timeframe
from fleetcare.modules.maintenance.schemas import CommonIssue, MaintenanceTrendPoint

# ---------------------------------------------------------------------------
# Trends
# ---------------------------------------------------------------------------


class TrendPoint(BaseModel):
    """Mean of one metric within a single period bucket."""

    period: str
    value: float
    count: int


class RouteTrendPoint(BaseModel):
    period: str
    fuel_consumption: float
    duration: float
    efficiency: float
    route_count: int


# ---------------------------------------------------------------------------
# Route analytics
# ---------------------------------------------------------------------------


class WeatherCorrelation(BaseModel):
    """Pearson correlations against performance score.

    ``None`` marks an undefined, low-confidence correlation (fewer than two
    samples or zero variance).
    """

    wind_speed_correlation: float | None = None
    wave_height_correlation: float | None = None
    sample_size: int = 0


class RouteAnalytics(BaseModel):
    total_routes: int = 0
    average_fuel_efficiency: float = 0.0
    route_optimization: float = 0.0
    weather_impact: WeatherCorrelation = Field(default_factory=WeatherCorrelation)
    timeframe: Timeframe = Timeframe.MONTHLY
    trends: list[RouteTrendPoint] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Weather impact
# ---------------------------------------------------------------------------


class RouteDeviation(BaseModel):
    date: datetime | None
    deviation: float
    weather_condition: str


class FuelEfficiencyImpact(BaseModel):
    average_increase: float = 0.0
    peak_increase: float = 0.0


class WeatherImpactReport(BaseModel):
    wind_speed_effect: float | None = 0.0
    wave_height_effect: float | None = 0.0
    temperature_effect: float = 0.0
    average_severity: float = 0.0
    route_deviations: list[RouteDeviation] = Field(default_factory=list)
    fuel_efficiency_impact: FuelEfficiencyImpact = Field(default_factory=FuelEfficiencyImpact)
    recommendations: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Fuel consumption
# ---------------------------------------------------------------------------


class FuelTrendPoint(BaseModel):
    period: str
    consumption: float
    efficiency: float


class FuelForecast(BaseModel):
    next_period: float = 0.0
    confidence: float = 0.0


class FuelConsumptionAnalytics(BaseModel):
    average_fuel_efficiency: float = 0.0
    total_consumption: float = 0.0
    trends: list[FuelTrendPoint] = Field(default_factory=list)
    predictions: FuelForecast = Field(default_factory=FuelForecast)


# ---------------------------------------------------------------------------
# Performance metrics
# ---------------------------------------------------------------------------


class OverallScore(BaseModel):
    score: float = 0.0
    last_updated: datetime


class RouteEfficiencyScore(BaseModel):
    score: float = 0.0
    trends: list[RouteTrendPoint] = Field(default_factory=list)


class FuelEfficiencyScore(BaseModel):
    score: float = 0.0
    trends: list[FuelTrendPoint] = Field(default_factory=list)


class MaintenanceHealth(BaseModel):
    efficiency: float = 0.0
    common_issues: list[CommonIssue] = Field(default_factory=list)
    trends: list[MaintenanceTrendPoint] = Field(default_factory=list)


class PerformanceMetrics(BaseModel):
    """Fleet dashboard rollup of route, fuel and maintenance analytics."""

    overall: OverallScore
    route_efficiency: RouteEfficiencyScore
    fuel_efficiency: FuelEfficiencyScore
    maintenance_health: MaintenanceHealth


# ---------------------------------------------------------------------------
# Route predictor
# ---------------------------------------------------------------------------


class RouteEstimate(BaseModel):
    distance: float
    duration_hours: float
    fuel_consumption: float


class RouteEstimateRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    ship_type: ShipType | None = None
    origin: tuple[float, float] = Field(..., description="(longitude, latitude)")
    destination: tuple[float, float] = Field(..., description="(longitude, latitude)")
    cargo_weight: float = Field(default=0.0, ge=0)

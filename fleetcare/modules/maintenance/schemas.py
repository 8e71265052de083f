"""Pydantic v2 schemas for the maintenance engine and its API."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from fleetcare.models.enums import MaintenanceStatus, MaintenanceType
from fleetcare.schemas.fleet import MaintenanceCost, TaskRecord

# ---------------------------------------------------------------------------
# Factor bundle
# ---------------------------------------------------------------------------


class EngineHours(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    total: float = Field(default=0, ge=0)
    since_last_maintenance: float = Field(default=0, ge=0)
    hours_per_day: float = Field(default=0, ge=0)


class RouteIntensity(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    average_distance: float = 0.0
    average_speed: float = 0.0
    routes_per_month: float = 0.0


class RiskFactors(BaseModel):
    """Inputs to risk scoring. Optional parts contribute nothing when absent."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    engine_hours: EngineHours = Field(default_factory=EngineHours)
    route_intensity: RouteIntensity | None = None
    weather_impact: float | None = None
    last_maintenance_age: float = 0.0


# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------


class MaintenancePlan(BaseModel):
    """Scheduling decision returned to the caller for persistence."""

    model_config = ConfigDict(frozen=True)

    ship_id: uuid.UUID | None = None
    maintenance_type: MaintenanceType = MaintenanceType.ROUTINE
    date: datetime
    description: str
    tasks: list[TaskRecord]
    cost: MaintenanceCost
    risk_score: float = Field(ge=0, le=1)
    interval_days: int = Field(ge=30, le=180)
    factors: RiskFactors


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------


class CommonIssue(BaseModel):
    name: str
    frequency: int


class MaintenanceTrendPoint(BaseModel):
    month: str
    average_cost: float
    average_duration: float
    maintenance_count: int


class MaintenanceInsights(BaseModel):
    average_cost: float = 0.0
    average_duration: float = 0.0
    common_issues: list[CommonIssue] = Field(default_factory=list)
    efficiency: float = 0.0
    trends: list[MaintenanceTrendPoint] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API request / response
# ---------------------------------------------------------------------------


class TaskCreate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(..., min_length=1, max_length=255)
    estimated_duration: float = Field(..., ge=0)
    notes: str | None = None


class TaskListRequest(BaseModel):
    tasks: list[TaskCreate] = Field(..., min_length=1)


class CostEstimateRequest(BaseModel):
    tasks: list[TaskCreate] = Field(default_factory=list)


class CostEstimateResponse(BaseModel):
    estimated_cost: float


class RiskScoreResponse(BaseModel):
    risk_score: float
    interval_days: int


class MaintenanceStatusUpdate(BaseModel):
    status: MaintenanceStatus
    completed_task_ids: list[uuid.UUID] = Field(default_factory=list)


class MaintenanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    ship_id: uuid.UUID
    maintenance_type: MaintenanceType
    status: MaintenanceStatus
    date: datetime
    description: str
    tasks: list[TaskRecord]
    cost: MaintenanceCost
    started_at: datetime | None = None
    completed_at: datetime | None = None


class ScheduleResponse(BaseModel):
    maintenance: MaintenanceResponse
    risk_score: float
    interval_days: int
    factors: RiskFactors

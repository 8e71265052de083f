"""Immutable fleet snapshots consumed by the scoring and analytics engines.

The persistence layer converts ORM rows into these models before calling any
engine function, so the engines never see a half-written record. Every model
is frozen and rejects NaN / infinity at construction time.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from fleetcare.models.enums import (
    MaintenanceStatus,
    MaintenanceType,
    RouteStatus,
    ShipType,
    TaskStatus,
)

_SECONDS_PER_HOUR = 3600.0


def _ensure_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so snapshot arithmetic never mixes kinds."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_ensure_utc)]


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


class Location(Snapshot):
    port: str
    # [longitude, latitude]
    coordinates: tuple[
        Annotated[float, Field(ge=-180, le=180)],
        Annotated[float, Field(ge=-90, le=90)],
    ]


class WeatherReading(Snapshot):
    """Voyage-averaged weather as normalised by the weather collaborator."""

    wind_speed: float = Field(ge=0)
    wave_height: float = Field(ge=0)
    temperature: float


class FuelConsumption(Snapshot):
    estimated: float = Field(ge=0)
    actual: float | None = Field(default=None, ge=0)


class RouteRecord(Snapshot):
    id: uuid.UUID | None = None
    status: RouteStatus = RouteStatus.PLANNED
    departure: Location | None = None
    destination: Location | None = None
    distance: float = Field(ge=0)
    actual_distance: float | None = Field(default=None, ge=0)
    cargo_weight: float = Field(default=0, ge=0)
    fuel_consumption: FuelConsumption
    weather: WeatherReading | None = None
    estimated_departure: UtcDatetime
    estimated_arrival: UtcDatetime
    actual_departure: UtcDatetime | None = None
    actual_arrival: UtcDatetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == RouteStatus.COMPLETED

    @property
    def has_actual_times(self) -> bool:
        return self.actual_departure is not None and self.actual_arrival is not None

    @property
    def is_analyzable(self) -> bool:
        """Completed with every actual populated — eligible analytics input."""
        return (
            self.is_completed
            and self.has_actual_times
            and self.fuel_consumption.actual is not None
        )

    @property
    def estimated_duration_hours(self) -> float:
        return (self.estimated_arrival - self.estimated_departure).total_seconds() / _SECONDS_PER_HOUR

    @property
    def actual_duration_hours(self) -> float | None:
        if not self.has_actual_times:
            return None
        return (self.actual_arrival - self.actual_departure).total_seconds() / _SECONDS_PER_HOUR


# ---------------------------------------------------------------------------
# Maintenance
# ---------------------------------------------------------------------------


class TaskRecord(Snapshot):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.PENDING
    estimated_duration: float = Field(ge=0)
    actual_duration: float | None = Field(default=None, ge=0)
    notes: str | None = None


class PartRecord(Snapshot):
    name: str
    quantity: float = Field(ge=0)
    cost: float = Field(ge=0)


class TechnicianRecord(Snapshot):
    name: str
    specialization: str | None = None
    hours: float = Field(ge=0)


class MaintenanceCost(Snapshot):
    estimated: float = Field(ge=0)
    actual: float | None = Field(default=None, ge=0)


class MaintenanceRecord(Snapshot):
    id: uuid.UUID | None = None
    ship_id: uuid.UUID | None = None
    maintenance_type: MaintenanceType = MaintenanceType.ROUTINE
    status: MaintenanceStatus = MaintenanceStatus.SCHEDULED
    date: UtcDatetime
    description: str = ""
    tasks: list[TaskRecord] = Field(default_factory=list)
    parts: list[PartRecord] = Field(default_factory=list)
    technicians: list[TechnicianRecord] = Field(default_factory=list)
    cost: MaintenanceCost
    started_at: UtcDatetime | None = None
    completed_at: UtcDatetime | None = None

    @property
    def duration_hours(self) -> float | None:
        if self.started_at is None or self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds() / _SECONDS_PER_HOUR

    @property
    def estimated_duration_hours(self) -> float:
        return sum(task.estimated_duration for task in self.tasks)


# ---------------------------------------------------------------------------
# Ship
# ---------------------------------------------------------------------------


class ShipSnapshot(Snapshot):
    id: uuid.UUID | None = None
    name: str = ""
    ship_type: ShipType | None = None
    engine_hours: float = Field(default=0, ge=0)
    last_maintenance: UtcDatetime | None = None
    next_maintenance: UtcDatetime | None = None
    routes: list[RouteRecord] = Field(default_factory=list)
    maintenance_history: list[MaintenanceRecord] = Field(default_factory=list)

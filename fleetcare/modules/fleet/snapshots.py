"""ORM row → immutable snapshot conversion."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from fleetcare.models.maintenance import Maintenance
from fleetcare.models.route import Route
from fleetcare.models.ship import Ship
from fleetcare.schemas.fleet import (
    FuelConsumption,
    Location,
    MaintenanceCost,
    MaintenanceRecord,
    PartRecord,
    RouteRecord,
    ShipSnapshot,
    TaskRecord,
    TechnicianRecord,
    WeatherReading,
)

logger = logging.getLogger(__name__)


def _weather_average(weather: dict | None) -> WeatherReading | None:
    """Read the voyage-average weather, or ``None`` when it is absent or incomplete."""
    average = (weather or {}).get("average")
    if not average:
        return None
    try:
        return WeatherReading.model_validate(average)
    except ValidationError as exc:
        logger.warning(
            "Ignoring incomplete weather average (%d invalid fields)", exc.error_count()
        )
        return None


def route_to_record(route: Route) -> RouteRecord:
    return RouteRecord(
        id=route.id,
        status=route.status,
        departure=Location(
            port=route.departure_port, coordinates=tuple(route.departure_coordinates)
        ),
        destination=Location(
            port=route.destination_port, coordinates=tuple(route.destination_coordinates)
        ),
        distance=route.distance_km,
        actual_distance=route.actual_distance_km,
        cargo_weight=route.cargo_weight or 0,
        fuel_consumption=FuelConsumption(
            estimated=route.estimated_fuel, actual=route.actual_fuel
        ),
        weather=_weather_average(route.weather),
        estimated_departure=route.estimated_departure,
        estimated_arrival=route.estimated_arrival,
        actual_departure=route.actual_departure,
        actual_arrival=route.actual_arrival,
    )


def maintenance_to_record(maintenance: Maintenance) -> MaintenanceRecord:
    return MaintenanceRecord(
        id=maintenance.id,
        ship_id=maintenance.ship_id,
        maintenance_type=maintenance.maintenance_type,
        status=maintenance.status,
        date=maintenance.date,
        description=maintenance.description,
        tasks=[TaskRecord.model_validate(t) for t in maintenance.tasks or []],
        parts=[PartRecord.model_validate(p) for p in maintenance.parts or []],
        technicians=[TechnicianRecord.model_validate(t) for t in maintenance.technicians or []],
        cost=MaintenanceCost(
            estimated=float(maintenance.estimated_cost),
            actual=None if maintenance.actual_cost is None else float(maintenance.actual_cost),
        ),
        started_at=maintenance.started_at,
        completed_at=maintenance.completed_at,
    )


def ship_to_snapshot(ship: Ship) -> ShipSnapshot:
    """Snapshot a ship whose routes and maintenance history are already loaded."""
    return ShipSnapshot(
        id=ship.id,
        name=ship.name,
        ship_type=ship.ship_type,
        engine_hours=ship.engine_hours or 0,
        last_maintenance=ship.last_maintenance,
        next_maintenance=ship.next_maintenance,
        routes=[route_to_record(r) for r in ship.routes or []],
        maintenance_history=[maintenance_to_record(m) for m in ship.maintenance_history or []],
    )


def tasks_to_json(tasks: list[TaskRecord]) -> list[dict]:
    return [task.model_dump(mode="json") for task in tasks]

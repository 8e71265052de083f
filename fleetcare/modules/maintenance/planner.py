"""Maintenance task planning and cost estimation."""

from __future__ import annotations

from collections.abc import Iterable

from fleetcare.models.enums import TaskStatus
from fleetcare.modules.maintenance.constants import (
    BASE_FACILITY_COST,
    BASELINE_TASKS,
    DEFAULT_PARTS_COST,
    ENGINE_OIL_CHANGE,
    LABOR_RATE_PER_HOUR,
    OIL_CHANGE_HOURS_THRESHOLD,
    PARTS_COST,
    PROPULSION_CHECK_SPEED_THRESHOLD,
    PROPULSION_SYSTEM_CHECK,
    TASK_DURATIONS,
    WEATHER_DAMAGE_INSPECTION,
    WEATHER_INSPECTION_THRESHOLD,
)
from fleetcare.modules.maintenance.schemas import RiskFactors
from fleetcare.schemas.fleet import TaskRecord


def _pending(name: str) -> TaskRecord:
    return TaskRecord(
        name=name,
        status=TaskStatus.PENDING,
        estimated_duration=TASK_DURATIONS[name],
    )


def generate_maintenance_tasks(factors: RiskFactors) -> list[TaskRecord]:
    """Baseline inspections followed by factor-triggered tasks.

    Conditional tasks are independent of each other and always appear in
    the order oil change, weather damage, propulsion.
    """
    tasks = [_pending(name) for name, _ in BASELINE_TASKS]

    if factors.engine_hours.since_last_maintenance > OIL_CHANGE_HOURS_THRESHOLD:
        tasks.append(_pending(ENGINE_OIL_CHANGE))

    if (factors.weather_impact or 0.0) > WEATHER_INSPECTION_THRESHOLD:
        tasks.append(_pending(WEATHER_DAMAGE_INSPECTION))

    average_speed = factors.route_intensity.average_speed if factors.route_intensity else 0.0
    if average_speed > PROPULSION_CHECK_SPEED_THRESHOLD:
        tasks.append(_pending(PROPULSION_SYSTEM_CHECK))

    return tasks


def parts_cost(task_name: str) -> float:
    return PARTS_COST.get(task_name, DEFAULT_PARTS_COST)


def estimate_maintenance_cost(tasks: Iterable[TaskRecord] | None) -> float:
    """Facility base cost plus labour and parts for each task.

    Never returns less than the base facility cost, even for no tasks.
    """
    tasks = list(tasks or [])
    labor = sum(task.estimated_duration * LABOR_RATE_PER_HOUR for task in tasks)
    parts = sum(parts_cost(task.name) for task in tasks)
    return BASE_FACILITY_COST + labor + parts

"""Maintenance record lifecycle — status derivation, transitions, task edits, costing.

All functions are pure: they take snapshot values and return new values.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import datetime, timedelta

from fleetcare.exceptions import BusinessRuleException
from fleetcare.models.enums import MaintenanceStatus, TaskStatus
from fleetcare.modules.maintenance.constants import ENGINE_SERVICE_HOURS, LABOR_RATE_PER_HOUR
from fleetcare.modules.maintenance.planner import estimate_maintenance_cost
from fleetcare.schemas.fleet import (
    MaintenanceRecord,
    PartRecord,
    TaskRecord,
    TechnicianRecord,
)

ALLOWED_TRANSITIONS: dict[MaintenanceStatus, frozenset[MaintenanceStatus]] = {
    MaintenanceStatus.SCHEDULED: frozenset(
        {MaintenanceStatus.IN_PROGRESS, MaintenanceStatus.CANCELLED}
    ),
    MaintenanceStatus.IN_PROGRESS: frozenset(
        {MaintenanceStatus.COMPLETED, MaintenanceStatus.CANCELLED}
    ),
    MaintenanceStatus.COMPLETED: frozenset(),
    MaintenanceStatus.CANCELLED: frozenset(),
}


def derive_status(
    tasks: list[TaskRecord], current: MaintenanceStatus
) -> MaintenanceStatus:
    """Status implied by task progress; ``current`` when tasks imply nothing."""
    if not tasks:
        return current
    if all(task.status == TaskStatus.COMPLETED for task in tasks):
        return MaintenanceStatus.COMPLETED
    if any(task.status == TaskStatus.IN_PROGRESS for task in tasks):
        return MaintenanceStatus.IN_PROGRESS
    return current


def transition(
    current: MaintenanceStatus, target: MaintenanceStatus
) -> MaintenanceStatus:
    if current == target:
        return current
    if target not in ALLOWED_TRANSITIONS[current]:
        raise BusinessRuleException(
            f"Cannot move maintenance from {current.value} to {target.value}"
        )
    return target


def complete_tasks(
    tasks: list[TaskRecord], task_ids: Iterable[uuid.UUID]
) -> list[TaskRecord]:
    """Mark the given tasks COMPLETED; actual duration defaults to the estimate."""
    ids = set(task_ids)
    updated = []
    for task in tasks:
        if task.id in ids:
            task = task.model_copy(
                update={
                    "status": TaskStatus.COMPLETED,
                    "actual_duration": task.estimated_duration,
                }
            )
        updated.append(task)
    return updated


def add_tasks(record: MaintenanceRecord, new_tasks: Iterable[TaskRecord]) -> MaintenanceRecord:
    """Append tasks as PENDING and re-price the estimate over the full list."""
    tasks = list(record.tasks) + [
        task.model_copy(update={"status": TaskStatus.PENDING}) for task in new_tasks
    ]
    cost = record.cost.model_copy(update={"estimated": estimate_maintenance_cost(tasks)})
    return record.model_copy(update={"tasks": tasks, "cost": cost})


def calculate_total_cost(
    parts: Iterable[PartRecord], technicians: Iterable[TechnicianRecord]
) -> float:
    """Actual cost from consumed parts and technician hours."""
    parts_total = sum(part.cost * part.quantity for part in parts)
    labor_total = sum(tech.hours * LABOR_RATE_PER_HOUR for tech in technicians)
    return parts_total + labor_total


def next_maintenance_by_engine_hours(engine_hours: float, now: datetime) -> datetime:
    """When the engine reaches its next service boundary at continuous running."""
    hours_remaining = ENGINE_SERVICE_HOURS - (engine_hours % ENGINE_SERVICE_HOURS)
    return now + timedelta(hours=hours_remaining)

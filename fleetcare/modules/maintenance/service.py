"""MaintenanceService — persists scheduling decisions and lifecycle changes."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from fleetcare.exceptions import BusinessRuleException
from fleetcare.models.enums import MaintenanceStatus
from fleetcare.models.maintenance import Maintenance
from fleetcare.modules.fleet.repository import FleetRepository
from fleetcare.modules.fleet.snapshots import (
    maintenance_to_record,
    ship_to_snapshot,
    tasks_to_json,
)
from fleetcare.modules.maintenance import lifecycle
from fleetcare.modules.maintenance.scheduler import schedule_maintenance
from fleetcare.modules.maintenance.schemas import (
    MaintenancePlan,
    MaintenanceResponse,
    TaskCreate,
)
from fleetcare.schemas.fleet import TaskRecord

logger = logging.getLogger(__name__)

_TERMINAL_STATUSES = (MaintenanceStatus.COMPLETED, MaintenanceStatus.CANCELLED)


def _to_money(amount: float) -> Decimal:
    return Decimal(str(round(amount, 2)))


class MaintenanceService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repository = FleetRepository(db)

    async def schedule_maintenance(
        self, ship_id: uuid.UUID, now: datetime | None = None
    ) -> tuple[Maintenance, MaintenancePlan]:
        """Plan the next routine maintenance and record it against the ship.

        The maintenance row and the ship's ``next_maintenance`` are written in
        the same flush.
        """
        ship = await self.repository.get_ship(ship_id, with_history=True)
        plan = schedule_maintenance(ship_to_snapshot(ship), now)

        maintenance = Maintenance(
            ship_id=ship.id,
            maintenance_type=plan.maintenance_type,
            status=MaintenanceStatus.SCHEDULED,
            date=plan.date,
            description=plan.description,
            tasks=tasks_to_json(plan.tasks),
            parts=[],
            technicians=[],
            estimated_cost=_to_money(plan.cost.estimated),
        )
        self.db.add(maintenance)
        ship.next_maintenance = plan.date
        await self.db.flush()

        logger.info(
            "Scheduled maintenance %s for ship %s on %s (risk %.3f, %d tasks, est. %.2f)",
            maintenance.id,
            ship_id,
            plan.date.date().isoformat(),
            plan.risk_score,
            len(plan.tasks),
            plan.cost.estimated,
        )
        return maintenance, plan

    async def get_maintenance(self, maintenance_id: uuid.UUID) -> Maintenance:
        return await self.repository.get_maintenance(maintenance_id)

    async def get_maintenance_history(
        self, ship_id: uuid.UUID, status: MaintenanceStatus | None = None
    ) -> list[Maintenance]:
        await self.repository.get_ship(ship_id)
        return await self.repository.list_maintenance(ship_id, status)

    async def update_status(
        self,
        maintenance_id: uuid.UUID,
        status: MaintenanceStatus,
        completed_task_ids: list[uuid.UUID] | None = None,
        now: datetime | None = None,
    ) -> Maintenance:
        """Apply an explicit status change, then let task progress advance it further."""
        now = now or datetime.now(tz=UTC)
        maintenance = await self.repository.get_maintenance(maintenance_id)
        record = maintenance_to_record(maintenance)

        target = lifecycle.transition(record.status, status)
        tasks = record.tasks
        if completed_task_ids:
            tasks = lifecycle.complete_tasks(tasks, completed_task_ids)
            maintenance.tasks = tasks_to_json(tasks)

        if target != record.status:
            await self._enter_status(maintenance, target, now)

        derived = lifecycle.derive_status(tasks, target)
        if derived != target and derived in lifecycle.ALLOWED_TRANSITIONS[target]:
            await self._enter_status(maintenance, derived, now)
            target = derived

        await self.db.flush()
        logger.info(
            "Maintenance %s moved %s -> %s",
            maintenance_id,
            record.status.value,
            target.value,
        )
        return maintenance

    async def add_tasks(
        self, maintenance_id: uuid.UUID, new_tasks: list[TaskCreate]
    ) -> Maintenance:
        maintenance = await self.repository.get_maintenance(maintenance_id)
        if maintenance.status in _TERMINAL_STATUSES:
            raise BusinessRuleException(
                f"Cannot add tasks to {maintenance.status.value} maintenance"
            )

        record = lifecycle.add_tasks(
            maintenance_to_record(maintenance),
            [TaskRecord(**task.model_dump()) for task in new_tasks],
        )
        maintenance.tasks = tasks_to_json(record.tasks)
        maintenance.estimated_cost = _to_money(record.cost.estimated)
        await self.db.flush()
        return maintenance

    async def _enter_status(
        self, maintenance: Maintenance, status: MaintenanceStatus, now: datetime
    ) -> None:
        maintenance.status = status
        if status == MaintenanceStatus.IN_PROGRESS and maintenance.started_at is None:
            maintenance.started_at = now
        elif status == MaintenanceStatus.COMPLETED:
            record = maintenance_to_record(maintenance)
            maintenance.actual_cost = _to_money(lifecycle.calculate_total_cost(
                record.parts, record.technicians
            ))
            maintenance.completed_at = now
            ship = await self.repository.get_ship(maintenance.ship_id)
            ship.last_maintenance = now
            ship.next_maintenance = lifecycle.next_maintenance_by_engine_hours(
                ship.engine_hours or 0, now
            )


def to_response(maintenance: Maintenance) -> MaintenanceResponse:
    record = maintenance_to_record(maintenance)
    return MaintenanceResponse.model_validate(record, from_attributes=True)

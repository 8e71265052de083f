"""Maintenance scheduler — factors → risk → interval → tasks → cost."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from fleetcare.exceptions import NotFoundException
from fleetcare.models.enums import MaintenanceType
from fleetcare.modules.maintenance.factors import extract_risk_factors
from fleetcare.modules.maintenance.planner import (
    estimate_maintenance_cost,
    generate_maintenance_tasks,
)
from fleetcare.modules.maintenance.risk import calculate_risk_score, maintenance_interval_days
from fleetcare.modules.maintenance.schemas import MaintenancePlan
from fleetcare.schemas.fleet import MaintenanceCost, ShipSnapshot

logger = logging.getLogger(__name__)

ROUTINE_DESCRIPTION = "Scheduled routine maintenance"


def schedule_maintenance(
    ship: ShipSnapshot | None, now: datetime | None = None
) -> MaintenancePlan:
    """Decide when the next routine maintenance is due and what it involves.

    The plan is returned, not persisted; the caller stores the maintenance
    record and updates the ship's ``next_maintenance`` together.
    """
    if ship is None:
        raise NotFoundException("Ship not found")

    now = now or datetime.now(tz=UTC)
    factors = extract_risk_factors(ship, now)
    risk_score = calculate_risk_score(factors)
    interval_days = maintenance_interval_days(risk_score)
    tasks = generate_maintenance_tasks(factors)

    plan = MaintenancePlan(
        ship_id=ship.id,
        maintenance_type=MaintenanceType.ROUTINE,
        date=now + timedelta(days=interval_days),
        description=ROUTINE_DESCRIPTION,
        tasks=tasks,
        cost=MaintenanceCost(estimated=estimate_maintenance_cost(tasks)),
        risk_score=risk_score,
        interval_days=interval_days,
        factors=factors,
    )
    logger.debug(
        "Ship %s: risk %.3f -> %d days, %d tasks",
        ship.id,
        risk_score,
        interval_days,
        len(tasks),
    )
    return plan

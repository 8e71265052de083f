"""Maintenance API router — scheduling, lifecycle and cost estimation."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fleetcare.database.session import get_db
from fleetcare.models.enums import MaintenanceStatus
from fleetcare.modules.maintenance.planner import estimate_maintenance_cost
from fleetcare.modules.maintenance.risk import calculate_risk_score, maintenance_interval_days
from fleetcare.modules.maintenance.schemas import (
    CostEstimateRequest,
    CostEstimateResponse,
    MaintenanceResponse,
    MaintenanceStatusUpdate,
    RiskFactors,
    RiskScoreResponse,
    ScheduleResponse,
    TaskListRequest,
)
from fleetcare.modules.maintenance.service import MaintenanceService, to_response
from fleetcare.schemas.fleet import TaskRecord

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


# ---------------------------------------------------------------------------
# Stateless calculators (BEFORE /{maintenance_id} to avoid path conflicts)
# ---------------------------------------------------------------------------


@router.post("/risk-score", response_model=RiskScoreResponse)
async def score_risk(body: RiskFactors):
    risk = calculate_risk_score(body)
    return RiskScoreResponse(risk_score=risk, interval_days=maintenance_interval_days(risk))


@router.post("/cost-estimate", response_model=CostEstimateResponse)
async def estimate_cost(body: CostEstimateRequest):
    tasks = [TaskRecord(**task.model_dump()) for task in body.tasks]
    return CostEstimateResponse(estimated_cost=estimate_maintenance_cost(tasks))


# ---------------------------------------------------------------------------
# Per-ship scheduling and history
# ---------------------------------------------------------------------------


@router.post(
    "/ships/{ship_id}/schedule", response_model=ScheduleResponse, status_code=201
)
async def schedule_maintenance(
    ship_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    service = MaintenanceService(session)
    maintenance, plan = await service.schedule_maintenance(ship_id)
    return ScheduleResponse(
        maintenance=to_response(maintenance),
        risk_score=plan.risk_score,
        interval_days=plan.interval_days,
        factors=plan.factors,
    )


@router.get("/ships/{ship_id}/history", response_model=list[MaintenanceResponse])
async def get_maintenance_history(
    ship_id: uuid.UUID,
    status: MaintenanceStatus | None = Query(None),
    session: AsyncSession = Depends(get_db),
):
    service = MaintenanceService(session)
    history = await service.get_maintenance_history(ship_id, status)
    return [to_response(m) for m in history]


# ---------------------------------------------------------------------------
# Single record lifecycle
# ---------------------------------------------------------------------------


@router.get("/{maintenance_id}", response_model=MaintenanceResponse)
async def get_maintenance(
    maintenance_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
):
    service = MaintenanceService(session)
    return to_response(await service.get_maintenance(maintenance_id))


@router.patch("/{maintenance_id}/status", response_model=MaintenanceResponse)
async def update_maintenance_status(
    maintenance_id: uuid.UUID,
    body: MaintenanceStatusUpdate,
    session: AsyncSession = Depends(get_db),
):
    service = MaintenanceService(session)
    maintenance = await service.update_status(
        maintenance_id, body.status, body.completed_task_ids
    )
    return to_response(maintenance)


@router.post("/{maintenance_id}/tasks", response_model=MaintenanceResponse)
async def add_maintenance_tasks(
    maintenance_id: uuid.UUID,
    body: TaskListRequest,
    session: AsyncSession = Depends(get_db),
):
    service = MaintenanceService(session)
    maintenance = await service.add_tasks(maintenance_id, body.tasks)
    return to_response(maintenance)

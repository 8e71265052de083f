"""Analytics API router — voyage, maintenance and dashboard reports."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fleetcare.config import settings
from fleetcare.database.session import get_db
from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.predictor import RoutePredictor, RuleBasedRoutePredictor
from fleetcare.modules.analytics.schemas import (
    FuelConsumptionAnalytics,
    PerformanceMetrics,
    RouteAnalytics,
    RouteEstimate,
    RouteEstimateRequest,
    WeatherImpactReport,
)
from fleetcare.modules.analytics.service import AnalyticsService
from fleetcare.modules.maintenance.schemas import MaintenanceInsights

router = APIRouter(prefix="/analytics", tags=["analytics"])

_predictor: RoutePredictor = RuleBasedRoutePredictor()


@router.get("/route-efficiency", response_model=RouteAnalytics)
async def get_route_efficiency(
    ship_id: uuid.UUID = Query(...),
    timeframe: Timeframe = Query(Timeframe(settings.analytics_default_timeframe)),
    session: AsyncSession = Depends(get_db),
):
    service = AnalyticsService(session)
    return await service.get_route_efficiency(ship_id, timeframe)


@router.get("/fuel-consumption", response_model=FuelConsumptionAnalytics)
async def get_fuel_consumption(
    ship_id: uuid.UUID = Query(...),
    timeframe: Timeframe = Query(Timeframe(settings.analytics_default_timeframe)),
    session: AsyncSession = Depends(get_db),
):
    service = AnalyticsService(session)
    return await service.get_fuel_consumption(ship_id, timeframe)


@router.get("/maintenance-insights", response_model=MaintenanceInsights)
async def get_maintenance_insights(
    ship_id: uuid.UUID = Query(...),
    session: AsyncSession = Depends(get_db),
):
    service = AnalyticsService(session)
    return await service.get_maintenance_insights(ship_id)


@router.get("/weather-impact", response_model=WeatherImpactReport)
async def get_weather_impact(
    ship_id: uuid.UUID = Query(...),
    session: AsyncSession = Depends(get_db),
):
    service = AnalyticsService(session)
    return await service.get_weather_impact(ship_id)


@router.get("/performance-metrics", response_model=PerformanceMetrics)
async def get_performance_metrics(
    ship_id: uuid.UUID = Query(...),
    timeframe: Timeframe = Query(Timeframe(settings.analytics_default_timeframe)),
    session: AsyncSession = Depends(get_db),
):
    service = AnalyticsService(session)
    return await service.get_performance_metrics(ship_id, timeframe)


@router.post("/route-estimate", response_model=RouteEstimate)
async def estimate_route(body: RouteEstimateRequest):
    return _predictor.estimate(
        body.ship_type, body.origin, body.destination, body.cargo_weight
    )

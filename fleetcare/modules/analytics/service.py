"""AnalyticsService — loads a ship's voyage history and runs the analytics engines."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from fleetcare.models.enums import Timeframe
from fleetcare.modules.analytics.fuel import get_fuel_consumption_analytics
from fleetcare.modules.analytics.performance import get_performance_metrics
from fleetcare.modules.analytics.route_metrics import get_route_analytics
from fleetcare.modules.analytics.schemas import (
    FuelConsumptionAnalytics,
    PerformanceMetrics,
    RouteAnalytics,
    WeatherImpactReport,
)
from fleetcare.modules.analytics.trends import parse_timeframe
from fleetcare.modules.analytics.weather_impact import analyze_weather_impact
from fleetcare.modules.fleet.repository import FleetRepository
from fleetcare.modules.fleet.snapshots import maintenance_to_record, route_to_record
from fleetcare.modules.maintenance.insights import get_maintenance_insights
from fleetcare.modules.maintenance.schemas import MaintenanceInsights
from fleetcare.schemas.fleet import RouteRecord

logger = logging.getLogger(__name__)


class AnalyticsService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repository = FleetRepository(db)

    async def _completed_routes(self, ship_id: uuid.UUID) -> list[RouteRecord]:
        await self.repository.get_ship(ship_id)
        routes = await self.repository.list_completed_routes(ship_id)
        return [route_to_record(r) for r in routes]

    async def get_route_efficiency(
        self, ship_id: uuid.UUID, timeframe: str | Timeframe
    ) -> RouteAnalytics:
        timeframe = parse_timeframe(timeframe)
        routes = await self._completed_routes(ship_id)
        logger.info(
            "Route analytics for ship %s over %d completed routes (%s)",
            ship_id,
            len(routes),
            timeframe.value,
        )
        return get_route_analytics(routes, timeframe)

    async def get_fuel_consumption(
        self, ship_id: uuid.UUID, timeframe: str | Timeframe
    ) -> FuelConsumptionAnalytics:
        timeframe = parse_timeframe(timeframe)
        routes = await self._completed_routes(ship_id)
        return get_fuel_consumption_analytics(routes, timeframe)

    async def get_weather_impact(self, ship_id: uuid.UUID) -> WeatherImpactReport:
        routes = await self._completed_routes(ship_id)
        return analyze_weather_impact(routes)

    async def get_maintenance_insights(self, ship_id: uuid.UUID) -> MaintenanceInsights:
        await self.repository.get_ship(ship_id)
        history = await self.repository.list_maintenance(ship_id)
        return get_maintenance_insights([maintenance_to_record(m) for m in history])

    async def get_performance_metrics(
        self,
        ship_id: uuid.UUID,
        timeframe: str | Timeframe,
        now: datetime | None = None,
    ) -> PerformanceMetrics:
        """Route, fuel and maintenance analytics rolled into one dashboard view."""
        timeframe = parse_timeframe(timeframe)
        routes = await self._completed_routes(ship_id)
        history = await self.repository.list_maintenance(ship_id)

        metrics = get_performance_metrics(
            get_route_analytics(routes, timeframe),
            get_fuel_consumption_analytics(routes, timeframe),
            get_maintenance_insights([maintenance_to_record(m) for m in history]),
            now,
        )
        logger.info(
            "Performance metrics for ship %s: overall %.2f over %d routes",
            ship_id,
            metrics.overall.score,
            len(routes),
        )
        return metrics

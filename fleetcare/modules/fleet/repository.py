"""FleetRepository — read access to ships, routes and maintenance records."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fleetcare.exceptions import NotFoundException
from fleetcare.models.enums import MaintenanceStatus, RouteStatus
from fleetcare.models.maintenance import Maintenance
from fleetcare.models.route import Route
from fleetcare.models.ship import Ship


class FleetRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_ship(self, ship_id: uuid.UUID, with_history: bool = False) -> Ship:
        """Load a ship, optionally with routes and maintenance history."""
        query = select(Ship).where(Ship.id == ship_id)
        if with_history:
            query = query.options(
                selectinload(Ship.routes),
                selectinload(Ship.maintenance_history),
            )
        result = await self.db.execute(query)
        ship = result.scalar_one_or_none()
        if ship is None:
            raise NotFoundException(f"Ship {ship_id} not found")
        return ship

    async def get_maintenance(self, maintenance_id: uuid.UUID) -> Maintenance:
        result = await self.db.execute(
            select(Maintenance).where(Maintenance.id == maintenance_id)
        )
        maintenance = result.scalar_one_or_none()
        if maintenance is None:
            raise NotFoundException(f"Maintenance record {maintenance_id} not found")
        return maintenance

    async def list_completed_routes(self, ship_id: uuid.UUID) -> list[Route]:
        """Completed routes for a ship, most recent arrival first."""
        result = await self.db.execute(
            select(Route)
            .where(Route.ship_id == ship_id, Route.status == RouteStatus.COMPLETED)
            .order_by(Route.actual_arrival.desc())
        )
        return list(result.scalars().all())

    async def list_maintenance(
        self, ship_id: uuid.UUID, status: MaintenanceStatus | None = None
    ) -> list[Maintenance]:
        """Maintenance records for a ship, newest first."""
        query = select(Maintenance).where(Maintenance.ship_id == ship_id)
        if status is not None:
            query = query.where(Maintenance.status == status)
        result = await self.db.execute(query.order_by(Maintenance.date.desc()))
        return list(result.scalars().all())

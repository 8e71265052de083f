# Import all models so SQLAlchemy metadata is populated
from fleetcare.models.enums import (
    FuelType,
    MaintenanceStatus,
    MaintenanceType,
    RouteStatus,
    ShipType,
    TaskStatus,
    Timeframe,
)
from fleetcare.models.maintenance import Maintenance
from fleetcare.models.route import Route
from fleetcare.models.ship import Ship

__all__ = [
    "FuelType",
    "Maintenance",
    "MaintenanceStatus",
    "MaintenanceType",
    "Route",
    "RouteStatus",
    "Ship",
    "ShipType",
    "TaskStatus",
    "Timeframe",
]

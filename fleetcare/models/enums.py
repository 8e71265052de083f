import enum


class ShipType(str, enum.Enum):
    CARGO = "CARGO"
    TANKER = "TANKER"
    PASSENGER = "PASSENGER"
    CONTAINER = "CONTAINER"


class FuelType(str, enum.Enum):
    HFO = "HFO"
    MGO = "MGO"
    LNG = "LNG"


class RouteStatus(str, enum.Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class MaintenanceType(str, enum.Enum):
    ROUTINE = "ROUTINE"
    REPAIR = "REPAIR"
    EMERGENCY = "EMERGENCY"
    INSPECTION = "INSPECTION"


class MaintenanceStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"


class Timeframe(str, enum.Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

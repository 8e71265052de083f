"""Ship model — fleet registry with engine-hour counter."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Float, Numeric, String
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetcare.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from fleetcare.models.enums import FuelType, ShipType


class Ship(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "ships"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        SQLAlchemyEnum(ShipType, name="shiptype"),
        nullable=False,
    )
    capacity_tonnes: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    fuel_type: Mapped[FuelType] = mapped_column(
        SQLAlchemyEnum(FuelType, name="fueltype"),
        nullable=False,
        server_default="HFO",
    )
    engine_hours: Mapped[float] = mapped_column(Float, nullable=False, server_default="0")
    last_maintenance: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    next_maintenance: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    routes = relationship(
        "Route", back_populates="ship", lazy="noload", order_by="Route.actual_arrival"
    )
    maintenance_history = relationship(
        "Maintenance", back_populates="ship", lazy="noload", order_by="Maintenance.date"
    )

    __table_args__ = (
        CheckConstraint("engine_hours >= 0", name="ck_ships_engine_hours_non_negative"),
        CheckConstraint("capacity_tonnes >= 0", name="ck_ships_capacity_non_negative"),
    )

"""Route model — planned and completed voyages."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Index, String
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetcare.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from fleetcare.models.enums import RouteStatus


class Route(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "routes"

    ship_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("ships.id", ondelete="CASCADE"),
        nullable=False,
    )
    departure_port: Mapped[str] = mapped_column(String(255), nullable=False)
    departure_coordinates: Mapped[list] = mapped_column(JSONB, nullable=False)  # [lon, lat]
    destination_port: Mapped[str] = mapped_column(String(255), nullable=False)
    destination_coordinates: Mapped[list] = mapped_column(JSONB, nullable=False)
    status: Mapped[RouteStatus] = mapped_column(
        SQLAlchemyEnum(RouteStatus, name="routestatus"),
        nullable=False,
        server_default="PLANNED",
    )
    distance_km: Mapped[float] = mapped_column(Float, nullable=False)
    actual_distance_km: Mapped[float | None] = mapped_column(Float)
    cargo_weight: Mapped[float] = mapped_column(Float, nullable=False, server_default="0")
    estimated_fuel: Mapped[float] = mapped_column(Float, nullable=False)
    actual_fuel: Mapped[float | None] = mapped_column(Float)
    # {"average": {"wind_speed": .., "wave_height": .., "temperature": ..}}
    weather: Mapped[dict | None] = mapped_column(JSONB)
    estimated_departure: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    estimated_arrival: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    actual_departure: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_arrival: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    ship = relationship("Ship", back_populates="routes")

    __table_args__ = (
        CheckConstraint("distance_km >= 0", name="ck_routes_distance_non_negative"),
        CheckConstraint("estimated_fuel >= 0", name="ck_routes_estimated_fuel_non_negative"),
        CheckConstraint(
            "actual_fuel IS NULL OR actual_fuel >= 0",
            name="ck_routes_actual_fuel_non_negative",
        ),
        Index("ix_routes_ship_id", "ship_id"),
        Index("ix_routes_status", "status"),
        Index("ix_routes_ports", "departure_port", "destination_port"),
    )

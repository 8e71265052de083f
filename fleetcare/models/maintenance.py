"""Maintenance model — scheduled and completed maintenance events."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Numeric, Text
from sqlalchemy import Enum as SQLAlchemyEnum
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fleetcare.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from fleetcare.models.enums import MaintenanceStatus, MaintenanceType


class Maintenance(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "maintenance"

    ship_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("ships.id", ondelete="CASCADE"),
        nullable=False,
    )
    maintenance_type: Mapped[MaintenanceType] = mapped_column(
        SQLAlchemyEnum(MaintenanceType, name="maintenancetype"),
        nullable=False,
    )
    status: Mapped[MaintenanceStatus] = mapped_column(
        SQLAlchemyEnum(MaintenanceStatus, name="maintenancestatus"),
        nullable=False,
        server_default="SCHEDULED",
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Embedded lists: [{"id", "name", "status", "estimated_duration", "actual_duration"}]
    tasks: Mapped[list] = mapped_column(JSONB, nullable=False, server_default="[]")
    parts: Mapped[list] = mapped_column(JSONB, nullable=False, server_default="[]")
    technicians: Mapped[list] = mapped_column(JSONB, nullable=False, server_default="[]")
    estimated_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    actual_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    notes: Mapped[str | None] = mapped_column(Text)

    # Relationships
    ship = relationship("Ship", back_populates="maintenance_history")

    __table_args__ = (
        CheckConstraint("estimated_cost >= 0", name="ck_maintenance_estimated_cost_non_negative"),
        Index("ix_maintenance_ship_id", "ship_id"),
        Index("ix_maintenance_date", "date"),
        Index("ix_maintenance_status", "status"),
        Index("ix_maintenance_type", "maintenance_type"),
    )

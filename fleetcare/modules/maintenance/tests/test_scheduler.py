"""Tests for the maintenance scheduler pipeline."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from fleetcare.exceptions import NotFoundException
from fleetcare.models.enums import MaintenanceType, RouteStatus
from fleetcare.modules.maintenance.constants import (
    ENGINE_OIL_CHANGE,
    WEATHER_DAMAGE_INSPECTION,
)
from fleetcare.modules.maintenance.scheduler import ROUTINE_DESCRIPTION, schedule_maintenance
from fleetcare.schemas.fleet import (
    FuelConsumption,
    MaintenanceCost,
    MaintenanceRecord,
    RouteRecord,
    ShipSnapshot,
    WeatherReading,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _stormy_route(arrival: datetime) -> RouteRecord:
    departure = arrival - timedelta(hours=48)
    return RouteRecord(
        status=RouteStatus.COMPLETED,
        distance=480,
        fuel_consumption=FuelConsumption(estimated=5000, actual=5600),
        weather=WeatherReading(wind_speed=40, wave_height=8, temperature=-20),
        estimated_departure=departure,
        estimated_arrival=arrival,
        actual_departure=departure,
        actual_arrival=arrival,
    )


class TestScheduleMaintenance:
    def test_missing_ship_raises_not_found(self) -> None:
        with pytest.raises(NotFoundException, match="Ship not found"):
            schedule_maintenance(None, NOW)

    def test_high_engine_hours_no_routes(self) -> None:
        plan = schedule_maintenance(ShipSnapshot(engine_hours=4800), NOW)

        assert plan.factors.engine_hours.since_last_maintenance == 4800
        # 0.96 * 0.4 + 180 / 180 * 0.1
        assert plan.risk_score == pytest.approx(0.484)
        assert plan.interval_days == 93
        assert plan.date == NOW + timedelta(days=93)
        assert ENGINE_OIL_CHANGE in [t.name for t in plan.tasks]
        assert plan.cost.estimated == pytest.approx(2650.0)
        assert plan.cost.actual is None

    def test_severe_weather_adds_inspection(self) -> None:
        routes = [_stormy_route(NOW - timedelta(days=3 * i + 1)) for i in range(10)]
        ship = ShipSnapshot(engine_hours=1000, routes=routes)

        plan = schedule_maintenance(ship, NOW)

        assert plan.factors.weather_impact > 0.7
        assert WEATHER_DAMAGE_INSPECTION in [t.name for t in plan.tasks]

    def test_routine_plan_shape(self) -> None:
        history = [
            MaintenanceRecord(date=NOW - timedelta(days=10), cost=MaintenanceCost(estimated=1500))
        ]
        ship = ShipSnapshot(engine_hours=100, maintenance_history=history)

        plan = schedule_maintenance(ship, NOW)

        assert plan.maintenance_type == MaintenanceType.ROUTINE
        assert plan.description == ROUTINE_DESCRIPTION
        assert 30 <= plan.interval_days <= 180
        assert plan.cost.estimated >= 1000
        assert len(plan.tasks) == 3

    def test_fresh_ship_gets_long_interval(self) -> None:
        history = [MaintenanceRecord(date=NOW, cost=MaintenanceCost(estimated=1000))]
        plan = schedule_maintenance(ShipSnapshot(maintenance_history=history), NOW)
        assert plan.risk_score == 0.0
        assert plan.interval_days == 180

    def test_deterministic_for_same_snapshot(self) -> None:
        ship = ShipSnapshot(engine_hours=3333, routes=[_stormy_route(NOW)])
        first = schedule_maintenance(ship, NOW)
        second = schedule_maintenance(ship, NOW)
        assert first.risk_score == second.risk_score
        assert first.date == second.date
        assert [t.name for t in first.tasks] == [t.name for t in second.tasks]

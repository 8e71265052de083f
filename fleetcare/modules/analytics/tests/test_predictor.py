"""Tests for the rule-based route predictor."""

from __future__ import annotations

import pytest

from fleetcare.models.enums import ShipType
from fleetcare.modules.analytics.predictor import (
    RuleBasedRoutePredictor,
    haversine_distance_km,
)

ROTTERDAM = (4.4777, 51.9244)
HAMBURG = (9.9937, 53.5511)


class TestHaversineDistance:
    def test_same_point(self) -> None:
        assert haversine_distance_km(ROTTERDAM, ROTTERDAM) == 0.0

    def test_one_degree_of_longitude_on_equator(self) -> None:
        assert haversine_distance_km((0, 0), (1, 0)) == pytest.approx(111.19, abs=0.01)

    def test_symmetric(self) -> None:
        assert haversine_distance_km(ROTTERDAM, HAMBURG) == pytest.approx(
            haversine_distance_km(HAMBURG, ROTTERDAM)
        )

    def test_known_port_pair(self) -> None:
        assert haversine_distance_km(ROTTERDAM, HAMBURG) == pytest.approx(412, abs=5)


class TestRuleBasedRoutePredictor:
    def setup_method(self) -> None:
        self.predictor = RuleBasedRoutePredictor()

    def test_tanker_speed_and_fuel(self) -> None:
        estimate = self.predictor.estimate(ShipType.TANKER, (0, 0), (1, 0))
        assert estimate.duration_hours == pytest.approx(estimate.distance / 15)
        assert estimate.fuel_consumption == pytest.approx(estimate.distance * 40)

    def test_cargo_weight_increases_fuel(self) -> None:
        light = self.predictor.estimate("CARGO", ROTTERDAM, HAMBURG)
        loaded = self.predictor.estimate("CARGO", ROTTERDAM, HAMBURG, cargo_weight=5000)
        assert loaded.fuel_consumption == pytest.approx(light.fuel_consumption * 1.5)

    def test_unknown_type_uses_defaults(self) -> None:
        estimate = self.predictor.estimate(None, (0, 0), (1, 0))
        assert estimate.duration_hours == pytest.approx(estimate.distance / 20)
        assert estimate.fuel_consumption == pytest.approx(estimate.distance * 30)

    def test_container_ships_use_defaults(self) -> None:
        estimate = self.predictor.estimate(ShipType.CONTAINER, (0, 0), (0, 1))
        assert estimate.duration_hours == pytest.approx(estimate.distance / 20)

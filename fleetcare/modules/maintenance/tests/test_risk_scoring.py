"""Tests for risk scoring — normalisation, weighting, and interval derivation."""

from __future__ import annotations

import pytest

from fleetcare.exceptions import ValidationException
from fleetcare.modules.maintenance.risk import (
    calculate_risk_score,
    maintenance_interval_days,
    normalize_factors,
)
from fleetcare.modules.maintenance.schemas import EngineHours, RiskFactors, RouteIntensity


def _factors(
    since_last: float = 0.0,
    routes_per_month: float | None = 0.0,
    weather: float | None = 0.0,
    age: float = 0.0,
) -> RiskFactors:
    return RiskFactors(
        engine_hours=EngineHours(total=since_last, since_last_maintenance=since_last),
        route_intensity=(
            RouteIntensity(routes_per_month=routes_per_month)
            if routes_per_month is not None
            else None
        ),
        weather_impact=weather,
        last_maintenance_age=age,
    )


class TestNormalizeFactors:
    def test_engine_hours_ratio(self) -> None:
        scores = normalize_factors(_factors(since_last=4800))
        assert scores["engine_hours"] == pytest.approx(0.96)

    def test_ratios_are_capped_at_one(self) -> None:
        scores = normalize_factors(
            _factors(since_last=4999, routes_per_month=25, weather=3.0, age=400)
        )
        assert scores["route_intensity"] == 1.0
        assert scores["weather_impact"] == 1.0
        assert scores["last_maintenance_age"] == 1.0

    def test_negative_age_is_clamped_to_zero(self) -> None:
        # Maintenance dated in the future yields a negative age
        scores = normalize_factors(_factors(age=-12.5))
        assert scores["last_maintenance_age"] == 0.0

    def test_missing_optional_factors_contribute_zero(self) -> None:
        scores = normalize_factors(_factors(routes_per_month=None, weather=None))
        assert scores["route_intensity"] == 0.0
        assert scores["weather_impact"] == 0.0

    def test_non_finite_factor_rejected(self) -> None:
        factors = RiskFactors.model_construct(last_maintenance_age=float("nan"))
        with pytest.raises(ValidationException, match="last_maintenance_age"):
            normalize_factors(factors)


class TestCalculateRiskScore:
    def test_zero_factors_score_zero(self) -> None:
        assert calculate_risk_score(_factors()) == 0.0

    def test_saturated_factors_score_one(self) -> None:
        risk = calculate_risk_score(
            _factors(since_last=5000, routes_per_month=10, weather=1.0, age=180)
        )
        assert risk == pytest.approx(1.0)

    def test_weighted_sum(self) -> None:
        # 0.96 * 0.4 + 0 * 0.3 + 0 * 0.2 + 1.0 * 0.1
        risk = calculate_risk_score(_factors(since_last=4800, age=180))
        assert risk == pytest.approx(0.484)

    def test_route_intensity_weight(self) -> None:
        risk = calculate_risk_score(_factors(routes_per_month=5))
        assert risk == pytest.approx(0.15)

    def test_deterministic(self) -> None:
        factors = _factors(since_last=1234, routes_per_month=3.3, weather=0.41, age=77)
        assert calculate_risk_score(factors) == calculate_risk_score(factors)

    def test_always_within_unit_interval(self) -> None:
        for since_last, rpm, weather, age in [
            (0, 0, 0, 0),
            (4999, 100, 10, 10_000),
            (2500, 5, 0.5, 90),
            (0, 0, 0, -500),
        ]:
            risk = calculate_risk_score(_factors(since_last, rpm, weather, age))
            assert 0.0 <= risk <= 1.0


class TestMaintenanceIntervalDays:
    def test_zero_risk_is_base_interval(self) -> None:
        assert maintenance_interval_days(0.0) == 180

    def test_full_risk_is_minimum_interval(self) -> None:
        assert maintenance_interval_days(1.0) == 30

    def test_interval_never_below_minimum(self) -> None:
        assert maintenance_interval_days(0.95) == 30

    def test_half_up_rounding(self) -> None:
        # 180 * 0.875 = 157.5, 180 * 0.625 = 112.5
        assert maintenance_interval_days(0.125) == 158
        assert maintenance_interval_days(0.375) == 113

    def test_midpoint(self) -> None:
        assert maintenance_interval_days(0.5) == 90

    def test_monotone_non_increasing(self) -> None:
        intervals = [maintenance_interval_days(r / 100) for r in range(101)]
        assert intervals == sorted(intervals, reverse=True)

    def test_non_finite_risk_rejected(self) -> None:
        with pytest.raises(ValidationException):
            maintenance_interval_days(float("inf"))

"""Tests for Pearson correlation and its undefined cases."""

from __future__ import annotations

import pytest

from fleetcare.modules.analytics.correlation import pearson_correlation


class TestPearsonCorrelation:
    def test_perfect_positive(self) -> None:
        assert pearson_correlation([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)

    def test_perfect_negative(self) -> None:
        assert pearson_correlation([1, 2, 3], [30, 20, 10]) == pytest.approx(-1.0)

    def test_known_value(self) -> None:
        # sqrt(0.6)
        r = pearson_correlation([1, 2, 3, 4, 5], [2, 4, 5, 4, 5])
        assert r == pytest.approx(0.7745966, rel=1e-6)

    def test_zero_variance_is_undefined(self) -> None:
        assert pearson_correlation([5, 5, 5], [1, 2, 3]) is None
        assert pearson_correlation([1, 2, 3], [7.1, 7.1, 7.1]) is None

    def test_too_few_samples(self) -> None:
        assert pearson_correlation([], []) is None
        assert pearson_correlation([1.0], [2.0]) is None

    def test_length_mismatch(self) -> None:
        assert pearson_correlation([1, 2, 3], [1, 2]) is None

    def test_non_finite_input(self) -> None:
        assert pearson_correlation([1, float("nan"), 3], [1, 2, 3]) is None
        assert pearson_correlation([1, 2, 3], [1, float("inf"), 3]) is None

    def test_result_within_bounds(self) -> None:
        r = pearson_correlation([0.1, 0.2, 0.3], [0.30000000000000004, 0.6, 0.9])
        assert -1.0 <= r <= 1.0

    def test_large_offset_keeps_precision(self) -> None:
        assert pearson_correlation([1e6, 1e6 + 1, 1e6 + 2], [1, 2, 3]) == pytest.approx(1.0)
        assert pearson_correlation(
            [1000.0, 1000.001, 1000.002], [1, 2, 3]
        ) == pytest.approx(1.0, rel=1e-6)

    def test_large_offset_negative(self) -> None:
        r = pearson_correlation([5e7, 5e7 + 3, 5e7 + 6], [9.0, 6.0, 3.0])
        assert r == pytest.approx(-1.0)

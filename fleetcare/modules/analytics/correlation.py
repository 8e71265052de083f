"""Pearson correlation with an explicit undefined result."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _deviations(values: Sequence[float]) -> list[float]:
    mean = math.fsum(values) / len(values)
    return [v - mean for v in values]


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float | None:
    """Pearson's r, or ``None`` when it is undefined.

    Undefined covers mismatched lengths, fewer than two samples, zero variance
    in either sequence, and non-finite input. Sums are taken over deviations
    from the mean so large offsets do not cancel out the variance.
    """
    n = len(x)
    if n != len(y) or n < 2:
        return None
    if not all(math.isfinite(v) for v in x) or not all(math.isfinite(v) for v in y):
        return None
    # A constant sequence can leave rounding residue in its deviations
    if min(x) == max(x) or min(y) == max(y):
        return None

    dx = _deviations(x)
    dy = _deviations(y)
    ss_x = math.fsum(d * d for d in dx)
    ss_y = math.fsum(d * d for d in dy)
    if ss_x == 0 or ss_y == 0:
        return None

    r = math.fsum(a * b for a, b in zip(dx, dy)) / math.sqrt(ss_x * ss_y)
    return min(max(r, -1.0), 1.0)

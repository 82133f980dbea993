"""Linear trend fitted over the recent portfolio total."""

import math
from typing import Sequence

from networth.core.exceptions import RegressionError


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """
    Ordinary least squares fit of y = slope * x + intercept.

    Uses the two-pass mean-centred formulas.

    Raises:
        RegressionError: Empty or mismatched input, or a degenerate fit.
    """
    if not xs or not ys:
        raise RegressionError("Cannot fit a trend to an empty series")
    if len(xs) != len(ys):
        raise RegressionError(f"x/y length mismatch: {len(xs)} != {len(ys)}")

    n = len(xs)
    x_mean = sum(xs) / n
    y_mean = sum(ys) / n

    numerator = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, ys))
    denominator = sum((x - x_mean) ** 2 for x in xs)
    if denominator == 0:
        raise RegressionError("All x values are identical")

    slope = numerator / denominator
    if not math.isfinite(slope):
        raise RegressionError(f"Fitted slope is not finite: {slope}")
    return slope, y_mean - slope * x_mean


class TrendProjector:
    """Extrapolates the last `window` points of a series `horizon` days ahead."""

    def __init__(self, window: int = 300, horizon: int = 365):
        self._window = window
        self._horizon = horizon

    @property
    def horizon(self) -> int:
        return self._horizon

    def project(self, total: Sequence[float]) -> list[float]:
        """
        Project future values of the series.

        x runs 0..n-1 over the fitted points, so the first projected value
        sits at x = n, the day after the last observation.
        """
        recent = list(total[-self._window:]) if self._window > 0 else []
        xs = [float(i) for i in range(len(recent))]
        slope, intercept = linear_regression(xs, recent)
        n = len(recent)
        return [slope * (n + i) + intercept for i in range(self._horizon)]

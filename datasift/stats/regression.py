"""Provide straight-line regression over coordinate pairs.

This module supports:
- the ordinary least-squares fit used by statistics summaries,
- prediction and residuals against a fitted line, and
- standard-error diagnostics for reporting fit quality.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .descriptive import has_spread, variance
from .similarity import covariance, r2

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t

MIN_REGRESSION_POINTS = 2
MIN_DIAGNOSTIC_POINTS = 3

Coefficients = Tuple[float, float]


def linear_regression(
    points: Sequence[Tuple[float, float]],
) -> Optional[Coefficients]:
    """Fit ``y = intercept + slope * x`` by ordinary least squares.

    Args:
        points: Ordered ``(x, y)`` pairs.

    Returns:
        tuple[float, float] | None: ``(intercept, slope)``, or ``None`` with
        fewer than two points or when every x is identical.

    References:
        slope = cov(x, y) / var(x); intercept = mean(y) - slope * mean(x).
    """
    if len(points) < MIN_REGRESSION_POINTS:
        return None
    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    x, y = arr[:, 0], arr[:, 1]
    if not has_spread(x):
        return None
    var_x = variance(x)
    slope = covariance(arr) / var_x
    intercept = float(y.mean()) - slope * float(x.mean())
    return intercept, slope


def predict(coefficients: Coefficients, x: float) -> float:
    intercept, slope = coefficients
    return intercept + slope * x


def residuals(
    points: Sequence[Tuple[float, float]], coefficients: Coefficients
) -> List[float]:
    """Return ``y - yhat`` for every point, in order."""
    return [y - predict(coefficients, x) for x, y in points]


def regression_diagnostics(
    points: Sequence[Tuple[float, float]],
    min_points: int = MIN_DIAGNOSTIC_POINTS,
) -> Optional[Dict[str, Optional[float]]]:
    """Fit a line and report its scatter diagnostics.

    Args:
        points: Ordered ``(x, y)`` pairs.
        min_points (int, optional): Minimum number of pairs required.
            Defaults to ``3`` so at least one degree of freedom remains.

    Returns:
        dict | None: Keys ``m`` (slope), ``b`` (intercept), ``r2``,
        ``se_m``, ``se_b``, ``ci95_m``, ``ci95_b`` (95% half-widths),
        ``p_m`` (two-sided p-value for the slope), ``n``, ``dof``, ``mse``,
        ``ssxx`` and ``xbar``. ``None`` when the line cannot be fitted.

    Note:
        ``ci95_*`` and ``p_m`` need scipy's Student t distribution and are
        ``None`` when scipy is not installed. ``r2`` is ``None`` when y has
        no spread.
    """
    if len(points) < max(min_points, MIN_REGRESSION_POINTS):
        return None
    coefficients = linear_regression(points)
    if coefficients is None:
        return None
    b, m = coefficients

    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    x, y = arr[:, 0], arr[:, 1]
    n = int(len(x))
    resid = y - (m * x + b)
    sse = float(np.sum(resid**2))

    dof = n - 2
    xbar = float(np.mean(x))
    ssxx = float(np.sum((x - xbar) ** 2))
    mse = sse / dof if dof > 0 else None

    se_m = None
    se_b = None
    ci95_m = None
    ci95_b = None
    p_m = None

    if mse is not None and ssxx > 0:
        se_m = math.sqrt(mse / ssxx)
        se_b = math.sqrt(mse * (1.0 / n + (xbar**2) / ssxx))

        if HAVE_SCIPY:
            t_crit = float(student_t.ppf(0.975, dof))
            ci95_m = t_crit * se_m
            ci95_b = t_crit * se_b
            if se_m > 0:
                p_m = float(2 * (1 - student_t.cdf(abs(m / se_m), dof)))
            else:
                p_m = 0.0

    return {
        "m": float(m),
        "b": float(b),
        "r2": r2(arr),
        "se_m": se_m,
        "se_b": se_b,
        "ci95_m": ci95_m,
        "ci95_b": ci95_b,
        "p_m": p_m,
        "n": n,
        "dof": dof,
        "mse": mse,
        "ssxx": ssxx,
        "xbar": xbar,
    }

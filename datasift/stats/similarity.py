"""Measure how two coordinates move together across a list of points."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .descriptive import has_spread, population_stdev


def _split_axes(points: Sequence[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    return arr[:, 0], arr[:, 1]


def covariance(points: Sequence[Tuple[float, float]]) -> Optional[float]:
    """Population covariance: mean of ``(x - mean_x) * (y - mean_y)``."""
    if len(points) == 0:
        return None
    x, y = _split_axes(points)
    return float(np.mean((x - x.mean()) * (y - y.mean())))


def correlation(points: Sequence[Tuple[float, float]]) -> Optional[float]:
    """Pearson correlation; ``None`` when either axis has no spread."""
    if len(points) == 0:
        return None
    x, y = _split_axes(points)
    if not has_spread(x) or not has_spread(y):
        return None
    sx = population_stdev(x)
    sy = population_stdev(y)
    cov = covariance(points)
    return cov / (sx * sy)


def r2(points: Sequence[Tuple[float, float]]) -> Optional[float]:
    """Coefficient of determination of the straight-line fit."""
    corr = correlation(points)
    if corr is None:
        return None
    return corr**2

"""Build the statistics snapshot that chart overlays are drawn from.

A :class:`Statistics` value bundles the regression line, its R² and the
per-axis descriptive numbers for one ``Data`` value. It also carries the
extremal data points and the matching points on the regression line, so a
renderer can draw the fitted segment without recomputing anything.

The snapshot is recomputed wholesale whenever the data changes (new column
selection, new range filter); it is never updated in place.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd

from ..schema import Data, Filter, Point
from .descriptive import describe, sample_stdev
from .regression import MIN_REGRESSION_POINTS
from .similarity import r2 as r_squared

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Regression and descriptive summary of a list of points.

    Attributes:
        m: Slope of the least-squares line.
        b: Intercept of the least-squares line.
        n: Number of points.
        r2: Squared Pearson correlation, ``None`` when y has no spread.
        x_min, x_max: Extent of the x values.
        x_mean, y_mean: Arithmetic means per axis.
        x_stdev, y_stdev: SAMPLE standard deviations (``n - 1`` divisor).
            :func:`datasift.stats.standard_deviation` divides by ``n``
            instead; the two are deliberately different.
        left_data_point, right_data_point: First data points whose x equals
            ``x_min`` and ``x_max``.
        left_regression_point, right_regression_point: The fitted line
            evaluated at ``x_min`` and ``x_max``.
    """

    m: float
    b: float
    n: int
    r2: Optional[float]
    x_min: float
    x_max: float
    x_mean: float
    y_mean: float
    x_stdev: float
    y_stdev: float
    left_data_point: Point
    right_data_point: Point
    left_regression_point: Point
    right_regression_point: Point

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def _first_point_at(data: Sequence[Point], x_value: float) -> Optional[Point]:
    return next(((x, y) for x, y in data if x == x_value), None)


def statistics(data: Data) -> Optional[Statistics]:
    """Compute the summary snapshot for ``data``.

    Args:
        data: Ordered ``(x, y)`` pairs.

    Returns:
        Statistics | None: ``None`` with fewer than two points, when a
        coordinate is NaN or infinite, or when all x values coincide (the
        regression determinant vanishes).

    Note:
        The slope and intercept come from the normal-equation determinant
        ``n * Σx² - (Σx)²``, which is equivalent to the covariance form in
        :func:`datasift.stats.linear_regression`.
    """
    n = len(data)
    if n < MIN_REGRESSION_POINTS:
        return None

    arr = np.asarray(data, dtype=float).reshape(-1, 2)
    if not np.all(np.isfinite(arr)):
        logger.debug("Non-finite coordinates in %d points", n)
        return None
    x, y = arr[:, 0], arr[:, 1]
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xx = float(np.sum(x * x))
    sum_xy = float(np.sum(x * y))

    x_min = float(np.min(x))
    x_max = float(np.max(x))

    det = n * sum_xx - sum_x * sum_x
    if x_min == x_max or det == 0.0:
        logger.debug("Regression determinant is zero for %d points", n)
        return None
    m = (n * sum_xy - sum_x * sum_y) / det
    b = (sum_xx * sum_y - sum_x * sum_xy) / det

    points = [(float(px), float(py)) for px, py in arr]

    return Statistics(
        m=m,
        b=b,
        n=n,
        r2=r_squared(arr),
        x_min=x_min,
        x_max=x_max,
        x_mean=sum_x / n,
        y_mean=sum_y / n,
        x_stdev=sample_stdev(x),
        y_stdev=sample_stdev(y),
        left_data_point=_first_point_at(points, x_min),
        right_data_point=_first_point_at(points, x_max),
        left_regression_point=(x_min, b + m * x_min),
        right_regression_point=(x_max, b + m * x_max),
    )


def filter_data(data_filter: Filter, data: Data) -> Data:
    """Keep points with ``x_min <= x <= x_max``.

    When either bound is missing the data is returned unchanged; there is
    no one-sided filtering.
    """
    if data_filter.x_min is None or data_filter.x_max is None:
        return data
    lo, hi = data_filter.x_min, data_filter.x_max
    return [(x, y) for x, y in data if lo <= x <= hi]


def describe_frame(data: Data) -> pd.DataFrame:
    """Tabulate :func:`describe` for both axes of ``data``.

    Returns:
        pandas.DataFrame: One row per axis, indexed ``x`` and ``y``.
        Undefined measures appear as missing values.
    """
    arr = np.asarray(data, dtype=float).reshape(-1, 2)
    rows = {"x": describe(arr[:, 0]), "y": describe(arr[:, 1])}
    return pd.DataFrame.from_dict(rows, orient="index")

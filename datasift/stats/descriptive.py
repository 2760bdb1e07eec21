"""Provide univariate descriptive statistics.

Every function returns ``None`` when the measure is undefined for its input
(empty sequences, zero spread). No function raises on degenerate data and no
function returns NaN.

Two standard deviations exist side by side:

- :func:`population_stdev` (alias :func:`standard_deviation`) divides by
  ``n``;
- :func:`sample_stdev` divides by ``n - 1``.

They give different numbers for the same input and are kept as separate
named operations on purpose. The statistics summary uses the sample form.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Hashable, Optional, Sequence, Tuple

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def _finite_or_none(value: float) -> Optional[float]:
    value = float(value)
    return value if math.isfinite(value) else None


def has_spread(values: Sequence[float]) -> bool:
    """True when ``values`` holds at least two distinct numbers.

    Compares the raw extremes, so constant float data never passes through
    a variance that is off by rounding.
    """
    arr = _as_array(values)
    return arr.size > 0 and bool(np.min(arr) != np.max(arr))


def mean(values: Sequence[float]) -> Optional[float]:
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return float(np.mean(arr))


def median(values: Sequence[float]) -> Optional[float]:
    """Middle value of the sorted input, or the mean of the two middles."""
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return float(np.median(arr))


def mode(values: Sequence[Hashable]) -> Optional[Tuple[Hashable, int]]:
    """Return the most frequent value and its count.

    Ties are broken by first appearance in ``values``, so repeated calls on
    the same input always agree.
    """
    if len(values) == 0:
        return None
    value, count = Counter(values).most_common(1)[0]
    return value, count


def geometric_mean(values: Sequence[float]) -> Optional[float]:
    """nth root of the product of ``values``.

    Returns ``None`` when the product is negative, since the root is then
    not taken as a real number. A zero entry gives ``0.0``. The root is
    computed in log space so long lists neither overflow nor underflow.
    """
    arr = _as_array(values)
    if arr.size == 0:
        return None
    if np.any(arr == 0):
        return 0.0
    if np.count_nonzero(arr < 0) % 2:
        return None
    with np.errstate(all="ignore"):
        result = np.exp(np.mean(np.log(np.abs(arr))))
    return _finite_or_none(result)


def harmonic_mean(values: Sequence[float]) -> Optional[float]:
    arr = _as_array(values)
    if arr.size == 0:
        return None
    with np.errstate(all="ignore"):
        reciprocal_sum = float(np.sum(1.0 / arr))
    if reciprocal_sum == 0.0:
        return None
    if math.isinf(reciprocal_sum):
        # a zero entry drives the harmonic mean to zero
        return 0.0
    return _finite_or_none(arr.size / reciprocal_sum)


def weighted_mean(pairs: Sequence[Tuple[float, float]]) -> Optional[float]:
    """Weighted mean of ``(weight, value)`` pairs."""
    if len(pairs) == 0:
        return None
    arr = np.asarray(pairs, dtype=float).reshape(-1, 2)
    weights, vals = arr[:, 0], arr[:, 1]
    total = float(np.sum(weights))
    if total == 0.0:
        return None
    return _finite_or_none(np.sum(weights * vals) / total)


def variance(values: Sequence[float]) -> Optional[float]:
    """Population variance: mean squared deviation from the mean."""
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return float(np.var(arr, ddof=0))


def sample_variance(values: Sequence[float]) -> Optional[float]:
    """Variance with the ``n - 1`` divisor; needs at least two values."""
    arr = _as_array(values)
    if arr.size < 2:
        return None
    return float(np.var(arr, ddof=1))


def population_stdev(values: Sequence[float]) -> Optional[float]:
    var = variance(values)
    if var is None:
        return None
    return math.sqrt(var)


standard_deviation = population_stdev


def sample_stdev(values: Sequence[float]) -> Optional[float]:
    var = sample_variance(values)
    if var is None:
        return None
    return math.sqrt(var)


def _mean_deviation_from(arr: np.ndarray, center: float) -> float:
    return float(np.mean(np.abs(arr - center)))


def mean_absolute_deviation(values: Sequence[float]) -> Optional[float]:
    """Mean of ``|x - mean|``."""
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return _mean_deviation_from(arr, float(np.mean(arr)))


def median_absolute_deviation(values: Sequence[float]) -> Optional[float]:
    """Mean of ``|x - median|``.

    Note:
        This averages the deviations rather than taking their median, so it
        differs from ``scipy.stats.median_abs_deviation``.
    """
    arr = _as_array(values)
    if arr.size == 0:
        return None
    return _mean_deviation_from(arr, float(np.median(arr)))


def skewness(values: Sequence[float]) -> Optional[float]:
    """Mean cubed z-score, using the population standard deviation."""
    arr = _as_array(values)
    if not has_spread(arr):
        return None
    sd = population_stdev(arr)
    z = (arr - float(np.mean(arr))) / sd
    return float(np.mean(z**3))


def z_score(x: float, mean: float, stdev: float) -> float:
    """Return ``(x - mean) / stdev``.

    A zero ``stdev`` is not guarded: the result is an infinity (or NaN when
    ``x == mean``). Callers decide what to do with a flat distribution.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(x - mean) / np.float64(stdev))


def describe(values: Sequence[float]) -> Dict[str, Optional[float]]:
    """Collect every univariate measure for ``values`` in one mapping.

    Returns:
        dict[str, float | None]: Keys ``n``, ``mean``, ``median``,
        ``variance``, ``population_stdev``, ``sample_stdev``,
        ``mean_absolute_deviation``, ``median_absolute_deviation``,
        ``skewness``, ``min`` and ``max``. Undefined measures are ``None``.
    """
    arr = _as_array(values)
    empty = arr.size == 0
    return {
        "n": int(arr.size),
        "mean": mean(arr),
        "median": median(arr),
        "variance": variance(arr),
        "population_stdev": population_stdev(arr),
        "sample_stdev": sample_stdev(arr),
        "mean_absolute_deviation": mean_absolute_deviation(arr),
        "median_absolute_deviation": median_absolute_deviation(arr),
        "skewness": skewness(arr),
        "min": None if empty else float(np.min(arr)),
        "max": None if empty else float(np.max(arr)),
    }

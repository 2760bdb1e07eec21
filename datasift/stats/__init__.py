"""
Statistical utilities for tabular coordinate data.

This subpackage provides the numerical routines applied to extracted columns.
All functions operate on sequences of floats or ``(x, y)`` pairs and report
undefined results as ``None``.

Modules:
    descriptive:
        Central tendency, dispersion and shape of a single column. Keeps the
        population and sample standard deviations as separate functions.

    similarity:
        Covariance, Pearson correlation and R² over coordinate pairs.

    regression:
        Ordinary least-squares line fitting, prediction, residuals and
        standard-error diagnostics.

    summary:
        The immutable ``Statistics`` snapshot, range filtering and a pandas
        tabulation of per-axis measures.

Design Principle:
    This subpackage has no dependencies on the ingestion code. It provides
    pure numerical utilities that can be independently tested.
"""

from .descriptive import (
    describe,
    geometric_mean,
    harmonic_mean,
    mean,
    mean_absolute_deviation,
    median,
    median_absolute_deviation,
    mode,
    population_stdev,
    sample_stdev,
    sample_variance,
    skewness,
    standard_deviation,
    variance,
    weighted_mean,
    z_score,
)
from .regression import (
    linear_regression,
    predict,
    regression_diagnostics,
    residuals,
)
from .similarity import correlation, covariance, r2
from .summary import Statistics, describe_frame, filter_data, statistics

__all__ = [
    "describe",
    "geometric_mean",
    "harmonic_mean",
    "mean",
    "mean_absolute_deviation",
    "median",
    "median_absolute_deviation",
    "mode",
    "population_stdev",
    "sample_stdev",
    "sample_variance",
    "skewness",
    "standard_deviation",
    "variance",
    "weighted_mean",
    "z_score",
    "correlation",
    "covariance",
    "r2",
    "linear_regression",
    "predict",
    "regression_diagnostics",
    "residuals",
    "Statistics",
    "describe_frame",
    "filter_data",
    "statistics",
]

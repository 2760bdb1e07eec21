import pytest

from datasift.stats import (
    correlation,
    covariance,
    linear_regression,
    predict,
    r2,
    regression_diagnostics,
    residuals,
)
from datasift.stats.regression import HAVE_SCIPY

COLLINEAR = [(1, 3), (4, 9), (5, 11)]


def test_collinear_points_recover_the_line():
    intercept, slope = linear_regression(COLLINEAR)
    assert intercept == pytest.approx(1.0)
    assert slope == pytest.approx(2.0)
    assert r2(COLLINEAR) == pytest.approx(1.0)


@pytest.mark.parametrize("points", [[], [(1, 1)], [(1, 1), (1, 1), (1, 1)], [(2, 1), (2, 5)]])
def test_degenerate_regression_is_undefined(points):
    assert linear_regression(points) is None


def test_predict_and_residuals():
    coefficients = (1.0, 2.0)
    assert predict(coefficients, 3.0) == 7.0
    assert residuals([(0, 1), (1, 4), (2, 4)], coefficients) == [0.0, 1.0, -1.0]


def test_covariance_and_correlation():
    points = [(1, 2), (2, 4), (3, 6)]
    assert covariance(points) == pytest.approx(4 / 3)
    assert correlation(points) == pytest.approx(1.0)
    assert correlation([(1, 6), (2, 4), (3, 2)]) == pytest.approx(-1.0)
    assert covariance([]) is None


def test_correlation_undefined_without_spread():
    flat = [(1, 5), (2, 5), (3, 5)]
    assert correlation(flat) is None
    assert r2(flat) is None
    assert correlation([]) is None


def test_regression_diagnostics_noisy_line():
    points = [(0, 1.0), (1, 3.1), (2, 4.9), (3, 7.2)]
    diag = regression_diagnostics(points)
    assert diag["n"] == 4
    assert diag["dof"] == 2
    assert diag["m"] == pytest.approx(linear_regression(points)[1])
    assert diag["se_m"] > 0
    assert diag["se_b"] > 0
    assert 0.99 < diag["r2"] <= 1.0
    if HAVE_SCIPY:
        assert diag["ci95_m"] > diag["se_m"]
        assert 0.0 <= diag["p_m"] < 0.01
    else:
        assert diag["ci95_m"] is None
        assert diag["p_m"] is None


def test_regression_diagnostics_needs_enough_points():
    assert regression_diagnostics([(0, 1), (1, 2)]) is None
    assert regression_diagnostics([(1, 1), (1, 2), (1, 3)]) is None
    assert regression_diagnostics([(0, 1), (1, 2)], min_points=2)["se_m"] is None


def test_constant_float_x_has_no_regression():
    assert linear_regression([(0.1, 1), (0.1, 2), (0.1, 3)]) is None
    assert regression_diagnostics([(0.1, 1), (0.1, 2), (0.1, 3)]) is None


def test_constant_float_axis_has_no_correlation():
    assert correlation([(1, 0.1), (2, 0.1), (3, 0.1)]) is None
    assert r2([(1, 0.1), (2, 0.1), (3, 0.1)]) is None
    assert correlation([(0.1, 1), (0.1, 2), (0.1, 3)]) is None

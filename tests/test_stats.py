import math

import numpy as np
import pytest

from toolbelt import stats


def test_means_match_known_values():
    np.testing.assert_allclose(stats.arithmetic_average([1, 2, 3, 4]), 2.5)
    np.testing.assert_allclose(stats.geometric_mean([1, 4, 16]), 4.0)
    np.testing.assert_allclose(stats.harmonic_mean([1, 2, 4]), 3 / 1.75)


def test_variance_is_unbiased():
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    np.testing.assert_allclose(stats.variance(data), 32 / 7)
    np.testing.assert_allclose(stats.variance(data, mean=5.0), 32 / 7)
    np.testing.assert_allclose(stats.variance(data), np.var(data, ddof=1))


def test_skewness_symmetric_and_right_tailed():
    np.testing.assert_allclose(stats.skewness([1, 2, 3, 4, 5]), 0.0, atol=1e-12)
    assert stats.skewness([1, 1, 1, 2, 10]) > 0
    assert stats.skewness([-10, -2, -1, -1, -1]) < 0


def test_skewness_matches_explicit_formula():
    data = np.array([2.0, 4, 4, 4, 5, 5, 7, 9])
    n = data.size
    mean = data.mean()
    var = data.var(ddof=1)
    expected = n * np.sum((data - mean) ** 3) / var**1.5 / (n - 1) / (n - 2)
    np.testing.assert_allclose(stats.skewness(data), expected)
    np.testing.assert_allclose(stats.skewness(data, mean, var), expected)


def test_kurtosis_of_even_spacing():
    # Sample excess kurtosis of 1..5 is -1.2.
    np.testing.assert_allclose(stats.kurtosis([1, 2, 3, 4, 5]), -1.2)


@pytest.mark.parametrize(
    "data, expected",
    [([3, 1, 2], 2.0), ([4, 1, 3, 2], 2.5), ([7], 7.0), ([5, 1], 3.0)],
)
def test_median_odd_and_even(data, expected):
    assert stats.median(data) == expected


def test_median_does_not_reorder_input():
    data = np.array([3.0, 1.0, 2.0])
    stats.median(data)
    np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])


@pytest.mark.parametrize(
    "func, shortest",
    [
        (stats.arithmetic_average, 1),
        (stats.geometric_mean, 1),
        (stats.harmonic_mean, 1),
        (stats.median, 1),
        (stats.variance, 2),
        (stats.skewness, 3),
        (stats.kurtosis, 4),
    ],
)
def test_short_input_yields_nan(func, shortest):
    assert math.isnan(func([1.0] * (shortest - 1)))
    assert not math.isnan(func([1.0, 2.0, 3.0, 4.0][:shortest]))


def test_describe_collects_all_statistics():
    summary = stats.describe([1, 2, 3, 4, 5])
    assert summary["count"] == 5
    assert summary["min"] == 1.0
    assert summary["max"] == 5.0
    np.testing.assert_allclose(summary["mean"], 3.0)
    np.testing.assert_allclose(summary["std"], math.sqrt(2.5))
    np.testing.assert_allclose(summary["kurtosis"], -1.2)
    assert set(summary) >= {"geometric_mean", "harmonic_mean", "median", "skewness"}


def test_describe_empty_does_not_raise():
    summary = stats.describe([])
    assert summary["count"] == 0
    assert math.isnan(summary["mean"])
    assert math.isnan(summary["min"])


def test_describe_count_is_int():
    assert isinstance(stats.describe([1.5, 2.5])["count"], int)

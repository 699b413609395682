"""Descriptive statistics over finite numeric sequences.

Every function accepts any sequence of numbers (or a NumPy array) and
returns a plain float. Input too short for a statistic yields ``nan``
rather than raising.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def _as_array(data: ArrayLike) -> np.ndarray:
    return np.asarray(data, dtype=np.float64).ravel()


def arithmetic_average(data: ArrayLike) -> float:
    values = _as_array(data)
    if values.size == 0:
        return float("nan")
    return float(values.mean())


def geometric_mean(data: ArrayLike) -> float:
    """Geometric mean, computed in log space. Values must be positive."""

    values = _as_array(data)
    if values.size == 0:
        return float("nan")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.exp(np.log(values).mean()))


def harmonic_mean(data: ArrayLike) -> float:
    values = _as_array(data)
    if values.size == 0:
        return float("nan")
    with np.errstate(divide="ignore"):
        return float(values.size / np.sum(1.0 / values))


def _central_moment_sum(values: np.ndarray, mean: float, exponent: int) -> float:
    return float(np.sum((values - mean) ** exponent))


def variance(data: ArrayLike, mean: Optional[float] = None) -> float:
    """Unbiased sample variance (divides by n - 1)."""

    values = _as_array(data)
    n = values.size
    if n < 2:
        return float("nan")
    if mean is None:
        mean = float(values.mean())
    return _central_moment_sum(values, mean, 2) / (n - 1)


def skewness(
    data: ArrayLike, mean: Optional[float] = None, var: Optional[float] = None
) -> float:
    """Adjusted Fisher-Pearson sample skewness."""

    values = _as_array(data)
    n = values.size
    if n < 3:
        return float("nan")
    if mean is None:
        mean = float(values.mean())
    if var is None:
        var = variance(values, mean)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(
            n * _central_moment_sum(values, mean, 3)
            / np.power(var, 1.5)
            / (n - 1)
            / (n - 2)
        )


def kurtosis(
    data: ArrayLike, mean: Optional[float] = None, var: Optional[float] = None
) -> float:
    """Sample excess kurtosis (zero for a normal distribution)."""

    values = _as_array(data)
    n = values.size
    if n < 4:
        return float("nan")
    if mean is None:
        mean = float(values.mean())
    if var is None:
        var = variance(values, mean)
    nm1 = n - 1
    nm2nm3 = (n - 2) * (n - 3)
    with np.errstate(divide="ignore", invalid="ignore"):
        first = (
            n * (n + 1) * _central_moment_sum(values, mean, 4)
            / nm1
            / nm2nm3
            / np.power(var, 2)
        )
    second = 3.0 * nm1 * nm1 / nm2nm3
    return float(first - second)


def median(data: ArrayLike) -> float:
    values = _as_array(data)
    n = values.size
    if n == 0:
        return float("nan")
    half = n // 2
    # Only the middle one or two order statistics are needed.
    part = np.partition(values, [half - 1, half] if n % 2 == 0 else half)
    if n % 2:
        return float(part[half])
    return float(0.5 * (part[half - 1] + part[half]))


def describe(data: ArrayLike) -> Dict[str, Any]:
    """Return every statistic of this module in one dict."""

    values = _as_array(data)
    mean = arithmetic_average(values)
    var = variance(values, mean)
    return {
        "count": int(values.size),
        "min": float(values.min()) if values.size else float("nan"),
        "max": float(values.max()) if values.size else float("nan"),
        "mean": mean,
        "geometric_mean": geometric_mean(values),
        "harmonic_mean": harmonic_mean(values),
        "median": median(values),
        "variance": var,
        "std": float(np.sqrt(var)),
        "skewness": skewness(values, mean, var),
        "kurtosis": kurtosis(values, mean, var),
    }

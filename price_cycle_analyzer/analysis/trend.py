from __future__ import annotations

import numpy as np

from price_cycle_analyzer.models.frames import SECONDS_PER_DAY
from price_cycle_analyzer.models.results import TrendDirection


def elapsed_days(timestamps_s) -> np.ndarray:
    """Elapsed time in days since the first timestamp."""
    t = np.asarray(timestamps_s, dtype=float)
    if t.size == 0:
        return t
    return (t - t[0]) / SECONDS_PER_DAY


def estimate_trend_slope(timestamps_s, values) -> float:
    """Least-squares slope of value versus elapsed days.

    Parameters
    ----------
    timestamps_s, values:
        1D arrays of equal length; timestamps in unix seconds.

    Returns
    -------
    float
        ``sum((x - mean(x)) * (y - mean(y))) / sum((x - mean(x)) ** 2)`` with
        ``x`` in days. Returns 0.0 for fewer than two samples or a constant time axis.
    """
    x = elapsed_days(timestamps_s)
    y = np.asarray(values, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"timestamps and values must have the same shape, got {x.shape} and {y.shape}")

    if x.size < 2:
        return 0.0

    dx = x - np.mean(x)
    dy = y - np.mean(y)

    den = float(np.sum(dx * dx))
    if den == 0.0:
        return 0.0
    return float(np.sum(dx * dy)) / den


def classify_trend(slope: float, neutral_band: float = 0.05) -> TrendDirection:
    """Neutral when ``|slope| < neutral_band`` (or exactly 0), else up- or downtrend by sign.

    >>> classify_trend(0.05).value
    'uptrend'
    >>> classify_trend(-0.01).value
    'neutral'
    """
    if abs(slope) < neutral_band:
        return TrendDirection.NEUTRAL
    if slope > 0:
        return TrendDirection.UPTREND
    if slope < 0:
        return TrendDirection.DOWNTREND
    return TrendDirection.NEUTRAL

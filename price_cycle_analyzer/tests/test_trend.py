from __future__ import annotations

import numpy as np
import pytest

from price_cycle_analyzer.analysis.trend import (
    TrendDirection,
    classify_trend,
    elapsed_days,
    estimate_trend_slope,
)

DAY = 86400


def test_linear_series_daily() -> None:
    t = 1_700_000_000 + np.arange(50) * DAY
    y = 3.0 + 0.25 * np.arange(50)
    assert estimate_trend_slope(t, y) == pytest.approx(0.25)


def test_slope_is_per_day_for_hourly_samples() -> None:
    hours = np.arange(240)
    t = 1_600_000_000 + hours * 3600
    y = 10.0 + 2.0 * (hours / 24.0)
    assert estimate_trend_slope(t, y) == pytest.approx(2.0)


def test_irregular_spacing_matches_polyfit() -> None:
    rng = np.random.default_rng(11)
    gaps = rng.integers(1, 4, size=60) * DAY
    t = 1_650_000_000 + np.cumsum(gaps)
    y = 50.0 + rng.normal(size=60)
    expected = np.polyfit((t - t[0]) / DAY, y, 1)[0]
    assert estimate_trend_slope(t, y) == pytest.approx(expected)


@pytest.mark.parametrize("t, y", [([], []), ([1_700_000_000], [12.0])])
def test_fewer_than_two_samples(t, y) -> None:
    assert estimate_trend_slope(t, y) == 0.0


def test_constant_time_axis() -> None:
    t = np.full(5, 1_700_000_000)
    assert estimate_trend_slope(t, [1.0, 2.0, 3.0, 4.0, 5.0]) == 0.0


def test_constant_values() -> None:
    t = np.arange(10) * DAY
    assert estimate_trend_slope(t, np.full(10, 7.5)) == 0.0


def test_shape_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        estimate_trend_slope([0, DAY, 2 * DAY], [1.0, 2.0])


def test_elapsed_days() -> None:
    np.testing.assert_allclose(elapsed_days([DAY, 2 * DAY, 4 * DAY]), [0.0, 1.0, 3.0])
    assert elapsed_days([]).size == 0


# -----------------------------------------------------------------------
# Trend direction
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "slope, expected",
    [
        (0.05, TrendDirection.UPTREND),
        (-0.05, TrendDirection.DOWNTREND),
        (0.0499, TrendDirection.NEUTRAL),
        (-0.0499, TrendDirection.NEUTRAL),
        (0.0, TrendDirection.NEUTRAL),
        (1.3, TrendDirection.UPTREND),
        (-2.7, TrendDirection.DOWNTREND),
    ],
)
def test_classify_trend_default_band(slope, expected) -> None:
    assert classify_trend(slope) is expected


def test_classify_trend_custom_band() -> None:
    assert classify_trend(0.3, neutral_band=0.5) is TrendDirection.NEUTRAL
    assert classify_trend(-0.5, neutral_band=0.5) is TrendDirection.DOWNTREND
    # zero band: only an exactly flat slope is neutral
    assert classify_trend(0.0, neutral_band=0.0) is TrendDirection.NEUTRAL
    assert classify_trend(-1e-12, neutral_band=0.0) is TrendDirection.DOWNTREND
    assert classify_trend(1e-12, neutral_band=0.0) is TrendDirection.UPTREND


def test_trend_direction_values() -> None:
    assert [d.value for d in TrendDirection] == ["uptrend", "downtrend", "neutral"]

from __future__ import annotations

import math

import numpy as np
import pytest

from price_cycle_analyzer.analysis.cycles import select_dominant_cycles, weighted_average_period_days
from price_cycle_analyzer.analysis.fourier import decompose_cycles
from price_cycle_analyzer.models.results import CycleComponent, DominantCycle


def _comp(index: int, amplitude: float, n: int = 64, period: float | None = None) -> CycleComponent:
    return CycleComponent(
        index=index,
        frequency=index / n,
        amplitude=amplitude,
        phase=0.0,
        period_samples=n / index if period is None else period,
    )


def _cycle(period_days: float, amplitude: float) -> DominantCycle:
    return DominantCycle(
        index=1, frequency=0.1, amplitude=amplitude, phase=0.0,
        period_samples=period_days, period_days=period_days,
    )


# -----------------------------------------------------------------------
# select_dominant_cycles
# -----------------------------------------------------------------------


def test_converts_period_to_days() -> None:
    comps = [_comp(4, 3.0), _comp(8, 1.0)]
    out = select_dominant_cycles(comps, 7.0)
    assert [c.index for c in out] == [4, 8]
    assert out[0].period_days == pytest.approx(16.0 * 7.0)
    assert out[1].period_days == pytest.approx(8.0 * 7.0)
    assert out[0].amplitude == 3.0


def test_truncates_to_four() -> None:
    comps = [_comp(k, 10.0 - k) for k in range(1, 9)]
    out = select_dominant_cycles(comps, 1.0)
    assert [c.index for c in out] == [1, 2, 3, 4]


def test_two_stage_selection_does_not_reach_past_pool() -> None:
    # Ranks 2, 3 and 5 are filtered out; rank 7 is valid but outside the pool of six.
    comps = [
        _comp(1, 5.0),
        _comp(2, 0.0),
        _comp(3, 4.0, period=math.inf),
        _comp(4, 3.0),
        _comp(5, 0.0),
        _comp(6, 2.0),
        _comp(7, 1.5),
        _comp(8, 1.0),
    ]
    out = select_dominant_cycles(comps, 1.0)
    assert [c.index for c in out] == [1, 4, 6]


def test_custom_pool_and_limit() -> None:
    comps = [_comp(k, 10.0 - k) for k in range(1, 9)]
    out = select_dominant_cycles(comps, 1.0, candidate_pool=3, max_cycles=2)
    assert [c.index for c in out] == [1, 2]


def test_empty_input() -> None:
    assert select_dominant_cycles([], 1.0) == ()


def test_output_invariants_on_random_series() -> None:
    rng = np.random.default_rng(5)
    for n in (4, 9, 40, 257):
        out = select_dominant_cycles(decompose_cycles(rng.normal(size=n)), 1.4)
        assert len(out) <= 4
        for c in out:
            assert math.isfinite(c.period_days) and c.period_days > 0
            assert c.amplitude > 0
        amps = [c.amplitude for c in out]
        assert amps == sorted(amps, reverse=True)


# -----------------------------------------------------------------------
# weighted_average_period_days
# -----------------------------------------------------------------------


def test_weighted_average_value() -> None:
    assert weighted_average_period_days([_cycle(10.0, 1.0), _cycle(20.0, 3.0)]) == pytest.approx(17.5)


def test_weighted_average_absent_when_empty() -> None:
    assert weighted_average_period_days([]) is None


def test_weighted_average_absent_when_amplitudes_sum_to_zero() -> None:
    assert weighted_average_period_days([_cycle(10.0, 0.0), _cycle(30.0, 0.0)]) is None


def test_weighted_average_within_bounds() -> None:
    rng = np.random.default_rng(8)
    for _ in range(20):
        periods = rng.uniform(2.0, 200.0, size=4)
        amps = rng.uniform(0.01, 5.0, size=4)
        avg = weighted_average_period_days([_cycle(p, a) for p, a in zip(periods, amps)])
        assert avg is not None
        assert periods.min() - 1e-9 <= avg <= periods.max() + 1e-9

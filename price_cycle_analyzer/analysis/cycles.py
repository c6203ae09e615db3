"""Dominant-cycle selection and aggregation.

Selection is deliberately two-stage:

1) keep the ``candidate_pool`` highest-amplitude components,
2) convert each to a calendar period and drop entries with a non-finite
   period or zero amplitude,
3) keep the first ``max_cycles`` survivors.

Components ranked below ``candidate_pool`` are never promoted, even when
filtering leaves fewer than ``max_cycles`` entries.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from price_cycle_analyzer.models.results import CycleComponent, DominantCycle


def select_dominant_cycles(
    components: Sequence[CycleComponent],
    sample_spacing_days: float,
    *,
    candidate_pool: int = 6,
    max_cycles: int = 4,
) -> Tuple[DominantCycle, ...]:
    """Pick the dominant cycles from an amplitude-sorted component list.

    Parameters
    ----------
    components:
        Output of :func:`~price_cycle_analyzer.analysis.fourier.decompose_cycles`,
        already sorted by amplitude descending.
    sample_spacing_days:
        Mean spacing between consecutive samples, in days.
    candidate_pool:
        Number of leading components considered.
    max_cycles:
        Maximum number of cycles returned.

    Returns
    -------
    tuple of DominantCycle
        Order-preserved, at most ``max_cycles`` long. Empty input gives an empty tuple.
    """
    candidates = [DominantCycle.from_component(c, sample_spacing_days) for c in components[:candidate_pool]]
    kept = [c for c in candidates if math.isfinite(c.period_days) and c.amplitude > 0]
    return tuple(kept[:max_cycles])


def weighted_average_period_days(cycles: Sequence[DominantCycle]) -> Optional[float]:
    """Amplitude-weighted mean of ``period_days``.

    Returns None when ``cycles`` is empty or the amplitudes sum to exactly zero.
    """
    if not cycles:
        return None
    total_amp = sum(c.amplitude for c in cycles)
    if total_amp == 0:
        return None
    return sum(c.period_days * c.amplitude for c in cycles) / total_amp

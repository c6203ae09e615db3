"""Cycle analysis engine.

Combines the four core steps on one price series:

    trend slope      <- timestamps, values
    harmonics        <- values (mean-centered DFT)
    dominant cycles  <- harmonics, sample spacing
    weighted period  <- dominant cycles
    summary          <- dominant cycles, labels

Every call works on its own local data and returns a fresh frozen
:class:`AnalysisResult`, so independent calls can run in parallel.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from price_cycle_analyzer.ingest.series import require_min_samples
from price_cycle_analyzer.models.frames import SeriesFrame, average_spacing_days
from price_cycle_analyzer.models.profile import AnalysisProfile
from price_cycle_analyzer.models.results import AnalysisResult

from .cycles import select_dominant_cycles, weighted_average_period_days
from .fourier import decompose_cycles
from .summary import summarize_cycles
from .trend import classify_trend, estimate_trend_slope

logger = logging.getLogger(__name__)


def analyze_series(
    timestamps_s,
    values,
    *,
    asset_label: str = "",
    exchange: str = "",
    sample_spacing_days: Optional[float] = None,
    profile: Optional[AnalysisProfile] = None,
    warnings: tuple[str, ...] = (),
) -> AnalysisResult:
    """Run the full cycle analysis on a clean, ordered series.

    Parameters
    ----------
    timestamps_s, values:
        1D arrays of equal length (unix seconds, prices).
    asset_label:
        Asset name used in the narrative.
    exchange:
        Exchange name passed through to the result.
    sample_spacing_days:
        Mean spacing between samples. Computed from ``timestamps_s`` when
        omitted (``profile.default_spacing_days`` below two samples).
    profile:
        Pipeline configuration. Defaults to ``AnalysisProfile()``.
    warnings:
        Ingest diagnostics to carry into the result.

    Notes
    -----
    No minimum length is enforced here; see :func:`analyze_frame`.
    """
    if profile is None:
        profile = AnalysisProfile()

    t = np.asarray(timestamps_s)
    y = np.asarray(values, dtype=float)
    if t.shape != y.shape:
        raise ValueError(f"timestamps and values must have the same shape, got {t.shape} and {y.shape}")

    if sample_spacing_days is None:
        sample_spacing_days = average_spacing_days(t, default=profile.default_spacing_days)
    sample_spacing_days = float(sample_spacing_days)

    logger.debug(
        "Analyzing %s: n=%d, spacing=%.4f days, method=%s",
        asset_label or "<unnamed>", y.size, sample_spacing_days, profile.dft_method,
    )

    trend_slope = estimate_trend_slope(t, y)
    trend_direction = classify_trend(trend_slope, profile.neutral_band)
    components = decompose_cycles(y, method=profile.dft_method)
    dominant = select_dominant_cycles(
        components,
        sample_spacing_days,
        candidate_pool=profile.candidate_pool,
        max_cycles=profile.max_dominant_cycles,
    )
    avg_period = weighted_average_period_days(dominant)
    summary = summarize_cycles(asset_label, dominant, profile.range_label)

    logger.debug(
        "Selected %d dominant cycles for %s: %s",
        len(dominant), asset_label or "<unnamed>",
        ", ".join(f"k={c.index} ({c.period_days:.1f}d, A={c.amplitude:.3g})" for c in dominant),
    )

    return AnalysisResult(
        trend_slope=trend_slope,
        dominant_cycles=dominant,
        weighted_average_period_days=avg_period,
        summary=summary,
        trend_direction=trend_direction,
        asset_label=asset_label,
        range_label=profile.range_label,
        exchange=exchange,
        interval=profile.range_profile.interval,
        last_timestamp=int(t[-1]) if t.size else None,
        n_samples=int(y.size),
        sample_spacing_days=sample_spacing_days,
        warnings=tuple(warnings),
    )


def analyze_frame(frame: SeriesFrame, profile: Optional[AnalysisProfile] = None) -> AnalysisResult:
    """Analyze a :class:`SeriesFrame` after enforcing ``profile.min_samples``.

    Raises
    ------
    ValueError
        If the frame holds fewer than ``profile.min_samples`` samples.
    """
    if profile is None:
        profile = AnalysisProfile()
    require_min_samples(frame, profile.min_samples)
    return analyze_series(
        frame.timestamps,
        frame.values,
        asset_label=frame.asset_label,
        exchange=frame.exchange,
        sample_spacing_days=average_spacing_days(frame.timestamps, default=profile.default_spacing_days),
        profile=profile,
        warnings=frame.warnings,
    )

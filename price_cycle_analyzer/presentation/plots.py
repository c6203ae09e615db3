"""Read-only plots of a finished cycle analysis.

All functions draw on a caller-supplied matplotlib ``Axes`` and return it;
figure creation, layout and ``show()`` stay with the caller.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from price_cycle_analyzer.analysis.fourier import reconstruct
from price_cycle_analyzer.analysis.trend import elapsed_days
from price_cycle_analyzer.models.frames import SeriesFrame
from price_cycle_analyzer.models.results import AnalysisResult, CycleComponent, DominantCycle


def _dates(frame: SeriesFrame) -> pd.DatetimeIndex:
    # naive, UTC wall time
    return pd.to_datetime(frame.timestamps, unit="s")


def plot_price_and_trend(ax, frame: SeriesFrame, result: AnalysisResult):
    """Close prices with the fitted least-squares trend line."""
    x = elapsed_days(frame.timestamps)
    y = frame.values
    dates = _dates(frame)
    ax.plot(dates, y, "-", color="tab:blue", lw=1.2, label=frame.asset_label or "close")
    if y.size >= 2:
        intercept = float(np.mean(y)) - result.trend_slope * float(np.mean(x))
        ax.plot(
            dates, intercept + result.trend_slope * x, "--",
            color="tab:orange", lw=1.0,
            label=f"trend {result.trend_slope:+.3f}/day",
        )
    ax.set_ylabel("price")
    ax.legend(loc="best")
    return ax


def plot_spectrum(
    ax,
    components: Sequence[CycleComponent],
    dominant: Optional[Sequence[DominantCycle]] = None,
):
    """Amplitude per harmonic index; dominant cycles highlighted and annotated."""
    if components:
        idx = np.array([c.index for c in components])
        amp = np.array([c.amplitude for c in components])
        order = np.argsort(idx)
        ax.vlines(idx[order], 0.0, amp[order], color="grey", lw=1.0)

    for c in dominant or ():
        ax.plot([c.index], [c.amplitude], "o", color="tab:red", ms=5, zorder=3)
        ax.annotate(
            f"{c.period_days:.1f}d",
            (c.index, c.amplitude),
            textcoords="offset points", xytext=(4, 4), fontsize=8,
        )
    ax.set_xlabel("harmonic index k")
    ax.set_ylabel("amplitude")
    return ax


def plot_cycle_overlay(ax, frame: SeriesFrame, result: AnalysisResult):
    """Mean-centered prices against the sum of the dominant cycles."""
    y = frame.values
    dates = _dates(frame)
    centered = y - np.mean(y) if y.size else y
    ax.plot(dates, centered, "-", color="lightgrey", lw=1.0, label="centered price")
    if result.dominant_cycles:
        ax.plot(
            dates, reconstruct(result.dominant_cycles, y.size), "-",
            color="tab:green", lw=1.5, label="dominant cycles",
        )
    ax.axhline(0.0, color="black", lw=0.5)
    ax.legend(loc="best")
    return ax

"""Cycle analysis package.

Design principle:
  - Ingest produces validated :class:`~price_cycle_analyzer.models.frames.SeriesFrame` objects.
  - Analysis consumes plain arrays (or a SeriesFrame) and produces frozen results.

The core functions are total: degenerate inputs yield sentinel values
(slope 0.0, no dominant cycles, ``None`` average period, an
"insufficient data" narrative) rather than exceptions.
"""

from .cycles import select_dominant_cycles, weighted_average_period_days
from .fourier import HarmonicSpectrum, decompose_cycles, dft_harmonics, reconstruct
from .pipeline import analyze_frame, analyze_series
from .summary import NarrativeVariant, summarize_cycles
from .trend import TrendDirection, classify_trend, estimate_trend_slope

__all__ = [
    "HarmonicSpectrum",
    "dft_harmonics",
    "decompose_cycles",
    "reconstruct",
    "estimate_trend_slope",
    "TrendDirection",
    "classify_trend",
    "select_dominant_cycles",
    "weighted_average_period_days",
    "NarrativeVariant",
    "summarize_cycles",
    "analyze_series",
    "analyze_frame",
]

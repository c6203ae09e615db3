"""Price Cycle Analyzer -- spectral profile of a price time series.

This package provides tools for:
- Cleaning raw close-price samples into a validated series
- Estimating the least-squares price trend per day
- Decomposing the mean-centered series into harmonics with a DFT
- Selecting the dominant cycles and their calendar-day periods
- Aggregating an amplitude-weighted average cycle length
- Rendering a short narrative and tabular/plot views of the result

Key principles:
- The analysis core is pure: no I/O, no shared state, no exceptions on degenerate input
- Periods are measured in samples and converted to days with the measured sample spacing
- Everything ingest drops or reorders is recorded on the frame

Main subpackages:
- analysis: Trend, Fourier decomposition, cycle selection, narrative, pipeline
- ingest: Series construction from arrays, DataFrames, CSV files and chart payloads
- models: Data models (SeriesFrame, AnalysisProfile, AnalysisResult)
- presentation: Matplotlib plots
"""

from .analysis.pipeline import analyze_frame, analyze_series

__all__ = ["analyze_frame", "analyze_series"]

__version__ = "0.1.0"

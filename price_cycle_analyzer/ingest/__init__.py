"""Ingest package - price series construction and validation.

This package handles:
- Ticker normalization
- Cleaning parallel timestamp/close arrays
- Reading DataFrames, CSV files and decoded chart payloads

Design principle:
- Ingest produces validated SeriesFrame objects
- Dropped or reordered samples are recorded, never silently discarded
- Fetching data over the network is left to the caller
"""

from .series import (
    ValidationResult,
    build_series_frame,
    normalize_symbol,
    read_price_csv,
    require_min_samples,
    series_from_chart_payload,
    series_from_dataframe,
    validate_series_table,
)

__all__ = [
    "ValidationResult",
    "build_series_frame",
    "normalize_symbol",
    "read_price_csv",
    "require_min_samples",
    "series_from_chart_payload",
    "series_from_dataframe",
    "validate_series_table",
]

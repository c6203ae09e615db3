"""
Series ingest: raw price samples -> validated SeriesFrame.

Accepted sources
- parallel timestamp/close arrays (closes may contain None/NaN),
- a pandas DataFrame or CSV file with a time column and a value column,
- an already-fetched chart payload in the Yahoo v8 ``chart`` JSON shape.

Cleaning rules
- samples with a missing value are dropped,
- samples are ordered by timestamp,
- duplicate timestamps keep the first occurrence.
Every dropped or reordered sample is recorded in ``SeriesFrame.warnings``.

Examples
--------
>>> frame = build_series_frame([0, 86400, 172800], [10.0, None, 11.0], asset_label="X")
>>> frame.n_samples
2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

import numpy as np
import pandas as pd

from price_cycle_analyzer.models.frames import SeriesFrame

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL_SUFFIX = ".NS"
SERIES_COLS = ("t", "value")


def normalize_symbol(raw: Optional[str], default_suffix: str = DEFAULT_SYMBOL_SUFFIX) -> str:
    """Trim and upper-case a ticker; append ``default_suffix`` when no exchange suffix is given.

    >>> normalize_symbol(" infy ")
    'INFY.NS'
    >>> normalize_symbol("AAPL.US")
    'AAPL.US'
    """
    s = (raw or "").strip().upper()
    if not s:
        return ""
    if "." in s:
        return s
    return f"{s}{default_suffix}"


def build_series_frame(
    timestamps_s,
    values,
    *,
    asset_label: str = "",
    exchange: str = "",
) -> SeriesFrame:
    """Clean parallel timestamp/value arrays into a :class:`SeriesFrame`.

    Raises
    ------
    ValueError
        If the arrays are not 1D, differ in length, or contain non-finite timestamps.
    """
    t = np.asarray(timestamps_s, dtype=float)
    y = np.asarray(values, dtype=float)
    if t.ndim != 1 or y.ndim != 1:
        raise ValueError(f"timestamps and values must be 1D, got shapes {t.shape} and {y.shape}")
    if t.size != y.size:
        raise ValueError(f"timestamps and values differ in length: {t.size} != {y.size}")
    if not np.isfinite(t).all():
        bad = np.where(~np.isfinite(t))[0][:10].tolist()
        raise ValueError(f"Non-finite timestamps at positions {bad} (showing up to 10).")

    warnings: List[str] = []

    missing = ~np.isfinite(y)
    if missing.any():
        pos = np.where(missing)[0]
        warnings.append(
            f"Dropped {pos.size} samples with missing values at positions {pos[:10].tolist()} (showing up to 10)."
        )
        t = t[~missing]
        y = y[~missing]

    if t.size > 1 and np.any(np.diff(t) < 0):
        warnings.append("Timestamps were not in ascending order; samples were sorted by time.")
        order = np.argsort(t, kind="stable")
        t = t[order]
        y = y[order]

    if t.size > 1:
        dup = np.concatenate([[False], np.diff(t) == 0])
        if dup.any():
            warnings.append(f"Dropped {int(dup.sum())} samples with duplicate timestamps (kept first).")
            t = t[~dup]
            y = y[~dup]

    for msg in warnings:
        logger.warning("%s: %s", asset_label or "<unnamed>", msg)

    df = pd.DataFrame({"t": t.astype(np.int64), "value": y.astype(np.float64)})
    return SeriesFrame(asset_label=asset_label, df=df, warnings=tuple(warnings), exchange=exchange)


def _to_unix_seconds(col: pd.Series) -> np.ndarray:
    if pd.api.types.is_numeric_dtype(col):
        return col.to_numpy(dtype=float)
    dt = pd.to_datetime(col, utc=True)
    return ((dt - pd.Timestamp(0, tz="UTC")) // pd.Timedelta(seconds=1)).to_numpy(dtype=float)


def series_from_dataframe(
    df: pd.DataFrame,
    *,
    time_col: str = "t",
    value_col: str = "value",
    asset_label: str = "",
    exchange: str = "",
) -> SeriesFrame:
    """Build a SeriesFrame from two DataFrame columns.

    ``time_col`` may hold unix seconds or anything ``pd.to_datetime`` parses
    (naive datetimes are taken as UTC).
    """
    missing = [c for c in (time_col, value_col) if c not in df.columns]
    if missing:
        raise KeyError(f"Missing required columns: {missing}. Present={list(df.columns)}")

    t = _to_unix_seconds(df[time_col])
    y = pd.to_numeric(df[value_col], errors="coerce").to_numpy(dtype=float)
    return build_series_frame(t, y, asset_label=asset_label, exchange=exchange)


def read_price_csv(
    path: Path | str,
    *,
    time_col: str = "timestamp",
    value_col: str = "close",
    asset_label: Optional[str] = None,
) -> SeriesFrame:
    """Read a price CSV file; ``asset_label`` defaults to the file stem."""
    fp = Path(path).expanduser()
    df = pd.read_csv(fp)
    label = fp.stem if asset_label is None else asset_label
    return series_from_dataframe(df, time_col=time_col, value_col=value_col, asset_label=label)


def _mapping(node: Any) -> Mapping[str, Any]:
    """``node`` if it is a mapping, else an empty dict (JSON nulls and lists included)."""
    return node if isinstance(node, Mapping) else {}


def series_from_chart_payload(payload: Mapping[str, Any], *, asset_label: Optional[str] = None) -> SeriesFrame:
    """Extract the close series from a decoded chart payload.

    Expected shape::

        {"chart": {"result": [{"timestamp": [...],
                               "meta": {"symbol": ..., "exchangeName": ...},
                               "indicators": {"quote": [{"close": [...]}]}}]}}

    Raises
    ------
    KeyError
        If the payload has no result, timestamps or closes.
    """
    chart_root = _mapping(payload.get("chart") if isinstance(payload, Mapping) else None)
    results = chart_root.get("result") or []
    if not results:
        raise KeyError(f"Chart payload has no result (error={chart_root.get('error')!r}).")

    chart = _mapping(results[0])
    timestamps = chart.get("timestamp") or []
    quotes = _mapping(chart.get("indicators")).get("quote") or []
    closes = _mapping(quotes[0] if quotes else None).get("close") or []
    if not timestamps or not closes:
        raise KeyError("Chart payload has no timestamp/close data.")
    if len(closes) < len(timestamps):
        closes = list(closes) + [None] * (len(timestamps) - len(closes))
    closes = closes[: len(timestamps)]

    meta = _mapping(chart.get("meta"))
    label = asset_label if asset_label is not None else str(meta.get("symbol") or "")
    return build_series_frame(
        timestamps,
        [np.nan if v is None else v for v in closes],
        asset_label=label,
        exchange=str(meta.get("exchangeName") or ""),
    )


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_series_table(
    df: pd.DataFrame,
    *,
    time_col: str = "t",
    value_col: str = "value",
) -> ValidationResult:
    """
    Validate a raw series table before building a SeriesFrame.

    Missing columns and non-numeric columns are errors.  Missing values,
    unordered and duplicate timestamps are warnings, since ingest repairs them.

    Examples
    --------
    >>> import pandas as pd
    >>> validate_series_table(pd.DataFrame({"t": [0, 1], "value": [1.0, 2.0]})).ok
    True
    """
    errors: list[str] = []
    warnings: list[str] = []

    missing = [c for c in (time_col, value_col) if c not in df.columns]
    if missing:
        errors.append(f"Missing required columns: {missing}. Present={list(df.columns)}")
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    for c in (time_col, value_col):
        if not pd.api.types.is_numeric_dtype(df[c]):
            errors.append(f"Column '{c}' must be numeric; dtype={df[c].dtype}.")
    if errors:
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    t = df[time_col].to_numpy(dtype=float)
    y = df[value_col].to_numpy(dtype=float)

    if not np.isfinite(t).all():
        bad = np.where(~np.isfinite(t))[0][:10].tolist()
        errors.append(f"Column '{time_col}' has non-finite values at rows {bad} (showing up to 10).")
    if not np.isfinite(y).all():
        bad = np.where(~np.isfinite(y))[0][:10].tolist()
        warnings.append(f"Column '{value_col}' has missing values at rows {bad} (showing up to 10).")

    if not errors and t.size > 1:
        dt = np.diff(t)
        if np.any(dt < 0):
            warnings.append(f"Column '{time_col}' is not monotonic ({int(np.sum(dt < 0))} backward steps).")
        if np.any(dt == 0):
            warnings.append(f"Column '{time_col}' has {int(np.sum(dt == 0))} duplicate timestamps.")

    return ValidationResult(ok=(len(errors) == 0), errors=errors, warnings=warnings)


def require_min_samples(frame: SeriesFrame, min_samples: int) -> None:
    """Raise ValueError when ``frame`` is shorter than ``min_samples``."""
    if frame.n_samples < int(min_samples):
        raise ValueError(
            f"Cycle analysis needs at least {int(min_samples)} samples; "
            f"{frame.asset_label or 'series'} has {frame.n_samples}."
        )

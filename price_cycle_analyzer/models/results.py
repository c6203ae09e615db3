from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import pandas as pd


class TrendDirection(str, Enum):
    """Sign of the trend slope, with a neutral band around zero."""

    UPTREND = "uptrend"
    DOWNTREND = "downtrend"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class CycleComponent:
    """One harmonic of the centered price series.

    Attributes
    ----------
    index:
        Harmonic number ``k`` in ``[1, n // 2]`` (``k`` full cycles across the window).
    frequency:
        ``k / n`` in cycles per sample.
    amplitude:
        ``2 * |X_k| / n``, always ``>= 0``.
    phase:
        ``atan2(Im X_k, Re X_k)`` in radians, with ``X_k = sum x_t exp(-2 pi i k t / n)``.
    period_samples:
        ``n / k``.
    """

    index: int
    frequency: float
    amplitude: float
    phase: float
    period_samples: float


@dataclass(frozen=True)
class DominantCycle(CycleComponent):
    """A :class:`CycleComponent` that survived selection, with its calendar period.

    ``period_days = period_samples * sample_spacing_days``.
    """

    period_days: float

    @classmethod
    def from_component(cls, component: CycleComponent, sample_spacing_days: float) -> DominantCycle:
        return cls(
            index=component.index,
            frequency=component.frequency,
            amplitude=component.amplitude,
            phase=component.phase,
            period_samples=component.period_samples,
            period_days=component.period_samples * float(sample_spacing_days),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Container for one cycle analysis of a single price series.

    Attributes
    ----------
    trend_slope:
        Least-squares slope of value per elapsed day.
    trend_direction:
        Classification of ``trend_slope`` against the profile's ``neutral_band``.
    dominant_cycles:
        At most ``max_dominant_cycles`` entries, amplitude-descending.
    weighted_average_period_days:
        Amplitude-weighted mean of ``period_days``; None when there are no
        dominant cycles or their amplitudes sum to exactly zero.
    summary:
        Narrative text.
    asset_label, range_label:
        Identifiers passed through from the caller.
    exchange, interval:
        Exchange name from ingest and the candle interval of the range.
    last_timestamp:
        Unix seconds of the latest sample; None for an empty series.
    n_samples, sample_spacing_days:
        Input size and the spacing used to convert periods to days.
    warnings:
        Diagnostics carried over from ingest.
    """

    trend_slope: float
    dominant_cycles: Tuple[DominantCycle, ...]
    weighted_average_period_days: Optional[float]
    summary: str

    trend_direction: TrendDirection = TrendDirection.NEUTRAL
    asset_label: str = ""
    range_label: str = ""
    exchange: str = ""
    interval: str = ""
    last_timestamp: Optional[int] = None
    n_samples: int = 0
    sample_spacing_days: float = 1.0
    warnings: Tuple[str, ...] = ()

    @property
    def primary_cycle(self) -> Optional[DominantCycle]:
        return self.dominant_cycles[0] if self.dominant_cycles else None

    @property
    def last_updated(self) -> Optional[str]:
        """ISO-8601 UTC time of the latest sample."""
        if self.last_timestamp is None:
            return None
        return pd.Timestamp(self.last_timestamp, unit="s", tz="UTC").isoformat()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        d["dominant_cycles"] = [dict(c) for c in d["dominant_cycles"]]
        d["warnings"] = list(d["warnings"])
        d["trend_direction"] = self.trend_direction.value
        return d

    def to_payload(self) -> Dict[str, Any]:
        """Return the camelCase analytics block consumed by the presentation layer."""
        return {
            "trendSlope": self.trend_slope,
            "dominantCycles": [
                {
                    "index": c.index,
                    "amplitude": c.amplitude,
                    "phase": c.phase,
                    "frequency": c.frequency,
                    "periodSamples": c.period_samples,
                    "periodDays": c.period_days,
                }
                for c in self.dominant_cycles
            ],
            "weightedAveragePeriodDays": self.weighted_average_period_days,
            "summary": self.summary,
            "trendDirection": self.trend_direction.value,
            "exchange": self.exchange,
            "interval": self.interval,
            "lastUpdated": self.last_updated,
        }

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd


SECONDS_PER_DAY = 86400.0


@dataclass(frozen=True)
class SeriesFrame:
    """
    In-memory representation of one price series after basic cleaning.

    Notes
    - 't' holds unix seconds as delivered by the data provider, strictly increasing.
    - 'value' is float64 and never NaN (null samples are dropped during ingest).
    - warnings records every sample that ingest dropped or reordered.
    """
    asset_label: str
    df: pd.DataFrame
    warnings: Tuple[str, ...] = ()
    exchange: str = ""

    @property
    def n_samples(self) -> int:
        return int(len(self.df))

    @property
    def timestamps(self) -> np.ndarray:
        return self.df["t"].to_numpy(dtype=np.int64)

    @property
    def values(self) -> np.ndarray:
        return self.df["value"].to_numpy(dtype=float)

    @property
    def average_spacing_days(self) -> float:
        """Mean spacing between consecutive samples in days (1.0 below two samples)."""
        return average_spacing_days(self.timestamps)


def average_spacing_days(timestamps_s, default: float = 1.0) -> float:
    t = np.asarray(timestamps_s, dtype=float)
    if t.size < 2:
        return float(default)
    return float(np.mean(np.diff(t)) / SECONDS_PER_DAY)

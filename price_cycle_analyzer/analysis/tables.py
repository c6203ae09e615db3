"""Tabular views of analysis output.

Functions
---------
component_rows
    One dict per harmonic, ready for ``pd.DataFrame()``.
spectrum_table
    Full harmonic list as a DataFrame, in the given (amplitude) order.
cycles_table
    Dominant cycles of an :class:`AnalysisResult` as a DataFrame, with the
    amplitude share of each cycle.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from price_cycle_analyzer.models.results import AnalysisResult, CycleComponent, DominantCycle

COMPONENT_COLUMNS = ["index", "frequency", "amplitude", "phase_rad", "period_samples"]
CYCLE_COLUMNS = COMPONENT_COLUMNS + ["period_days", "amplitude_share"]


def component_rows(components: Sequence[CycleComponent]) -> list[dict]:
    """Build a list of row-dicts from harmonic components.

    ``period_days`` is added for :class:`DominantCycle` entries.
    """
    rows: list[dict] = []
    for c in components:
        row = {
            "index": c.index,
            "frequency": c.frequency,
            "amplitude": c.amplitude,
            "phase_rad": c.phase,
            "period_samples": c.period_samples,
        }
        if isinstance(c, DominantCycle):
            row["period_days"] = c.period_days
        rows.append(row)
    return rows


def spectrum_table(components: Sequence[CycleComponent]) -> pd.DataFrame:
    return pd.DataFrame(component_rows(components), columns=COMPONENT_COLUMNS)


def cycles_table(result: AnalysisResult) -> pd.DataFrame:
    """Dominant cycles as a DataFrame (empty with the same columns when none)."""
    df = pd.DataFrame(component_rows(result.dominant_cycles), columns=CYCLE_COLUMNS[:-1])
    total = float(df["amplitude"].sum()) if len(df) else 0.0
    if total > 0:
        df["amplitude_share"] = df["amplitude"] / total
    else:
        df["amplitude_share"] = np.nan
    return df

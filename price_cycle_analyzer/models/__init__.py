from .frames import SeriesFrame
from .profile import RANGE_PROFILES, AnalysisProfile, RangeProfile, resolve_range
from .results import AnalysisResult, CycleComponent, DominantCycle, TrendDirection

__all__ = [
    "SeriesFrame",
    "AnalysisProfile",
    "RangeProfile",
    "RANGE_PROFILES",
    "resolve_range",
    "AnalysisResult",
    "CycleComponent",
    "DominantCycle",
    "TrendDirection",
]

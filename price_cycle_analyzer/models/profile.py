"""Analysis profile -- bundles all pipeline-relevant configuration.

An AnalysisProfile groups every parameter that affects the analysis output
into one frozen dataclass.  It can be:

- Constructed for a requested history range via ``AnalysisProfile.for_range()``
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance

Range labels map to a sampling interval through the enumerated
``RANGE_PROFILES`` table.  Unknown labels resolve to ``DEFAULT_RANGE``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping

DftMethod = Literal["fft", "direct"]


@dataclass(frozen=True)
class RangeProfile:
    """Sampling configuration for one requested history range.

    label : str
        Range label as understood by the data provider ("3mo", "1y", ...).
    interval : str
        Candle interval requested for that range ("1d" or "1wk").
    nominal_spacing_days : float
        Expected spacing between candles in calendar days.  Informative only;
        the analysis uses the measured spacing of the actual series.
    """

    label: str
    interval: str
    nominal_spacing_days: float


RANGE_PROFILES: Mapping[str, RangeProfile] = MappingProxyType(
    {
        "3mo": RangeProfile("3mo", "1d", 1.0),
        "6mo": RangeProfile("6mo", "1d", 1.0),
        "1y": RangeProfile("1y", "1d", 1.0),
        "2y": RangeProfile("2y", "1d", 1.0),
        "5y": RangeProfile("5y", "1wk", 7.0),
    }
)

DEFAULT_RANGE = "1y"


def resolve_range(label: str | None) -> RangeProfile:
    """Map a user-supplied range label to a :class:`RangeProfile` (fallback ``1y``)."""
    key = (label or "").strip()
    return RANGE_PROFILES.get(key, RANGE_PROFILES[DEFAULT_RANGE])


@dataclass(frozen=True)
class AnalysisProfile:
    """Frozen configuration for the cycle analysis pipeline.

    Fields
    ------
    range_label : str
        Label of the analysed history range, passed through to the narrative.
    candidate_pool : int
        Number of top-amplitude harmonics considered before filtering.
    max_dominant_cycles : int
        Truncation applied after filtering.
    min_samples : int
        Minimum series length accepted by ``analyze_frame``.  The core
        functions themselves accept any length.
    default_spacing_days : float
        Sample spacing used when the series has fewer than two samples.
    dft_method : str
        "fft" (numpy FFT) or "direct" (explicit summation).  Both use the same
        normalization and phase convention.
    neutral_band : float
        Slopes with ``|slope| < neutral_band`` (value per day) are classified
        as neutral rather than up- or downtrend.
    """

    range_label: str = DEFAULT_RANGE
    candidate_pool: int = 6
    max_dominant_cycles: int = 4
    min_samples: int = 32
    default_spacing_days: float = 1.0
    dft_method: DftMethod = "fft"
    neutral_band: float = 0.05

    def __post_init__(self) -> None:
        if self.candidate_pool < 0:
            raise ValueError(f"candidate_pool must be >= 0, got {self.candidate_pool}")
        if self.max_dominant_cycles < 0:
            raise ValueError(f"max_dominant_cycles must be >= 0, got {self.max_dominant_cycles}")
        if self.dft_method not in ("fft", "direct"):
            raise ValueError(f"dft_method must be 'fft' or 'direct', got {self.dft_method!r}")
        if self.neutral_band < 0:
            raise ValueError(f"neutral_band must be >= 0, got {self.neutral_band}")

    @property
    def range_profile(self) -> RangeProfile:
        return resolve_range(self.range_label)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def for_range(cls, range_label: str | None, **overrides: Any) -> AnalysisProfile:
        """Build a profile for a requested range with optional overrides.

        The label is normalized through ``RANGE_PROFILES`` so an unknown
        label yields the default range.  Example::

            profile = AnalysisProfile.for_range("5y", candidate_pool=8)
        """
        base: Dict[str, Any] = dict(range_label=resolve_range(range_label).label)
        base.update(overrides)
        return cls(**base)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> AnalysisProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return cls(**dict(d))

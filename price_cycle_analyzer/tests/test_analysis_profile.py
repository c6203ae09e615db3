"""Tests for AnalysisProfile and range profiles."""

from __future__ import annotations

import dataclasses

import pytest

from price_cycle_analyzer.models.profile import (
    DEFAULT_RANGE,
    RANGE_PROFILES,
    AnalysisProfile,
    resolve_range,
)


# -----------------------------------------------------------------------
# Basic construction
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = AnalysisProfile()
    assert p.range_label == "1y"
    assert p.candidate_pool == 6
    assert p.max_dominant_cycles == 4
    assert p.min_samples == 32
    assert p.default_spacing_days == 1.0
    assert p.dft_method == "fft"
    assert p.neutral_band == 0.05


def test_profile_frozen() -> None:
    p = AnalysisProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.candidate_pool = 10  # type: ignore[misc]


def test_profile_replace() -> None:
    p = AnalysisProfile()
    p2 = dataclasses.replace(p, max_dominant_cycles=2)
    assert p2.max_dominant_cycles == 2
    assert p2.candidate_pool == 6  # unchanged


@pytest.mark.parametrize(
    "kwargs",
    [{"candidate_pool": -1}, {"max_dominant_cycles": -1}, {"dft_method": "welch"}, {"neutral_band": -0.1}],
)
def test_profile_rejects_invalid(kwargs) -> None:
    with pytest.raises(ValueError):
        AnalysisProfile(**kwargs)


# -----------------------------------------------------------------------
# Range profiles
# -----------------------------------------------------------------------


def test_range_table() -> None:
    assert set(RANGE_PROFILES) == {"3mo", "6mo", "1y", "2y", "5y"}
    assert RANGE_PROFILES["5y"].interval == "1wk"
    assert RANGE_PROFILES["5y"].nominal_spacing_days == 7.0
    assert all(RANGE_PROFILES[k].interval == "1d" for k in ("3mo", "6mo", "1y", "2y"))


def test_range_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        RANGE_PROFILES["10y"] = RANGE_PROFILES["5y"]  # type: ignore[index]


@pytest.mark.parametrize("label", [None, "", "10y", "max"])
def test_unknown_range_falls_back(label) -> None:
    assert resolve_range(label).label == DEFAULT_RANGE


def test_for_range() -> None:
    p = AnalysisProfile.for_range("5y", candidate_pool=8)
    assert p.range_label == "5y"
    assert p.range_profile.interval == "1wk"
    assert p.candidate_pool == 8

    assert AnalysisProfile.for_range("bogus").range_label == "1y"


# -----------------------------------------------------------------------
# Dict serialization
# -----------------------------------------------------------------------


def test_profile_dict_roundtrip() -> None:
    p = AnalysisProfile.for_range("2y", dft_method="direct", min_samples=64, neutral_band=0.1)
    d = p.to_dict()
    assert d["dft_method"] == "direct"
    assert d["neutral_band"] == 0.1
    assert AnalysisProfile.from_dict(d) == p

"""Narrative text for a cycle analysis.

Pure templating: the variant is chosen from the number of dominant cycles and
the matching templates are filled with rounded values (periods to one
decimal, amplitudes to two).
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from price_cycle_analyzer.models.results import DominantCycle


class NarrativeVariant(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    PRIMARY_ONLY = "primary_only"
    PRIMARY_AND_SECONDARY = "primary_and_secondary"


INSUFFICIENT_DATA_TEMPLATE = "Not enough data was found for {asset} in the selected time range."
PRIMARY_TEMPLATE = "The primary cycle is close to {period:.1f} days, with a strength of {amplitude:.2f}."
SECONDARY_TEMPLATE = "A secondary cycle repeats roughly every {period:.1f} days."
NO_SECONDARY_TEXT = "No strong secondary cycle stands out."
NARRATIVE_TEMPLATE = (
    "In the {range} data for {asset}: {primary} {secondary} "
    "Plan your entries and exits around these periods."
)


def narrative_variant(cycles: Sequence[DominantCycle]) -> NarrativeVariant:
    if not cycles:
        return NarrativeVariant.INSUFFICIENT_DATA
    if len(cycles) == 1:
        return NarrativeVariant.PRIMARY_ONLY
    return NarrativeVariant.PRIMARY_AND_SECONDARY


def summarize_cycles(asset_label: str, cycles: Sequence[DominantCycle], range_label: str) -> str:
    """Render the narrative for ``cycles`` (amplitude-descending).

    Examples
    --------
    >>> summarize_cycles("INFY.NS", [], "1y")
    'Not enough data was found for INFY.NS in the selected time range.'
    """
    variant = narrative_variant(cycles)
    if variant is NarrativeVariant.INSUFFICIENT_DATA:
        return INSUFFICIENT_DATA_TEMPLATE.format(asset=asset_label)

    primary = cycles[0]
    primary_text = PRIMARY_TEMPLATE.format(period=primary.period_days, amplitude=primary.amplitude)
    if variant is NarrativeVariant.PRIMARY_AND_SECONDARY:
        secondary_text = SECONDARY_TEMPLATE.format(period=cycles[1].period_days)
    else:
        secondary_text = NO_SECONDARY_TEXT

    return NARRATIVE_TEMPLATE.format(
        range=range_label,
        asset=asset_label,
        primary=primary_text,
        secondary=secondary_text,
    )

"""Presentation helpers (matplotlib plots)."""

from .plots import plot_cycle_overlay, plot_price_and_trend, plot_spectrum

__all__ = ["plot_cycle_overlay", "plot_price_and_trend", "plot_spectrum"]

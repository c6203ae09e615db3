"""Discrete Fourier decomposition of a price series into harmonic cycles.

The series is mean-centered, then transformed with the convention

    X_k = sum_t x_t * exp(-2 pi i k t / n),   k = 1 .. n // 2

so that ``real_k = sum x_t cos(theta)`` and ``imag_k = sum x_t sin(theta)`` with
``theta = -2 pi k t / n``.  Amplitudes use the one-sided ``2 |X_k| / n``
normalization, phases are ``atan2(imag_k, real_k)``.

Functions
---------
dft_harmonics
    Complex coefficients for harmonics ``1 .. n // 2`` (FFT or direct summation).
decompose_cycles
    Per-harmonic :class:`CycleComponent` list, amplitude-descending.
reconstruct
    Synthesize the sum of a set of cycles on the sample grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from price_cycle_analyzer.models.profile import DftMethod
from price_cycle_analyzer.models.results import CycleComponent


@dataclass(frozen=True)
class HarmonicSpectrum:
    """Complex DFT coefficients of a centered series.

    Attributes
    ----------
    n:
        Number of samples in the transformed series.
    orders:
        Harmonic index vector ``[1, ..., n // 2]``.
    coeff:
        Complex coefficients ``X_k`` (unnormalized), same shape as ``orders``.
    """

    n: int
    orders: np.ndarray
    coeff: np.ndarray

    @property
    def amplitude(self) -> np.ndarray:
        return 2.0 * np.abs(self.coeff) / float(self.n)

    @property
    def phase(self) -> np.ndarray:
        phase = np.arctan2(self.coeff.imag, self.coeff.real)
        # (-pi, pi]: atan2 yields -pi for a negative real part with imag == -0.0
        return np.where(phase <= -np.pi, np.pi, phase)

    @property
    def frequency(self) -> np.ndarray:
        return self.orders / float(self.n)

    @property
    def period_samples(self) -> np.ndarray:
        freq = self.frequency
        period = np.full(freq.shape, np.inf, dtype=float)
        nz = freq != 0.0
        period[nz] = 1.0 / freq[nz]
        return period


def _direct_dft(centered: np.ndarray, orders: np.ndarray) -> np.ndarray:
    """Explicit O(n^2) summation over all samples for each requested order."""
    n = centered.size
    t = np.arange(n, dtype=float)
    theta = -2.0 * np.pi * np.outer(orders, t) / float(n)
    real = np.cos(theta) @ centered
    imag = np.sin(theta) @ centered
    return real + 1j * imag


def dft_harmonics(values, *, method: DftMethod = "fft") -> HarmonicSpectrum:
    r"""Compute DFT coefficients of the mean-centered series.

    Parameters
    ----------
    values:
        1D array of samples. Timestamps are not used; the transform is defined
        on the sample index.
    method:
        ``"fft"`` uses ``numpy.fft.rfft``; ``"direct"`` evaluates the sums
        explicitly. Both yield the same coefficients up to rounding.

    Returns
    -------
    HarmonicSpectrum
        Coefficients for orders ``1 .. n // 2``. Empty for ``n < 2``.
    """
    x = np.asarray(values, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {x.shape}")

    n = int(x.size)
    orders = np.arange(1, n // 2 + 1, dtype=int)
    if orders.size == 0:
        return HarmonicSpectrum(n=n, orders=orders, coeff=np.zeros(0, dtype=complex))

    centered = x - np.mean(x)

    if method == "fft":
        coeff = np.fft.rfft(centered)[1 : orders.size + 1]
    elif method == "direct":
        coeff = _direct_dft(centered, orders)
    else:
        raise ValueError(f"method must be 'fft' or 'direct', got {method!r}")

    coeff = np.array(coeff, dtype=complex)
    if n % 2 == 0:
        # X_{n/2} = sum x_t (-1)^t is real; drop the rounding residue in its imaginary part
        coeff[-1] = complex(coeff[-1].real, 0.0)
    return HarmonicSpectrum(n=n, orders=orders, coeff=coeff)


def decompose_cycles(values, *, method: DftMethod = "fft") -> Tuple[CycleComponent, ...]:
    """Decompose a series into one :class:`CycleComponent` per harmonic.

    Always returns exactly ``n // 2`` components, sorted by amplitude
    descending; equal amplitudes keep ascending harmonic index.
    """
    spec = dft_harmonics(values, method=method)
    amplitude = spec.amplitude
    phase = spec.phase
    frequency = spec.frequency
    period = spec.period_samples

    # lexsort: last key is primary
    order = np.lexsort((spec.orders, -amplitude))

    return tuple(
        CycleComponent(
            index=int(spec.orders[i]),
            frequency=float(frequency[i]),
            amplitude=float(amplitude[i]),
            phase=float(phase[i]),
            period_samples=float(period[i]),
        )
        for i in order
    )


def reconstruct(cycles: Iterable[CycleComponent], n: int) -> np.ndarray:
    """Sum of ``amplitude * cos(2 pi f t + phase)`` over the given cycles, ``t = 0 .. n-1``."""
    n = int(n)
    t = np.arange(n, dtype=float)
    out = np.zeros(n, dtype=float)
    for c in cycles:
        out += c.amplitude * np.cos(2.0 * np.pi * c.frequency * t + c.phase)
    return out

# -*- coding: utf-8 -*-
"""
Prism: Colorimetry and spectral synthesis for light transport
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Spectral Curves & Tristimulus Integration
=========================================
A spectral curve answers one question: "what is the amplitude at
wavelength λ (nm)?".  The set of curve kinds is closed:

    RegularSpectralCurve    uniform grid over [start, end]
    IrregularSpectralCurve  arbitrary (caller-ordered) wavelength grid
    ChromaticSpectralCurve  CIE daylight synthesis S0 + M1·S1 + M2·S2
    ConstantSpectralCurve   one amplitude everywhere

All four are frozen dataclasses exposing ``sample(wavelength)``, which
accepts a scalar (returns ``float``) or an array (returns an array of the
same shape).  Tables are defensively copied and frozen at construction.

Interpolation Policy:
    Linear between neighbouring table entries; outside the table the edge
    amplitude is held (no extrapolation).  The irregular grid is searched
    sequentially from the start.  NaN wavelengths sample to NaN.

Integration Convention:
    ``to_color_xyz`` uses the rectangle rule over the CIE 1931 2° colour
    matching functions at 1 nm from 360 nm to 830 nm, without any
    luminance normalisation.  The result is therefore proportional to the
    curve's absolute amplitude.

References:
    - CIE 15:2004 "Colorimetry", Sec. 3.1 (daylight basis, Eq. 3.5 / 3.6)
"""

import functools
import math
import warnings
from dataclasses import dataclass, field
from typing import Final, Optional, Tuple, Union

import numpy as np
from numba import njit

from cie_tables import (
    CIE_1931_CMFS,
    CMF_WAVELENGTH_MAX,
    CMF_WAVELENGTH_MIN,
    CMF_WAVELENGTH_STEP,
    DAYLIGHT_WAVELENGTH_MAX,
    DAYLIGHT_WAVELENGTH_MIN,
    METAL_TABLES,
    S0_AMPLITUDES,
    S1_AMPLITUDES,
    S2_AMPLITUDES,
)
from prism_colorspace import SRGB, ColorSpace
from prism_transfer import flatten_values, restore_shape

__all__ = [
    # --- Curve kinds ---
    "RegularSpectralCurve",
    "IrregularSpectralCurve",
    "ChromaticSpectralCurve",
    "ConstantSpectralCurve",
    "SpectralCurve",
    "SPECTRAL_CURVE_TYPES",

    # --- Daylight basis ---
    "DAYLIGHT_S0",
    "DAYLIGHT_S1",
    "DAYLIGHT_S2",
    "daylight_coefficients",

    # --- Integration ---
    "to_color_xyz",
    "to_color_rgb",
    "get_color_xyz",

    # --- Materials ---
    "METAL_SYMBOLS",
    "metal_spectral_curves",
]

WavelengthLike = Union[float, np.ndarray]


def _frozen_table(values: np.ndarray, label: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{label} must be 1D, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


# =============================================================================
# 1. LOW-LEVEL SAMPLING KERNELS (Numba)
# =============================================================================

@njit(cache=True)
def _sample_regular_kernel(lambdas: np.ndarray, start: float, end: float,
                           amplitudes: np.ndarray) -> np.ndarray:
    """Uniform-grid lookup with edge clamping."""
    n = amplitudes.shape[0]
    out = np.empty(lambdas.shape[0], dtype=np.float64)

    for j in range(lambdas.shape[0]):
        lam = lambdas[j]
        if n == 0:
            out[j] = 0.0
        elif lam != lam:
            out[j] = np.nan
        elif lam <= start:
            out[j] = amplitudes[0]
        elif lam >= end:
            out[j] = amplitudes[n - 1]
        else:
            x = (lam - start) / (end - start) * (n - 1)
            i0 = int(x)
            i1 = min(i0 + 1, n - 1)
            dx = x - i0
            out[j] = (1.0 - dx) * amplitudes[i0] + dx * amplitudes[i1]
    return out


@njit(cache=True)
def _sample_irregular_kernel(lambdas: np.ndarray, wavelengths: np.ndarray,
                             amplitudes: np.ndarray) -> np.ndarray:
    """Non-uniform grid lookup: forward linear scan, edge clamping."""
    n = wavelengths.shape[0]
    out = np.empty(lambdas.shape[0], dtype=np.float64)

    for j in range(lambdas.shape[0]):
        lam = lambdas[j]
        if n == 0:
            out[j] = 0.0
        elif lam != lam:
            out[j] = np.nan
        elif n == 1 or lam <= wavelengths[0]:
            out[j] = amplitudes[0]
        elif lam >= wavelengths[n - 1]:
            out[j] = amplitudes[n - 1]
        else:
            # First index whose wavelength exceeds lam; bounded by the
            # lam < wavelengths[n - 1] check above.
            k = 1
            while wavelengths[k] <= lam:
                k += 1
            w0 = wavelengths[k - 1]
            dx = (lam - w0) / (wavelengths[k] - w0)
            out[j] = (1.0 - dx) * amplitudes[k - 1] + dx * amplitudes[k]
    return out


# =============================================================================
# 2. CURVE KINDS
# =============================================================================

@dataclass(slots=True, frozen=True, eq=False)
class RegularSpectralCurve:
    """
    Amplitudes on a uniform grid spanning [start_wavelength, end_wavelength].

    ``amplitudes[0]`` sits at the start, ``amplitudes[-1]`` at the end.
    An empty table samples to 0.0 everywhere.
    """
    start_wavelength: float
    end_wavelength: float
    amplitudes: np.ndarray

    def __post_init__(self) -> None:
        start = float(self.start_wavelength)
        end = float(self.end_wavelength)
        if not (math.isfinite(start) and math.isfinite(end)) or start >= end:
            raise ValueError(
                f"RegularSpectralCurve requires finite start < end, got [{start}, {end}]"
            )
        object.__setattr__(self, "start_wavelength", start)
        object.__setattr__(self, "end_wavelength", end)
        object.__setattr__(self, "amplitudes", _frozen_table(self.amplitudes, "amplitudes"))

    @property
    def wavelengths(self) -> np.ndarray:
        """The implied uniform grid (one entry per amplitude)."""
        return np.linspace(self.start_wavelength, self.end_wavelength, self.amplitudes.shape[0])

    def sample(self, wavelength: WavelengthLike) -> WavelengthLike:
        lambdas, shape = flatten_values(wavelength)
        res = _sample_regular_kernel(lambdas, self.start_wavelength,
                                     self.end_wavelength, self.amplitudes)
        return restore_shape(res, shape)

    def __repr__(self) -> str:
        return (f"RegularSpectralCurve([{self.start_wavelength}, {self.end_wavelength}] nm, "
                f"n={self.amplitudes.shape[0]})")


@dataclass(slots=True, frozen=True, eq=False)
class IrregularSpectralCurve:
    """
    Amplitudes on a caller-supplied wavelength grid.

    The grid is expected to be non-decreasing.  This is not enforced, only
    warned about; a non-monotonic grid still samples deterministically.
    """
    amplitudes: np.ndarray
    wavelengths: np.ndarray

    def __post_init__(self) -> None:
        amps = _frozen_table(self.amplitudes, "amplitudes")
        wls = _frozen_table(self.wavelengths, "wavelengths")
        if amps.shape[0] != wls.shape[0]:
            raise ValueError(
                f"IrregularSpectralCurve: amplitudes length {amps.shape[0]} "
                f"!= wavelengths length {wls.shape[0]}"
            )
        if wls.shape[0] > 1 and np.any(np.diff(wls) < 0.0):
            warnings.warn(
                "IrregularSpectralCurve: wavelength grid is not monotonic; "
                "sampling will follow the first crossing in table order.",
                stacklevel=3,
            )
        object.__setattr__(self, "amplitudes", amps)
        object.__setattr__(self, "wavelengths", wls)

    def sample(self, wavelength: WavelengthLike) -> WavelengthLike:
        lambdas, shape = flatten_values(wavelength)
        res = _sample_irregular_kernel(lambdas, self.wavelengths, self.amplitudes)
        return restore_shape(res, shape)

    def __repr__(self) -> str:
        n = self.wavelengths.shape[0]
        if n == 0:
            return "IrregularSpectralCurve(empty)"
        return (f"IrregularSpectralCurve([{self.wavelengths[0]}, {self.wavelengths[-1]}] nm, "
                f"n={n})")


@dataclass(slots=True, frozen=True)
class ConstantSpectralCurve:
    """The same amplitude at every wavelength."""
    amplitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "amplitude", float(self.amplitude))

    def sample(self, wavelength: WavelengthLike) -> WavelengthLike:
        if np.ndim(wavelength) == 0:
            return self.amplitude
        return np.full(np.shape(wavelength), self.amplitude, dtype=np.float64)


# --- CIE daylight basis (process-wide, read-only) ---
DAYLIGHT_S0: Final[RegularSpectralCurve] = RegularSpectralCurve(
    DAYLIGHT_WAVELENGTH_MIN, DAYLIGHT_WAVELENGTH_MAX, S0_AMPLITUDES
)
DAYLIGHT_S1: Final[RegularSpectralCurve] = RegularSpectralCurve(
    DAYLIGHT_WAVELENGTH_MIN, DAYLIGHT_WAVELENGTH_MAX, S1_AMPLITUDES
)
DAYLIGHT_S2: Final[RegularSpectralCurve] = RegularSpectralCurve(
    DAYLIGHT_WAVELENGTH_MIN, DAYLIGHT_WAVELENGTH_MAX, S2_AMPLITUDES
)


def daylight_coefficients(x: float, y: float) -> Tuple[float, float]:
    """
    Weights (M1, M2) of the S1, S2 basis curves for chromaticity (x, y).

    CIE 15:2004 Eq. 3.6.  The approximation is intended for points near the
    daylight locus; elsewhere it still returns finite weights unless the
    shared denominator vanishes, in which case Inf/NaN propagate.
    """
    x = np.float64(x)
    y = np.float64(y)
    with np.errstate(divide="ignore", invalid="ignore"):
        denominator = 0.0241 + 0.2562 * x - 0.7341 * y
        m1 = (-1.3515 - 1.7703 * x + 5.9114 * y) / denominator
        m2 = (0.03 - 31.4424 * x + 30.0717 * y) / denominator
    return float(m1), float(m2)


@dataclass(slots=True, frozen=True)
class ChromaticSpectralCurve:
    """
    Daylight-like spectrum synthesised for an (x, y) chromaticity.

    ``sample(λ) = S0(λ) + m1·S1(λ) + m2·S2(λ)`` with m1, m2 solved once
    from (x, y).  No table is stored; the basis curves are shared.
    """
    x: float
    y: float
    m1: float = field(init=False)
    m2: float = field(init=False)

    def __post_init__(self) -> None:
        m1, m2 = daylight_coefficients(self.x, self.y)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "m1", m1)
        object.__setattr__(self, "m2", m2)

    def sample(self, wavelength: WavelengthLike) -> WavelengthLike:
        return (DAYLIGHT_S0.sample(wavelength)
                + self.m1 * DAYLIGHT_S1.sample(wavelength)
                + self.m2 * DAYLIGHT_S2.sample(wavelength))


SpectralCurve = Union[
    RegularSpectralCurve,
    IrregularSpectralCurve,
    ChromaticSpectralCurve,
    ConstantSpectralCurve,
]
SPECTRAL_CURVE_TYPES: Final[tuple] = (
    RegularSpectralCurve,
    IrregularSpectralCurve,
    ChromaticSpectralCurve,
    ConstantSpectralCurve,
)


# =============================================================================
# 3. TRISTIMULUS INTEGRATION
# =============================================================================

_CMF_WAVELENGTHS: Final[np.ndarray] = np.linspace(
    CMF_WAVELENGTH_MIN, CMF_WAVELENGTH_MAX, CIE_1931_CMFS.shape[0]
)
_CMF_WAVELENGTHS.flags.writeable = False


def to_color_xyz(curve: SpectralCurve) -> np.ndarray:
    """
    Integrates a spectral curve against the CIE 1931 observer.

    Args:
        curve: Any of the four curve kinds.

    Returns:
        XYZ tristimulus, float64 array of shape (3,).

    Raises:
        TypeError: If *curve* is not a spectral curve.
    """
    if not isinstance(curve, SPECTRAL_CURVE_TYPES):
        raise TypeError(f"Unsupported spectral curve type: {type(curve)}")

    samples = np.asarray(curve.sample(_CMF_WAVELENGTHS), dtype=np.float64)
    # (W,) dot (W, 3) -> (3,)
    return np.dot(samples, CIE_1931_CMFS) * CMF_WAVELENGTH_STEP


def to_color_rgb(curve: SpectralCurve, color_space: Optional[ColorSpace] = None) -> np.ndarray:
    """
    Integrates a spectral curve and converts it to linear RGB.

    Args:
        curve: Any of the four curve kinds.
        color_space: Target space (default sRGB).  No gamma is applied.

    Returns:
        Linear RGB in the color space's dtype, shape (3,).
    """
    space = SRGB if color_space is None else color_space
    return space.convert_xyz_to_rgb(to_color_xyz(curve))


@functools.lru_cache(maxsize=1)
def _daylight_basis_xyz() -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """XYZ integrals of S0, S1, S2; computed on first use."""
    out = []
    for basis in (DAYLIGHT_S0, DAYLIGHT_S1, DAYLIGHT_S2):
        xyz = to_color_xyz(basis)
        xyz.flags.writeable = False
        out.append(xyz)
    return tuple(out)


def get_color_xyz(x: float, y: float) -> np.ndarray:
    """
    XYZ of ``ChromaticSpectralCurve(x, y)`` without per-wavelength sampling.

    Integration is linear, so the result is the basis integrals combined
    with the same (m1, m2) weights the curve would use.

    Returns:
        XYZ tristimulus, float64 array of shape (3,).
    """
    m1, m2 = daylight_coefficients(x, y)
    s0, s1, s2 = _daylight_basis_xyz()
    return s0 + m1 * s1 + m2 * s2


# =============================================================================
# 4. MATERIAL PRESETS
# =============================================================================

METAL_SYMBOLS: Final[Tuple[str, ...]] = tuple(sorted(METAL_TABLES))


@functools.lru_cache(maxsize=None)
def _metal_curves(symbol: str) -> Tuple[IrregularSpectralCurve, IrregularSpectralCurve]:
    wavelength, eta, k = METAL_TABLES[symbol]
    return IrregularSpectralCurve(eta, wavelength), IrregularSpectralCurve(k, wavelength)


def metal_spectral_curves(symbol: str) -> Tuple[IrregularSpectralCurve, IrregularSpectralCurve]:
    """
    Complex refractive index of a tabulated metal as spectral curves.

    Args:
        symbol: Chemical symbol, case-insensitive (e.g. ``"Au"``, ``"cu"``).

    Returns:
        ``(eta, k)``: real part and extinction coefficient curves.

    Raises:
        KeyError: If the metal is not tabulated.
    """
    key = symbol.strip().capitalize()
    if key not in METAL_TABLES:
        raise KeyError(f"Metal {symbol!r} not found. Available: {', '.join(METAL_SYMBOLS)}")
    return _metal_curves(key)


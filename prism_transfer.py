# -*- coding: utf-8 -*-
"""
Prism: Colorimetry and spectral synthesis for light transport
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Piecewise Gamma Transfer Function
=================================
Encodes linear light into a perceptual signal (``redo``) and decodes it
back (``undo``) using the classic "linear toe + offset power law" curve.

For an input ``v`` and break point ``b``:

    redo(v) = v · slope                                 if v <= b
            = slope_match · v^(1/gamma) - segment_offset  otherwise

    undo(v) = v / slope                                 if v <= b · slope
            = ((v + segment_offset) / slope_match)^gamma  otherwise

The three derived constants are solved once so that both the value and
the first derivative of the two segments match at ``b``.  With ``b == 0``
the curve degenerates to a pure power law (slope = slope_match = 1,
segment_offset = 0).

Clamping Policy:
    The formula is applied verbatim by default; NaN and Inf propagate as
    IEEE 754 dictates.  Passing ``clip=True`` maps inputs <= 0 to exactly 0
    and inputs >= 1 to exactly 1; only the open interval goes through the
    curve.  The same policy holds for every precision.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - ITU-R BT.709-6 (HDTV transfer characteristics)
"""

import math
from dataclasses import dataclass, field
from typing import Final, Union

import numpy as np
from numba import njit

__all__ = [
    "ArrayOrScalar",
    "TransferFunction",
    "compute_transfer_constants",
    "flatten_values",
    "restore_shape",
]

ArrayOrScalar = Union[float, np.ndarray]

_SCALAR_SHAPE: Final[tuple] = ()


# =============================================================================
# 1. SHAPE HELPERS
# =============================================================================

def flatten_values(value: ArrayOrScalar) -> tuple[np.ndarray, tuple]:
    """Scalar or N-D input -> (contiguous 1D float64 array, original shape)."""
    arr = np.asarray(value, dtype=np.float64)
    return np.ascontiguousarray(arr).ravel(), arr.shape


def restore_shape(res: np.ndarray, shape: tuple) -> ArrayOrScalar:
    """Inverse of ``flatten_values``: a float for scalar input, else reshaped."""
    if shape == _SCALAR_SHAPE:
        return float(res[0])
    return res.reshape(shape)


# =============================================================================
# 2. CONSTANT DERIVATION
# =============================================================================

def compute_transfer_constants(break_point: float, gamma: float) -> tuple[float, float, float]:
    """
    Solves the continuity conditions of the piecewise curve.

    Args:
        break_point: Linear/power-law switch point (>= 0).
        gamma: Decoding exponent (> 0).

    Returns:
        ``(slope, slope_match, segment_offset)``.
    """
    if break_point <= 0.0:
        return 1.0, 1.0, 0.0

    # b^(1/gamma - 1) appears in both the slope and its match.
    b_pow = break_point ** (1.0 / gamma - 1.0)
    slope = 1.0 / (gamma / b_pow - gamma * break_point + break_point)
    slope_match = gamma * slope / b_pow
    segment_offset = slope_match * break_point ** (1.0 / gamma) - slope * break_point
    return slope, slope_match, segment_offset


# =============================================================================
# 3. LOW-LEVEL KERNELS (Numba)
# =============================================================================
# NaN/Inf must propagate, so the kernels are compiled without fastmath.
# With clip set, inputs at or beyond [0, 1] map exactly onto the bounds.

@njit(cache=True)
def _redo_kernel(values: np.ndarray, break_point: float, slope: float,
                 slope_match: float, segment_offset: float,
                 inv_gamma: float, clip: bool) -> np.ndarray:
    """Forward (encoding) transfer over a flat float64 array."""
    out = np.empty(values.shape[0], dtype=np.float64)
    for i in range(values.shape[0]):
        v = values[i]
        if clip:
            if v <= 0.0:
                out[i] = 0.0
                continue
            if v >= 1.0:
                out[i] = 1.0
                continue
        if v <= break_point:
            out[i] = v * slope
        else:
            out[i] = slope_match * v ** inv_gamma - segment_offset
    return out


@njit(cache=True)
def _undo_kernel(values: np.ndarray, linear_limit: float, slope: float,
                 slope_match: float, segment_offset: float,
                 gamma: float, clip: bool) -> np.ndarray:
    """Inverse (decoding) transfer over a flat float64 array."""
    out = np.empty(values.shape[0], dtype=np.float64)
    for i in range(values.shape[0]):
        v = values[i]
        if clip:
            if v <= 0.0:
                out[i] = 0.0
                continue
            if v >= 1.0:
                out[i] = 1.0
                continue
        if v <= linear_limit:
            out[i] = v / slope
        else:
            out[i] = ((v + segment_offset) / slope_match) ** gamma
    return out


# =============================================================================
# 4. TRANSFER FUNCTION
# =============================================================================

@dataclass(slots=True, frozen=True)
class TransferFunction:
    """
    Immutable gamma stage of a color space.

    Attributes:
        break_point: Input value below which the curve is linear.
        gamma: Decoding exponent; encoding uses ``1 / gamma``.
        slope: Gradient of the linear toe (derived).
        slope_match: Scale of the power-law segment (derived).
        segment_offset: Offset of the power-law segment (derived).

    Examples:
        >>> tf = TransferFunction(0.00304, 2.4)
        >>> round(tf.redo(0.5), 3)
        0.735
    """
    break_point: float
    gamma: float
    slope: float = field(init=False)
    slope_match: float = field(init=False)
    segment_offset: float = field(init=False)

    def __post_init__(self) -> None:
        break_point = float(self.break_point)
        gamma = float(self.gamma)
        if not math.isfinite(gamma) or gamma <= 0.0:
            raise ValueError(f"gamma must be finite and > 0, got {self.gamma}")
        if not math.isfinite(break_point) or break_point < 0.0:
            raise ValueError(f"break_point must be finite and >= 0, got {self.break_point}")

        slope, slope_match, segment_offset = compute_transfer_constants(break_point, gamma)
        # Frozen dataclass: derived fields are assigned once, here.
        object.__setattr__(self, "break_point", break_point)
        object.__setattr__(self, "gamma", gamma)
        object.__setattr__(self, "slope", slope)
        object.__setattr__(self, "slope_match", slope_match)
        object.__setattr__(self, "segment_offset", segment_offset)

    @property
    def is_pure_power(self) -> bool:
        """True when there is no linear toe segment."""
        return self.break_point == 0.0

    def redo(self, value: ArrayOrScalar, clip: bool = False) -> ArrayOrScalar:
        """
        Applies the encoding curve (linear light -> signal).

        Args:
            value: Scalar or array of linear values.
            clip: If True, values <= 0 map to 0 and values >= 1 map to 1.

        Returns:
            Encoded value(s), same shape as *value*.
        """
        flat, shape = flatten_values(value)
        res = _redo_kernel(flat, self.break_point, self.slope, self.slope_match,
                           self.segment_offset, 1.0 / self.gamma, clip)
        return restore_shape(res, shape)

    def undo(self, value: ArrayOrScalar, clip: bool = False) -> ArrayOrScalar:
        """
        Applies the decoding curve (signal -> linear light).

        Args:
            value: Scalar or array of encoded values.
            clip: If True, values <= 0 map to 0 and values >= 1 map to 1.

        Returns:
            Linear value(s), same shape as *value*.
        """
        flat, shape = flatten_values(value)
        res = _undo_kernel(flat, self.break_point * self.slope, self.slope,
                           self.slope_match, self.segment_offset, self.gamma, clip)
        return restore_shape(res, shape)

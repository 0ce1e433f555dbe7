# -*- coding: utf-8 -*-
"""
Prism: Colorimetry and spectral synthesis for light transport
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

RGB Color Spaces
================
An RGB color space is fully described by ten numbers: the break point and
gamma of its transfer function, the (x, y) chromaticities of its three
primaries and the (x, y) chromaticity of its white point.  From these the
module derives the XYZ <-> RGB matrices algebraically (no general-purpose
linear-algebra inversion) and composes them with ``TransferFunction`` into
an immutable ``ColorSpace``.

Color Representation:
    Colors are numpy arrays with 3 (RGB / XYZ) or 4 (RGBA / XYZA)
    components on the last axis.  Single colors ``(3,)`` / ``(4,)`` and
    batches ``(..., 3)`` / ``(..., 4)`` are accepted everywhere; the
    fourth (alpha) channel always passes through unchanged.

Precision:
    A ``ColorSpace`` carries a numpy dtype (float64 by default, float32
    supported).  Matrices are derived in float64 and stored in the
    instance dtype; every result is returned in that dtype.

Numerical Degeneracy:
    A white point with y == 0 or a collinear set of primaries yields
    Inf/NaN matrix entries.  This is not an error: the values propagate
    and a ``RuntimeWarning`` is issued.

References:
    - SMPTE RP 177-1993 "Derivation of Basic Television Color Equations"
    - IEC 61966-2-1:1999 (sRGB Standard)
"""

import functools
import warnings
from typing import Any, Callable, Dict, Final, NamedTuple, Optional, Tuple, TypeAlias

import numpy as np
from numpy.typing import DTypeLike

from prism_transfer import TransferFunction

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Decorators ---
    "handle_colors",

    # --- Matrix derivation ---
    "PrimaryMatrices",
    "build_primary_matrices",

    # --- Classes ---
    "ColorSpace",

    # --- Presets ---
    "ADOBE_RGB_1998",
    "ADOBE_WIDE_GAMUT_RGB",
    "APPLE_RGB",
    "CIE_RGB",
    "EBU",
    "HDTV",
    "NTSC",
    "SMPTE_240M",
    "SMPTE_C",
    "SRGB",
    "COLOR_SPACES",
    "get_color_space",
]

ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

_COLOR_CHANNELS: Final[Tuple[int, int]] = (3, 4)


# =============================================================================
# 1. SHAPE HANDLING
# =============================================================================

def handle_colors(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator normalising a color argument to a contiguous (N, C) batch.

    The wrapped method receives ``(self, colors, *args)`` with ``colors``
    of shape (N, 3) or (N, 4) and must return a fresh array of the same
    shape.  The result is reshaped to the caller's original shape and cast
    to ``self.dtype``:

        - (3,)      -> (3,)
        - (N, 4)    -> (N, 4)
        - (H, W, 3) -> (H, W, 3)

    Raises:
        TypeError: If the color is None.
        ValueError: If the last axis is not 3 or 4 wide.
    """
    @functools.wraps(func)
    def wrapper(self: "ColorSpace", color: Any, *args: Any, **kwargs: Any) -> ArrayFloat:
        if color is None:
            raise TypeError(f"{func.__name__}() expected a color, got None")

        arr = np.asarray(color, dtype=self.dtype)
        if arr.ndim == 0 or arr.shape[-1] not in _COLOR_CHANNELS:
            got = arr.shape[-1] if arr.ndim else "a scalar"
            raise ValueError(f"Expected last dimension size 3 or 4, got {got}")

        batch = np.ascontiguousarray(arr.reshape(-1, arr.shape[-1]), dtype=np.float64)
        res = func(self, batch, *args, **kwargs)
        return res.reshape(arr.shape).astype(self.dtype, copy=False)
    return wrapper


# =============================================================================
# 2. PRIMARY MATRIX DERIVATION
# =============================================================================

class PrimaryMatrices(NamedTuple):
    """
    Result of ``build_primary_matrices``.

    Attributes:
        xyz_to_rgb: (3, 3) matrix, ``rgb = xyz_to_rgb @ xyz``.
        rgb_to_xyz: (3, 3) matrix, ``xyz = rgb_to_xyz @ rgb``.
        white_weights: Per-channel white normalisation ``(rW, gW, bW)``.
        white_chromaticity: ``(xW, yW, zW)`` of the white point.
    """
    xyz_to_rgb: np.ndarray
    rgb_to_xyz: np.ndarray
    white_weights: np.ndarray
    white_chromaticity: np.ndarray


def _xyz_to_rgb_rows(x_r: np.float64, y_r: np.float64,
                     x_g: np.float64, y_g: np.float64,
                     x_b: np.float64, y_b: np.float64,
                     x_w: np.float64, y_w: np.float64) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rows of the XYZ -> RGB matrix and their white-point weights.

    Each channel's row is the cross product of the other two primaries'
    (x, y, z) vectors, so that it vanishes on them.  The row is then
    scaled so that the white point (at Y = 1) maps to 1.0 on that channel.
    """
    z_r = 1.0 - (x_r + y_r)
    z_g = 1.0 - (x_g + y_g)
    z_b = 1.0 - (x_b + y_b)
    z_w = 1.0 - (x_w + y_w)

    r_x = y_g * z_b - y_b * z_g
    r_y = x_b * z_g - x_g * z_b
    r_z = x_g * y_b - x_b * y_g

    g_x = y_b * z_r - y_r * z_b
    g_y = x_r * z_b - x_b * z_r
    g_z = x_b * y_r - x_r * y_b

    b_x = y_r * z_g - y_g * z_r
    b_y = x_g * z_r - x_r * z_g
    b_z = x_r * y_g - x_g * y_r

    r_w = (r_x * x_w + r_y * y_w + r_z * z_w) / y_w
    g_w = (g_x * x_w + g_y * y_w + g_z * z_w) / y_w
    b_w = (b_x * x_w + b_y * y_w + b_z * z_w) / y_w

    rows = np.array([
        [r_x / r_w, r_y / r_w, r_z / r_w],
        [g_x / g_w, g_y / g_w, g_z / g_w],
        [b_x / b_w, b_y / b_w, b_z / b_w],
    ], dtype=np.float64)
    return rows, np.array([r_w, g_w, b_w], dtype=np.float64)


def _adjugate_inverse(m: np.ndarray) -> np.ndarray:
    """
    Inverse of a 3x3 matrix via cofactors and the determinant.

    Singular input yields Inf/NaN entries rather than raising.
    """
    (a, b, c), (d, e, f), (g, h, i) = m

    det = a * (e * i - h * f) - b * (d * i - g * f) + c * (d * h - g * e)
    s = 1.0 / det

    return s * np.array([
        [e * i - f * h, c * h - b * i, b * f - c * e],
        [f * g - d * i, a * i - c * g, c * d - a * f],
        [d * h - e * g, b * g - a * h, a * e - b * d],
    ], dtype=np.float64)


def build_primary_matrices(x_r: float, y_r: float,
                           x_g: float, y_g: float,
                           x_b: float, y_b: float,
                           x_w: float, y_w: float) -> PrimaryMatrices:
    """
    Derives the RGB <-> XYZ matrices from primary and white chromaticities.

    Args:
        x_r, y_r: Red primary chromaticity.
        x_g, y_g: Green primary chromaticity.
        x_b, y_b: Blue primary chromaticity.
        x_w, y_w: White point chromaticity.

    Returns:
        ``PrimaryMatrices`` with both 3x3 matrices and the white-point rows.
        Degenerate inputs produce Inf/NaN entries and a ``RuntimeWarning``.
    """
    coords = [np.float64(v) for v in (x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w)]

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        xyz_to_rgb, weights = _xyz_to_rgb_rows(*coords)
        rgb_to_xyz = _adjugate_inverse(xyz_to_rgb)

    white = np.array([x_w, y_w, 1.0 - (x_w + y_w)], dtype=np.float64)

    if not (np.all(np.isfinite(xyz_to_rgb)) and np.all(np.isfinite(rgb_to_xyz))):
        warnings.warn(
            f"Degenerate primaries/white point (white y={y_w}): "
            "color matrices contain Inf or NaN.",
            RuntimeWarning,
            stacklevel=2,
        )

    return PrimaryMatrices(xyz_to_rgb, rgb_to_xyz, weights, white)


# =============================================================================
# 3. COLOR SPACE
# =============================================================================

def _frozen(arr: np.ndarray, dtype: DTypeLike) -> np.ndarray:
    out = np.array(arr, dtype=dtype)
    out.flags.writeable = False
    return out


class ColorSpace:
    """
    Immutable RGB color space: transfer function plus primary matrices.

    Construction:
        ``ColorSpace(break_point, gamma, x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w)``

    Read path
    ---------
    All attributes are read-only properties; matrices are returned as
    non-writeable arrays.  Instances are safe to share between threads.

    Conversions
    -----------
    ``convert_rgb_to_xyz`` / ``convert_xyz_to_rgb`` are a single matrix
    product per color.  ``redo_gamma_correction`` / ``undo_gamma_correction``
    apply the transfer function to the first three channels only.

    Examples:
        >>> import numpy as np
        >>> xyz = SRGB.convert_rgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        >>> round(float(xyz[1]), 6)
        1.0
    """

    __slots__ = (
        "_name",
        "_dtype",
        "_params",
        "_transfer",
        "_matrices",
        "_xyz_to_rgb",
        "_rgb_to_xyz",
        "_xyz_to_rgb_t",
        "_rgb_to_xyz_t",
    )

    def __init__(
        self,
        break_point: float,
        gamma: float,
        x_r: float, y_r: float,
        x_g: float, y_g: float,
        x_b: float, y_b: float,
        x_w: float, y_w: float,
        dtype: DTypeLike = np.float64,
        name: Optional[str] = None,
    ) -> None:
        dtype = np.dtype(dtype)
        if dtype.kind != "f":
            raise TypeError(f"ColorSpace dtype must be a floating type, got {dtype}")

        self._name: Optional[str] = name
        self._dtype: np.dtype = dtype
        self._params: Tuple[float, ...] = tuple(
            float(v) for v in (break_point, gamma, x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w)
        )
        self._transfer = TransferFunction(break_point, gamma)
        self._matrices = build_primary_matrices(x_r, y_r, x_g, y_g, x_b, y_b, x_w, y_w)

        self._xyz_to_rgb = _frozen(self._matrices.xyz_to_rgb, dtype)
        self._rgb_to_xyz = _frozen(self._matrices.rgb_to_xyz, dtype)
        # Row-vector batches multiply by the transpose: (N, 3) @ M.T
        self._xyz_to_rgb_t = np.ascontiguousarray(self._xyz_to_rgb.T, dtype=np.float64)
        self._rgb_to_xyz_t = np.ascontiguousarray(self._rgb_to_xyz.T, dtype=np.float64)

    # -- read interface ----------------------------------------------------
    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def transfer_function(self) -> TransferFunction:
        return self._transfer

    @property
    def break_point(self) -> float:
        return self._transfer.break_point

    @property
    def gamma(self) -> float:
        return self._transfer.gamma

    @property
    def slope(self) -> float:
        return self._transfer.slope

    @property
    def slope_match(self) -> float:
        return self._transfer.slope_match

    @property
    def segment_offset(self) -> float:
        return self._transfer.segment_offset

    @property
    def primaries(self) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
        """((x_r, y_r), (x_g, y_g), (x_b, y_b))."""
        p = self._params
        return (p[2], p[3]), (p[4], p[5]), (p[6], p[7])

    @property
    def white_point(self) -> Tuple[float, float]:
        """(x_w, y_w)."""
        return self._params[8], self._params[9]

    @property
    def white_point_xyz(self) -> np.ndarray:
        """XYZ of the white point scaled to Y = 1."""
        x_w, y_w, z_w = self._matrices.white_chromaticity
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.array([x_w / y_w, 1.0, z_w / y_w], dtype=self._dtype)

    @property
    def white_weights(self) -> np.ndarray:
        """Per-channel white normalisation (rW, gW, bW) used in the derivation."""
        return self._matrices.white_weights.astype(self._dtype)

    @property
    def matrix_rgb_to_xyz(self) -> np.ndarray:
        """(3, 3) read-only matrix, ``xyz = M @ rgb``."""
        return self._rgb_to_xyz

    @property
    def matrix_xyz_to_rgb(self) -> np.ndarray:
        """(3, 3) read-only matrix, ``rgb = M @ xyz``."""
        return self._xyz_to_rgb

    def astype(self, dtype: DTypeLike) -> "ColorSpace":
        """Returns an equivalent color space computing in *dtype*."""
        return ColorSpace(*self._params, dtype=dtype, name=self._name)

    def __repr__(self) -> str:
        label = f"name={self._name!r}, " if self._name else ""
        return (
            f"ColorSpace({label}break_point={self.break_point}, gamma={self.gamma}, "
            f"white_point={self.white_point}, dtype={self._dtype.name})"
        )

    # -- conversions -------------------------------------------------------
    @handle_colors
    def convert_rgb_to_xyz(self, color: ArrayFloat) -> ArrayFloat:
        """
        Converts linear RGB(A) to XYZ(A).

        Args:
            color: Shape (3,), (4,) or (..., 3|4).

        Returns:
            XYZ(A) in the instance dtype; alpha is passed through.
        """
        out = color.copy()
        out[:, :3] = np.dot(color[:, :3], self._rgb_to_xyz_t)
        return out

    @handle_colors
    def convert_xyz_to_rgb(self, color: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ(A) to linear RGB(A).

        No gamut clipping is applied; out-of-gamut colors yield negative
        or > 1 channels.

        Args:
            color: Shape (3,), (4,) or (..., 3|4).

        Returns:
            Linear RGB(A) in the instance dtype; alpha is passed through.
        """
        out = color.copy()
        out[:, :3] = np.dot(color[:, :3], self._xyz_to_rgb_t)
        return out

    @handle_colors
    def redo_gamma_correction(self, color: ArrayFloat, clip: bool = False) -> ArrayFloat:
        """
        Encodes linear RGB(A) with the transfer function.

        Args:
            color: Shape (3,), (4,) or (..., 3|4).
            clip: If True, clamps each channel to [0, 1] before encoding.

        Returns:
            Encoded RGB(A); alpha is passed through.
        """
        out = color.copy()
        out[:, :3] = self._transfer.redo(color[:, :3], clip=clip)
        return out

    @handle_colors
    def undo_gamma_correction(self, color: ArrayFloat, clip: bool = False) -> ArrayFloat:
        """
        Decodes encoded RGB(A) back to linear light.

        Args:
            color: Shape (3,), (4,) or (..., 3|4).
            clip: If True, clamps each channel to [0, 1] before decoding.

        Returns:
            Linear RGB(A); alpha is passed through.
        """
        out = color.copy()
        out[:, :3] = self._transfer.undo(color[:, :3], clip=clip)
        return out


# =============================================================================
# 4. PRESETS
# =============================================================================
# D65 as tabulated by the broadcast standards (0.31271, 0.32902).

ADOBE_RGB_1998: Final[ColorSpace] = ColorSpace(
    0.0, 2.2, 0.6400, 0.3300, 0.2100, 0.7100, 0.1500, 0.0600, 0.31271, 0.32902,
    name="Adobe RGB (1998)",
)
ADOBE_WIDE_GAMUT_RGB: Final[ColorSpace] = ColorSpace(
    0.0, 563.0 / 256.0, 0.7347, 0.2653, 0.1152, 0.8264, 0.1566, 0.0177, 0.3457, 0.3585,
    name="Adobe Wide Gamut RGB",
)
APPLE_RGB: Final[ColorSpace] = ColorSpace(
    0.0, 1.8, 0.6250, 0.3400, 0.2800, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902,
    name="Apple RGB",
)
CIE_RGB: Final[ColorSpace] = ColorSpace(
    0.0, 2.2, 0.7350, 0.2650, 0.2740, 0.7170, 0.1670, 0.0090, 1.0 / 3.0, 1.0 / 3.0,
    name="CIE RGB",
)
EBU: Final[ColorSpace] = ColorSpace(
    0.018, 20.0 / 9.0, 0.6400, 0.3300, 0.2900, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902,
    name="EBU",
)
HDTV: Final[ColorSpace] = ColorSpace(
    0.018, 20.0 / 9.0, 0.6400, 0.3300, 0.3000, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902,
    name="HDTV",
)
NTSC: Final[ColorSpace] = ColorSpace(
    0.018, 20.0 / 9.0, 0.6700, 0.3300, 0.2100, 0.7100, 0.1400, 0.0800, 0.31010, 0.31620,
    name="NTSC",
)
SMPTE_240M: Final[ColorSpace] = ColorSpace(
    0.018, 20.0 / 9.0, 0.6300, 0.3400, 0.3100, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902,
    name="SMPTE 240M",
)
SMPTE_C: Final[ColorSpace] = ColorSpace(
    0.018, 20.0 / 9.0, 0.6300, 0.3400, 0.3100, 0.5950, 0.1550, 0.0700, 0.31271, 0.32902,
    name="SMPTE-C",
)
SRGB: Final[ColorSpace] = ColorSpace(
    0.00304, 2.4, 0.6400, 0.3300, 0.3000, 0.6000, 0.1500, 0.0600, 0.31271, 0.32902,
    name="sRGB",
)

COLOR_SPACES: Final[Dict[str, ColorSpace]] = {
    "adobe_rgb_1998": ADOBE_RGB_1998,
    "adobe_wide_gamut_rgb": ADOBE_WIDE_GAMUT_RGB,
    "apple_rgb": APPLE_RGB,
    "cie_rgb": CIE_RGB,
    "ebu": EBU,
    "hdtv": HDTV,
    "ntsc": NTSC,
    "smpte_240m": SMPTE_240M,
    "smpte_c": SMPTE_C,
    "srgb": SRGB,
}


def get_color_space(name: str) -> ColorSpace:
    """
    Looks up a preset by registry key or display name.

    Matching ignores case, spaces, hyphens and parentheses, so
    ``"sRGB"``, ``"SMPTE-C"`` and ``"Adobe RGB (1998)"`` all resolve.

    Raises:
        KeyError: If no preset matches.
    """
    key = name.strip().lower()
    for ch in "()":
        key = key.replace(ch, "")
    key = "_".join(key.replace("-", " ").split())
    try:
        return COLOR_SPACES[key]
    except KeyError:
        raise KeyError(
            f"Unknown color space {name!r}. Available: {', '.join(sorted(COLOR_SPACES))}"
        ) from None

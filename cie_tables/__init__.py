# -*- coding: utf-8 -*-
"""
Prism: Colorimetry and spectral synthesis for light transport
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Read-only CIE and material tables consumed by the spectral engine.
"""

from .cmf import (
    CIE_1931_CMFS,
    CIE_X_BAR,
    CIE_Y_BAR,
    CIE_Z_BAR,
    CMF_WAVELENGTH_MAX,
    CMF_WAVELENGTH_MIN,
    CMF_WAVELENGTH_STEP,
)
from .daylight import (
    DAYLIGHT_WAVELENGTH_MAX,
    DAYLIGHT_WAVELENGTH_MIN,
    S0_AMPLITUDES,
    S1_AMPLITUDES,
    S2_AMPLITUDES,
)
from .metals import METAL_TABLES

__all__ = [
    "CIE_1931_CMFS",
    "CIE_X_BAR",
    "CIE_Y_BAR",
    "CIE_Z_BAR",
    "CMF_WAVELENGTH_MAX",
    "CMF_WAVELENGTH_MIN",
    "CMF_WAVELENGTH_STEP",
    "DAYLIGHT_WAVELENGTH_MAX",
    "DAYLIGHT_WAVELENGTH_MIN",
    "S0_AMPLITUDES",
    "S1_AMPLITUDES",
    "S2_AMPLITUDES",
    "METAL_TABLES",
]

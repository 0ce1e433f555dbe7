# -*- coding: utf-8 -*-
"""
Prism: Colorimetry and spectral synthesis for light transport
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Measured complex refractive index tables for metals.

Each metal carries three parallel tables of equal length: the wavelength
grid in nanometers (non-uniform), the real part ``ETA`` and the extinction
coefficient ``K``.  The grids are irregular and are therefore consumed
through ``IrregularSpectralCurve``.
"""

from typing import Dict, Final, Tuple

import numpy as np

__all__ = ["METAL_TABLES"]


def _frozen(values: list) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.flags.writeable = False
    return arr


AG_WAVELENGTH: Final[np.ndarray] = _frozen([
    298.757050, 302.400421, 306.133759, 309.960449, 313.884003, 317.908142,
    322.036835, 326.274139, 330.624481, 335.092377, 339.682678, 344.400482,
    349.251221, 354.240509, 359.374420, 364.659332, 370.102020, 375.709625,
    381.489777, 387.450562, 393.600555, 399.948975, 406.505493, 413.280579,
    420.285339, 427.531647, 435.032196, 442.800629, 450.851563, 459.200653,
    467.864838, 476.862213, 486.212463, 495.936707, 506.057861, 516.600769,
    527.592224, 539.061646, 551.040771, 563.564453, 576.670593, 590.400818,
    604.800842, 619.920898, 635.816284, 652.548279, 670.184753, 688.800964,
    708.481018, 729.318665, 751.419250, 774.901123, 799.897949, 826.561157,
    855.063293, 885.601257,
])

AG_ETA: Final[np.ndarray] = _frozen([
    1.519000, 1.496000, 1.432500, 1.323000, 1.142062, 0.932000,
    0.719062, 0.526000, 0.388125, 0.294000, 0.253313, 0.238000,
    0.221438, 0.209000, 0.194813, 0.186000, 0.192063, 0.200000,
    0.198063, 0.192000, 0.182000, 0.173000, 0.172625, 0.173000,
    0.166688, 0.160000, 0.158500, 0.157000, 0.151063, 0.144000,
    0.137313, 0.132000, 0.130250, 0.130000, 0.129938, 0.130000,
    0.130063, 0.129000, 0.124375, 0.120000, 0.119313, 0.121000,
    0.125500, 0.131000, 0.136125, 0.140000, 0.140063, 0.140000,
    0.144313, 0.148000, 0.145875, 0.143000, 0.142563, 0.145000,
    0.151938, 0.163000,
])

AG_K: Final[np.ndarray] = _frozen([
    1.080000, 0.882000, 0.761063, 0.647000, 0.550875, 0.504000,
    0.554375, 0.663000, 0.818563, 0.986000, 1.120687, 1.240000,
    1.345250, 1.440000, 1.533750, 1.610000, 1.641875, 1.670000,
    1.735000, 1.810000, 1.878750, 1.950000, 2.029375, 2.110000,
    2.186250, 2.260000, 2.329375, 2.400000, 2.478750, 2.560000,
    2.640000, 2.720000, 2.798125, 2.880000, 2.973750, 3.070000,
    3.159375, 3.250000, 3.348125, 3.450000, 3.553750, 3.660000,
    3.766250, 3.880000, 4.010625, 4.150000, 4.293125, 4.440000,
    4.586250, 4.740000, 4.908125, 5.090000, 5.288750, 5.500000,
    5.720624, 5.950000,
])

AL_WAVELENGTH: Final[np.ndarray] = _frozen([
    298.757050, 302.400421, 306.133759, 309.960449, 313.884003, 317.908142,
    322.036835, 326.274139, 330.624481, 335.092377, 339.682678, 344.400482,
    349.251221, 354.240509, 359.374420, 364.659332, 370.102020, 375.709625,
    381.489777, 387.450562, 393.600555, 399.948975, 406.505493, 413.280579,
    420.285339, 427.531647, 435.032196, 442.800629, 450.851563, 459.200653,
    467.864838, 476.862213, 486.212463, 495.936707, 506.057861, 516.600769,
    527.592224, 539.061646, 551.040771, 563.564453, 576.670593, 590.400818,
    604.800842, 619.920898, 635.816284, 652.548279, 670.184753, 688.800964,
    708.481018, 729.318665, 751.419250, 774.901123, 799.897949, 826.561157,
    855.063293, 885.601257,
])

AL_ETA: Final[np.ndarray] = _frozen([
    0.273375, 0.280000, 0.286813, 0.294000, 0.301875, 0.310000,
    0.317875, 0.326000, 0.334750, 0.344000, 0.353813, 0.364000,
    0.374375, 0.385000, 0.395750, 0.407000, 0.419125, 0.432000,
    0.445688, 0.460000, 0.474688, 0.490000, 0.506188, 0.523000,
    0.540063, 0.558000, 0.577313, 0.598000, 0.620313, 0.644000,
    0.668625, 0.695000, 0.723750, 0.755000, 0.789000, 0.826000,
    0.867000, 0.912000, 0.963000, 1.020000, 1.080000, 1.150000,
    1.220000, 1.300000, 1.390000, 1.490000, 1.600000, 1.740000,
    1.910000, 2.140000, 2.410000, 2.630000, 2.800000, 2.740000,
    2.580000, 2.240000,
])

AL_K: Final[np.ndarray] = _frozen([
    3.593750, 3.640000, 3.689375, 3.740000, 3.789375, 3.840000,
    3.894375, 3.950000, 4.005000, 4.060000, 4.113750, 4.170000,
    4.233750, 4.300000, 4.365000, 4.430000, 4.493750, 4.560000,
    4.633750, 4.710000, 4.784375, 4.860000, 4.938125, 5.020000,
    5.108750, 5.200000, 5.290000, 5.380000, 5.480000, 5.580000,
    5.690000, 5.800000, 5.915000, 6.030000, 6.150000, 6.280000,
    6.420000, 6.550000, 6.700000, 6.850000, 7.000000, 7.150000,
    7.310000, 7.480000, 7.650000, 7.820000, 8.010000, 8.210000,
    8.390000, 8.570000, 8.620000, 8.600000, 8.450000, 8.310000,
    8.210000, 8.210000,
])

AU_WAVELENGTH: Final[np.ndarray] = _frozen([
    298.757050, 302.400421, 306.133759, 309.960449, 313.884003, 317.908142,
    322.036835, 326.274139, 330.624481, 335.092377, 339.682678, 344.400482,
    349.251221, 354.240509, 359.374420, 364.659332, 370.102020, 375.709625,
    381.489777, 387.450562, 393.600555, 399.948975, 406.505493, 413.280579,
    420.285339, 427.531647, 435.032196, 442.800629, 450.851563, 459.200653,
    467.864838, 476.862213, 486.212463, 495.936707, 506.057861, 516.600769,
    527.592224, 539.061646, 551.040771, 563.564453, 576.670593, 590.400818,
    604.800842, 619.920898, 635.816284, 652.548279, 670.184753, 688.800964,
    708.481018, 729.318665, 751.419250, 774.901123, 799.897949, 826.561157,
    855.063293, 885.601257,
])

AU_ETA: Final[np.ndarray] = _frozen([
    1.795000, 1.812000, 1.822625, 1.830000, 1.837125, 1.840000,
    1.834250, 1.824000, 1.812000, 1.798000, 1.782000, 1.766000,
    1.752500, 1.740000, 1.727625, 1.716000, 1.705875, 1.696000,
    1.684750, 1.674000, 1.666000, 1.658000, 1.647250, 1.636000,
    1.628000, 1.616000, 1.596250, 1.562000, 1.502125, 1.426000,
    1.345875, 1.242000, 1.086750, 0.916000, 0.754500, 0.608000,
    0.491750, 0.402000, 0.345500, 0.306000, 0.267625, 0.236000,
    0.212375, 0.194000, 0.177750, 0.166000, 0.161000, 0.160000,
    0.160875, 0.164000, 0.169500, 0.176000, 0.181375, 0.188000,
    0.198125, 0.210000,
])

AU_K: Final[np.ndarray] = _frozen([
    1.920375, 1.920000, 1.918875, 1.916000, 1.911375, 1.904000,
    1.891375, 1.878000, 1.868250, 1.860000, 1.851750, 1.846000,
    1.845250, 1.848000, 1.852375, 1.862000, 1.883000, 1.906000,
    1.922500, 1.936000, 1.947750, 1.956000, 1.959375, 1.958000,
    1.951375, 1.940000, 1.924500, 1.904000, 1.875875, 1.846000,
    1.814625, 1.796000, 1.797375, 1.840000, 1.956500, 2.120000,
    2.326250, 2.540000, 2.730625, 2.880000, 2.940625, 2.970000,
    3.015000, 3.060000, 3.070000, 3.150000, 3.445812, 3.800000,
    4.087687, 4.357000, 4.610188, 4.860000, 5.125813, 5.390000,
    5.631250, 5.880000,
])

BE_WAVELENGTH: Final[np.ndarray] = _frozen([
    310.000000, 326.300018, 344.399994, 364.600006, 387.399994, 413.300018,
    442.800018, 476.800018, 516.600037, 563.500000, 619.900024, 688.799988,
    774.900024, 885.600037,
])

BE_ETA: Final[np.ndarray] = _frozen([
    2.470000, 2.550000, 2.640000, 2.730000, 2.840000, 2.950000,
    3.070000, 3.190000, 3.300000, 3.390000, 3.460000, 3.470000,
    3.440000, 3.350000,
])

BE_K: Final[np.ndarray] = _frozen([
    3.080000, 3.080000, 3.080000, 3.100000, 3.120000, 3.140000,
    3.160000, 3.160000, 3.180000, 3.170000, 3.180000, 3.230000,
    3.350000, 3.550000,
])

CR_WAVELENGTH: Final[np.ndarray] = _frozen([
    300.194000, 307.643005, 316.276001, 323.708008, 333.279999, 341.542999,
    351.217987, 362.514984, 372.312012, 385.031006, 396.102020, 409.175018,
    424.589020, 438.092010, 455.808990, 471.406982, 490.040009, 512.314026,
    532.102966, 558.468018, 582.066040, 610.739014, 700.452026, 815.658020,
    826.533020, 849.178040, 860.971985, 885.570984,
])

CR_ETA: Final[np.ndarray] = _frozen([
    0.980000, 1.020000, 1.060000, 1.120000, 1.180000, 1.260000,
    1.330000, 1.390000, 1.430000, 1.440000, 1.480000, 1.540000,
    1.650000, 1.800000, 1.990000, 2.220000, 2.490000, 2.750000,
    2.980000, 3.180000, 3.340000, 3.480000, 3.840000, 4.230000,
    4.270000, 4.310000, 4.330000, 4.380000,
])

CR_K: Final[np.ndarray] = _frozen([
    2.670000, 2.760000, 2.850000, 2.950000, 3.040000, 3.120000,
    3.180000, 3.240000, 3.310000, 3.400000, 3.540000, 3.710000,
    3.890000, 4.060000, 4.220000, 4.360000, 4.440000, 4.460000,
    4.450000, 4.410000, 4.380000, 4.360000, 4.370000, 4.340000,
    4.330000, 4.320000, 4.320000, 4.310000,
])

CU_WAVELENGTH: Final[np.ndarray] = _frozen([
    298.757050, 302.400421, 306.133759, 309.960449, 313.884003, 317.908142,
    322.036835, 326.274139, 330.624481, 335.092377, 339.682678, 344.400482,
    349.251221, 354.240509, 359.374420, 364.659332, 370.102020, 375.709625,
    381.489777, 387.450562, 393.600555, 399.948975, 406.505493, 413.280579,
    420.285339, 427.531647, 435.032196, 442.800629, 450.851563, 459.200653,
    467.864838, 476.862213, 486.212463, 495.936707, 506.057861, 516.600769,
    527.592224, 539.061646, 551.040771, 563.564453, 576.670593, 590.400818,
    604.800842, 619.920898, 635.816284, 652.548279, 670.184753, 688.800964,
    708.481018, 729.318665, 751.419250, 774.901123, 799.897949, 826.561157,
    855.063293, 885.601257,
])

CU_ETA: Final[np.ndarray] = _frozen([
    1.400313, 1.380000, 1.358438, 1.340000, 1.329063, 1.325000,
    1.332500, 1.340000, 1.334375, 1.325000, 1.317812, 1.310000,
    1.300313, 1.290000, 1.281563, 1.270000, 1.249062, 1.225000,
    1.200000, 1.180000, 1.174375, 1.175000, 1.177500, 1.180000,
    1.178125, 1.175000, 1.172812, 1.170000, 1.165312, 1.160000,
    1.155312, 1.150000, 1.142812, 1.135000, 1.131562, 1.120000,
    1.092437, 1.040000, 0.950375, 0.826000, 0.645875, 0.468000,
    0.351250, 0.272000, 0.230813, 0.214000, 0.209250, 0.213000,
    0.216250, 0.223000, 0.236500, 0.250000, 0.254188, 0.260000,
    0.280000, 0.300000,
])

CU_K: Final[np.ndarray] = _frozen([
    1.662125, 1.687000, 1.703313, 1.720000, 1.744563, 1.770000,
    1.791625, 1.810000, 1.822125, 1.834000, 1.851750, 1.872000,
    1.894250, 1.916000, 1.931688, 1.950000, 1.972438, 2.015000,
    2.121562, 2.210000, 2.177188, 2.130000, 2.160063, 2.210000,
    2.249938, 2.289000, 2.326000, 2.362000, 2.397625, 2.433000,
    2.469187, 2.504000, 2.535875, 2.564000, 2.589625, 2.605000,
    2.595562, 2.583000, 2.576500, 2.599000, 2.678062, 2.809000,
    3.010750, 3.240000, 3.458187, 3.670000, 3.863125, 4.050000,
    4.239563, 4.430000, 4.619563, 4.817000, 5.034125, 5.260000,
    5.485625, 5.717000,
])

HG_WAVELENGTH: Final[np.ndarray] = _frozen([
    309.950012, 326.263000, 344.389008, 364.647003, 387.437988, 413.266998,
    442.785980, 476.846008, 516.583008, 563.545044, 619.900024, 688.778015,
    774.875000, 885.570984,
])

HG_ETA: Final[np.ndarray] = _frozen([
    0.542000, 0.589000, 0.644000, 0.713000, 0.798000, 0.898000,
    1.027000, 1.186000, 1.384000, 1.620000, 1.910000, 2.284000,
    2.746000, 3.324000,
])

HG_K: Final[np.ndarray] = _frozen([
    2.502000, 2.665000, 2.860000, 3.074000, 3.294000, 3.538000,
    3.802000, 4.090000, 4.407000, 4.751000, 5.150000, 5.582000,
    6.054000, 6.558000,
])

# symbol -> (wavelength, eta, k)
METAL_TABLES: Final[Dict[str, Tuple[np.ndarray, np.ndarray, np.ndarray]]] = {
    "Ag": (AG_WAVELENGTH, AG_ETA, AG_K),
    "Al": (AL_WAVELENGTH, AL_ETA, AL_K),
    "Au": (AU_WAVELENGTH, AU_ETA, AU_K),
    "Be": (BE_WAVELENGTH, BE_ETA, BE_K),
    "Cr": (CR_WAVELENGTH, CR_ETA, CR_K),
    "Cu": (CU_WAVELENGTH, CU_ETA, CU_K),
    "Hg": (HG_WAVELENGTH, HG_ETA, HG_K),
}

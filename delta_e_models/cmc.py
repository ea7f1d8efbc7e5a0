# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cmc.py - CMC l:c (1984) colour difference.

Developed by the Colour Measurement Committee of the Society of Dyers and
Colourists (Clarke, McDonald & Rigg, 1984).  S_L, S_C, F and T all come from
the *reference* sample, so the metric is asymmetric.

Presets:
  LC11 = (1, 1)  imperceptibility
  LC21 = (2, 1)  acceptability

Hue factor T:
  h is taken straight from atan2, i.e. in (-π, π], and tested against the
  window [164° - 360°, 345° - 360°].  Hues in (164°, 180°] therefore use the
  outer branch of T.  The published CMC reference values assume this
  convention.
"""

import math
from typing import NamedTuple, Tuple, Union

import numpy as np
from numba import njit, float64, boolean

from tincture_colorsample import SampleLike, to_lab
from . import common
from .common import KERNEL_OPTIONS, hypot

__all__ = ["Params", "LC11", "LC21", "diff"]

# (164 - 360) / 360 = -49 / 90
_T_WINDOW_START: float = -math.pi * 49.0 / 45.0
# (345 - 360) / 360 = -1 / 24
_T_WINDOW_END: float = -2.0 * math.pi / 24.0
# 168° = 7τ/15, 35° = 7π/36
_DEG_168: float = 2.0 * math.pi * 7.0 / 15.0
_DEG_35: float = math.pi * 7.0 / 36.0

_SL_DARK: float = 1639.0 / 3206.0


class Params(NamedTuple):
    """
    Lightness and chroma tolerances.

    Attributes:
        l: Lightness factor.
        c: Chroma factor.
    """
    l: float = 1.0
    c: float = 1.0


LC11 = Params(1.0, 1.0)
LC21 = Params(2.0, 1.0)


@njit(float64(float64, float64), **KERNEL_OPTIONS)
def _upcase_t(a: float, b: float) -> float:
    h = np.arctan2(b, a)
    if _T_WINDOW_START <= h and h <= _T_WINDOW_END:
        return 0.56 + abs(0.2 * np.cos(h + _DEG_168))
    return 0.36 + abs(0.4 * np.cos(h + _DEG_35))


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64, boolean), **KERNEL_OPTIONS)
def _delta_e_cmc(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                 pl: float, pc: float, clamp: bool) -> float:
    dL = L1 - L2
    da = a1 - a2
    db = b1 - b2
    C1 = hypot(a1, b1)
    C2 = hypot(a2, b2)
    dC = C1 - C2

    dH_sq = da*da + db*db - dC*dC
    if clamp and dH_sq < 0.0:
        dH_sq = 0.0
    dH = np.sqrt(dH_sq)

    if L1 < 16.0:
        SL = _SL_DARK
    else:
        SL = (0.040975 * L1) / (1.0 + 0.01765 * L1)

    SC = (0.0638 * C1) / (1.0 + 0.0131 * C1) + 0.638

    C1_4 = C1 * C1 * C1 * C1
    F = np.sqrt(C1_4 / (C1_4 + 1900.0))
    T = _upcase_t(a1, b1)
    SH = SC * (F * T + 1.0 - F)

    term_L = dL / (pl * SL)
    term_C = dC / (pc * SC)
    term_H = dH / SH
    return np.sqrt(term_L*term_L + term_C*term_C + term_H*term_H)


def diff(reference: SampleLike, colour: SampleLike,
         lc: Union[Params, Tuple[float, float]] = LC11) -> float:
    """
    Returns the CMC l:c difference of ``colour`` relative to ``reference``.

    Args:
        reference: Reference (standard) colour.
        colour: Sample (batch) colour.
        lc: (l, c) tolerances; ``LC11`` by default, ``LC21`` for
            acceptability.  Any two-element pair is accepted.

    Returns:
        ΔE CMC(l:c).
    """
    L1, a1, b1 = to_lab(reference)
    L2, a2, b2 = to_lab(colour)
    pl, pc = lc
    return float(_delta_e_cmc(L1, a1, b1, L2, a2, b2,
                              pl, pc, common.hue_clamping_enabled()))

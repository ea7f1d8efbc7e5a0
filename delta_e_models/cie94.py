# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie94.py - CIE 1994 colour difference (CIE Publication 116-1995).

The weighting functions are computed from the *reference* sample only, so the
metric is asymmetric: ``diff(a, b) != diff(b, a)`` in general.

Hue term:
  ΔH² = Δa² + Δb² - ΔC² can land a few ulps below zero.  Whether that is
  floored at 0.0 or left to produce NaN is governed by
  ``common.set_hue_clamping`` (clamped by default).
"""

from typing import NamedTuple

import numpy as np
from numba import njit, float64, boolean

from tincture_colorsample import SampleLike, to_lab
from . import common
from .common import KERNEL_OPTIONS, hypot

__all__ = ["Params", "diff"]


class Params(NamedTuple):
    """
    CIE94 weights.

    Attributes:
        l: k_L, lightness weight.
        c: K_1, chroma weight.
        h: K_2, hue weight.

    ``Params()`` gives the graphic arts weights.
    """
    l: float = 1.0
    c: float = 0.045
    h: float = 0.015

    @classmethod
    def graphic(cls) -> "Params":
        """Weights for graphic arts: k_L=1.0, K_1=0.045, K_2=0.015."""
        return cls(1.0, 0.045, 0.015)

    @classmethod
    def textiles(cls) -> "Params":
        """Weights for textiles: k_L=2.0, K_1=0.048, K_2=0.014."""
        return cls(2.0, 0.048, 0.014)


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64, float64, boolean), **KERNEL_OPTIONS)
def _delta_e_94(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                k_L: float, K1: float, K2: float, clamp: bool) -> float:
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

    term_L = dL / k_L
    term_C = dC / (1.0 + K1 * C1)
    term_H = dH / (1.0 + K2 * C1)
    return np.sqrt(term_L*term_L + term_C*term_C + term_H*term_H)


def diff(reference: SampleLike, colour: SampleLike, params: Params = Params()) -> float:
    """
    Returns the CIE94 difference of ``colour`` relative to ``reference``.

    Args:
        reference: Reference (standard) colour.  Chroma weighting is taken
            from this sample.
        colour: Sample (batch) colour.
        params: Weights, graphic arts by default.

    Returns:
        ΔE*94.  ``params.l == 0`` yields an infinite distance.
    """
    L1, a1, b1 = to_lab(reference)
    L2, a2, b2 = to_lab(colour)
    k_L, K1, K2 = params
    return float(_delta_e_94(L1, a1, b1, L2, a2, b2,
                             k_L, K1, K2, common.hue_clamping_enabled()))

# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie76.py - CIE 1976 colour difference (ΔE*ab).

Plain Euclidean distance in L*a*b*.  Takes no parameters and is a true
metric: symmetric, zero only for identical triples, never negative.
"""

import numpy as np
from numba import njit, float64

from tincture_colorsample import SampleLike, to_lab
from .common import KERNEL_OPTIONS

__all__ = ["diff"]


@njit(float64(float64, float64, float64, float64, float64, float64), **KERNEL_OPTIONS)
def _delta_e_76(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float) -> float:
    dL = L1 - L2
    da = a1 - a2
    db = b1 - b2
    return np.sqrt(dL*dL + da*da + db*db)


def diff(colour_1: SampleLike, colour_2: SampleLike) -> float:
    """
    Returns the CIE76 colour difference between two colours.

    Args:
        colour_1: First colour, any representation accepted by ``to_lab``.
        colour_2: Second colour.

    Returns:
        sqrt(ΔL² + Δa² + Δb²).

    Example:
        >>> diff((0.0, 0.0, 0.0), (3.0, 4.0, 0.0))
        5.0
    """
    L1, a1, b1 = to_lab(colour_1)
    L2, a2, b2 = to_lab(colour_2)
    return float(_delta_e_76(L1, a1, b1, L2, a2, b2))

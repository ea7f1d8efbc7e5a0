# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: ciede2000.py - CIEDE2000 colour difference.

Follows the formulation of Sharma, Wu & Dalal (2005), "The CIEDE2000
color-difference formula: implementation notes, supplementary test data and
mathematical observations".  All angles are carried in radians; the degree
offsets of the published formula appear as exact fractions of τ.

Unlike CIE94 and CMC the formula is symmetric: the a* correction factor
depends on both chromas and the hue logic is direction aware, so
``diff(a, b) == diff(b, a)`` holds exactly.
"""

import math
from typing import NamedTuple

import numpy as np
from numba import njit, float64

from tincture_colorsample import SampleLike, to_lab
from .common import KERNEL_OPTIONS, hypot

__all__ = ["Params", "diff"]

_PI: float = math.pi
_TAU: float = 2.0 * math.pi
_TWENTY_FIVE_TO_SEVENTH: float = 6103515625.0

_THIRTY_DEG: float = _TAU / 12.0
_SIX_DEG: float = _TAU / 60.0
_SIXTY_THREE_DEG: float = _TAU * 0.175


class Params(NamedTuple):
    """
    Parametric k factors.

    The larger a factor, the smaller the impact of the matching component on
    the distance.  Setting any of them to zero makes the distance infinite.

    Attributes:
        l: k_L, lightness.
        c: k_C, chroma.
        h: k_H, hue.
    """
    l: float = 1.0
    c: float = 1.0
    h: float = 1.0

    @classmethod
    def yang2012(cls) -> "Params":
        """
        Factors from Yang, Ming & Yu, "Color Image Quality Assessment Based
        on CIEDE2000", Advances in Multimedia (2012), doi:10.1155/2012/273723.

        Provided for reference; the default factors are what ``diff`` uses
        when none are given.
        """
        return cls(0.65, 1.0, 4.0)


@njit(float64(float64, float64), **KERNEL_OPTIONS)
def _h_prime(b: float, a_prime: float) -> float:
    """Hue angle in [0, τ); zero for the achromatic axis."""
    if b == 0.0 and a_prime == 0.0:
        return 0.0
    rad = np.arctan2(b, a_prime)
    if rad < 0.0:
        return rad + _TAU
    return rad


@njit(float64(float64, float64, float64, float64), **KERNEL_OPTIONS)
def _delta_h_prime(C1: float, C2: float, h1_p: float, h2_p: float) -> float:
    if C1 == 0.0 or C2 == 0.0:
        return 0.0
    diff = h2_p - h1_p
    if abs(diff) <= _PI:
        return diff
    if h2_p <= h1_p:
        return diff + _TAU
    return diff - _TAU


@njit(float64(float64), **KERNEL_OPTIONS)
def _upcase_t(h_bar_p: float) -> float:
    return (1.0
            - 0.17 * np.cos(h_bar_p - _THIRTY_DEG)
            + 0.24 * np.cos(2.0 * h_bar_p)
            + 0.32 * np.cos(3.0 * h_bar_p + _SIX_DEG)
            - 0.20 * np.cos(4.0 * h_bar_p - _SIXTY_THREE_DEG))


@njit(float64(float64, float64), **KERNEL_OPTIONS)
def _r_sub_t(C_bar_p: float, h_bar_p: float) -> float:
    # h = (H̄' in degrees - 275) / 25
    C7 = C_bar_p ** 7
    h = h_bar_p * (14.4 / _TAU) - 11.0
    return (-2.0 * np.sqrt(C7 / (C7 + _TWENTY_FIVE_TO_SEVENTH))
            * np.sin(np.exp(-(h * h)) * (_TAU / 6.0)))


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64, float64), **KERNEL_OPTIONS)
def _delta_e_2000(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                  k_L: float, k_C: float, k_H: float) -> float:
    L_bar = (L1 + L2) * 0.5
    dL = L2 - L1

    C1 = hypot(a1, b1)
    C2 = hypot(a2, b2)

    # a* correction, 1 + G
    C_bar_7 = ((C1 + C2) * 0.5) ** 7
    scale = 1.5 - np.sqrt(C_bar_7 / (C_bar_7 + _TWENTY_FIVE_TO_SEVENTH)) * 0.5
    a1_p = a1 * scale
    a2_p = a2 * scale

    C1_p = hypot(a1_p, b1)
    C2_p = hypot(a2_p, b2)
    C_bar_p = (C1_p + C2_p) * 0.5
    dC_p = C2_p - C1_p

    L_term = (L_bar - 50.0) * (L_bar - 50.0)
    SL = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    SC = 1.0 + 0.045 * C_bar_p

    h1_p = _h_prime(b1, a1_p)
    h2_p = _h_prime(b2, a2_p)
    dh_p = _delta_h_prime(C1, C2, h1_p, h2_p)
    dH_p = 2.0 * np.sqrt(C1_p * C2_p) * np.sin(0.5 * dh_p)

    h_bar_p = (h1_p + h2_p) * 0.5
    if abs(h1_p - h2_p) > _PI:
        h_bar_p += _PI

    SH = 1.0 + 0.015 * C_bar_p * _upcase_t(h_bar_p)

    lightness = dL / (k_L * SL)
    chroma = dC_p / (k_C * SC)
    hue = dH_p / (k_H * SH)
    RT = _r_sub_t(C_bar_p, h_bar_p)

    return np.sqrt(lightness*lightness + chroma*chroma + hue*hue + RT * chroma * hue)


def diff(colour_1: SampleLike, colour_2: SampleLike, params: Params = Params()) -> float:
    """
    Returns the CIEDE2000 colour difference between two colours.

    Args:
        colour_1: First colour, any representation accepted by ``to_lab``.
        colour_2: Second colour.
        params: k_L, k_C, k_H factors (all 1.0 by default).

    Returns:
        ΔE00.

    Example:
        >>> round(diff((38.972, 58.991, 37.138), (54.528, 42.416, 54.497)), 4)
        20.5536
    """
    L1, a1, b1 = to_lab(colour_1)
    L2, a2, b2 = to_lab(colour_2)
    k_L, k_C, k_H = params
    return float(_delta_e_2000(L1, a1, b1, L2, a2, b2, k_L, k_C, k_H))

# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_colorsample.py - Colour inputs for the difference formulas.

Every formula in ``delta_e_models`` accepts "anything that can tell its
L*a*b* coordinates".  That capability is the ``ColourSample`` protocol: a
single ``to_lab()`` method returning three floats.  ``to_lab(colour)`` is the
one place where representations are resolved, so formulas are written once
against plain (L, a, b) triples.

Accepted representations:
  - any object implementing ``ColourSample`` (``Lab``, ``RGB``, ``BGR``,
    ``RGBA``, ``Gray`` below, or third-party types)
  - a 3-element tuple or list of reals
  - a numpy array of shape (3,)

Pixel formats hold 8-bit sRGB channels.  ``RGB``/``BGR``/``RGBA`` go through
the general conversion in ``tincture_srgb``; ``Gray`` uses a single-channel
fast path with a* = b* = 0.
"""

from typing import NamedTuple, Protocol, Sequence, Tuple, Union, runtime_checkable

import numpy as np
from numba import njit, float64, int64

from tincture_srgb import srgb8_to_lab

__all__ = [
    "ColourSample",
    "SampleLike",
    "LabTriple",
    "Lab",
    "RGB",
    "BGR",
    "RGBA",
    "Gray",
    "to_lab",
    "lab_from_grey",
]

LabTriple = Tuple[float, float, float]


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  ColourSample - the one capability formulas rely on
# ═══════════════════════════════════════════════════════════════════════════════
@runtime_checkable
class ColourSample(Protocol):
    """
    Minimal interface a colour representation must satisfy.

    to_lab() → (L*, a*, b*) as three floats
    """
    def to_lab(self) -> LabTriple: ...


SampleLike = Union[ColourSample, Tuple[float, float, float], Sequence[float], np.ndarray]


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Grey fast path
# ═══════════════════════════════════════════════════════════════════════════════
# sRGB EOTF followed by the CIE lightness mapping with r = g = b.  The two
# piecewise functions collapse into three branches:
#   grey <= 10 : linear gamma segment, linear Lab segment
#   grey <= 23 : power-law gamma segment, linear Lab segment
#   otherwise  : power-law gamma segment, cube-root Lab segment
#
# κ / (12.92 * 255) = (29/3)^3 / 3294.6 = 243890 / 889542
_KAPPA_OVER_D: float = 243890.0 / 889542.0
_KAPPA: float = 24389.0 / 27.0
_GAMMA_A: float = 0.055 * 255.0
_GAMMA_D: float = 1.055 * 255.0


@njit(float64(int64), cache=True)
def _grey_lightness(grey: int) -> float:
    if grey <= 10:
        return grey * _KAPPA_OVER_D
    ys = (grey + _GAMMA_A) / _GAMMA_D
    if grey <= 23:
        return _KAPPA * ys ** 2.4
    # ((grey/255 + 0.055) / 1.055)^(2.4 / 3)
    return 116.0 * ys ** 0.8 - 16.0


def lab_from_grey(grey: int) -> LabTriple:
    """
    L*a*b* of the sRGB grey (grey, grey, grey).

    Equivalent to the general sRGB conversion of a neutral pixel, without
    expanding to three channels.

    Args:
        grey: Channel value in 0..255.

    Returns:
        (L*, 0.0, 0.0).
    """
    _check_channel("grey", grey)
    return float(_grey_lightness(int(grey))), 0.0, 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Concrete representations
# ═══════════════════════════════════════════════════════════════════════════════
def _check_channel(name: str, value: int) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} channel must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel out of range 0..255: {value}")


def _rgb8_to_lab(r: int, g: int, b: int) -> LabTriple:
    _check_channel("r", r)
    _check_channel("g", g)
    _check_channel("b", b)
    return srgb8_to_lab(int(r), int(g), int(b))


class Lab(NamedTuple):
    """A CIELAB colour.  No range is enforced."""
    l: float
    a: float
    b: float

    def to_lab(self) -> LabTriple:
        return float(self.l), float(self.a), float(self.b)


class RGB(NamedTuple):
    """8-bit sRGB pixel in (r, g, b) order."""
    r: int
    g: int
    b: int

    def to_lab(self) -> LabTriple:
        return _rgb8_to_lab(self.r, self.g, self.b)


class BGR(NamedTuple):
    """8-bit sRGB pixel stored in reversed (b, g, r) order."""
    b: int
    g: int
    r: int

    def to_lab(self) -> LabTriple:
        return _rgb8_to_lab(self.r, self.g, self.b)


class RGBA(NamedTuple):
    """
    8-bit sRGB pixel with alpha.

    Alpha is range-checked like the colour channels but takes no part in the
    conversion.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def to_lab(self) -> LabTriple:
        _check_channel("a", self.a)
        return _rgb8_to_lab(self.r, self.g, self.b)


class Gray(NamedTuple):
    """
    8-bit sRGB grey.

    Prefer this over ``RGB(v, v, v)`` when the colour is known to be neutral;
    it skips the matrix and the three-channel transfer functions.
    """
    v: int

    def to_lab(self) -> LabTriple:
        return lab_from_grey(self.v)


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  Resolution
# ═══════════════════════════════════════════════════════════════════════════════
def to_lab(colour: SampleLike) -> LabTriple:
    """
    Resolve a colour in any supported representation to (L*, a*, b*).

    Args:
        colour: A ``ColourSample``, a 3-element tuple/list of reals, or a
            numpy array of shape (3,).

    Returns:
        Three Python floats.

    Raises:
        TypeError: Unsupported representation.
        ValueError: Wrong number of components, or pixel channels outside
            0..255.
    """
    if isinstance(colour, ColourSample):
        L, a, b = colour.to_lab()
        return float(L), float(a), float(b)
    if isinstance(colour, np.ndarray):
        if colour.shape != (3,):
            raise ValueError(f"to_lab: expected array of shape (3,), got {colour.shape}")
        return float(colour[0]), float(colour[1]), float(colour[2])
    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(f"to_lab: expected 3 components, got {len(colour)}")
        return float(colour[0]), float(colour[1]), float(colour[2])
    raise TypeError(
        f"to_lab: unsupported colour type {type(colour).__name__}"
    )

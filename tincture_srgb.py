# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

sRGB → CIELAB Conversion
========================
Standard D65 / 2° observer pipeline used by the pixel-format adapters in
``tincture_colorsample``.  The difference formulas never call into this module
directly; they only ever see (L, a, b) triples.

Pipeline:
    8-bit sRGB → [0, 1] → EOTF (IEC 61966-2-1) → linear RGB
               → XYZ (D65) → CIELAB

The per-channel transfer functions are scalar Numba kernels; two row loops
apply them to (N, 3) blocks.  Everything is compiled with ``fastmath=False``
so that the grey fast path in ``tincture_colorsample`` can be checked against
this module to within a few ulps.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
"""

import functools
import numpy as np
from numba import njit, float64
from typing import Tuple, Final, TypeAlias, Callable, Any

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "REF_WHITE_D65",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "M_SRGB_TO_XYZ_T",

    # --- Decorators ---
    "handle_shapes",

    # --- Conversion ---
    "SRGBConverter",
    "srgb8_to_lab",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

# --- Constants & Pre-Transposed Matrices ---

# D65 white, Y = 1.0
REF_WHITE_D65: Final[ArrayFloat] = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

# IEC 61966-2-1, stored transposed so that rows of pixels multiply on the left.
M_SRGB_TO_XYZ_T: Final[ArrayFloat] = np.array([
    [0.4124564, 0.2126729, 0.0193339],
    [0.3575761, 0.7151522, 0.1191920],
    [0.1804375, 0.0721750, 0.9503041],
], dtype=np.float64)

# --- Exact Rational Math Constants ---
# f(t) is a cube root above (6/29)^3 and a straight line below it.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # ~0.008856
LAB_KAPPA: Final[float]   = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0) # ~903.296

# sRGB EOTF breakpoint and segment constants
_SRGB_KNEE: Final[float] = 0.04045
_SRGB_SLOPE: Final[float] = 12.92
_SRGB_OFFSET: Final[float] = 0.055
_SRGB_GAMMA: Final[float] = 2.4


# =============================================================================
# 1. DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to (N, 3) float64 and safeguard shape.

    Single pixels (3,) are treated as a batch of one internally and unwrapped
    again on the way out.
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. KERNELS
# =============================================================================

@njit(float64(float64), cache=True)
def _srgb_eotf(v: float) -> float:
    """Encoded sRGB channel in [0, 1] to linear light."""
    if v <= _SRGB_KNEE:
        return v / _SRGB_SLOPE
    return ((v + _SRGB_OFFSET) / (1.0 + _SRGB_OFFSET)) ** _SRGB_GAMMA


@njit(float64(float64), cache=True)
def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


@njit(cache=True)
def _linearize_rows(rgb: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(rgb)
    for i in range(rgb.shape[0]):
        for ch in range(3):
            out[i, ch] = _srgb_eotf(rgb[i, ch])
    return out


@njit(cache=True)
def _lab_rows(xyz_n: ArrayFloat) -> ArrayFloat:
    """White-normalised XYZ rows to L*a*b* rows."""
    out = np.empty_like(xyz_n)
    for i in range(xyz_n.shape[0]):
        fx = _lab_f(xyz_n[i, 0])
        fy = _lab_f(xyz_n[i, 1])
        fz = _lab_f(xyz_n[i, 2])
        out[i, 0] = 116.0 * fy - 16.0
        out[i, 1] = 500.0 * (fx - fy)
        out[i, 2] = 200.0 * (fy - fz)
    return out


# =============================================================================
# 3. CONVERTER
# =============================================================================

class SRGBConverter:
    """Static utility class for the sRGB → XYZ → CIELAB chain.

    The public methods accept (3,) or (N, 3) input; the ``_raw`` variants
    assume pre-validated (N, 3) float64 and are chained by ``srgb_to_lab`` to
    skip redundant shape checks.
    """

    @staticmethod
    def _srgb_to_xyz_raw(rgb_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        if clip:
            rgb_array = np.clip(rgb_array, 0.0, 1.0)
        return _linearize_rows(np.ascontiguousarray(rgb_array)) @ M_SRGB_TO_XYZ_T

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        return _lab_rows(np.ascontiguousarray(xyz_array / illuminant))

    @staticmethod
    @handle_shapes
    def srgb_to_xyz(rgb_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        Converts sRGB [0..1] to XYZ [0..1] (D65).

        Args:
            rgb_array: Input sRGB data, shape (N, 3) or (3,).
            clip: If True (default), clamps input to [0, 1] before the EOTF.

        Returns:
            XYZ coordinates (D65 relative).
        """
        return SRGBConverter._srgb_to_xyz_raw(rgb_array, clip=clip)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts XYZ to CIELAB (L*a*b*).

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).
            illuminant: Reference white point (default D65).

        Returns:
            Lab coordinates.
        """
        return SRGBConverter._xyz_to_lab_raw(xyz_array, illuminant)

    @staticmethod
    @handle_shapes
    def srgb_to_lab(rgb_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion sRGB [0..1] -> CIELAB."""
        xyz = SRGBConverter._srgb_to_xyz_raw(rgb_array)
        return SRGBConverter._xyz_to_lab_raw(xyz)


def srgb8_to_lab(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Converts one 8-bit sRGB pixel to CIELAB.

    Args:
        r, g, b: Channel values in 0..255.

    Returns:
        (L, a, b) as Python floats.
    """
    lab = SRGBConverter.srgb_to_lab(np.array([r, g, b], dtype=np.float64) / 255.0)
    return float(lab[0]), float(lab[1]), float(lab[2])

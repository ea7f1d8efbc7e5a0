# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: common.py - Shared scalar helpers and runtime switches for the
difference formulas.

All formula kernels in this package are compiled with ``fastmath=False`` and
``error_model="numpy"``: NaN and inf are the only failure signal the formulas
have, so they must propagate exactly and a zero weight must give ``inf``
instead of raising ``ZeroDivisionError``.
"""

import logging
import numpy as np
from numba import njit, float64

__all__ = ["KERNEL_OPTIONS", "hypot", "set_hue_clamping", "hue_clamping_enabled"]

logger = logging.getLogger(__name__)

# Keyword arguments shared by every formula kernel.
KERNEL_OPTIONS = dict(cache=True, fastmath=False, error_model="numpy")


@njit(float64(float64, float64), **KERNEL_OPTIONS)
def hypot(x: float, y: float) -> float:
    """Euclidean magnitude of (x, y), computed as sqrt(x² + y²)."""
    return np.sqrt(x * x + y * y)


# --- Runtime Configuration ---
# CIE94 and CMC compute ΔH as sqrt(Δa² + Δb² - ΔC²).  The radicand is
# mathematically non-negative but can come out a few ulps below zero.
# With clamping (default) it is floored at 0.0; without it sqrt yields NaN.
#
# Toggle at runtime via:
#     from delta_e_models import common
#     common.set_hue_clamping(False)
_CLAMP_HUE_DIFFERENCE: bool = True

def set_hue_clamping(enabled: bool = True) -> None:
    """
    Choose how CIE94 and CMC treat a negative hue-difference radicand.

    Args:
        enabled: If True (default), clamp the radicand to zero.  If False,
            let the square root return NaN.
    """
    global _CLAMP_HUE_DIFFERENCE
    _CLAMP_HUE_DIFFERENCE = bool(enabled)
    logger.debug("Hue-difference clamping %s", "enabled" if _CLAMP_HUE_DIFFERENCE else "disabled")


def hue_clamping_enabled() -> bool:
    """Current state of the hue-difference clamping switch."""
    return _CLAMP_HUE_DIFFERENCE

# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour-difference formulas.  Each module exposes ``diff``; the parametric
ones also expose their own ``Params`` type with named presets.
"""

from . import cie76, cie94, ciede2000, cmc

__all__ = ["cie76", "cie94", "ciede2000", "cmc"]

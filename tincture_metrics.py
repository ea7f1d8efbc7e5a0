# -*- coding: utf-8 -*-
"""
Tincture: Perceptual colour differences in CIELAB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_metrics.py - One-stop access to all difference formulas.

``ColourMetrics`` forwards to the formula modules under uniform names and can
produce a report of every metric for a pair of colours.  Each call is still a
single pair; looping over many pairs is left to the caller.
"""

import logging
import re
from typing import Dict, Tuple, Union

from delta_e_models import cie76, cie94, ciede2000, cmc
from tincture_colorsample import RGB, SampleLike

__all__ = ["ColourMetrics", "parse_hex_colour"]

logger = logging.getLogger(__name__)

_HEX_COLOUR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def parse_hex_colour(text: str) -> RGB:
    """
    Parse an sRGB colour written as ``#RRGGBB``.

    Raises:
        ValueError: If ``text`` is not exactly in that format.
    """
    m = _HEX_COLOUR.fullmatch(text.strip())
    if m is None:
        raise ValueError(f"{text!r}: expected colour in #RRGGBB format")
    r, g, b = (int(part, 16) for part in m.groups())
    return RGB(r, g, b)


class ColourMetrics:
    """Uniform entry points for the four colour-difference formulas.

    Note that ``delta_e_94`` and ``delta_e_cmc`` are asymmetric: the first
    argument is the reference (standard), the second the sample (batch).
    """

    @staticmethod
    def delta_e_76(colour_1: SampleLike, colour_2: SampleLike) -> float:
        """CIE 1976 Euclidean distance."""
        return cie76.diff(colour_1, colour_2)

    @staticmethod
    def delta_e_94(reference: SampleLike, colour: SampleLike,
                   textiles: bool = False) -> float:
        """
        CIE 1994 difference.

        Args:
            reference: Reference colour.
            colour: Sample colour.
            textiles: If True, use the textiles weights instead of graphic arts.
        """
        params = cie94.Params.textiles() if textiles else cie94.Params.graphic()
        return cie94.diff(reference, colour, params)

    @staticmethod
    def delta_e_2000(colour_1: SampleLike, colour_2: SampleLike,
                     k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0) -> float:
        """CIEDE2000 difference with parametric factors (all 1.0 by default)."""
        return ciede2000.diff(colour_1, colour_2, ciede2000.Params(k_L, k_C, k_H))

    @staticmethod
    def delta_e_cmc(reference: SampleLike, colour: SampleLike,
                    lc: Union[cmc.Params, Tuple[float, float]] = cmc.LC11) -> float:
        """CMC l:c difference; 1:1 by default."""
        return cmc.diff(reference, colour, lc)

    @staticmethod
    def report(colour_1: SampleLike, colour_2: SampleLike) -> Dict[str, float]:
        """
        Every metric for one pair, with the first colour as reference.

        Returns:
            Mapping with keys ``de76``, ``de94_graphic``, ``de94_textiles``,
            ``de2000``, ``de2000_yang``, ``cmc_1_1`` and ``cmc_2_1``.
        """
        results = {
            "de76": cie76.diff(colour_1, colour_2),
            "de94_graphic": cie94.diff(colour_1, colour_2, cie94.Params.graphic()),
            "de94_textiles": cie94.diff(colour_1, colour_2, cie94.Params.textiles()),
            "de2000": ciede2000.diff(colour_1, colour_2),
            "de2000_yang": ciede2000.diff(colour_1, colour_2, ciede2000.Params.yang2012()),
            "cmc_1_1": cmc.diff(colour_1, colour_2, cmc.LC11),
            "cmc_2_1": cmc.diff(colour_1, colour_2, cmc.LC21),
        }
        logger.debug("Difference report: %s", results)
        return results

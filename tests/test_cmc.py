# -*- coding: utf-8 -*-
"""CMC l:c reference values, presets and asymmetry."""

import math

import pytest

from delta_e_models import cmc, common
from tincture_colorsample import Lab

# CMC 1:1, pairs from the Sharma, Wu & Dalal data set.
LC11_TABLE = [
    (67.4802, (100.0,     0.0050,  -0.0100), ( 0.0000,   0.0000,   0.0000)),
    ( 1.7387, (50.0000,   2.6772, -79.7751), (50.0000,   0.0000, -82.7485)),
    ( 2.4966, (50.0000,   3.1571, -77.2803), (50.0000,   0.0000, -82.7485)),
    ( 3.3049, (50.0000,   2.8361, -74.0200), (50.0000,   0.0000, -82.7485)),
    ( 0.8574, (50.0000,  -1.3802, -84.2814), (50.0000,   0.0000, -82.7485)),
    ( 0.8833, (50.0000,  -1.1848, -84.8006), (50.0000,   0.0000, -82.7485)),
    ( 0.9782, (50.0000,  -0.9009, -85.5211), (50.0000,   0.0000, -82.7485)),
    ( 3.5048, (50.0000,   0.0000,   0.0000), (50.0000,  -1.0000,   2.0000)),
    ( 2.8793, (50.0000,  -1.0000,   2.0000), (50.0000,   0.0000,   0.0000)),
    ( 6.5784, (50.0000,   2.4900,  -0.0010), (50.0000,  -2.4900,   0.0009)),
    ( 6.5784, (50.0000,   2.4900,  -0.0010), (50.0000,  -2.4900,   0.0010)),
    ( 6.5784, (50.0000,   2.4900,  -0.0010), (50.0000,  -2.4900,   0.0011)),
    ( 6.5784, (50.0000,   2.4900,  -0.0010), (50.0000,  -2.4900,   0.0012)),
    ( 6.6749, (50.0000,  -0.0010,   2.4900), (50.0000,   0.0009,  -2.4900)),
    ( 6.6749, (50.0000,  -0.0010,   2.4900), (50.0000,   0.0011,  -2.4900)),
    ( 4.6685, (50.0000,   2.5000,   0.0000), (50.0000,   0.0000,  -2.5000)),
    (42.1088, (50.0000,   2.5000,   0.0000), (73.0000,  25.0000, -18.0000)),
    (39.4589, (50.0000,   2.5000,   0.0000), (61.0000,  -5.0000,  29.0000)),
    (38.3601, (50.0000,   2.5000,   0.0000), (56.0000, -27.0000,  -3.0000)),
    (33.9366, (50.0000,   2.5000,   0.0000), (58.0000,  24.0000,  15.0000)),
    ( 1.1440, (50.0000,   2.5000,   0.0000), (50.0000,   3.1736,   0.5854)),
    ( 1.0060, (50.0000,   2.5000,   0.0000), (50.0000,   3.2972,   0.0000)),
    ( 1.1130, (50.0000,   2.5000,   0.0000), (50.0000,   1.8634,   0.5757)),
    ( 1.0534, (50.0000,   2.5000,   0.0000), (50.0000,   3.2592,   0.3350)),
    ( 1.4282, (60.2574, -34.0099,  36.2677), (60.4626, -34.1751,  39.4387)),
    ( 1.2548, (63.0109, -31.0961,  -5.8663), (62.8187, -29.7946,  -4.0864)),
    ( 1.7684, (61.2901,   3.7196,  -5.3901), (61.4292,   2.2480,  -4.9620)),
    ( 2.0626, (35.0831, -44.1164,   3.7933), (35.0232, -40.0716,   1.5901)),
    ( 3.0870, (22.7233,  20.0904, -46.6940), (23.0331,  14.9730, -42.5619)),
    ( 1.7489, (36.4612,  47.8580,  18.3852), (36.2715,  50.5065,  21.2231)),
    ( 1.9010, (90.8027,  -2.0831,   1.4410), (91.1528,  -1.6435,   0.0447)),
    ( 1.7026, (90.9257,  -0.5406,  -0.9208), (88.6381,  -0.8985,  -0.7239)),
    ( 1.8024, ( 6.7747,  -0.2908,  -2.4247), ( 5.8714,  -0.0985,  -2.2286)),
    ( 2.4484, ( 2.0776,   0.0795,  -1.1350), ( 0.9033,  -0.0636,  -0.5514)),
]

COLOUR_1 = Lab(38.972, 58.991, 37.138)
COLOUR_2 = Lab(54.528, 42.416, 54.497)


@pytest.mark.parametrize("expected,reference,colour", LC11_TABLE)
def test_reference_table(expected, reference, colour):
    got = cmc.diff(reference, colour, cmc.LC11)
    assert round(got, 4) == pytest.approx(expected, abs=1e-3)


def test_presets():
    assert cmc.LC11 == (1.0, 1.0)
    assert cmc.LC21 == (2.0, 1.0)
    assert cmc.Params() == cmc.LC11


def test_end_to_end_scenario():
    assert cmc.diff(COLOUR_1, COLOUR_2, cmc.LC11) == pytest.approx(22.751015, abs=1e-3)
    assert cmc.diff(COLOUR_1, COLOUR_2, cmc.LC21) == pytest.approx(17.743946, abs=1e-3)


def test_plain_tuple_weights():
    assert cmc.diff(COLOUR_1, COLOUR_2, (2.0, 1.0)) == cmc.diff(COLOUR_1, COLOUR_2, cmc.LC21)


@pytest.mark.parametrize("lc", [cmc.LC11, cmc.LC21, cmc.Params(1.0, 2.0)])
def test_zero(colours, lc):
    for colour in colours:
        assert cmc.diff(colour, colour, lc) == 0.0


def test_asymmetric():
    assert cmc.diff(COLOUR_1, COLOUR_2) != cmc.diff(COLOUR_2, COLOUR_1)


def test_dark_reference_uses_constant_lightness_weight():
    # L < 16: S_L = 1639 / 3206 regardless of the exact lightness.
    got = cmc.diff((10.0, 0.0, 0.0), (9.0, 0.0, 0.0))
    assert got == pytest.approx(3206.0 / 1639.0)


def test_hue_radicand_propagates_nan_when_unclamped():
    pair = ((50.0, 1.0, 1.0), (50.0, 0.0, 0.0))
    assert not math.isnan(cmc.diff(*pair))
    common.set_hue_clamping(False)
    assert math.isnan(cmc.diff(*pair))


@pytest.mark.parametrize("expected,reference,colour", [
    (3.5048, (50.0, 0.0, 0.0), (50.0, -1.0, 2.0)),
    (2.8793, (50.0, -1.0, 2.0), (50.0, 0.0, 0.0)),
])
def test_reference_rows_depend_on_clamping(expected, reference, colour):
    assert round(cmc.diff(reference, colour), 4) == pytest.approx(expected, abs=1e-3)
    common.set_hue_clamping(False)
    assert math.isnan(cmc.diff(reference, colour))

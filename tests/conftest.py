# -*- coding: utf-8 -*-
"""Shared fixtures for the Tincture test-suite."""

from typing import List, Tuple

import numpy as np
import pytest

from delta_e_models import common

LabTriple = Tuple[float, float, float]


def generate_colours(count: int, seed: int = 0) -> List[LabTriple]:
    """Reproducible L in [0, 100], a in [-100, 100], b in [-110, 100]."""
    rng = np.random.default_rng(seed)
    L = rng.uniform(0.0, 100.0, count)
    a = rng.uniform(-100.0, 100.0, count)
    b = rng.uniform(-110.0, 100.0, count)
    return [(float(L[i]), float(a[i]), float(b[i])) for i in range(count)]


@pytest.fixture(scope="session")
def colours() -> List[LabTriple]:
    return generate_colours(1000)


@pytest.fixture(scope="session")
def colour_pairs(colours) -> List[Tuple[LabTriple, LabTriple]]:
    return list(zip(colours[:-1], colours[1:]))


@pytest.fixture(autouse=True)
def restore_hue_clamping():
    """Tests may flip the hue-clamping switch; put it back afterwards."""
    clamp = common.hue_clamping_enabled()
    yield
    common.set_hue_clamping(clamp)

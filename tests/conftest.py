# -*- coding: utf-8 -*-
# Tetgrid/tests/conftest.py

"""
Shared fixtures: small meshes built once per test session.
"""

import numpy as np
import pytest

from mesh.core.block import t4_block, t10_block
from mesh.core.layered import t4_layered_plate


@pytest.fixture(scope="session")
def unit_cube():
    """One cell, orientation "a": 8 nodes, 6 tetrahedra."""
    return t4_block(1.0, 1.0, 1.0, 1, 1, 1, "a")


@pytest.fixture(scope="session")
def small_block():
    """3 x 2 x 2 cells over [0,3] x [0,2] x [0,2], orientation "a"."""
    return t4_block(3.0, 2.0, 2.0, 3, 2, 2, "a")


@pytest.fixture(scope="session")
def small_block_t10():
    return t10_block(2.0, 2.0, 2.0, 2, 2, 2, "ca")


@pytest.fixture(scope="session")
def two_layer_plate():
    """Layers [1, 2] thick with [2, 3] elements through the thickness."""
    return t4_layered_plate(2.0, 1.0, [1.0, 2.0], 2, 1, [2, 3])


@pytest.fixture()
def rng():
    return np.random.RandomState(0)

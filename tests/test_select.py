# -*- coding: utf-8 -*-
# Tetgrid/tests/test_select.py

import numpy as np
import pytest

from mesh.core.block import t4_block
from mesh.core.select import select_elements, label_elements, nodes_in_box


def test_whole_box_selects_everything(unit_cube):
    nodes, elements = unit_cube
    sel = select_elements(nodes, elements, [0, 1, 0, 1, 0, 1])
    np.testing.assert_array_equal(sel, np.arange(6))


def test_allin_versus_any(unit_cube):
    nodes, elements = unit_cube
    box = [0.0, 0.5, -1.0, 2.0, -1.0, 2.0]
    assert select_elements(nodes, elements, box, allin=True).size == 0
    assert select_elements(nodes, elements, box, allin=False).size == 6


def test_inflate_grows_box(unit_cube):
    nodes, elements = unit_cube
    box = [0.0, 1.0, 0.0, 1.0, 0.0, 0.99]
    assert select_elements(nodes, elements, box).size == 0
    assert select_elements(nodes, elements, box, inflate=0.02).size == 6


def test_infinite_bounds_select_a_slab():
    nodes, elements = t4_block(1.0, 1.0, 2.0, 1, 1, 2)
    lower = select_elements(nodes, elements, [-np.inf, np.inf, -np.inf, np.inf, 0.0, 1.0])
    np.testing.assert_array_equal(lower, np.arange(6))


def test_label_elements():
    nodes, elements = t4_block(1.0, 1.0, 2.0, 1, 1, 2)
    upper = select_elements(nodes, elements, [-np.inf, np.inf, -np.inf, np.inf, 1.0, 2.0])
    label_elements(elements, upper, 4)
    np.testing.assert_array_equal(elements.label, [0] * 6 + [4] * 6)


def test_nodes_in_box_boundary_inclusive():
    xyz = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 1.0, 1.0 + 1e-6]])
    np.testing.assert_array_equal(nodes_in_box(xyz, [0, 1, 0, 1, 0, 1]), [True, True, False])


@pytest.mark.parametrize("box", [[0, 1, 0, 1, 0], [1, 0, 0, 1, 0, 1]])
def test_bad_box(unit_cube, box):
    nodes, elements = unit_cube
    with pytest.raises(ValueError):
        select_elements(nodes, elements, box)

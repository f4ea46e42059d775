# -*- coding: utf-8 -*-
# Tetgrid/tests/test_data.py

import numpy as np
import pytest

from mesh.core.data import NodeSet, T4Set, T10Set


def test_nodeset_shape_checks():
    assert NodeSet(np.zeros((0, 3))).count == 0
    assert len(NodeSet([[0, 0, 0], [1, 2, 3]])) == 2
    with pytest.raises(ValueError):
        NodeSet(np.zeros((4, 2)))


def test_elementset_arity_checks():
    with pytest.raises(ValueError):
        T4Set([[0, 1, 2]])
    with pytest.raises(ValueError):
        T10Set([[0, 1, 2, 3]])
    with pytest.raises(ValueError):
        T4Set([[0, 1, 2, 3]], label=[1, 2])


def test_set_label_and_subset():
    e = T4Set([[0, 1, 2, 3], [1, 2, 3, 4], [2, 3, 4, 5]])
    e.set_label(3, [0, 2])
    np.testing.assert_array_equal(e.label, [3, 0, 3])
    sub = e.subset([2, 0])
    assert isinstance(sub, T4Set)
    np.testing.assert_array_equal(sub.conn, [[2, 3, 4, 5], [0, 1, 2, 3]])
    np.testing.assert_array_equal(sub.label, [3, 3])
    e.set_label(9)
    assert (e.label == 9).all()
    assert (sub.label == 3).all()


def test_corners_of_t10():
    e = T10Set([np.arange(10)])
    np.testing.assert_array_equal(e.corners, [[0, 1, 2, 3]])

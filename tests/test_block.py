# -*- coding: utf-8 -*-
# Tetgrid/tests/test_block.py

import numpy as np
import pytest

from geometry.kernels import signed_volumes
from mesh.core.block import t4_block, t4_blockx, t10_block, t10_blockx
from mesh.core.data import T4Set, T10Set
from mesh.core.patterns import TET_FACES
from mesh.errors import InvalidOrientation


def _face_counts(conn):
    faces = np.sort(conn[:, :4][:, TET_FACES].reshape(-1, 3), axis=1)
    _, counts = np.unique(faces, axis=0, return_counts=True)
    return counts


@pytest.mark.parametrize("orientation,per_cell", [("a", 6), ("b", 6), ("ca", 5), ("cb", 5)])
def test_counts_and_positive_volumes(orientation, per_cell):
    nodes, elements = t4_block(3.0, 2.0, 2.0, 3, 2, 2, orientation)
    assert isinstance(elements, T4Set)
    assert nodes.count == 4 * 3 * 3
    assert elements.count == per_cell * 3 * 2 * 2
    vols = signed_volumes(nodes.xyz, elements.conn)
    assert (vols > 0).all()
    assert vols.sum() == pytest.approx(12.0)


def test_volume_sum_of_cube():
    nodes, elements = t4_block(10.0, 10.0, 10.0, 2, 2, 2, "a")
    total = signed_volumes(nodes.xyz, elements.conn).sum()
    assert abs(total - 1000.0) < 1e-9


def test_node_numbering_x_fastest():
    xs, ys, zs = [0.0, 1.0, 3.0], [0.0, 2.0], [0.0, 1.0, 4.0]
    nodes, _ = t4_blockx(xs, ys, zs)
    nL, nW = 2, 1
    for k, z in enumerate(zs):
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                nid = k * (nL + 1) * (nW + 1) + j * (nL + 1) + i
                np.testing.assert_array_equal(nodes.xyz[nid], [x, y, z])


def test_first_tetrahedron_of_single_cell():
    _, elements = t4_block(1.0, 1.0, 1.0, 1, 1, 1, "a")
    np.testing.assert_array_equal(elements.conn[0], [0, 6, 4, 5])


def test_checkerboard_picks_second_table_on_odd_cells():
    _, elements = t4_blockx([0.0, 1.0, 2.0], [0.0, 1.0], [0.0, 1.0], "ca")
    assert elements.count == 10
    # cell (1,0,0) starts with the first row of the second "ca" table
    np.testing.assert_array_equal(elements.conn[5], [11, 5, 8, 10])


def test_cell_visiting_order_k_innermost():
    _, elements = t4_blockx([0.0, 1.0], [0.0, 1.0], [0.0, 1.0, 2.0], "a")
    # second cell is (0,0,1): every node of its tets lies at z >= 1, i.e. id >= 4
    assert elements.conn[6:].min() >= 4
    assert elements.conn[:6].max() <= 7


@pytest.mark.parametrize("orientation", ["a", "b", "ca", "cb"])
def test_conforming_faces(orientation):
    _, elements = t4_block(3.0, 2.0, 2.0, 3, 2, 2, orientation)
    counts = _face_counts(elements.conn)
    assert counts.max() == 2
    boundary_quads = 2 * (3 * 2 + 3 * 2 + 2 * 2)
    assert (counts == 1).sum() == 2 * boundary_quads


def test_graded_axes_volume():
    nodes, elements = t4_blockx([0.0, 0.1, 0.5, 2.0], [0.0, 1.0, 1.5], [-1.0, 0.0, 3.0], "b")
    assert signed_volumes(nodes.xyz, elements.conn).sum() == pytest.approx(2.0 * 1.5 * 4.0)


@pytest.mark.parametrize("bad", ["c", "A", "", None, 3])
def test_invalid_orientation(bad):
    with pytest.raises(InvalidOrientation):
        t4_block(1.0, 1.0, 1.0, 1, 1, 1, bad)


def test_invalid_orientation_is_value_error():
    with pytest.raises(ValueError):
        t4_block(1.0, 1.0, 1.0, 1, 1, 1, "x")


def test_bad_counts_raise():
    with pytest.raises(ValueError):
        t4_block(1.0, 1.0, 1.0, 0, 1, 1)
    with pytest.raises(ValueError):
        t4_blockx([0.0, 1.0, 1.0], [0.0, 1.0], [0.0, 1.0])


def test_connectivity_read_only(unit_cube):
    _, elements = unit_cube
    assert not elements.conn.flags.writeable
    assert (elements.label == 0).all()


def test_t10_variants():
    nodes, elements = t10_block(1.0, 1.0, 1.0, 1, 1, 1, "cb")
    assert isinstance(elements, T10Set)
    assert elements.count == 5
    nodes_x, elements_x = t10_blockx([0.0, 1.0], [0.0, 1.0], [0.0, 1.0], "cb")
    np.testing.assert_array_equal(elements.conn, elements_x.conn)
    np.testing.assert_allclose(nodes.xyz, nodes_x.xyz)

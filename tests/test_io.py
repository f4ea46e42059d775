# -*- coding: utf-8 -*-
# Tetgrid/tests/test_io.py

import meshio
import numpy as np
import pytest

from mesh.core.data import T4Set, T10Set
from mesh.io import to_meshio, from_meshio, write_mesh, read_mesh


def test_to_meshio_cell_types(two_layer_plate, small_block_t10):
    m4 = to_meshio(*two_layer_plate)
    assert m4.cells[0].type == "tetra"
    np.testing.assert_array_equal(m4.cell_data["label"][0], two_layer_plate[1].label)
    m10 = to_meshio(*small_block_t10)
    assert m10.cells[0].type == "tetra10"


def test_from_meshio_roundtrip_in_memory(two_layer_plate):
    nodes, elements = from_meshio(to_meshio(*two_layer_plate))
    assert isinstance(elements, T4Set)
    np.testing.assert_array_equal(elements.conn, two_layer_plate[1].conn)
    np.testing.assert_array_equal(elements.label, two_layer_plate[1].label)


def test_vtu_file_roundtrip(tmp_path, small_block_t10):
    path = write_mesh(str(tmp_path / "block.vtu"), *small_block_t10)
    nodes, elements = read_mesh(path)
    assert isinstance(elements, T10Set)
    np.testing.assert_allclose(nodes.xyz, small_block_t10[0].xyz)
    np.testing.assert_array_equal(elements.conn, small_block_t10[1].conn)


def test_missing_labels_default_to_zero():
    m = meshio.Mesh(np.eye(4, 3), [("tetra", np.array([[0, 1, 2, 3]]))])
    _, elements = from_meshio(m)
    np.testing.assert_array_equal(elements.label, [0])


def test_no_tetra_cells():
    m = meshio.Mesh(np.eye(3), [("triangle", np.array([[0, 1, 2]]))])
    with pytest.raises(ValueError):
        from_meshio(m)

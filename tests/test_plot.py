# -*- coding: utf-8 -*-
# Tetgrid/tests/test_plot.py

import numpy as np
import pytest

from mesh.core.data import NodeSet, T4Set
from post.plot_mesh import node_labels, plot_tet_nodes, plot_tet_edges
from post.plot_stats import plot_node_valence_hist, plot_shape_hist, plot_label_volumes


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)


def test_node_labels_first_touching_element(two_layer_plate):
    nodes, elements = two_layer_plate
    lab = node_labels(nodes, elements)
    z = nodes.xyz[:, 2]
    assert (lab[z <= 1.0 + 1e-9] == 1).all()
    assert (lab[z > 1.0 + 1e-9] == 2).all()


def test_node_labels_orphans_are_zero():
    nodes = NodeSet(np.vstack([np.eye(4, 3), [[5.0, 5.0, 5.0]]]))
    lab = node_labels(nodes, T4Set([[0, 1, 2, 3]], label=[4]))
    np.testing.assert_array_equal(lab, [4, 4, 4, 4, 0])


def test_mesh_plots_saved(tmp_path, two_layer_plate):
    nodes, elements = two_layer_plate
    p1 = tmp_path / "nodes.png"
    p2 = tmp_path / "edges.png"
    plot_tet_nodes(nodes, elements, show=False, save_path=str(p1))
    plot_tet_edges(nodes, elements, show=False, save_path=str(p2), max_edges=50)
    assert p1.stat().st_size > 0
    assert p2.stat().st_size > 0


def test_stats_plots_saved(tmp_path, two_layer_plate):
    nodes, elements = two_layer_plate
    for fn, name in ((plot_node_valence_hist, "val.png"),
                     (plot_shape_hist, "shape.png"),
                     (plot_label_volumes, "labels.png")):
        fn(nodes, elements, show=False, save_path=str(tmp_path / name))
        assert (tmp_path / name).exists()


def test_edges_need_elements():
    with pytest.raises(ValueError):
        plot_tet_edges(NodeSet(np.eye(3)), T4Set(np.zeros((0, 4), dtype=int)), show=False)

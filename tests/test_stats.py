# -*- coding: utf-8 -*-
# Tetgrid/tests/test_stats.py

import csv
import json

import numpy as np
import pytest

from mesh.core.faces import t4_mesh_edges
from mesh.stats.report import summarize, DEFAULT_THRESHOLDS
from mesh.stats.data.quality import tet_shape, label_volumes
from mesh.stats.export import (
    flatten_summary, write_summary_csv, write_summary_json, write_summary_excel,
)


def test_summary_of_unit_cube(unit_cube):
    nodes, elements = unit_cube
    s = summarize(nodes, elements)
    topo = s["topology"]
    assert topo["n_nodes"] == 8
    assert topo["n_elements"] == 6
    assert topo["n_edges"] == t4_mesh_edges(elements.conn).shape[0]
    assert topo["volume_bbox"] == pytest.approx(1.0)
    assert topo["labels"] == [0]
    assert s["quality"]["total_volume"] == pytest.approx(1.0)
    assert s["quality"]["volume"]["min"] == pytest.approx(1.0 / 6.0)
    assert sum(s["valence"]["hist"].values()) == 8
    assert s["flags"]["ok"] is True
    assert s["thresholds"] == DEFAULT_THRESHOLDS


def test_threshold_violation(unit_cube):
    s = summarize(*unit_cube, thresholds={"shape_p5": 0.99})
    assert s["flags"]["ok"] is False
    assert s["flags"]["violations"]["shape_p5"]["ok"] is False
    assert s["flags"]["violations"]["edge_ratio_p95"]["ok"] is True


def test_regular_tet_shape_is_one():
    from mesh.core.data import NodeSet, T4Set
    xyz = np.array([[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]], dtype=float)
    elements = T4Set([[0, 1, 2, 3]])
    assert abs(tet_shape(NodeSet(xyz), elements)[0]) == pytest.approx(1.0)


def test_label_volumes(two_layer_plate):
    per_label = label_volumes(*two_layer_plate)
    assert list(per_label) == [1, 2]
    assert per_label[1]["n"] == 24
    assert per_label[1]["volume"] == pytest.approx(2.0)
    assert per_label[2]["volume"] == pytest.approx(4.0)


def test_empty_mesh_summary():
    from mesh.core.data import NodeSet, T4Set
    s = summarize(NodeSet(np.zeros((0, 3))), T4Set(np.zeros((0, 4), dtype=int)))
    assert s["quality"] == {}
    assert s["labels"] == {}
    assert s["flags"]["ok"] is True


def test_flatten_numpy_values():
    rows = dict(flatten_summary({"a": {"b": np.int64(3), "c": [1, 2]}, "d": np.float64(0.5)}))
    assert rows["a.b"] == 3 and type(rows["a.b"]) is int
    assert rows["a.c"] == "[1, 2]"
    assert rows["d"] == 0.5


def test_write_csv_and_json(tmp_path, unit_cube):
    s = summarize(*unit_cube)
    csv_path = write_summary_csv(s, str(tmp_path / "out" / "summary.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["key", "value"]
    assert ["topology.n_nodes", "8"] in rows

    json_path = write_summary_json(s, str(tmp_path / "summary.json"))
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["topology"]["n_elements"] == 6


def test_write_excel(tmp_path, two_layer_plate):
    pytest.importorskip("openpyxl")
    import pandas as pd
    s = summarize(*two_layer_plate)
    path = write_summary_excel(s, str(tmp_path / "summary.xlsx"))
    df = pd.read_excel(path)
    assert list(df.columns) == ["key", "value"]
    assert "labels.2.volume" in set(df["key"])

# -*- coding: utf-8 -*-
# Tetgrid/tests/test_checks.py

import numpy as np
import pytest

from mesh.checks import run_checks, DEFAULTS
from mesh.checks.registry import REGISTRY, RULES_ORDER, SEVERITY, get_enabled_ids
from mesh.core.data import NodeSet, T4Set, T10Set
from mesh.core.refine import t4_to_t10

XYZ = np.array([
    [0.0, 0.0, 0.0],
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 0.0, 1.0],
    [0.0, 0.0, -1.0],
    [0.2, 0.2, 1.0],
])


def _two_tets():
    return NodeSet(XYZ[:5]), T4Set([[0, 1, 2, 3], [0, 2, 1, 4]], label=[1, 2])


def test_registry_shape():
    assert list(REGISTRY) == RULES_ORDER
    assert set(SEVERITY["error"]) == {
        "invalid_indices", "negative_volumes", "duplicate_elements",
        "nonmanifold_faces", "coincident_nodes", "nonconforming_midnodes",
    }
    assert set(SEVERITY["warn"]) == {"unused_nodes", "misplaced_midnodes", "unlabeled_elements"}
    assert set(DEFAULTS["enabled"]) == set(RULES_ORDER)


def test_get_enabled_ids_keeps_order():
    ids = get_enabled_ids({"coincident_nodes": False, "unused_nodes": False})
    assert "coincident_nodes" not in ids
    assert ids == [r for r in RULES_ORDER if r not in ("coincident_nodes", "unused_nodes")]


def test_clean_block_passes(small_block):
    nodes, elements = small_block
    res = run_checks(nodes, elements)
    assert res["ok"] is True
    for rid in SEVERITY["error"]:
        assert res["rules"][rid]["ok"], rid
    # generated blocks are unlabeled: advisory only
    assert res["rules"]["unlabeled_elements"]["count"] == elements.count
    assert res["rules"]["nonconforming_midnodes"]["details"]["skipped"]
    assert res["meta"]["n_elements"] == elements.count
    assert res["meta"]["element_type"] == "T4"


def test_finding_schema(unit_cube):
    res = run_checks(*unit_cube)
    for rid, f in res["rules"].items():
        assert set(f) == {"id", "severity", "ok", "count", "examples", "details", "fixable"}
        assert f["id"] == rid
        assert f["severity"] == REGISTRY[rid].severity


def test_inverted_element():
    nodes, elements = _two_tets()
    bad = T4Set([[1, 0, 2, 3], [0, 2, 1, 4]])
    res = run_checks(nodes, bad)
    f = res["rules"]["negative_volumes"]
    assert res["ok"] is False
    assert f["count"] == 1
    assert f["examples"] == [0]
    assert f["details"]["min_volume"] == pytest.approx(-1.0 / 6.0)


def test_duplicate_element():
    nodes, elements = _two_tets()
    dup = T4Set(np.vstack([elements.conn, [[3, 2, 1, 0]]]))
    f = run_checks(nodes, dup)["rules"]["duplicate_elements"]
    assert f["count"] == 1
    assert f["examples"] == [(0, 2)]


def test_nonmanifold_face():
    nodes = NodeSet(XYZ)
    elements = T4Set([[0, 1, 2, 3], [0, 2, 1, 4], [0, 1, 2, 5]])
    f = run_checks(nodes, elements)["rules"]["nonmanifold_faces"]
    assert f["count"] == 1
    assert f["examples"] == [((0, 1, 2), 3)]


def test_invalid_indices_do_not_break_other_rules():
    nodes, _ = _two_tets()
    elements = T4Set([[0, 1, 2, 3], [0, 2, 1, 9]])
    res = run_checks(nodes, elements)
    assert res["rules"]["invalid_indices"]["examples"] == [1]
    assert res["rules"]["negative_volumes"]["ok"]
    assert res["ok"] is False


def test_coincident_and_unused_nodes():
    nodes, elements = _two_tets()
    xyz = np.vstack([nodes.xyz, nodes.xyz[1]])
    res = run_checks(NodeSet(xyz), elements)
    assert res["rules"]["coincident_nodes"]["count"] == 1
    assert res["rules"]["coincident_nodes"]["examples"] == [[1, 5]]
    assert res["rules"]["unused_nodes"]["examples"] == [5]


def test_quadratic_mesh_passes(small_block_t10):
    res = run_checks(*small_block_t10)
    assert res["ok"] is True
    assert res["rules"]["misplaced_midnodes"]["ok"]
    assert res["rules"]["nonconforming_midnodes"]["details"]["n_edges"] > 0


def test_nonconforming_midnode():
    n10, e10 = t4_to_t10(*_two_tets())
    # second element gets its own copy of the mid node of edge (0,1)
    xyz = np.vstack([n10.xyz, n10.xyz[5]])
    conn = e10.conn.copy()
    conn[1, 6] = xyz.shape[0] - 1
    res = run_checks(NodeSet(xyz), T10Set(conn, e10.label))
    f = res["rules"]["nonconforming_midnodes"]
    assert f["count"] == 1
    assert f["examples"] == [((0, 1), [5, 14])]
    assert res["rules"]["coincident_nodes"]["count"] == 1


def test_misplaced_midnode():
    n10, e10 = t4_to_t10(*_two_tets())
    xyz = n10.xyz.copy()
    xyz[9, 0] += 0.1           # mid node of edge (3,1) of the first element
    f = run_checks(NodeSet(xyz), e10)["rules"]["misplaced_midnodes"]
    assert f["severity"] == "warn"
    assert f["examples"] == [(0, 4)]


def test_disable_and_thresholds(unit_cube):
    cfg = {"enabled": {"coincident_nodes": False}, "thresholds": {"volume_eps": 0.5}}
    res = run_checks(*unit_cube, config=cfg)
    assert "coincident_nodes" not in res["rules"]
    assert res["rules"]["negative_volumes"]["count"] == 6
    assert res["meta"]["thresholds"]["volume_eps"] == 0.5
    assert DEFAULTS["thresholds"]["volume_eps"] == 0.0

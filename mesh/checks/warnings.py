# -*- coding: utf-8 -*-
# Tetgrid/mesh/checks/warnings.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
WARN-tier mesh validation rules. These are advisory checks: they do not fail
the mesh outright, but highlight leftovers and missing metadata.

Main Tasks:
-----------
   - unused_nodes: nodes no element references.
   - misplaced_midnodes: T10 mid nodes away from their edge midpoint.
   - unlabeled_elements: elements still carrying the default label.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "warn",
      "ok": bool,
      "count": int,
      "examples": [...],
      "details": {...},
      "fixable": bool,
    }
"""

from typing import Dict, List
import numpy as np

from mesh.core.patterns import T10_EDGES


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, fixable: bool = True):
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
        "fixable": bool(fixable),
    }


def unused_nodes(mv, th, cache) -> Dict:
    """
    Nodes not referenced by any element (orphans left by selection or editing).
    """
    use = cache.get("node_use", np.zeros(0, dtype=np.int64))
    bad = np.nonzero(use == 0)[0]
    return _finding(
        "unused_nodes",
        ok=bad.size == 0,
        count=bad.size,
        examples=bad[:20].tolist(),
        details={"n_nodes": int(mv.points.shape[0])},
        fixable=True,
    )


def misplaced_midnodes(mv, th, cache) -> Dict:
    """
    T10 mid nodes farther than midnode_rel * edge length from the edge midpoint.
    Examples are (element, local edge) pairs.
    """
    if not mv.quadratic:
        return _finding("misplaced_midnodes", True, 0, [], {"skipped": "not a quadratic mesh"})

    rel = float(th.get("midnode_rel", 1e-6))
    valid = cache.get("valid_cells", np.zeros(0, dtype=np.int64))
    conn = mv.conn[valid]
    bad = []
    if conn.shape[0]:
        P = mv.points
        a = P[conn[:, T10_EDGES[:, 0]]]            # (V,6,3)
        b = P[conn[:, T10_EDGES[:, 1]]]
        m = P[conn[:, 4:]]
        off = np.linalg.norm(m - 0.5 * (a + b), axis=2)
        length = np.linalg.norm(b - a, axis=2)
        for e, J in np.argwhere(off > rel * length).tolist():
            bad.append((int(valid[e]), int(J)))
    return _finding(
        "misplaced_midnodes",
        ok=len(bad) == 0,
        count=len(bad),
        examples=bad[:20],
        details={"midnode_rel": rel},
        fixable=True,
    )


def unlabeled_elements(mv, th, cache) -> Dict:
    """Elements whose label equals the default (unassigned) value."""
    default = int(th.get("unlabeled_value", 0))
    bad = np.nonzero(mv.labels == default)[0]
    return _finding(
        "unlabeled_elements",
        ok=bad.size == 0,
        count=bad.size,
        examples=bad[:20].tolist(),
        details={"unlabeled_value": default, "labels": sorted(set(mv.labels.tolist()))},
        fixable=False,
    )

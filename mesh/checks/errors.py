# -*- coding: utf-8 -*-
# Tetgrid/mesh/checks/errors.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
ERROR-tier mesh validation rules. Each rule inspects a read-only `MeshView` and
returns one normalized "finding" record that downstream tooling can aggregate,
pretty-print, or turn into exit codes.

Main Tasks:
-----------
   - Define checks with the uniform signature: `<rule_id>(mv, th, cache) -> dict`.
   - Read shared maps from `cache` (see `helpers.precompute_cache`).
   - Emit findings with a stable schema for machine consumption.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],          # capped sample (element ids, faces, node pairs)
      "details": {...},
      "fixable": bool,
    }

Notes:
------
   - Geometry rules only see elements whose indices are in range; the others
     are reported by `invalid_indices`.
   - `coincident_nodes` snaps coordinates to a grid of size tol, so two nodes
     straddling a grid line may be missed; it catches exact and near-exact copies.
"""

from typing import Dict, List
import numpy as np

from .helpers import bbox_diagonal


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, fixable: bool = True):
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
        "fixable": bool(fixable),
    }


# ------------------------------------------------------------------------------------
# 1) invalid_indices
# ------------------------------------------------------------------------------------
def invalid_indices(mv, th, cache) -> Dict:
    """
    Elements referencing a node index outside [0, N).
    """
    valid = cache.get("valid_cells", np.zeros(0, dtype=np.int64))
    mask = np.ones(mv.conn.shape[0], dtype=bool)
    mask[valid] = False
    bad = np.nonzero(mask)[0].tolist()
    return _finding(
        "invalid_indices",
        ok=len(bad) == 0,
        count=len(bad),
        examples=bad[:20],
        details={"n_nodes": int(mv.points.shape[0])},
        fixable=False,
    )


# ------------------------------------------------------------------------------------
# 2) negative_volumes
# ------------------------------------------------------------------------------------
def negative_volumes(mv, th, cache) -> Dict:
    """
    Elements whose corner tetrahedron has signed volume <= volume_eps
    (inverted or degenerate).
    """
    eps = float(th.get("volume_eps", 0.0))
    vols = cache.get("volumes", np.zeros(0))
    with np.errstate(invalid="ignore"):
        bad = np.nonzero(vols <= eps)[0]
    details = {"volume_eps": eps}
    if bad.size:
        details["min_volume"] = float(vols[bad].min())
    return _finding(
        "negative_volumes",
        ok=bad.size == 0,
        count=bad.size,
        examples=bad[:20].tolist(),
        details=details,
        fixable=True,
    )


# ------------------------------------------------------------------------------------
# 3) duplicate_elements
# ------------------------------------------------------------------------------------
def duplicate_elements(mv, th, cache) -> Dict:
    """
    Elements with the same corner set as an earlier element.
    Examples are (first, duplicate) element id pairs.
    """
    valid = cache.get("valid_cells", np.zeros(0, dtype=np.int64))
    pairs = []
    if valid.size:
        keys = np.sort(mv.corners[valid], axis=1)
        _, first, inverse = np.unique(keys, axis=0, return_index=True, return_inverse=True)
        inverse = np.asarray(inverse).ravel()
        owner = first[inverse]
        for pos in np.nonzero(owner != np.arange(valid.size))[0].tolist():
            pairs.append((int(valid[owner[pos]]), int(valid[pos])))
    return _finding(
        "duplicate_elements",
        ok=len(pairs) == 0,
        count=len(pairs),
        examples=pairs[:20],
        details={"note": "Duplicate elements share identical corner sets."},
        fixable=True,
    )


# ------------------------------------------------------------------------------------
# 4) nonmanifold_faces
# ------------------------------------------------------------------------------------
def nonmanifold_faces(mv, th, cache) -> Dict:
    """
    Triangular faces shared by more than two elements.
    """
    faces = cache.get("faces", np.zeros((0, 3), dtype=np.int64))
    counts = cache.get("face_counts", np.zeros(0, dtype=np.int64))
    bad = np.nonzero(counts > 2)[0]
    examples = [(tuple(int(v) for v in faces[f]), int(counts[f])) for f in bad[:20]]
    return _finding(
        "nonmanifold_faces",
        ok=bad.size == 0,
        count=bad.size,
        examples=examples,
        details={"n_faces": int(faces.shape[0]),
                 "n_boundary_faces": int((counts == 1).sum())},
        fixable=False,
    )


# ------------------------------------------------------------------------------------
# 5) coincident_nodes
# ------------------------------------------------------------------------------------
def coincident_nodes(mv, th, cache) -> Dict:
    """
    Distinct nodes at the same position within tol = coincident_rel * bbox diagonal.
    Examples are node-id groups sharing a position.
    """
    pts = mv.points
    rel = float(th.get("coincident_rel", 1e-9))
    tol = rel * bbox_diagonal(pts)
    groups = []
    if pts.shape[0] > 1:
        snapped = np.round(pts / tol).astype(np.int64) if tol > 0.0 else pts
        _, inverse, counts = np.unique(snapped, axis=0, return_inverse=True, return_counts=True)
        inverse = np.asarray(inverse).ravel()
        for g in np.nonzero(counts > 1)[0].tolist():
            groups.append(np.nonzero(inverse == g)[0].tolist())
    count = sum(len(g) - 1 for g in groups)
    return _finding(
        "coincident_nodes",
        ok=count == 0,
        count=count,
        examples=groups[:20],
        details={"tol": tol},
        fixable=True,
    )


# ------------------------------------------------------------------------------------
# 6) nonconforming_midnodes
# ------------------------------------------------------------------------------------
def nonconforming_midnodes(mv, th, cache) -> Dict:
    """
    T10 only: a corner edge mapped to different mid nodes by the elements sharing it.
    """
    edge_mids = cache.get("edge_mids", None)
    if edge_mids is None:
        return _finding(
            "nonconforming_midnodes",
            ok=True,
            count=0,
            examples=[],
            details={"skipped": "not a quadratic mesh"},
            fixable=True,
        )
    bad = [(e, sorted(m)) for e, m in edge_mids.items() if len(m) > 1]
    return _finding(
        "nonconforming_midnodes",
        ok=len(bad) == 0,
        count=len(bad),
        examples=bad[:20],
        details={"n_edges": len(edge_mids)},
        fixable=True,
    )

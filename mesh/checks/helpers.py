# -*- coding: utf-8 -*-
# Tetgrid/mesh/checks/helpers.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Provide the shared data model (`MeshView`) and one-time precomputations
(`precompute_cache`) used by all mesh checks, so each rule reads connectivity,
faces and volumes without rebuilding them.

Main Tasks:
-----------
- MeshView: immutable snapshot of a NodeSet / ElementSet pair.
- precompute_cache: build maps reused across rules:
    * valid_cells:  element ids whose indices are all in range.
    * volumes:      (E,) signed corner-tet volumes (NaN for invalid rows).
    * faces:        (F,3) unique sorted corner triples of valid elements.
    * face_counts:  (F,) number of elements sharing each face.
    * face_cells:   (4*V,) element id of each face occurrence, aligned with face_inverse.
    * node_use:     (N,) number of element references per node.
    * edge_mids:    {(u,v): set(mid ids)} for T10 meshes, else None.

Notes:
------
- Rules must not mutate the view or the cache.
- Only valid rows enter the geometric maps; `invalid_indices` reports the rest.
"""

from dataclasses import dataclass
from typing import Any, Dict, Set, Tuple
import numpy as np

from geometry.kernels import signed_volumes
from mesh.core.patterns import T10_EDGES, TET_FACES


def hash_edge(u: int, v: int) -> Tuple[int, int]:
    """Undirected edge key with sorted endpoints."""
    return (u, v) if u < v else (v, u)


@dataclass(frozen=True)
class MeshView:
    points: np.ndarray            # (N,3)
    conn: np.ndarray              # (E,k)
    labels: np.ndarray            # (E,)
    element_type: str             # "T4" | "T10"

    @property
    def corners(self) -> np.ndarray:
        return self.conn[:, :4]

    @property
    def quadratic(self) -> bool:
        return self.conn.shape[1] == 10


def build_mesh_view(nodes, elements) -> MeshView:
    """
    Wrap a NodeSet / ElementSet pair into an immutable MeshView.
    """
    return MeshView(
        points=np.asarray(nodes.xyz, dtype=float),
        conn=np.asarray(elements.conn, dtype=np.int64),
        labels=np.asarray(elements.label, dtype=np.int64),
        element_type=elements.name,
    )


def _edge_mids(conn: np.ndarray) -> Dict[Tuple[int, int], Set[int]]:
    """Corner edge -> set of mid-node ids used for it across T10 elements."""
    out: Dict[Tuple[int, int], Set[int]] = {}
    for row in conn.tolist():
        for J, (a, b) in enumerate(T10_EDGES.tolist()):
            out.setdefault(hash_edge(row[a], row[b]), set()).add(row[4 + J])
    return out


def precompute_cache(mv: MeshView, th: Dict) -> Dict:
    """
    Build all one-time structures needed by checks.
    """
    cache: Dict[str, Any] = {}
    n = mv.points.shape[0]
    E = mv.conn.shape[0]

    in_range = ((mv.conn >= 0) & (mv.conn < n)).all(axis=1) if E else np.zeros(0, dtype=bool)
    valid = np.nonzero(in_range)[0]
    cache["valid_cells"] = valid

    vols = np.full(E, np.nan)
    if valid.size:
        vols[valid] = signed_volumes(mv.points, mv.corners[valid])
    cache["volumes"] = vols

    corners = mv.corners[valid]
    if corners.shape[0]:
        tri = np.sort(corners[:, TET_FACES].reshape(-1, 3), axis=1)
        faces, inverse, counts = np.unique(tri, axis=0, return_inverse=True, return_counts=True)
        cache["faces"] = faces
        cache["face_counts"] = counts
        cache["face_inverse"] = np.asarray(inverse).ravel()
        cache["face_cells"] = np.repeat(valid, TET_FACES.shape[0])
    else:
        cache["faces"] = np.zeros((0, 3), dtype=np.int64)
        cache["face_counts"] = np.zeros(0, dtype=np.int64)
        cache["face_inverse"] = np.zeros(0, dtype=np.int64)
        cache["face_cells"] = np.zeros(0, dtype=np.int64)

    cache["node_use"] = np.bincount(mv.conn[valid].ravel(), minlength=n) if valid.size else np.zeros(n, dtype=np.int64)
    cache["edge_mids"] = _edge_mids(mv.conn[valid]) if mv.quadratic else None
    return cache


def bbox_diagonal(points: np.ndarray) -> float:
    if points.shape[0] == 0:
        return 0.0
    return float(np.linalg.norm(points.max(axis=0) - points.min(axis=0)))


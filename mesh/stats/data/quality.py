# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/data/quality.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Compute element-quality statistics for tetrahedral meshes from the corner
tetrahedron of each element.

Main Tasks:
-----------
    1) `tet_quality`:
        - Signed volume (geometry kernel).
        - Edge ratio (longest / shortest corner edge).
        - Shape measure 6*sqrt(2)*V / l_rms^3 (1 for a regular tetrahedron,
          0 for a flat one).
        - Aggregate stats: min/max/mean/std/p5/p95 for each metric.
    2) `label_volumes`: element count and volume per label (pandas groupby).

Notes:
------
- Returns empty dicts if the element set is empty.
"""

import numpy as np
import pandas as pd

from geometry.kernels import signed_volumes
from mesh.core.patterns import T10_EDGES


def _stats(arr):
    return {
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "p5": float(np.percentile(arr, 5)),
        "p95": float(np.percentile(arr, 95)),
    }


def edge_lengths(nodes, elements) -> np.ndarray:
    """(E,6) corner edge lengths in T10_EDGES order."""
    pts = nodes.xyz
    corners = elements.corners
    a = pts[corners[:, T10_EDGES[:, 0]]]
    b = pts[corners[:, T10_EDGES[:, 1]]]
    return np.linalg.norm(b - a, axis=2)


def tet_shape(nodes, elements) -> np.ndarray:
    """(E,) shape measure 6*sqrt(2)*V / l_rms^3."""
    vol = signed_volumes(nodes.xyz, elements.corners)
    L = edge_lengths(nodes, elements)
    return 6.0 * np.sqrt(2.0) * vol / np.sqrt((L ** 2).mean(axis=1)) ** 3


def tet_quality(nodes, elements) -> dict:
    """
    Tetrahedron quality metrics and summary statistics.

    Returns
    -------
    dict
        {"n", "total_volume", "volume", "edge_ratio", "shape"}; empty if no elements.
    """
    if elements.count == 0:
        return {}

    vol = signed_volumes(nodes.xyz, elements.corners)
    L = edge_lengths(nodes, elements)
    edge_ratio = L.max(axis=1) / L.min(axis=1)
    shape = tet_shape(nodes, elements)

    return {
        "n": elements.count,
        "total_volume": float(vol.sum()),
        "volume": _stats(vol),
        "edge_ratio": _stats(edge_ratio),
        "shape": _stats(shape),
    }


def label_volumes(nodes, elements) -> dict:
    """
    Element count and total volume per label.

    Returns
    -------
    dict
        {label: {"n": int, "volume": float}}, labels ascending.
    """
    if elements.count == 0:
        return {}
    df = pd.DataFrame({
        "label": elements.label,
        "volume": signed_volumes(nodes.xyz, elements.corners),
    })
    grouped = df.groupby("label")["volume"].agg(["count", "sum"])
    return {
        int(lab): {"n": int(row["count"]), "volume": float(row["sum"])}
        for lab, row in grouped.iterrows()
    }

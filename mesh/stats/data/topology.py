# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/data/topology.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Compute basic topological statistics of the mesh: global inventory of nodes and
elements and the per-node valence distribution.

Main Tasks:
-----------
    1) `inventory`:
        - Count nodes, elements and unique corner edges.
        - Report bounding box and its volume.
        - List the labels in use.
    2) `valence`:
        - Count how many elements reference each node.
        - Summarize valence distribution with min/max/mean/std and histogram.

Notes:
------
- Histogram is returned as {valence: frequency}.
"""

import numpy as np

from mesh.core.faces import t4_mesh_edges


def inventory(nodes, elements) -> dict:
    """
    Build a global inventory of mesh size and labels.

    Returns
    -------
    dict
        {
          "element_type": str,
          "n_nodes": int,
          "n_elements": int,
          "n_edges": int,
          "bbox": {"xmin","xmax","ymin","ymax","zmin","zmax"},
          "volume_bbox": float,
          "labels": [list of int]
        }
    """
    pts = nodes.xyz
    if pts.shape[0]:
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
    else:
        lo = hi = np.zeros(3)
    bbox = {
        "xmin": float(lo[0]), "xmax": float(hi[0]),
        "ymin": float(lo[1]), "ymax": float(hi[1]),
        "zmin": float(lo[2]), "zmax": float(hi[2]),
    }

    return {
        "element_type": elements.name,
        "n_nodes": nodes.count,
        "n_elements": elements.count,
        "n_edges": int(t4_mesh_edges(elements.conn).shape[0]),
        "bbox": bbox,
        "volume_bbox": float(np.prod(hi - lo)),
        "labels": sorted(int(v) for v in np.unique(elements.label)),
    }


def valence(nodes, elements) -> dict:
    """
    Compute node valence distribution (elements incident per node).

    Returns
    -------
    dict
        {"min", "max", "mean", "std", "hist": {valence: frequency}}
        Zeros and empty hist if no elements exist.
    """
    counts = np.bincount(elements.conn.ravel(), minlength=nodes.count)

    nonzero = counts[counts > 0]
    if nonzero.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(nonzero, return_counts=True)
    hist = {int(u): int(f) for u, f in zip(unique, freq)}

    return {
        "min": int(nonzero.min()),
        "max": int(nonzero.max()),
        "mean": float(nonzero.mean()),
        "std": float(nonzero.std()),
        "hist": hist,
    }

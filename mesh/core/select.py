# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/select.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Select elements by a bounding box and (re)label the selection.

Main Tasks:
-----------
   - select_elements: box [xmin,xmax,ymin,ymax,zmin,zmax], inflated on every
     side; all nodes inside (allin=True) or any node inside (allin=False).
   - label_elements: write a label into the chosen elements.

Notes:
------
   - Infinite bounds are allowed (e.g. select a z-slab across the whole plane).
   - Every node of the element is tested, mid-edge nodes included.
"""

from typing import Sequence
import numpy as np


def _as_box(box: Sequence[float]) -> np.ndarray:
    b = np.asarray(box, dtype=float).ravel()
    if b.size != 6:
        raise ValueError(f"box must have 6 entries [xmin,xmax,ymin,ymax,zmin,zmax], got {b.size}.")
    lo = b[0::2]
    hi = b[1::2]
    if (lo > hi).any():
        raise ValueError("box lower bounds must not exceed upper bounds.")
    return b


def nodes_in_box(xyz: np.ndarray, box: Sequence[float], inflate: float = 0.0) -> np.ndarray:
    """(N,) bool mask of nodes inside the inflated box (boundary inclusive)."""
    b = _as_box(box)
    lo = b[0::2] - float(inflate)
    hi = b[1::2] + float(inflate)
    return ((xyz >= lo) & (xyz <= hi)).all(axis=1)


def select_elements(nodes, elements, box: Sequence[float], inflate: float = 0.0, allin: bool = True) -> np.ndarray:
    """
    Indices of elements inside an (inflated) box.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    box : sequence of 6 floats
        [xmin, xmax, ymin, ymax, zmin, zmax].
    inflate : float, optional
        Grows the box by this distance on every side. Default 0.0.
    allin : bool, optional
        If True, all element nodes must be inside; else one is enough.

    Returns
    -------
    np.ndarray
        Sorted int64 element indices.
    """
    if elements.count == 0:
        return np.zeros(0, dtype=np.int64)
    inside = nodes_in_box(nodes.xyz, box, inflate)[elements.conn]   # (E,k)
    hit = inside.all(axis=1) if allin else inside.any(axis=1)
    return np.nonzero(hit)[0].astype(np.int64)


def label_elements(elements, indices, label: int):
    """Assign `label` to the elements at `indices`; returns the element set."""
    return elements.set_label(int(label), indices)

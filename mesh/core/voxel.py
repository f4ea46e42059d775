# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/voxel.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Turn a labeled 3-D voxel image into a tetrahedral mesh: every voxel whose value
lies in a closed range becomes five tetrahedra labeled with that value, and
vertices shared by neighboring voxels are created once.

Main Tasks:
-----------
   1. Scan voxels with I (first axis) outermost, then J, then K.
   2. Keep vertex ids of the current and next I-plane in a (2, N+1, P+1)
      slice buffer (-1 = unassigned); roll it after each I layer so memory
      stays proportional to one cross-section.
   3. Split each selected voxel with the "cb" tables and the checkerboard rule
      shared with the block generator.
   4. Scale integer grid positions by the voxel dimensions.

Notes:
------
   - Vertex ids follow first encounter in scan order.
   - Vertex (I,J,K) sits at (I*dx, J*dy, K*dz): the image corner is the origin.
   - Unselected voxels never create vertices, so the mesh has no orphan nodes.
"""

import logging
from typing import Sequence, Tuple
import numpy as np

from mesh.errors import EmptySelection
from mesh.tools.validate import ensure_positive_volumes
from .data import NodeSet, T4Set, T10Set
from .patterns import ORIENTATIONS, VOXEL_ORIENTATION, CELL_CORNER_OFFSETS, cell_pattern
from .refine import t4_to_t10

logger = logging.getLogger(__name__)


def _as_image(img) -> np.ndarray:
    img = np.asarray(img)
    if img.ndim != 3:
        raise ValueError(f"Voxel image must be 3-D, got {img.ndim}-D array.")
    return img


def _as_range(voxval: Sequence[float]) -> Tuple[float, float]:
    vv = np.asarray(voxval, dtype=float).ravel()
    if vv.size != 2:
        raise ValueError(f"voxval must be [min, max], got {vv.size} entries.")
    return float(vv.min()), float(vv.max())


def t4_voximggen(img, voxval: Sequence[float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Mesh the selected voxels on the integer vertex grid.

    Parameters
    ----------
    img : array_like
        (M,N,P) voxel values.
    voxval : sequence of 2 numbers
        Inclusive value range; the order of the two bounds does not matter.

    Returns
    -------
    grid : np.ndarray
        (V,3) int64 vertex positions (I,J,K) in first-encounter order.
    conn : np.ndarray
        (E,4) int64 connectivity, five rows per selected voxel.
    labels : np.ndarray
        (E,) int64 voxel value of each element.
    """
    img = _as_image(img)
    lo, hi = _as_range(voxval)
    M, N, P = img.shape
    tables = ORIENTATIONS[VOXEL_ORIENTATION]

    slices = np.full((2, N + 1, P + 1), -1, dtype=np.int64)
    grid = []
    conn = []
    labels = []
    corner = np.empty(8, dtype=np.int64)

    for I in range(M):
        layer = img[I]
        for J, K in np.argwhere((layer >= lo) & (layer <= hi)).tolist():
            for c, (di, dj, dk) in enumerate(CELL_CORNER_OFFSETS.tolist()):
                vid = slices[di, J + dj, K + dk]
                if vid < 0:
                    vid = len(grid)
                    slices[di, J + dj, K + dk] = vid
                    grid.append((I + di, J + dj, K + dk))
                corner[c] = vid
            pattern = cell_pattern(tables, I, J, K)
            conn.append(corner[pattern])
            labels.append(np.full(pattern.shape[0], int(layer[J, K]), dtype=np.int64))
        slices[0] = slices[1]
        slices[1] = -1

    if not conn:
        return (np.zeros((0, 3), dtype=np.int64),
                np.zeros((0, 4), dtype=np.int64),
                np.zeros(0, dtype=np.int64))
    return (np.asarray(grid, dtype=np.int64),
            np.concatenate(conn, axis=0),
            np.concatenate(labels))


def t4_voximg(
    img,
    voxdims: Sequence[float],
    voxval: Sequence[float],
    *,
    allow_empty: bool = False,
    validate: bool = True,
) -> Tuple[NodeSet, T4Set]:
    """
    T4 mesh of the voxels of `img` whose value lies in `voxval`.

    Parameters
    ----------
    img : array_like
        (M,N,P) voxel values.
    voxdims : sequence of 3 floats
        Voxel size along each image axis (> 0).
    voxval : sequence of 2 numbers
        Inclusive value range.
    allow_empty : bool, optional
        Return an empty mesh (and log a warning) instead of raising when nothing
        is selected. Default False.
    validate : bool, optional
        Positive-volume guard on the result. Default True.

    Returns
    -------
    (NodeSet, T4Set)
        Labels carry the integer voxel value.

    Raises
    ------
    EmptySelection
        If no voxel value lies in the range and `allow_empty` is False.
    """
    dims = np.asarray(voxdims, dtype=float).ravel()
    if dims.size != 3 or not (dims > 0.0).all():
        raise ValueError(f"voxdims must be 3 positive sizes, got {dims.tolist()}.")

    grid, conn, labels = t4_voximggen(img, voxval)
    if conn.shape[0] == 0:
        lo, hi = _as_range(voxval)
        ctx = {"voxval": [lo, hi], "shape": list(np.shape(img))}
        if not allow_empty:
            raise EmptySelection("No voxel value lies in the selected range.", context=ctx)
        logger.warning("Voxel selection [%g, %g] is empty; returning an empty mesh.", lo, hi)
        return NodeSet(np.zeros((0, 3))), T4Set(conn, labels)

    nodes = NodeSet(grid * dims)
    elements = T4Set(conn, labels)
    logger.info("Voxel mesh: %d voxels, %d nodes, %d tetrahedra",
                elements.count // 5, nodes.count, elements.count)
    if validate:
        ensure_positive_volumes(nodes, elements)
    return nodes, elements


def t10_voximg(img, voxdims, voxval, **kwargs) -> Tuple[NodeSet, T10Set]:
    """Voxel mesh upgraded to quadratic tetrahedra."""
    nodes, elements = t4_voximg(img, voxdims, voxval, **kwargs)
    return t4_to_t10(nodes, elements)

# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/block.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Structured tetrahedral meshes of an axis-aligned block, uniform or graded,
with a selectable pattern of cell diagonals.

Main Tasks:
-----------
   1. Emit nodes over the full coordinate grid, x fastest, then y, then z:
      node(i,j,k) = k*(nL+1)*(nW+1) + j*(nL+1) + i.
   2. Visit cells with i outermost and k innermost; split each cell with one of
      the two tables of the chosen orientation, picked by the parity of i+j+k.
   3. Guard the result (positive volumes) and optionally upgrade to T10.

Notes:
------
   - Orientations "a"/"b" give 6 tetrahedra per cell, "ca"/"cb" give 5.
   - Graded spacing is supported through `t4_blockx` (any strictly increasing axes).
"""

import logging
from typing import Sequence, Tuple
import numpy as np

from geometry.axes import as_axis, uniform_axis
from mesh.errors import InvalidOrientation
from mesh.tools.validate import ensure_positive_volumes
from .data import NodeSet, T4Set, T10Set
from .patterns import ORIENTATIONS, CELL_CORNER_OFFSETS
from .refine import t4_to_t10

logger = logging.getLogger(__name__)


def orientation_tables(orientation: str) -> Tuple[np.ndarray, np.ndarray]:
    """Return the two split tables of `orientation`; InvalidOrientation if unknown."""
    try:
        return ORIENTATIONS[orientation]
    except (KeyError, TypeError):
        raise InvalidOrientation(
            "Unknown orientation; expected one of {}.".format(sorted(ORIENTATIONS)),
            context={"orientation": orientation},
        ) from None


def grid_nodes(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray) -> np.ndarray:
    """(nx*ny*nz, 3) coordinates in row-major order, x varying fastest."""
    Z, Y, X = np.meshgrid(zs, ys, xs, indexing="ij")
    return np.column_stack([X.ravel(), Y.ravel(), Z.ravel()])


def grid_cells(nL: int, nW: int, nH: int) -> np.ndarray:
    """(C,3) cell indices (i,j,k) in visiting order: i outermost, k innermost."""
    return np.indices((nL, nW, nH)).reshape(3, -1).T


def split_cells(cells: np.ndarray, corner_ids: np.ndarray, tables: Tuple[np.ndarray, np.ndarray]) -> np.ndarray:
    """
    Apply the checkerboard split to a batch of cells.

    Parameters
    ----------
    cells : np.ndarray
        (C,3) cell indices (0-based), used only for their parity.
    corner_ids : np.ndarray
        (C,8) node ids of the local corners of each cell.
    tables : (np.ndarray, np.ndarray)
        Orientation pair; odd i+j+k takes the second table.

    Returns
    -------
    np.ndarray
        (C*T,4) connectivity, cell by cell, rows in table order.
    """
    ta, tb = tables
    odd = (cells.sum(axis=1) % 2 == 1)[:, None, None]
    tets = np.where(odd, corner_ids[:, tb], corner_ids[:, ta])
    return tets.reshape(-1, 4)


def t4_blockx(
    xs: Sequence[float],
    ys: Sequence[float],
    zs: Sequence[float],
    orientation: str = "a",
    *,
    validate: bool = True,
) -> Tuple[NodeSet, T4Set]:
    """
    Graded T4 mesh of the block spanned by the given node planes.

    Parameters
    ----------
    xs, ys, zs : sequence of float
        Strictly increasing node-plane positions along x, y, z.
    orientation : {"a", "b", "ca", "cb"}, optional
        Diagonal pattern. Default "a".
    validate : bool, optional
        If True, require positive volume for every tetrahedron. Default True.

    Returns
    -------
    (NodeSet, T4Set)

    Raises
    ------
    InvalidOrientation
        If `orientation` is not a known tag.
    ValueError
        If an axis is not a strictly increasing sequence of >= 2 values.
    """
    tables = orientation_tables(orientation)
    xs = as_axis(xs, "x")
    ys = as_axis(ys, "y")
    zs = as_axis(zs, "z")
    nL, nW, nH = xs.size - 1, ys.size - 1, zs.size - 1

    nodes = NodeSet(grid_nodes(xs, ys, zs))

    cells = grid_cells(nL, nW, nH)
    strides = np.array([1, nL + 1, (nL + 1) * (nW + 1)], dtype=np.int64)
    first = cells @ strides                       # node id of corner (i,j,k)
    corner_ids = first[:, None] + CELL_CORNER_OFFSETS @ strides
    elements = T4Set(split_cells(cells, corner_ids, tables))

    logger.debug("Block %dx%dx%d (%s): %d nodes, %d tetrahedra",
                 nL, nW, nH, orientation, nodes.count, elements.count)
    if validate:
        ensure_positive_volumes(nodes, elements)
    return nodes, elements


def t4_block(
    length: float,
    width: float,
    height: float,
    nL: int,
    nW: int,
    nH: int,
    orientation: str = "a",
    *,
    validate: bool = True,
) -> Tuple[NodeSet, T4Set]:
    """
    Uniform T4 mesh of [0,length] x [0,width] x [0,height] with nL x nW x nH cells.
    """
    return t4_blockx(
        uniform_axis(length, nL),
        uniform_axis(width, nW),
        uniform_axis(height, nH),
        orientation,
        validate=validate,
    )


def t10_blockx(xs, ys, zs, orientation: str = "a", *, validate: bool = True) -> Tuple[NodeSet, T10Set]:
    """Graded block meshed with T4 and upgraded to T10."""
    nodes, elements = t4_blockx(xs, ys, zs, orientation, validate=validate)
    return t4_to_t10(nodes, elements)


def t10_block(length, width, height, nL, nW, nH, orientation: str = "a", *, validate: bool = True):
    """Uniform block meshed with T4 and upgraded to T10."""
    nodes, elements = t4_block(length, width, height, nL, nW, nH, orientation, validate=validate)
    return t4_to_t10(nodes, elements)

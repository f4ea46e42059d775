# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/patterns.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Constant corner-index tables used to split a hexahedral cell (or voxel) into
tetrahedra, and the local edge table of the quadratic tetrahedron.

Local cell corners (0-based):
    0:(i,j,k)    1:(i+1,j,k)    2:(i+1,j+1,k)    3:(i,j+1,k)
    4:(i,j,k+1)  5:(i+1,j,k+1)  6:(i+1,j+1,k+1)  7:(i,j+1,k+1)

Notes:
------
   - Each orientation owns two tables; `cell_pattern` picks one by the parity of
     i+j+k so that faces shared by neighboring cells are split the same way.
   - The tables are constants. Face compatibility depends on these exact rows,
     do not reorder them.
   - "a" and "b" split a cell into 6 tetrahedra, "ca" and "cb" into 5.
"""

from typing import Dict, Tuple
import numpy as np


def _table(rows) -> np.ndarray:
    t = np.asarray(rows, dtype=np.int64) - 1   # tables are written with 1-based corners
    t.setflags(write=False)
    return t


ORIENTATIONS: Dict[str, Tuple[np.ndarray, np.ndarray]] = {
    "a": (
        _table([[1, 8, 5, 6], [3, 4, 2, 7], [7, 2, 6, 8], [4, 7, 8, 2], [2, 1, 6, 8], [4, 8, 1, 2]]),
        _table([[1, 8, 5, 6], [3, 4, 2, 7], [7, 2, 6, 8], [4, 7, 8, 2], [2, 1, 6, 8], [4, 8, 1, 2]]),
    ),
    "b": (
        _table([[2, 7, 5, 6], [1, 8, 5, 7], [1, 3, 4, 8], [2, 1, 5, 7], [1, 2, 3, 7], [3, 7, 8, 1]]),
        _table([[2, 7, 5, 6], [1, 8, 5, 7], [1, 3, 4, 8], [2, 1, 5, 7], [1, 2, 3, 7], [3, 7, 8, 1]]),
    ),
    "ca": (
        _table([[8, 4, 7, 5], [6, 7, 2, 5], [3, 4, 2, 7], [1, 2, 4, 5], [7, 4, 2, 5]]),
        _table([[7, 3, 6, 8], [5, 8, 6, 1], [2, 3, 1, 6], [4, 1, 3, 8], [6, 3, 1, 8]]),
    ),
    "cb": (
        _table([[7, 3, 6, 8], [5, 8, 6, 1], [2, 3, 1, 6], [4, 1, 3, 8], [6, 3, 1, 8]]),
        _table([[8, 4, 7, 5], [6, 7, 2, 5], [3, 4, 2, 7], [1, 2, 4, 5], [7, 4, 2, 5]]),
    ),
}

# Voxels are split with the five-tetrahedron "cb" pair
VOXEL_ORIENTATION = "cb"

# Offsets of the eight local corners from cell (i,j,k)
CELL_CORNER_OFFSETS = np.array([
    [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
    [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],
], dtype=np.int64)
CELL_CORNER_OFFSETS.setflags(write=False)

# Quadratic tetrahedron: local corner pairs of the six mid-edge nodes
T10_EDGES = np.array([[0, 1], [1, 2], [2, 0], [3, 0], [3, 1], [3, 2]], dtype=np.int64)
T10_EDGES.setflags(write=False)

# Corner triples of the four triangular faces of a tetrahedron
TET_FACES = np.array([[0, 1, 2], [0, 1, 3], [1, 2, 3], [0, 2, 3]], dtype=np.int64)
TET_FACES.setflags(write=False)


def cell_pattern(tables: Tuple[np.ndarray, np.ndarray], i: int, j: int, k: int) -> np.ndarray:
    """
    Pick the split table for cell (i,j,k) (0-based) from an orientation pair.

    An odd 0-based index sum (even in 1-based numbering) selects the second table.
    """
    return tables[1] if (i + j + k) % 2 == 1 else tables[0]


def tets_per_cell(orientation: str) -> int:
    return int(ORIENTATIONS[orientation][0].shape[0])

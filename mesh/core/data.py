# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/data.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Containers exchanged between the generators, the refinement step and the
downstream consumers (checks, statistics, meshio bridge).

Main Tasks:
-----------
   - NodeSet: (N,3) float coordinates; the row index is the node identity.
   - ElementSet: (E,k) int connectivity + (E,) int labels, with the two
     concrete variants T4Set (k=4) and T10Set (k=10).

Notes:
------
   - Indices are 0-based.
   - Connectivity is frozen (read-only array) once the set is built; only labels
     are reassigned after construction (layer tagging, selection labeling).
   - T10 column order: 4 corners, then mid nodes of edges
     (0,1), (1,2), (2,0), (3,0), (3,1), (3,2).
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union, Sequence
import numpy as np


@dataclass(eq=False)
class NodeSet:
    """
    Ordered node coordinates.
    """
    xyz: np.ndarray                    # (N,3)

    def __post_init__(self):
        xyz = np.asarray(self.xyz, dtype=float)
        if xyz.size == 0:
            xyz = xyz.reshape(0, 3)
        if xyz.ndim != 2 or xyz.shape[1] != 3:
            raise ValueError(f"Expected (N, 3) array for node coordinates, got shape {xyz.shape}.")
        self.xyz = xyz

    @property
    def count(self) -> int:
        return int(self.xyz.shape[0])

    def __len__(self) -> int:
        return self.count


@dataclass(eq=False)
class ElementSet:
    """
    Fixed-arity element connectivity with one integer label per element.
    """
    conn: np.ndarray                   # (E,k)
    label: Optional[np.ndarray] = field(default=None)

    nodes_per_element: ClassVar[int] = 0
    name: ClassVar[str] = ""

    def __post_init__(self):
        k = self.nodes_per_element
        conn = np.array(self.conn, dtype=np.int64)
        if conn.size == 0:
            conn = conn.reshape(0, k)
        if conn.ndim != 2 or conn.shape[1] != k:
            raise ValueError(f"{self.name} connectivity must be (E, {k}), got shape {conn.shape}.")
        conn.setflags(write=False)
        self.conn = conn

        if self.label is None:
            lab = np.zeros(conn.shape[0], dtype=np.int64)
        else:
            lab = np.array(self.label, dtype=np.int64).ravel()
            if lab.shape[0] != conn.shape[0]:
                raise ValueError(f"Expected {conn.shape[0]} labels, got {lab.shape[0]}.")
        self.label = lab

    @property
    def count(self) -> int:
        return int(self.conn.shape[0])

    def __len__(self) -> int:
        return self.count

    @property
    def corners(self) -> np.ndarray:
        """Corner (vertex) columns of the connectivity, shape (E,4)."""
        return self.conn[:, :4]

    def set_label(self, label: Union[int, Sequence[int], np.ndarray], indices=None) -> "ElementSet":
        """
        Reassign labels in place; all elements when `indices` is None. Returns self.
        """
        if indices is None:
            self.label[:] = label
        else:
            idx = np.asarray(indices, dtype=np.int64)
            self.label[idx] = label
        return self

    def subset(self, indices) -> "ElementSet":
        """New set of the same type holding the selected elements (labels copied)."""
        idx = np.asarray(indices, dtype=np.int64)
        return type(self)(self.conn[idx], self.label[idx])


class T4Set(ElementSet):
    """Linear 4-node tetrahedra."""
    nodes_per_element = 4
    name = "T4"


class T10Set(ElementSet):
    """Quadratic 10-node tetrahedra (corners + six mid-edge nodes)."""
    nodes_per_element = 10
    name = "T10"


ELEMENT_TYPES = {
    T4Set.name: T4Set,
    T10Set.name: T10Set,
}

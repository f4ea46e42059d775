# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/faces.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Canonical-face ("hyperface") index: maps an unordered tuple of vertex indices
(an edge for quadratic refinement) to exactly one new node id, however many
elements reference it and in whichever order they list its vertices.

Main Tasks:
-----------
   - Canonicalize a face by sorting: the smallest vertex is the anchor, the
     remaining vertices are the "others".
   - Keep one FaceRecord per canonical tuple in an arena list; a dict maps the
     canonical tuple to the record's integer id.
   - lookup_or_create / add / find with idempotent semantics.
   - Enumerate the unique edges of a T4 connectivity (`t4_mesh_edges`).

Notes:
------
   - New node ids are assigned monotonically; the first one is `start`
     (typically the size of the node set being extended).
   - Works for any tuple length >= 2 (edges, triangles, ...).
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple
import numpy as np

from .patterns import T10_EDGES


def canonical_face(face: Sequence[int]) -> Tuple[int, ...]:
    """Sorted tuple of plain ints; raises on fewer than two vertices or repeats."""
    key = tuple(sorted(int(v) for v in face))
    if len(key) < 2:
        raise ValueError(f"A face needs at least 2 vertices, got {len(key)}.")
    if len(set(key)) != len(key):
        raise ValueError(f"Face vertices must be distinct, got {tuple(face)}.")
    return key


@dataclass(frozen=True)
class FaceRecord:
    anchor: int
    others: Tuple[int, ...]
    node: int

    @property
    def vertices(self) -> Tuple[int, ...]:
        return (self.anchor,) + self.others


class HyperfaceIndex:
    """
    Set of unordered vertex tuples, each carrying the node id assigned to it.

    Parameters
    ----------
    start : int
        Node id handed out by the first `add` call.
    """

    def __init__(self, start: int = 0):
        self._records: List[FaceRecord] = []
        self._ids: Dict[Tuple[int, ...], int] = {}
        self._by_anchor: Dict[int, List[int]] = {}
        self._next = int(start)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FaceRecord]:
        return iter(self._records)

    def __contains__(self, face) -> bool:
        return canonical_face(face) in self._ids

    @property
    def next_id(self) -> int:
        """Node id the next newly created face would receive from `add`."""
        return self._next

    @property
    def records(self) -> List[FaceRecord]:
        return list(self._records)

    def lookup_or_create(self, face: Sequence[int], next_id: int) -> int:
        """
        Return the node id of `face`, recording `next_id` for it if it is new.

        Parameters
        ----------
        face : sequence of int
            Vertex indices in any order.
        next_id : int
            Id to assign when the canonical tuple has not been seen before.

        Returns
        -------
        int
            The id stored for this face (existing or `next_id`).
        """
        key = canonical_face(face)
        rid = self._ids.get(key)
        if rid is not None:
            return self._records[rid].node

        rec = FaceRecord(anchor=key[0], others=key[1:], node=int(next_id))
        rid = len(self._records)
        self._records.append(rec)
        self._ids[key] = rid
        self._by_anchor.setdefault(rec.anchor, []).append(rid)
        self._next = max(self._next, rec.node + 1)
        return rec.node

    def add(self, face: Sequence[int]) -> int:
        """Lookup-or-create using the internal counter for new faces."""
        return self.lookup_or_create(face, self._next)

    def find(self, face: Sequence[int]) -> int:
        """Node id of an existing face; KeyError if the face was never added."""
        key = canonical_face(face)
        try:
            return self._records[self._ids[key]].node
        except KeyError:
            raise KeyError(f"Face {tuple(face)} is not in the index.") from None

    def anchored(self, anchor: int) -> List[FaceRecord]:
        """Records whose smallest vertex is `anchor`, in creation order."""
        return [self._records[r] for r in self._by_anchor.get(int(anchor), [])]


def t4_mesh_edges(conn: np.ndarray) -> np.ndarray:
    """
    Unique undirected edges of a tetrahedral connectivity.

    Parameters
    ----------
    conn : np.ndarray
        (E,k) connectivity, k >= 4; corner columns are used.

    Returns
    -------
    np.ndarray
        (M,2) int64 array with u < v in every row, rows sorted lexicographically.
    """
    conn = np.asarray(conn, dtype=np.int64)
    if conn.size == 0:
        return np.zeros((0, 2), dtype=np.int64)
    corners = conn[:, :4]
    e = np.concatenate([corners[:, pair] for pair in T10_EDGES], axis=0)
    e = np.sort(e, axis=1)
    return np.unique(e, axis=0)

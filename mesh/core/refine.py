# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/refine.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Upgrade a linear tetrahedral mesh (T4) to quadratic tetrahedra (T10) with one
mid-edge node per unique edge, shared by every element touching that edge.

Main Tasks:
-----------
   1. Walk elements in order and their six local edges in T10_EDGES order,
      registering each edge in a HyperfaceIndex that starts at the node count.
   2. Place each new node at the mean of its face vertices.
   3. Rebuild connectivity: 4 original corners + 6 mid-edge ids; copy labels.

Notes:
------
   - Original nodes keep their ids and coordinates; new nodes are appended in
     first-encounter order (stable for a given element order).
"""

import logging
from typing import Tuple
import numpy as np

from .data import NodeSet, T4Set, T10Set
from .faces import HyperfaceIndex
from .patterns import T10_EDGES

logger = logging.getLogger(__name__)


def t4_to_t10(nodes: NodeSet, elements: T4Set) -> Tuple[NodeSet, T10Set]:
    """
    Convert a T4 mesh to T10.

    Parameters
    ----------
    nodes : NodeSet
        Nodes of the linear mesh.
    elements : T4Set
        Linear tetrahedra.

    Returns
    -------
    (NodeSet, T10Set)
        Extended node set (originals first) and quadratic elements.
    """
    if not isinstance(elements, T4Set):
        raise TypeError(f"Expected T4Set, got {type(elements).__name__}.")

    edges = HyperfaceIndex(start=nodes.count)
    mids = np.empty((elements.count, len(T10_EDGES)), dtype=np.int64)
    for e, conn in enumerate(elements.conn.tolist()):
        for J, (a, b) in enumerate(T10_EDGES.tolist()):
            mids[e, J] = edges.add((conn[a], conn[b]))

    xyz = np.empty((edges.next_id, 3), dtype=float)
    xyz[:nodes.count] = nodes.xyz
    for rec in edges:
        xyz[rec.node] = nodes.xyz[list(rec.vertices)].mean(axis=0)

    conn10 = np.hstack([elements.conn, mids])
    out = T10Set(conn10, elements.label.copy())
    logger.debug("T4->T10: %d elements, %d edge nodes added", out.count, len(edges))
    return NodeSet(xyz), out

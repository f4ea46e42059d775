# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Core Subpackage:
----------------
Tetrahedral mesh generation: structured blocks, layered plates, voxel images,
and the linear-to-quadratic upgrade shared by all of them.

Modules:
--------
- data: NodeSet / ElementSet containers (T4Set, T10Set)
- patterns: constant cell-split, edge and face tables
- faces: canonical-face index handing out one node id per unordered vertex tuple
- block: structured block generator (uniform and graded)
- refine: T4 -> T10 with shared mid-edge nodes
- select: box selection and labeling of elements
- layered: layered plate builder with per-layer labels
- voxel: voxel image mesher with a rolling slice buffer

Notes:
------
- Node and element numbering order is deterministic and part of the contract.
"""

from .data import NodeSet, ElementSet, T4Set, T10Set, ELEMENT_TYPES
from .patterns import ORIENTATIONS, T10_EDGES, TET_FACES
from .faces import HyperfaceIndex, FaceRecord, canonical_face, t4_mesh_edges
from .block import t4_block, t4_blockx, t10_block, t10_blockx
from .refine import t4_to_t10
from .select import select_elements, label_elements
from .layered import t4_layered_plate, t4_layered_platex, t10_layered_platex
from .voxel import t4_voximggen, t4_voximg, t10_voximg

__all__ = [
    # Containers
    "NodeSet",
    "ElementSet",
    "T4Set",
    "T10Set",
    "ELEMENT_TYPES",
    # Tables
    "ORIENTATIONS",
    "T10_EDGES",
    "TET_FACES",
    # Face index
    "HyperfaceIndex",
    "FaceRecord",
    "canonical_face",
    "t4_mesh_edges",
    # Generators
    "t4_block",
    "t4_blockx",
    "t10_block",
    "t10_blockx",
    "t4_layered_plate",
    "t4_layered_platex",
    "t10_layered_platex",
    "t4_voximggen",
    "t4_voximg",
    "t10_voximg",
    # Refinement / selection
    "t4_to_t10",
    "select_elements",
    "label_elements",
]

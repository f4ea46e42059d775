# -*- coding: utf-8 -*-
# Tetgrid/mesh/io.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Bridge between the in-memory NodeSet / ElementSet pair and `meshio`, so meshes
can be handed to external exporters (VTU, XDMF, Gmsh, ...) and read back.

Main Tasks:
-----------
   - to_meshio / from_meshio: convert in memory (tetra / tetra10 cells,
     labels in cell_data["label"]).
   - write_mesh / read_mesh: file round trip, format picked by meshio from the
     extension unless given.

Notes:
------
   - T10 column order equals meshio's tetra10 order; no permutation is applied.
   - When reading, "gmsh:physical" is used for labels if "label" is absent.
"""

import logging
from typing import Optional, Tuple
import numpy as np
import meshio

from mesh.core.data import NodeSet, ElementSet, T4Set, T10Set

logger = logging.getLogger(__name__)

CELL_TYPES = {
    T4Set.name: "tetra",
    T10Set.name: "tetra10",
}
_SETS_BY_CELL = {
    "tetra": T4Set,
    "tetra10": T10Set,
}
LABEL_KEYS = ("label", "gmsh:physical")


def to_meshio(nodes: NodeSet, elements: ElementSet) -> meshio.Mesh:
    """Wrap a mesh as `meshio.Mesh` with a single tetra/tetra10 cell block."""
    ctype = CELL_TYPES[elements.name]
    return meshio.Mesh(
        points=np.asarray(nodes.xyz, dtype=float),
        cells=[(ctype, np.asarray(elements.conn, dtype=np.int64))],
        cell_data={"label": [np.asarray(elements.label, dtype=np.int64)]},
    )


def from_meshio(m: meshio.Mesh) -> Tuple[NodeSet, ElementSet]:
    """
    Extract the first tetrahedral cell block of a meshio mesh.

    Raises
    ------
    ValueError
        If the mesh holds no tetra or tetra10 cells.
    """
    pts = np.asarray(m.points, dtype=float)
    if pts.ndim == 2 and pts.shape[1] == 2:
        pts = np.column_stack([pts, np.zeros(pts.shape[0])])

    for b, cb in enumerate(m.cells):
        cls = _SETS_BY_CELL.get(getattr(cb, "type", None))
        if cls is None:
            continue
        labels = None
        for key in LABEL_KEYS:
            data = (m.cell_data or {}).get(key)
            if data is not None and len(data) > b:
                labels = np.asarray(data[b], dtype=np.int64)
                break
        return NodeSet(pts), cls(np.asarray(cb.data, dtype=np.int64), labels)

    types = [getattr(cb, "type", None) for cb in m.cells]
    raise ValueError(f"No tetra/tetra10 cells in mesh (found {types}).")


def write_mesh(path: str, nodes: NodeSet, elements: ElementSet, file_format: Optional[str] = None) -> str:
    """Write a mesh with meshio; returns `path`."""
    meshio.write(path, to_meshio(nodes, elements), file_format=file_format)
    logger.debug("Wrote %d %s elements to %s", elements.count, elements.name, path)
    return path


def read_mesh(path: str, file_format: Optional[str] = None) -> Tuple[NodeSet, ElementSet]:
    """Read a tetrahedral mesh file with meshio."""
    m = meshio.read(path, file_format=file_format)
    return from_meshio(m)

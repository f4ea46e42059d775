# -*- coding: utf-8 -*-
# Tetgrid/mesh/tools/validate.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
-------
Raising guards for freshly generated meshes. Unlike the rules in `mesh.checks`
(which report findings), these stop the pipeline at the point of construction.

Main Tasks:
----------
   - check_indices: every referenced node index is a valid row of the node set.
   - ensure_positive_volumes: every element's corner tetrahedron has strictly
     positive signed volume; raises DegenerateGeometry otherwise.

Notes:
------
   - Only corner columns enter the volume test (the corner tetrahedron of a T10
     element carries its orientation).
   - `eps` is absolute; the default 0.0 flags zero-volume slivers too.
"""

import logging
import numpy as np

from geometry.kernels import signed_volumes
from mesh.errors import DegenerateGeometry

logger = logging.getLogger(__name__)


def check_indices(nodes, elements) -> None:
    """
    Verify that connectivity only references existing nodes.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet

    Raises
    ------
    ValueError
        If any index is negative or >= the node count.
    """
    if elements.count == 0:
        return
    n = nodes.count
    conn = elements.conn
    bad = np.nonzero(((conn < 0) | (conn >= n)).any(axis=1))[0]
    if bad.size:
        raise ValueError(
            "Elements reference nodes outside [0, {}): first offenders {}."
            .format(n, bad[:10].tolist())
        )


def ensure_positive_volumes(nodes, elements, eps: float = 0.0) -> np.ndarray:
    """
    Require strictly positive signed volume for every element.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    eps : float, optional
        Volumes <= eps are rejected. Default 0.0.

    Returns
    -------
    np.ndarray
        (E,) signed volumes, for callers that want to reuse them.

    Raises
    ------
    DegenerateGeometry
        If any element has volume <= eps.
    """
    vols = signed_volumes(nodes.xyz, elements.conn)
    bad = np.nonzero(vols <= eps)[0]
    if bad.size:
        logger.error("%d of %d elements have non-positive volume", bad.size, vols.size)
        raise DegenerateGeometry(
            "Non-positive signed volume in {} of {} elements.".format(bad.size, vols.size),
            context={"elements": bad[:20].tolist(), "min_volume": float(vols[bad].min())},
        )
    return vols

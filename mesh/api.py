# -*- coding: utf-8 -*-
# Tetgrid/mesh/api.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose
-------
High-level API for building tetrahedral meshes. Ties together the generators,
the quadratic upgrade, the construction guards and the meshio writer, and
exposes a single entry point (`build_mesh`) driven by a kind tag, a parameter
dict and optional settings overrides.

Main Tasks
----------
    1. Merge settings overrides into DEFAULT_SETTINGS.
    2. Validate required parameter keys for the requested kind.
    3. Dispatch to the block / graded block / layered / voxel generator.
    4. Optionally upgrade to T10 and re-run the index guard.
    5. Optionally write the result through meshio.
"""

from typing import Any, Dict, Optional, Tuple
import logging

from mesh.settings import DEFAULT_SETTINGS, merge_settings
from mesh.core import (
    t4_block, t4_blockx, t4_layered_plate, t4_layered_platex, t4_voximg, t4_to_t10,
)
from mesh.tools.validate import check_indices

logger = logging.getLogger(__name__)

REQUIRED_PARAMS: Dict[str, Tuple[str, ...]] = {
    "block": ("length", "width", "height", "nL", "nW", "nH"),
    "blockx": ("xs", "ys", "zs"),
    "layered": ("ts", "nts"),
    "voxel": ("img", "voxdims", "voxval"),
}


def _require(kind: str, params: Dict[str, Any]) -> None:
    for k in REQUIRED_PARAMS[kind]:
        if k not in params:
            raise ValueError(f"Missing params['{k}'] for kind '{kind}'.")
    if kind == "layered":
        graded = all(k in params for k in ("xs", "ys"))
        uniform = all(k in params for k in ("length", "width", "nL", "nW"))
        if not (graded or uniform):
            raise ValueError("Layered plate needs either 'xs'/'ys' or 'length'/'width'/'nL'/'nW'.")


def build_mesh(
    kind: str,
    params: Dict[str, Any],
    settings: Optional[Dict[str, Any]] = None,
    *,
    msh_path: Optional[str] = None,
):
    """
    Build a tetrahedral mesh.

    Parameters
    ----------
    kind : {"block", "blockx", "layered", "voxel"}
        Generator to use. The voxel kind always splits voxels with the "cb"
        tables, so settings["orientation"] does not apply to it.
    params : dict
        Generator inputs:
        - block:   length, width, height, nL, nW, nH
        - blockx:  xs, ys, zs
        - layered: ts, nts and either xs, ys or length, width, nL, nW
        - voxel:   img, voxdims, voxval
    settings : dict, optional
        Overrides for `DEFAULT_SETTINGS` (same structure).
    msh_path : str, optional
        If given, the mesh is also written there via meshio.

    Returns
    -------
    (NodeSet, ElementSet)
        T4Set, or T10Set when settings["quadratic"] is True.

    Raises
    ------
    ValueError
        Unknown kind or missing parameters (and bad scalar inputs downstream).
    InvalidOrientation, LayerCountMismatch, EmptySelection, DegenerateGeometry
        Propagated from the generators.
    """
    if kind not in REQUIRED_PARAMS:
        raise ValueError(f"Unknown mesh kind '{kind}'; expected one of {sorted(REQUIRED_PARAMS)}.")
    if params is None:
        raise ValueError("params must be a dict, got None.")
    _require(kind, params)

    cfg = merge_settings(DEFAULT_SETTINGS, settings or {})
    orientation = cfg["orientation"]
    validate = bool(cfg["validate"])

    if kind == "block":
        nodes, elements = t4_block(
            params["length"], params["width"], params["height"],
            int(params["nL"]), int(params["nW"]), int(params["nH"]),
            orientation, validate=validate,
        )
    elif kind == "blockx":
        nodes, elements = t4_blockx(params["xs"], params["ys"], params["zs"], orientation, validate=validate)
    elif kind == "layered":
        divisor = float(cfg["layered"]["tolerance_divisor"])
        if "xs" in params and "ys" in params:
            nodes, elements = t4_layered_platex(
                params["xs"], params["ys"], params["ts"], params["nts"], orientation,
                tolerance_divisor=divisor, validate=validate,
            )
        else:
            nodes, elements = t4_layered_plate(
                params["length"], params["width"], params["ts"],
                int(params["nL"]), int(params["nW"]), params["nts"], orientation,
                tolerance_divisor=divisor, validate=validate,
            )
    else:
        nodes, elements = t4_voximg(
            params["img"], params["voxdims"], params["voxval"],
            allow_empty=bool(cfg["voxel"]["allow_empty"]), validate=validate,
        )

    if cfg["quadratic"]:
        nodes, elements = t4_to_t10(nodes, elements)
    if validate:
        check_indices(nodes, elements)

    logger.info("[build_mesh] %s: %d nodes, %d %s elements",
                kind, nodes.count, elements.count, elements.name)

    if msh_path:
        from mesh.io import write_mesh
        write_mesh(msh_path, nodes, elements)
        logger.info("[build_mesh] mesh written to %s", msh_path)

    return nodes, elements

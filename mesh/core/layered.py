# -*- coding: utf-8 -*-
# Tetgrid/mesh/core/layered.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Layered (composite plate) meshes: the through-thickness axis is stacked from
layers of independent thickness and element count; elements are labeled with
their 1-based layer number, counted from the bottom (z = 0).

Main Tasks:
-----------
   1. Validate layer lists (LayerCountMismatch / ValueError).
   2. Build z node planes by concatenating uniform subdivisions of each layer's
      cumulative range.
   3. Mesh the block, label layer by layer via box selection with a small
      tolerance, optionally upgrade to T10.

Notes:
------
   - Tolerance = min(|ts|) / max(nts) / divisor, divisor 10 by default. This is
     a heuristic default, not a precision guarantee.
   - Extra entries in `nts` beyond len(ts) add no layers but still enter the
     max(nts) of the tolerance.
"""

import logging
from typing import Sequence, Tuple
import numpy as np

from geometry.axes import linearspace, uniform_axis
from mesh.errors import LayerCountMismatch
from .block import t4_blockx
from .data import NodeSet, T4Set, T10Set
from .refine import t4_to_t10
from .select import select_elements

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_DIVISOR = 10.0


def _layer_lists(ts: Sequence[float], nts: Sequence[int]) -> Tuple[np.ndarray, np.ndarray]:
    ts = np.asarray(ts, dtype=float).ravel()
    nts = np.asarray(nts, dtype=np.int64).ravel()
    if ts.size == 0:
        raise LayerCountMismatch("At least one layer thickness is required.",
                                 context={"n_thicknesses": 0})
    if nts.size < ts.size:
        raise LayerCountMismatch(
            "Element-count list is shorter than the thickness list.",
            context={"n_thicknesses": int(ts.size), "n_counts": int(nts.size)},
        )
    nts = nts[:ts.size]
    if not (ts > 0.0).all():
        raise ValueError(f"Layer thicknesses must be > 0 (got {ts.tolist()}).")
    if not (nts >= 1).all():
        raise ValueError(f"Per-layer element counts must be >= 1 (got {nts.tolist()}).")
    return ts, nts


def layer_planes(ts: Sequence[float], nts: Sequence[int]) -> np.ndarray:
    """Through-thickness node planes for the given layers (starting at z = 0)."""
    ts, nts = _layer_lists(ts, nts)
    tops = np.cumsum(ts)
    zs = [linearspace(0.0, tops[0], nts[0] + 1)]
    for layer in range(1, ts.size):
        zs.append(linearspace(tops[layer - 1], tops[layer], nts[layer] + 1)[1:])
    return np.concatenate(zs)


def layer_tolerance(ts, nts, divisor: float = DEFAULT_TOLERANCE_DIVISOR) -> float:
    """min(|ts|) / max(nts) / divisor; the max runs over every entry of `nts`."""
    ts, _ = _layer_lists(ts, nts)
    counts = np.asarray(nts, dtype=np.int64).ravel()
    return float(np.abs(ts).min() / counts.max() / float(divisor))


def t4_layered_platex(
    xs: Sequence[float],
    ys: Sequence[float],
    ts: Sequence[float],
    nts: Sequence[int],
    orientation: str = "a",
    *,
    tolerance_divisor: float = DEFAULT_TOLERANCE_DIVISOR,
    validate: bool = True,
) -> Tuple[NodeSet, T4Set]:
    """
    T4 mesh of a layered plate with given in-plane node planes.

    Parameters
    ----------
    xs, ys : sequence of float
        In-plane node planes.
    ts : sequence of float
        Layer thicknesses, bottom to top.
    nts : sequence of int
        Elements through each layer's thickness (at least len(ts) entries).
    orientation : str, optional
        Diagonal pattern passed to the block generator.
    tolerance_divisor : float, optional
        Divisor of the layer-membership tolerance.
    validate : bool, optional
        Positive-volume guard on the generated block.

    Returns
    -------
    (NodeSet, T4Set)
        Elements labeled 1..len(ts).

    Raises
    ------
    LayerCountMismatch
        If `ts` is empty or `nts` is shorter than `ts`.
    """
    tol = layer_tolerance(ts, nts, tolerance_divisor)
    ts, nts = _layer_lists(ts, nts)
    zs = layer_planes(ts, nts)

    nodes, elements = t4_blockx(xs, ys, zs, orientation, validate=validate)

    tops = np.cumsum(ts)
    bottoms = tops - ts
    for layer, (z0, z1) in enumerate(zip(bottoms, tops), start=1):
        box = [-np.inf, np.inf, -np.inf, np.inf, z0, z1]
        sel = select_elements(nodes, elements, box=box, inflate=tol)
        elements.set_label(layer, sel)
        logger.debug("Layer %d [%.6g, %.6g]: %d elements", layer, z0, z1, sel.size)

    logger.info("Layered plate: %d layers, %d nodes, %d elements", ts.size, nodes.count, elements.count)
    return nodes, elements


def t10_layered_platex(xs, ys, ts, nts, orientation: str = "a", **kwargs) -> Tuple[NodeSet, T10Set]:
    """Layered plate meshed with T4, labeled per layer, then upgraded to T10."""
    nodes, elements = t4_layered_platex(xs, ys, ts, nts, orientation, **kwargs)
    return t4_to_t10(nodes, elements)


def t4_layered_plate(length, width, ts, nL, nW, nts, orientation: str = "a", **kwargs):
    """Layered plate over [0,length] x [0,width] with uniform in-plane cells."""
    return t4_layered_platex(uniform_axis(length, nL), uniform_axis(width, nW), ts, nts, orientation, **kwargs)

# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/report.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Compute a compact mesh-quality summary of a NodeSet / ElementSet pair and return
a structured dictionary ready for export (CSV/JSON/Excel) or downstream checks.

Main Tasks:
-----------
    1) Compute:
        - Topology inventory and node valence.
        - Tetrahedron quality statistics.
        - Volume per label.
    2) Evaluate threshold violations and set an overall "ok" flag.
    3) Return a structured dictionary for easy serialization or inspection.

Notes:
------
    - Thresholds are user-tunable via `thresholds` (merged over defaults).
    - The `flags.violations` section contains per-metric pass/fail info with observed values.
"""

from typing import Dict, Optional, Any
import logging

from .data.topology import inventory, valence
from .data.quality import tet_quality, label_volumes

logger = logging.getLogger(__name__)

# ----------------------------
# Default quality thresholds
# ----------------------------
DEFAULT_THRESHOLDS: Dict[str, float] = {
    "min_volume": 0.0,        # smallest volume must be > this
    "edge_ratio_p95": 5.0,    # p95 of edge ratio must be <= this
    "shape_p5": 0.1,          # p5 of shape measure must be >= this
}


def _get(d: Any, *keys: str, default: Any = None) -> Any:
    """
    Safely fetch a nested value from dictionaries; `default` if any key is missing.
    """
    cur = d
    for k in keys:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _flag(flags: Dict[str, Any], name: str, value, limit: float, kind: str) -> None:
    if value is None:
        return
    if kind == "gt":
        ok = value > limit
        entry = {"value": value, "min_exclusive": limit, "ok": ok}
    elif kind == "ge":
        ok = value >= limit
        entry = {"value": value, "min_allowed": limit, "ok": ok}
    else:
        ok = value <= limit
        entry = {"value": value, "max_allowed": limit, "ok": ok}
    flags["violations"][name] = entry
    flags["ok"] = flags["ok"] and ok


def summarize(nodes, elements, thresholds: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
    """
    Build a full mesh-quality summary and threshold evaluation.

    Threshold Checks
    ----------------
    - `volume.min`      >  `min_volume`
    - `edge_ratio.p95`  <= `edge_ratio_p95`
    - `shape.p5`        >= `shape_p5`

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    thresholds : dict, optional
        Dict overriding/adding limits (merged over `DEFAULT_THRESHOLDS`).

    Returns
    -------
    dict
        {
          "topology": {...},
          "valence": {...},
          "quality": {...},
          "labels": {label: {"n", "volume"}},
          "thresholds": {...},
          "flags": {"ok": bool, "violations": {...}}
        }
    """
    thr = dict(DEFAULT_THRESHOLDS)
    if thresholds:
        thr.update(thresholds)

    topo = inventory(nodes, elements)
    val = valence(nodes, elements)
    q = tet_quality(nodes, elements)
    per_label = label_volumes(nodes, elements)

    flags = {"violations": {}, "ok": True}
    _flag(flags, "min_volume", _get(q, "volume", "min"), thr["min_volume"], "gt")
    _flag(flags, "edge_ratio_p95", _get(q, "edge_ratio", "p95"), thr["edge_ratio_p95"], "le")
    _flag(flags, "shape_p5", _get(q, "shape", "p5"), thr["shape_p5"], "ge")

    if not flags["ok"]:
        bad = [k for k, v in flags["violations"].items() if not v["ok"]]
        logger.warning("Quality thresholds violated: %s", ", ".join(bad))

    return {
        "topology": topo,
        "valence": val,
        "quality": q,
        "labels": per_label,
        "thresholds": thr,
        "flags": flags,
    }

# -*- coding: utf-8 -*-
# Tetgrid/mesh/checks/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
run_checks(nodes, elements, config): evaluate the tetrahedral mesh rules on a
generated or loaded mesh and return one finding per rule plus an overall `ok`.

Main Tasks
----------
   - DEFAULTS: every rule on; volume, coincidence and mid-node tolerances.
   - Build the MeshView and the face/edge cache once, then run the enabled
     rules in registry order.
   - `ok` is False as soon as one error-severity rule fails; warnings only log.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "element_type": str, "n_nodes": int, "n_elements": int,
    "thresholds": dict, "enabled": dict
  }
}
"""

from typing import Dict, Any, Optional
import copy
import logging

from mesh.settings import merge_settings
from .helpers import build_mesh_view, precompute_cache
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "invalid_indices": True,
        "negative_volumes": True,
        "duplicate_elements": True,
        "nonmanifold_faces": True,
        "coincident_nodes": True,
        "nonconforming_midnodes": True,
        # warnings
        "unused_nodes": True,
        "misplaced_midnodes": True,
        "unlabeled_elements": True,
    },
    "thresholds": {
        "volume_eps": 0.0,          # volumes <= eps are errors
        "coincident_rel": 1e-9,     # relative to bbox diagonal
        "midnode_rel": 1e-6,        # relative to edge length
        "unlabeled_value": 0,
    },
}


def _meta(mv, cfg):
    """
    Element type, sizes and the effective config, echoed back in the result.
    """
    return {
        "element_type": mv.element_type,
        "n_nodes": int(mv.points.shape[0]),
        "n_elements": int(mv.conn.shape[0]),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(nodes, elements, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a mesh and return findings.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool, False iff any ERROR-severity rule fails.
          - "rules": dict, rule_id -> finding dict.
          - "meta": dict, mesh sizes, thresholds, enabled map.
    """
    cfg = merge_settings(DEFAULTS, config or {})
    mv = build_mesh_view(nodes, elements)
    th = cfg.get("thresholds", {})
    cache = precompute_cache(mv, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY[rid]
        finding = spec.fn(mv, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error")
    failed = [rid for rid, f in results.items() if not f["ok"]]
    if failed:
        logger.warning("Mesh checks flagged: %s", ", ".join(failed))

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(mv, cfg),
    }


__all__ = ["DEFAULTS", "run_checks", "REGISTRY", "RULES_ORDER"]

# -*- coding: utf-8 -*-
# Tetgrid/mesh/settings.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Default options of the high-level builder and a deep-merge utility for user
overrides.

Main Tasks:
-----------
   - DEFAULT_SETTINGS: element order, orientation, guards, layered and voxel options.
   - merge_settings: deep, right-biased merge without mutating inputs.

Notes:
------
   - Unknown keys in overrides are preserved but ignored by the builder.
"""

from typing import Dict, Any, Optional
import copy

DEFAULT_SETTINGS: Dict[str, Any] = {
    "orientation": "a",            # a | b | ca | cb
    "quadratic": False,            # upgrade T4 -> T10
    "validate": True,              # positive-volume guard
    "layered": {
        "tolerance_divisor": 10.0, # min(|ts|) / max(nts) / divisor
    },
    "voxel": {
        "allow_empty": False,      # empty selection -> empty mesh instead of EmptySelection
    },
}


def merge_settings(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two settings dicts (right-biased), preserving nested structure and immutability.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_settings(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = copy.deepcopy(v)
    return out

# -*- coding: utf-8 -*-
# Tetgrid/mesh/checks/registry.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Table of the tetrahedral mesh rules: id, rule function, severity and whether
a rebuild or relabel could clear the finding. `run_checks` walks it in
RULES_ORDER.

Main Tasks:
-----------
   - Six error rules (indices, volumes, duplicates, face manifoldness,
     coincident nodes, shared mid-edge nodes) and three warnings.
   - get_enabled_ids: apply a {rule_id: bool} map to RULES_ORDER.

Notes:
------
   - Registering an id twice, or a severity other than "error"/"warn", raises
     ValueError at import time.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import errors as _err
from . import warnings as _wrn


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(mv, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"
    fixable: bool = True


REGISTRY: Dict[str, RuleSpec] = {}

def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (hard failures)
_add(RuleSpec("invalid_indices",        _err.invalid_indices,        "error", False))
_add(RuleSpec("negative_volumes",       _err.negative_volumes,       "error", True))
_add(RuleSpec("duplicate_elements",     _err.duplicate_elements,     "error", True))
_add(RuleSpec("nonmanifold_faces",      _err.nonmanifold_faces,      "error", False))
_add(RuleSpec("coincident_nodes",       _err.coincident_nodes,       "error", True))
_add(RuleSpec("nonconforming_midnodes", _err.nonconforming_midnodes, "error", True))

# Warnings (advisories)
_add(RuleSpec("unused_nodes",           _wrn.unused_nodes,           "warn",  True))
_add(RuleSpec("misplaced_midnodes",     _wrn.misplaced_midnodes,     "warn",  True))
_add(RuleSpec("unlabeled_elements",     _wrn.unlabeled_elements,     "warn",  False))


# Index validity first; geometry; topology; then quadratic and metadata.
RULES_ORDER: List[str] = [
    "invalid_indices",
    "negative_volumes",
    "duplicate_elements",
    "nonmanifold_faces",
    "coincident_nodes",
    "nonconforming_midnodes",
    "unused_nodes",
    "misplaced_midnodes",
    "unlabeled_elements",
]


SEVERITY = {
    "error": [rid for rid, spec in REGISTRY.items() if spec.severity == "error"],
    "warn":  [rid for rid, spec in REGISTRY.items() if spec.severity == "warn"],
}


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Rule ids left on by `enabled_map`, in RULES_ORDER. Missing ids count as
    enabled; None or {} enables everything.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]

# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/export.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Persist the output of `mesh.stats.report.summarize` (a nested dict holding
topology, valence, quality, per-label volumes and flags) as flat tables or as
the original nested JSON.

Main Tasks:
-----------
    1. flatten_summary: nested dict -> ("topology.n_nodes", 36)-style rows.
    2. write_summary_csv / write_summary_excel: one row per flattened key.
    3. write_summary_json: nested layout kept, numpy values converted.

Notes:
------
    - Integer dict keys (labels, valence bins) become path segments as strings.
    - Lists and arrays are not expanded; they land in one cell as JSON text.
"""

from typing import Dict, Any, List, Tuple
import os, csv, json

import numpy as np
import pandas as pd

COLUMNS = ["key", "value"]


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic))


def _default(o):
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    if _is_scalar(obj):
        out.append((prefix, obj.item() if isinstance(obj, np.generic) else obj))
    elif isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            _flatten(f"{prefix}.{k}" if prefix else str(k), obj[k], out)
    else:
        out.append((prefix, json.dumps(obj, default=_default, ensure_ascii=False)))


def _prepare(path: str) -> str:
    folder = os.path.dirname(os.path.abspath(path))
    os.makedirs(folder, exist_ok=True)
    return path


def flatten_summary(summary: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Flat (dotted key, value) rows of a nested summary, keys sorted per level."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    return rows


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Two-column CSV with a "key,value" header; returns `path`.
    """
    rows = flatten_summary(summary)
    with open(_prepare(path), "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(COLUMNS)
        writer.writerows(rows)
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Dump the nested summary as JSON.

    Parameters
    ----------
    summary : dict
        Output of `summarize` (or any nested dict of the same kind).
    path : str
        Target file; parent folders are created.
    indent : int, optional
        Pretty-print indentation. Default 2.

    Returns
    -------
    str
        `path`.
    """
    with open(_prepare(path), "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_default)
    return path


def write_summary_excel(summary: Dict[str, Any], path: str, sheet_name: str = "summary") -> str:
    """Single-sheet workbook of the flattened rows (openpyxl engine via pandas)."""
    df = pd.DataFrame(flatten_summary(summary), columns=COLUMNS)
    df.to_excel(_prepare(path), sheet_name=sheet_name, index=False)
    return path

# -*- coding: utf-8 -*-
# Tetgrid/main.py

"""
End-to-end driver:
  1) Layered plate: two layers, T10 elements, labels per layer
  2) Voxel image: a labeled sphere-in-a-box image meshed with T4
  3) Quick mesh plots (nodes/edges)
  4) Mesh QA summary + export (CSV/JSON/Excel) + a few stats plots
  5) Post-mesh checks (hard stop on errors)
  6) Export meshes through meshio (VTU)
"""

import os
import logging
import json
import sys

import numpy as np
from pathlib import Path
from mesh.api import build_mesh
from mesh.checks import run_checks
from mesh.stats.report import summarize
from mesh.stats.export import write_summary_csv, write_summary_json, write_summary_excel
from post.plot_mesh import plot_tet_nodes, plot_tet_edges
from post.plot_stats import plot_node_valence_hist, plot_shape_hist, plot_label_volumes


def _sphere_image(n: int = 12) -> np.ndarray:
    """Label 2 inside a centered sphere, 1 elsewhere."""
    c = (n - 1) / 2.0
    I, J, K = np.indices((n, n, n))
    r = np.sqrt((I - c) ** 2 + (J - c) ** 2 + (K - c) ** 2)
    return np.where(r <= n / 3.0, 2, 1)


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Tetgrid")

    os.makedirs("out", exist_ok=True)
    os.makedirs("plots", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Layered plate (T10)
    # ------------------------------------------------------------------
    plate_params = {
        "length": 10.0, "width": 4.0, "nL": 10, "nW": 4,
        "ts": [1.0, 2.0],            # layer thicknesses, bottom to top
        "nts": [2, 3],               # elements through each layer
    }
    plate_nodes, plate_elems = build_mesh(
        "layered",
        plate_params,
        settings={"orientation": "a", "quadratic": True},
        msh_path="out/plate.vtu",
    )

    # ------------------------------------------------------------------
    # 2) Voxel image (T4), both materials
    # ------------------------------------------------------------------
    vox_params = {"img": _sphere_image(12), "voxdims": [0.5, 0.5, 0.5], "voxval": [1, 2]}
    vox_nodes, vox_elems = build_mesh("voxel", vox_params, msh_path="out/voxels.vtu")

    # ------------------------------------------------------------------
    # 3) Quick mesh plots (optional)
    # ------------------------------------------------------------------
    try:
        plot_tet_nodes(plate_nodes, plate_elems, show=False, save_path="plots/plate_nodes.png")
        plot_tet_edges(vox_nodes, vox_elems, show=False, save_path="plots/voxel_edges.png",
                       max_edges=20000)
    except Exception as e:
        log.warning("Skipping quick mesh plots: %s", e)

    # ------------------------------------------------------------------
    # 4) Mesh QA summary + export + stats plots
    # ------------------------------------------------------------------
    summary = summarize(plate_nodes, plate_elems)
    log.info("Plate summary: %s", json.dumps(summary["topology"]))

    try:
        plot_node_valence_hist(vox_nodes, vox_elems, show=False, save_path="plots/valence.png")
        plot_shape_hist(vox_nodes, vox_elems, show=False, save_path="plots/shape.png")
        plot_label_volumes(plate_nodes, plate_elems, show=False, save_path="plots/label_volumes.png")
    except Exception as e:
        log.warning("Skipping stats plots: %s", e)

    csv_path = write_summary_csv(summary, os.path.join("out", "summary.csv"))
    json_path = write_summary_json(summary, os.path.join("out", "summary.json"))
    xlsx_path = write_summary_excel(summary, os.path.join("out", "summary.xlsx"))
    log.info("Stats written: %s, %s, %s", csv_path, json_path, xlsx_path)

    # ------------------------------------------------------------------
    # 5) Post-mesh validation (hard stop on errors)
    # ------------------------------------------------------------------
    CHECKS_CONFIG = None  # or e.g. {"thresholds": {"midnode_rel": 1e-8}}

    for name, nodes, elems in (("plate", plate_nodes, plate_elems), ("voxels", vox_nodes, vox_elems)):
        findings = run_checks(nodes, elems, CHECKS_CONFIG)
        report_path = Path("out") / "{}.checks.json".format(name)
        report_path.write_text(json.dumps(findings, indent=2, default=str))

        if not findings["ok"]:
            failures = [
                (rid, int(f.get("count", 0)), f.get("examples", [])[:3])
                for rid, f in findings["rules"].items()
                if f.get("severity") == "error" and not f.get("ok", True)
            ]
            lines = [
                "Mesh validation failed for '{}'. The following error checks did not pass:".format(name),
                *(f"  - {rid}: count={cnt}" + (f", examples={examples}" if examples else "")
                  for rid, cnt, examples in failures),
                f"See full report: {report_path}",
            ]
            print("\n".join(lines), file=sys.stderr)
            sys.exit(1)

        log.info("Mesh checks passed for '%s'. Report: %s", name, report_path)

# -*- coding: utf-8 -*-
# Tetgrid/post/plot_mesh.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose
-------
Quick visualization utilities for tetrahedral meshes using matplotlib.

Main Tasks
----------
    1) Import pyplot with a headless-safe backend.
    2) Plot mesh nodes (`plot_tet_nodes`) as a 3-D scatter colored by label.
    3) Plot mesh edges (`plot_tet_edges`) as a wireframe of unique corner edges,
       with optional downsampling for very large meshes.
"""

import os
import logging
import numpy as np

from mesh.core.faces import t4_mesh_edges

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Returns
    -------
    module
        The matplotlib.pyplot module.
    """
    import matplotlib
    # Agg when DISPLAY is not set, so CI and headless runs do not need a GUI backend.
    if not os.environ.get("DISPLAY"):
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    return plt


def _finish(plt, fig, show, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        logger.info("Mesh plot saved to: %s", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)


def node_labels(nodes, elements) -> np.ndarray:
    """
    Label of the first element (in element order) touching each node; 0 for orphans.
    """
    lab = np.zeros(nodes.count, dtype=np.int64)
    seen = np.zeros(nodes.count, dtype=bool)
    for row, value in zip(elements.conn, elements.label):
        fresh = row[~seen[row]]
        lab[fresh] = value
        seen[fresh] = True
    return lab


def plot_tet_nodes(nodes, elements, show=True, save_path=None, *, s=4, alpha=0.8):
    """
    3-D scatter plot of mesh nodes, colored by the label of the first element using them.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    show : bool, optional
        Whether to display the figure (ignored on a non-GUI backend). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    s : float, optional
        Scatter marker size. Default 4.
    alpha : float, optional
        Scatter marker transparency. Default 0.8.
    """
    plt = _get_pyplot()
    pts = nodes.xyz

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")
    sc = ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], c=node_labels(nodes, elements),
                    s=s, alpha=alpha, cmap="viridis")
    fig.colorbar(sc, ax=ax, shrink=0.6, label="label")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title("Mesh Nodes")

    _finish(plt, fig, show, save_path)
    return fig


def plot_tet_edges(
    nodes,
    elements,
    show=True,
    save_path=None,
    *,
    linewidth=0.4,
    alpha=1.0,
    max_edges=None,
):
    """
    3-D wireframe of the unique corner edges.

    Parameters
    ----------
    nodes : NodeSet
    elements : ElementSet
    show : bool, optional
        Whether to display the figure. Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    linewidth : float, optional
        Line width for edges. Default 0.4.
    alpha : float, optional
        Line transparency. Default 1.0.
    max_edges : int, optional
        If provided, randomly down-sample to this number of edges to keep
        plots responsive for very large meshes.

    Raises
    ------
    ValueError
        If the mesh has no elements.
    """
    from mpl_toolkits.mplot3d.art3d import Line3DCollection

    if elements.count == 0:
        raise ValueError("No elements found in the mesh.")

    plt = _get_pyplot()
    edges = t4_mesh_edges(elements.conn)

    rng = np.random.RandomState(0)
    if max_edges is not None and len(edges) > max_edges:
        edges = edges[rng.choice(len(edges), size=max_edges, replace=False)]

    segs = nodes.xyz[edges]                         # (M,2,3)

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection="3d")
    ax.add_collection3d(Line3DCollection(segs, colors="k", linewidths=linewidth, alpha=alpha))
    lo = nodes.xyz.min(axis=0)
    hi = nodes.xyz.max(axis=0)
    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[1], hi[1])
    ax.set_zlim(lo[2], hi[2])
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title("Mesh Edges ({})".format(elements.name))

    _finish(plt, fig, show, save_path)
    return fig

# -*- coding: utf-8 -*-
# Tetgrid/post/plot_stats.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Simple matplotlib-based visualizations for mesh statistics: node-valence
histogram, tetrahedron shape histogram and volume per label.

Notes:
------
- Metrics come from `mesh.stats.data`; nothing is recomputed here.
"""

from typing import Optional
import numpy as np

from mesh.stats.data.quality import label_volumes, tet_shape
from .plot_mesh import _get_pyplot, _finish


def plot_node_valence_hist(nodes, elements, bins: int = 12, show=True, save_path: Optional[str] = None):
    """Histogram of elements per node."""
    plt = _get_pyplot()
    counts = np.bincount(elements.conn.ravel(), minlength=nodes.count)

    fig = plt.figure(figsize=(7, 4))
    ax = fig.add_subplot(111)
    ax.hist(counts[counts > 0], bins=bins, color="tab:blue", alpha=0.8)
    ax.set_xlabel("Elements per node")
    ax.set_ylabel("Nodes")
    ax.set_title("Node Valence")

    _finish(plt, fig, show, save_path)
    return fig


def plot_shape_hist(nodes, elements, bins: int = 30, show=True, save_path: Optional[str] = None):
    """Histogram of the shape measure 6*sqrt(2)*V / l_rms^3 (1 = regular tetrahedron)."""
    plt = _get_pyplot()
    shape = tet_shape(nodes, elements)

    fig = plt.figure(figsize=(7, 4))
    ax = fig.add_subplot(111)
    ax.hist(shape, bins=bins, range=(0.0, 1.0), color="tab:green", alpha=0.8)
    ax.set_xlabel("Shape measure")
    ax.set_ylabel("Elements")
    ax.set_title("Tetrahedron Shape")

    _finish(plt, fig, show, save_path)
    return fig


def plot_label_volumes(nodes, elements, show=True, save_path: Optional[str] = None):
    """Bar chart of total volume per label."""
    plt = _get_pyplot()
    per_label = label_volumes(nodes, elements)

    fig = plt.figure(figsize=(6, 4))
    ax = fig.add_subplot(111)
    labels = list(per_label.keys())
    ax.bar([str(k) for k in labels], [per_label[k]["volume"] for k in labels], color="tab:orange")
    ax.set_xlabel("Label")
    ax.set_ylabel("Volume")
    ax.set_title("Volume per Label")

    _finish(plt, fig, show, save_path)
    return fig

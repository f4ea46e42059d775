# -*- coding: utf-8 -*-
# Tetgrid/post/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Modules:
--------
- plot_mesh:   Quick 3-D mesh visualization (nodes colored by label, edge wireframe).
               Headless-safe backend, optional down sampling for huge meshes.

- plot_stats:  Mesh-statistics plots: valence and shape histograms, volume per label.
"""

__all__ = ["plot_mesh", "plot_stats"]

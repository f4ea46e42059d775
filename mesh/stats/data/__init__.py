# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/data/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Modules:
--------
- topology:  inventory & connectivity (counts, bbox, unique edges, valence).
- quality:   volume and shape metrics of tetrahedra; per-label volumes.
"""

__all__ = ["topology", "quality"]

# -*- coding: utf-8 -*-
# Tetgrid/geometry/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Geometry Package:
-----------------
Low-level geometric primitives used by the mesh generators and checks.

Modules:
--------
- kernels:  signed tetrahedron volumes (scalar and vectorized), one sign convention.

- axes:     uniform subdivision and validation of node-plane coordinate sequences.
"""

__all__ = ["kernels", "axes"]

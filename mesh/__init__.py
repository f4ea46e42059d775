# -*- coding: utf-8 -*-
# Tetgrid/mesh/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Modules:
--------
- core:     tetrahedral generators, refinement and selection.
- tools:    raising guards run right after construction.
- checks:   rule registry reporting mesh findings.
- stats:    summary report of a generated mesh and its export.
- settings: default options and deep merge.
- io:       bridge to meshio (export / import).
- api:      high-level mesh building entry point.
- errors:   typed exceptions.
"""

__all__ = ["core", "tools", "checks", "stats", "settings", "io", "api", "errors",]

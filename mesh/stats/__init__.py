# -*- coding: utf-8 -*-
# Tetgrid/mesh/stats/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Modules:
--------
- report:    one-shot orchestration to produce a JSON-like summary.
- export:    saving the summary to CSV, JSON or Excel.
"""

__all__ = ["report", "export"]

# -*- coding: utf-8 -*-
# Tetgrid/mesh/tools/__init__.py

"""
Project: Tetgrid
Date: 10/18/2026

Tools Subpackage:
-----------------
Guards run by the generators right after construction.

Modules:
--------
- validate: index-range and positive-volume guards (raise on failure).
"""

__all__ = ["validate"]

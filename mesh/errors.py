# -*- coding: utf-8 -*-
# Tetgrid/mesh/errors.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose
-------
Typed exceptions for the mesh generators with compact, context-aware messages,
so callers can tell input mistakes (bad orientation tag, inconsistent layer
lists) from reportable outcomes (empty voxel selection) and from broken
geometry (non-positive element volumes).

Main Tasks
----------
    1. MeshError(message, context) with a compact context suffix in __str__.
    2. Typed subclasses: InvalidOrientation, LayerCountMismatch, EmptySelection,
       DegenerateGeometry.

Notes
-----
- InvalidOrientation and LayerCountMismatch also derive from ValueError; they
  describe bad arguments.
- EmptySelection is raised by the voxel mesher; callers decide whether it is fatal.
"""

__all__ = [
    "MeshError",
    "InvalidOrientation",
    "LayerCountMismatch",
    "EmptySelection",
    "DegenerateGeometry",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class MeshError(Exception):
    """
    Base class for all mesh generation errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended to the string form (e.g., {"orientation": "x"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return super().__str__() + _format_context(self.context)


class InvalidOrientation(MeshError, ValueError):
    """Unrecognized diagonal-pattern tag (valid tags: a, b, ca, cb)."""


class LayerCountMismatch(MeshError, ValueError):
    """
    Layer lists are inconsistent:
      - the thickness list is empty
      - the element-count list is shorter than the thickness list
    """


class EmptySelection(MeshError):
    """The voxel value range selected no voxels, so the mesh would be empty."""


class DegenerateGeometry(MeshError):
    """
    A generated or refined element has non-positive signed volume. Context carries
    the offending element indices (capped) and the smallest volume found.
    """

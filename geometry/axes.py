# -*- coding: utf-8 -*-
# Tetgrid/geometry/axes.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Axis (coordinate sequence) helpers shared by the structured generators: uniform
subdivision of an interval and validation of user-given node planes.

Main Tasks:
   1. linearspace: inclusive uniform subdivision, end points reproduced exactly.
   2. uniform_axis: (length, count) pair -> node plane positions.
   3. as_axis: validate a 1-D, finite, strictly increasing sequence.
"""

from typing import Sequence, Union
import numpy as np


def linearspace(start: float, stop: float, n: int) -> np.ndarray:
    """
    Return `n` equally spaced values from `start` to `stop` (both included).

    Parameters
    ----------
    start, stop : float
        Interval end points.
    n : int
        Number of values (>= 2).

    Returns
    -------
    np.ndarray
        (n,) float array with `out[0] == start` and `out[-1] == stop` exactly.
    """
    n = int(n)
    if n < 2:
        raise ValueError(f"linearspace needs at least 2 points, got n={n}.")
    out = np.linspace(float(start), float(stop), n)
    out[-1] = float(stop)
    return out


def uniform_axis(length: float, count: int) -> np.ndarray:
    """
    Node plane positions for `count` equal cells over [0, length].
    """
    length = float(length)
    count = int(count)
    if not (length > 0.0):
        raise ValueError(f"length must be > 0 (got {length}).")
    if count < 1:
        raise ValueError(f"count must be >= 1 (got {count}).")
    return linearspace(0.0, length, count + 1)


def as_axis(values: Union[Sequence[float], np.ndarray], name: str = "axis") -> np.ndarray:
    """
    Validate and flatten a coordinate sequence.

    Raises
    ------
    ValueError
        If fewer than 2 values, non-finite values, or not strictly increasing.
    """
    a = np.asarray(values, dtype=float).ravel()
    if a.size < 2:
        raise ValueError(f"{name} needs at least 2 node planes, got {a.size}.")
    if not np.isfinite(a).all():
        bad = np.argwhere(~np.isfinite(a)).ravel()
        raise ValueError(f"Non-finite {name} coordinates at indices: {bad.tolist()}")
    if not (np.diff(a) > 0.0).all():
        raise ValueError(f"{name} coordinates must be strictly increasing.")
    return a

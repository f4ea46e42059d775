# -*- coding: utf-8 -*-
# Tetgrid/geometry/kernels.py

"""
Project: Tetgrid
Date: 10/18/2026

Purpose:
--------
Signed-volume primitives for tetrahedra. Every routine here uses the same
triple-product formula, so the sign convention is identical wherever a volume
is evaluated (generation guards, checks, statistics).

Main Tasks:
-----------
   - signed_volume: one point-quadruple version (the reference formula).
   - tet_volume / tetv1times6: matrix and row-index variants.
   - signed_volumes: vectorized evaluation over a connectivity array.

Notes:
------
   - Positive volume <=> (p2-p1, p3-p1, p4-p1) is a right-handed triple.
   - Functions return plain Python floats except `signed_volumes` (ndarray).
"""

import numpy as np

_ONE_SIXTH = 1.0 / 6.0


def _triple(A1, A2, A3, B1, B2, B3, C1, C2, C3):
    """(A x B) . C written out component-wise."""
    return (-A3*B2 + A2*B3)*C1 + (A3*B1 - A1*B3)*C2 + (-A2*B1 + A1*B2)*C3


def signed_volume(p1, p2, p3, p4) -> float:
    """
    Signed volume of the tetrahedron (p1, p2, p3, p4).

    Parameters
    ----------
    p1, p2, p3, p4 : array-like, shape (3,)
        Vertex positions.

    Returns
    -------
    float
        One sixth of the scalar triple product of the edge vectors from `p1`.
    """
    p1 = np.asarray(p1, dtype=float)
    a = np.asarray(p2, dtype=float) - p1
    b = np.asarray(p3, dtype=float) - p1
    c = np.asarray(p4, dtype=float) - p1
    return _ONE_SIXTH * float(_triple(a[0], a[1], a[2], b[0], b[1], b[2], c[0], c[1], c[2]))


def tet_volume(X) -> float:
    """
    Signed volume of a tetrahedron given as a (4,3) array of vertex rows.

    For X = [[0,4,3], [9,2,4], [6,1,7], [0,1,5]] the volume is 10.0.
    """
    X = np.asarray(X, dtype=float)
    if X.shape != (4, 3):
        raise ValueError(f"Expected (4, 3) array of vertices, got shape {X.shape}.")
    return signed_volume(X[0], X[1], X[2], X[3])


def tetv1times6(v: np.ndarray, i1: int, i2: int, i3: int, i4: int) -> float:
    """
    Six times the signed volume of the tetrahedron formed by rows i1..i4 of `v`.
    """
    A = v[i2] - v[i1]
    B = v[i3] - v[i1]
    C = v[i4] - v[i1]
    return float(_triple(A[0], A[1], A[2], B[0], B[1], B[2], C[0], C[1], C[2]))


def signed_volumes(xyz: np.ndarray, conn: np.ndarray) -> np.ndarray:
    """
    Signed volumes of many tetrahedra at once.

    Parameters
    ----------
    xyz : np.ndarray
        (N,3) node coordinates.
    conn : np.ndarray
        (E,k) connectivity with k >= 4; only the first four (corner) columns are used.

    Returns
    -------
    np.ndarray
        (E,) float array.
    """
    xyz = np.asarray(xyz, dtype=float)
    conn = np.asarray(conn, dtype=np.int64)
    if conn.size == 0:
        return np.zeros(0, dtype=float)
    P = xyz[conn[:, :4]]                      # (E,4,3)
    A = P[:, 1, :] - P[:, 0, :]
    B = P[:, 2, :] - P[:, 0, :]
    C = P[:, 3, :] - P[:, 0, :]
    t = _triple(A[:, 0], A[:, 1], A[:, 2], B[:, 0], B[:, 1], B[:, 2], C[:, 0], C[:, 1], C[:, 2])
    return _ONE_SIXTH * t


def is_right_handed(p1, p2, p3, p4, eps: float = 0.0) -> bool:
    """True when the ordering (p1,p2,p3,p4) has signed volume above `eps`."""
    return signed_volume(p1, p2, p3, p4) > eps

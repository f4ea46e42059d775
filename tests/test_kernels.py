# -*- coding: utf-8 -*-
# Tetgrid/tests/test_kernels.py

import numpy as np
import pytest

from geometry.kernels import signed_volume, tet_volume, tetv1times6, signed_volumes, is_right_handed

UNIT_TET = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def test_tet_volume_unit_corner():
    X = [[0, 4, 3], [9, 2, 4], [6, 1, 7], [0, 1, 5]]
    assert tet_volume(X) == pytest.approx(10.0)


def test_unit_tet_sign_flips_with_swap():
    p1, p2, p3, p4 = UNIT_TET
    assert signed_volume(p1, p2, p3, p4) == pytest.approx(1.0 / 6.0)
    assert signed_volume(p2, p1, p3, p4) == pytest.approx(-1.0 / 6.0)
    assert is_right_handed(p1, p2, p3, p4)
    assert not is_right_handed(p1, p3, p2, p4)


def test_tetv1times6_matches_signed_volume(rng):
    v = rng.rand(6, 3)
    six = tetv1times6(v, 0, 2, 4, 5)
    assert six == pytest.approx(6.0 * signed_volume(v[0], v[2], v[4], v[5]))


def test_signed_volumes_vectorized(rng):
    xyz = rng.rand(10, 3)
    conn = np.array([[0, 1, 2, 3], [4, 5, 6, 7], [9, 8, 1, 0]])
    vols = signed_volumes(xyz, conn)
    expected = [signed_volume(*xyz[row]) for row in conn]
    np.testing.assert_allclose(vols, expected)


def test_signed_volumes_uses_corner_columns_only():
    conn = np.array([[0, 1, 2, 3, 0, 0, 0, 0, 0, 0]])
    np.testing.assert_allclose(signed_volumes(UNIT_TET, conn), [1.0 / 6.0])


def test_signed_volumes_empty():
    out = signed_volumes(UNIT_TET, np.zeros((0, 4), dtype=int))
    assert out.shape == (0,)


def test_tet_volume_rejects_bad_shape():
    with pytest.raises(ValueError):
        tet_volume(np.zeros((3, 3)))

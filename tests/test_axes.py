# -*- coding: utf-8 -*-
# Tetgrid/tests/test_axes.py

import numpy as np
import pytest

from geometry.axes import linearspace, uniform_axis, as_axis


def test_linearspace_endpoints_exact():
    out = linearspace(1.0, 1.3, 7)
    assert out.size == 7
    assert out[0] == 1.0
    assert out[-1] == 1.3


def test_linearspace_needs_two_points():
    with pytest.raises(ValueError):
        linearspace(0.0, 1.0, 1)


def test_uniform_axis():
    np.testing.assert_allclose(uniform_axis(2.0, 4), [0.0, 0.5, 1.0, 1.5, 2.0])


@pytest.mark.parametrize("length,count", [(0.0, 2), (-1.0, 2), (1.0, 0)])
def test_uniform_axis_rejects_bad_input(length, count):
    with pytest.raises(ValueError):
        uniform_axis(length, count)


def test_as_axis_accepts_graded():
    np.testing.assert_allclose(as_axis([0, 1, 3, 7]), [0.0, 1.0, 3.0, 7.0])


@pytest.mark.parametrize("values", [[0.0], [0.0, 0.0], [1.0, 0.5], [0.0, np.nan, 2.0]])
def test_as_axis_rejects(values):
    with pytest.raises(ValueError):
        as_axis(values, "x")

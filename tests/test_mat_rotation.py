import math

import numpy as np
import pytest

from mat2 import IDENTITY, Mat2, Vec2, rotation_matrix

SQRT3_2 = math.sqrt(3.0) / 2.0


def test_rotation_matrix_layout():
    theta = 0.3
    r = rotation_matrix(theta)
    np.testing.assert_allclose(
        r.to_numpy(),
        [[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]],
    )
    assert Mat2.rotation(theta) == r
    assert rotation_matrix(0.0) == IDENTITY


def test_quarter_turn_maps_axes_counter_clockwise():
    r = rotation_matrix(math.pi / 2)
    assert (r @ Vec2.right()).isclose(Vec2.up())
    assert (r @ Vec2.up()).isclose(Vec2.left())
    assert (r @ Vec2.left()).isclose(Vec2.down())
    assert (r @ Vec2.down()).isclose(Vec2.right())


def test_sixth_turn_matches_closed_form():
    r = rotation_matrix(math.pi / 6)
    assert (r @ Vec2(1, 0)).isclose(Vec2(SQRT3_2, 0.5))
    assert (r @ Vec2(0, 1)).isclose(Vec2(-0.5, SQRT3_2))


@pytest.mark.parametrize("theta", [-math.pi / 3, 2.0, 7 * math.pi, 100.0])
def test_rotation_is_orthogonal_with_unit_determinant(theta):
    r = rotation_matrix(theta)
    assert (r.T @ r).isclose(IDENTITY)
    assert r.determinant() == pytest.approx(1.0)
    assert r.rank() == 2


def test_angles_wrap_around():
    assert rotation_matrix(math.pi / 4 + 2 * math.pi).isclose(rotation_matrix(math.pi / 4))
    assert rotation_matrix(-math.pi / 2).isclose(rotation_matrix(3 * math.pi / 2))


def test_composed_rotations_add_angles():
    a, b = 0.4, 1.1
    assert (rotation_matrix(a) @ rotation_matrix(b)).isclose(rotation_matrix(a + b))

"""Unit tests for the Translate and RotateY instance wrappers."""

import math

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.instance import RotateY, Translate
from geometry.quad import Cube
from geometry.sphere import Sphere
from materials.lambertian import Lambertian

ANY_T = Interval(0.001, math.inf)


def approx_vector(v, expected, abs_tol=1e-9):
    assert v.x == pytest.approx(expected.x, abs=abs_tol)
    assert v.y == pytest.approx(expected.y, abs=abs_tol)
    assert v.z == pytest.approx(expected.z, abs=abs_tol)


@pytest.fixture
def material():
    return Lambertian(Color(0.5, 0.5, 0.5))


class TestTranslate:
    """Tests for translated instances."""

    def test_hit_point_moves_with_offset(self, material):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, material), Vector3(0, 0, -5))
        rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec.t == pytest.approx(4.0)
        approx_vector(rec.p, Vector3(0, 0, -4))
        approx_vector(rec.normal, Vector3(0, 0, 1))

    def test_original_position_is_empty(self, material):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, material), Vector3(10, 0, 0))
        assert moved.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), ANY_T) is None

    def test_bounding_box_translated(self, material):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, material), Vector3(1, 2, 3))
        box = moved.bounding_box()
        assert box.minimum == Vector3(0, 1, 2)
        assert box.maximum == Vector3(2, 3, 4)


class TestRotateY:
    """Tests for instances rotated about the Y axis."""

    def test_round_trip(self, material):
        rotated = RotateY(Sphere(Vector3(0, 0, 0), 1.0, material), 37.0)
        v = Vector3(1.5, -2.0, 0.25)
        approx_vector(rotated.to_world(rotated.to_object(v)), v)
        approx_vector(rotated.to_object(rotated.to_world(v)), v)

    def test_quarter_turn_moves_object(self, material):
        rotated = RotateY(Sphere(Vector3(1, 0, 0), 0.5, material), 90.0)
        rec = rotated.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        approx_vector(rec.p, Vector3(0, 0, -0.5))
        approx_vector(rec.normal, Vector3(0, 0, 1))
        assert rotated.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), ANY_T) is None

    def test_bounding_box_of_rotated_cube(self, material):
        rotated = RotateY(Cube(Vector3(-1, -1, -1), Vector3(1, 1, 1), material), 45.0)
        box = rotated.bounding_box()
        half_diagonal = math.sqrt(2)
        assert box.x.max == pytest.approx(half_diagonal, rel=1e-4)
        assert box.z.min == pytest.approx(-half_diagonal, rel=1e-4)
        assert box.y.max == pytest.approx(1.0, rel=1e-4)

    def test_rotated_box_contains_hit_points(self, material):
        rotated = RotateY(Cube(Vector3(0, 0, 0), Vector3(2, 1, 1), material), 30.0)
        box = rotated.bounding_box()
        rec = rotated.hit(Ray(Vector3(0.5, 0.5, 10), Vector3(0, 0, -1)), ANY_T)
        assert rec is not None
        assert box.x.contains(rec.p.x)
        assert box.y.contains(rec.p.y)
        assert box.z.contains(rec.p.z)

    def test_translate_of_rotate(self, material):
        instance = Translate(RotateY(Sphere(Vector3(1, 0, 0), 0.5, material), 90.0),
                             Vector3(0, 3, 0))
        rec = instance.hit(Ray(Vector3(0, 3, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec is not None
        approx_vector(rec.p, Vector3(0, 3, -0.5))

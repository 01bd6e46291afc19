"""Unit tests for the look-at camera."""

import math
import random

import pytest

from camera.camera import Camera
from core.vector import Vector3


class MidpointRng:
    """Random source that always returns the middle of the requested range."""

    def random(self):
        return 0.5

    def uniform(self, a, b):
        return (a + b) / 2


class TestCameraSetup:
    """Tests for derived camera parameters."""

    def test_image_height_from_aspect_ratio(self):
        assert Camera(image_width=400, aspect_ratio=16 / 9).image_height == 225

    def test_image_height_at_least_one(self):
        assert Camera(image_width=10, aspect_ratio=1000.0).image_height == 1

    def test_focus_distance_defaults_to_look_at(self):
        camera = Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -3))
        assert camera.focus_dist == pytest.approx(3.0)

    def test_basis_is_orthonormal(self):
        camera = Camera(look_from=Vector3(1, 2, 3), look_at=Vector3(-2, 0, 1))
        for axis in (camera.u, camera.v, camera.w):
            assert axis.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)


class TestCameraRays:
    """Tests for primary ray generation."""

    def test_center_pixel_looks_forward(self):
        camera = Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                        image_width=3, aspect_ratio=1.0)
        ray = camera.get_ray(1, 1, MidpointRng())
        assert ray.origin == Vector3(0, 0, 0)
        assert ray.direction.x == pytest.approx(0.0, abs=1e-12)
        assert ray.direction.y == pytest.approx(0.0, abs=1e-12)
        assert ray.direction.z == pytest.approx(-1.0)
        assert ray.time == 0.5

    def test_top_left_pixel_points_up_and_left(self):
        camera = Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                        image_width=3, aspect_ratio=1.0)
        ray = camera.get_ray(0, 0, MidpointRng())
        assert ray.direction.x < 0
        assert ray.direction.y > 0

    def test_field_of_view(self):
        # With a 90 degree fov the image plane at distance 1 spans [-1, 1].
        camera = Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                        vfov=90.0, image_width=2, aspect_ratio=1.0)
        assert camera.pixel_delta_v.y == pytest.approx(-1.0)
        assert camera.pixel_delta_u.x == pytest.approx(1.0)

    def test_directions_are_normalized_and_times_in_shutter(self):
        camera = Camera(image_width=20, aspect_ratio=2.0)
        rng = random.Random(1)
        for row in range(camera.image_height):
            for col in range(camera.image_width):
                ray = camera.get_ray(row, col, rng)
                assert ray.direction.length() == pytest.approx(1.0)
                assert 0.0 <= ray.time < 1.0

    def test_defocus_origins_stay_on_lens(self):
        camera = Camera(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -2),
                        defocus_angle=10.0, image_width=8, aspect_ratio=1.0)
        radius = 2.0 * math.tan(math.radians(5.0))
        rng = random.Random(2)
        origins = [camera.get_ray(3, 3, rng).origin for _ in range(100)]
        assert all(o.length() <= radius + 1e-12 for o in origins)
        assert any(o.length() > 0 for o in origins)

"""Unit tests for the bounding volume hierarchy."""

import math
import random

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Color, Vector3
from geometry.bvh import BVHNode
from geometry.quad import Quad
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian

ANY_T = Interval(0.001, math.inf)


def random_scene(rng, count):
    objects = []
    for _ in range(count):
        material = Lambertian(Color(rng.random(), rng.random(), rng.random()))
        center = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        if rng.random() < 0.7:
            objects.append(Sphere(center, rng.uniform(0.1, 1.5), material))
        else:
            u = Vector3(rng.uniform(-2, 2), rng.uniform(-2, 2), rng.uniform(-2, 2))
            v = Vector3(rng.uniform(-2, 2), rng.uniform(-2, 2), rng.uniform(-2, 2))
            objects.append(Quad(center, u, v, material))
    return objects


def encloses(outer, inner):
    return all(outer.axis_interval(n).min <= inner.axis_interval(n).min
               and inner.axis_interval(n).max <= outer.axis_interval(n).max
               for n in range(3))


def random_ray(rng):
    origin = Vector3(rng.uniform(-15, 15), rng.uniform(-15, 15), rng.uniform(-15, 15))
    target = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
    return Ray(origin, (target - origin).normalize())


class TestBVHConstruction:
    """Tests for building the tree."""

    def test_empty_list_rejected(self):
        with pytest.raises(ValueError):
            BVHNode([])

    def test_single_object(self):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, Lambertian(Color(1, 1, 1)))
        node = BVHNode([sphere], rng=random.Random(0))
        assert node.left is sphere and node.right is sphere
        rec = node.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec.t == pytest.approx(4.0)

    def test_node_box_contains_children(self):
        rng = random.Random(2)
        objects = random_scene(rng, 40)
        root = BVHNode(list(objects), rng=rng)
        for obj in objects:
            assert encloses(root.bounding_box(), obj.bounding_box())

    def test_depth_is_logarithmic(self):
        rng = random.Random(5)
        root = BVHNode(random_scene(rng, 64), rng=rng)
        assert root.depth() == 6

    def test_hittable_list_build_keeps_order(self):
        rng = random.Random(9)
        objects = random_scene(rng, 10)
        world = HittableList(objects)
        world.build_bvh(rng)
        assert list(world) == objects
        assert isinstance(world.bvh_root, BVHNode)


class TestBVHMatchesLinearScan:
    """The tree must report the same closest hit as testing every object."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_fuzz_against_brute_force(self, seed):
        rng = random.Random(seed)
        objects = random_scene(rng, 60)
        brute_force = HittableList(objects)
        root = BVHNode(list(objects), rng=random.Random(seed + 100))

        hits = 0
        for _ in range(500):
            ray = random_ray(rng)
            expected = brute_force.hit(ray, ANY_T)
            actual = root.hit(ray, ANY_T)
            if expected is None:
                assert actual is None
            else:
                hits += 1
                assert actual is not None
                assert actual.t == expected.t
                assert actual.p == expected.p
                assert actual.normal == expected.normal
                assert actual.material is expected.material
        assert hits > 0

    def test_query_interval_respected(self):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        near = Sphere(Vector3(0, 0, -3), 0.5, material)
        far = Sphere(Vector3(0, 0, -10), 0.5, material)
        root = BVHNode([near, far], rng=random.Random(0))
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert root.hit(ray, ANY_T).t == pytest.approx(2.5)
        assert root.hit(ray, Interval(5.0, math.inf)).t == pytest.approx(9.5)
        assert root.hit(ray, Interval(0.001, 2.0)) is None


class TestEqualDistanceTies:
    """Coincident surfaces: the earlier object keeps the hit."""

    def coincident_quads(self):
        first = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), Lambertian(Color(1, 0, 0)))
        second = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), Lambertian(Color(0, 1, 0)))
        return first, second

    def test_list_keeps_first_object(self):
        first, second = self.coincident_quads()
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert HittableList([first, second]).hit(ray, ANY_T).material is first.material
        assert HittableList([second, first]).hit(ray, ANY_T).material is second.material

    @pytest.mark.parametrize("seed", range(6))
    def test_bvh_keeps_left_child(self, seed):
        first, second = self.coincident_quads()
        node = BVHNode([first, second], rng=random.Random(seed))
        rec = node.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec.t == pytest.approx(2.0)
        assert rec.material is node.left.material
        assert node.right.material is not node.left.material

    def test_coincident_spheres_in_list(self):
        first = Sphere(Vector3(0, 0, -5), 1.0, Lambertian(Color(1, 0, 0)))
        second = Sphere(Vector3(0, 0, -5), 1.0, Lambertian(Color(0, 0, 1)))
        rec = HittableList([first, second]).hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), ANY_T)
        assert rec.material is first.material

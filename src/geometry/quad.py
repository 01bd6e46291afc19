# geometry/quad.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3, Point3
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList

# Rays with |(u x v) . direction| below this are treated as parallel misses.
PARALLEL_EPSILON = 1e-8

class Quad(Hittable):
    """
    Planar parallelogram with corner q and edges u and v, i.e. the points
    q + alpha * u + beta * v for alpha, beta in [0, 1].

    The front face is the side the normal u x v points to.
    """
    def __init__(self, q: Point3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        # The plane equation uses the unnormalized u x v, so the parallel
        # threshold scales with the quad area.
        n = u.cross(v)
        self.n = n
        self.normal = n.normalize()
        self.d = n.dot(q)
        # w maps a point in the plane to its (alpha, beta) edge coordinates.
        self.w = n / n.dot(n)

        bbox_diagonal1 = AABB(q, q + u + v)
        bbox_diagonal2 = AABB(q + u, q + v)
        self.bbox = AABB.surrounding_box(bbox_diagonal1, bbox_diagonal2)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        denom = self.n.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.n.dot(ray.origin)) / denom
        if not ray_t.surrounds(t):
            return None

        intersection = ray.at(t)
        planar_hitpt = intersection - self.q
        alpha = self.w.dot(planar_hitpt.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hitpt))
        if not (0.0 <= alpha <= 1.0 and 0.0 <= beta <= 1.0):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = intersection
        rec.uv = UV(alpha, beta)
        rec.material = self.material
        rec.set_face_normal(ray, self.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

class Cube(Hittable):
    """
    Closed axis-aligned box between two opposite corners, made of six quads
    whose normals all point outwards.
    """
    def __init__(self, a: Point3, b: Point3, material):
        self.material = material
        lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
        hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

        dx = Vector3(hi.x - lo.x, 0, 0)
        dy = Vector3(0, hi.y - lo.y, 0)
        dz = Vector3(0, 0, hi.z - lo.z)

        self.sides = HittableList()
        self.sides.add(Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material))   # front
        self.sides.add(Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
        self.sides.add(Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
        self.sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material))   # left
        self.sides.add(Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
        self.sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, ray_t, rng)

    def bounding_box(self) -> AABB:
        return self.sides.bounding_box()

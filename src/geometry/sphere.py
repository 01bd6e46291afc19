# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> UV:
    """
    Texture coordinates of a point p on the unit sphere centered at the origin.

    u follows the angle around the Y axis, v runs from the south pole (v=0)
    to the north pole (v=1).
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    When target_center is given the sphere moves linearly from center (ray time
    0) to target_center (ray time 1), which produces motion blur.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 target_center: Vector3 = None):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.target_center = target_center if target_center is not None else center
        self.radius = radius
        self.material = material

        offset = Vector3(radius, radius, radius)
        box0 = AABB(self.center - offset, self.center + offset)
        box1 = AABB(self.target_center - offset, self.target_center + offset)
        self.bbox = AABB.surrounding_box(box0, box1)

    @property
    def is_moving(self) -> bool:
        return self.target_center != self.center

    def center_at(self, time: float) -> Vector3:
        if not self.is_moving:
            return self.center
        return Vector3.lerp(self.center, self.target_center, time)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        current_center = self.center_at(ray.time)
        oc = current_center - ray.origin
        a = ray.direction.length_squared()
        if a == 0.0:
            # A zero-length direction never reaches the surface.
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

# geometry/instance.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.matrix import Mat33
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Places an object at an offset without copying it. Rays are moved into the
    object's local space instead of moving the geometry.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box().translate(offset)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        offset_ray = ray.translated(-self.offset)
        rec = self.object.hit(offset_ray, ray_t, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

class RotateY(Hittable):
    """
    Rotates an object about the world Y axis by angle degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        # forward: object space -> world space; inverse: world -> object.
        self.forward = Mat33.rotation_y(angle)
        self.inverse = self.forward.transpose()

        box = obj.bounding_box()
        lo = [float("inf")] * 3
        hi = [float("-inf")] * 3
        for corner in box.corners():
            rotated = self.forward.transform(corner)
            for axis in range(3):
                lo[axis] = min(lo[axis], rotated[axis])
                hi[axis] = max(hi[axis], rotated[axis])
        self.bbox = AABB(Vector3(*lo), Vector3(*hi))

    def to_object(self, v: Vector3) -> Vector3:
        return self.inverse.transform(v)

    def to_world(self, v: Vector3) -> Vector3:
        return self.forward.transform(v)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        rotated_ray = Ray(self.to_object(ray.origin), self.to_object(ray.direction), ray.time)

        rec = self.object.hit(rotated_ray, ray_t, rng)
        if rec is None:
            return None

        rec.p = self.to_world(rec.p)
        rec.normal = self.to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

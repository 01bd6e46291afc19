# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3

class HitRecord:
    """
    Records details of a ray-object intersection.

    The material is a shared reference to the object's material; records never
    own or copy it.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "uv")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None,
                 uv: UV = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Ray hit the outward-facing side
        self.material = material
        self.uv = uv if uv is not None else UV(0.0, 0.0)

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face}, uv={self.uv!r})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Hittables are built once and then only read, so one instance can be shared
    by any number of render workers.
    """
    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        """
        Returns the closest intersection with t strictly inside ray_t, or None.
        rng is only consumed by stochastic objects such as participating media.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

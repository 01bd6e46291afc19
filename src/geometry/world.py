# src/geometry/world.py
import logging
from typing import Optional, List
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Optionally builds a BVH over its objects, after
    which queries go through the tree instead of the linear scan.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.bbox = AABB.EMPTY
        self.bvh_root = None  # top-level BVH node
        for obj in objects or []:
            self.add(obj)

    def add(self, obj: Hittable) -> "HittableList":
        self.objects.append(obj)
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())
        self.bvh_root = None
        return self

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.EMPTY
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def __getitem__(self, index: int) -> Hittable:
        return self.objects[index]

    def build_bvh(self, rng=None):
        """
        Builds a BVH over a copy of the object list; the list order is kept.
        """
        from geometry.bvh import BVHNode

        if len(self.objects) == 0:
            self.bvh_root = None
            return None
        self.bvh_root = BVHNode(list(self.objects), 0, len(self.objects), rng)
        logger.debug("Built BVH over %d objects", len(self.objects))
        return self.bvh_root

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, ray_t, rng)

        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far), rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox

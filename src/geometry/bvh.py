# src/geometry/bvh.py
import random
from core.aabb import AABB
from core.interval import Interval
from geometry.hittable import Hittable

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over objects[start:end].

    Each node splits along a randomly chosen axis at the median of the objects
    sorted by the lower bound of their boxes on that axis. The slice is sorted
    in place, so callers that care about their list order pass a copy.
    """
    def __init__(self, objects: list, start: int = 0, end: int = None, rng=None):
        if end is None:
            end = len(objects)
        if rng is None:
            rng = random
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        axis = rng.randrange(3)
        objects[start:end] = sorted(
            objects[start:end],
            key=lambda obj: obj.bounding_box().axis_interval(axis).min)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray, ray_t: Interval, rng=None):
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t, rng)

        # The right subtree only has to beat the left hit.
        right_t = ray_t.with_max(hit_left.t) if hit_left is not None else ray_t
        hit_right = self.right.hit(ray, right_t, rng)

        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t <= hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """
        Number of node levels below and including this one.
        """
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

# src/core/aabb.py
from core.interval import Interval
from core.vector import Vector3

# Minimum slab thickness. Flat primitives (quads, thin boxes) would otherwise
# produce zero-width slabs that the slab test can never enter.
MIN_WIDTH = 1e-5

class AABB:
    def __init__(self, a: Vector3 = None, b: Vector3 = None):
        """
        Box spanning the two corner points a and b, in any order.
        """
        if a is None or b is None:
            self.x = self.y = self.z = Interval.EMPTY
            return
        self.x = Interval(min(a.x, b.x), max(a.x, b.x))
        self.y = Interval(min(a.y, b.y), max(a.y, b.y))
        self.z = Interval(min(a.z, b.z), max(a.z, b.z))
        self._pad_to_minimums()

    @classmethod
    def from_intervals(cls, x: Interval, y: Interval, z: Interval) -> "AABB":
        box = cls()
        box.x, box.y, box.z = x, y, z
        box._pad_to_minimums()
        return box

    def _pad_to_minimums(self):
        if 0 <= self.x.size() < MIN_WIDTH:
            self.x = self.x.expand(MIN_WIDTH)
        if 0 <= self.y.size() < MIN_WIDTH:
            self.y = self.y.expand(MIN_WIDTH)
        if 0 <= self.z.size() < MIN_WIDTH:
            self.z = self.z.expand(MIN_WIDTH)

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def corners(self):
        """
        Yields the eight corner points of the box.
        """
        for x in (self.x.min, self.x.max):
            for y in (self.y.min, self.y.max):
                for z in (self.z.min, self.z.max):
                    yield Vector3(x, y, z)

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: clip the running parameter range against each axis.
        t_min = ray_t.min
        t_max = ray_t.max
        inv_direction = ray.inv_direction
        for axis in range(3):
            interval = self.axis_interval(axis)
            origin = ray.origin[axis]
            inv_d = inv_direction[axis]
            t0 = (interval.min - origin) * inv_d
            t1 = (interval.max - origin) * inv_d
            if t0 > t1:
                t0, t1 = t1, t0
            # A NaN bound (0 * inf) never compares greater, so it leaves the
            # running range untouched.
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_min >= t_max:
                return False
        return True

    def translate(self, offset: Vector3) -> "AABB":
        return AABB.from_intervals(
            self.x.shift(offset.x),
            self.y.shift(offset.y),
            self.z.shift(offset.z)
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB.from_intervals(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z)
        )

    union = surrounding_box

    def __repr__(self) -> str:
        return f"AABB(x={self.x!r}, y={self.y!r}, z={self.z!r})"


AABB.EMPTY = AABB()
AABB.UNIVERSE = AABB.from_intervals(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)

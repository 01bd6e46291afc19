# core/ray.py
import numpy as np
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the shutter
    time (in [0, 1]) at which it was cast.
    """
    __slots__ = ("origin", "direction", "time", "_inv_direction")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time
        self._inv_direction = None

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    @property
    def inv_direction(self):
        """
        Per-axis reciprocal of the direction with IEEE semantics: a zero
        component gives +-inf (sign of the zero) instead of raising.
        """
        if self._inv_direction is None:
            d = np.array((self.direction.x, self.direction.y, self.direction.z), dtype=np.float64)
            with np.errstate(divide="ignore"):
                inv = 1.0 / d
            self._inv_direction = tuple(float(x) for x in inv)
        return self._inv_direction

    def translated(self, offset: Vector3) -> "Ray":
        return Ray(self.origin + offset, self.direction, self.time)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"

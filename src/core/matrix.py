# core/matrix.py
import math
import numpy as np
from core.vector import Vector3

class Mat33:
    """
    3x3 matrix acting on Vector3 values (row-major, column vectors).
    """
    __slots__ = ("data", "_rows")

    def __init__(self, data):
        self.data = np.asarray(data, dtype=np.float64).reshape(3, 3)
        self._rows = tuple(tuple(float(x) for x in row) for row in self.data)

    @classmethod
    def rotation_y(cls, degrees: float) -> "Mat33":
        """
        Rotation about the +Y axis by the given angle, counter-clockwise when
        looking down the axis towards the origin.
        """
        theta = math.radians(degrees)
        c = math.cos(theta)
        s = math.sin(theta)
        return cls([[c, 0.0, s],
                    [0.0, 1.0, 0.0],
                    [-s, 0.0, c]])

    def transpose(self) -> "Mat33":
        return Mat33(self.data.T)

    def transform(self, v: Vector3) -> Vector3:
        # Plain float rows; this runs once or twice per hit.
        r0, r1, r2 = self._rows
        return Vector3(
            r0[0] * v.x + r0[1] * v.y + r0[2] * v.z,
            r1[0] * v.x + r1[1] * v.y + r1[2] * v.z,
            r2[0] * v.x + r2[1] * v.y + r2[2] * v.z
        )

    def __repr__(self) -> str:
        return f"Mat33({self.data.tolist()})"

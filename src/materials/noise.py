# materials/noise.py
import math
from typing import Optional
import numpy as np
from core.vector import Vector3

POINT_COUNT = 256

def _hermite(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)

class PerlinNoise:
    """
    3D gradient noise with values roughly in [-1, 1].
    """
    def __init__(self, seed: Optional[int] = None):
        generator = np.random.default_rng(seed)
        gradients = generator.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        gradients /= np.linalg.norm(gradients, axis=1, keepdims=True)
        self.gradients = [tuple(float(c) for c in row) for row in gradients]
        # Permutation table per axis
        self.perm_x = generator.permutation(POINT_COUNT).tolist()
        self.perm_y = generator.permutation(POINT_COUNT).tolist()
        self.perm_z = generator.permutation(POINT_COUNT).tolist()

    def _gradient(self, i: int, j: int, k: int):
        return self.gradients[self.perm_x[i & 255] ^ self.perm_y[j & 255] ^ self.perm_z[k & 255]]

    def value(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)
        uu, vv, ww = _hermite(u), _hermite(v), _hermite(w)

        accum = 0.0
        for di in (0, 1):
            for dj in (0, 1):
                for dk in (0, 1):
                    gx, gy, gz = self._gradient(i + di, j + dj, k + dk)
                    dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu))
                              * (dj * vv + (1 - dj) * (1 - vv))
                              * (dk * ww + (1 - dk) * (1 - ww))
                              * dot)
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """
        Absolute value of depth summed noise octaves, each at double the
        frequency and half the weight of the previous one.
        """
        accum = 0.0
        weight = 1.0
        temp_p = p
        for _ in range(depth):
            accum += weight * self.value(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)

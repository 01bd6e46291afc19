# renderer/integrator.py
import math
from core.interval import Interval
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable

# Hits closer than this to a ray origin are ignored ("shadow acne").
T_MIN = 0.001
MAX_DEPTH = 50

class Integrator:
    """
    Unidirectional path tracer without light sampling or Russian roulette.

    Args:
        max_depth: Number of bounces after which a path contributes black.
        max_ray_range: Far clip for every intersection query.
        background: Radiance returned by rays that escape the scene.
    """
    def __init__(self, max_depth: int = MAX_DEPTH, max_ray_range: float = math.inf,
                 background: Color = Color(0.0, 0.0, 0.0)):
        self.max_depth = max_depth
        self.max_ray_range = max_ray_range
        self.background = background
        self.ray_t = Interval(T_MIN, max_ray_range)

    def radiance(self, ray: Ray, world: Hittable, depth: int, rng) -> Color:
        """
        Radiance arriving along ray, estimated from one random path.
        depth counts the bounces already taken; start a path with 0.

        Equivalent to the recursion emitted + attenuation * radiance(scattered),
        unrolled into a loop with a running throughput.
        """
        result = Color(0.0, 0.0, 0.0)
        throughput = Color(1.0, 1.0, 1.0)
        while depth < self.max_depth:
            rec = world.hit(ray, self.ray_t, rng)
            if rec is None:
                return result + throughput * self.background

            result = result + throughput * rec.material.emitted(rec.uv, rec.p)
            scatter_result = rec.material.scatter(ray, rec, rng)
            if scatter_result is None:
                return result

            attenuation, direction = scatter_result
            throughput = throughput * attenuation
            ray = Ray(rec.p, direction, ray.time)
            depth += 1
        return result

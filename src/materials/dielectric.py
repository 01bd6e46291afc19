# src/materials/dielectric.py
import math
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import reflect, refract, reflectance
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water) with index of refraction eta
    relative to the surrounding medium.
    """
    def __init__(self, eta: float):
        super().__init__()
        if eta <= 0:
            raise ValueError(f"Refractive index must be positive, got {eta}")
        self.eta = eta

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Vector3]]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.eta if rec.front_face else self.eta

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection, or a Fresnel-weighted coin flip
        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or rng.random() < reflectance(cos_theta, ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return attenuation, direction

from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import reflect, random_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz (clamped to at most 1) perturbs the mirror direction; rays perturbed
    below the surface are absorbed.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Vector3]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        if self.fuzz > 0:
            reflected = reflected + random_vector(rng, -1.0, 1.0) * self.fuzz

        if reflected.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not scatter forward

        attenuation = self.texture.value(rec.uv, rec.p)
        return attenuation, reflected.normalize()

from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly over the
    sphere, independent of the incoming direction and the (arbitrary) normal.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Color, Vector3]:
        attenuation = self.texture.value(rec.uv, rec.p)
        return attenuation, random_unit_vector(rng)

# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light; strength
    scales it, so a white light of strength 15 emits (15, 15, 15).
    """
    def __init__(self, emit: Union[Vector3, Texture], strength: float = 1.0):
        super().__init__()
        self.texture = as_texture(emit)
        self.strength = strength

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Vector3]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Return the emitted radiance.

        Args:
            uv (UV): The texture coordinate of the hit.
            p (Vector3): The hit point.

        Returns:
            Color: The texture color scaled by the light strength.
        """
        return self.texture.value(uv, p) * self.strength

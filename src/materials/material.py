# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """
    Wraps a plain color in a SolidTexture; textures pass through unchanged.
    """
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable after construction and shared by reference between
    every object and hit record that uses them.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Vector3]]:
        """
        Chooses an outgoing direction for a ray arriving at rec.
        Returns a tuple (attenuation, direction), or None when the surface
        absorbs the ray.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Radiance emitted by the surface itself. Black unless overridden.
        """
        return Color(0.0, 0.0, 0.0)


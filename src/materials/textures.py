# materials/textures.py
import math
import os
from typing import Optional, Tuple, Union
import numpy as np
from PIL import Image
from core.vector import Vector3, Color
from core.uv import UV
from materials.noise import PerlinNoise

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Vector3) -> Color:
        """Color of the texture at surface coordinates uv and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A checker pattern in uv space. scale is the number of squares per unit of
    u and v; a single number applies to both.
    """
    def __init__(self, color1: Color, color2: Color,
                 scale: Union[float, Tuple[float, float]] = 2.0):
        self.color1 = color1
        self.color2 = color2
        if isinstance(scale, (int, float)):
            scale = (scale, scale)
        self.scale = UV(*scale)

    def value(self, uv: UV, p: Vector3) -> Color:
        x = math.floor(uv.u * self.scale.u)
        y = math.floor(uv.v * self.scale.v)
        is_even = (x + y) % 2 == 0
        return self.color1 if is_even else self.color2

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"Texture file not found: {image_path}")
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            # Convert to numpy array for faster access
            self.data = np.asarray(img, dtype=np.float64) / 255.0
            self.width = img.width
            self.height = img.height

    @classmethod
    def from_array(cls, data: np.ndarray) -> "ImageTexture":
        """
        Texture over an existing (height, width, 3) array of linear colors.
        """
        texture = cls.__new__(cls)
        texture.data = np.asarray(data, dtype=np.float64)
        texture.height, texture.width = texture.data.shape[:2]
        return texture

    def value(self, uv: UV, p: Vector3) -> Color:
        # Clamp to the image; v runs bottom-up while image rows run top-down.
        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(color[0], color[1], color[2])

class NoiseTexture(Texture):
    """
    Marble-like pattern: a sine wave along z phase-shifted by Perlin turbulence.
    """
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None,
                 color: Optional[Color] = None):
        self.scale = scale
        self.noise = PerlinNoise(seed)
        self.color = color if color is not None else Color(0.5, 0.5, 0.5)

    def value(self, uv: UV, p: Vector3) -> Color:
        phase = self.scale * p.z + 10.0 * self.noise.turbulence(p, 7)
        return self.color * (1.0 + math.sin(phase))

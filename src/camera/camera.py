# camera/camera.py
import math
from typing import Optional
from core.vector import Vector3, Point3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Look-at pinhole camera with optional defocus blur (thin lens) and a
    [0, 1) shutter interval for motion blur.

    Args:
        look_from: Eye position.
        look_at: Point the camera looks towards.
        vup: Approximate "up" direction used to orient the image.
        vfov: Vertical field of view in degrees.
        image_width: Output width in pixels.
        aspect_ratio: width / height; the height is rounded down, minimum 1.
        defocus_angle: Cone angle in degrees of rays through each pixel; 0
            gives a perfectly sharp pinhole image.
        focus_dist: Distance to the plane of perfect focus. Defaults to the
            distance between look_from and look_at.
    """
    def __init__(self, look_from: Point3 = Point3(0, 0, 0),
                 look_at: Point3 = Point3(0, 0, -1),
                 vup: Vector3 = Vector3(0, 1, 0),
                 vfov: float = 90.0, image_width: int = 400,
                 aspect_ratio: float = 16.0 / 9.0,
                 defocus_angle: float = 0.0,
                 focus_dist: Optional[float] = None):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.image_width = int(image_width)
        self.aspect_ratio = aspect_ratio
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist if focus_dist is not None else (look_at - look_from).length()
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.center = self.look_from

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov, at the focus plane
        viewport_height = 2.0 * math.tan(math.radians(self.vfov) / 2) * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height
        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center - self.w * self.focus_dist
                               - viewport_u * 0.5 - viewport_v * 0.5)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(math.radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, row: int, col: int, rng) -> Ray:
        """
        Random ray through pixel (row, col): jittered inside the pixel square,
        from a random lens point, at a random shutter time.
        """
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (col + offset_x)
                        + self.pixel_delta_v * (row + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        ray_direction = (pixel_sample - ray_origin).normalize()
        return Ray(ray_origin, ray_direction, rng.random())

    def defocus_disk_sample(self, rng) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

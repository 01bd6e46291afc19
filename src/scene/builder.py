# scene/builder.py
import logging
import random
from typing import Any, Dict, List, Optional

from core.vector import Vector3, Color, Point3
from camera.camera import Camera
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.quad import Quad, Cube
from geometry.instance import Translate, RotateY
from geometry.medium import ConstantMedium
from geometry.world import HittableList
from geometry.bvh import BVHNode
from materials.material import Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.isotropic import Isotropic
from materials.textures import Texture, SolidTexture, CheckerTexture, ImageTexture, NoiseTexture
from renderer.integrator import Integrator
from scene.config import CameraConfig, RenderConfig, SceneConfigError

logger = logging.getLogger(__name__)

DEFAULT_GREY = 0.8

def _vec(value, name: str) -> Vector3:
    try:
        return Vector3.from_iterable(value)
    except (TypeError, ValueError) as exc:
        raise SceneConfigError(f"'{name}' must be a list of three numbers, got {value!r}") from exc

def default_texture() -> Texture:
    return SolidTexture(Color.from_single(DEFAULT_GREY))

def default_material() -> Material:
    return Lambertian(default_texture())

def build_texture(config: Dict[str, Any], rng=random) -> Texture:
    kind = config["type"]
    if kind == "solid":
        return SolidTexture(_vec(config.get("color", (DEFAULT_GREY,) * 3), "color"))
    if kind == "checker":
        scale = config.get("scale", (2.0, 2.0))
        return CheckerTexture(
            _vec(config.get("color1", (0.0, 0.0, 0.0)), "color1"),
            _vec(config.get("color2", (1.0, 1.0, 1.0)), "color2"),
            scale=scale if isinstance(scale, (int, float)) else tuple(scale),
        )
    if kind == "noise":
        # Seed from the scene stream so the pattern is reproducible
        seed = config.get("seed", rng.randrange(2**32))
        color = config.get("color")
        return NoiseTexture(
            scale=float(config.get("scale", 1.0)),
            seed=seed,
            color=_vec(color, "color") if color is not None else None,
        )
    if kind == "image":
        return ImageTexture(config["path"])
    raise SceneConfigError(f"unknown texture type {kind!r}")

def _texture_or_default(config: Optional[Dict[str, Any]], rng) -> Texture:
    return build_texture(config, rng) if config is not None else default_texture()

def build_material(config: Optional[Dict[str, Any]], rng=random) -> Material:
    if config is None:
        return default_material()
    kind = config["type"]
    if kind == "lambertian":
        return Lambertian(_texture_or_default(config.get("texture"), rng))
    if kind == "metal":
        return Metal(_texture_or_default(config.get("texture"), rng), float(config.get("fuzz", 0.0)))
    if kind == "dielectric":
        return Dielectric(float(config["eta"]))
    if kind == "diffuse_light":
        if "texture" in config:
            emit = build_texture(config["texture"], rng)
        else:
            emit = _vec(config.get("color", (1.0, 1.0, 1.0)), "color")
        return DiffuseLight(emit, float(config["strength"]))
    if kind == "isotropic":
        return Isotropic(_texture_or_default(config.get("texture"), rng))
    raise SceneConfigError(f"unknown material type {kind!r}")

def build_geometry(config: Dict[str, Any], rng=random) -> Hittable:
    kind = config["type"]
    if kind == "sphere":
        target = config.get("target_center")
        return Sphere(
            _vec(config["center"], "center"),
            float(config["radius"]),
            build_material(config.get("material"), rng),
            target_center=_vec(target, "target_center") if target is not None else None,
        )
    if kind == "quad":
        return Quad(_vec(config["q"], "q"), _vec(config["u"], "u"), _vec(config["v"], "v"),
                    build_material(config.get("material"), rng))
    if kind == "cube":
        return Cube(_vec(config["a"], "a"), _vec(config["b"], "b"),
                    build_material(config.get("material"), rng))
    if kind == "translate":
        return Translate(build_geometry(config["instance"], rng), _vec(config["offset"], "offset"))
    if kind == "rotate_y":
        return RotateY(build_geometry(config["instance"], rng), float(config["angle"]))
    if kind == "constant_medium":
        return ConstantMedium(build_geometry(config["boundary"], rng), float(config["density"]),
                              build_texture(config["texture"], rng))
    raise SceneConfigError(f"unknown geometry type {kind!r}")

def default_scene() -> List[Hittable]:
    """Grey sphere resting on a large ground quad."""
    return [
        Sphere(Point3(0, 0, 0), 0.5, Lambertian(SolidTexture(Color.from_single(DEFAULT_GREY)))),
        Quad(Point3(-100.0, -0.5, 100.0), Vector3(200.0, 0.0, 0.0), Vector3(0.0, 0.0, -200.0),
             Lambertian(SolidTexture(Color.from_single(0.6)))),
    ]

def build_world(objects: List[Dict[str, Any]], rng=random) -> HittableList:
    """
    Builds every configured object and wraps them in one BVH. An empty list
    gives the default scene.
    """
    if objects:
        primitives = []
        for index, entry in enumerate(objects):
            try:
                primitives.append(build_geometry(entry, rng))
            except SceneConfigError:
                raise
            except ValueError as exc:
                raise SceneConfigError(f"objects[{index}]: {exc}") from exc
    else:
        logger.info("No objects configured, using the default scene")
        primitives = default_scene()

    root = BVHNode(primitives, rng=rng)
    logger.info("World built: %d object(s), BVH depth %d", len(primitives), root.depth())
    return HittableList([root])

def build_camera(config: CameraConfig) -> Camera:
    return Camera(
        look_from=_vec(config.look_from, "look_from"),
        look_at=_vec(config.look_at, "look_at"),
        vup=_vec(config.vup, "vup"),
        vfov=float(config.vertical_fov),
        image_width=int(config.image_width),
        aspect_ratio=float(config.aspect_ratio),
        defocus_angle=float(config.defocus_angle),
        focus_dist=config.focus_dist,
    )

def build_integrator(config: RenderConfig) -> Integrator:
    return Integrator(
        max_depth=int(config.max_depth),
        max_ray_range=float(config.max_ray_range),
        background=_vec(config.background_color, "background_color"),
    )

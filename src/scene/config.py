# scene/config.py
"""
Scene configuration: camera, render settings and a tree of tagged object
dictionaries, read from YAML.

Every object, material and texture is a mapping with a ``type`` key naming
its kind; the remaining keys are that kind's parameters. Unknown keys are
rejected everywhere so that typos surface as errors instead of silently
falling back to defaults.
"""
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]

class SceneConfigError(ValueError):
    """Raised for malformed scene configuration."""

@dataclass
class CameraConfig:
    look_from: Triple = (0.0, 0.0, 2.0)
    look_at: Triple = (0.0, 0.0, 0.0)
    vup: Triple = (0.0, 1.0, 0.0)
    vertical_fov: float = 90.0
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    defocus_angle: float = 0.0
    # None focuses on look_at
    focus_dist: Optional[float] = None

@dataclass
class RenderConfig:
    samples_per_pixel: int = 50
    max_depth: int = 50
    max_ray_range: float = 100.0
    background_color: Triple = (0.7, 0.8, 1.0)
    seed: int = 0
    workers: int = 1

@dataclass
class SceneConfig:
    camera: CameraConfig = field(default_factory=CameraConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    objects: List[Dict[str, Any]] = field(default_factory=list)

# kind -> (required keys, optional keys). Keys holding nested tagged
# mappings are checked against the table named in NESTED.
TEXTURE_KINDS = {
    "solid": ((), ("color",)),
    "checker": ((), ("scale", "color1", "color2")),
    "noise": ((), ("scale", "seed", "color")),
    "image": (("path",), ()),
}
MATERIAL_KINDS = {
    "lambertian": ((), ("texture",)),
    "metal": ((), ("texture", "fuzz")),
    "dielectric": (("eta",), ()),
    "diffuse_light": (("strength",), ("color", "texture")),
    "isotropic": ((), ("texture",)),
}
GEOMETRY_KINDS = {
    "sphere": (("center", "radius"), ("target_center", "material")),
    "quad": (("q", "u", "v"), ("material",)),
    "cube": (("a", "b"), ("material",)),
    "translate": (("instance", "offset"), ()),
    "rotate_y": (("instance", "angle"), ()),
    "constant_medium": (("boundary", "density", "texture"), ()),
}
NESTED = {
    "texture": "texture",
    "material": "material",
    "instance": "geometry",
    "boundary": "geometry",
}
_TABLES = {
    "texture": TEXTURE_KINDS,
    "material": MATERIAL_KINDS,
    "geometry": GEOMETRY_KINDS,
}

def validate_tagged(entry: Any, category: str, where: str) -> None:
    """
    Checks one tagged mapping (and everything nested in it) against the
    parameter table of its category. Raises SceneConfigError on the first
    problem found.
    """
    if not isinstance(entry, dict):
        raise SceneConfigError(f"{where}: expected a mapping, got {type(entry).__name__}")
    kinds = _TABLES[category]
    kind = entry.get("type")
    if kind not in kinds:
        raise SceneConfigError(
            f"{where}: unknown {category} type {kind!r}, expected one of {sorted(kinds)}")

    required, optional = kinds[kind]
    given = set(entry) - {"type"}
    unknown = given - set(required) - set(optional)
    if unknown:
        raise SceneConfigError(f"{where}: unknown field(s) {sorted(unknown)} for {category} {kind!r}")
    missing = set(required) - given
    if missing:
        raise SceneConfigError(f"{where}: missing field(s) {sorted(missing)} for {category} {kind!r}")

    for key in given:
        if key in NESTED:
            validate_tagged(entry[key], NESTED[key], f"{where}.{key}")

def _section(cls, raw: Optional[dict], name: str):
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise SceneConfigError(f"'{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise SceneConfigError(f"unknown field(s) {sorted(unknown)} in '{name}'")
    values = {}
    for key, value in raw.items():
        if isinstance(value, list):
            value = tuple(float(v) for v in value)
        values[key] = value
    return cls(**values)

def parse_config(raw: Optional[dict]) -> SceneConfig:
    """Builds a SceneConfig from already-parsed YAML data."""
    if raw is None:
        return SceneConfig()
    if not isinstance(raw, dict):
        raise SceneConfigError("top level of a scene file must be a mapping")
    unknown = set(raw) - {"camera", "render", "objects"}
    if unknown:
        raise SceneConfigError(f"unknown top-level field(s) {sorted(unknown)}")

    objects = raw.get("objects") or []
    if not isinstance(objects, list):
        raise SceneConfigError("'objects' must be a list")
    for index, entry in enumerate(objects):
        validate_tagged(entry, "geometry", f"objects[{index}]")

    return SceneConfig(
        camera=_section(CameraConfig, raw.get("camera"), "camera"),
        render=_section(RenderConfig, raw.get("render"), "render"),
        objects=objects,
    )

def load_config(config_path: Union[str, Path]) -> SceneConfig:
    """
    Load and validate a scene configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SceneConfigError: If the file is not valid YAML or does not describe
            a valid scene.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info("Loading scene from: %s", config_path)
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise SceneConfigError(f"{config_path}: {exc}") from exc

    config = parse_config(raw)
    logger.info("Scene loaded: %d object(s)", len(config.objects))
    return config

def load_config_or_default(config_path: Union[str, Path]) -> SceneConfig:
    """Like load_config, but a missing file gives the default scene."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        logger.warning("Configuration file '%s' not found, using default settings", config_path)
        return SceneConfig()

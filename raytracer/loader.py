"""Reading scenes from JSON documents."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Mapping, Optional, Union

from .camera import Camera
from .color import Color
from .cylinder import Cylinder
from .material import Material
from .scene import Light, Scene
from .shape import Shape
from .sphere import Sphere
from .texture import CheckerboardTexture
from .triangle import Triangle
from .vector3 import Vector3

logger = logging.getLogger(__name__)


class SceneLoadError(Exception):
    """A scene file could not be read or does not describe a usable scene."""


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneLoadError(f"{what} must be a number, not {value!r}")
    return float(value)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise SceneLoadError(f"{what} must be a JSON object")
    return value


def _field(data: Mapping[str, Any], key: str, what: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SceneLoadError(f"{what} is missing '{key}'") from None


def _components(value: Any, count: int, what: str) -> List[float]:
    if not isinstance(value, list) or len(value) < count:
        raise SceneLoadError(f"{what} must be an array of at least {count} numbers")
    return [_number(item, what) for item in value[:count]]


def _vector(value: Any, what: str) -> Vector3:
    return Vector3(*_components(value, 3, what))


def _color(value: Any, what: str) -> Color:
    return Color(*_components(value, 3, what))


def _is_triple(value: Any) -> bool:
    return isinstance(value, list) and len(value) == 3


def _is_uv(value: Any) -> bool:
    return isinstance(value, list) and len(value) >= 2


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read a scene from a JSON file; raises SceneLoadError on any failure."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise SceneLoadError(f"could not open file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SceneLoadError(f"JSON parse error: {exc}") from exc
    return parse_scene(data)


def parse_scene(data: Any) -> Scene:
    """Build a scene from an already decoded JSON document."""
    data = _mapping(data, "scene document")
    scene = Scene()

    render_mode = data.get("rendermode", "binary")
    if not isinstance(render_mode, str):
        raise SceneLoadError("rendermode must be a string")
    scene.render_mode = render_mode
    scene.nbounces = int(_number(data.get("nbounces", 1), "nbounces"))

    if "camera" not in data:
        raise SceneLoadError("camera data missing")
    scene.camera = load_camera(data["camera"])

    scene_data = data.get("scene")
    if scene_data is None:
        scene_data = {}
    scene_data = _mapping(scene_data, "scene")

    if "backgroundcolor" in scene_data:
        background = scene_data["backgroundcolor"]
        if _is_triple(background):
            scene.background_color = _color(background, "backgroundcolor")
        else:
            logger.warning("Invalid backgroundColor format. Using default.")

    if "lightsources" in scene_data:
        scene.lights = load_lights(scene_data["lightsources"])

    if "shapes" not in scene_data:
        raise SceneLoadError("shapes data missing")
    shapes = scene_data["shapes"]
    if not isinstance(shapes, list):
        raise SceneLoadError("shapes must be an array")
    for shape_data in shapes:
        obj = load_object(shape_data)
        if obj is not None:
            scene.add_object(obj)

    return scene


def load_camera(data: Any) -> Camera:
    """Build a camera from its JSON description; ``fov`` is read in degrees."""
    data = _mapping(data, "camera")
    position = _vector(_field(data, "position", "camera"), "camera position")
    look_at = _vector(_field(data, "lookAt", "camera"), "camera lookAt")
    up = _vector(_field(data, "upVector", "camera"), "camera upVector")
    fov = _number(_field(data, "fov", "camera"), "camera fov")
    width = int(_number(_field(data, "width", "camera"), "camera width"))
    height = int(_number(_field(data, "height", "camera"), "camera height"))
    exposure = _number(data.get("exposure", 1.0), "camera exposure")
    if height == 0:
        raise SceneLoadError("camera height must not be zero")
    return Camera.looking_at(position, look_at, up, fov, width, height, exposure)


def load_lights(data: Any) -> List[Light]:
    """Read point lights; entries without position or intensity are skipped."""
    if not isinstance(data, list):
        raise SceneLoadError("lightsources must be an array")
    lights = []
    for light in data:
        if isinstance(light, dict) and "position" in light and "intensity" in light:
            lights.append(
                Light(
                    _vector(light["position"], "light position"),
                    _color(light["intensity"], "light intensity"),
                )
            )
        else:
            logger.warning("Invalid light source format. Skipping.")
    return lights


def _load_texture(data: Any) -> Optional[CheckerboardTexture]:
    if not isinstance(data, dict) or "type" not in data:
        return None
    texture_type = data["type"]
    if texture_type != "checkerboard":
        logger.warning("Unknown texture type: %s. Skipping texture.", texture_type)
        return None
    color1 = Color(1.0, 1.0, 1.0)
    color2 = Color(0.0, 0.0, 0.0)
    scale = 1.0
    if _is_triple(data.get("color1")):
        color1 = _color(data["color1"], "texture color1")
    if _is_triple(data.get("color2")):
        color2 = _color(data["color2"], "texture color2")
    if "scale" in data:
        scale = _number(data["scale"], "texture scale")
    return CheckerboardTexture(color1, color2, scale)


def load_material(data: Any) -> Material:
    """Read material properties, filling in defaults for what is absent."""
    data = _mapping(data, "material")
    material = Material()

    if _is_triple(data.get("diffusecolor")):
        material.diffuse_color = _color(data["diffusecolor"], "diffusecolor")
    else:
        material.diffuse_color = Color(0.5, 0.5, 0.5)

    if _is_triple(data.get("specularcolor")):
        material.specular_color = _color(data["specularcolor"], "specularcolor")
    else:
        material.specular_color = Color(1.0, 1.0, 1.0)

    material.specular_exponent = _number(
        data.get("specularexponent", 32.0), "specularexponent"
    )

    if "texture" in data:
        material.texture = _load_texture(data["texture"])

    material.kd = _number(data.get("kd", 0.9), "kd")
    material.ks = _number(data.get("ks", 0.1), "ks")
    material.ambient = material.diffuse_color * material.kd

    material.is_reflective = bool(data.get("isreflective", False))
    material.reflectivity = (
        _number(data.get("reflectivity", 0.0), "reflectivity")
        if material.is_reflective
        else 0.0
    )

    material.is_refractive = bool(data.get("isrefractive", False))
    material.refractive_index = (
        _number(data.get("refractiveindex", 1.0), "refractiveindex")
        if material.is_refractive
        else 1.0
    )
    return material


def load_object(data: Any) -> Optional[Shape]:
    """Build a sphere, cylinder or triangle; invalid or unknown shapes give None."""
    data = _mapping(data, "shape")
    if "type" not in data:
        logger.warning("Shape type missing. Skipping object.")
        return None

    shape_type = data["type"]
    material = load_material(data["material"]) if "material" in data else Material()

    if shape_type == "sphere":
        if "center" in data and "radius" in data:
            return Sphere(
                _vector(data["center"], "sphere center"),
                _number(data["radius"], "sphere radius"),
                material,
            )
        logger.warning("Invalid sphere format. Skipping object.")
        return None

    if shape_type == "cylinder":
        if all(key in data for key in ("center", "axis", "radius", "height")):
            return Cylinder(
                _vector(data["center"], "cylinder center"),
                _vector(data["axis"], "cylinder axis"),
                _number(data["radius"], "cylinder radius"),
                _number(data["height"], "cylinder height"),
                material,
            )
        logger.warning("Invalid cylinder format. Skipping object.")
        return None

    if shape_type == "triangle":
        if all(key in data for key in ("v0", "v1", "v2")):
            uvs = [Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)]
            for index, key in enumerate(("uv0", "uv1", "uv2")):
                if _is_uv(data.get(key)):
                    u, v = _components(data[key], 2, f"triangle {key}")
                    uvs[index] = Vector3(u, v, 0.0)
            return Triangle(
                _vector(data["v0"], "triangle v0"),
                _vector(data["v1"], "triangle v1"),
                _vector(data["v2"], "triangle v2"),
                material,
                *uvs,
            )
        logger.warning("Invalid triangle format. Skipping object.")
        return None

    logger.warning("Unknown shape type: %s. Skipping object.", shape_type)
    return None
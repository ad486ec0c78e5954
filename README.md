# raytracer

A ray tracer that reads a scene from a JSON file and writes the rendered
image as a plain-text PPM (P3) file.

It provides:

- spheres, triangles and capped cylinders in scene files, plus infinite
  planes for scenes built in Python;
- a bounding volume hierarchy (`raytracer.bvh.BVHNode`) to speed up
  intersection tests;
- Blinn-Phong shading with hard shadows (`raytracer.shader.BlinnPhongShader`);
- reflective and refractive materials, followed up to `nbounces` levels deep;
- checkerboard textures (`raytracer.texture.CheckerboardTexture`);
- a `binary` mode that paints every hit red and everything else in the
  background colour.

## Installation

```
pip install .
```

## Command line

Each scene is given as a pair: the input JSON file, then the output PPM
file. Several pairs can be given in one run.

```
raytracer scene.json scene.ppm
raytracer first.json first.ppm second.json second.ppm
```

With an odd number of arguments, or fewer than two, a usage line is printed
to standard error and the exit status is 1. A scene that cannot be loaded or
an image that cannot be saved is reported on standard error and the
remaining pairs are still processed. Progress is printed while rendering.

## Scene files

```json
{
  "rendermode": "phong",
  "nbounces": 4,
  "camera": {
    "position": [0, 0, 0],
    "lookAt": [0, 0, 1],
    "upVector": [0, 1, 0],
    "fov": 45,
    "width": 1200,
    "height": 800,
    "exposure": 0.1
  },
  "scene": {
    "backgroundcolor": [0.25, 0.25, 0.25],
    "lightsources": [
      {"position": [0, 1, 0.5], "intensity": [0.5, 0.5, 0.5]}
    ],
    "shapes": [
      {
        "type": "sphere",
        "center": [-0.3, 0.19, 1.0],
        "radius": 0.2,
        "material": {
          "kd": 0.9, "ks": 0.1, "specularexponent": 20,
          "diffusecolor": [0.8, 0.5, 0.5],
          "isreflective": false, "isrefractive": false
        }
      },
      {"type": "cylinder", "center": [-0.3, -0.2, 1.0], "axis": [1, 0, 0],
       "radius": 0.15, "height": 0.2},
      {"type": "triangle", "v0": [0, 0, 1], "v1": [0.5, 0, 1], "v2": [0.25, 0.25, 1]}
    ]
  }
}
```

- `camera` and `scene.shapes` are required; `fov` is in degrees and
  `exposure` defaults to 1.0.
- `rendermode` is `binary` unless given; any other value renders with
  Blinn-Phong shading, scales colours by `2 ** (exposure + 1.2)` and clamps
  them to [0, 1]. `nbounces` defaults to 1.
- A cylinder's `height` is its half-height; the `Cylinder.height` attribute
  holds the full height.
- A triangle may carry `uv0`, `uv1` and `uv2` coordinates.
- Material fields that are absent take defaults: `diffusecolor`
  `[0.5, 0.5, 0.5]`, `specularcolor` `[1, 1, 1]`, `specularexponent` 32,
  `kd` 0.9, `ks` 0.1. `reflectivity` is read only when `isreflective` is true,
  `refractiveindex` only when `isrefractive` is true.
- A material may carry a texture:

```json
"texture": {"type": "checkerboard", "color1": [1, 1, 1], "color2": [0, 0, 0], "scale": 8}
```

Shapes or lights with missing fields, and unknown shape or texture types,
are skipped with a warning through the `logging` module. A file that cannot
be read or parsed, or that lacks a camera or shapes, raises
`raytracer.loader.SceneLoadError`.

## From Python

```python
from raytracer.loader import load_scene
from raytracer.render import Raytracer

scene = load_scene("scene.json")
scene.build_bvh()
tracer = Raytracer(scene.camera.width, scene.camera.height)
tracer.render(scene, "scene.ppm")
print(tracer.pixel_color(0, 0))
```

`raytracer.cli.render_scene(input_path, output_path)` does the same in one
call and returns the rendered `Image`. `raytracer.loader.parse_scene(data)`
builds a scene from an already decoded JSON document.

Scenes can also be assembled by hand from `Scene` and `Light`
(`raytracer.scene`), `Camera.looking_at` (`raytracer.camera`), `Sphere`,
`Plane`, `Triangle`, `Cylinder` and `Material`. `Scene.intersect` finds
nothing until `Scene.build_bvh()` has been called.

## Limitations

- Output is plain-text PPM only; there is no other image format.
- One ray is traced per pixel, with no anti-aliasing, on a single thread.
- Planes cannot be described in scene files.

## Tests

```
pip install ".[test]"
pytest
```
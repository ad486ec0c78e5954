"""Command line entry point: render JSON scenes to PPM images."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, Union

from .image import Image
from .loader import SceneLoadError, load_scene
from .render import Raytracer

_USAGE = "Usage: raytracer <input_json1> <output_ppm1> [<input_json2> <output_ppm2> ...]"


def render_scene(
    input_path: Union[str, os.PathLike], output_path: Union[str, os.PathLike]
) -> Image:
    """Load, render and save one scene; returns the rendered image."""
    print(f"Loading scene: {input_path}")
    scene = load_scene(input_path)
    print(f"Successfully loaded {input_path}")
    scene.build_bvh()
    tracer = Raytracer(scene.camera.width, scene.camera.height)
    tracer.render(scene, output_path)
    return tracer.image


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render each input/output pair given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2 or len(args) % 2 != 0:
        print(_USAGE, file=sys.stderr)
        return 1

    for input_path, output_path in zip(args[::2], args[1::2]):
        try:
            render_scene(input_path, output_path)
        except SceneLoadError as exc:
            print(f"Failed to load scene from {input_path}: {exc}", file=sys.stderr)
        except OSError as exc:
            print(f"Failed to save image to {output_path}: {exc}", file=sys.stderr)

    print("All scenes have been processed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
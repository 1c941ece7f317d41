# main.py
import argparse
import dataclasses
import logging
import sys

import numpy as np

from core.errors import RenderError
from renderer.image_io import save_image, write_ppm
from renderer.raytracer import Renderer
from renderer.settings import DEFAULT_ASPECT_RATIO, DEFAULT_WIDTH, QUALITY_LEVELS, RenderSettings
from scenes import SCENES

logger = logging.getLogger("pathtracer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="scene to render (default: %(default)s)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="quality preset (default: %(default)s)")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="full-quality image width; presets scale it (default: %(default)s)")
    parser.add_argument("--aspect-ratio", type=float, default=DEFAULT_ASPECT_RATIO,
                        help="image aspect ratio, width / height (default: %(default).3f)")
    parser.add_argument("--samples", type=int, help="samples per pixel (overrides the preset)")
    parser.add_argument("--max-depth", type=int, help="maximum bounces (overrides the preset)")
    parser.add_argument("--seed", type=int, help="random seed; fixes both scene and image")
    parser.add_argument("--workers", type=int, default=1,
                        help="worker processes for scanlines (default: %(default)s)")
    parser.add_argument("--output", "-o", default="-",
                        help="output file (.ppm or any Pillow format); '-' writes PPM to stdout")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--progress", action="store_true", help="show a scanline progress bar")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = RenderSettings.from_quality(
            args.quality, base_width=args.width, aspect_ratio=args.aspect_ratio,
            samples_per_pixel=args.samples, max_depth=args.max_depth,
            seed=args.seed, workers=args.workers)

        scene = SCENES[args.scene](np.random.default_rng(args.seed))
        camera_config = dataclasses.replace(scene.camera, aspect_ratio=settings.aspect_ratio)
        camera = camera_config.build()

        renderer = Renderer.from_settings(settings)
        image = renderer.render(camera, scene.world, seed=settings.seed,
                                workers=settings.workers, progress=args.progress)
    except (RenderError, ValueError) as e:
        logger.error("Render failed: %s", e)
        return 1

    if args.output == "-":
        write_ppm(sys.stdout, image)
    else:
        save_image(args.output, image)

    if args.preview:
        from renderer.preview import show
        show(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())

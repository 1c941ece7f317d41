# renderer/image_io.py
import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def _check_pixels(pixels: np.ndarray) -> None:
    if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != np.uint8:
        raise ValueError(f"expected a (height, width, 3) uint8 array, got {pixels.dtype} {pixels.shape}")


def write_ppm(stream: TextIO, pixels: np.ndarray) -> None:
    """
    Writes a plain-text (P3) PPM: header, then one "r g b" line per pixel,
    rows from top to bottom.
    """
    _check_pixels(pixels)
    height, width, _ = pixels.shape
    stream.write("P3\n")
    stream.write(f"{width} {height}\n")
    stream.write("255\n")
    for row in pixels:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")


def save_image(path: Union[str, Path], pixels: np.ndarray) -> Path:
    """
    Saves the image, as plain PPM for a .ppm suffix and through Pillow
    (format picked from the suffix) otherwise.
    """
    _check_pixels(pixels)
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w", encoding="ascii") as fh:
            write_ppm(fh, pixels)
    else:
        Image.fromarray(pixels).save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path

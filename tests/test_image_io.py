import io

import numpy as np
import pytest
from PIL import Image

from renderer.image_io import save_image, write_ppm

PIXELS = np.array([[[255, 0, 181], [1, 2, 3]]], dtype=np.uint8)


def test_write_ppm():
    out = io.StringIO()
    write_ppm(out, PIXELS)
    assert out.getvalue() == "P3\n2 1\n255\n255 0 181\n1 2 3\n"


def test_save_ppm(tmp_path):
    path = save_image(tmp_path / "out.ppm", PIXELS)
    assert path.read_text(encoding="ascii").splitlines()[:4] == ["P3", "2 1", "255", "255 0 181"]


def test_save_png(tmp_path):
    path = save_image(tmp_path / "out.png", PIXELS)
    with Image.open(path) as img:
        assert img.size == (2, 1)
        assert img.convert("RGB").getpixel((0, 0)) == (255, 0, 181)


def test_rejects_non_byte_images():
    with pytest.raises(ValueError):
        write_ppm(io.StringIO(), PIXELS.astype(np.float32))

# core/color.py
import math
from typing import NamedTuple, TextIO

from core.errors import ColorRangeError
from core.vector import Vector3

# Clamp bounds applied after gamma correction, before quantization.
CLAMP_MIN = 0.0
CLAMP_MAX = 0.999


def gamma_correct(component: float, scale: float) -> float:
    """
    Scales one linear channel by 1/samples, applies gamma 2 (square root)
    and clamps it to [0, 0.999].
    """
    scaled = component * scale
    # NaN fails this comparison as well.
    if not scaled >= 0.0:
        raise ColorRangeError(f"linear color component {scaled} is negative or NaN")
    return min(max(math.sqrt(scaled), CLAMP_MIN), CLAMP_MAX)


class PixelColor(NamedTuple):
    """An 8-bit RGB triple ready for an image sink."""
    red: int
    green: int
    blue: int

    @classmethod
    def from_unit(cls, color: Vector3) -> "PixelColor":
        """
        Quantizes a display-space color whose channels lie in [0, 1].
        """
        channels = []
        for c in color:
            if not 0.0 <= c <= 1.0:
                raise ColorRangeError(f"color {color} is outside [0, 1]")
            channels.append(min(int(c * 256), 255))
        return cls(*channels)

    @classmethod
    def from_samples(cls, pixel_sum: Vector3, samples_per_pixel: int) -> "PixelColor":
        """
        Averages a sum of linear samples and tone maps it to bytes.
        """
        scale = 1.0 / samples_per_pixel
        return cls.from_unit(Vector3(*(gamma_correct(c, scale) for c in pixel_sum)))

    def to_vector(self) -> Vector3:
        return Vector3(self.red / 255.0, self.green / 255.0, self.blue / 255.0)

    def write(self, stream: TextIO) -> None:
        stream.write(f"{self.red} {self.green} {self.blue}\n")


def color_from_bytes(red: int, green: int, blue: int) -> Vector3:
    """Linear color from 0-255 channel values, as scene files usually give them."""
    return PixelColor(red, green, blue).to_vector()

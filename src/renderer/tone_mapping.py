# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit

from core.color import CLAMP_MAX, CLAMP_MIN
from core.errors import ColorRangeError


@njit(cache=False)
def gamma_quantize_kernel(accumulated, scale, output):
    """
    Averages, gamma corrects (square root), clamps and quantizes a buffer
    of linear sample sums. Returns False as soon as a channel is negative,
    NaN, or ends up outside [0, 1].
    """
    height, width, channels = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                scaled = accumulated[y, x, c] * scale
                if not scaled >= 0.0:
                    return False
                value = math.sqrt(scaled)
                value = min(max(value, CLAMP_MIN), CLAMP_MAX)
                if not (0.0 <= value <= 1.0):
                    return False
                output[y, x, c] = min(int(value * 256.0), 255)
    return True


def tone_map(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Converts a (height, width, 3) buffer of per-pixel sample sums to an
    8-bit image. Matches PixelColor.from_samples pixel for pixel.
    """
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) buffer, got shape {accumulated.shape}")
    output = np.zeros(accumulated.shape, dtype=np.uint8)
    ok = gamma_quantize_kernel(np.ascontiguousarray(accumulated, dtype=np.float64),
                               1.0 / samples_per_pixel, output)
    if not ok:
        raise ColorRangeError("accumulated radiance contains negative or NaN components")
    return output

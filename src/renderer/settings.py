# renderer/settings.py
from dataclasses import dataclass
from typing import Optional

DEFAULT_WIDTH = 1200
DEFAULT_ASPECT_RATIO = 3.0 / 2.0

# Quality presets: samples per pixel, bounce limit and resolution scale.
QUALITY_LEVELS = {
    "interactive": {"samples": 4, "bounces": 8, "scale": 0.25},
    "balanced": {"samples": 64, "bounces": 25, "scale": 0.5},
    "high_quality": {"samples": 500, "bounces": 50, "scale": 1.0},
}


@dataclass
class RenderSettings:
    width: int
    height: int
    samples_per_pixel: int = 16
    max_depth: int = 8
    seed: Optional[int] = None
    workers: int = 1

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_quality(cls, quality: str, base_width: int = DEFAULT_WIDTH,
                     aspect_ratio: float = DEFAULT_ASPECT_RATIO, **overrides) -> "RenderSettings":
        """
        Builds settings from a named preset. Keyword overrides replace any
        preset-derived field.
        """
        try:
            level = QUALITY_LEVELS[quality]
        except KeyError:
            raise ValueError(f"unknown quality level {quality!r}; "
                             f"choose from {', '.join(QUALITY_LEVELS)}") from None
        width = max(1, int(base_width * level["scale"]))
        values = {
            "width": width,
            "height": max(1, int(width / aspect_ratio)),
            "samples_per_pixel": level["samples"],
            "max_depth": level["bounces"],
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

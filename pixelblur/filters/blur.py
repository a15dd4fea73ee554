"""Blur filters backed by the sliding-window kernels."""

from typing import ClassVar

import numpy as np
from pydantic import Field

from ..blur import fastblur
from ..kernels import BlurMethod
from .base import BaseFilter, validate_image
from .registry import register_filter


def blur_planes(image: np.ndarray, radius: int, steps: int,
                method: BlurMethod) -> np.ndarray:
    """Blur every channel plane of an (H, W) or (H, W, C) image independently."""
    validate_image(image)
    height, width = image.shape[:2]

    if image.ndim == 2:
        return fastblur(image, width, height, radius, steps, method=method)

    result = np.empty_like(image)
    for c in range(image.shape[2]):
        result[:, :, c] = fastblur(image[:, :, c], width, height, radius, steps,
                                   method=method)
    return result


@register_filter("fast_blur")
class FastBlurFilter(BaseFilter):
    """Triangular sliding-window blur, approximating a Gaussian."""

    name: ClassVar[str] = "Fast Blur"
    description: ClassVar[str] = "Approximate Gaussian blur using a triangular kernel"
    category: ClassVar[str] = "blur"
    VERSION: ClassVar[int] = 1

    radius: int = Field(default=3, ge=0, le=100)
    steps: int = Field(default=1, ge=1, le=10)

    def apply(self, image: np.ndarray) -> np.ndarray:
        return blur_planes(image, self.radius, self.steps, BlurMethod.TRIANGULAR)


@register_filter("box_blur")
class BoxBlurFilter(BaseFilter):
    """Box (uniform) blur filter."""

    name: ClassVar[str] = "Box Blur"
    description: ClassVar[str] = "Apply uniform box blur"
    category: ClassVar[str] = "blur"
    VERSION: ClassVar[int] = 1

    radius: int = Field(default=2, ge=0, le=100)
    steps: int = Field(default=1, ge=1, le=10)

    def apply(self, image: np.ndarray) -> np.ndarray:
        return blur_planes(image, self.radius, self.steps, BlurMethod.UNIFORM)

"""Sharpen filters."""

from typing import ClassVar

import numpy as np
from pydantic import Field

from ..unsharp import unsharp
from .base import BaseFilter, validate_image
from .registry import register_filter


@register_filter("unsharp_mask")
class UnsharpMaskFilter(BaseFilter):
    """Unsharp mask sharpening filter.

    ``radius`` is stored and serialized but the blur always uses radius 3
    with 3 passes (see :mod:`pixelblur.unsharp`).
    """

    name: ClassVar[str] = "Unsharp Mask"
    description: ClassVar[str] = "Sharpen image using unsharp masking on luma"
    category: ClassVar[str] = "sharpen"
    VERSION: ClassVar[int] = 1

    amount: float = Field(default=80.0, ge=0.0, le=500.0)
    radius: float = Field(default=0.6, ge=0.5, le=2.0)
    threshold: int = Field(default=2, ge=0, le=255)

    def apply(self, image: np.ndarray) -> np.ndarray:
        validate_image(image, channels=(4,))
        height, width = image.shape[:2]
        result = image.copy()
        unsharp(result, width, height, self.amount, self.radius, self.threshold)
        return result

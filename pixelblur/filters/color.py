"""Color filters."""

from typing import ClassVar

import numpy as np

from ..grayscale import greyscale
from .base import BaseFilter, validate_image
from .registry import register_filter


@register_filter("greyscale")
class GreyscaleFilter(BaseFilter):
    """Replace R, G and B by luma, keeping alpha."""

    name: ClassVar[str] = "Greyscale"
    description: ClassVar[str] = "Convert to greyscale using fixed luma weights"
    category: ClassVar[str] = "color"
    VERSION: ClassVar[int] = 1

    def apply(self, image: np.ndarray) -> np.ndarray:
        validate_image(image, channels=(4,))
        height, width = image.shape[:2]
        luma = greyscale(image, width, height).reshape(height, width)
        result = image.copy()
        result[:, :, 0] = luma
        result[:, :, 1] = luma
        result[:, :, 2] = luma
        return result

"""Greyscale (luma) reduction of RGBA buffers.

Luma uses the BT.601 weights 0.299/0.587/0.114, normalised to 2^16 so the
conversion stays in integer arithmetic:

    Y = (19595*R + 38470*G + 7471*B) >> 16
"""
import numpy as np

from .buffers import as_array

RED_WEIGHT = 19595
GREEN_WEIGHT = 38470
BLUE_WEIGHT = 7471


def greyscale(source, width: int, height: int) -> np.ndarray:
    """Convert an RGBA buffer to a single-channel luma buffer.

    Alpha is ignored.

    Args:
        source: RGBA uint8 buffer of ``width * height * 4`` samples
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        New 1-D uint8 array of ``width * height`` samples
    """
    pixels = as_array(source, width, height, stride=4).reshape(-1, 4).astype(np.uint32)
    luma = (pixels[:, 0] * RED_WEIGHT
            + pixels[:, 1] * GREEN_WEIGHT
            + pixels[:, 2] * BLUE_WEIGHT) >> 16
    return luma.astype(np.uint8)


__all__ = ['greyscale', 'RED_WEIGHT', 'GREEN_WEIGHT', 'BLUE_WEIGHT']

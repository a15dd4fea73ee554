"""Unsharp mask on RGBA buffers.

    USM(O) = O + 2 * (amount / 100) * (O - GB)

where GB is a Gaussian-like blur of O. The difference is computed on luma
only, which avoids colour drift and blurs a quarter of the samples; the same
correction is then added to R, G and B.

Known limitation: the blur always runs with radius 3 and 3 passes
(``settings.UNSHARP_BLUR_RADIUS`` / ``UNSHARP_BLUR_STEPS``); the ``radius``
argument is accepted for API compatibility but does not change the result.
"""
import logging

import numpy as np

from .blur import fastblur
from .buffers import as_writable_array
from .config import settings
from .grayscale import greyscale
from .kernels import BlurMethod

logger = logging.getLogger(__name__)


def unsharp(buffer, width: int, height: int, amount: float, radius: float,
            threshold: float) -> None:
    """Sharpen an RGBA buffer in place.

    Args:
        buffer: Writable RGBA uint8 buffer (bytearray or uint8 array) of
            ``width * height * 4`` samples
        width: Image width in pixels
        height: Image height in pixels
        amount: Sharpening strength, the correction is ``diff * amount / 250``
        radius: Ignored, see module docstring
        threshold: Pixels whose luma differs from the blurred luma by no more
            than this are left untouched

    Raises:
        TypeError: If ``buffer`` is read-only.
        ValueError: If the buffer size does not match the dimensions.
    """
    pixels = as_writable_array(buffer, width, height, stride=4)

    gs = greyscale(pixels, width, height)
    blurred = fastblur(gs, width, height, settings.UNSHARP_BLUR_RADIUS,
                       settings.UNSHARP_BLUR_STEPS, method=BlurMethod.TRIANGULAR)

    diff = gs.astype(np.int32) - blurred.astype(np.int32)
    mask = np.abs(diff) > threshold

    corrected = int(np.count_nonzero(mask))
    logger.debug(f"unsharp {width}x{height} amount={amount} threshold={threshold}: "
                 f"{corrected} pixels corrected")
    if not corrected:
        return

    corr = diff[mask] * (amount / settings.UNSHARP_AMOUNT_SCALE)

    rgba = pixels.reshape(-1, 4).copy()
    rgb = rgba[mask, :3].astype(np.float64) + corr[:, np.newaxis]
    rgba[mask, :3] = np.clip(np.trunc(rgb), 0, 255).astype(np.uint8)

    pixels[...] = rgba.reshape(pixels.shape)


__all__ = ['unsharp']

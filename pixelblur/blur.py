"""Separable blur driver.

Each pass blurs every row, then every column, of a working copy of the
source. Repeating the pass ``steps`` times widens the effective kernel; with
the triangular kernel three passes are already very close to a Gaussian.

Usage:
    from pixelblur.blur import fastblur, box_blur

    result = fastblur(luma, width, height, radius=3, steps=2)
    result = box_blur(luma, width, height, radius=2)
"""

from __future__ import annotations

import logging

import numpy as np

from .buffers import as_array
from .config import settings
from .kernels import BlurKernel, BlurMethod, get_kernel
from .state import BlurState, PassDirection

logger = logging.getLogger(__name__)


def _run_pass(kernel: BlurKernel, state: BlurState, direction: PassDirection) -> None:
    size = state.axis_length(direction)
    step = state.axis_step(direction)
    prepared = kernel.prepare(size, state.radius, step)

    # Lines of one pass are independent, they advance together
    kernel.blur_lines(state, state.line_starts(direction), size, step, prepared)


def fastblur(source, width: int, height: int, radius: int, steps: int = 1,
             method: BlurMethod | str | BlurKernel | None = None) -> np.ndarray:
    """Blur a single-channel buffer.

    The source is never modified.

    Args:
        source: Single-channel uint8 buffer of ``width * height`` samples
        width: Image width in pixels
        height: Image height in pixels
        radius: Kernel radius in pixels, 0 returns an unmodified copy
        steps: Number of horizontal+vertical passes, 0 counts as 1
        method: Kernel to use, defaults to ``settings.DEFAULT_BLUR_METHOD``

    Returns:
        New uint8 array, shaped like ``source`` for arrays, 1-D otherwise

    Raises:
        ValueError: On a size mismatch, non-positive dimensions or a
            negative radius or step count.
    """
    array = as_array(source, width, height)

    if radius < 0:
        raise ValueError(f"Expected radius >= 0, got {radius}")
    if steps is not None and steps < 0:
        raise ValueError(f"Expected steps >= 0, got {steps}")
    steps = steps or 1

    kernel = get_kernel(method if method is not None else settings.DEFAULT_BLUR_METHOD)

    if radius < 1:
        return array.copy()

    logger.debug(f"fastblur {width}x{height} radius={radius} steps={steps} "
                 f"method={kernel.method.value}")

    state = BlurState(width, height, radius, array.ravel().astype(np.int64))
    for _ in range(steps):
        _run_pass(kernel, state, PassDirection.HORIZONTAL)
        _run_pass(kernel, state, PassDirection.VERTICAL)

    return state.buffer.astype(np.uint8).reshape(array.shape)


def box_blur(source, width: int, height: int, radius: int, steps: int = 1) -> np.ndarray:
    """Blur a single-channel buffer with the uniform (box) kernel.

    See :func:`fastblur` for arguments.
    """
    return fastblur(source, width, height, radius, steps, method=BlurMethod.UNIFORM)


__all__ = ['fastblur', 'box_blur']

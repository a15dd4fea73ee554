"""Sliding-window blur kernels.

Two separable 1-D kernels share the same driver (see :mod:`pixelblur.blur`):

| Method | Kernel | Divisor |
|--------|--------|---------|
| triangular | ``1, 2, ..., r+1, ..., 2, 1`` | ``(r+1)^2`` |
| uniform | ``1, 1, ..., 1`` (``2r+1`` taps) | ``2r+1`` |

Both run in O(1) per sample by keeping running sums instead of re-summing
the window for every output position. Samples beyond either end of a line
are clamped to the nearest edge sample.

The triangular kernel keeps three sums:

- ``in_sum``: samples right of the centre, still gaining weight
- ``out_sum``: the centre and samples left of it, losing weight
- ``total``: the weighted window sum, i.e. the next output times the divisor

Moving one step removes ``out_sum`` from ``total`` and adds the updated
``in_sum``, which shifts every weight by one position. The ``diameter``
samples inside the window live in a circular store so that the sample
leaving the window is known without re-reading the (already overwritten)
line.

## Lines

``start`` is either the offset of a single line or a numpy array with the
offsets of many parallel lines. With an array, every sum becomes a vector,
the window store needs one column per line (shape ``(diameter, lines)``)
and the buffer must be a numpy int64 array. All lines of a pass then
advance one position per loop iteration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, NamedTuple

import numpy as np

from .state import BlurState


class BlurMethod(str, Enum):
    """Available blur kernels."""

    TRIANGULAR = 'triangular'
    UNIFORM = 'uniform'


class WindowSums(NamedTuple):
    in_sum: int | np.ndarray
    out_sum: int | np.ndarray
    total: int | np.ndarray


# ============================================================================
# Triangular (weighted) kernel
# ============================================================================

def generate_mapping(size: int, radius_plus1: int, step: int) -> list[int]:
    """Offsets of the sample entering the window at each scan position.

    ``mapping[i]`` is relative to the start of the line and already clamped
    to the last sample of the line.

    Args:
        size: Line length along the blur axis
        radius_plus1: Kernel radius plus one
        step: Buffer distance between neighbouring samples (1 for rows,
            width for columns)
    """
    size_minus1 = size - 1
    return [min(i + radius_plus1, size_minus1) * step for i in range(size)]


def compute_window_sums(radius: int, start, source, stack, last_index: int,
                        step: int) -> WindowSums:
    """Fill the window store for the first position of a line.

    Args:
        radius: Kernel radius
        start: Buffer offset of the first sample of the line, or an array
            of offsets
        source: Buffer to read from
        stack: Window store of ``2 * radius + 1`` slots, overwritten
        last_index: Index of the last sample of the line (length - 1)
        step: Buffer distance between neighbouring samples

    Returns:
        Running sums for the window centred on the first sample
    """
    in_sum = 0
    out_sum = 0
    total = 0
    radius_plus1 = radius + 1

    for i in range(-radius, radius + 1):
        value = source[start + min(max(i, 0), last_index) * step]
        stack[i + radius] = value
        total = total + value * (radius_plus1 - abs(i))
        if i > 0:
            in_sum = in_sum + value
        else:
            out_sum = out_sum + value

    return WindowSums(in_sum, out_sum, total)


def convolve_line(size: int, step: int, target, source, stack, start,
                  radius: int, sums: WindowSums, mapping: list[int]) -> None:
    """Slide the triangular window along one line (or many parallel lines).

    ``target`` and ``source`` may be the same buffer: samples are always
    read ahead of the write position and trailing samples are taken from
    ``stack``.

    Args:
        size: Line length
        step: Buffer distance between neighbouring samples
        target: Buffer receiving the blurred line
        source: Buffer the line is read from
        stack: Window store prepared by :func:`compute_window_sums`
        start: Buffer offset of the first sample of the line, or an array
            of offsets
        radius: Kernel radius
        sums: Initial sums from :func:`compute_window_sums`
        mapping: Entering-sample offsets from :func:`generate_mapping`
    """
    in_sum, out_sum, total = sums
    diameter = len(stack)
    divisor = (radius + 1) * (radius + 1)
    pointer = radius
    location = start

    for i in range(size):
        target[location] = total // divisor

        total = total - out_sum

        # Oldest slot: the sample leaving the window
        slot = (pointer + radius + 1) % diameter
        out_sum = out_sum - stack[slot]

        value = source[start + mapping[i]]
        stack[slot] = value
        in_sum = in_sum + value
        total = total + in_sum

        # New centre moves from the right half to the left half
        pointer = (pointer + 1) % diameter
        value = stack[pointer]
        out_sum = out_sum + value
        in_sum = in_sum - value

        location = location + step


# ============================================================================
# Uniform (box) kernel
# ============================================================================

def box_line(size: int, step: int, buffer, start, radius: int) -> None:
    """Apply a flat moving-sum box filter to one line (or many) in place.

    Args:
        size: Line length
        step: Buffer distance between neighbouring samples
        buffer: Buffer holding the line, overwritten with the result
        start: Buffer offset of the first sample of the line, or an array
            of offsets
        radius: Kernel radius, the window spans ``2 * radius + 1`` samples
    """
    diameter = 2 * radius + 1
    last = size - 1
    # Copy of the line, the buffer is overwritten while sliding
    line = [buffer[start + k * step] for k in range(size)]

    total = 0
    for i in range(-radius, radius + 1):
        total = total + line[min(max(i, 0), last)]

    for i in range(size):
        buffer[start + i * step] = total // diameter
        total = total + line[min(i + radius + 1, last)] - line[max(i - radius, 0)]


# ============================================================================
# Strategies
# ============================================================================

class BlurKernel(ABC):
    """A 1-D blur kernel applied to all lines of a pass by the separable driver."""

    method: ClassVar[BlurMethod]

    def prepare(self, size: int, radius: int, step: int):
        """Per-pass data shared by all lines of one direction."""
        return None

    @abstractmethod
    def blur_lines(self, state: BlurState, starts: np.ndarray, size: int, step: int,
                   prepared) -> None:
        """Blur the lines beginning at ``starts`` of ``state.buffer`` in place."""


class TriangularKernel(BlurKernel):
    """Weighted sliding window, a close approximation of a Gaussian."""

    method = BlurMethod.TRIANGULAR

    def prepare(self, size: int, radius: int, step: int) -> list[int]:
        return generate_mapping(size, radius + 1, step)

    def blur_lines(self, state: BlurState, starts: np.ndarray, size: int, step: int,
                   prepared: list[int]) -> None:
        stack = state.window_store(len(starts))
        sums = compute_window_sums(state.radius, starts, state.buffer, stack,
                                   size - 1, step)
        convolve_line(size, step, state.buffer, state.buffer, stack, starts,
                      state.radius, sums, prepared)


class UniformKernel(BlurKernel):
    """Flat moving average over ``2 * radius + 1`` samples."""

    method = BlurMethod.UNIFORM

    def blur_lines(self, state: BlurState, starts: np.ndarray, size: int, step: int,
                   prepared) -> None:
        box_line(size, step, state.buffer, starts, state.radius)


_KERNELS: dict[BlurMethod, BlurKernel] = {
    BlurMethod.TRIANGULAR: TriangularKernel(),
    BlurMethod.UNIFORM: UniformKernel(),
}


def get_kernel(method: BlurMethod | str | BlurKernel) -> BlurKernel:
    """Resolve a method name, :class:`BlurMethod` or kernel instance.

    Raises:
        ValueError: If ``method`` names no known kernel.
    """
    if isinstance(method, BlurKernel):
        return method
    try:
        method = BlurMethod(method)
    except ValueError:
        raise ValueError(f"Unknown blur method: {method!r}") from None
    return _KERNELS[method]


__all__ = [
    'BlurMethod', 'WindowSums',
    'generate_mapping', 'compute_window_sums', 'convolve_line', 'box_line',
    'BlurKernel', 'TriangularKernel', 'UniformKernel', 'get_kernel',
]

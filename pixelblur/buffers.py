"""Pixel buffer validation and conversion.

Buffers are flat, row-major sequences of unsigned 8-bit samples with an
implicit stride (1 for luma/working buffers, 4 for RGBA). They may be passed
as any object supporting the buffer protocol (``bytes``, ``bytearray``,
``memoryview``) or as a ``uint8`` numpy array of any shape with the right
number of samples.
"""
import numpy as np

from .config import settings


def _check_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"Expected positive dimensions, got {width}x{height}")


def as_array(buffer, width: int, height: int, stride: int = 1) -> np.ndarray:
    """Return ``buffer`` as a uint8 numpy array without copying.

    Args:
        buffer: bytes-like object or uint8 numpy array
        width: Image width in pixels
        height: Image height in pixels
        stride: Samples per pixel (1 = luma, 4 = RGBA)

    Returns:
        uint8 array sharing memory with ``buffer`` where possible. Arrays keep
        their shape, bytes-like input is returned as a 1-D array.

    Raises:
        ValueError: If the dimensions are not positive, the dtype is not
            uint8, the size does not match ``width * height * stride`` or
            it exceeds ``settings.MAX_BUFFER_SIZE`` (when set).
    """
    _check_dimensions(width, height)

    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise ValueError(f"Expected uint8 dtype, got {buffer.dtype}")
        array = buffer
    else:
        array = np.frombuffer(buffer, dtype=np.uint8)

    expected = width * height * stride
    if array.size != expected:
        raise ValueError(
            f"Expected {expected} bytes ({width}x{height}x{stride}), got {array.size}"
        )
    if settings.MAX_BUFFER_SIZE is not None and array.size > settings.MAX_BUFFER_SIZE:
        raise ValueError(
            f"Buffer of {array.size} bytes exceeds limit of {settings.MAX_BUFFER_SIZE}"
        )
    return array


def as_writable_array(buffer, width: int, height: int, stride: int = 1) -> np.ndarray:
    """Like :func:`as_array`, but the result must be writable in place.

    Raises:
        TypeError: If ``buffer`` is read-only (e.g. ``bytes``).
    """
    array = as_array(buffer, width, height, stride)
    if not array.flags.writeable:
        raise TypeError(
            f"Expected a writable buffer (bytearray or uint8 array), "
            f"got read-only {type(buffer).__name__}"
        )
    return array


__all__ = ['as_array', 'as_writable_array']

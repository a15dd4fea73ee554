"""Pydantic filter objects wrapping the blur and sharpen functions.

Filters are JSON-serializable, validate their parameters and apply to
(H, W) / (H, W, C) uint8 numpy arrays or PIL images.
"""

from .base import BaseFilter, validate_image
from .registry import filter_registry, register_filter, get_filter, list_filters
from .blur import FastBlurFilter, BoxBlurFilter, blur_planes
from .color import GreyscaleFilter
from .sharpen import UnsharpMaskFilter

__all__ = [
    "BaseFilter",
    "validate_image",
    "filter_registry",
    "register_filter",
    "get_filter",
    "list_filters",
    "FastBlurFilter",
    "BoxBlurFilter",
    "blur_planes",
    "GreyscaleFilter",
    "UnsharpMaskFilter",
]

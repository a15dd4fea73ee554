"""
pixelblur - Sliding-window blur and unsharp mask for in-memory pixel buffers
"""

from .blur import fastblur, box_blur
from .grayscale import greyscale
from .unsharp import unsharp
from .kernels import BlurMethod, BlurKernel, TriangularKernel, UniformKernel, get_kernel
from .state import BlurState, PassDirection
from .config import Settings, settings

__all__ = [
    # Blur
    "fastblur",
    "box_blur",
    "BlurMethod",
    "BlurKernel",
    "TriangularKernel",
    "UniformKernel",
    "get_kernel",
    "BlurState",
    "PassDirection",
    # Sharpen
    "greyscale",
    "unsharp",
    # Configuration
    "Settings",
    "settings",
]

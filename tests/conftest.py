"""
Pytest fixtures and reference implementations for pixelblur tests
"""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator so every run sees the same pixels."""
    return np.random.default_rng(1234)


@pytest.fixture
def luma_image(rng) -> np.ndarray:
    """Random single-channel 13x9 image (non-square, odd sizes)."""
    return rng.integers(0, 256, size=(9, 13), dtype=np.uint8)


@pytest.fixture
def rgba_image(rng) -> np.ndarray:
    """Random 11x7 RGBA image with varying alpha."""
    return rng.integers(0, 256, size=(7, 11, 4), dtype=np.uint8)


def triangular_weights(radius: int) -> list[int]:
    return [radius + 1 - abs(k) for k in range(-radius, radius + 1)]


def uniform_weights(radius: int) -> list[int]:
    return [1] * (2 * radius + 1)


def reference_blur(image: np.ndarray, radius: int, steps: int,
                   weights: list[int]) -> np.ndarray:
    """Direct (non-sliding) separable convolution with clamped edges.

    Each 1-D pass floors its result, like the sliding-window engine.
    """
    result = image.astype(np.int64)
    height, width = result.shape
    divisor = sum(weights)

    for _ in range(steps):
        acc = np.zeros_like(result)
        for k, weight in zip(range(-radius, radius + 1), weights):
            idx = np.clip(np.arange(width) + k, 0, width - 1)
            acc += weight * result[:, idx]
        result = acc // divisor

        acc = np.zeros_like(result)
        for k, weight in zip(range(-radius, radius + 1), weights):
            idx = np.clip(np.arange(height) + k, 0, height - 1)
            acc += weight * result[idx, :]
        result = acc // divisor

    return result.astype(np.uint8)

"""
Test the separable blur driver with both kernels.

Tests verify:
- radius 0 is an exact copy and inputs are never modified
- flat images stay flat (no edge artifacts)
- results equal a direct clamped convolution for any radius/steps
- invalid buffers fail fast
"""

import numpy as np
import pytest

from conftest import reference_blur, triangular_weights, uniform_weights
from pixelblur import box_blur, fastblur, settings
from pixelblur.kernels import BlurMethod, UniformKernel

METHODS = [BlurMethod.TRIANGULAR, BlurMethod.UNIFORM]


class TestFastBlurBasics:
    """Identity, shape and non-mutation guarantees."""

    @pytest.mark.parametrize("steps", [0, 1, 3])
    @pytest.mark.parametrize("method", METHODS)
    def test_radius_zero_is_identity(self, luma_image, steps, method):
        result = fastblur(luma_image, 13, 9, 0, steps, method=method)

        assert np.array_equal(result, luma_image)
        assert result is not luma_image
        assert not np.shares_memory(result, luma_image)

    def test_array_shape_preserved(self, luma_image):
        result = fastblur(luma_image, 13, 9, 2)

        assert result.shape == (9, 13)
        assert result.dtype == np.uint8

    def test_bytes_input_gives_flat_array(self):
        data = bytes(range(24))
        result = fastblur(data, 6, 4, 1)

        assert result.shape == (24,)
        assert result.dtype == np.uint8

    @pytest.mark.parametrize("method", METHODS)
    def test_source_array_not_modified(self, luma_image, method):
        before = luma_image.copy()
        fastblur(luma_image, 13, 9, 3, 2, method=method)
        assert np.array_equal(luma_image, before)

    @pytest.mark.parametrize("method", METHODS)
    def test_source_bytearray_not_modified(self, method):
        data = bytearray([0, 255] * 8)
        fastblur(data, 4, 4, 1, method=method)
        assert data == bytearray([0, 255] * 8)

    def test_deterministic(self, luma_image):
        first = fastblur(luma_image, 13, 9, 4, 3)
        second = fastblur(luma_image, 13, 9, 4, 3)
        assert np.array_equal(first, second)

    def test_steps_zero_counts_as_one(self, luma_image):
        assert np.array_equal(fastblur(luma_image, 13, 9, 2, 0),
                              fastblur(luma_image, 13, 9, 2, 1))


class TestFastBlurValues:
    """Pixel values produced by the sliding window."""

    @pytest.mark.parametrize("value", [0, 1, 128, 255])
    @pytest.mark.parametrize("radius,steps", [(1, 1), (3, 3), (7, 2), (20, 1)])
    @pytest.mark.parametrize("method", METHODS)
    def test_flat_field_unchanged(self, value, radius, steps, method):
        image = np.full((6, 10), value, dtype=np.uint8)
        result = fastblur(image, 10, 6, radius, steps, method=method)
        assert np.all(result == value)

    def test_step_edge_triangular(self):
        """A 1x6 step edge ramps smoothly with weights 1, 2, 1."""
        row = bytes([0, 0, 0, 255, 255, 255])
        result = fastblur(row, 6, 1, 1)

        assert result.tolist() == [0, 0, 63, 191, 255, 255]
        assert np.all(np.diff(result.astype(int)) >= 0)

    def test_step_edge_uniform(self):
        row = bytes([0, 0, 0, 255, 255, 255])
        result = box_blur(row, 6, 1, 1)

        assert result.tolist() == [0, 0, 85, 170, 255, 255]
        assert np.all(np.diff(result.astype(int)) >= 0)

    def test_vertical_step_edge(self):
        """The same edge laid out as a 1x6 column."""
        column = bytes([0, 0, 0, 255, 255, 255])
        assert fastblur(column, 1, 6, 1).tolist() == [0, 0, 63, 191, 255, 255]

    def test_column_window_starts_from_column_neighbours(self):
        """The first output row weighs the rows below it, not its own row."""
        image = np.array([[90, 90, 90],
                          [0, 0, 0],
                          [0, 0, 0]], dtype=np.uint8)
        result = fastblur(image, 3, 3, 1)

        # (90 + 2*90 + 0) // 4, (90 + 0 + 0) // 4, 0
        assert result[:, 0].tolist() == [67, 22, 0]

    @pytest.mark.parametrize("radius,steps", [(1, 1), (2, 1), (3, 3), (5, 2), (15, 1)])
    def test_triangular_matches_reference(self, luma_image, radius, steps):
        result = fastblur(luma_image, 13, 9, radius, steps)
        expected = reference_blur(luma_image, radius, steps, triangular_weights(radius))
        assert np.array_equal(result, expected)

    @pytest.mark.parametrize("radius,steps", [(1, 1), (2, 1), (3, 3), (5, 2), (15, 1)])
    def test_uniform_matches_reference(self, luma_image, radius, steps):
        result = box_blur(luma_image, 13, 9, radius, steps)
        expected = reference_blur(luma_image, radius, steps, uniform_weights(radius))
        assert np.array_equal(result, expected)

    def test_single_pixel(self):
        assert fastblur(bytes([42]), 1, 1, 5, 3).tolist() == [42]

    def test_bounded(self, rng):
        image = rng.choice(np.array([0, 255], dtype=np.uint8), size=(16, 16))
        for method in METHODS:
            result = fastblur(image, 16, 16, 2, 2, method=method)
            assert result.min() >= 0
            assert result.max() <= 255

    def test_blur_reduces_variation(self, luma_image):
        result = fastblur(luma_image, 13, 9, 2, 2)
        assert result.astype(float).std() < luma_image.astype(float).std()


class TestMethodSelection:
    """Kernel choice by argument and by settings."""

    def test_method_as_string(self, luma_image):
        assert np.array_equal(fastblur(luma_image, 13, 9, 2, method="uniform"),
                              box_blur(luma_image, 13, 9, 2))

    def test_method_as_instance(self, luma_image):
        assert np.array_equal(fastblur(luma_image, 13, 9, 2, method=UniformKernel()),
                              box_blur(luma_image, 13, 9, 2))

    def test_default_method_from_settings(self, luma_image, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_BLUR_METHOD", "uniform")
        assert np.array_equal(fastblur(luma_image, 13, 9, 2),
                              box_blur(luma_image, 13, 9, 2))

    def test_unknown_method(self, luma_image):
        with pytest.raises(ValueError, match="Unknown blur method"):
            fastblur(luma_image, 13, 9, 2, method="median")


class TestFastBlurValidation:
    """Precondition checks."""

    def test_size_mismatch(self):
        with pytest.raises(ValueError, match="Expected 24 bytes"):
            fastblur(bytes(20), 6, 4, 1)

    def test_wrong_dtype(self):
        with pytest.raises(ValueError, match="uint8"):
            fastblur(np.zeros((4, 4), dtype=np.float32), 4, 4, 1)

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 4)])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ValueError, match="positive dimensions"):
            fastblur(bytes(16), width, height, 1)

    def test_negative_radius(self):
        with pytest.raises(ValueError, match="radius"):
            fastblur(bytes(16), 4, 4, -1)

    def test_negative_steps(self):
        with pytest.raises(ValueError, match="steps"):
            fastblur(bytes(16), 4, 4, 1, -2)

    def test_buffer_size_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_BUFFER_SIZE", 8)
        with pytest.raises(ValueError, match="exceeds limit"):
            fastblur(bytes(16), 4, 4, 1)

"""
Image Preparation Tests
=======================
"""

import numpy as np
import pytest

from spectramask.models.spectrum import SpectrumShapeError
from spectramask.stream.image import limited_size, resize_to_limit, to_luminance


class TestLimitedSize:
    """Tests for the resize-to-limit computation."""

    def test_landscape_is_limited_by_width(self):
        """1280x720 shrinks to 360 wide, height floored."""
        assert limited_size(1280, 720, 360) == (360, 202)

    def test_portrait_is_limited_by_height(self):
        """480x640 shrinks to 360 high."""
        assert limited_size(480, 640, 360) == (270, 360)

    def test_small_frames_are_unchanged(self):
        """Sizes within the limit are kept as-is."""
        assert limited_size(320, 240, 360) == (320, 240)
        assert limited_size(360, 360, 360) == (360, 360)

    def test_extreme_aspect_keeps_one_pixel(self):
        """The shorter side never collapses to zero."""
        assert limited_size(10000, 2, 360) == (360, 1)


class TestResizeToLimit:
    """Tests for image resizing."""

    def test_large_frame_is_resized(self):
        """A 1280x720 frame comes out 360x202."""
        image = np.zeros((720, 1280, 3), dtype=np.uint8)
        resized = resize_to_limit(image, 360)
        assert resized.shape == (202, 360, 3)
        assert resized.dtype == np.uint8

    def test_small_frame_is_returned_as_is(self):
        """No copy is made when no resize is needed."""
        image = np.zeros((100, 80, 3), dtype=np.uint8)
        assert resize_to_limit(image, 360) is image

    def test_invalid_limit_rejected(self):
        """The limit must be positive."""
        with pytest.raises(ValueError):
            resize_to_limit(np.zeros((4, 4, 3), dtype=np.uint8), 0)


class TestToLuminance:
    """Tests for BGR -> luminance conversion."""

    def test_gray_bgr_keeps_its_level(self):
        """Equal channels convert to the same gray level."""
        image = np.full((6, 9, 3), 200, dtype=np.uint8)
        luminance = to_luminance(image)

        assert luminance.shape == (6, 9)
        assert luminance.dtype == np.float32
        assert np.allclose(luminance, 200.0)

    def test_green_dominates_luminance(self):
        """Channel weights follow the BT.601 luma formula."""
        blue = np.zeros((2, 2, 3), dtype=np.uint8)
        blue[..., 0] = 255
        green = np.zeros((2, 2, 3), dtype=np.uint8)
        green[..., 1] = 255

        assert to_luminance(green)[0, 0] > to_luminance(blue)[0, 0]

    def test_rejects_single_channel(self):
        """A plain 2D plane is not a BGR frame."""
        with pytest.raises(SpectrumShapeError):
            to_luminance(np.zeros((4, 4), dtype=np.uint8))

    def test_rejects_float_image(self):
        """Frames must be uint8."""
        with pytest.raises(SpectrumShapeError):
            to_luminance(np.zeros((4, 4, 3), dtype=np.float32))

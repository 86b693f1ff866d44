"""
Image Preparation
=================

Resizing and luminance conversion of decoded frames.

Design Rules:
    - Validates shape and dtype, fails fast on malformed images
    - Resize preserves aspect ratio and is computed in one step
"""

import logging
import math

import cv2
import numpy as np

from spectramask.models.spectrum import SpectrumShapeError


logger = logging.getLogger(__name__)


def _check_bgr(image: np.ndarray) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise SpectrumShapeError(f"Expected BGR image (H, W, 3), got {image.shape}")
    if image.dtype != np.uint8:
        raise SpectrumShapeError(f"Expected uint8 image, got {image.dtype}")
    if image.size == 0:
        raise SpectrumShapeError("Image is empty")


def limited_size(width: int, height: int, max_dim: int) -> tuple:
    """
    Compute the (width, height) that brings the longer side to max_dim.

    The shorter side is scaled by the same factor and floored. Sizes
    already within the limit are returned unchanged.
    """
    if width <= max_dim and height <= max_dim:
        return width, height

    if width >= height:
        new_height = math.floor(height * (max_dim / width))
        return max_dim, max(1, new_height)

    new_width = math.floor(width * (max_dim / height))
    return max(1, new_width), max_dim


def resize_to_limit(image: np.ndarray, max_dim: int) -> np.ndarray:
    """
    Shrink an image so its longer side is at most max_dim.

    Args:
        image: Image (H, W) or (H, W, C)
        max_dim: Dimension limit in pixels

    Returns:
        The input if already within the limit, otherwise a resized copy
    """
    if max_dim <= 0:
        raise ValueError(f"max_dim must be > 0, got {max_dim}")

    height, width = image.shape[:2]
    new_width, new_height = limited_size(width, height, max_dim)
    if (new_width, new_height) == (width, height):
        return image

    return cv2.resize(image, (new_width, new_height), interpolation=cv2.INTER_AREA)


def to_luminance(image: np.ndarray) -> np.ndarray:
    """
    Convert a BGR frame to a float32 luminance plane.

    Args:
        image: BGR image (H, W, 3), dtype=uint8

    Returns:
        Luminance plane (H, W), dtype=float32, values in [0, 255]

    Raises:
        SpectrumShapeError: If the image is not 3-channel uint8
    """
    _check_bgr(image)
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return gray.astype(np.float32)

"""
Visualization Module
====================

Turn float planes into displayable images.

This module generates PURELY DESCRIPTIVE artifacts. Nothing here feeds
back into the spectrum or the mask.

Artifacts:
    - Min-max normalized grayscale (reconstruction)
    - False-colored planes (log-magnitude, phase)
    - Measured FPS overlay on the input view
"""

import logging
from typing import Optional

import cv2
import numpy as np


logger = logging.getLogger(__name__)


def colormap_code(name: str) -> int:
    """Resolve an OpenCV colormap name such as 'JET' to its constant."""
    return getattr(cv2, f"COLORMAP_{name.upper()}")


def normalize_to_u8(plane: np.ndarray) -> np.ndarray:
    """
    Stretch a plane to the full 0..255 range.

    Args:
        plane: Float plane (H, W)

    Returns:
        uint8 plane (H, W). A constant plane maps to zeros.
    """
    return cv2.normalize(plane, None, 0, 255, cv2.NORM_MINMAX, dtype=cv2.CV_8U)


def false_color(plane: np.ndarray, colormap: str = "JET") -> np.ndarray:
    """
    Normalize a plane and apply an OpenCV colormap.

    Returns:
        BGR image (H, W, 3), dtype=uint8
    """
    return cv2.applyColorMap(normalize_to_u8(plane), colormap_code(colormap))


def draw_fps(image: np.ndarray, fps: Optional[float]) -> np.ndarray:
    """
    Draw the measured frame rate near the bottom-left corner.

    Draws on a copy; the input is left untouched.
    """
    canvas = image.copy()
    if fps is None:
        return canvas

    h = canvas.shape[0]
    cv2.putText(
        canvas,
        f"{fps:.1f}",
        (10, max(12, h - 40)),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.5,
        (255, 255, 255),
        2,
        cv2.LINE_8,
    )
    return canvas

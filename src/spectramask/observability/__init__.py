"""
Observability Module
====================

Display artifacts for the spectral pipeline.

Components:
    - normalize_to_u8: Min-max stretch of a float plane
    - false_color: Colormapped view of a plane
    - draw_fps: Frame rate overlay

Visualization never influences filtering.
"""

from spectramask.observability.visualization import (
    colormap_code,
    draw_fps,
    false_color,
    normalize_to_u8,
)

__all__ = [
    "colormap_code",
    "draw_fps",
    "false_color",
    "normalize_to_u8",
]

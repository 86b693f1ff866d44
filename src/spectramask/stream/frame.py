"""
Frame Data Model
=================

Internal frame representation for the acquisition layer.

Design Rules:
    - This is the ONLY frame format passed to the pipeline
    - Image is BGR uint8 (H, W, 3), already resized to the dimension limit
    - One Frame per loop iteration; it is replaced every iteration
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Frame:
    """
    Decoded frame from a video source.

    Attributes:
        frame_id: Monotonically increasing counter assigned by the source
        timestamp: perf_counter time at which the frame was read
        image: BGR image as np.ndarray (H, W, 3), dtype=uint8
    """

    frame_id: int
    timestamp: float
    image: np.ndarray

    @property
    def shape(self) -> tuple:
        """(height, width) of the image."""
        return self.image.shape[:2]

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full image."""
        return (
            f"Frame(frame_id={self.frame_id}, "
            f"timestamp={self.timestamp:.3f}, "
            f"shape={self.image.shape})"
        )

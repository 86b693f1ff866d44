"""
Video Sources
=============

Frame acquisition from a camera or a video file.

This module provides the VideoSource protocol consumed by the pipeline
and the OpenCVVideoSource implementation backed by cv2.VideoCapture.

Design Rules:
    - Opening failures raise VideoSourceError
    - A failed read returns None; end-of-stream and hard failure are
      reported identically and never retried
    - Frames are resized to the dimension limit before they are returned
"""

import logging
import time
from typing import Optional, Protocol

import cv2

from spectramask.stream.frame import Frame
from spectramask.stream.image import resize_to_limit


logger = logging.getLogger(__name__)


FALLBACK_FPS = 30.0


class VideoSourceError(Exception):
    """Raised when a video source cannot be opened or read."""
    pass


class VideoSource(Protocol):
    """
    Protocol for frame sources.

    The pipeline only needs frames and the nominal frame rate.
    """

    @property
    def fps(self) -> float:
        """Nominal frames per second (> 0)."""
        ...

    def read(self) -> Optional[Frame]:
        """Next frame, or None on end-of-stream or failure."""
        ...

    def release(self) -> None:
        """Release the underlying device or file."""
        ...


class OpenCVVideoSource:
    """
    cv2.VideoCapture-backed video source.

    Use the open_camera / open_file constructors rather than __init__.

    Attributes:
        description: Human-readable origin (device index or path)
        max_dimension: Longest side of returned frames
        frames_read: Number of frames successfully read
    """

    def __init__(
        self,
        capture: cv2.VideoCapture,
        description: str,
        max_dimension: int = 360,
    ) -> None:
        """
        Wrap an opened capture.

        Raises:
            VideoSourceError: If the capture is not opened
        """
        if not capture.isOpened():
            raise VideoSourceError(f"Couldn't open video: {description}")

        self._capture = capture
        self.description = description
        self.max_dimension = max_dimension
        self.frames_read: int = 0

        logger.info(
            f"Video source opened: {description}, "
            f"nominal fps={self.fps:.1f}, max_dimension={max_dimension}"
        )

    @classmethod
    def open_camera(
        cls,
        index: int = 0,
        fps: int = 26,
        max_dimension: int = 360,
    ) -> "OpenCVVideoSource":
        """
        Open a live camera feed.

        Args:
            index: OpenCV device index
            fps: Frame rate requested from the device
            max_dimension: Longest side of returned frames
        """
        capture = cv2.VideoCapture(index)
        capture.set(cv2.CAP_PROP_FPS, fps)
        return cls(capture, f"camera:{index}", max_dimension=max_dimension)

    @classmethod
    def open_file(cls, path: str, max_dimension: int = 360) -> "OpenCVVideoSource":
        """
        Open a video file.

        Raises:
            VideoSourceError: If no path was given or it cannot be opened
        """
        if not path:
            raise VideoSourceError("No video file selected")
        return cls(cv2.VideoCapture(path), path, max_dimension=max_dimension)

    @property
    def fps(self) -> float:
        """Nominal frame rate reported by the capture, or the fallback."""
        fps = float(self._capture.get(cv2.CAP_PROP_FPS) or 0.0)
        if fps <= 0:
            return FALLBACK_FPS
        return fps

    def read_raw(self):
        """Read a frame without resizing or wrapping (calibration preview)."""
        ok, image = self._capture.read()
        return image if ok else None

    def read(self) -> Optional[Frame]:
        """
        Read, resize and wrap the next frame.

        Returns:
            Frame, or None if the capture yields nothing
        """
        ok, image = self._capture.read()
        if not ok or image is None:
            logger.info(f"Video source {self.description} returned no frame")
            return None

        image = resize_to_limit(image, self.max_dimension)
        frame = Frame(
            frame_id=self.frames_read,
            timestamp=time.perf_counter(),
            image=image,
        )
        self.frames_read += 1
        return frame

    def release(self) -> None:
        """Release the capture."""
        self._capture.release()
        logger.info(f"Video source released: {self.description}")

    def __enter__(self) -> "OpenCVVideoSource":
        return self

    def __exit__(self, *args) -> None:
        self.release()

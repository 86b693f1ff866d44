"""
Camera Calibration Preview
==========================

Raw preview of a live feed so the user can align the shot before the
spectral loop starts. The preview ends on any key press.
"""

import logging

import cv2

from spectramask.stream.source import OpenCVVideoSource, VideoSourceError


logger = logging.getLogger(__name__)


PREVIEW_WINDOW = "Test"


def calibrate(
    source: OpenCVVideoSource,
    window_name: str = PREVIEW_WINDOW,
    delay_ms: int = 30,
) -> int:
    """
    Show raw frames until a key is pressed.

    Args:
        source: Opened live source
        window_name: Title of the preview window
        delay_ms: Key poll timeout per preview frame

    Returns:
        Number of preview frames shown

    Raises:
        VideoSourceError: If a frame cannot be read
    """
    logger.info(f"Calibration preview started on {source.description}")
    shown = 0
    try:
        while True:
            image = source.read_raw()
            if image is None:
                raise VideoSourceError("Couldn't get video frame.")
            cv2.imshow(window_name, image)
            shown += 1

            if cv2.waitKey(delay_ms) >= 0:
                break
    finally:
        cv2.destroyWindow(window_name)

    logger.info(f"Calibration preview finished after {shown} frames")
    return shown

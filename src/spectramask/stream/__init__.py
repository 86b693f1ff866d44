"""
Stream Module
=============

Frame acquisition for SpectraMask.

This module provides the acquisition layer:
    - Frame: Typed frame data model (internal representation)
    - VideoSource: Protocol consumed by the pipeline
    - OpenCVVideoSource: Camera / file capture with resize-to-limit
    - calibrate: Live-feed preview before the spectral loop
    - to_luminance, resize_to_limit: Image preparation

Example:
    from spectramask.stream import OpenCVVideoSource, calibrate

    source = OpenCVVideoSource.open_camera(index=0, fps=26)
    calibrate(source)

    while (frame := source.read()) is not None:
        process(frame)
"""

from spectramask.stream.frame import Frame
from spectramask.stream.image import limited_size, resize_to_limit, to_luminance
from spectramask.stream.source import (
    FALLBACK_FPS,
    OpenCVVideoSource,
    VideoSource,
    VideoSourceError,
)
from spectramask.stream.calibration import calibrate


__all__ = [
    "Frame",
    "FALLBACK_FPS",
    "OpenCVVideoSource",
    "VideoSource",
    "VideoSourceError",
    "calibrate",
    "limited_size",
    "resize_to_limit",
    "to_luminance",
]

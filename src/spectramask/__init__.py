"""
SpectraMask
===========

Interactive frequency-domain filtering of live video.

Each frame is converted to luminance, transformed to the 2D frequency
domain, decomposed into log-magnitude and phase, masked by a persistent
user-painted mask, and reconstructed back into the spatial domain.

Components:
    - spectrum: Transform engine, polar decomposition, quadrant centering
    - mask: Persistent mask store and pointer state machine
    - stream: Frame model and video sources (camera / file)
    - display: Display sink abstraction and OpenCV windows
    - pipeline: Per-frame orchestration, pacing and the video loop

Example:
    from spectramask.pipeline import SpectralPipeline
    from spectramask.display import OpenCVDisplaySink
    from spectramask.stream import OpenCVVideoSource

    source = OpenCVVideoSource.open_file("clip.mp4")
    pipeline = SpectralPipeline(sink=OpenCVDisplaySink())
    result = pipeline.run(source)
"""

__version__ = "0.1.0"
__author__ = "SpectraMask Project"

__all__ = [
    "__version__",
]

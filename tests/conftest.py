"""
Test Configuration
==================

Pytest fixtures and in-memory collaborators for SpectraMask.
"""

from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import pytest

from spectramask.models.channels import OutputChannel
from spectramask.models.pointer import PointerEventKind
from spectramask.stream.frame import Frame


class RecordingDisplaySink:
    """
    Display sink that keeps every shown image in memory.

    poll() first replays the pointer events scripted for that poll call
    (by call index) through the bound handler, then returns the scripted
    key code (or -1).
    """

    def __init__(
        self,
        keys: Optional[List[int]] = None,
        events: Optional[Dict[int, List[Tuple[PointerEventKind, int, int]]]] = None,
    ) -> None:
        self.shown: List[Tuple[OutputChannel, np.ndarray]] = []
        self.handlers: Dict[OutputChannel, Callable] = {}
        self.keys = list(keys or [])
        self.events = events or {}
        self.poll_count = 0
        self.closed = False

    def show(self, channel, image):
        self.shown.append((channel, image.copy()))

    def bind_pointer(self, channel, handler):
        self.handlers[channel] = handler

    def unbind_pointer(self, channel):
        self.handlers.pop(channel, None)

    def poll(self, delay_ms=1):
        handler = self.handlers.get(OutputChannel.MAGNITUDE)
        for kind, x, y in self.events.get(self.poll_count, []):
            if handler is not None:
                handler(kind, x, y)
        self.poll_count += 1
        return self.keys.pop(0) if self.keys else -1

    def close(self):
        self.closed = True

    def last(self, channel):
        for shown_channel, image in reversed(self.shown):
            if shown_channel is channel:
                return image
        return None


class ListVideoSource:
    """Video source that yields a fixed list of frames, then None."""

    def __init__(self, images: List[np.ndarray], fps: float = 1000.0) -> None:
        self._images = list(images)
        self._fps = fps
        self.reads = 0
        self.released = False

    @property
    def fps(self):
        return self._fps

    def read(self):
        if self.reads >= len(self._images):
            self.reads += 1
            return None
        image = self._images[self.reads]
        frame = Frame(frame_id=self.reads, timestamp=float(self.reads), image=image)
        self.reads += 1
        return frame

    def release(self):
        self.released = True


def make_bgr(luma: np.ndarray) -> np.ndarray:
    """Stack a uint8 plane into a gray BGR image."""
    plane = np.clip(luma, 0, 255).astype(np.uint8)
    return np.dstack([plane, plane, plane])


@pytest.fixture
def recording_sink():
    """Provide an empty RecordingDisplaySink."""
    return RecordingDisplaySink()


@pytest.fixture
def textured_image():
    """64x64 BGR image with a deterministic mix of low and high frequencies."""
    yy, xx = np.mgrid[0:64, 0:64]
    luma = (
        128
        + 60 * np.sin(2 * np.pi * xx / 16.0)
        + 40 * np.cos(2 * np.pi * yy / 8.0)
        + 20 * np.sin(2 * np.pi * (xx + yy) / 5.0)
    )
    return make_bgr(luma)


@pytest.fixture
def random_plane():
    """Random float32 plane with odd dimensions."""
    rng = np.random.default_rng(seed=7)
    return (rng.random((33, 47)) * 255.0).astype(np.float32)


@pytest.fixture
def sample_frame(textured_image):
    """Provide a Frame wrapping the textured image."""
    return Frame(frame_id=0, timestamp=0.0, image=textured_image)

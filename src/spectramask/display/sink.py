"""
Display Sink
============

Window output and pointer input for the spectral pipeline.

This module provides the DisplaySink protocol consumed by the pipeline
and the OpenCVDisplaySink implementation backed by cv2.imshow.

Design Rules:
    - Views are addressed by OutputChannel, never by window title
    - Pointer handlers receive normalized PointerEventKind values
    - Pointer events are delivered synchronously inside poll()
"""

import logging
from typing import Callable, Dict, Optional, Protocol

import cv2
import numpy as np

from spectramask.config import DisplayConfig
from spectramask.models.channels import OutputChannel
from spectramask.models.pointer import PointerEventKind


logger = logging.getLogger(__name__)


PointerHandler = Callable[[PointerEventKind, int, int], None]


# OpenCV mouse event code -> normalized event kind
_CV_EVENTS: Dict[int, PointerEventKind] = {
    cv2.EVENT_LBUTTONDOWN: PointerEventKind.PRESS,
    cv2.EVENT_MOUSEMOVE: PointerEventKind.MOVE,
    cv2.EVENT_LBUTTONUP: PointerEventKind.RELEASE,
    cv2.EVENT_RBUTTONDBLCLK: PointerEventKind.ALT_DOUBLE_CLICK,
}


def translate_mouse_event(event: int) -> Optional[PointerEventKind]:
    """Map an OpenCV mouse event code to a PointerEventKind (None if unused)."""
    return _CV_EVENTS.get(event)


class DisplaySink(Protocol):
    """
    Protocol for display backends.

    show() is keyed by channel so repeated calls update the same view.
    """

    def show(self, channel: OutputChannel, image: np.ndarray) -> None:
        """Display an image on a channel."""
        ...

    def bind_pointer(self, channel: OutputChannel, handler: PointerHandler) -> None:
        """Route pointer events of a channel's view to handler."""
        ...

    def unbind_pointer(self, channel: OutputChannel) -> None:
        """Stop routing pointer events of a channel's view."""
        ...

    def poll(self, delay_ms: int) -> int:
        """Process pending events; return the key pressed or -1."""
        ...

    def close(self) -> None:
        """Destroy all views."""
        ...


def _ignore_mouse(event, x, y, flags, userdata) -> None:
    return None


class OpenCVDisplaySink:
    """
    HighGUI window sink.

    Each OutputChannel maps to one auto-sized window, so pointer
    coordinates map 1:1 to image pixels.
    """

    def __init__(self, config: Optional[DisplayConfig] = None) -> None:
        """
        Initialize display sink.

        Args:
            config: Window titles; defaults to DisplayConfig()
        """
        config = config or DisplayConfig()
        self._titles: Dict[OutputChannel, str] = {
            OutputChannel.ORIGINAL: config.original_window,
            OutputChannel.MAGNITUDE: config.magnitude_window,
            OutputChannel.PHASE: config.phase_window,
            OutputChannel.RECONSTRUCTED: config.reconstructed_window,
        }
        self._handlers: Dict[OutputChannel, PointerHandler] = {}
        self._opened: set = set()

    def title(self, channel: OutputChannel) -> str:
        """Window title of a channel."""
        return self._titles[channel]

    def _ensure_window(self, channel: OutputChannel) -> str:
        title = self._titles[channel]
        if channel not in self._opened:
            cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
            self._opened.add(channel)
        return title

    def show(self, channel: OutputChannel, image: np.ndarray) -> None:
        cv2.imshow(self._ensure_window(channel), image)

    def bind_pointer(self, channel: OutputChannel, handler: PointerHandler) -> None:
        title = self._ensure_window(channel)

        def on_mouse(event, x, y, flags, userdata):
            kind = translate_mouse_event(event)
            if kind is not None:
                handler(kind, x, y)

        self._handlers[channel] = handler
        cv2.setMouseCallback(title, on_mouse)
        logger.debug(f"Pointer handler bound to window '{title}'")

    def unbind_pointer(self, channel: OutputChannel) -> None:
        if self._handlers.pop(channel, None) is None:
            return
        if channel in self._opened:
            cv2.setMouseCallback(self._titles[channel], _ignore_mouse)
        logger.debug(f"Pointer handler removed from window '{self._titles[channel]}'")

    def poll(self, delay_ms: int = 1) -> int:
        return cv2.waitKey(delay_ms)

    def close(self) -> None:
        for channel in list(self._handlers):
            self.unbind_pointer(channel)
        cv2.destroyAllWindows()
        self._opened.clear()

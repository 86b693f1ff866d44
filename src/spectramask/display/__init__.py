"""
Display Module
==============

Output views and pointer input.

Example:
    from spectramask.display import OpenCVDisplaySink
    from spectramask.models import OutputChannel

    sink = OpenCVDisplaySink()
    sink.show(OutputChannel.ORIGINAL, frame.image)
    key = sink.poll(1)
"""

from spectramask.display.sink import (
    DisplaySink,
    OpenCVDisplaySink,
    PointerHandler,
    translate_mouse_event,
)

__all__ = [
    "DisplaySink",
    "OpenCVDisplaySink",
    "PointerHandler",
    "translate_mouse_event",
]

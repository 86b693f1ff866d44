"""
Pointer Models
==============

Normalized pointer events consumed by the mask store.

The display layer translates toolkit-specific mouse events into
PointerEventKind values; nothing downstream depends on OpenCV event codes.
"""

from dataclasses import dataclass
from enum import Enum


class PointerEventKind(str, Enum):
    """
    Pointer events relevant to mask painting.

    Attributes:
        PRESS: Primary button pressed
        MOVE: Pointer moved (with or without a button held)
        RELEASE: Primary button released
        ALT_DOUBLE_CLICK: Double-click of the alternate button (mask reset)
    """

    PRESS = "PRESS"
    MOVE = "MOVE"
    RELEASE = "RELEASE"
    ALT_DOUBLE_CLICK = "ALT_DOUBLE_CLICK"


@dataclass(slots=True)
class PointerState:
    """
    Interaction state of one painting session.

    Attributes:
        drawing: Whether the primary button is currently held
        last_x: X coordinate of the last event
        last_y: Y coordinate of the last event
    """

    drawing: bool = False
    last_x: int = -1
    last_y: int = -1

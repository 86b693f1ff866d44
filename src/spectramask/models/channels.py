"""
Output Channels
===============

Named views handed to the display sink.
"""

from enum import Enum


class OutputChannel(str, Enum):
    """
    Views produced for every processed frame.

    Attributes:
        ORIGINAL: The resized input frame
        MAGNITUDE: Masked log-magnitude, zero frequency at the center
        PHASE: Phase plane, native layout
        RECONSTRUCTED: Spatial-domain frame rebuilt from the masked spectrum
    """

    ORIGINAL = "ORIGINAL"
    MAGNITUDE = "MAGNITUDE"
    PHASE = "PHASE"
    RECONSTRUCTED = "RECONSTRUCTED"

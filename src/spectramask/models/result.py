"""
Result Models
=============

Per-frame and per-run outcomes of the spectral pipeline.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


@dataclass(frozen=True, slots=True)
class SpectralFrameResult:
    """
    Everything computed for one frame.

    Attributes:
        frame_id: Identifier of the source frame
        luminance: Float32 luminance plane fed to the transform
        masked_magnitude: Masked log-magnitude, zero frequency centered
        phase: Phase plane in radians, native layout
        reconstructed: Real spatial-domain plane after orientation correction
        elapsed_ms: Processing time of the frame
    """

    frame_id: int
    luminance: np.ndarray
    masked_magnitude: np.ndarray
    phase: np.ndarray
    reconstructed: np.ndarray
    elapsed_ms: float

    def __repr__(self) -> str:
        return (
            f"SpectralFrameResult(frame_id={self.frame_id}, "
            f"shape={self.luminance.shape}, "
            f"elapsed_ms={self.elapsed_ms:.2f})"
        )


class LoopOutcome(str, Enum):
    """
    How the video loop ended.

    Attributes:
        SUCCESS: Stop requested by the user
        FAILURE: The video source stopped yielding frames
    """

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True, slots=True)
class LoopResult:
    """Outcome of a video loop run."""

    outcome: LoopOutcome
    frames_processed: int

    @property
    def exit_code(self) -> int:
        return 0 if self.outcome is LoopOutcome.SUCCESS else 1

    def to_dict(self) -> dict:
        """Export as dictionary for logging."""
        return {
            "outcome": self.outcome.value,
            "frames_processed": self.frames_processed,
        }

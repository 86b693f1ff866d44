"""
Pipeline Module
===============

Per-frame orchestration and the paced video loop.
"""

from spectramask.pipeline.orchestrator import SpectralPipeline
from spectramask.pipeline.pacing import FpsCounter, FramePacer

__all__ = [
    "SpectralPipeline",
    "FramePacer",
    "FpsCounter",
]

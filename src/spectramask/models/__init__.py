"""
Data Models
===========

Typed containers shared across SpectraMask components.

Models:
    Spectrum:
        - ComplexSpectrum: (real, imag) planes
        - PolarSpectrum: (log_magnitude, phase) planes
        - SpectrumShapeError: Shape contract violation

    Display:
        - OutputChannel: Named views handed to the display sink

    Interaction:
        - PointerEventKind: Normalized pointer events
        - PointerState: Drawing flag and last pointer position

    Results:
        - SpectralFrameResult: Planes computed for one frame
        - LoopOutcome, LoopResult: Video loop outcome
"""

from spectramask.models.spectrum import ComplexSpectrum, PolarSpectrum, SpectrumShapeError
from spectramask.models.channels import OutputChannel
from spectramask.models.pointer import PointerEventKind, PointerState
from spectramask.models.result import LoopOutcome, LoopResult, SpectralFrameResult

__all__ = [
    # Spectrum
    "ComplexSpectrum",
    "PolarSpectrum",
    "SpectrumShapeError",
    # Display
    "OutputChannel",
    # Interaction
    "PointerEventKind",
    "PointerState",
    # Results
    "SpectralFrameResult",
    "LoopOutcome",
    "LoopResult",
]

"""
Spectrum Module
===============

Frequency-domain building blocks of the pipeline.

This module provides:
    - DFT transform engine (forward / inverse, single precision)
    - Log-polar decomposition and recomposition
    - Quadrant centering of spectra and masks

No masking and no display logic here; see spectramask.mask and
spectramask.pipeline.
"""

from spectramask.spectrum.transform import TransformEngine, DFTTransformEngine
from spectramask.spectrum.decomposition import to_polar, to_complex
from spectramask.spectrum.centering import center_swap, centered

__all__ = [
    # Transform
    "TransformEngine",
    "DFTTransformEngine",
    # Decomposition
    "to_polar",
    "to_complex",
    # Centering
    "center_swap",
    "centered",
]

"""
Spectrum Decomposition
======================

Conversion between the complex (real, imag) spectrum and the log-polar
(log_magnitude, phase) form used for display and masking.

Formulas:
    magnitude     = sqrt(re^2 + im^2)
    phase         = atan2(im, re)            (radians, not log-scaled)
    log_magnitude = log(1 + magnitude)       (>= 0)

    magnitude     = max(exp(log_magnitude) - 1, 0)
    re, im        = magnitude * cos(phase), magnitude * sin(phase)

log1p / expm1 keep the round trip accurate for small magnitudes, where a
plain exp(x) - 1 loses most of its significant digits.
"""

import logging

import cv2
import numpy as np

from spectramask.models.spectrum import ComplexSpectrum, PolarSpectrum


logger = logging.getLogger(__name__)


def to_polar(spectrum: ComplexSpectrum) -> PolarSpectrum:
    """
    Decompose a complex spectrum into log-magnitude and phase.

    Args:
        spectrum: Complex spectrum

    Returns:
        PolarSpectrum with float32 planes
    """
    magnitude = cv2.magnitude(spectrum.real, spectrum.imag)
    phase = np.arctan2(spectrum.imag, spectrum.real)

    log_magnitude = np.log1p(magnitude)

    return PolarSpectrum(
        log_magnitude=log_magnitude.astype(np.float32, copy=False),
        phase=phase.astype(np.float32, copy=False),
    )


def to_complex(log_magnitude: np.ndarray, phase: np.ndarray) -> ComplexSpectrum:
    """
    Recompose a complex spectrum from log-magnitude and phase.

    Magnitudes that come out slightly negative from rounding are clamped
    to zero.

    Args:
        log_magnitude: log(1 + magnitude) plane, possibly masked
        phase: Phase plane in radians

    Returns:
        ComplexSpectrum with float32 planes
    """
    polar = PolarSpectrum(log_magnitude=log_magnitude, phase=phase)

    magnitude = np.expm1(polar.log_magnitude.astype(np.float32, copy=False))
    np.maximum(magnitude, 0.0, out=magnitude)

    phase32 = polar.phase.astype(np.float32, copy=False)
    real = magnitude * np.cos(phase32)
    imag = magnitude * np.sin(phase32)

    return ComplexSpectrum(
        real=real.astype(np.float32, copy=False),
        imag=imag.astype(np.float32, copy=False),
    )

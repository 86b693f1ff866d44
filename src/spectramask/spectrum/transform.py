"""
Transform Engine
================

Forward and inverse 2D discrete Fourier transform between a real
single-channel plane and a two-plane complex spectrum.

This module uses OpenCV's cv2.dft on single-precision data. No padding to
an optimal DFT size is applied, so the spectrum always has exactly the
dimensions of the input plane.

Scaling Convention:
    forward: unnormalized, F[k] = sum_n x[n] e^{-2 pi i k n / N}
    inverse: scaled by 1 / (rows * cols), so inverse(forward(x)) ~= x

Mirrored Inverse:
    Applying the forward transform to a spectrum (instead of the inverse)
    yields the signal mirrored through the origin, x[(-n) mod N]. The
    pipeline can reconstruct this way and undo the mirror with a flip of
    both axes; see SpectralPipeline.
"""

import logging
from typing import Protocol

import cv2
import numpy as np

from spectramask.models.spectrum import ComplexSpectrum, SpectrumShapeError


logger = logging.getLogger(__name__)


class TransformEngine(Protocol):
    """
    Protocol for spectral transform backends.

    Implementations map a real (H, W) plane to a ComplexSpectrum of the
    same size and back.
    """

    def forward(self, luminance: np.ndarray) -> ComplexSpectrum:
        """Transform a real plane to its complex spectrum."""
        ...

    def inverse(self, spectrum: ComplexSpectrum, mirrored: bool = False) -> np.ndarray:
        """Transform a spectrum back to a real plane."""
        ...


class DFTTransformEngine:
    """
    OpenCV DFT transform engine.

    The real input plane is embedded next to a zero imaginary plane in
    OpenCV's interleaved (H, W, 2) layout before transforming. Only the
    real part of the inverse result is returned.
    """

    def forward(self, luminance: np.ndarray) -> ComplexSpectrum:
        """
        Compute the unnormalized forward 2D DFT.

        Args:
            luminance: Real plane (H, W), any numeric dtype

        Returns:
            ComplexSpectrum with planes of shape (H, W), float32

        Raises:
            SpectrumShapeError: If the input is not a non-empty 2D plane
        """
        if luminance.ndim != 2:
            raise SpectrumShapeError(
                f"Forward transform needs a single-channel plane. Got shape: {luminance.shape}"
            )
        if luminance.size == 0:
            raise SpectrumShapeError("Forward transform needs a non-empty plane")

        real = luminance.astype(np.float32, copy=False)
        planes = np.dstack([real, np.zeros_like(real)])

        output = cv2.dft(planes, flags=cv2.DFT_COMPLEX_OUTPUT)
        return ComplexSpectrum.from_interleaved(output)

    def inverse(self, spectrum: ComplexSpectrum, mirrored: bool = False) -> np.ndarray:
        """
        Compute the scaled 2D transform back to the spatial domain.

        Args:
            spectrum: Complex spectrum (H, W)
            mirrored: Use the forward-direction transform, returning the
                reconstruction mirrored through the origin

        Returns:
            Real plane (H, W), float32. The imaginary part is discarded.
        """
        planes = spectrum.to_interleaved()
        flags = cv2.DFT_COMPLEX_OUTPUT | cv2.DFT_SCALE

        if mirrored:
            output = cv2.dft(planes, flags=flags)
        else:
            output = cv2.idft(planes, flags=flags)

        return np.ascontiguousarray(output[..., 0])

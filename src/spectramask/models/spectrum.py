"""
Spectrum Models
===============

Containers for the two-plane spectrum representations.

Both containers hold two co-sized float32 planes. The planes are
validated together at construction and are never resized independently.

Representations:
    ComplexSpectrum: (real, imag) planes produced by the forward transform
    PolarSpectrum:   (log_magnitude, phase) planes, log_magnitude = log(1 + |F|)
"""

from dataclasses import dataclass

import numpy as np


class SpectrumShapeError(ValueError):
    """Raised when planes, masks or frames violate the shape contract."""
    pass


def _check_pair(first: np.ndarray, second: np.ndarray, names: str) -> None:
    if first.ndim != 2 or second.ndim != 2:
        raise SpectrumShapeError(
            f"{names} planes must be 2D. Got shapes: {first.shape}, {second.shape}"
        )
    if first.shape != second.shape:
        raise SpectrumShapeError(
            f"{names} planes must have identical shapes. Got: "
            f"{first.shape} vs {second.shape}"
        )
    if first.size == 0:
        raise SpectrumShapeError(f"{names} planes must be non-empty")


@dataclass(frozen=True, slots=True)
class ComplexSpectrum:
    """
    Complex spectrum as separate real and imaginary planes.

    Attributes:
        real: Real part (H, W), float32
        imag: Imaginary part (H, W), float32
    """

    real: np.ndarray
    imag: np.ndarray

    def __post_init__(self) -> None:
        _check_pair(self.real, self.imag, "Complex spectrum")

    @property
    def shape(self) -> tuple:
        return self.real.shape

    @property
    def magnitude(self) -> np.ndarray:
        """Linear magnitude at each cell."""
        return np.sqrt(self.real ** 2 + self.imag ** 2)

    def to_interleaved(self) -> np.ndarray:
        """Two-channel (H, W, 2) array in OpenCV's complex layout."""
        return np.dstack([self.real, self.imag]).astype(np.float32)

    @classmethod
    def from_interleaved(cls, planes: np.ndarray) -> "ComplexSpectrum":
        """Build from an OpenCV (H, W, 2) complex array."""
        if planes.ndim != 3 or planes.shape[2] != 2:
            raise SpectrumShapeError(
                f"Expected (H, W, 2) complex array, got {planes.shape}"
            )
        return cls(
            real=np.ascontiguousarray(planes[..., 0]),
            imag=np.ascontiguousarray(planes[..., 1]),
        )

    def __repr__(self) -> str:
        return f"ComplexSpectrum(shape={self.shape}, dtype={self.real.dtype})"


@dataclass(frozen=True, slots=True)
class PolarSpectrum:
    """
    Spectrum in log-polar form.

    Attributes:
        log_magnitude: log(1 + magnitude), always >= 0
        phase: Phase angle in radians, in [-pi, pi]
    """

    log_magnitude: np.ndarray
    phase: np.ndarray

    def __post_init__(self) -> None:
        _check_pair(self.log_magnitude, self.phase, "Polar spectrum")

    @property
    def shape(self) -> tuple:
        return self.log_magnitude.shape

    def __repr__(self) -> str:
        return f"PolarSpectrum(shape={self.shape}, dtype={self.log_magnitude.dtype})"

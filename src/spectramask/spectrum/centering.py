"""
Centering Remap
===============

Quadrant swap that moves the zero-frequency component of a DFT spectrum
to the center of the grid.

The grid is split at (rows // 2, cols // 2) into four quadrants of size
(rows // 2, cols // 2); diagonal pairs are exchanged in place:

    +----+----+        +----+----+
    | q0 | q1 |        | q3 | q2 |
    +----+----+   ->   +----+----+
    | q2 | q3 |        | q1 | q0 |
    +----+----+        +----+----+

For odd dimensions the trailing row / column is outside all four
quadrants and stays where it is. The swap is therefore its own inverse
for every grid size, unlike np.fft.fftshift / ifftshift.
"""

import numpy as np

from spectramask.models.spectrum import SpectrumShapeError


def center_swap(grid: np.ndarray) -> np.ndarray:
    """
    Exchange diagonal quadrants of a grid in place.

    Works on (H, W) planes and on (H, W, C) images.

    Args:
        grid: Array to remap (modified in place)

    Returns:
        The same array, for chaining
    """
    if grid.ndim not in (2, 3):
        raise SpectrumShapeError(f"Cannot center a grid of shape {grid.shape}")

    cy = grid.shape[0] // 2
    cx = grid.shape[1] // 2

    # Top-Left <-> Bottom-Right
    tmp = grid[0:cy, 0:cx].copy()
    grid[0:cy, 0:cx] = grid[cy:2 * cy, cx:2 * cx]
    grid[cy:2 * cy, cx:2 * cx] = tmp

    # Top-Right <-> Bottom-Left
    tmp = grid[0:cy, cx:2 * cx].copy()
    grid[0:cy, cx:2 * cx] = grid[cy:2 * cy, 0:cx]
    grid[cy:2 * cy, 0:cx] = tmp

    return grid


def centered(grid: np.ndarray) -> np.ndarray:
    """Return a centered copy, leaving the input untouched."""
    return center_swap(grid.copy())

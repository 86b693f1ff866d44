"""
Mask Store
==========

Persistent binary frequency mask and the pointer state machine that
paints it.

The mask is stored in the *view* layout: zero frequency at the center,
exactly as the magnitude window shows it. Pointer coordinates from the
magnitude window therefore index the mask directly. The pipeline asks for
the native spectrum layout only for the duration of the masking step
(see MaskStore.spectrum_layout).

State Machine:
    Idle --PRESS--> Drawing      (stamp disk)
    Drawing --MOVE--> Drawing    (stamp disk)
    Drawing --RELEASE--> Idle    (stamp disk)
    any --ALT_DOUBLE_CLICK--> same state, mask reset to all-pass

Values:
    1 = passed, 0 = suppressed (uint8)

Threading:
    OpenCV delivers mouse callbacks inside cv2.waitKey on the thread that
    runs the video loop, so painting and masking never overlap. The lock
    keeps that ordering if events are ever delivered from another thread.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

import numpy as np

from spectramask.models.pointer import PointerEventKind, PointerState
from spectramask.models.spectrum import SpectrumShapeError
from spectramask.spectrum.centering import center_swap


logger = logging.getLogger(__name__)


PASSED = 1
SUPPRESSED = 0


class MaskStore:
    """
    Owner of the persistent frequency mask.

    The mask is created lazily at the size of the first frame and keeps
    that size for the lifetime of the store.

    Attributes:
        brush_radius: Radius of the disk stamped per pointer event
        pointer: Current pointer interaction state
    """

    def __init__(self, brush_radius: int = 20) -> None:
        """
        Initialize mask store.

        Args:
            brush_radius: Disk radius in pixels. Must be > 0.
        """
        if brush_radius <= 0:
            raise ValueError(f"brush_radius must be > 0, got {brush_radius}")

        self.brush_radius = brush_radius
        self.pointer = PointerState()

        self._mask: Optional[np.ndarray] = None
        self._lock = threading.Lock()
        self._stroke_count: int = 0
        self._reset_count: int = 0

        logger.info(f"MaskStore initialized: brush_radius={brush_radius}px")

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> Optional[Tuple[int, int]]:
        """Mask dimensions, or None before the first frame."""
        return None if self._mask is None else self._mask.shape

    @property
    def is_created(self) -> bool:
        return self._mask is not None

    def ensure(self, shape: Tuple[int, int]) -> None:
        """
        Create the all-pass mask on first use.

        Subsequent calls with a different shape are a contract violation.

        Raises:
            SpectrumShapeError: If the mask exists with another shape
        """
        with self._lock:
            if self._mask is None:
                self._mask = np.ones(shape, dtype=np.uint8)
                logger.info(f"Mask created: {shape[1]}x{shape[0]}")
            elif self._mask.shape != tuple(shape):
                raise SpectrumShapeError(
                    f"Frame size {tuple(shape)} does not match mask size {self._mask.shape}"
                )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def paint(self, x: int, y: int) -> int:
        """
        Suppress every cell within brush_radius of (x, y).

        Cells outside the mask are clipped. A call before the mask exists
        is ignored.

        Returns:
            Number of cells inside the clipped disk
        """
        with self._lock:
            if self._mask is None:
                return 0

            h, w = self._mask.shape
            r = self.brush_radius
            y1, y2 = max(0, y - r), min(h, y + r + 1)
            x1, x2 = max(0, x - r), min(w, x + r + 1)
            if y2 <= y1 or x2 <= x1:
                return 0

            yy, xx = np.ogrid[y1:y2, x1:x2]
            disk = (yy - y) ** 2 + (xx - x) ** 2 <= r * r
            self._mask[y1:y2, x1:x2][disk] = SUPPRESSED
            self._stroke_count += 1
            return int(disk.sum())

    def reset(self) -> None:
        """Restore every cell to passed."""
        with self._lock:
            if self._mask is not None:
                self._mask[:] = PASSED
            self._reset_count += 1
        logger.info("Mask reset to all-pass")

    def handle_pointer(self, kind: PointerEventKind, x: int, y: int) -> None:
        """
        Advance the pointer state machine with one event.

        This is the only entry point handed to the display layer.

        Args:
            kind: Normalized event kind
            x: Column in magnitude-view coordinates
            y: Row in magnitude-view coordinates
        """
        state = self.pointer
        state.last_x = x
        state.last_y = y

        if kind is PointerEventKind.PRESS:
            state.drawing = True
        if state.drawing:
            self.paint(x, y)
        if kind is PointerEventKind.RELEASE:
            state.drawing = False
        if kind is PointerEventKind.ALT_DOUBLE_CLICK:
            self.reset()

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    @contextmanager
    def spectrum_layout(self) -> Iterator[np.ndarray]:
        """
        Temporarily remap the mask to the native spectrum layout.

        The yielded array is only valid inside the with-block; the view
        layout is restored on exit.

        Raises:
            SpectrumShapeError: If the mask has not been created
        """
        with self._lock:
            if self._mask is None:
                raise SpectrumShapeError("Mask used before the first frame created it")
            center_swap(self._mask)
            try:
                yield self._mask
            finally:
                center_swap(self._mask)

    def apply(self, log_magnitude: np.ndarray, mask: np.ndarray) -> np.ndarray:
        """
        Multiply a log-magnitude plane by a mask elementwise.

        Suppressed cells become zero; passed cells keep their value.

        Raises:
            SpectrumShapeError: On a size mismatch
        """
        if log_magnitude.shape != mask.shape:
            raise SpectrumShapeError(
                f"Log-magnitude {log_magnitude.shape} does not match mask {mask.shape}"
            )
        return (log_magnitude * mask).astype(np.float32, copy=False)

    def snapshot(self) -> Optional[np.ndarray]:
        """Copy of the mask in view layout (for tests and metrics)."""
        with self._lock:
            return None if self._mask is None else self._mask.copy()

    @property
    def suppressed_fraction(self) -> float:
        """Fraction of cells currently suppressed."""
        with self._lock:
            if self._mask is None:
                return 0.0
            return float(np.count_nonzero(self._mask == SUPPRESSED)) / self._mask.size

    def get_metrics(self) -> dict:
        """Get mask metrics for observability."""
        return {
            "shape": self.shape,
            "suppressed_fraction": round(self.suppressed_fraction, 4),
            "stroke_count": self._stroke_count,
            "reset_count": self._reset_count,
            "drawing": self.pointer.drawing,
        }

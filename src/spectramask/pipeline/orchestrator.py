"""
Spectral Pipeline
=================

Per-frame orchestration of the transform-mask-reconstruct pipeline and
the video loop that drives it.

Per-frame order:
    1. BGR frame -> float32 luminance
    2. Forward DFT -> complex spectrum
    3. Complex -> (log-magnitude, phase)
    4. Mask remapped from the centered view layout to the spectrum layout
    5. log-magnitude * mask
    6. Centered masked magnitude and phase handed to the display sink
    7. Mask restored to the view layout
    8. (masked log-magnitude, phase) -> complex spectrum
    9. Back to the spatial domain, orientation corrected
   10. Reconstruction handed to the display sink

Centering the mask and multiplying it with the native magnitude is the
same as multiplying the centered magnitude by the view-layout mask: the
quadrant swap commutes with elementwise products.

Orientation:
    With mirrored_inverse the reconstruction uses the forward-direction
    transform, which mirrors the image through the origin; flip_output
    then flips both axes so the result is upright again (offset by one
    pixel cyclically). Disable both for the direct inverse.

Key Design Decisions:
    - Single thread: pointer events are delivered inside sink.poll(),
      between two frames, so a stroke is applied from the next frame on
    - A source that stops yielding frames ends the loop with FAILURE;
      nothing is retried
    - Any key press ends the loop with SUCCESS
"""

import logging
import time
from typing import Optional

import cv2
import numpy as np

from spectramask.config import Settings
from spectramask.display.sink import DisplaySink
from spectramask.mask.store import MaskStore
from spectramask.models.channels import OutputChannel
from spectramask.models.result import LoopOutcome, LoopResult, SpectralFrameResult
from spectramask.observability.visualization import draw_fps, false_color, normalize_to_u8
from spectramask.pipeline.pacing import FpsCounter, FramePacer
from spectramask.spectrum.centering import centered
from spectramask.spectrum.decomposition import to_complex, to_polar
from spectramask.spectrum.transform import DFTTransformEngine, TransformEngine
from spectramask.stream.frame import Frame
from spectramask.stream.image import to_luminance
from spectramask.stream.source import VideoSource


logger = logging.getLogger(__name__)


class SpectralPipeline:
    """
    Orchestrator of the spectral filtering pipeline.

    Owns the mask store for the lifetime of the run. The display sink
    only ever receives the store's pointer handler, bound for the
    duration of run().

    Attributes:
        mirrored_inverse: Reconstruct with the forward-direction transform
        flip_output: Flip the reconstruction around both axes
        colormap: OpenCV colormap name for spectrum views
        show_fps: Draw measured FPS on the input view
        poll_delay_ms: Event poll timeout after each frame
        log_every_n_frames: Logging interval
    """

    def __init__(
        self,
        sink: DisplaySink,
        transform: Optional[TransformEngine] = None,
        mask: Optional[MaskStore] = None,
        mirrored_inverse: bool = True,
        flip_output: bool = True,
        colormap: str = "JET",
        show_fps: bool = True,
        poll_delay_ms: int = 1,
        log_every_n_frames: int = 30,
    ) -> None:
        """
        Initialize spectral pipeline.

        Args:
            sink: Display collaborator
            transform: Transform engine (defaults to DFTTransformEngine)
            mask: Mask store (defaults to a store with a 20 px brush)
            mirrored_inverse: See module docstring
            flip_output: See module docstring
            colormap: Colormap for magnitude and phase views
            show_fps: Overlay measured FPS on the input view
            poll_delay_ms: Event poll timeout after each frame
            log_every_n_frames: Logging interval
        """
        self._sink = sink
        self._transform = transform or DFTTransformEngine()
        self._mask = mask or MaskStore()

        self.mirrored_inverse = mirrored_inverse
        self.flip_output = flip_output
        self.colormap = colormap
        self.show_fps = show_fps
        self.poll_delay_ms = poll_delay_ms
        self.log_every_n_frames = log_every_n_frames

        self._fps_counter = FpsCounter()
        self._frames_processed: int = 0
        self._last_elapsed_ms: float = 0.0

        logger.info(
            f"SpectralPipeline initialized: "
            f"mirrored_inverse={mirrored_inverse}, flip_output={flip_output}, "
            f"colormap={colormap}"
        )

    @classmethod
    def from_settings(cls, settings: Settings, sink: DisplaySink) -> "SpectralPipeline":
        """Build a pipeline from loaded settings."""
        return cls(
            sink=sink,
            mask=MaskStore(brush_radius=settings.mask.brush_radius),
            mirrored_inverse=settings.reconstruction.mirrored_inverse,
            flip_output=settings.reconstruction.flip_output,
            colormap=settings.display.colormap,
            show_fps=settings.display.show_fps,
            poll_delay_ms=settings.display.poll_delay_ms,
            log_every_n_frames=settings.pipeline.log_every_n_frames,
        )

    @property
    def mask(self) -> MaskStore:
        return self._mask

    @property
    def frames_processed(self) -> int:
        return self._frames_processed

    # -------------------------------------------------------------------------
    # Per-frame processing
    # -------------------------------------------------------------------------

    def process(self, frame: Frame) -> SpectralFrameResult:
        """
        Run one frame through the pipeline and display every view.

        Args:
            frame: Frame from the video source

        Returns:
            SpectralFrameResult with the intermediate planes

        Raises:
            SpectrumShapeError: If the frame is malformed or does not
                match the size of the existing mask
        """
        start = time.perf_counter()

        self._mask.ensure(frame.shape)
        original = draw_fps(frame.image, self._fps_counter.fps) if self.show_fps else frame.image
        self._sink.show(OutputChannel.ORIGINAL, original)

        luminance = to_luminance(frame.image)
        spectrum = self._transform.forward(luminance)
        polar = to_polar(spectrum)

        with self._mask.spectrum_layout() as mask:
            masked_magnitude = self._mask.apply(polar.log_magnitude, mask)

        magnitude_view = centered(masked_magnitude)
        self._sink.show(OutputChannel.MAGNITUDE, false_color(magnitude_view, self.colormap))
        self._sink.show(OutputChannel.PHASE, false_color(polar.phase, self.colormap))

        rebuilt = to_complex(masked_magnitude, polar.phase)
        reconstructed = self._transform.inverse(rebuilt, mirrored=self.mirrored_inverse)
        if self.flip_output:
            reconstructed = cv2.flip(reconstructed, -1)

        self._sink.show(OutputChannel.RECONSTRUCTED, normalize_to_u8(reconstructed))

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        self._frames_processed += 1
        self._last_elapsed_ms = elapsed_ms
        fps = self._fps_counter.tick()

        if self._frames_processed % self.log_every_n_frames == 0:
            fps_text = f"{fps:.1f}" if fps is not None else "n/a"
            logger.info(
                f"Pipeline [frame {self._frames_processed}]: "
                f"fps={fps_text}, elapsed={elapsed_ms:.2f}ms, "
                f"suppressed={self._mask.suppressed_fraction:.3f}"
            )
        else:
            logger.debug(f"Processed frame {frame.frame_id} in {elapsed_ms:.2f}ms")

        return SpectralFrameResult(
            frame_id=frame.frame_id,
            luminance=luminance,
            masked_magnitude=magnitude_view,
            phase=polar.phase,
            reconstructed=reconstructed,
            elapsed_ms=elapsed_ms,
        )

    # -------------------------------------------------------------------------
    # Video loop
    # -------------------------------------------------------------------------

    def run(self, source: VideoSource, pacer: Optional[FramePacer] = None) -> LoopResult:
        """
        Process frames until a key is pressed or the source runs dry.

        Args:
            source: Video source
            pacer: Frame pacer (defaults to the source's nominal FPS)

        Returns:
            LoopResult with SUCCESS on user stop, FAILURE when the
            source fails to yield a frame
        """
        pacer = pacer or FramePacer(source.fps)
        logger.info(
            f"Video loop started: a frame every {pacer.interval * 1000.0:.1f}ms "
            f"({pacer.fps:.1f} FPS)"
        )

        processed_at_start = self._frames_processed
        self._sink.bind_pointer(OutputChannel.MAGNITUDE, self._mask.handle_pointer)
        try:
            while True:
                if not pacer.ready():
                    time.sleep(pacer.remaining())
                    continue

                frame = source.read()
                if frame is None:
                    result = LoopResult(
                        outcome=LoopOutcome.FAILURE,
                        frames_processed=self._frames_processed - processed_at_start,
                    )
                    logger.error(f"Video source yielded no frame, stopping: {result.to_dict()}")
                    return result

                self.process(frame)

                if self._sink.poll(self.poll_delay_ms) >= 0:
                    result = LoopResult(
                        outcome=LoopOutcome.SUCCESS,
                        frames_processed=self._frames_processed - processed_at_start,
                    )
                    logger.info(f"Stop requested: {result.to_dict()}")
                    return result
        finally:
            self._sink.unbind_pointer(OutputChannel.MAGNITUDE)

    def get_metrics(self) -> dict:
        """Get pipeline metrics for observability."""
        return {
            "frames_processed": self._frames_processed,
            "last_elapsed_ms": round(self._last_elapsed_ms, 3),
            "fps": self._fps_counter.fps,
            "mask": self._mask.get_metrics(),
        }

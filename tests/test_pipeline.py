"""
Spectral Pipeline Tests
=======================

End-to-end scenarios through SpectralPipeline with in-memory
collaborators.
"""

import numpy as np
import pytest

from spectramask.config import Settings
from spectramask.mask.store import MaskStore
from spectramask.models.channels import OutputChannel
from spectramask.models.pointer import PointerEventKind
from spectramask.models.result import LoopOutcome
from spectramask.models.spectrum import SpectrumShapeError
from spectramask.pipeline import SpectralPipeline
from spectramask.stream.frame import Frame

from conftest import ListVideoSource, RecordingDisplaySink


def _frame(image, frame_id=0):
    return Frame(frame_id=frame_id, timestamp=float(frame_id), image=image)


class TestProcess:
    """Tests for single-frame processing."""

    def test_zero_frame_reconstructs_to_zero(self, recording_sink):
        """An all-zero 64x64 frame with an all-pass mask rebuilds to zeros."""
        pipeline = SpectralPipeline(sink=recording_sink)
        image = np.zeros((64, 64, 3), dtype=np.uint8)

        result = pipeline.process(_frame(image))
        assert result.reconstructed.shape == (64, 64)
        assert np.allclose(result.reconstructed, 0.0, atol=1e-4)

    def test_all_channels_are_shown(self, recording_sink, sample_frame):
        """Every frame produces the four views, in pipeline order."""
        SpectralPipeline(sink=recording_sink).process(sample_frame)

        channels = [channel for channel, _ in recording_sink.shown]
        assert channels == [
            OutputChannel.ORIGINAL,
            OutputChannel.MAGNITUDE,
            OutputChannel.PHASE,
            OutputChannel.RECONSTRUCTED,
        ]
        assert recording_sink.last(OutputChannel.MAGNITUDE).shape == (64, 64, 3)
        assert recording_sink.last(OutputChannel.PHASE).shape == (64, 64, 3)
        assert recording_sink.last(OutputChannel.RECONSTRUCTED).dtype == np.uint8

    def test_default_orientation_matches_original_output(self, recording_sink, sample_frame):
        """Mirrored inverse plus flip yields the input shifted by one pixel."""
        result = SpectralPipeline(sink=recording_sink).process(sample_frame)

        expected = np.roll(result.luminance, -1, axis=(0, 1))
        assert np.allclose(result.reconstructed, expected, atol=0.05)

    def test_direct_inverse_recovers_luminance(self, recording_sink, sample_frame):
        """Without mirroring and flipping the all-pass output equals the input."""
        pipeline = SpectralPipeline(
            sink=recording_sink,
            mirrored_inverse=False,
            flip_output=False,
        )
        result = pipeline.process(sample_frame)
        assert np.allclose(result.reconstructed, result.luminance, atol=0.05)

    def test_magnitude_view_is_centered(self, recording_sink):
        """The DC term of a constant frame appears at the view center."""
        image = np.full((32, 48, 3), 100, dtype=np.uint8)
        result = SpectralPipeline(sink=recording_sink).process(_frame(image))

        peak = np.unravel_index(np.argmax(result.masked_magnitude), result.masked_magnitude.shape)
        assert peak == (16, 24)

    def test_paint_between_frames_changes_output(self, recording_sink, textured_image):
        """A stroke between two identical frames suppresses the painted region."""
        pipeline = SpectralPipeline(sink=recording_sink, mask=MaskStore(brush_radius=6))

        first = pipeline.process(_frame(textured_image, 0))
        pipeline.mask.handle_pointer(PointerEventKind.PRESS, 32, 32)
        pipeline.mask.handle_pointer(PointerEventKind.RELEASE, 32, 32)
        second = pipeline.process(_frame(textured_image, 1))

        assert first.masked_magnitude[32, 32] > 0
        assert second.masked_magnitude[32, 32] == 0
        assert not np.allclose(first.reconstructed, second.reconstructed, atol=1.0)

    def test_mask_persists_across_frames(self, recording_sink, textured_image):
        """The mask is created once and reused by later frames."""
        pipeline = SpectralPipeline(sink=recording_sink)
        pipeline.process(_frame(textured_image, 0))
        pipeline.mask.paint(10, 10)
        before = pipeline.mask.snapshot()

        pipeline.process(_frame(textured_image, 1))
        assert np.array_equal(pipeline.mask.snapshot(), before)

    def test_frame_size_mismatch_fails_fast(self, recording_sink, textured_image):
        """A frame of another size than the mask is rejected."""
        pipeline = SpectralPipeline(sink=recording_sink)
        pipeline.process(_frame(textured_image))

        with pytest.raises(SpectrumShapeError):
            pipeline.process(_frame(np.zeros((32, 32, 3), dtype=np.uint8), 1))

    def test_grayscale_frame_rejected(self, recording_sink):
        """Frames must be 3-channel."""
        pipeline = SpectralPipeline(sink=recording_sink)
        with pytest.raises(SpectrumShapeError):
            pipeline.process(_frame(np.zeros((16, 16), dtype=np.uint8)))


class TestRun:
    """Tests for the video loop."""

    def test_end_of_stream_reports_failure_after_one_frame(self, recording_sink, textured_image):
        """End-of-stream on the second read ends the loop with FAILURE."""
        source = ListVideoSource([textured_image])
        result = SpectralPipeline(sink=recording_sink).run(source)

        assert result.outcome is LoopOutcome.FAILURE
        assert result.frames_processed == 1
        assert result.exit_code == 1
        assert source.reads == 2
        assert len(recording_sink.shown) == 4

    def test_key_press_stops_with_success(self, textured_image):
        """Any key ends the loop after the current frame."""
        sink = RecordingDisplaySink(keys=[-1, ord("q")])
        source = ListVideoSource([textured_image] * 5)

        result = SpectralPipeline(sink=sink).run(source)
        assert result.outcome is LoopOutcome.SUCCESS
        assert result.frames_processed == 2
        assert result.exit_code == 0

    def test_pointer_handler_bound_only_during_run(self, recording_sink, textured_image):
        """The mask handler is registered for the run and removed afterwards."""
        seen = {}

        class SpySink(RecordingDisplaySink):
            def poll(self, delay_ms=1):
                seen["bound"] = OutputChannel.MAGNITUDE in self.handlers
                return super().poll(delay_ms)

        sink = SpySink()
        SpectralPipeline(sink=sink).run(ListVideoSource([textured_image]))

        assert seen["bound"] is True
        assert OutputChannel.MAGNITUDE not in sink.handlers

    def test_stroke_during_poll_applies_to_next_frame(self, textured_image):
        """Pointer events delivered in poll() are visible to the next frame."""
        events = {
            0: [
                (PointerEventKind.PRESS, 32, 32),
                (PointerEventKind.MOVE, 34, 32),
                (PointerEventKind.RELEASE, 34, 32),
            ],
        }
        sink = RecordingDisplaySink(events=events)
        pipeline = SpectralPipeline(sink=sink, mask=MaskStore(brush_radius=4))

        result = pipeline.run(ListVideoSource([textured_image, textured_image]))
        assert result.frames_processed == 2

        reconstructions = [img for ch, img in sink.shown if ch is OutputChannel.RECONSTRUCTED]
        assert len(reconstructions) == 2
        assert not np.array_equal(reconstructions[0], reconstructions[1])
        assert pipeline.mask.snapshot()[32, 33] == 0

    def test_metrics_track_frames(self, recording_sink, textured_image):
        """get_metrics() reports frames and mask state."""
        pipeline = SpectralPipeline(sink=recording_sink)
        pipeline.run(ListVideoSource([textured_image, textured_image]))

        metrics = pipeline.get_metrics()
        assert metrics["frames_processed"] == 2
        assert metrics["mask"]["shape"] == (64, 64)
        assert metrics["mask"]["suppressed_fraction"] == 0.0


class TestFromSettings:
    """Tests for construction from settings."""

    def test_settings_are_applied(self, recording_sink):
        """Brush radius and orientation flags come from Settings."""
        settings = Settings.model_validate({
            "mask": {"brush_radius": 7},
            "reconstruction": {"mirrored_inverse": False, "flip_output": False},
            "display": {"colormap": "hsv"},
        })
        pipeline = SpectralPipeline.from_settings(settings, recording_sink)

        assert pipeline.mask.brush_radius == 7
        assert pipeline.mirrored_inverse is False
        assert pipeline.flip_output is False
        assert pipeline.colormap == "HSV"

#!/usr/bin/env python3
"""
Pipeline Throughput Benchmark
=============================

Standalone script to measure how many frames per second the spectral
pipeline sustains without any windows.

This script:
    1. Generates synthetic BGR frames at the requested size
    2. Paints a ring into the mask so the masking path is exercised
    3. Runs the video loop with a headless sink until N frames are done
    4. Reports the final summary

Usage:
    python scripts/benchmark_pipeline.py --frames 300
    python scripts/benchmark_pipeline.py --width 640 --height 480 --max-dimension 360
"""

import argparse
import logging
import os
import sys
import time

import numpy as np

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from spectramask.models.pointer import PointerEventKind
from spectramask.pipeline import FramePacer, SpectralPipeline
from spectramask.stream import Frame, resize_to_limit


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


class SyntheticVideoSource:
    """Endless source of moving sinusoid patterns."""

    def __init__(self, width: int, height: int, max_dimension: int) -> None:
        self._yy, self._xx = np.mgrid[0:height, 0:width]
        self._max_dimension = max_dimension
        self._count = 0

    @property
    def fps(self) -> float:
        return 1e6

    def read(self):
        phase = self._count * 0.2
        luma = (
            128
            + 70 * np.sin(2 * np.pi * self._xx / 24.0 + phase)
            + 50 * np.cos(2 * np.pi * self._yy / 9.0 - phase)
        )
        plane = np.clip(luma, 0, 255).astype(np.uint8)
        image = resize_to_limit(np.dstack([plane, plane, plane]), self._max_dimension)

        frame = Frame(frame_id=self._count, timestamp=time.perf_counter(), image=image)
        self._count += 1
        return frame

    def release(self) -> None:
        pass


class HeadlessDisplaySink:
    """Sink that discards images and stops the loop after N polls."""

    def __init__(self, stop_after: int) -> None:
        self._stop_after = stop_after
        self.polls = 0

    def show(self, channel, image) -> None:
        pass

    def bind_pointer(self, channel, handler) -> None:
        pass

    def unbind_pointer(self, channel) -> None:
        pass

    def poll(self, delay_ms: int = 1) -> int:
        self.polls += 1
        return ord("q") if self.polls >= self._stop_after else -1

    def close(self) -> None:
        pass


def run_benchmark(width: int, height: int, max_dimension: int, frames: int) -> dict:
    """
    Run the benchmark.

    Args:
        width: Synthetic frame width before resizing
        height: Synthetic frame height before resizing
        max_dimension: Resize limit
        frames: Number of frames to process

    Returns:
        Final metrics dict
    """
    logger.info("=" * 60)
    logger.info("Spectral Pipeline Benchmark")
    logger.info("=" * 60)
    logger.info(f"Input size: {width}x{height}, limit {max_dimension}")
    logger.info(f"Frames: {frames}")
    logger.info("=" * 60)

    source = SyntheticVideoSource(width, height, max_dimension)
    sink = HeadlessDisplaySink(stop_after=frames)
    pipeline = SpectralPipeline(sink=sink, log_every_n_frames=max(1, frames // 5))

    # Create the mask with a first frame, then paint a ring around DC
    first = source.read()
    pipeline.process(first)
    h, w = first.shape
    pipeline.mask.handle_pointer(PointerEventKind.PRESS, w // 2 + 30, h // 2)
    for angle in np.linspace(0, 2 * np.pi, 48):
        x = int(w // 2 + 30 * np.cos(angle))
        y = int(h // 2 + 30 * np.sin(angle))
        pipeline.mask.handle_pointer(PointerEventKind.MOVE, x, y)
    pipeline.mask.handle_pointer(PointerEventKind.RELEASE, w // 2 + 30, h // 2)

    start_time = time.perf_counter()
    result = pipeline.run(source, pacer=FramePacer(source.fps))
    total_time = time.perf_counter() - start_time

    avg_fps = result.frames_processed / total_time if total_time > 0 else 0.0
    metrics = pipeline.get_metrics()

    logger.info("=" * 60)
    logger.info("FINAL SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Frame size: {w}x{h}")
    logger.info(f"Total runtime: {total_time:.2f} seconds")
    logger.info(f"Frames processed: {result.frames_processed}")
    logger.info(f"Average FPS: {avg_fps:.1f}")
    logger.info(f"Suppressed fraction: {metrics['mask']['suppressed_fraction']:.3f}")
    logger.info("=" * 60)

    return {
        "duration": total_time,
        "frames_processed": result.frames_processed,
        "avg_fps": avg_fps,
        "frame_size": (w, h),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Throughput benchmark for the spectral pipeline"
    )
    parser.add_argument("--width", type=int, default=1280, help="Input width (default: 1280)")
    parser.add_argument("--height", type=int, default=720, help="Input height (default: 720)")
    parser.add_argument(
        "--max-dimension",
        type=int,
        default=360,
        help="Resize limit (default: 360)",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=300,
        help="Frames to process (default: 300)",
    )

    args = parser.parse_args()

    result = run_benchmark(
        width=args.width,
        height=args.height,
        max_dimension=args.max_dimension,
        frames=args.frames,
    )

    sys.exit(0 if result["frames_processed"] > 0 else 1)


if __name__ == "__main__":
    main()

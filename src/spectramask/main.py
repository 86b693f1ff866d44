"""
SpectraMask Main Application
============================

Command-line entry point for the interactive spectral mask viewer.

Usage:
    spectramask                          # ask: webcam or file dialog
    spectramask --source camera          # primary webcam, calibration preview
    spectramask --source file --file clip.mp4
    spectramask --config config.yaml --source camera --no-calibrate

Controls:
    Left drag on the Magnitude window   suppress frequencies under the brush
    Right double-click                  reset the mask
    Any key                             quit
"""

import argparse
import logging
import sys
from typing import List, Optional

from spectramask import config as config_module
from spectramask.config import Settings, load_config, setup_logging
from spectramask.display import OpenCVDisplaySink
from spectramask.pipeline import SpectralPipeline
from spectramask.stream import OpenCVVideoSource, VideoSourceError, calibrate
from spectramask.ui import dialogs


logger = logging.getLogger(__name__)


CALIBRATION_MESSAGE = (
    "Check if your video is working and align the shot how you see fit.\n"
    "When you are ready press any key to end the calibration."
)


# =============================================================================
# Argument Parsing
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spectramask",
        description="Paint a frequency-domain mask over live video",
    )
    parser.add_argument(
        "--source",
        choices=["ask", "camera", "file"],
        default="ask",
        help="Video source; 'ask' shows start-up dialogs (default: ask)",
    )
    parser.add_argument("--file", default=None, help="Video file for --source file")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument(
        "--camera-index",
        type=int,
        default=None,
        help="Override video.camera_index",
    )
    parser.add_argument(
        "--no-calibrate",
        action="store_true",
        help="Skip the live-feed calibration preview",
    )
    return parser


# =============================================================================
# Source Selection
# =============================================================================

def open_source(
    args: argparse.Namespace,
    settings: Settings,
    interactive: bool,
) -> OpenCVVideoSource:
    """
    Open the video source chosen on the command line or through dialogs.

    Raises:
        VideoSourceError: If the source cannot be opened or calibrated
    """
    source_kind = args.source
    if source_kind == "ask":
        source_kind = "camera" if dialogs.ask_use_camera() else "file"

    video = settings.video

    if source_kind == "file":
        path = args.file
        if path is None and interactive:
            path = dialogs.ask_video_file(video.file_patterns)
        return OpenCVVideoSource.open_file(path, max_dimension=video.max_dimension)

    index = args.camera_index if args.camera_index is not None else video.camera_index
    source = OpenCVVideoSource.open_camera(
        index=index,
        fps=video.camera_fps,
        max_dimension=video.max_dimension,
    )

    if video.calibrate and not args.no_calibrate:
        if interactive:
            dialogs.show_info("Video check", CALIBRATION_MESSAGE)
        try:
            calibrate(source)
        except VideoSourceError:
            source.release()
            raise

    return source


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the viewer.

    Returns:
        Process exit status: 0 when the user quit, 1 on any source failure
    """
    args = build_parser().parse_args(argv)

    settings = load_config(args.config) if args.config else config_module.settings
    setup_logging(settings)
    logger.info(f"Starting {settings.app.name} {settings.app.version}")

    interactive = args.source == "ask"

    try:
        source = open_source(args, settings, interactive)
    except VideoSourceError as e:
        logger.error(f"Video check failed: {e}")
        if interactive:
            dialogs.show_error("Video check", str(e))
        return 1

    sink = OpenCVDisplaySink(settings.display)
    pipeline = SpectralPipeline.from_settings(settings, sink)

    try:
        result = pipeline.run(source)
    finally:
        source.release()
        sink.close()

    logger.info(f"Shutdown complete: {result.to_dict()}, metrics={pipeline.get_metrics()}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

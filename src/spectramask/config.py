"""
SpectraMask Configuration
=========================

This module handles configuration loading for the spectral mask viewer.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    SPECTRAMASK_MAX_DIMENSION -> video.max_dimension
    SPECTRAMASK_CAMERA_INDEX  -> video.camera_index
    SPECTRAMASK_CAMERA_FPS    -> video.camera_fps
    SPECTRAMASK_BRUSH_RADIUS  -> mask.brush_radius
    SPECTRAMASK_COLORMAP      -> display.colormap
    SPECTRAMASK_LOG_LEVEL     -> logging.level

Example:
    from spectramask.config import settings

    print(settings.video.max_dimension)
    print(settings.mask.brush_radius)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

import cv2
import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class AppConfig(BaseModel):
    """Application identification."""

    name: str = Field(default="spectramask", description="Application name")
    version: str = Field(default="v0.1.0", description="Application version")


class VideoConfig(BaseModel):
    """Video acquisition configuration."""

    max_dimension: int = Field(
        default=360,
        ge=16,
        description="Longest side of a processed frame, in pixels",
    )
    camera_index: int = Field(
        default=0,
        ge=0,
        description="OpenCV device index of the live feed",
    )
    camera_fps: int = Field(
        default=26,
        gt=0,
        description="Frame rate requested from the camera",
    )
    calibrate: bool = Field(
        default=True,
        description="Show a preview window before starting a live feed",
    )
    file_patterns: List[str] = Field(
        default_factory=lambda: ["*.mp4", "*.avi"],
        description="File patterns offered by the open-file dialog",
    )


class MaskConfig(BaseModel):
    """Mask painting configuration."""

    brush_radius: int = Field(
        default=20,
        gt=0,
        description="Radius of the disk stamped into the mask, in pixels",
    )


class ReconstructionConfig(BaseModel):
    """Orientation handling of the spatial reconstruction."""

    mirrored_inverse: bool = Field(
        default=True,
        description="Reconstruct with the forward-direction transform (mirrored inverse)",
    )
    flip_output: bool = Field(
        default=True,
        description="Flip the reconstruction around both axes",
    )


class DisplayConfig(BaseModel):
    """Display window configuration."""

    original_window: str = Field(default="Original", description="Input frame window")
    magnitude_window: str = Field(default="Magnitude", description="Log-magnitude window")
    phase_window: str = Field(default="Angle", description="Phase window")
    reconstructed_window: str = Field(default="Reverse", description="Reconstruction window")
    colormap: str = Field(
        default="JET",
        description="OpenCV colormap name used for spectrum planes",
    )
    poll_delay_ms: int = Field(
        default=1,
        ge=1,
        description="Event poll timeout after each frame (milliseconds)",
    )
    show_fps: bool = Field(default=True, description="Draw measured FPS on the input view")

    @field_validator("colormap")
    @classmethod
    def _known_colormap(cls, value: str) -> str:
        name = value.upper()
        if not hasattr(cv2, f"COLORMAP_{name}"):
            raise ValueError(f"Unknown OpenCV colormap: {value}")
        return name


class PipelineConfig(BaseModel):
    """Per-frame pipeline configuration."""

    log_every_n_frames: int = Field(
        default=30,
        ge=1,
        description="Interval of periodic pipeline log lines",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for SpectraMask.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    app: AppConfig = Field(default_factory=AppConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)
    mask: MaskConfig = Field(default_factory=MaskConfig)
    reconstruction: ReconstructionConfig = Field(default_factory=ReconstructionConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Video settings
    if env_dim := os.environ.get("SPECTRAMASK_MAX_DIMENSION"):
        config_data.setdefault("video", {})["max_dimension"] = int(env_dim)
    if env_cam := os.environ.get("SPECTRAMASK_CAMERA_INDEX"):
        config_data.setdefault("video", {})["camera_index"] = int(env_cam)
    if env_fps := os.environ.get("SPECTRAMASK_CAMERA_FPS"):
        config_data.setdefault("video", {})["camera_fps"] = int(env_fps)

    # Mask settings
    if env_radius := os.environ.get("SPECTRAMASK_BRUSH_RADIUS"):
        config_data.setdefault("mask", {})["brush_radius"] = int(env_radius)

    # Display settings
    if env_cmap := os.environ.get("SPECTRAMASK_COLORMAP"):
        config_data.setdefault("display", {})["colormap"] = env_cmap

    # Logging settings
    if env_log := os.environ.get("SPECTRAMASK_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()

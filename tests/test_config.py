"""
Configuration Tests
===================
"""

import pytest
from pydantic import ValidationError

from spectramask.config import DisplayConfig, Settings, load_config


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Defaults reproduce the classic viewer behavior."""
        settings = Settings()
        assert settings.video.max_dimension == 360
        assert settings.video.camera_fps == 26
        assert settings.mask.brush_radius == 20
        assert settings.reconstruction.mirrored_inverse is True
        assert settings.reconstruction.flip_output is True
        assert settings.display.magnitude_window == "Magnitude"
        assert settings.video.file_patterns == ["*.mp4", "*.avi"]


class TestLoadConfig:
    """Tests for file and environment loading."""

    def test_yaml_file_is_read(self, tmp_path, monkeypatch):
        """Values from the YAML file override defaults."""
        monkeypatch.delenv("SPECTRAMASK_BRUSH_RADIUS", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("mask:\n  brush_radius: 12\nvideo:\n  max_dimension: 240\n")

        settings = load_config(str(path))
        assert settings.mask.brush_radius == 12
        assert settings.video.max_dimension == 240

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        """Environment variables take precedence over the file."""
        path = tmp_path / "config.yaml"
        path.write_text("mask:\n  brush_radius: 12\n")
        monkeypatch.setenv("SPECTRAMASK_BRUSH_RADIUS", "5")
        monkeypatch.setenv("SPECTRAMASK_COLORMAP", "hot")

        settings = load_config(str(path))
        assert settings.mask.brush_radius == 5
        assert settings.display.colormap == "HOT"

    def test_empty_file_gives_defaults(self, tmp_path, monkeypatch):
        """An empty YAML document is treated as no overrides."""
        monkeypatch.delenv("SPECTRAMASK_MAX_DIMENSION", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(str(path)).video.max_dimension == 360


class TestValidation:
    """Tests for rejected values."""

    def test_unknown_colormap_rejected(self):
        """Colormaps must exist in OpenCV."""
        with pytest.raises(ValidationError):
            DisplayConfig(colormap="NOT_A_MAP")

    def test_non_positive_brush_rejected(self):
        """The brush radius must be positive."""
        with pytest.raises(ValidationError):
            Settings.model_validate({"mask": {"brush_radius": 0}})

"""Tests for config loading."""

import json
from pathlib import Path

import pytest

from vidclip.config import ClipperConfig, load_config


class TestClipperConfig:
    def test_defaults(self):
        cfg = ClipperConfig()
        assert cfg.output_dir == "downloads"
        assert cfg.extension == "mp4"
        assert cfg.ffmpeg_binary == "ffmpeg"
        assert cfg.ffprobe_binary == "ffprobe"
        assert cfg.audio_fallback is True


class TestLoadConfig:
    def test_load_sample(self, sample_config_path: Path):
        cfg = load_config(sample_config_path)
        assert cfg.output_dir == "clips"
        assert cfg.audio_fallback is False

    def test_partial_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "cfg.json"
        path.write_text('{"extension": "mkv"}')
        cfg = load_config(path)
        assert cfg.extension == "mkv"
        assert cfg.output_dir == "downloads"

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(bad)

    def test_unknown_keys(self, tmp_path: Path):
        path = tmp_path / "cfg.json"
        path.write_text('{"output_dir": "x", "threads": 4}')
        with pytest.raises(ValueError, match="Unknown config keys: threads"):
            load_config(path)

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "cfg.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(path)

    @pytest.mark.parametrize("body, key", [
        ('{"extension": 5}', "extension"),
        ('{"output_dir": null}', "output_dir"),
        ('{"audio_fallback": "no"}', "audio_fallback"),
    ])
    def test_wrong_value_type(self, tmp_path: Path, body, key):
        path = tmp_path / "cfg.json"
        path.write_text(body)
        with pytest.raises(ValueError, match=f"Config key '{key}' must be a"):
            load_config(path)

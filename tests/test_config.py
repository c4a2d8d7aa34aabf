"""Unit tests for configuration defaults and frame rate parsing."""

import importlib
from pathlib import Path

import pytest
from pydantic import ValidationError

from datavyu_converter import config as config_module
from datavyu_converter.config import (
    DEFAULT_FRAME_RATE,
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    ConverterConfig,
    parse_frame_rate,
)


class TestParseFrameRate:

    @pytest.mark.parametrize("text, expected", [
        ("ntsc", 29.97),
        ("NTSC ", 29.97),
        ("29.97", 29.97),
        ("pal", 25.0),
        ("film", 24.0),
        ("23.976", 23.976),
        ("48", 48.0),
    ])
    def test_accepts_numbers_and_presets(self, text, expected):
        assert parse_frame_rate(text) == expected

    def test_ntsc_is_literal_not_rational(self):
        assert parse_frame_rate("ntsc") == 29.97
        assert parse_frame_rate("ntsc") != 30000 / 1001

    @pytest.mark.parametrize("text", ["fast", "", "0", "-5", "nan"])
    def test_rejects_invalid(self, text):
        with pytest.raises(ValueError):
            parse_frame_rate(text)


class TestConverterConfig:

    def test_defaults(self):
        cfg = ConverterConfig()
        assert cfg.input_dir == Path(DEFAULT_INPUT_DIR)
        assert cfg.output_dir == Path(DEFAULT_OUTPUT_DIR)
        assert cfg.frame_rate == parse_frame_rate(DEFAULT_FRAME_RATE)

    def test_strings_become_paths(self, tmp_path):
        cfg = ConverterConfig(input_dir=str(tmp_path))
        assert cfg.input_dir == tmp_path

    @pytest.mark.parametrize("rate", [0, -29.97])
    def test_frame_rate_must_be_positive(self, rate):
        with pytest.raises(ValidationError):
            ConverterConfig(frame_rate=rate)

    def test_start_code_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            ConverterConfig(start_code="")

    def test_is_frozen(self):
        cfg = ConverterConfig()
        with pytest.raises(ValidationError):
            cfg.frame_rate = 25.0


class TestEnvironmentOverrides:
    """DATAVYU_* variables change the module defaults at import time."""

    def test_env_overrides_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATAVYU_INPUT_DIR", str(tmp_path / "in"))
        monkeypatch.setenv("DATAVYU_FRAME_RATE", "pal")
        monkeypatch.setenv("DATAVYU_START_CODE", "T")
        try:
            reloaded = importlib.reload(config_module)
            cfg = reloaded.ConverterConfig()
            assert cfg.input_dir == tmp_path / "in"
            assert cfg.frame_rate == 25.0
            assert cfg.start_code == "T"
        finally:
            monkeypatch.undo()
            importlib.reload(config_module)

"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from huecurve.core.config.loader import detect_format, load_app_config, load_config
from huecurve.core.config.models import AppConfig, EngineConfig, SearchStrategy
from huecurve.core.logging.models import LogLevel


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        "name,expected",
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known_extensions(self, name: str, expected: str):
        assert detect_format(name) == expected

    def test_unsupported_extension(self):
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("config.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "huecurve.yaml"
        path.write_text("engine:\n  hue_step: 5\n", encoding="utf-8")
        assert load_config(path) == {"engine": {"hue_step": 5}}

    def test_json(self, tmp_path: Path):
        path = tmp_path / "huecurve.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")
        assert load_config(path) == {"logging": {"level": "DEBUG"}}

    def test_empty_yaml_is_empty_dict(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("engine: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_app_config(tmp_path / "absent.yaml")
        assert config == AppConfig()

    def test_values_from_yaml(self, tmp_path: Path):
        path = tmp_path / "huecurve.yaml"
        path.write_text(
            "engine:\n"
            "  hue_step: 5\n"
            "  search_strategy: linear\n"
            "  cache_max_entries: null\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  structured: true\n",
            encoding="utf-8",
        )
        config = load_app_config(path)

        assert config.engine.hue_step == 5
        assert config.engine.search_strategy is SearchStrategy.LINEAR
        assert config.engine.cache_max_entries is None
        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.structured is True

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "huecurve.yaml"
        path.write_text("engine:\n  hue_step: 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_app_config(path)


class TestEngineConfig:
    """Tests for EngineConfig defaults and bounds."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.hue_step == 1
        assert config.cache_max_entries == 512
        assert config.search_strategy is SearchStrategy.BINARY
        assert config.linear_backtrack == 5
        assert config.default_threshold == 4.5

    @pytest.mark.parametrize(
        "field,value",
        [("cache_max_entries", 0), ("default_threshold", 0.0), ("linear_backtrack", -1)],
    )
    def test_bounds(self, field: str, value: object):
        with pytest.raises(ValidationError):
            EngineConfig.model_validate({field: value})

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.hue_step = 3  # type: ignore[misc]

"""Tests for YAML config loading and comparator resolution."""

from __future__ import annotations

import pytest

from numorder.cli import _load_config, _resolve_comparator, _try_load_config
from numorder.core import get_instance
from numorder.errors import ConfigError


class TestLoadConfig:
    """Config loading from numorder.yaml."""

    def test_loads_valid_yaml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yaml").write_text(
            "absolute: true\n" "context: AbsoluteValue\n"
        )
        config = _load_config()
        assert config["absolute"] is True
        assert config["context"] == "AbsoluteValue"

    def test_loads_yml_extension(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yml").write_text("absolute: false\n")
        assert _load_config() == {"absolute": False}

    def test_returns_empty_when_no_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert _load_config() == {}

    def test_empty_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yaml").write_text("# nothing here\n")
        assert _load_config() == {}

    def test_non_mapping_rejected(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yaml").write_text("- absolute\n")
        with pytest.raises(ConfigError, match="mapping"):
            _load_config()

    def test_malformed_yaml_rejected(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yaml").write_text("absolute: [true\n")
        with pytest.raises(ConfigError, match="Could not parse"):
            _load_config()


class TestTryLoadConfig:
    def test_falls_back_to_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "numorder.yaml").write_text("absolute: [true\n")
        assert _try_load_config() == {}


class TestResolveComparator:
    def test_flag_wins(self):
        comparator = _resolve_comparator({"absolute": False}, True)
        assert comparator.is_absolute() is True

    def test_context_from_config(self):
        comparator = _resolve_comparator({"context": "AbsoluteValue"}, None)
        assert comparator.is_absolute() is True

    def test_absolute_from_config(self):
        comparator = _resolve_comparator({"absolute": True}, None)
        assert comparator.is_absolute() is True

    def test_default_is_shared_instance(self):
        assert _resolve_comparator({}, None) is get_instance()

    def test_unknown_context(self):
        with pytest.raises(ConfigError):
            _resolve_comparator({"context": "Locale"}, None)

    def test_non_bool_absolute(self):
        with pytest.raises(ConfigError, match="true or false"):
            _resolve_comparator({"absolute": "yes"}, None)

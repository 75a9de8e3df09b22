"""
Tests for i18n_scan.common.typed_config.reader.

Verifies:
- YAML config file reading and error reporting
- Config file resolution (explicit, environment, working directory)
- load_options() merging and validation
"""

import logging
from pathlib import Path

import pytest

from i18n_scan.common.errors import ConfigError
from i18n_scan.common.typed_config.models import ScanOptions
from i18n_scan.common.typed_config.reader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    find_config_file,
    load_options,
    read_config_file,
)

CONFIG_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures" / "config"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """No ambient config file or environment override."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


class TestReadConfigFile:
    def test_valid(self):
        data = read_config_file(CONFIG_FIXTURES_DIR / "valid.yaml")
        assert data["localesDir"] == "lang"
        assert data["locales"] == ["en", "de", "fr"]
        assert data["src"] == ["src/**/*.{js,ts}", "templates/**/*.php"]

    def test_empty_file(self):
        assert read_config_file(CONFIG_FIXTURES_DIR / "empty.yaml") == {}

    def test_syntax_error_has_line_number(self):
        with pytest.raises(ConfigError) as exc_info:
            read_config_file(CONFIG_FIXTURES_DIR / "invalid_yaml_syntax.yaml")
        assert exc_info.value.line is not None
        assert exc_info.value.line > 0
        assert "line" in str(exc_info.value)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError) as exc_info:
            read_config_file(CONFIG_FIXTURES_DIR / "not_a_mapping.yaml")
        assert exc_info.value.line is None
        assert "mapping" in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            read_config_file(tmp_path / "nope.yaml")


class TestFindConfigFile:
    def test_nothing_found(self):
        assert find_config_file() is None

    def test_explicit(self):
        path = CONFIG_FIXTURES_DIR / "valid.yaml"
        assert find_config_file(path) == path

    def test_explicit_missing_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            find_config_file(tmp_path / "missing.yaml")

    def test_env_var(self, monkeypatch):
        path = CONFIG_FIXTURES_DIR / "valid.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert find_config_file() == path

    def test_env_var_missing_file_raises(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigError, match=CONFIG_ENV_VAR):
            find_config_file()

    def test_blank_env_var_ignored(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "  ")
        assert find_config_file() is None

    def test_working_directory_file(self, tmp_path):
        (tmp_path / DEFAULT_CONFIG_FILENAME).write_text("master: en\n", encoding="utf-8")
        assert find_config_file().name == DEFAULT_CONFIG_FILENAME

    def test_explicit_beats_env(self, monkeypatch, tmp_path):
        other = tmp_path / "other.yaml"
        other.write_text("{}", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(CONFIG_FIXTURES_DIR / "valid.yaml"))
        assert find_config_file(other) == other


class TestLoadOptions:
    def test_defaults_without_file(self):
        assert load_options() == ScanOptions()

    def test_from_file(self):
        opts = load_options(CONFIG_FIXTURES_DIR / "valid.yaml")
        assert opts.locales_dir == "lang"
        assert opts.locales == ("en", "de", "fr")
        assert opts.placeholder == "empty"

    def test_overrides_win(self):
        opts = load_options(
            CONFIG_FIXTURES_DIR / "valid.yaml",
            {"locales": "en,it", "placeholder": "copy", "dry": True},
        )
        assert opts.locales == ("en", "it")
        assert opts.placeholder == "copy"
        assert opts.dry is True
        assert opts.locales_dir == "lang"

    def test_none_overrides_ignored(self):
        opts = load_options(CONFIG_FIXTURES_DIR / "valid.yaml", {"placeholder": None, "master": None})
        assert opts.placeholder == "empty"
        assert opts.master == "en"

    def test_invalid_options_raise_with_report(self):
        with pytest.raises(ConfigError) as exc_info:
            load_options(overrides={"placeholder": "blank"})
        assert "[ERROR] placeholder" in str(exc_info.value)

    def test_master_missing_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="i18n_scan.common.typed_config.reader"):
            opts = load_options(overrides={"locales": "de,fr", "master": "en"})
        assert opts.master == "en"
        assert "Master locale 'en' is not in locales" in caplog.text

    def test_master_missing_strict_raises(self):
        with pytest.raises(ConfigError, match="master"):
            load_options(overrides={"locales": "de,fr", "master": "en", "strict": True})

    def test_bad_yaml_propagates(self):
        with pytest.raises(ConfigError):
            load_options(CONFIG_FIXTURES_DIR / "invalid_yaml_syntax.yaml")

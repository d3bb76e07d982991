"""Tests for the Configuration Loader module.

Tests configuration loading from YAML files and environment variables.
"""

import os
from unittest.mock import patch

import pytest

from gempa.core.config import BMKG_BASE_URL, ClientConfig
from gempa.core.errors import ConfigError
from gempa.shell.config_loader import (
    _resolve_value,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)


class TestResolveValue:
    """Tests for _resolve_value function."""

    def test_returns_non_string_unchanged(self):
        """Non-string values are returned unchanged."""
        assert _resolve_value(12.5) == 12.5
        assert _resolve_value(None) is None
        assert _resolve_value(True) is True

    def test_returns_plain_string_unchanged(self):
        """Plain strings without placeholders are returned unchanged."""
        assert _resolve_value("https://example.com") == "https://example.com"

    def test_resolves_env_var_placeholder(self):
        """Resolves ${VAR} placeholders from environment."""
        with patch.dict(os.environ, {"BMKG_MIRROR": "http://mirror/"}):
            assert _resolve_value("${BMKG_MIRROR}") == "http://mirror/"

    def test_returns_placeholder_if_env_var_not_set(self):
        """Returns original placeholder if env var not set."""
        with patch.dict(os.environ, {}, clear=True):
            assert _resolve_value("${UNDEFINED_VAR}") == "${UNDEFINED_VAR}"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict function."""

    def test_empty_dict_gives_defaults(self):
        """Missing keys fall back to defaults."""
        assert load_config_from_dict({}) == ClientConfig()

    def test_parses_all_fields(self):
        """Every field is read from the dict."""
        config = load_config_from_dict({
            "base_url": "http://mirror/",
            "latest_path": "latest.json",
            "recent_path": "recent.json",
            "felt_path": "felt.json",
            "timeout_seconds": 7,
            "strict_coordinates": True,
        })

        assert config.base_url == "http://mirror/"
        assert config.latest_path == "latest.json"
        assert config.recent_path == "recent.json"
        assert config.felt_path == "felt.json"
        assert config.timeout_seconds == 7.0
        assert config.strict_coordinates is True

    def test_expands_env_placeholders(self):
        """String values may reference environment variables."""
        with patch.dict(os.environ, {"BMKG_MIRROR": "http://mirror/"}):
            config = load_config_from_dict({"base_url": "${BMKG_MIRROR}"})
        assert config.base_url == "http://mirror/"

    @pytest.mark.parametrize(
        "data",
        [
            {"timeout_seconds": "soon"},
            {"timeout_seconds": -1},
            {"strict_coordinates": "maybe"},
            {"base_url": ""},
            {"latest_path": 3},
        ],
    )
    def test_invalid_values_raise(self, data):
        """Bad types raise ConfigError."""
        with pytest.raises(ConfigError):
            load_config_from_dict(data)

    def test_non_mapping_raises(self):
        """Top-level YAML must be a mapping."""
        with pytest.raises(ConfigError):
            load_config_from_dict(["not", "a", "mapping"])  # type: ignore[arg-type]


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Non-existent file falls back to defaults."""
        assert load_config(tmp_path / "missing.yaml") == ClientConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        """Empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ClientConfig()

    def test_loads_yaml(self, tmp_path):
        """Values are read from YAML."""
        path = tmp_path / "gempa.yaml"
        path.write_text("base_url: http://mirror/\ntimeout_seconds: 2.5\n")

        config = load_config(path)

        assert config.base_url == "http://mirror/"
        assert config.timeout_seconds == 2.5

    def test_uses_env_path(self, tmp_path):
        """GEMPA_CONFIG_PATH is used when no path is given."""
        path = tmp_path / "gempa.yaml"
        path.write_text("strict_coordinates: true\n")

        with patch.dict(os.environ, {"GEMPA_CONFIG_PATH": str(path)}):
            config = load_config()

        assert config.strict_coordinates is True

    def test_invalid_yaml_raises(self, tmp_path):
        """Unparseable YAML raises ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("base_url: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config(path)


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_no_env_returns_base(self):
        """Without overrides the base config is returned."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
        assert config.base_url == BMKG_BASE_URL

    def test_applies_overrides(self):
        """Environment variables override the base config."""
        env = {
            "GEMPA_BASE_URL": "http://mirror/",
            "GEMPA_TIMEOUT": "4",
            "GEMPA_STRICT_COORDINATES": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env(ClientConfig(felt_path="felt.json"))

        assert config.base_url == "http://mirror/"
        assert config.timeout_seconds == 4.0
        assert config.strict_coordinates is True
        assert config.felt_path == "felt.json"

    def test_invalid_timeout_raises(self):
        """A non-numeric timeout is a ConfigError."""
        with patch.dict(os.environ, {"GEMPA_TIMEOUT": "later"}, clear=True):
            with pytest.raises(ConfigError):
                load_config_from_env()

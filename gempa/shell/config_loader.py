"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The ClientConfig model is defined in gempa/core/config.py.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from gempa.core.config import ClientConfig
from gempa.core.errors import ConfigError


logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder as-is.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_timeout(value: Any) -> float | None:
    """Parse a timeout in seconds; None means the transport default."""
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout_seconds: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"timeout_seconds must be positive, got {timeout}")
    return timeout


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE_VALUES:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _parse_str(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
    return value


def load_config_from_dict(data: dict[str, Any]) -> ClientConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed ClientConfig

    Raises:
        ConfigError: If a value has the wrong type
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    resolved = {key: _resolve_value(value) for key, value in data.items()}
    defaults = ClientConfig()

    return ClientConfig(
        base_url=_parse_str(resolved.get("base_url", defaults.base_url), "base_url"),
        latest_path=_parse_str(resolved.get("latest_path", defaults.latest_path), "latest_path"),
        recent_path=_parse_str(resolved.get("recent_path", defaults.recent_path), "recent_path"),
        felt_path=_parse_str(resolved.get("felt_path", defaults.felt_path), "felt_path"),
        timeout_seconds=_parse_timeout(resolved.get("timeout_seconds")),
        strict_coordinates=_parse_bool(
            resolved.get("strict_coordinates", False), "strict_coordinates"
        ),
    )


def load_config(config_path: str | Path | None = None) -> ClientConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses GEMPA_CONFIG_PATH env var or default.

    Returns:
        Parsed ClientConfig

    Raises:
        ConfigError: If the file is not valid YAML or has bad values
    """
    if config_path is None:
        config_path = os.environ.get("GEMPA_CONFIG_PATH", "config/gempa.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return ClientConfig()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return ClientConfig()

    return load_config_from_dict(data)


def load_config_from_env(base: ClientConfig | None = None) -> ClientConfig:
    """Apply environment variable overrides on top of a configuration.

    Environment variables:
        GEMPA_BASE_URL: Base URL of the BMKG feeds
        GEMPA_TIMEOUT: Request timeout in seconds
        GEMPA_STRICT_COORDINATES: "true" to fail on unparseable coordinates

    Args:
        base: Configuration to override, defaults to ClientConfig()

    Returns:
        ClientConfig with overrides applied
    """
    config = base or ClientConfig()
    overrides: dict[str, Any] = {}

    base_url = os.environ.get("GEMPA_BASE_URL")
    if base_url:
        overrides["base_url"] = base_url

    timeout = os.environ.get("GEMPA_TIMEOUT")
    if timeout:
        overrides["timeout_seconds"] = _parse_timeout(timeout)

    strict = os.environ.get("GEMPA_STRICT_COORDINATES")
    if strict is not None:
        overrides["strict_coordinates"] = _parse_bool(strict, "GEMPA_STRICT_COORDINATES")

    return replace(config, **overrides) if overrides else config

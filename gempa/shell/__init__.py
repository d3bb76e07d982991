"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- BMKG feed clients (HTTP, blocking and async)
- Configuration loading (environment/files)

Keep this layer thin and simple. All parsing logic should be in core.
"""

from gempa.shell.bmkg_client import BMKGClient, LatestEarthquake
from gempa.shell.async_client import AsyncBMKGClient
from gempa.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "BMKGClient",
    "AsyncBMKGClient",
    "LatestEarthquake",
    "load_config",
    "load_config_from_env",
]

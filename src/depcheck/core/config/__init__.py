"""Configuration management for depcheck."""

from depcheck.core.config.loader import ConfigLoader
from depcheck.core.config.settings import (
    LoggingSettings,
    ProjectSettings,
    RegistrySettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "LoggingSettings",
    "ProjectSettings",
    "RegistrySettings",
    "Settings",
    "get_settings",
]

"""Configuration loading for the language registry."""

from .settings import (
    ASSETS_ROOT,
    ConfigurationError,
    RegistrySettings,
    load_settings,
)

__all__ = ["ASSETS_ROOT", "ConfigurationError", "RegistrySettings", "load_settings"]

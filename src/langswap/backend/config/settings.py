"""Registry settings loaded from YAML with environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ASSETS_ROOT = Path(__file__).resolve().parents[2] / "assets"
CONFIG_ENV = "LANGSWAP_CONFIG"
ASSET_ROOT_ENV = "LANGSWAP_ASSET_ROOT"


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class RegistrySettings(BaseModel):
    """Where language resources live and how they are watched."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    asset_root: Path = ASSETS_ROOT
    subdirectory: str = "i18n"
    extension: str = ".txt"
    watch: bool = True
    use_polling: bool = False
    poll_interval: float = Field(default=1.0, gt=0)
    selection_file: Path | None = None
    default_language: str | None = None

    @field_validator("extension")
    @classmethod
    def _require_leading_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("extension must look like '.txt'")
        return value

    @field_validator("subdirectory")
    @classmethod
    def _require_relative(cls, value: str) -> str:
        if not value or Path(value).is_absolute():
            raise ValueError("subdirectory must be a relative path")
        return value

    @property
    def resource_directory(self) -> Path:
        return self.asset_root / self.subdirectory


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def load_settings(
    path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> RegistrySettings:
    """Build settings from an optional YAML file and environment variables."""

    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}

    config_path = path or env.get(CONFIG_ENV)
    if config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        raw = _load_yaml(config_file)

    asset_root = env.get(ASSET_ROOT_ENV)
    if asset_root:
        raw["asset_root"] = asset_root

    try:
        return RegistrySettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed: {error}") from error


__all__ = [
    "ASSETS_ROOT",
    "ASSET_ROOT_ENV",
    "CONFIG_ENV",
    "ConfigurationError",
    "RegistrySettings",
    "load_settings",
]

"""Helpers shared by the registry blueprints."""

from __future__ import annotations

from typing import Any

from flask import current_app

from langswap.backend.app.localization import LanguageRecord, LanguageRegistry

EXTENSION_KEY = "langswap"


def current_registry() -> LanguageRegistry:
    """Return the registry bound to the running application."""

    return current_app.extensions[EXTENSION_KEY]


def serialise_record(record: LanguageRecord, *, active_code: str | None) -> dict[str, Any]:
    return {
        "code": record.code,
        "active": record.code == active_code,
        "translations": dict(record.translations),
    }


__all__ = ["EXTENSION_KEY", "current_registry", "serialise_record"]

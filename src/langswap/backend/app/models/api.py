"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SelectionRequest(BaseModel):
    """Operator request to change the active language; ``None`` clears it."""

    model_config = ConfigDict(extra="forbid")

    code: str | None = Field(...)

    @field_validator("code")
    @classmethod
    def _reject_blank(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise ValueError("code must not be empty")
        return value


class ResolveRequest(BaseModel):
    """Batch lookup of translation keys."""

    model_config = ConfigDict(extra="forbid")

    keys: list[str] = Field(default_factory=list, max_length=1000)


def format_validation_error(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into a JSON friendly list."""

    return [
        {
            "location": ".".join(str(part) for part in entry["loc"]),
            "message": entry["msg"],
        }
        for entry in error.errors()
    ]


__all__ = ["ResolveRequest", "SelectionRequest", "format_validation_error"]

"""Persistence of the selected language code across process restarts."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)

_FIELD = "language_code"


class SelectionStore(Protocol):
    """Loads and saves a single optional language code."""

    def load(self) -> str | None: ...

    def save(self, code: str | None) -> None: ...


class MemorySelectionStore:
    """Keeps the selection for the lifetime of the process only."""

    def __init__(self, code: str | None = None) -> None:
        self.code = code

    def load(self) -> str | None:
        return self.code

    def save(self, code: str | None) -> None:
        self.code = code


class JsonSelectionStore:
    """Stores ``{"language_code": ...}`` in a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> str | None:
        if not self.path.is_file():
            return None

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            _LOGGER.warning("Ignoring unreadable selection file %s: %s", self.path, exc)
            return None

        code = payload.get(_FIELD) if isinstance(payload, dict) else None
        return code if isinstance(code, str) and code else None

    def save(self, code: str | None) -> None:
        """Replace the file atomically so readers never see a partial write."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps({_FIELD: code}, ensure_ascii=False, indent=2) + "\n")
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise


__all__ = ["JsonSelectionStore", "MemorySelectionStore", "SelectionStore"]

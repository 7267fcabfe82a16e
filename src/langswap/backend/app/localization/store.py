"""Thread-safe in-memory collection of loaded language records."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Literal

from .errors import ParseError, UnknownLanguageCode
from .parser import DEFAULT_EXTENSION, LanguageRecord, parse

_LOGGER = logging.getLogger(__name__)

ChangeReason = Literal["reloaded", "selected", "cleared"]


@dataclass(frozen=True)
class LanguageChanged:
    """Notification pushed to observers when displayed text must refresh."""

    code: str | None
    reason: ChangeReason


Listener = Callable[[LanguageChanged], None]


class LanguageStore:
    """Records keyed by language code plus the active selection.

    Records are immutable, so replacing one is a single reference swap under
    the lock. Readers always get a complete record, old or new.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, LanguageRecord] = {}
        self._active_code: str | None = None
        self._listeners: list[Listener] = []

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def active_code(self) -> str | None:
        with self._lock:
            return self._active_code

    def codes(self) -> list[str]:
        """Return loaded language codes in a stable order for pickers."""

        with self._lock:
            return sorted(self._records)

    def get(self, code: str) -> LanguageRecord | None:
        with self._lock:
            return self._records.get(code)

    def get_active(self) -> LanguageRecord | None:
        with self._lock:
            if self._active_code is None:
                return None
            return self._records.get(self._active_code)

    def load_all(self, paths: Iterable[Path | str]) -> list[str]:
        """Parse and insert each path; a broken file never stops the others."""

        loaded: list[str] = []
        for path in paths:
            try:
                record = parse(path)
            except ParseError as exc:
                _LOGGER.error("Failed to load %s: %s", Path(path).name, exc)
                continue
            self.upsert(record)
            loaded.append(record.code)
        return loaded

    def load_directory(
        self, directory: Path | str, extension: str = DEFAULT_EXTENSION
    ) -> list[str]:
        """Create ``directory`` if needed and load every resource file in it."""

        root = Path(directory)
        root.mkdir(parents=True, exist_ok=True)
        paths = sorted(
            entry for entry in root.iterdir() if entry.is_file() and entry.suffix == extension
        )
        loaded = self.load_all(paths)
        _LOGGER.info("Loaded languages [%s]", ", ".join(loaded))
        return loaded

    def upsert(self, record: LanguageRecord) -> bool:
        """Insert or replace ``record``; return True when it was the active language."""

        with self._lock:
            self._records[record.code] = record
            is_active = record.code == self._active_code

        if is_active:
            self._notify(LanguageChanged(code=record.code, reason="reloaded"))
        return is_active

    def _activate(self, code: str) -> LanguageRecord | None:
        with self._lock:
            record = self._records.get(code)
            if record is None:
                return None
            self._active_code = code

        _LOGGER.info("Updated language to %s", code)
        self._notify(LanguageChanged(code=code, reason="selected"))
        return record

    def set_active(self, code: str) -> bool:
        """Select ``code`` if loaded; otherwise keep the current selection."""

        return self._activate(code) is not None

    def select(self, code: str) -> LanguageRecord:
        """Like :meth:`set_active` but raise :class:`UnknownLanguageCode` on failure."""

        record = self._activate(code)
        if record is None:
            raise UnknownLanguageCode(code)
        return record

    def clear_active(self) -> None:
        """Drop the selection so lookups fall back to their keys."""

        with self._lock:
            if self._active_code is None:
                return
            self._active_code = None

        _LOGGER.info("Cleared language selection")
        self._notify(LanguageChanged(code=None, reason="cleared"))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change events and return an unsubscribe hook."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: LanguageChanged) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                _LOGGER.exception("Language change listener %r failed", listener)


__all__ = ["ChangeReason", "LanguageChanged", "LanguageStore", "Listener"]

"""Key lookups against the active language with fallback-to-key."""

from __future__ import annotations

from typing import Iterable

from .store import LanguageStore


class Translator:
    """Callable helper for retrieving localized strings from a live store."""

    def __init__(self, store: LanguageStore) -> None:
        self._store = store

    @property
    def locale(self) -> str | None:
        return self._store.active_code

    def resolve(self, key: str) -> str:
        # One read of the active record keeps the lookup on a single snapshot.
        record = self._store.get_active()
        if record is None:
            return key
        return record.translations.get(key, key)

    __call__ = resolve

    def resolve_many(self, keys: Iterable[str]) -> dict[str, str]:
        """Resolve several keys against the same record snapshot."""

        record = self._store.get_active()
        if record is None:
            return {key: key for key in keys}
        return {key: record.translations.get(key, key) for key in keys}


__all__ = ["Translator"]

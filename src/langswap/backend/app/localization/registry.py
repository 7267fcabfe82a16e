"""Process-wide wiring of store, watcher, translator and persisted selection."""

from __future__ import annotations

import logging
import threading

from langswap.backend.app.selection import (
    JsonSelectionStore,
    MemorySelectionStore,
    SelectionStore,
)
from langswap.backend.config import RegistrySettings

from .errors import WatchSetupFailure
from .parser import LanguageRecord
from .resolver import Translator
from .store import LanguageStore
from .watcher import ResourceWatcher

_LOGGER = logging.getLogger(__name__)


class LanguageRegistry:
    """Owns the language store for the lifetime of the host process."""

    def __init__(
        self,
        settings: RegistrySettings | None = None,
        *,
        selection: SelectionStore | None = None,
    ) -> None:
        self.settings = settings or RegistrySettings()
        self.store = LanguageStore()
        self.translator = Translator(self.store)
        if selection is None:
            if self.settings.selection_file is not None:
                selection = JsonSelectionStore(self.settings.selection_file)
            else:
                selection = MemorySelectionStore()
        self.selection = selection
        self.watcher = ResourceWatcher(
            self.store,
            self.settings.resource_directory,
            self.settings.extension,
            use_polling=self.settings.use_polling,
            poll_interval=self.settings.poll_interval,
        )
        self._selection_lock = threading.Lock()
        self._started = False

    @property
    def watching(self) -> bool:
        return self.watcher.running

    def start(self) -> None:
        """Load resources, restore the saved selection and start hot reload."""

        if self._started:
            return
        self._started = True

        self.store.load_directory(self.settings.resource_directory, self.settings.extension)

        code = self.selection.load() or self.settings.default_language
        if code is not None and not self.store.set_active(code):
            _LOGGER.warning("Saved language %s is not available; no language selected", code)
        _LOGGER.info("Initializing language to %s", self.store.active_code)

        if self.settings.watch:
            try:
                self.watcher.start()
            except WatchSetupFailure as exc:
                _LOGGER.error("Hot reload disabled: %s", exc)

    def stop(self) -> None:
        self.watcher.stop()
        self._started = False

    def select(self, code: str) -> LanguageRecord:
        """Activate ``code`` and persist it; raises ``UnknownLanguageCode``."""

        # Activation and persistence form one step so the saved code always
        # matches the active one.
        with self._selection_lock:
            record = self.store.select(code)
            self._persist(code)
        return record

    def clear_selection(self) -> None:
        with self._selection_lock:
            self.store.clear_active()
            self._persist(None)

    def _persist(self, code: str | None) -> None:
        try:
            self.selection.save(code)
        except OSError as exc:
            _LOGGER.error("Failed to save language selection %s: %s", code, exc)

    def translate(self, key: str) -> str:
        return self.translator.resolve(key)

    def __enter__(self) -> LanguageRegistry:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["LanguageRegistry"]

"""Hot reload of language resources driven by filesystem notifications.

The watchdog observer thread only enqueues paths. A single worker thread
drains the queue and runs parse then :meth:`LanguageStore.upsert`, so the
store has exactly one ingestion path and the observer callback never
touches it directly.
"""

from __future__ import annotations

import logging
import os
import queue
import threading
from pathlib import Path
from typing import Any

from watchdog.events import FileModifiedEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.polling import PollingObserver

from .errors import ParseError, WatchSetupFailure
from .parser import DEFAULT_EXTENSION, LanguageRecord, is_resource_file, parse
from .store import LanguageStore

_LOGGER = logging.getLogger(__name__)

_STOP = object()


class _ResourceEventHandler(FileSystemEventHandler):
    """Forward content modifications of resource files onto a queue."""

    def __init__(self, pending: queue.Queue[Any], extension: str) -> None:
        super().__init__()
        self._pending = pending
        self._extension = extension

    def on_modified(self, event: Any) -> None:
        if not isinstance(event, FileModifiedEvent) or event.is_directory:
            return
        path = Path(os.fsdecode(event.src_path))
        if is_resource_file(path, self._extension):
            self._pending.put(path)


class ResourceWatcher:
    """Watch a resource directory and hot swap languages whose files change."""

    def __init__(
        self,
        store: LanguageStore,
        directory: Path | str,
        extension: str = DEFAULT_EXTENSION,
        *,
        use_polling: bool = False,
        poll_interval: float = 1.0,
    ) -> None:
        self.store = store
        self.directory = Path(directory)
        self.extension = extension
        self._use_polling = use_polling
        self._poll_interval = poll_interval
        self._pending: queue.Queue[Any] = queue.Queue()
        self._observer: Any = None
        self._worker: threading.Thread | None = None
        self._state_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._observer is not None

    def reload(self, path: Path | str) -> LanguageRecord | None:
        """Re-parse ``path`` and upsert it; on failure keep the loaded record."""

        resource = Path(path)
        _LOGGER.info("Updated language file %s", resource.name)
        try:
            record = parse(resource)
        except ParseError as exc:
            _LOGGER.error("Failed to load %s: %s", resource.name, exc)
            return None

        self.store.upsert(record)
        return record

    def start(self) -> None:
        """Begin watching; raise :class:`WatchSetupFailure` if that is impossible."""

        with self._state_lock:
            if self._observer is not None:
                return

            try:
                self.directory.mkdir(parents=True, exist_ok=True)
                if self._use_polling:
                    observer = PollingObserver(timeout=self._poll_interval)
                else:
                    observer = Observer()
                observer.schedule(
                    _ResourceEventHandler(self._pending, self.extension),
                    str(self.directory),
                    recursive=False,
                )
                observer.start()
            except Exception as exc:
                raise WatchSetupFailure(
                    f"Unable to watch {self.directory}: {exc}"
                ) from exc

            self._worker = threading.Thread(
                target=self._drain, name="langswap-reload", daemon=True
            )
            self._worker.start()
            self._observer = observer
            _LOGGER.debug("Watching %s for *%s changes", self.directory, self.extension)

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop watching and release the observer; safe to call repeatedly."""

        with self._state_lock:
            observer, self._observer = self._observer, None
            worker, self._worker = self._worker, None

        if observer is not None:
            observer.stop()
            observer.join(timeout)
        if worker is not None:
            self._pending.put(_STOP)
            worker.join(timeout)

    def wait_idle(self) -> None:
        """Block until every queued notification has been processed."""

        self._pending.join()

    def _drain(self) -> None:
        while True:
            item = self._pending.get()
            try:
                if item is _STOP:
                    return
                self.reload(item)
            except Exception:
                _LOGGER.exception("Unexpected failure reloading %s", item)
            finally:
                self._pending.task_done()

    def __enter__(self) -> ResourceWatcher:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["ResourceWatcher"]

"""Unit coverage for hot reload of resource files."""

from __future__ import annotations

import queue
import time
from pathlib import Path

import pytest
from watchdog.events import DirModifiedEvent, FileCreatedEvent, FileModifiedEvent

from langswap.backend.app.localization import (
    LanguageChanged,
    LanguageStore,
    ResourceWatcher,
    Translator,
    WatchSetupFailure,
)
from langswap.backend.app.localization.watcher import _ResourceEventHandler


@pytest.fixture()
def store(tmp_path: Path) -> LanguageStore:
    (tmp_path / "en.txt").write_text("greeting=Hello\n", encoding="utf-8")
    instance = LanguageStore()
    instance.load_directory(tmp_path)
    instance.set_active("en")
    return instance


def _wait_for(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return predicate()


def test_reload_swaps_active_language_and_notifies(tmp_path: Path, store: LanguageStore) -> None:
    events: list[LanguageChanged] = []
    store.subscribe(events.append)
    watcher = ResourceWatcher(store, tmp_path)
    (tmp_path / "en.txt").write_text("greeting=Hi there\n", encoding="utf-8")

    record = watcher.reload(tmp_path / "en.txt")

    assert record is not None
    assert Translator(store)("greeting") == "Hi there"
    assert events == [LanguageChanged(code="en", reason="reloaded")]


def test_reload_failure_keeps_previous_record(
    tmp_path: Path, store: LanguageStore, caplog: pytest.LogCaptureFixture
) -> None:
    watcher = ResourceWatcher(store, tmp_path)
    before = store.get("en")
    (tmp_path / "en.txt").write_text("greeting=Hi\nbroken\n", encoding="utf-8")

    assert watcher.reload(tmp_path / "en.txt") is None

    assert store.get("en") is before
    assert store.active_code == "en"
    assert "Failed to load en.txt" in caplog.text


def test_reload_of_new_file_adds_language(tmp_path: Path, store: LanguageStore) -> None:
    watcher = ResourceWatcher(store, tmp_path)
    (tmp_path / "de.txt").write_text("greeting=Hallo\n", encoding="utf-8")

    watcher.reload(tmp_path / "de.txt")

    assert store.codes() == ["de", "en"]
    assert store.active_code == "en"


def test_repeated_reloads_are_idempotent(tmp_path: Path, store: LanguageStore) -> None:
    watcher = ResourceWatcher(store, tmp_path)

    first = watcher.reload(tmp_path / "en.txt")
    second = watcher.reload(tmp_path / "en.txt")

    assert first == second == store.get("en")


def test_handler_only_forwards_resource_modifications(tmp_path: Path) -> None:
    pending: queue.Queue = queue.Queue()
    handler = _ResourceEventHandler(pending, ".txt")

    handler.on_modified(FileModifiedEvent(str(tmp_path / "en.txt")))
    handler.on_modified(FileModifiedEvent(str(tmp_path / "en.txt~")))
    handler.on_modified(DirModifiedEvent(str(tmp_path)))
    handler.on_modified(FileCreatedEvent(str(tmp_path / "fr.txt")))

    assert pending.get_nowait() == tmp_path / "en.txt"
    assert pending.empty()


def test_start_creates_directory_and_stop_is_idempotent(tmp_path: Path) -> None:
    directory = tmp_path / "missing" / "i18n"
    watcher = ResourceWatcher(LanguageStore(), directory, use_polling=True, poll_interval=0.1)

    with watcher:
        assert directory.is_dir()
        assert watcher.running

    assert not watcher.running
    watcher.stop()


def test_start_reports_watch_setup_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    watcher = ResourceWatcher(LanguageStore(), blocker / "i18n")

    with pytest.raises(WatchSetupFailure):
        watcher.start()

    assert not watcher.running


def test_file_modification_hot_swaps_language(tmp_path: Path, store: LanguageStore) -> None:
    translator = Translator(store)
    watcher = ResourceWatcher(store, tmp_path, use_polling=True, poll_interval=0.1)

    with watcher:
        (tmp_path / "en.txt").write_text("greeting=Hello again, world\n", encoding="utf-8")

        assert _wait_for(lambda: translator("greeting") == "Hello again, world")


def test_native_observer_hot_swaps_language(tmp_path: Path, store: LanguageStore) -> None:
    translator = Translator(store)
    watcher = ResourceWatcher(store, tmp_path)

    with watcher:
        (tmp_path / "en.txt").write_text("greeting=Hello from inotify\n", encoding="utf-8")

        assert _wait_for(lambda: translator("greeting") == "Hello from inotify")

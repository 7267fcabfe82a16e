"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from langswap.backend.app import create_app  # noqa: E402
from langswap.backend.app.localization import LanguageRegistry  # noqa: E402
from langswap.backend.app.selection import MemorySelectionStore  # noqa: E402
from langswap.backend.config import RegistrySettings  # noqa: E402


@pytest.fixture()
def asset_root(tmp_path: Path) -> Path:
    """Asset root holding an ``i18n`` directory with English and French files."""

    resources = tmp_path / "i18n"
    resources.mkdir()
    (resources / "en.txt").write_text("greeting=Hello\nfarewell=Goodbye\n", encoding="utf-8")
    (resources / "fr.txt").write_text("greeting=Bonjour\nfarewell=Au revoir\n", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def settings(asset_root: Path) -> RegistrySettings:
    return RegistrySettings(asset_root=asset_root, watch=False)


@pytest.fixture()
def registry(settings: RegistrySettings):
    """A started registry without a filesystem watcher."""

    instance = LanguageRegistry(settings, selection=MemorySelectionStore())
    instance.start()
    yield instance
    instance.stop()


@pytest.fixture()
def app(registry: LanguageRegistry) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(registry=registry)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()

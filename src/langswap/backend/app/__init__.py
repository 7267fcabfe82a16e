"""Application factory exposing the language registry over HTTP."""

from __future__ import annotations

import atexit

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from langswap.backend.config import RegistrySettings, load_settings
from langswap.backend.version import get_project_version

from .http import problem_response, unknown_language
from .localization import LanguageRegistry, UnknownLanguageCode
from .routes import register_routes
from .routes.common import EXTENSION_KEY


def create_app(
    settings: RegistrySettings | None = None,
    registry: LanguageRegistry | None = None,
) -> Flask:
    """Create the Flask application and start the language registry.

    A registry passed in by the caller is used as is and its lifecycle stays
    with the caller. Otherwise one is built from ``settings`` (or the
    environment) and stopped at interpreter exit.
    """

    app = Flask(__name__)

    if registry is None:
        registry = LanguageRegistry(settings or load_settings())
        registry.start()
        atexit.register(registry.stop)

    app.extensions[EXTENSION_KEY] = registry
    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "languages": registry.store.codes(),
            "active": registry.store.active_code,
            "watching": registry.watching,
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(UnknownLanguageCode)
    def handle_unknown_language(error: UnknownLanguageCode):
        """Rejected selections keep the previous language and report 404."""

        return unknown_language(error.code, active=registry.store.active_code).to_response()

    return app


__all__ = ["create_app"]

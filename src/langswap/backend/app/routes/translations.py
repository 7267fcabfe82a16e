"""Key resolution endpoints used when rendering text."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from langswap.backend.app.http import problem_response
from langswap.backend.app.models import ResolveRequest, format_validation_error

from .common import current_registry

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/<path:key>")
def resolve_key(key: str) -> tuple[Any, int]:
    """Resolve a single key; unknown keys come back unchanged."""

    translator = current_registry().translator
    payload = {"key": key, "text": translator(key), "locale": translator.locale}
    return jsonify(payload), 200


@blueprint.post("/resolve")
def resolve_keys() -> tuple[Any, int]:
    """Resolve a batch of keys against one snapshot of the active language."""

    try:
        lookup = ResolveRequest.model_validate(request.get_json(force=True))
    except ValidationError as error:
        return problem_response(
            "validation_error",
            status=400,
            message="Invalid resolve payload",
            errors=format_validation_error(error),
        ).to_response()

    translator = current_registry().translator
    payload = {
        "locale": translator.locale,
        "translations": translator.resolve_many(lookup.keys),
    }
    return jsonify(payload), 200

"""Language picker endpoints: list, inspect and select languages."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from langswap.backend.app.http import problem_response, unknown_language
from langswap.backend.app.models import SelectionRequest, format_validation_error

from .common import current_registry, serialise_record

blueprint = Blueprint("languages", __name__, url_prefix="/api/v1/languages")


@blueprint.get("/")
def list_languages() -> tuple[Any, int]:
    """Return loaded language codes and the active selection."""

    registry = current_registry()
    payload = {
        "languages": registry.store.codes(),
        "active": registry.store.active_code,
    }
    return jsonify(payload), 200


@blueprint.get("/<code>")
def get_language(code: str) -> tuple[Any, int]:
    """Return the full mapping for one language."""

    registry = current_registry()
    record = registry.store.get(code)
    if record is None:
        return unknown_language(code, active=registry.store.active_code).to_response()
    return jsonify(serialise_record(record, active_code=registry.store.active_code)), 200


@blueprint.put("/active")
def select_language() -> tuple[Any, int]:
    """Change the active language; unknown codes leave the selection as is."""

    try:
        selection = SelectionRequest.model_validate(request.get_json(force=True))
    except ValidationError as error:
        return problem_response(
            "validation_error",
            status=400,
            message="Invalid selection payload",
            errors=format_validation_error(error),
        ).to_response()

    registry = current_registry()
    if selection.code is None:
        registry.clear_selection()
    else:
        registry.select(selection.code)

    return jsonify({"active": registry.store.active_code}), 200

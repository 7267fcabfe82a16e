#!/usr/bin/env python3
"""Validate language resource files and report keys missing per language."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from langswap.backend.app.localization import LanguageRecord, ParseError, parse
from langswap.backend.config import load_settings


class ValidationError(Exception):
    """Raised when validation detects unrecoverable issues."""


def _load_records(directory: Path, extension: str) -> tuple[dict[str, LanguageRecord], list[str]]:
    records: dict[str, LanguageRecord] = {}
    failures: list[str] = []

    if not directory.is_dir():
        raise ValidationError(f"Missing resource directory: {directory}")

    for path in sorted(directory.glob(f"*{extension}")):
        try:
            record = parse(path)
        except ParseError as exc:
            failures.append(str(exc))
            continue
        records[record.code] = record

    return records, failures


def _missing_keys(records: dict[str, LanguageRecord], base_code: str) -> list[str]:
    issues: list[str] = []
    base = records.get(base_code)
    if base is None:
        return issues

    expected = set(base.translations)
    for code, record in sorted(records.items()):
        missing = expected - set(record.translations)
        if missing:
            issues.append(
                f"Language '{code}' missing {len(missing)} keys: {', '.join(sorted(missing))}"
            )
    return issues


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", type=Path, help="Resource directory (defaults to settings)")
    parser.add_argument("--extension", default=None, help="Resource file extension, e.g. .txt")
    parser.add_argument("--base", default="en", help="Language whose keys every other language should define")
    parser.add_argument("--fail-on-missing", action="store_true", help="Exit with an error if keys are missing")
    args = parser.parse_args(argv)

    settings = load_settings()
    directory = args.directory or settings.resource_directory
    extension = args.extension or settings.extension

    try:
        records, failures = _load_records(directory, extension)
    except ValidationError as exc:
        print(f"[error] {exc}")
        return 1

    missing = _missing_keys(records, args.base)

    for failure in failures:
        print(f"[malformed] {failure}")

    for issue in missing:
        print(f"[missing] {issue}")

    print(f"Checked {len(records) + len(failures)} files, loaded [{', '.join(sorted(records))}]")

    if failures or (missing and args.fail_on_missing):
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

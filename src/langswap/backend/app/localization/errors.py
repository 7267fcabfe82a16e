"""Exception hierarchy for language resource loading and selection."""

from __future__ import annotations

from pathlib import Path


class LocalizationError(Exception):
    """Base class for registry failures."""


class ParseError(LocalizationError):
    """Raised when a resource file cannot be turned into a language record."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{Path(path).name}: {message}")
        self.path = Path(path)


class MalformedLine(ParseError):
    """A non-blank line lacks the ``=`` separator."""

    def __init__(self, path: Path | str, line_number: int, line: str) -> None:
        super().__init__(path, f'line {line_number} "{line}" has no = sign')
        self.line_number = line_number
        self.line = line


class UnreadableFile(ParseError):
    """The resource file could not be opened or decoded."""


class UnknownLanguageCode(LocalizationError, KeyError):
    """Selection of a code with no loaded record."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown language code: {self.code!r}"


class WatchSetupFailure(LocalizationError):
    """The file watch subscription could not be established."""


__all__ = [
    "LocalizationError",
    "ParseError",
    "MalformedLine",
    "UnreadableFile",
    "UnknownLanguageCode",
    "WatchSetupFailure",
]

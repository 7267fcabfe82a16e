"""Parse ``key=value`` resource files into immutable language records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import MalformedLine, UnreadableFile

DEFAULT_EXTENSION = ".txt"
_SEPARATOR = "="


@dataclass(frozen=True)
class LanguageRecord:
    """A single language: its code and flat key to text mapping."""

    code: str
    translations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into a read-only view so a published record can never change.
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageRecord):
            return NotImplemented
        return self.code == other.code and dict(self.translations) == dict(
            other.translations
        )

    def __hash__(self) -> int:
        return hash((self.code, frozenset(self.translations.items())))

    def __len__(self) -> int:
        return len(self.translations)

    def __repr__(self) -> str:
        return f"LanguageRecord[{self.code}]"


def language_code(path: Path | str) -> str:
    """Return the language code encoded in a resource file name."""

    return Path(path).stem


def is_resource_file(path: Path | str, extension: str = DEFAULT_EXTENSION) -> bool:
    """Whether ``path`` names a resource file with the expected extension."""

    return Path(path).suffix == extension


def parse_lines(code: str, lines: Iterable[str], *, source: Path | str | None = None) -> LanguageRecord:
    """Build a record from raw lines, raising :class:`MalformedLine` on bad input.

    Blank lines are skipped. Only the first ``=`` splits key from value and
    the value is kept verbatim. Later duplicates override earlier ones.
    """

    translations: dict[str, str] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line:
            continue
        key, separator, value = line.partition(_SEPARATOR)
        if not separator:
            raise MalformedLine(source or code, line_number, line)
        translations[key] = value

    return LanguageRecord(code=code, translations=translations)


def parse(path: Path | str) -> LanguageRecord:
    """Read ``path`` once and return its language record."""

    resource = Path(path)
    try:
        with resource.open("r", encoding="utf-8-sig", newline="") as handle:
            lines = handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableFile(resource, str(exc)) from exc

    return parse_lines(language_code(resource), lines, source=resource)


__all__ = [
    "DEFAULT_EXTENSION",
    "LanguageRecord",
    "is_resource_file",
    "language_code",
    "parse",
    "parse_lines",
]

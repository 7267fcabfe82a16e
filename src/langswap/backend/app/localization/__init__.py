"""Language registry: resource parsing, hot reload and key resolution."""

from .errors import (
    LocalizationError,
    MalformedLine,
    ParseError,
    UnknownLanguageCode,
    UnreadableFile,
    WatchSetupFailure,
)
from .parser import LanguageRecord, is_resource_file, language_code, parse, parse_lines
from .registry import LanguageRegistry
from .resolver import Translator
from .store import LanguageChanged, LanguageStore
from .watcher import ResourceWatcher

__all__ = [
    "LanguageChanged",
    "LanguageRecord",
    "LanguageRegistry",
    "LanguageStore",
    "LocalizationError",
    "MalformedLine",
    "ParseError",
    "ResourceWatcher",
    "Translator",
    "UnknownLanguageCode",
    "UnreadableFile",
    "WatchSetupFailure",
    "is_resource_file",
    "language_code",
    "parse",
    "parse_lines",
]

"""Exception hierarchy raised by the catalog core."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for every error raised by the catalog package."""


class ParseError(CatalogError):
    """A source line could not be turned into a record."""


class MalformedLineError(ParseError):
    def __init__(self, line: str, origin: str = "", line_no: Optional[int] = None, reason: str = "") -> None:
        self.line = line
        self.origin = origin
        self.line_no = line_no
        self.reason = reason or "malformed line"
        location = origin
        if line_no is not None:
            location = f"{origin}:{line_no}"
        super().__init__(f"{location}: {self.reason}: {line!r}" if location else f"{self.reason}: {line!r}")


class ScanError(CatalogError):
    """Scanning the source directory failed."""


class SourceDirMissingError(ScanError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Source directory {path} does not exist")


class SourceDirUnreadableError(ScanError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Cannot list source directory {path}: {cause}")


class LineReadError(ScanError):
    def __init__(self, path: Path, line_no: int, cause: Exception) -> None:
        self.path = path
        self.line_no = line_no
        super().__init__(f"Failed to read {path} at line {line_no}: {cause}")


class CacheError(CatalogError):
    """The persisted catalog could not be handled."""


class CacheWriteError(CacheError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        super().__init__(f"Could not write catalog cache {path}: {cause}")


class SelectionError(CatalogError):
    """A chosen entry could not be delivered."""


class UnknownEntryError(SelectionError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{text!r} is not in the catalog")


class ImagePathMissingError(SelectionError):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"No image path is known for tag {tag!r}")


class ClipboardMissingError(SelectionError):
    def __init__(self) -> None:
        super().__init__("No clipboard is configured to receive the selection")

"""Catalog package: parsing, storing, scanning and persisting emoji entries."""

from .errors import CatalogError
from .normalize import normalize
from .parser import parse
from .persistence import CatalogCache
from .scanner import SourceScanner
from .schema import ImagePathEntry, ParsedLine, Record, ScanReport, Selection
from .service import CatalogService
from .store import CatalogStore

__all__ = [
    "CatalogError",
    "normalize",
    "parse",
    "CatalogCache",
    "SourceScanner",
    "ImagePathEntry",
    "ParsedLine",
    "Record",
    "ScanReport",
    "Selection",
    "CatalogService",
    "CatalogStore",
]

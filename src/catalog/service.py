"""Facade tying scanning, persistence and selection together."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional

from utils.config import CatalogConfig
from utils.logging import get_logger

from .errors import ClipboardMissingError, ImagePathMissingError, SourceDirMissingError, UnknownEntryError
from .persistence import CatalogCache
from .scanner import SourceScanner
from .schema import ScanReport, Selection, image_tag
from .store import CatalogStore

if TYPE_CHECKING:  # pragma: no cover
    from picker.base import Clipboard, Picker


LOGGER = get_logger(__name__)

EXAMPLE_FILENAME = "example.csv"
EXAMPLE_LINES = (
    "👋 wave",
    "👍 thumbs up",
    "😂 face with tears of joy",
    "🎉 party popper",
    "¯\\_(ツ)_/¯ shrug",
    "(╯°□°)╯︵ ┻━┻ table flip",
)


class CatalogService:
    """Own one catalog store for the lifetime of a CLI invocation."""

    def __init__(
        self,
        config: CatalogConfig,
        cache: Optional[CatalogCache] = None,
        scanner: Optional[SourceScanner] = None,
        clipboard: Optional["Clipboard"] = None,
    ) -> None:
        self.config = config
        self.cache = cache or CatalogCache(config.cache_path)
        self.scanner = scanner or SourceScanner(config.extensions, cache=self.cache)
        self.clipboard = clipboard
        self.store = CatalogStore()

    @property
    def source_dir(self) -> Path:
        return self.config.source_dir

    def bootstrap(self) -> bool:
        """Create the source directory with an example file if it is missing."""

        if self.source_dir.exists():
            return False
        self.source_dir.mkdir(parents=True, exist_ok=True)
        example = self.source_dir / EXAMPLE_FILENAME
        if not example.exists():
            example.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
        LOGGER.info("Created source directory %s with %s", self.source_dir, EXAMPLE_FILENAME)
        return True

    def _scan(self) -> ScanReport:
        try:
            report = self.scanner.scan(self.store, self.source_dir)
        except SourceDirMissingError:
            self.bootstrap()
            report = self.scanner.scan(self.store, self.source_dir)
        if self.scanner.cache is not self.cache:
            self.cache.save(self.store)
        return report

    def load_or_bootstrap(self) -> CatalogStore:
        self.store = self.cache.load()
        if len(self.store) == 0:
            LOGGER.info("Catalog is empty, scanning %s", self.source_dir)
            self._scan()
        return self.store

    def rescan(self) -> ScanReport:
        return self._scan()

    def recreate(self) -> ScanReport:
        """Throw away the cached catalog, including recency, and rebuild it."""

        self.cache.clear()
        self.store = CatalogStore()
        return self._scan()

    def clean(self) -> int:
        """Prune entries whose source line no longer exists."""

        surviving = self.scanner.collect_display_texts(self.source_dir)
        removed = self.store.retain_only(surviving)
        self.cache.save(self.store)
        LOGGER.info("Pruned %d stale entries", removed)
        return removed

    def candidates(self, keywords: Optional[Iterable[str]] = None) -> List[str]:
        if keywords:
            return self.store.filter_by_origin(keywords)
        return self.store.all()

    def list_sources(self) -> List[str]:
        return self.scanner.list_sources(self.source_dir)

    def resolve_image(self, tag: str) -> Path:
        raw = self.store.lookup_path(tag)
        if raw is None:
            raise ImagePathMissingError(tag)
        path = Path(raw).expanduser()
        return path if path.is_absolute() else self.source_dir / path

    def select(self, chosen_text: str) -> Selection:
        """Copy ``chosen_text`` (or the image it names) and promote it."""

        if not self.store.contains(chosen_text):
            raise UnknownEntryError(chosen_text)
        if self.clipboard is None:
            raise ClipboardMissingError()

        tag = image_tag(chosen_text)
        if tag is not None:
            path = self.resolve_image(tag)
            self.clipboard.copy_image(path)
            selection = Selection(text=chosen_text, image_path=path)
        else:
            self.clipboard.copy_text(chosen_text)
            selection = Selection(text=chosen_text)

        self.store.promote(chosen_text)
        self.cache.save(self.store)
        return selection

    def choose(self, picker: "Picker", keywords: Optional[Iterable[str]] = None) -> Optional[Selection]:
        """Let the user pick a candidate; ``None`` means the picker was dismissed."""

        chosen = picker.choose(self.candidates(keywords))
        if chosen is None:
            LOGGER.debug("Selection cancelled")
            return None
        return self.select(chosen)

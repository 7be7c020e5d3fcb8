"""Filesystem scanning utilities for building the emoji catalog."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from utils.logging import get_logger

from .errors import LineReadError, SourceDirMissingError, SourceDirUnreadableError
from .normalize import normalize
from .parser import parse
from .persistence import CatalogCache
from .schema import ScanReport
from .store import CatalogStore

LOGGER = get_logger(__name__)
DEFAULT_EXTENSIONS: Tuple[str, ...] = (".csv",)


class SourceScanner:
    """Walk a source directory and merge its lines into a catalog store."""

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        cache: Optional[CatalogCache] = None,
        encoding: str = "utf-8",
    ) -> None:
        self.extensions = {ext.lower() for ext in extensions}
        self.cache = cache
        self.encoding = encoding

    def discover(self, source_dir: Path) -> List[Path]:
        """Return every source file below ``source_dir``, sorted by path."""

        root = Path(source_dir)
        if not root.exists():
            raise SourceDirMissingError(root)
        try:
            with os.scandir(root):
                pass
        except OSError as exc:
            raise SourceDirUnreadableError(root, exc) from exc

        def on_walk_error(err: OSError) -> None:
            LOGGER.warning("Error walking directory %s: %s", err.filename, err)

        found: List[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=on_walk_error):
            dirnames.sort()
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.suffix.lower() not in self.extensions:
                    continue
                if not path.is_file():
                    continue
                found.append(path)
        found.sort()
        return found

    def list_sources(self, source_dir: Path) -> List[str]:
        root = Path(source_dir)
        return [path.relative_to(root).as_posix() for path in self.discover(root)]

    def read_lines(self, path: Path) -> Iterator[Tuple[int, str]]:
        """Yield ``(line_no, normalized_line)`` pairs for ``path``."""

        # Decode per line so a bad byte is reported on the line that holds it.
        line_no = 0
        try:
            with path.open("rb") as handle:
                for line_no, raw in enumerate(handle, start=1):
                    text = raw.decode(self.encoding)
                    yield line_no, normalize(text.rstrip("\r\n"))
        except UnicodeDecodeError as exc:
            raise LineReadError(path, line_no, exc) from exc
        except OSError as exc:
            raise LineReadError(path, line_no + 1, exc) from exc

    def scan(self, store: CatalogStore, source_dir: Path) -> ScanReport:
        """Append every new record found under ``source_dir`` to ``store``.

        Read and parse failures abort the scan. When the scanner owns a cache
        the store is saved once the scan completes.
        """

        report = ScanReport()
        for path in self.discover(source_dir):
            report.files += 1
            origin = path.name
            added_before = report.added
            for line_no, line in self.read_lines(path):
                report.lines += 1
                if not line.strip():
                    report.blank += 1
                    continue
                parsed = parse(line, origin, line_no)
                if parsed.image is not None:
                    report.images += 1
                if store.append(parsed.record, parsed.image):
                    report.added += 1
                else:
                    report.duplicates += 1
            LOGGER.debug("Scanned %s: %d new entries", path, report.added - added_before)

        LOGGER.info("Scan of %s: %s", source_dir, report.summary())
        if self.cache is not None:
            self.cache.save(store)
        return report

    def collect_display_texts(self, source_dir: Path) -> Set[str]:
        """Return the parsed display texts currently present in the sources."""

        texts: Set[str] = set()
        for path in self.discover(source_dir):
            for line_no, line in self.read_lines(path):
                if line.strip():
                    texts.add(parse(line, path.name, line_no).record.display_text)
        return texts

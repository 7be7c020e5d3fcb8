"""Persist the catalog store to a single Parquet file."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from utils.logging import get_logger

from .errors import CacheWriteError
from .schema import Record
from .store import CatalogStore

LOGGER = get_logger(__name__)

CACHE_FORMAT_VERSION = "1"
_VERSION_KEY = b"emoji_catalog.version"
_IMAGES_KEY = b"emoji_catalog.image_paths"

CACHE_SCHEMA = pa.schema(
    [
        pa.field("display_text", pa.string(), nullable=False),
        pa.field("origin_tag", pa.string(), nullable=False),
    ]
)


class CatalogCache:
    """Read and write the on-disk snapshot of a :class:`CatalogStore`.

    The file layout is private to this module. Anything that cannot be read
    back is treated as an empty catalog so the caller rebuilds it.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, store: CatalogStore) -> None:
        records = store.records
        table = pa.table(
            {
                "display_text": [record.display_text for record in records],
                "origin_tag": [record.origin_tag for record in records],
            },
            schema=CACHE_SCHEMA.with_metadata(
                {
                    _VERSION_KEY: CACHE_FORMAT_VERSION.encode(),
                    _IMAGES_KEY: json.dumps(store.image_paths, ensure_ascii=False).encode("utf-8"),
                }
            ),
        )
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            os.close(fd)
            pq.write_table(table, tmp_name)
            os.replace(tmp_name, self.path)
        except (OSError, pa.ArrowException) as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheWriteError(self.path, exc) from exc
        LOGGER.debug("Saved %d entries to %s", len(records), self.path)

    def load(self) -> CatalogStore:
        if not self.exists:
            LOGGER.info("No catalog cache at %s", self.path)
            return CatalogStore()
        try:
            table = pq.read_table(self.path)
            metadata = table.schema.metadata or {}
            version = metadata.get(_VERSION_KEY, b"").decode()
            if version != CACHE_FORMAT_VERSION:
                raise ValueError(f"unsupported cache format version {version!r}")
            image_paths = json.loads(metadata.get(_IMAGES_KEY, b"{}").decode("utf-8"))
            if not isinstance(image_paths, dict):
                raise ValueError("image path map is not an object")
            rows = table.select(["display_text", "origin_tag"]).to_pylist()
            records = [Record(**row) for row in rows]
        except Exception as exc:
            LOGGER.warning("Ignoring unreadable catalog cache %s: %s", self.path, exc)
            return CatalogStore()
        store = CatalogStore.from_parts(records, image_paths)
        LOGGER.debug("Loaded %d entries from %s", len(store), self.path)
        return store

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise CacheWriteError(self.path, exc) from exc
        LOGGER.info("Removed catalog cache %s", self.path)

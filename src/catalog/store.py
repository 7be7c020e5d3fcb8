"""In-memory catalog of records ordered by recency."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .schema import ImagePathEntry, Record, image_tag


class CatalogStore:
    """Ordered, deduplicated collection of records plus the image path map.

    Index 0 holds the most recently selected entry. ``display_text`` is the
    deduplication key: no two records share one.
    """

    def __init__(self) -> None:
        self._records: List[Record] = []
        self._texts: Set[str] = set()
        self._image_paths: Dict[str, str] = {}

    @classmethod
    def from_parts(cls, records: Iterable[Record], image_paths: Optional[Mapping[str, str]] = None) -> "CatalogStore":
        store = cls()
        for record in records:
            store.append(record)
        store._image_paths.update(image_paths or {})
        return store

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogStore):
            return NotImplemented
        return self._records == other._records and self._image_paths == other._image_paths

    def __repr__(self) -> str:
        return f"CatalogStore(records={len(self._records)}, images={len(self._image_paths)})"

    @property
    def records(self) -> Tuple[Record, ...]:
        return tuple(self._records)

    @property
    def image_paths(self) -> Dict[str, str]:
        return dict(self._image_paths)

    def contains(self, display_text: str) -> bool:
        return display_text in self._texts

    def append(self, record: Record, image: Optional[ImagePathEntry] = None) -> bool:
        """Add ``record`` at the end unless its text is empty or already known.

        The image entry is stored regardless, so a recurring tag points at the
        path seen last. Returns ``True`` when the record was inserted.
        """

        if image is not None:
            self._image_paths[image.tag] = image.path
        if not record.display_text or record.display_text in self._texts:
            return False
        self._records.append(record)
        self._texts.add(record.display_text)
        return True

    def all(self) -> List[str]:
        return [record.display_text for record in self._records]

    def filter_by_origin(self, keywords: Iterable[str]) -> List[str]:
        """Return texts whose origin tag contains any of ``keywords``."""

        wanted = [keyword for keyword in keywords if keyword]
        if not wanted:
            return []
        return [
            record.display_text
            for record in self._records
            if any(keyword in record.origin_tag for keyword in wanted)
        ]

    def origins(self) -> List[str]:
        seen: Dict[str, None] = {}
        for record in self._records:
            seen.setdefault(record.origin_tag, None)
        return list(seen)

    def get(self, display_text: str) -> Optional[Record]:
        for record in self._records:
            if record.display_text == display_text:
                return record
        return None

    def promote(self, display_text: str) -> None:
        """Move the matching record to the front; unknown texts are ignored."""

        for index, record in enumerate(self._records):
            if record.display_text == display_text:
                if index:
                    del self._records[index]
                    self._records.insert(0, record)
                return

    def retain_only(self, surviving_texts: Iterable[str]) -> int:
        """Drop every record whose text is not in ``surviving_texts``.

        Image paths no longer referenced by a surviving record go as well.
        Returns the number of records removed.
        """

        keep = set(surviving_texts)
        before = len(self._records)
        self._records = [record for record in self._records if record.display_text in keep]
        self._texts = {record.display_text for record in self._records}
        tags = {image_tag(text) for text in self._texts}
        self._image_paths = {tag: path for tag, path in self._image_paths.items() if tag in tags}
        return before - len(self._records)

    def lookup_path(self, tag: str) -> Optional[str]:
        return self._image_paths.get(tag)

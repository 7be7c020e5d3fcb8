from __future__ import annotations

import os
from pathlib import Path

import pytest

from catalog.errors import LineReadError, MalformedLineError, SourceDirMissingError, SourceDirUnreadableError
from catalog.persistence import CatalogCache
from catalog.scanner import SourceScanner
from catalog.store import CatalogStore


def _write(path: Path, *lines: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_discover_is_recursive_and_filters_extensions(source_dir: Path) -> None:
    _write(source_dir / "a.csv", "x")
    _write(source_dir / "nested" / "deeper" / "b.CSV", "y")
    _write(source_dir / "notes.txt", "z")
    (source_dir / "folder.csv").mkdir()

    scanner = SourceScanner()
    assert [p.name for p in scanner.discover(source_dir)] == ["a.csv", "b.CSV"]
    assert scanner.list_sources(source_dir) == ["a.csv", "nested/deeper/b.CSV"]


def test_scan_builds_records_with_origin(source_dir: Path) -> None:
    _write(source_dir / "a.csv", "👋 wave", "", "IMG icons/cat.png catface", "   ")
    store = CatalogStore()

    report = SourceScanner().scan(store, source_dir)

    assert store.all() == ["👋 wave", "IMG catface"]
    assert {record.origin_tag for record in store} == {"a.csv"}
    assert store.lookup_path("catface") == "icons/cat.png"
    assert report.files == 1
    assert report.added == 2
    assert report.blank == 2
    assert report.images == 1


def test_scan_normalizes_lines(source_dir: Path) -> None:
    _write(source_dir / "food.csv", "🍰 gâteau")
    store = CatalogStore()
    SourceScanner().scan(store, source_dir)
    assert store.all() == ["🍰 gateau"]


def test_scan_is_idempotent(source_dir: Path) -> None:
    _write(source_dir / "a.csv", "1", "2", "2")
    _write(source_dir / "b.csv", "2", "3")
    store = CatalogStore()
    scanner = SourceScanner()

    scanner.scan(store, source_dir)
    first = store.all()
    report = scanner.scan(store, source_dir)

    assert sorted(store.all()) == sorted(first) == ["1", "2", "3"]
    assert report.added == 0
    assert report.duplicates == 5


def test_scan_appends_after_existing_entries(source_dir: Path) -> None:
    store = CatalogStore()
    scanner = SourceScanner()
    _write(source_dir / "a.csv", "a", "b")
    scanner.scan(store, source_dir)
    store.promote("b")
    _write(source_dir / "a.csv", "a", "b", "c")
    scanner.scan(store, source_dir)
    assert store.all() == ["b", "a", "c"]


def test_scan_saves_when_cache_given(tmp_path: Path, source_dir: Path) -> None:
    _write(source_dir / "a.csv", "x")
    cache = CatalogCache(tmp_path / "cache" / "cache.parquet")
    store = CatalogStore()
    SourceScanner(cache=cache).scan(store, source_dir)
    assert cache.load() == store


def test_malformed_line_aborts_scan(source_dir: Path) -> None:
    _write(source_dir / "images.csv", "fine", "IMG missing-tag")
    with pytest.raises(MalformedLineError) as excinfo:
        SourceScanner().scan(CatalogStore(), source_dir)
    assert excinfo.value.line_no == 2
    assert excinfo.value.origin == "images.csv"


def test_undecodable_file_raises_line_read_error(source_dir: Path) -> None:
    (source_dir / "bad.csv").write_bytes(b"ok\nfine\nthird\n\xff broken\n")
    store = CatalogStore()
    with pytest.raises(LineReadError) as excinfo:
        SourceScanner().scan(store, source_dir)
    assert excinfo.value.path.name == "bad.csv"
    assert excinfo.value.line_no == 4
    assert "line 4" in str(excinfo.value)


def test_missing_root(tmp_path: Path) -> None:
    with pytest.raises(SourceDirMissingError):
        SourceScanner().scan(CatalogStore(), tmp_path / "nope")


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="permissions are not enforced")
def test_unreadable_root(source_dir: Path) -> None:
    source_dir.chmod(0)
    try:
        with pytest.raises(SourceDirUnreadableError):
            SourceScanner().discover(source_dir)
    finally:
        source_dir.chmod(0o755)


def test_collect_display_texts_uses_parsed_text(source_dir: Path) -> None:
    _write(source_dir / "a.csv", "  👋 wave ", "", "IMG icons/cat.png catface")
    assert SourceScanner().collect_display_texts(source_dir) == {"👋 wave", "IMG catface"}

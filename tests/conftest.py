from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for entry in (PROJECT_ROOT / "src", PROJECT_ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from catalog.schema import Record  # noqa: E402
from utils.config import CatalogConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("EMOJI_CATALOG_CONFIG", "EMOJI_CATALOG_SOURCE_DIR", "EMOJI_CATALOG_CACHE_DIR", "WAYLAND_DISPLAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "sources"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path: Path, source_dir: Path) -> CatalogConfig:
    return CatalogConfig(source_dir=source_dir, cache_dir=tmp_path / "cache")


class FakeClipboard:
    def __init__(self) -> None:
        self.texts: list[str] = []
        self.images: list[Path] = []

    def copy_text(self, text: str) -> None:
        self.texts.append(text)

    def copy_image(self, path: Path) -> None:
        self.images.append(path)


class FakePicker:
    def __init__(self, answer: str | None) -> None:
        self.answer = answer
        self.seen: list[str] = []

    def choose(self, candidates):
        self.seen = list(candidates)
        return self.answer


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


def make_record(text: str, origin: str = "a.csv") -> Record:
    return Record(display_text=text, origin_tag=origin)

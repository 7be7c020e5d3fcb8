"""Pydantic models describing catalog entries and scan results."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

IMAGE_SENTINEL = "IMG"


class Record(BaseModel):
    """A single selectable entry and the source file it came from."""

    model_config = ConfigDict(frozen=True)

    display_text: str
    origin_tag: str

    @field_validator("display_text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

    @property
    def is_image(self) -> bool:
        return image_tag(self.display_text) is not None


class ImagePathEntry(BaseModel):
    """Mapping from an image tag to the image file it stands for."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(min_length=1)
    path: str = Field(min_length=1)


class ParsedLine(BaseModel):
    """Result of parsing one source line."""

    model_config = ConfigDict(frozen=True)

    record: Record
    image: Optional[ImagePathEntry] = None


class ScanReport(BaseModel):
    """Counters collected during a single scan pass."""

    files: int = 0
    lines: int = 0
    added: int = 0
    duplicates: int = 0
    blank: int = 0
    images: int = 0

    def summary(self) -> str:
        return (
            f"{self.added} new entries from {self.files} files "
            f"({self.lines} lines, {self.duplicates} duplicates, {self.blank} blank)"
        )


class Selection(BaseModel):
    """What :meth:`CatalogService.select` delivered to the clipboard."""

    text: str
    image_path: Optional[Path] = None

    @property
    def is_image(self) -> bool:
        return self.image_path is not None


def image_tag(display_text: str) -> Optional[str]:
    """Return the tag of an ``IMG <tag>`` display text, or ``None``."""

    token, _, rest = display_text.strip().partition(" ")
    if token != IMAGE_SENTINEL:
        return None
    rest = rest.strip()
    return rest or None

"""Interfaces the catalog service expects from its collaborators."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence


class Picker(Protocol):
    def choose(self, candidates: Sequence[str]) -> Optional[str]:
        """Return the chosen candidate, or ``None`` when the user cancelled."""


class Clipboard(Protocol):
    def copy_text(self, text: str) -> None:
        ...

    def copy_image(self, path: Path) -> None:
        ...

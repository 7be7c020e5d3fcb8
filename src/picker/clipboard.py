"""Copy text and images to the system clipboard via wl-copy or xclip."""
from __future__ import annotations

import mimetypes
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional

from utils.logging import get_logger

from .errors import ClipboardError

LOGGER = get_logger(__name__)


class SystemClipboard:
    """Clipboard writer that shells out to the display server's tool."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self.wayland = bool(env.get("WAYLAND_DISPLAY"))

    def _text_command(self) -> List[str]:
        if self.wayland:
            return ["wl-copy"]
        return ["xclip", "-selection", "clipboard"]

    def _image_command(self, mime_type: str) -> List[str]:
        if self.wayland:
            return ["wl-copy", "--type", mime_type]
        return ["xclip", "-selection", "clipboard", "-t", mime_type]

    def _run(self, command: List[str], payload: bytes) -> None:
        if shutil.which(command[0]) is None:
            raise ClipboardError(f"{command[0]} was not found on PATH")
        # Both tools fork to keep serving the selection; inherited pipes would
        # block until that child exits.
        try:
            subprocess.run(
                command,
                input=payload,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"{command[0]} exited with status {exc.returncode}") from exc
        except OSError as exc:
            raise ClipboardError(f"Failed to start {command[0]}: {exc}") from exc

    def copy_text(self, text: str) -> None:
        self._run(self._text_command(), text.encode("utf-8"))
        LOGGER.debug("Copied %r to clipboard", text)

    def copy_image(self, path: Path) -> None:
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None or not mime_type.startswith("image/"):
            raise ClipboardError(f"{path} does not look like an image")
        try:
            payload = path.read_bytes()
        except OSError as exc:
            raise ClipboardError(f"Cannot read image {path}: {exc}") from exc
        self._run(self._image_command(mime_type), payload)
        LOGGER.debug("Copied image %s (%s) to clipboard", path, mime_type)

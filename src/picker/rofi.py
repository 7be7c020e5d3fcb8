"""Interactive selection through ``rofi -dmenu``."""
from __future__ import annotations

import shutil
import subprocess
from typing import List, Optional, Sequence

from utils.logging import get_logger

from .errors import PickerError

LOGGER = get_logger(__name__)

# rofi exits with 1 when the user dismisses the menu.
CANCELLED_RETURNCODE = 1


class RofiPicker:
    """Present candidates in rofi and return the selected one."""

    def __init__(self, lines: int = 10, prompt: str = "emoji", executable: str = "rofi") -> None:
        if lines < 1:
            raise ValueError("lines must be >= 1")
        self.lines = lines
        self.prompt = prompt
        self.executable = executable

    def command(self) -> List[str]:
        return [
            self.executable,
            "-dmenu",
            "-i",
            "-format",
            "i",
            "-l",
            str(self.lines),
            "-p",
            self.prompt,
        ]

    def choose(self, candidates: Sequence[str]) -> Optional[str]:
        if not candidates:
            LOGGER.info("Nothing to choose from")
            return None
        if shutil.which(self.executable) is None:
            raise PickerError(f"{self.executable} was not found on PATH")

        # One candidate per line; rofi answers with the index of the choice.
        payload = "\n".join(candidate.replace("\n", " ") for candidate in candidates)
        try:
            result = subprocess.run(
                self.command(),
                input=payload,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise PickerError(f"Failed to start {self.executable}: {exc}") from exc

        if result.returncode == CANCELLED_RETURNCODE:
            return None
        if result.returncode != 0:
            raise PickerError(
                f"{self.executable} exited with status {result.returncode}: {result.stderr.strip()}"
            )

        answer = result.stdout.strip()
        try:
            index = int(answer)
        except ValueError as exc:
            raise PickerError(f"Unexpected answer from {self.executable}: {answer!r}") from exc
        if not 0 <= index < len(candidates):
            # Custom input typed into the prompt comes back as -1.
            return None
        return candidates[index]

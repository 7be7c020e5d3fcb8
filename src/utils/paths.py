"""Path utility helpers."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

APP_DIRNAME = "emoji-catalog"


def normalise_path(path: Path) -> Path:
    """Return an expanded, absolute version of ``path``."""

    return Path(str(path).replace("\\", "/")).expanduser().resolve()


def xdg_dir(variable: str, fallback: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return ``$variable/emoji-catalog`` or ``~/<fallback>/emoji-catalog``.

    Empty or relative XDG values are ignored, as the XDG base directory
    rules require.
    """

    env = os.environ if environ is None else environ
    base = env.get(variable, "")
    if base and Path(base).is_absolute():
        return Path(base) / APP_DIRNAME
    return Path.home() / fallback / APP_DIRNAME


def default_cache_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    return xdg_dir("XDG_CACHE_HOME", ".cache", environ)


def default_source_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    return xdg_dir("XDG_DATA_HOME", ".local/share", environ) / "data"


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    return xdg_dir("XDG_CONFIG_HOME", ".config", environ) / "config.yml"

"""Utility helpers shared across the emoji-catalog codebase."""

from .config import CatalogConfig, load_config
from .logging import configure_logging, get_logger
from .paths import default_cache_dir, default_source_dir, normalise_path

__all__ = [
    "CatalogConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "default_cache_dir",
    "default_source_dir",
    "normalise_path",
]

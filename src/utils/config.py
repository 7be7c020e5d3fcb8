"""Configuration helpers for emoji-catalog."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .paths import default_cache_dir, default_config_path, default_source_dir, normalise_path

CONFIG_ENV = "EMOJI_CATALOG_CONFIG"
SOURCE_DIR_ENV = "EMOJI_CATALOG_SOURCE_DIR"
CACHE_DIR_ENV = "EMOJI_CATALOG_CACHE_DIR"

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def _normalise_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if not ext:
        return ext
    return ext if ext.startswith(".") else f".{ext}"


class CatalogConfig(BaseModel):
    """Everything the catalog service needs to know about its environment."""

    model_config = ConfigDict(validate_default=True)

    source_dir: Path = Field(default_factory=default_source_dir)
    cache_dir: Path = Field(default_factory=default_cache_dir)
    cache_filename: str = "cache.parquet"
    extensions: List[str] = Field(default_factory=lambda: [".csv"])
    picker_lines: int = Field(default=10, ge=1)
    picker_prompt: str = "emoji"
    log_level: LogLevel = "INFO"

    @field_validator("source_dir", "cache_dir")
    @classmethod
    def expand_dirs(cls, value: Path) -> Path:
        return normalise_path(value)

    @field_validator("extensions")
    @classmethod
    def normalise_extensions(cls, value: List[str]) -> List[str]:
        extensions = [_normalise_extension(ext) for ext in value]
        extensions = [ext for ext in extensions if ext]
        if not extensions:
            raise ValueError("at least one source file extension is required")
        return extensions

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("cache_filename")
    @classmethod
    def plain_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError(f"cache_filename must be a bare file name; got {value!r}")
        return value

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / self.cache_filename


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> CatalogConfig:
    """Load configuration from a YAML file, then apply environment overrides.

    ``path`` defaults to ``$EMOJI_CATALOG_CONFIG`` or the XDG config location.
    A missing file yields the defaults.
    """

    env = os.environ if environ is None else environ
    if path is None:
        path = Path(env[CONFIG_ENV]) if env.get(CONFIG_ENV) else default_config_path(env)

    data: Dict[str, Any] = {}
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Config file {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

    if env.get(SOURCE_DIR_ENV):
        data["source_dir"] = env[SOURCE_DIR_ENV]
    if env.get(CACHE_DIR_ENV):
        data["cache_dir"] = env[CACHE_DIR_ENV]
    return CatalogConfig(**data)

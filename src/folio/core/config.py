"""Settings for locating and reading content."""

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = ".folio.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    ``content_dir`` is relative to ``site_root`` unless absolute.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    content_dir: Path = Field(default=Path("content"), description="Directory holding the articles")

    @property
    def abs_content_dir(self) -> Path:
        if self.content_dir.is_absolute():
            return self.content_dir
        return self.site_root / self.content_dir


class ParseSettings(BaseModel):
    """How documents are discovered and decoded."""

    pattern: str = Field(default="**/*.md", description="Glob used to discover documents")
    encoding: str = Field(default="utf-8", description="Text encoding of document files")


class FolioConfig(BaseSettings):
    """Root configuration for Folio.

    Supports environment variable overrides with the pattern:
    FOLIO_SECTION__KEY (e.g., FOLIO_PATHS__CONTENT_DIR)
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    parse: ParseSettings = Field(default_factory=ParseSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="FOLIO_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "FolioConfig":
        """Loads configuration from .folio.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (FOLIO_SECTION__KEY)
        2. Config file (.folio.toml in site_root)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            with config_file.open("rb") as f:
                try:
                    file_settings = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ValueError(f"Invalid TOML in {config_file}: {e}") from e

        env_settings = cls().model_dump(exclude_unset=True)

        merged_config = _deep_merge(file_settings, env_settings)
        merged_config.setdefault("paths", {})["site_root"] = root_path

        return cls.model_validate(merged_config)

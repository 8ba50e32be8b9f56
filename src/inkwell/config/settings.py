"""Configuration for Inkwell.

Values come from three places, highest priority first:

1. Environment variables (``INKWELL_SECTION__KEY``, e.g. ``INKWELL_SITE__TITLE``)
2. ``.inkwell.toml`` in the site root
3. Defaults declared on the models below
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inkwell.config.exceptions import ConfigValidationError, InvalidConfigFileError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".inkwell.toml"
DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_FEED_LIMIT = 20


def _deep_merge(destination: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(destination.get(key), Mapping):
            destination[key] = _deep_merge(dict(destination[key]), value)
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    Relative paths are resolved against ``site_root``.
    """

    site_root: Path = Field(default_factory=Path.cwd, description="Root directory of the site")
    content_dir: Path = Field(default=Path("content/posts"), description="Directory holding articles")
    author_file: Path | None = Field(
        default=None,
        description="YAML file with the author profile (bundled profile when unset)",
    )

    @property
    def abs_content_dir(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def abs_author_file(self) -> Path | None:
        if self.author_file is None:
            return None
        return self._resolve(self.author_file)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class SiteSettings(BaseModel):
    """Public site identity used by the feed and listings."""

    title: str = Field(default="Olaf Sulich", description="Site title")
    base_url: str = Field(default="https://olafsulich.pl", description="Absolute site URL")
    language: str = Field(default="pl", description="Content language (BCP 47)")
    feed_limit: int = Field(default=DEFAULT_FEED_LIMIT, ge=1, description="Entries in the Atom feed")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class RenderSettings(BaseModel):
    """Body rendering options."""

    highlight: bool = Field(default=True, description="Highlight code samples with Pygments")
    pygments_style: str = Field(default="default", description="Pygments style name")
    words_per_minute: int = Field(default=DEFAULT_WORDS_PER_MINUTE, ge=1)


class NewsletterSettings(BaseModel):
    """Defaults for the inline newsletter signup widget."""

    action_url: str = Field(default="https://olafsulich.pl/api/newsletter", description="Form action")
    title: str = Field(default="Newsletter", description="Widget heading")
    description: str = Field(
        default="Zapisz się, a dam Ci znać, gdy pojawi się nowy artykuł.",
        description="Widget description",
    )
    button_label: str = Field(default="Zapisz się", description="Submit button label")


class InkwellConfig(BaseSettings):
    """Root configuration for Inkwell."""

    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    newsletter: NewsletterSettings = Field(default_factory=NewsletterSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="INKWELL_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> InkwellConfig:
        """Load configuration from ``.inkwell.toml`` and environment variables.

        Args:
            site_root: Directory holding ``.inkwell.toml``. Defaults to the current
                working directory.

        Returns:
            Validated configuration with ``paths.site_root`` set to ``site_root``.

        Raises:
            InvalidConfigFileError: If the TOML file cannot be read or parsed.
            ConfigValidationError: If the merged values fail validation.

        """
        root_path = (site_root if site_root is not None else Path.cwd()).expanduser().resolve()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            logger.debug("Loading config from %s", config_file)
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise InvalidConfigFileError(config_file, str(exc)) from exc
            except OSError as exc:
                raise InvalidConfigFileError(config_file, exc.strerror or str(exc)) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
            merged = _deep_merge(file_settings, env_settings)
            merged.setdefault("paths", {})["site_root"] = root_path
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(exc.errors()) from exc


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_FEED_LIMIT",
    "DEFAULT_WORDS_PER_MINUTE",
    "InkwellConfig",
    "NewsletterSettings",
    "PathsSettings",
    "RenderSettings",
    "SiteSettings",
]

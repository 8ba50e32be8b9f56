"""The author profile shown on article and home pages.

The profile is fixed when the site is built. It is read once from YAML (the
bundled ``profile.yml`` unless a path is given) and shared afterwards.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError, model_validator

from inkwell.exceptions import InkwellError

logger = logging.getLogger(__name__)

BUNDLED_PROFILE = "profile.yml"


class AuthorProfileError(InkwellError):
    """Raised when the author profile cannot be read or is invalid."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid author profile '{source}': {reason}")


class Portrait(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: str = Field(min_length=1)
    alt: str
    width: int = Field(default=200, gt=0)
    height: int = Field(default=200, gt=0)


class SocialLink(BaseModel):
    """One outbound profile link."""

    model_config = ConfigDict(frozen=True)

    platform: str = Field(min_length=1)
    url: HttpUrl
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            return {**data, "label": data.get("platform", "")}
        return data


class AuthorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    portrait: Portrait
    bio: str = Field(min_length=1)
    heading: str = "O autorze"
    social_links: tuple[SocialLink, ...] = ()


def _read_profile_text(path: Path | None) -> tuple[str, str]:
    if path is None:
        resource = files("inkwell.author").joinpath(BUNDLED_PROFILE)
        return f"inkwell.author/{BUNDLED_PROFILE}", resource.read_text(encoding="utf-8")
    try:
        return str(path), path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AuthorProfileError(str(path), exc.strerror or str(exc)) from exc


@lru_cache(maxsize=8)
def load_author_profile(path: Path | None = None) -> AuthorProfile:
    """Load the author profile.

    Args:
        path: YAML file to read. ``None`` loads the profile bundled with the
            package.

    Returns:
        The profile. Repeated calls with the same path return the same instance.

    Raises:
        AuthorProfileError: If the file is missing, is not valid YAML, or does
            not describe a profile.

    """
    source, text = _read_profile_text(path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise AuthorProfileError(source, f"YAML error: {exc}") from exc
    if not isinstance(data, dict):
        raise AuthorProfileError(source, "expected a mapping at the top level")

    try:
        profile = AuthorProfile.model_validate(data)
    except ValidationError as exc:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise AuthorProfileError(source, reason) from exc

    logger.debug("Loaded author profile for %s from %s", profile.name, source)
    return profile

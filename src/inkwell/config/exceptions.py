"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from inkwell.exceptions import InkwellError


class ConfigError(InkwellError):
    """Base exception for all configuration-related errors."""


class InvalidConfigFileError(ConfigError):
    """Raised when the configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Raised when the merged configuration fails validation."""

    def __init__(self, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.errors = list(errors or [])
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in self.errors
        )
        message = f"Configuration validation failed with {len(self.errors)} error(s)"
        super().__init__(f"{message}: {details}" if details else message)


class ContentDirectoryError(ConfigError):
    """Raised when the configured content directory is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Content directory does not exist: {path}")

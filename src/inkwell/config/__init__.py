"""Configuration facade.

    from inkwell.config import InkwellConfig
"""

from inkwell.config.exceptions import (
    ConfigError,
    ConfigValidationError,
    ContentDirectoryError,
    InvalidConfigFileError,
)
from inkwell.config.settings import (
    CONFIG_FILENAME,
    DEFAULT_FEED_LIMIT,
    DEFAULT_WORDS_PER_MINUTE,
    InkwellConfig,
    NewsletterSettings,
    PathsSettings,
    RenderSettings,
    SiteSettings,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_FEED_LIMIT",
    "DEFAULT_WORDS_PER_MINUTE",
    "ConfigError",
    "ConfigValidationError",
    "ContentDirectoryError",
    "InkwellConfig",
    "InvalidConfigFileError",
    "NewsletterSettings",
    "PathsSettings",
    "RenderSettings",
    "SiteSettings",
]

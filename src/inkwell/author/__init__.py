"""Author profile and the author card component."""

from inkwell.author.component import render_author
from inkwell.author.profile import (
    AuthorProfile,
    AuthorProfileError,
    Portrait,
    SocialLink,
    load_author_profile,
)

__all__ = [
    "AuthorProfile",
    "AuthorProfileError",
    "Portrait",
    "SocialLink",
    "load_author_profile",
    "render_author",
]

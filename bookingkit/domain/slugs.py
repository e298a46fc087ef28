"""
URL-safe slug generation for display names.

Slugs are lowercase ASCII ``[a-z0-9-]`` with no leading, trailing or repeated
hyphens. Non-ASCII letters are dropped, not transliterated, so two names may
share a slug; collision handling belongs to whoever stores the result.
"""

import re

SLUG_PATTERN = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?")

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def generate_slug(name: str | None) -> str:
    """
    Convert a display name into a slug.

    Example: "  Acme Corp!! " -> "acme-corp"

    Args:
        name: Any text; empty and whitespace-only input yields ""

    Returns:
        The slug, possibly empty when no character survives
    """
    if not name or name.isspace():
        return ""

    slug = name.lower().strip()
    slug = _DISALLOWED_CHARS.sub("", slug)
    slug = _WHITESPACE_RUN.sub(" ", slug)
    slug = slug.replace(" ", "-")
    slug = _HYPHEN_RUN.sub("-", slug)

    return slug.strip("-")


def is_valid_slug(value: str) -> bool:
    """Check if a string is already a canonical, non-empty slug."""
    return SLUG_PATTERN.fullmatch(value) is not None and "--" not in value

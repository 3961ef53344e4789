"""Small text helpers shared by the core modules."""

import re
from unicodedata import normalize


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to a safe URL-friendly slug.

    Args:
        text: Input text to slugify
        max_len: Maximum length of output slug (default 60)

    Returns:
        Safe slug string suitable for filenames and URLs

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Café")
        'cafe'
        >>> slugify("A" * 100, max_len=20)
        'aaaaaaaaaaaaaaaaaaaa'

    """
    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()

    slug = re.sub(r"[^a-z0-9]+", "-", normalized)
    slug = slug.strip("-")

    if not slug:
        return "untitled"

    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug


_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")


def normalize_body(text: str) -> str:
    """Drop leading blank lines and trailing whitespace from a Markdown body."""
    return _LEADING_BLANK_LINES.sub("", text).rstrip()

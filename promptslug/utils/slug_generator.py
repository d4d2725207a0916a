import re
from typing import Optional

from slugify import slugify as _transliterating_slugify

# Anything outside lowercase ASCII letters and digits is a separator
NON_ALPHANUMERIC_RUN = re.compile(r'[^a-z0-9]+')
VALID_SLUG = re.compile(r'[a-z0-9]+(-[a-z0-9]+)*')


def slugify(text: str, unique_part: Optional[str] = None, strip_edges: bool = False) -> str:
    """
    Generates a URL-safe slug from a given string.

    Non-ASCII letters are treated as separators, not transliterated
    ("Café" becomes "caf"). When a unique part is supplied it is appended
    after a hyphen, even if the base slug is empty.

    Args:
        text: The input string (e.g., a prompt page title).
        unique_part: Optional token appended to disambiguate identical titles.
        strip_edges: Also strip hyphens from the ends of the final result.

    Returns:
        A lowercase, hyphen-separated slug.
    """
    base = NON_ALPHANUMERIC_RUN.sub('-', text.lower())
    if base.startswith('-'):
        base = base[1:]
    if base.endswith('-'):
        base = base[:-1]

    if not unique_part:
        return base

    result = f"{base}-{unique_part}"
    if strip_edges:
        result = result.strip('-')
    return result


def ascii_slugify(text: str, unique_part: Optional[str] = None, strip_edges: bool = False) -> str:
    """Like slugify, but transliterates accented letters ("Café" -> "cafe")."""
    base = _transliterating_slugify(text)
    if not unique_part:
        return base

    result = f"{base}-{unique_part}"
    if strip_edges:
        result = result.strip('-')
    return result


def is_valid_slug(value: str) -> bool:
    return bool(VALID_SLUG.fullmatch(value))

"""
Title, slug, and filename derivation for entries.

All functions here are pure: the same input always produces the same
output, and nothing touches the filesystem. Collision handling for
filenames lives in the store, not here.
"""

import re
from datetime import datetime

TITLE_MAX_LENGTH = 60
SLUG_MAX_LENGTH = 50

_HYPHEN_RUNS = re.compile(r"-+")


def generate_title(prompt: str) -> str:
    """
    Derive a one-line title from prompt text.

    Whitespace runs (including newlines) collapse to single spaces. Titles
    longer than 60 characters are cut back to the last space inside the
    window so a word is never split.

    Args:
        prompt: Raw prompt text

    Returns:
        Title of at most 60 characters

    Example:
        >>> generate_title("   multiple   spaces   ")
        'multiple spaces'
    """
    title = " ".join(prompt.split())

    if len(title) <= TITLE_MAX_LENGTH:
        return title

    truncated = title[:TITLE_MAX_LENGTH]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        truncated = truncated[:last_space]

    return truncated


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """
    Convert text to a lowercase, hyphen-separated, filesystem-safe slug.

    Letters and digits from any script are kept; spaces and underscores
    become hyphens; everything else is dropped. Slugify is idempotent.

    Args:
        text: Input text (usually a title)
        max_length: Maximum slug length

    Returns:
        Slug, possibly empty

    Example:
        >>> slugify("Fix the bug!")
        'fix-the-bug'
    """
    slug = text.lower().replace(" ", "-").replace("_", "-")
    slug = "".join(c for c in slug if c.isalpha() or c.isdecimal() or c == "-")
    slug = _HYPHEN_RUNS.sub("-", slug)
    slug = slug.strip("-")

    if len(slug) > max_length:
        truncated = slug[:max_length]
        last_hyphen = truncated.rfind("-")
        slug = truncated[:last_hyphen] if last_hyphen > 0 else truncated

    return slug


def generate_filename(title: str, timestamp: datetime) -> str:
    """
    Build the entry filename ``YYYY-MM-DD-<slug>.md``.

    Uses the calendar date of ``timestamp`` as given (no timezone
    conversion).

    Example:
        >>> generate_filename("Fix the bug", datetime(2024, 1, 15))
        '2024-01-15-fix-the-bug.md'
    """
    return f"{timestamp:%Y-%m-%d}-{slugify(title)}.md"

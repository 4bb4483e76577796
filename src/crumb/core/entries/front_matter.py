"""
Front matter reading and writing for entry files.

Entry files start with a YAML header block:

    ---
    title: Fix the bug
    date: '2024-01-15T10:30:00+01:00'
    tags:
    - debugging
    ---

The block is read and written with python-frontmatter. On top of the
library, the header is checked to be a flat mapping of strings and
lists of strings, which is all an entry ever contains; anything else is
reported as malformed so the index can skip the file with a reason.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import frontmatter
import yaml

_handler = frontmatter.YAMLHandler()


class MalformedFrontMatterError(ValueError):
    """The header block is missing, unterminated, or not a flat mapping."""

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{reason}{location}")


@dataclass
class FrontMatter:
    """Parsed header block plus the markdown body that follows it."""

    values: dict[str, str] = field(default_factory=dict)
    lists: dict[str, list[str]] = field(default_factory=dict)
    body: str = ""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return a scalar value, or ``default`` if the key is absent."""
        return self.values.get(key, default)

    def get_list(self, key: str) -> list[str]:
        """
        Return a list value.

        A scalar under the same key is treated as a one-item list, which
        tolerates hand-written ``tags: debugging``.
        """
        if key in self.lists:
            return list(self.lists[key])
        if key in self.values:
            return [self.values[key]]
        return []


def _scalar(key: str, value: Any) -> str:
    # Hand-written headers may carry unquoted dates and numbers
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (str, int, float, bool)):
        return str(value)
    raise MalformedFrontMatterError(f"unsupported value for {key!r}: {type(value).__name__}")


def parse_front_matter(text: str) -> FrontMatter:
    """
    Parse the header block at the top of a markdown document.

    Args:
        text: Full file content

    Returns:
        FrontMatter with scalar values, list values, and the body

    Raises:
        MalformedFrontMatterError: If the block is absent, never closed,
            not valid YAML, or holds something other than strings and
            lists of strings
    """
    text = text.strip()
    if not _handler.detect(text):
        raise MalformedFrontMatterError("missing opening '---'", 1)

    try:
        header, body = _handler.split(text)
    except ValueError as e:
        raise MalformedFrontMatterError("missing closing '---'") from e

    try:
        metadata = _handler.load(header)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        problem = getattr(e, "problem", None) or str(e)
        raise MalformedFrontMatterError(
            f"invalid YAML: {problem}", mark.line + 1 if mark is not None else None
        ) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MalformedFrontMatterError(f"expected a mapping, got {type(metadata).__name__}")

    result = FrontMatter(body=body.strip())
    for key, value in metadata.items():
        key = str(key)
        if value is None:
            result.lists[key] = []
        elif isinstance(value, list):
            result.lists[key] = [_scalar(key, item) for item in value if item is not None]
        else:
            result.values[key] = _scalar(key, value)
    return result


def dump_front_matter(fields: Mapping[str, str | Sequence[str]], body: str) -> str:
    """
    Render a document with a header block ``parse_front_matter`` reads back.

    Keys are written in mapping order. Values are quoted by YAML where
    needed, so a title such as ``[urgent]`` stays a string. Empty lists
    are omitted.

    Returns:
        The full document, ending with a newline
    """
    metadata: dict[str, str | list[str]] = {}
    for key, value in fields.items():
        if isinstance(value, str):
            metadata[key] = value
        elif value:
            metadata[key] = list(value)
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False) + "\n"

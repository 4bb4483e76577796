"""
README index generation for the entries directory.

The index is a complete markdown document with one table row per entry,
newest first. Generation is deterministic: the same set of entry files
always produces byte-identical output, so regenerating an unchanged
directory never shows up as a diff.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from crumb.core.entries.front_matter import FrontMatter, MalformedFrontMatterError
from crumb.core.entries.models import parse_timestamp
from crumb.core.entries.store import EntryStore
from crumb.core.errors import PersistenceError

logger = logging.getLogger(__name__)

INDEX_HEADER = """\
# Prompts

A shared collection of AI prompts captured by the team. Learn from each other's \
techniques, discover effective patterns, and build institutional knowledge around \
AI-assisted development.

**What is this?** This directory contains prompts saved using crumb, a tool for \
capturing and sharing AI prompts across a team.

## Index

| Date | Author | Tool | Tags | Title |
|------|--------|------|------|-------|
"""

INDEX_FOOTER = """
---
*Run `crumb readme` to regenerate this index.*
"""


@dataclass(frozen=True)
class IndexParseWarning:
    """An entry file that was skipped because its front matter is malformed."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path.name}: {self.reason}"


@dataclass(frozen=True)
class IndexRow:
    """One table row, taken from an entry's front matter."""

    filename: str
    title: str
    date: datetime | None
    author: str = ""
    tool: str = ""
    tags: tuple[str, ...] = ()

    @classmethod
    def from_front_matter(cls, path: Path, front_matter: FrontMatter) -> "IndexRow":
        """Build a row; a missing title falls back to the filename stem."""
        return cls(
            filename=path.name,
            title=front_matter.get("title") or path.stem,
            date=parse_timestamp(front_matter.get("date")),
            author=front_matter.get("author") or "",
            tool=front_matter.get("tool") or "",
            tags=tuple(tag for tag in front_matter.get_list("tags") if tag),
        )


@dataclass
class IndexResult:
    """Rendered index plus what went into it."""

    content: str
    rows: list[IndexRow] = field(default_factory=list)
    warnings: list[IndexParseWarning] = field(default_factory=list)


def sort_rows(rows: list[IndexRow]) -> list[IndexRow]:
    """
    Order rows newest first.

    Rows without a parseable date go last. Both groups keep their input
    order for ties, since ``list.sort`` is stable even with ``reverse``.
    """
    dated = [row for row in rows if row.date is not None]
    undated = [row for row in rows if row.date is None]
    dated.sort(key=lambda row: row.date, reverse=True)  # type: ignore[arg-type,return-value]
    return dated + undated


def _cell(text: str) -> str:
    """Make text safe inside a markdown table cell."""
    return " ".join(text.split()).replace("|", "\\|")


def render_row(row: IndexRow) -> str:
    """Render a single ``| Date | Author | Tool | Tags | Title |`` line."""
    date = row.date.strftime("%Y-%m-%d") if row.date is not None else ""
    title = _cell(row.title).replace("[", "\\[").replace("]", "\\]")
    link = f"[{title}]({quote(row.filename)})"
    cells = [date, _cell(row.author), _cell(row.tool), _cell(", ".join(row.tags)), link]
    return "| " + " | ".join(cells) + " |"


def render_index(rows: list[IndexRow]) -> str:
    """Render the full README document for already sorted rows."""
    body = "".join(render_row(row) + "\n" for row in rows)
    return INDEX_HEADER + body + INDEX_FOOTER


def starter_index() -> str:
    """The empty index written by ``crumb init``."""
    return render_index([])


def generate_index(directory: Path) -> IndexResult:
    """
    Build the README index for an entries directory.

    Files with malformed front matter are skipped and reported in
    ``IndexResult.warnings``; they never abort generation.

    Args:
        directory: Entries directory

    Returns:
        IndexResult with the markdown content, rows, and warnings

    Raises:
        DirectoryMissingError: If the directory does not exist
        PersistenceError: If the directory cannot be listed
    """
    store = EntryStore(directory)
    rows: list[IndexRow] = []
    warnings: list[IndexParseWarning] = []

    for path in store.list_entry_files():
        try:
            front_matter = store.read_front_matter(path)
        except MalformedFrontMatterError as e:
            warnings.append(IndexParseWarning(path, f"malformed front matter: {e}"))
            continue
        except (OSError, UnicodeDecodeError) as e:
            warnings.append(IndexParseWarning(path, f"unreadable: {e}"))
            continue
        rows.append(IndexRow.from_front_matter(path, front_matter))

    for warning in warnings:
        logger.debug("Skipping %s", warning)

    rows = sort_rows(rows)
    return IndexResult(content=render_index(rows), rows=rows, warnings=warnings)


def write_index(directory: Path) -> tuple[Path, IndexResult]:
    """
    Regenerate ``README.md`` in the entries directory.

    Returns:
        Path of the written index and the generation result

    Raises:
        DirectoryMissingError: If the directory does not exist
        PersistenceError: If listing or writing fails
    """
    result = generate_index(directory)
    index_path = EntryStore(directory).get_index_path()
    try:
        index_path.write_text(result.content, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(index_path, f"cannot write {index_path}: {e.strerror or e}") from e
    logger.debug("Wrote index with %d entries to %s", len(result.rows), index_path)
    return index_path, result

"""
Crumb entries module.

Entries are markdown files with a front matter header, one per captured
prompt, stored flat in the output directory.
"""

from crumb.core.entries.capture import build_entry, save_draft
from crumb.core.entries.front_matter import (
    FrontMatter,
    MalformedFrontMatterError,
    dump_front_matter,
    parse_front_matter,
)
from crumb.core.entries.models import Entry, EntryDraft, parse_timestamp
from crumb.core.entries.slug import generate_filename, generate_title, slugify
from crumb.core.entries.store import INDEX_FILENAME, EntryStore

__all__ = [
    "INDEX_FILENAME",
    "Entry",
    "EntryDraft",
    "EntryStore",
    "FrontMatter",
    "MalformedFrontMatterError",
    "build_entry",
    "dump_front_matter",
    "generate_filename",
    "generate_title",
    "parse_front_matter",
    "parse_timestamp",
    "save_draft",
    "slugify",
]

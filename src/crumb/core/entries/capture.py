"""
Turning a form draft into a saved entry.

This is the only path by which the capture form touches the filesystem.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from crumb.core.entries.models import UNKNOWN_AUTHOR, Entry, EntryDraft
from crumb.core.entries.slug import generate_title
from crumb.core.entries.store import EntryStore
from crumb.core.errors import PromptRequiredError
from crumb.utils.git import get_git_author

logger = logging.getLogger(__name__)


def build_entry(draft: EntryDraft, timestamp: datetime, author: str) -> Entry:
    """
    Resolve a draft into a complete Entry.

    The title is the draft's explicit title when set, otherwise derived
    from the prompt. A blank author becomes ``"Unknown"``.

    Raises:
        PromptRequiredError: If the prompt is empty after trimming
    """
    if not draft.prompt.strip():
        raise PromptRequiredError()

    title = generate_title(draft.title) if draft.title else generate_title(draft.prompt)

    return Entry(
        title=title,
        date=timestamp,
        author=author.strip() or UNKNOWN_AUTHOR,
        tool=" ".join(draft.tool.split()),
        tags=list(draft.tags),
        prompt=draft.prompt,
        output=draft.output,
    )


def save_draft(
    store: EntryStore,
    draft: EntryDraft,
    now: Callable[[], datetime] | None = None,
    author: Callable[[], str] = get_git_author,
) -> Path:
    """
    Build an entry from a draft and persist it.

    Args:
        store: Where to write the entry
        draft: Field values from the form
        now: Clock returning the capture time (local time by default)
        author: Resolver for the author name

    Returns:
        Absolute path of the saved file

    Raises:
        PromptRequiredError: If the prompt is empty
        PersistenceError: If the file cannot be written
    """
    timestamp = now() if now is not None else datetime.now().astimezone()
    entry = build_entry(draft, timestamp, author())
    path = store.save_entry(entry)
    logger.info("Captured %r as %s", entry.title, path.name)
    return path

"""
A capture session: the form reducer wired to an entry store.

The session owns the single FormState of one run of the form. It feeds
events through ``reduce``, performs SaveEntry effects itself (they are
synchronous), and hands the timer and quit effects back to the UI loop.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from crumb.core.config.loader import resolve_output_dir
from crumb.core.config.models import CrumbConfig, get_all_tools
from crumb.core.entries.capture import save_draft
from crumb.core.entries.models import EntryDraft
from crumb.core.entries.store import EntryStore
from crumb.core.errors import CrumbError
from crumb.tui.events import Effect, Event, SaveEntry, SaveFailed, SaveSucceeded
from crumb.tui.state import FormState, initial_state, reduce
from crumb.utils.git import get_git_author

logger = logging.getLogger(__name__)

FREQUENT_TAG_COUNT = 10


def merge_tag_suggestions(favorites: list[str], frequent: list[str]) -> list[str]:
    """
    Combine favourite and frequent tags, favourites first, without duplicates.

    Example:
        >>> merge_tag_suggestions(["design"], ["debugging", "design"])
        ['design', 'debugging']
    """
    return list(dict.fromkeys([*favorites, *frequent]))


class CaptureSession:
    """
    Drive one capture form against an EntryStore.

    Example:
        session = CaptureSession.from_config(config, tool="Cursor")
        effects = session.dispatch(KeyPress.char("h"))
    """

    def __init__(
        self,
        state: FormState,
        store: EntryStore,
        favorite_tags: list[str] | None = None,
        now: Callable[[], datetime] | None = None,
        author: Callable[[], str] = get_git_author,
    ):
        """
        Initialize a session.

        Args:
            state: Starting form state
            store: Where saved entries go
            favorite_tags: Configured tags suggested before frequent ones
            now: Clock for entry timestamps (local time by default)
            author: Resolver for the entry author
        """
        self.state = state
        self.store = store
        self.favorite_tags = list(favorite_tags or [])
        self.now = now
        self.author = author

    @classmethod
    def from_config(
        cls,
        config: CrumbConfig,
        tool: str | None = None,
        stay_open: bool = False,
        title: str | None = None,
        store: EntryStore | None = None,
        now: Callable[[], datetime] | None = None,
        author: Callable[[], str] = get_git_author,
    ) -> "CaptureSession":
        """
        Build a session from the loaded config.

        Args:
            config: Loaded configuration
            tool: Tool to pre-select (defaults to ``config.default_tool``)
            stay_open: Reset instead of quitting after a successful save
            title: Explicit title for the first saved entry
            store: Entry store (defaults to the configured output directory)
            now: Clock for entry timestamps
            author: Resolver for the entry author
        """
        if store is None:
            store = EntryStore(resolve_output_dir(config))
        suggestions = merge_tag_suggestions(
            config.favorite_tags, store.get_frequent_tags(FREQUENT_TAG_COUNT)
        )
        state = initial_state(
            tools=get_all_tools(config),
            selected_tool=tool or config.default_tool,
            suggestions=suggestions,
            stay_open=stay_open,
            title=title,
            destination=config.output_dir,
        )
        return cls(state, store, favorite_tags=config.favorite_tags, now=now, author=author)

    def dispatch(self, event: Event) -> list[Effect]:
        """
        Apply an event and run any save it triggers.

        Returns:
            Effects left for the UI loop (timers and quit)
        """
        pending: list[Event] = [event]
        remaining: list[Effect] = []
        while pending:
            self.state, effects = reduce(self.state, pending.pop(0))
            for effect in effects:
                if isinstance(effect, SaveEntry):
                    pending.append(self._save(effect.draft))
                else:
                    remaining.append(effect)
        return remaining

    def _save(self, draft: EntryDraft) -> Event:
        try:
            path = save_draft(self.store, draft, now=self.now, author=self.author)
        except CrumbError as e:
            logger.info("Save failed: %s", e)
            return SaveFailed(str(e))

        suggestions: tuple[str, ...] = ()
        if self.state.stay_open:
            suggestions = tuple(
                merge_tag_suggestions(
                    self.favorite_tags, self.store.get_frequent_tags(FREQUENT_TAG_COUNT)
                )
            )
        return SaveSucceeded(path=path, suggestions=suggestions)

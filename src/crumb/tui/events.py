"""
Events consumed and effects produced by the capture form reducer.

The reducer never performs I/O or sleeps. Anything that has to happen
outside the pure state transition (saving, timers, quitting) is returned
as an effect, and whoever drives the form feeds the outcome back in as a
new event.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from crumb.core.entries.models import EntryDraft

# ==============================================================================
# Input events
# ==============================================================================


@dataclass(frozen=True)
class KeyPress:
    """
    A key press, normalized away from any terminal library.

    Special keys use names such as ``"tab"``, ``"shift+tab"``, ``"esc"``,
    ``"enter"``, ``"backspace"``, ``"ctrl+s"``. Printable keys use the
    character itself as ``key`` and also set ``character``.
    """

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> "KeyPress":
        """Build a printable key press."""
        return cls(key=character, character=character)

    @property
    def is_printable(self) -> bool:
        return self.character is not None


@dataclass(frozen=True)
class Paste:
    """Bracketed paste of arbitrary text."""

    text: str


@dataclass(frozen=True)
class Resize:
    """Terminal dimensions changed."""

    width: int
    height: int


@dataclass(frozen=True)
class ToastExpired:
    """Auto-hide timer fired for the toast with this token."""

    token: int


@dataclass(frozen=True)
class QuitTimerFired:
    """Delayed quit after a successful save fired."""


@dataclass(frozen=True)
class SaveSucceeded:
    """The entry was written."""

    path: Path
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SaveFailed:
    """The entry could not be written."""

    reason: str


Event = KeyPress | Paste | Resize | ToastExpired | QuitTimerFired | SaveSucceeded | SaveFailed

# ==============================================================================
# Effects
# ==============================================================================


class QuitReason(str, Enum):
    """Why the session ended."""

    SAVED = "saved"
    CANCELLED = "cancelled"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class SaveEntry:
    """Persist the draft, then report SaveSucceeded or SaveFailed."""

    draft: EntryDraft


@dataclass(frozen=True)
class HideToastAfter:
    """Send ToastExpired(token) after ``delay`` seconds."""

    delay: float
    token: int


@dataclass(frozen=True)
class QuitAfter:
    """Send QuitTimerFired after ``delay`` seconds."""

    delay: float


@dataclass(frozen=True)
class Quit:
    """End the session now."""

    reason: QuitReason


Effect = SaveEntry | HideToastAfter | QuitAfter | Quit

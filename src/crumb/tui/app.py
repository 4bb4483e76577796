"""
Textual driver for the capture form.

The app is deliberately thin: it translates terminal events into form
events, hands them to the CaptureSession, schedules the timers the
reducer asks for, and repaints the form with the Rich renderer.
"""

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from crumb.tui.events import (
    Effect,
    Event,
    HideToastAfter,
    KeyPress,
    Paste,
    Quit,
    QuitAfter,
    QuitReason,
    QuitTimerFired,
    Resize,
    ToastExpired,
)
from crumb.tui.render import FormRenderer
from crumb.tui.session import CaptureSession
from crumb.tui.theme import Theme

logger = logging.getLogger(__name__)

# Textual key name -> form key name
SPECIAL_KEYS = {
    "escape": "esc",
    "tab": "tab",
    "shift+tab": "shift+tab",
    "enter": "enter",
    "backspace": "backspace",
    "delete": "delete",
    "left": "left",
    "right": "right",
    "up": "up",
    "down": "down",
    "home": "home",
    "end": "end",
    "ctrl+s": "ctrl+s",
    "ctrl+t": "ctrl+t",
    "ctrl+c": "ctrl+c",
    "ctrl+d": "ctrl+d",
}


@dataclass(frozen=True)
class CaptureOutcome:
    """How a capture session ended."""

    reason: QuitReason
    saved_paths: tuple[Path, ...] = ()


def translate_key(event: events.Key) -> KeyPress | None:
    """Map a Textual key event to a form KeyPress, or None to ignore it."""
    if event.key in SPECIAL_KEYS:
        return KeyPress(SPECIAL_KEYS[event.key])
    if event.is_printable and event.character:
        return KeyPress.char(event.character)
    return None


class CaptureApp(App[CaptureOutcome]):
    """Full-screen capture form."""

    CSS = """
    Screen {
        overflow: hidden;
    }
    #form {
        width: 100%;
        height: 100%;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Priority bindings run before Textual's own (focus cycling, quit), so
    # these keys always reach the form
    BINDINGS = [
        Binding("ctrl+c", "form_key('ctrl+c')", show=False, priority=True),
        Binding("ctrl+d", "form_key('ctrl+d')", show=False, priority=True),
        Binding("tab", "form_key('tab')", show=False, priority=True),
        Binding("shift+tab", "form_key('shift+tab')", show=False, priority=True),
        Binding("escape", "form_key('esc')", show=False, priority=True),
    ]

    def __init__(self, session: CaptureSession, theme: Theme | None = None) -> None:
        super().__init__()
        self.session = session
        self.renderer = FormRenderer(theme)

    def compose(self) -> ComposeResult:
        yield Static(id="form")

    def on_mount(self) -> None:
        self.apply_form_event(Resize(self.size.width, self.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        key = translate_key(event)
        if key is not None:
            self.apply_form_event(key)

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.apply_form_event(Paste(event.text))

    def on_resize(self, event: events.Resize) -> None:
        self.apply_form_event(Resize(event.size.width, event.size.height))

    def action_form_key(self, key: str) -> None:
        self.apply_form_event(KeyPress(key))

    def apply_form_event(self, event: Event) -> None:
        """Run an event through the session, repaint, and carry out effects."""
        effects = self.session.dispatch(event)
        self.query_one("#form", Static).update(self.renderer.render(self.session.state))
        for effect in effects:
            self._run_effect(effect)

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, HideToastAfter):
            self.set_timer(effect.delay, partial(self.apply_form_event, ToastExpired(effect.token)))
        elif isinstance(effect, QuitAfter):
            self.set_timer(effect.delay, partial(self.apply_form_event, QuitTimerFired()))
        elif isinstance(effect, Quit):
            logger.debug("Capture session ended: %s", effect.reason.value)
            self.exit(CaptureOutcome(effect.reason, self.session.state.saved_paths))


def run_capture(session: CaptureSession, theme: Theme | None = None) -> CaptureOutcome:
    """
    Run the capture form until the user saves, cancels, or quits.

    Returns:
        The outcome; a cancel is reported if the app exits without one
    """
    outcome = CaptureApp(session, theme).run()
    if outcome is None:
        return CaptureOutcome(QuitReason.CANCELLED, session.state.saved_paths)
    return outcome

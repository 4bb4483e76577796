"""
Capture form state machine.

``reduce(state, event)`` is the whole behaviour of the form: it returns
the next state plus the effects to run. It is pure and synchronous, so
the form can be driven by any UI loop, or by tests without a terminal.

Focus cycles through four fields:

    0 Prompt -> 1 Output -> 2 Tool -> 3 Tags -> 0 ...

Help and toasts are overlays on top of whichever field has focus.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from pathlib import Path

from crumb.core.entries.models import EntryDraft
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
    SaveEntry,
    SaveFailed,
    SaveSucceeded,
    ToastExpired,
)
from crumb.tui.fields import OUTPUT_CHAR_LIMIT, PROMPT_CHAR_LIMIT, TagInput, TextField, ToolSelector

SUCCESS_TOAST_SECONDS = 2.0
ERROR_TOAST_SECONDS = 3.0
QUIT_DELAY_SECONDS = 0.5

# Rows taken by everything except the two text areas
FIXED_CHROME_HEIGHT = 26
MIN_AVAILABLE_HEIGHT = 10
MIN_PROMPT_HEIGHT = 4
MIN_OUTPUT_HEIGHT = 3
PROMPT_SHARE_PERCENT = 60

FORCE_QUIT_KEYS = frozenset({"ctrl+c", "ctrl+d"})
FOCUS_TOOL_KEYS = frozenset({"/", "ctrl+t"})


class Focus(IntEnum):
    """Form fields in tab order."""

    PROMPT = 0
    OUTPUT = 1
    TOOL = 2
    TAGS = 3


class ToastSeverity(str, Enum):
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    """A transient status message; ``token`` identifies its hide timer."""

    message: str
    severity: ToastSeverity
    token: int

    @property
    def is_error(self) -> bool:
        return self.severity == ToastSeverity.ERROR


@dataclass(frozen=True)
class FormState:
    """Everything the capture form knows at one instant."""

    prompt: TextField
    output: TextField
    tool: ToolSelector
    tags: TagInput
    focus: Focus = Focus.PROMPT
    help_visible: bool = False
    toast: Toast | None = None
    toast_counter: int = 0
    width: int = 80
    height: int = 24
    prompt_height: int = 8
    output_height: int = 6
    stay_open: bool = False
    title: str | None = None
    destination: str = ""
    saved_paths: tuple[Path, ...] = ()
    quitting: bool = False

    @property
    def toast_visible(self) -> bool:
        return self.toast is not None

    def draft(self) -> EntryDraft:
        """Snapshot the fields for saving."""
        return EntryDraft(
            prompt=self.prompt.value,
            output=self.output.value,
            tool=self.tool.selected,
            tags=self.tags.all_tags(),
            title=self.title,
        )


def compute_field_heights(height: int) -> tuple[int, int]:
    """
    Split the terminal height between the prompt and output areas.

    The prompt gets 60% of what is left after the fixed chrome, the output
    the remainder, each with a minimum.

    Returns:
        ``(prompt_height, output_height)``
    """
    available = max(height - FIXED_CHROME_HEIGHT, MIN_AVAILABLE_HEIGHT)
    prompt_height = available * PROMPT_SHARE_PERCENT // 100
    output_height = available - prompt_height
    return max(prompt_height, MIN_PROMPT_HEIGHT), max(output_height, MIN_OUTPUT_HEIGHT)


def initial_state(
    tools: list[str],
    selected_tool: str,
    suggestions: list[str] | tuple[str, ...] = (),
    stay_open: bool = False,
    title: str | None = None,
    destination: str = "",
) -> FormState:
    """Build the state a new session starts in: prompt focused, no overlays."""
    return FormState(
        prompt=TextField(char_limit=PROMPT_CHAR_LIMIT, placeholder="Enter your prompt here..."),
        output=TextField(char_limit=OUTPUT_CHAR_LIMIT, placeholder="LLM output (optional)"),
        tool=ToolSelector.create(tools, selected_tool),
        tags=TagInput(suggestions=tuple(suggestions)),
        stay_open=stay_open,
        title=title,
        destination=destination,
    )


def reduce(state: FormState, event: Event) -> tuple[FormState, list[Effect]]:
    """
    Apply one event to the form.

    Args:
        state: Current state
        event: Input or timer event

    Returns:
        The next state and the effects the driver must carry out
    """
    if isinstance(event, KeyPress):
        return _on_key(state, event)
    if isinstance(event, Paste):
        if state.quitting:
            return state, []
        if state.help_visible:
            return replace(state, help_visible=False), []
        return _route_paste(state, event.text), []
    if isinstance(event, Resize):
        prompt_height, output_height = compute_field_heights(event.height)
        return (
            replace(
                state,
                width=event.width,
                height=event.height,
                prompt_height=prompt_height,
                output_height=output_height,
            ),
            [],
        )
    if isinstance(event, ToastExpired):
        if state.toast is not None and state.toast.token == event.token:
            return replace(state, toast=None), []
        return state, []
    if isinstance(event, QuitTimerFired):
        return state, [Quit(QuitReason.SAVED)]
    if isinstance(event, SaveSucceeded):
        return _on_saved(state, event)
    if isinstance(event, SaveFailed):
        return show_toast(state, f"Error: {event.reason}", ToastSeverity.ERROR)
    return state, []


def show_toast(
    state: FormState, message: str, severity: ToastSeverity
) -> tuple[FormState, list[Effect]]:
    """Show a toast, superseding any current one, and schedule its hide."""
    token = state.toast_counter + 1
    delay = ERROR_TOAST_SECONDS if severity == ToastSeverity.ERROR else SUCCESS_TOAST_SECONDS
    toast = Toast(message=message, severity=severity, token=token)
    return replace(state, toast=toast, toast_counter=token), [HideToastAfter(delay, token)]


def set_focus(state: FormState, focus: int) -> FormState:
    return replace(state, focus=Focus(focus % len(Focus)))


def _on_key(state: FormState, key: KeyPress) -> tuple[FormState, list[Effect]]:
    if key.key in FORCE_QUIT_KEYS:
        return state, [Quit(QuitReason.INTERRUPTED)]

    # Saved and waiting on the quit timer: further edits or saves would be lost
    if state.quitting:
        return state, []

    # Help is a pure overlay: the dismissing key goes nowhere else
    if state.help_visible:
        return replace(state, help_visible=False), []

    if key.key == "esc":
        return state, [Quit(QuitReason.CANCELLED)]
    if key.key == "?":
        return replace(state, help_visible=True), []
    if key.key == "ctrl+s":
        return _request_save(state)
    if key.key in FOCUS_TOOL_KEYS:
        return set_focus(state, Focus.TOOL), []
    if key.key == "tab":
        return set_focus(state, state.focus + 1), []
    if key.key == "shift+tab":
        return set_focus(state, state.focus - 1 + len(Focus)), []

    return _route_key(state, key), []


def _route_key(state: FormState, key: KeyPress) -> FormState:
    if state.focus == Focus.PROMPT:
        return replace(state, prompt=state.prompt.handle_key(key))
    if state.focus == Focus.OUTPUT:
        return replace(state, output=state.output.handle_key(key))
    if state.focus == Focus.TOOL:
        return replace(state, tool=state.tool.handle_key(key))
    return replace(state, tags=state.tags.handle_key(key))


def _route_paste(state: FormState, text: str) -> FormState:
    if state.focus == Focus.PROMPT:
        return replace(state, prompt=state.prompt.paste(text))
    if state.focus == Focus.OUTPUT:
        return replace(state, output=state.output.paste(text))
    if state.focus == Focus.TAGS:
        return replace(state, tags=state.tags.paste(text))
    # The tool selector has no text to paste into
    return state


def _request_save(state: FormState) -> tuple[FormState, list[Effect]]:
    if not state.prompt.value.strip():
        return show_toast(state, "Prompt is required", ToastSeverity.ERROR)
    return state, [SaveEntry(state.draft())]


def _on_saved(state: FormState, event: SaveSucceeded) -> tuple[FormState, list[Effect]]:
    state = replace(state, saved_paths=(*state.saved_paths, event.path))

    if not state.stay_open:
        state = replace(state, quitting=True)
        state, _ = show_toast(state, "Saved!", ToastSeverity.INFO)
        return state, [QuitAfter(QUIT_DELAY_SECONDS)]

    state = reset_fields(state, event.suggestions)
    return show_toast(state, f"Saved: {event.path}", ToastSeverity.INFO)


def reset_fields(state: FormState, suggestions: tuple[str, ...]) -> FormState:
    """
    Clear the form for the next capture in stay-open mode.

    Prompt, output, and tags are emptied and tag suggestions replaced;
    the tool selection is kept. Focus returns to the prompt.
    """
    return replace(
        state,
        prompt=state.prompt.reset(),
        output=state.output.reset(),
        tags=state.tags.reset(suggestions),
        focus=Focus.PROMPT,
        title=None,
    )

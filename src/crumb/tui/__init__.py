"""
Crumb interactive capture form.

The form is a pure reducer (``state.reduce``) over immutable field
values, driven by a CaptureSession and displayed by a Textual app.
"""

from crumb.tui.events import KeyPress, Paste, QuitReason, Resize
from crumb.tui.session import CaptureSession, merge_tag_suggestions
from crumb.tui.state import Focus, FormState, ToastSeverity, initial_state, reduce
from crumb.tui.theme import Theme

__all__ = [
    "CaptureSession",
    "Focus",
    "FormState",
    "KeyPress",
    "Paste",
    "QuitReason",
    "Resize",
    "Theme",
    "ToastSeverity",
    "initial_state",
    "merge_tag_suggestions",
    "reduce",
]

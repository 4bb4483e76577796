"""
Rich-based renderer for the capture form.

Turns a FormState into a Rich renderable. Rendering has no side effects
and reads nothing but the state and the theme.
"""

from rich import box
from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from crumb.tui.fields import TagInput, TextField
from crumb.tui.state import Focus, FormState
from crumb.tui.theme import Theme

FOOTER_HINT = "Tab: next • Shift+Tab: prev • Ctrl+S: save • ?: help • Esc: cancel"
MAX_SUGGESTIONS_SHOWN = 8

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("Tab / Shift+Tab", "Navigate between fields"),
            ("/ or Ctrl+T", "Focus tool selector"),
            ("↑ / ↓", "Change tool (in tool selector)"),
        ],
    ),
    (
        "Editing",
        [
            ("Enter or ,", "Add tag (in tags field)"),
            ("Backspace", "Remove last tag (in tags field)"),
            ("→", "Accept tag suggestion"),
            ("Ctrl+S", "Save"),
        ],
    ),
    (
        "Other",
        [
            ("?", "Toggle this help screen"),
            ("Esc", "Cancel and exit"),
            ("Ctrl+C / Ctrl+D", "Force quit"),
        ],
    ),
]


class FormRenderer:
    """
    Render the capture form using Rich.

    Example:
        >>> renderer = FormRenderer(Theme.mocha())
        >>> renderer.render(state)  # Returns a Rich renderable
    """

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or Theme.mocha()

    def render(self, state: FormState) -> RenderableType:
        """Render the whole screen, or the help overlay when it is shown."""
        if state.help_visible:
            return self.render_help(state)

        inner_width = max(state.width - 8, 10)
        parts: list[RenderableType] = [
            self._render_header(state),
            Text(),
            self._label(state, Focus.PROMPT, "Prompt:"),
            self._render_text_area(
                state.prompt, state.prompt_height, state.focus == Focus.PROMPT, inner_width
            ),
            Text(),
            self._label(state, Focus.OUTPUT, "Paste Output:", hint="(optional)"),
            self._render_text_area(
                state.output, state.output_height, state.focus == Focus.OUTPUT, inner_width
            ),
            Text(),
            self._render_tool(state),
            Text(),
            self._label(state, Focus.TAGS, "Tags:", hint="(enter to add, backspace to remove)"),
            self._render_tags(state.tags, state.focus == Focus.TAGS),
            self._render_suggestions(state.tags),
            Text(),
            Text(FOOTER_HINT, style=self.theme.help),
        ]
        if state.toast is not None:
            style = self.theme.toast_error if state.toast.is_error else self.theme.toast_info
            parts.append(Text())
            parts.append(Align.center(Text(f" {state.toast.message} ", style=style)))

        return Panel(Group(*parts), box=box.SIMPLE, padding=(0, 1), style=self.theme.text)

    def render_help(self, state: FormState) -> RenderableType:
        """Render the help overlay."""
        table = Table.grid(padding=(0, 3))
        table.add_column(style=self.theme.focused_label, no_wrap=True)
        table.add_column(style=self.theme.text)

        for index, (section, rows) in enumerate(HELP_SECTIONS):
            if index:
                table.add_row("", "")
            table.add_row(Text(f"{section}:", style=self.theme.label), "")
            for keys, description in rows:
                table.add_row(f"  {keys}", description)

        body = Group(
            Text("crumb - Help", style=self.theme.title),
            Text(),
            table,
            Text(),
            Text("Press any key to close this help screen", style=self.theme.help),
        )
        panel = Panel(body, box=box.ROUNDED, border_style=self.theme.border, padding=(1, 2))
        return Align.center(panel, vertical="middle", height=max(state.height, 1))

    def _render_header(self, state: FormState) -> Text:
        header = Text()
        header.append("crumb", style=self.theme.title)
        if state.destination:
            header.append(f"  → {state.destination}/", style=self.theme.help)
        if state.stay_open:
            header.append("  (stay open)", style=self.theme.help)
        return header

    def _label(self, state: FormState, field: Focus, label: str, hint: str = "") -> Text:
        text = Text()
        if state.focus == field:
            text.append(f"→ {label}", style=self.theme.focused_label)
        else:
            text.append(label, style=self.theme.label)
        if hint:
            text.append(f" {hint}", style=self.theme.help)
        return text

    def _render_text_area(
        self, field: TextField, height: int, focused: bool, width: int
    ) -> Panel:
        border = self.theme.focused_border if focused else self.theme.border
        return Panel(
            self._text_view(field, height, focused, width),
            box=box.ROUNDED,
            border_style=border,
            height=height + 2,
            padding=(0, 1),
        )

    def _text_view(self, field: TextField, height: int, focused: bool, width: int) -> Text:
        """
        Render the visible window of a text field.

        The window scrolls so the cursor row is always on screen; the
        cursor line scrolls horizontally when the cursor passes the edge.
        """
        view = Text(no_wrap=True, overflow="crop")

        if not field.value:
            if focused:
                view.append(" ", style=self.theme.cursor)
            view.append(field.placeholder, style=self.theme.placeholder)
            return view

        lines = field.lines
        row, column = field.cursor_position()
        top = max(0, row - height + 1)

        for offset, line in enumerate(lines[top : top + height]):
            if offset:
                view.append("\n")
            if not focused or top + offset != row:
                view.append(line)
                continue
            start = max(0, column - width + 2)
            view.append(line[start:column])
            view.append(line[column : column + 1] or " ", style=self.theme.cursor)
            view.append(line[column + 1 :])
        return view

    def _render_tool(self, state: FormState) -> Text:
        text = self._label(state, Focus.TOOL, "Tool:")
        text.append(" ")
        focused = state.focus == Focus.TOOL
        selected_style = self.theme.focused_label if focused else self.theme.text
        text.append(f"‹ {state.tool.selected} ›", style=selected_style)
        if focused:
            position = f"  {state.tool.index + 1}/{len(state.tool.options)}  ↑/↓ to change"
            text.append(position, style=self.theme.help)
        return text

    def _render_tags(self, tags: TagInput, focused: bool) -> Text:
        text = Text()
        for tag in tags.tags:
            text.append(f" {tag} ", style=self.theme.tag)
            text.append(" ")
        text.append(tags.text)
        if focused:
            text.append(" ", style=self.theme.cursor)
        elif not tags.tags and not tags.text:
            text.append("no tags", style=self.theme.placeholder)
        return text

    def _render_suggestions(self, tags: TagInput) -> Text:
        matches = tags.matches()[:MAX_SUGGESTIONS_SHOWN]
        if not matches:
            return Text()
        return Text("suggestions: " + ", ".join(matches), style=self.theme.suggestion)

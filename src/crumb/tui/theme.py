"""
Styles for the capture form.

The renderer takes a Theme instance instead of reading module-level
styles, so alternative palettes (or a plain one for tests) are just
another instance.
"""

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Theme:
    """Every style the form renderer uses."""

    text: Style
    title: Style
    label: Style
    focused_label: Style
    help: Style
    border: Style
    focused_border: Style
    separator: Style
    placeholder: Style
    cursor: Style
    tag: Style
    suggestion: Style
    toast_info: Style
    toast_error: Style

    @classmethod
    def mocha(cls) -> "Theme":
        """Catppuccin Mocha, the default palette."""
        return cls(
            text=Style(color="#cdd6f4"),
            title=Style(color="#cba6f7", bold=True),
            label=Style(color="#89dceb", bold=True),
            focused_label=Style(color="#f9e2af", bold=True),
            help=Style(color="#6c7086", italic=True),
            border=Style(color="#45475a"),
            focused_border=Style(color="#f9e2af"),
            separator=Style(color="#313244"),
            placeholder=Style(color="#6c7086"),
            cursor=Style(reverse=True),
            tag=Style(color="#1e1e2e", bgcolor="#89b4fa"),
            suggestion=Style(color="#7f849c"),
            toast_info=Style(color="#1e1e2e", bgcolor="#a6e3a1", bold=True),
            toast_error=Style(color="#1e1e2e", bgcolor="#f38ba8", bold=True),
        )

    @classmethod
    def plain(cls) -> "Theme":
        """No colours; only the cursor is marked."""
        blank = Style()
        return cls(
            text=blank,
            title=Style(bold=True),
            label=blank,
            focused_label=Style(bold=True),
            help=blank,
            border=blank,
            focused_border=Style(bold=True),
            separator=blank,
            placeholder=blank,
            cursor=Style(reverse=True),
            tag=Style(reverse=True),
            suggestion=blank,
            toast_info=Style(bold=True),
            toast_error=Style(bold=True),
        )

"""
Crumb CLI - Show command.

Renders a markdown file (typically a captured entry) in the terminal.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from crumb.cli.errors import ExitCode, print_error
from crumb.core.entries.front_matter import MalformedFrontMatterError, parse_front_matter

console = Console()


def show(
    path: Path = typer.Argument(..., help="Markdown file to render"),
) -> None:
    """
    Render a markdown file with formatting.

    Entry metadata from the front matter is shown as a table above the
    body. Also available as ``crumb FILE.md``.

    Examples:
        crumb show crumbs/2024-01-15-fix-the-bug.md
        crumb crumbs/README.md
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to read {path}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    try:
        front_matter = parse_front_matter(text)
    except MalformedFrontMatterError:
        console.print(Markdown(text))
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    for key, value in front_matter.values.items():
        table.add_row(f"{key}:", value)
    for key, items in front_matter.lists.items():
        table.add_row(f"{key}:", ", ".join(items))

    console.print(table)
    console.print()
    console.print(Markdown(front_matter.body))

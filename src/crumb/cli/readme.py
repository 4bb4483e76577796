"""
Crumb CLI - Readme command.

Regenerates README.md in the prompts directory from the entry files.
"""

import typer
from rich.console import Console

from crumb.cli.config_cmd import load_config_or_exit
from crumb.cli.errors import (
    ExitCode,
    print_directory_missing_error,
    print_warning,
    print_write_error,
)
from crumb.core.config import resolve_output_dir
from crumb.core.errors import DirectoryMissingError, PersistenceError
from crumb.core.index import write_index

console = Console()


def readme() -> None:
    """
    Generate/update README.md in the prompts directory.

    Entries are listed newest first. Files with malformed front matter
    are skipped with a warning.

    Examples:
        crumb readme
    """
    config = load_config_or_exit()
    output_dir = resolve_output_dir(config)

    try:
        index_path, result = write_index(output_dir)
    except DirectoryMissingError as e:
        print_directory_missing_error(e.path)
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except PersistenceError as e:
        print_write_error(e.reason)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    for warning in result.warnings:
        print_warning(f"Skipped {warning}")

    count = len(result.rows)
    noun = "entry" if count == 1 else "entries"
    console.print(f"[green]✓[/green] Generated [bold]{index_path}[/bold] ({count} {noun})")

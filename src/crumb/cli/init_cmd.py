"""
Init command implementation for crumb.

Creates the prompts directory and a starter README index.
"""

import logging

import typer
from rich.console import Console

from crumb.cli.config_cmd import load_config_or_exit
from crumb.cli.errors import ExitCode, print_write_error
from crumb.core.config import resolve_output_dir
from crumb.core.entries.store import EntryStore
from crumb.core.index import starter_index

console = Console()
logger = logging.getLogger(__name__)


def main(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing README.md",
    ),
) -> None:
    """
    Create the prompts directory with a starter README.

    The directory comes from output_dir in the config (default: crumbs/).
    An existing README.md is kept unless --force is given.

    Examples:
        crumb init
        crumb init --force
    """
    config = load_config_or_exit()
    store = EntryStore(resolve_output_dir(config))
    output_dir = store.get_entries_dir()
    readme_path = store.get_index_path()

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        if readme_path.exists() and not force:
            console.print(
                f"[dim]Kept existing {readme_path} (use --force to overwrite)[/dim]",
                highlight=False,
            )
        else:
            readme_path.write_text(starter_index(), encoding="utf-8")
            console.print(f"[green]✓[/green] Created [bold]{readme_path}[/bold]")
    except OSError as e:
        print_write_error(f"{e.filename or output_dir}: {e.strerror or e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    logger.debug("Initialized %s", output_dir)
    console.print(f"[green]✓[/green] Initialized [bold]{output_dir}[/bold]")

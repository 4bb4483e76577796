"""
Crumb CLI - Config command.

Opens the user config file in ``$EDITOR``, creating it with documented
defaults first if it does not exist.
"""

import logging
import os
import shlex
import subprocess

import typer
from rich.console import Console

from crumb.cli.errors import ExitCode, print_config_error, print_error
from crumb.core.config import CrumbConfig, get_config_path, load_config, write_default_config
from crumb.core.errors import ConfigError

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"


def load_config_or_exit() -> CrumbConfig:
    """
    Load the config for a command, exiting with code 1 if it is invalid.

    Raises:
        typer.Exit: If the config file is unreadable or invalid
    """
    try:
        return load_config()
    except ConfigError as e:
        print_config_error(e.path, e.reason)
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def config(
    show_path: bool = typer.Option(
        False,
        "--path",
        help="Print the config file path instead of opening an editor",
    ),
) -> None:
    """
    Open the config file in $EDITOR (vim if unset).

    The file is created with commented defaults on first use.

    Examples:
        crumb config
        crumb config --path
        EDITOR=nano crumb config
    """
    config_path = get_config_path()

    if show_path:
        console.print(str(config_path), highlight=False, soft_wrap=True)
        return

    if not config_path.exists():
        try:
            write_default_config(config_path)
        except OSError as e:
            print_error(
                f"Failed to write default config: {config_path}",
                reason=e.strerror or str(e),
            )
            raise typer.Exit(ExitCode.GENERAL_ERROR)
        console.print(f"[green]✓[/green] Created [bold]{config_path}[/bold]")

    editor = os.environ.get("EDITOR", "").strip() or DEFAULT_EDITOR
    command = [*shlex.split(editor), str(config_path)]
    logger.debug("Running editor: %s", command)

    try:
        result = subprocess.run(command, check=False)
    except FileNotFoundError:
        print_error(
            f"Editor not found: {editor}",
            reason="crumb opens the config file with $EDITOR",
            solution="export EDITOR=nano  # or any editor on your PATH",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if result.returncode != 0:
        print_error(f"Editor exited with status {result.returncode}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

"""
Standardized error handling and exit codes for the crumb CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum
from pathlib import Path

from rich.console import Console

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for crumb CLI operations."""

    SUCCESS = 0
    """Operation completed successfully, or the user cancelled."""

    GENERAL_ERROR = 1
    """Unrecoverable error (config, missing directory, write failure)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Prompts directory does not exist",
        ...     reason="crumb readme indexes an existing directory",
        ...     solution="crumb init",
        ... )
    """
    console.print(f"[red]Error:[/red] {problem}", highlight=False)

    if reason:
        console.print(f"[dim]{reason}[/dim]", highlight=False)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}", highlight=False)


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"[yellow]Warning:[/yellow] {message}", highlight=False)


def print_config_error(path: Path, reason: str) -> None:
    """Print error when the config file cannot be loaded."""
    print_error(
        f"Failed to load config: {path}",
        reason=reason,
        solution="crumb config  # fix the file in your editor",
    )


def print_directory_missing_error(path: Path) -> None:
    """Print error when the prompts directory has not been created."""
    print_error(
        f"Prompts directory does not exist: {path}",
        reason="The index is generated from an existing prompts directory",
        solution="crumb init",
    )


def print_write_error(reason: str) -> None:
    """Print error when a file could not be written."""
    print_error(
        "Failed to write file",
        reason=reason,
        solution="Check permissions and free space, then run the command again",
    )


__all__ = [
    "ExitCode",
    "print_config_error",
    "print_directory_missing_error",
    "print_error",
    "print_warning",
    "print_write_error",
]

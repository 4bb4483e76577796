"""
Crumb CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from crumb import __version__
from crumb.cli import capture, config_cmd, init_cmd, readme, show
from crumb.cli.argv import preprocess_argv

# Create the main Typer app
app = typer.Typer(
    name="crumb",
    help="Capture AI prompts and outputs as markdown breadcrumbs",
    no_args_is_help=False,
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def configure_logging(debug: bool) -> None:
    """
    Configure logging for all commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    tool: str | None = typer.Option(
        None,
        "--tool",
        "-t",
        help="Pre-select the tool (default: default_tool from config)",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Set the entry title instead of deriving it from the prompt",
    ),
    stay: bool = typer.Option(
        False,
        "--stay",
        help="Keep the form open after saving to capture several prompts",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    crumb - Leave crumbs for your teammates.

    Capture AI prompts and their outputs as markdown files with front
    matter, so a team can share what worked. Entries are saved to the
    output directory (crumbs/ by default) and listed in its README.md.

    When run without a subcommand, crumb opens the capture form.

    Quick Start:
        1. crumb init                # Create crumbs/ with a README
        2. crumb                     # Capture a prompt
        3. crumb readme              # Rebuild the index

    Capture Options:
        crumb --tool Cursor          # Pre-select a tool
        crumb --title "Fix login"    # Explicit title
        crumb --stay                 # Capture several prompts in a row

    Other:
        crumb config                 # Edit ~/.config/crumb/config.yaml
        crumb crumbs/some-entry.md   # Render an entry
    """
    configure_logging(debug)

    # Store debug flag in context for subcommands
    ctx.obj = {"debug": debug}

    # If a subcommand is being invoked, let it handle things
    if ctx.invoked_subcommand is not None:
        return

    # Bare `crumb` opens the capture form
    capture.capture(tool=tool, title=title, stay=stay)


app.command(name="init")(init_cmd.main)
app.command(name="readme")(readme.readme)
app.command(name="config")(config_cmd.config)
app.command(name="show")(show.show)


@app.command()
def version() -> None:
    """Show crumb version and exit."""
    console.print(f"crumb version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """
    Main CLI entry point.

    The argv preprocessor normalizes common patterns before Typer
    parses them (e.g. ``crumb --version``, ``crumb help readme``,
    ``crumb notes.md``).
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()

"""
Crumb CLI - Capture command.

Launches the interactive capture form. This is what a bare ``crumb``
runs.
"""

import logging

from rich.console import Console

from crumb.cli.config_cmd import load_config_or_exit
from crumb.cli.errors import print_warning
from crumb.core.config import get_all_tools
from crumb.tui.app import run_capture
from crumb.tui.events import QuitReason
from crumb.tui.session import CaptureSession

console = Console()
logger = logging.getLogger(__name__)


def capture(tool: str | None = None, title: str | None = None, stay: bool = False) -> None:
    """
    Run the capture form and report what was saved.

    Args:
        tool: Tool to pre-select instead of the configured default
        title: Explicit entry title instead of one derived from the prompt
        stay: Keep the form open after each save
    """
    config = load_config_or_exit()

    if tool:
        known_tools = get_all_tools(config)
        if tool not in known_tools:
            # Unknown tools are allowed, just flagged
            print_warning(f"tool '{tool}' is not in known tools list (built-in + custom)")
            print_warning(f"known tools: {', '.join(known_tools)}")

    session = CaptureSession.from_config(
        config,
        tool=tool,
        stay_open=stay,
        title=title.strip() if title and title.strip() else None,
    )
    outcome = run_capture(session)
    logger.debug("Capture finished: %s, %d saved", outcome.reason.value, len(outcome.saved_paths))

    for path in outcome.saved_paths:
        console.print(f"[green]✓[/green] Saved [bold]{path.name}[/bold]")
        console.print(f"  [dim]{path}[/dim]", highlight=False)

    if not outcome.saved_paths and outcome.reason != QuitReason.SAVED:
        console.print("[dim]Cancelled, nothing saved[/dim]")

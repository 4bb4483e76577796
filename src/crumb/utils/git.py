"""
Git utilities for crumb.

Entries record who captured them; the name comes from the local git
identity so nothing has to be configured twice.
"""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


def get_git_author() -> str:
    """Get the configured ``git config user.name``.

    Returns:
        The user name, or an empty string if git is not installed or
        no name is configured
    """
    try:
        result = subprocess.run(
            ["git", "config", "user.name"],
            capture_output=True,
            text=True,
            check=True,
            timeout=5,
        )
    except subprocess.CalledProcessError:
        return ""
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        # Git not installed or hung
        logger.debug("git author lookup failed: %s", e)
        return ""

    return result.stdout.strip()

"""
Crumb - leave crumbs for your teammates.

A terminal tool for capturing AI prompts as markdown files and keeping
a browsable index of everything the team has captured.
"""

__version__ = "0.3.0"

from crumb.core.config.models import CrumbConfig
from crumb.core.entries.models import Entry

__all__ = ["CrumbConfig", "Entry", "__version__"]

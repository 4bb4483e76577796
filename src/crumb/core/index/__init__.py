"""
Crumb index module.

Generates the README.md table summarizing every entry in the output
directory.
"""

from crumb.core.index.generator import (
    IndexParseWarning,
    IndexResult,
    IndexRow,
    generate_index,
    render_index,
    sort_rows,
    starter_index,
    write_index,
)

__all__ = [
    "IndexParseWarning",
    "IndexResult",
    "IndexRow",
    "generate_index",
    "render_index",
    "sort_rows",
    "starter_index",
    "write_index",
]

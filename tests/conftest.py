"""
Pytest configuration and shared fixtures.

Provides fixtures for temp directories, an isolated config environment,
fixed clocks, and a helper for writing entry files by hand.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from crumb.core.entries.store import EntryStore

# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def entries_dir(tmp_path: Path) -> Path:
    """Provide a (not yet created) entries directory."""
    return tmp_path / "crumbs"


@pytest.fixture
def store(entries_dir: Path) -> EntryStore:
    """Provide an EntryStore rooted in a temporary directory."""
    return EntryStore(entries_dir)


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, Path]:
    """
    Isolate config and working directory from the real user environment.

    Sets:
    - cwd to ``tmp_path/project``
    - XDG_CONFIG_HOME to ``tmp_path/config``
    - no CRUMB_* overrides
    """
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)

    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("CRUMB_DEFAULT_TOOL", raising=False)
    monkeypatch.delenv("CRUMB_OUTPUT_DIR", raising=False)

    return {
        "project_dir": project_dir,
        "config_path": config_home / "crumb" / "config.yaml",
        "entries_dir": project_dir / "crumbs",
    }


# ==============================================================================
# Clock Fixtures
# ==============================================================================


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed, timezone-aware capture time."""
    return datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now(fixed_time: datetime) -> Callable[[], datetime]:
    """Clock callable returning ``fixed_time``."""
    return lambda: fixed_time


# ==============================================================================
# Entry File Helpers
# ==============================================================================


@pytest.fixture
def write_entry() -> Callable[..., Path]:
    """
    Write an entry file by hand.

    Usage:
        write_entry(directory, "2024-01-15-a.md", title="A", tags=["x"])
    """

    def _write(
        directory: Path,
        filename: str,
        title: str | None = "An entry",
        date: str | None = "2024-01-15T10:30:00+00:00",
        author: str = "Ada",
        tool: str = "Claude Code",
        tags: list[str] | None = None,
        body: str = "## Prompt\n\nDo the thing\n",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = ["---"]
        if title is not None:
            lines.append(f"title: {title}")
        if date is not None:
            lines.append(f"date: {date}")
        lines.append(f"author: {author}")
        lines.append(f"tool: {tool}")
        if tags:
            lines.append("tags:")
            lines.extend(f"  - {tag}" for tag in tags)
        lines.append("---")
        path = directory / filename
        path.write_text("\n".join(lines) + "\n\n" + body, encoding="utf-8")
        return path

    return _write

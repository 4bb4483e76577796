"""
Unit tests for README index generation.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from crumb.core.errors import DirectoryMissingError
from crumb.core.index import IndexRow, generate_index, sort_rows, starter_index, write_index
from crumb.core.index.generator import INDEX_FOOTER, INDEX_HEADER, render_row


def _row(filename: str, date: datetime | None) -> IndexRow:
    return IndexRow(filename=filename, title=filename, date=date)


class TestSortRows:
    """Test index row ordering."""

    def test_newest_first_undated_last(self):
        """Test descending date order with undated rows at the end."""
        rows = [
            _row("undated-1.md", None),
            _row("old.md", datetime(2023, 5, 1, tzinfo=timezone.utc)),
            _row("new.md", datetime(2024, 2, 1, tzinfo=timezone.utc)),
            _row("undated-2.md", None),
        ]

        names = [row.filename for row in sort_rows(rows)]

        assert names == ["new.md", "old.md", "undated-1.md", "undated-2.md"]

    def test_ties_keep_input_order(self):
        """Test that equal dates keep their filename order."""
        same = datetime(2024, 1, 1, tzinfo=timezone.utc)
        rows = [_row("a.md", same), _row("b.md", same)]

        assert [row.filename for row in sort_rows(rows)] == ["a.md", "b.md"]


class TestRenderRow:
    """Test table row rendering."""

    def test_row_layout(self):
        """Test the exact row text."""
        row = IndexRow(
            filename="2024-01-15-fix-the-bug.md",
            title="Fix the bug",
            date=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            author="Ada",
            tool="Claude Code",
            tags=("debugging", "design"),
        )
        assert render_row(row) == (
            "| 2024-01-15 | Ada | Claude Code | debugging, design "
            "| [Fix the bug](2024-01-15-fix-the-bug.md) |"
        )

    def test_pipes_escaped(self):
        """Test that pipe characters cannot break the table."""
        row = IndexRow(filename="a.md", title="a | b", date=None, author="x|y")
        text = render_row(row)

        assert "x\\|y" in text
        assert "[a \\| b](a.md)" in text

    def test_filename_url_encoded(self):
        """Test that link targets are URL-encoded."""
        row = IndexRow(filename="2024-01-15-café bar.md", title="Café", date=None)
        assert "(2024-01-15-caf%C3%A9%20bar.md)" in render_row(row)


class TestGenerateIndex:
    """Test generating the index from an entries directory."""

    def test_empty_directory(self, entries_dir: Path):
        """Test that an empty directory yields the starter index."""
        entries_dir.mkdir()
        result = generate_index(entries_dir)

        assert result.rows == []
        assert result.content == starter_index()
        assert result.content.startswith(INDEX_HEADER)
        assert result.content.endswith(INDEX_FOOTER)

    def test_rows_from_entries(self, entries_dir, write_entry):
        """Test that each entry becomes a row, newest first."""
        write_entry(entries_dir, "2024-01-10-old.md", title="Old", date="2024-01-10T09:00:00Z")
        write_entry(
            entries_dir,
            "2024-03-01-new.md",
            title="New",
            date="2024-03-01T09:00:00+01:00",
            tags=["design"],
        )

        result = generate_index(entries_dir)

        assert [row.title for row in result.rows] == ["New", "Old"]
        assert "| 2024-03-01 | Ada | Claude Code | design | [New](2024-03-01-new.md) |" in (
            result.content
        )

    def test_missing_title_uses_filename(self, entries_dir, write_entry):
        """Test the title fallback."""
        write_entry(entries_dir, "2024-01-10-untitled.md", title=None)

        result = generate_index(entries_dir)

        assert result.rows[0].title == "2024-01-10-untitled"

    def test_bad_date_sorted_last(self, entries_dir, write_entry):
        """Test that entries with unparseable dates go last with an empty date cell."""
        write_entry(entries_dir, "a.md", title="Broken date", date="last tuesday")
        write_entry(entries_dir, "b.md", title="Dated", date="2024-01-10T09:00:00Z")

        result = generate_index(entries_dir)

        assert [row.title for row in result.rows] == ["Dated", "Broken date"]
        assert "|  | Ada |" in result.content

    def test_malformed_file_warns_and_continues(self, entries_dir, write_entry):
        """Test that malformed files are skipped with a warning."""
        write_entry(entries_dir, "2024-01-10-good.md", title="Good")
        (entries_dir / "2024-01-11-bad.md").write_text("---\ntitle: never closed\n")

        result = generate_index(entries_dir)

        assert [row.title for row in result.rows] == ["Good"]
        assert len(result.warnings) == 1
        assert result.warnings[0].path.name == "2024-01-11-bad.md"
        assert "2024-01-11-bad.md" in str(result.warnings[0])

    def test_skipped_file_not_logged_as_warning(self, entries_dir, write_entry, caplog):
        """Test that skips are returned to the caller, not logged at WARNING."""
        write_entry(entries_dir, "2024-01-10-good.md", title="Good")
        (entries_dir / "2024-01-11-bad.md").write_text("no header\n")

        with caplog.at_level(logging.DEBUG, logger="crumb.core.index.generator"):
            result = generate_index(entries_dir)

        assert len(result.warnings) == 1
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert any("2024-01-11-bad.md" in r.getMessage() for r in caplog.records)

    def test_bracketed_title_row(self, entries_dir):
        """Test that a saved title in brackets shows as text in its row."""
        entries_dir.mkdir()
        (entries_dir / "2024-01-15-urgent.md").write_text(
            "---\ntitle: '[urgent]'\ndate: '2024-01-15T10:30:00+00:00'\n---\n\nbody\n"
        )

        result = generate_index(entries_dir)

        assert result.rows[0].title == "[urgent]"
        assert "(2024-01-15-urgent.md)" in result.content

    def test_missing_directory(self, entries_dir):
        """Test that a missing directory raises DirectoryMissingError."""
        with pytest.raises(DirectoryMissingError):
            generate_index(entries_dir)


class TestWriteIndex:
    """Test writing README.md."""

    def test_write_and_regenerate_is_stable(self, entries_dir, write_entry):
        """Test that regenerating an unchanged directory gives identical bytes."""
        write_entry(entries_dir, "2024-01-10-a.md", title="A", tags=["x"])
        write_entry(entries_dir, "2024-01-11-b.md", title="B")

        index_path, first = write_index(entries_dir)
        first_bytes = index_path.read_bytes()
        _, second = write_index(entries_dir)

        assert index_path == entries_dir / "README.md"
        assert index_path.read_bytes() == first_bytes
        assert second.content == first.content
        assert len(second.rows) == 2

    def test_overwrites_existing_readme(self, entries_dir, write_entry):
        """Test that a stale README is replaced."""
        entries_dir.mkdir()
        (entries_dir / "README.md").write_text("stale")
        write_entry(entries_dir, "2024-01-10-a.md", title="A")

        index_path, _ = write_index(entries_dir)

        assert "[A](2024-01-10-a.md)" in index_path.read_text()

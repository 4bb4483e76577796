"""
Tests for CaptureSession: the reducer wired to a real EntryStore.
"""

from pathlib import Path

from crumb.core.config.models import CrumbConfig
from crumb.core.entries.store import EntryStore
from crumb.tui.events import KeyPress, Paste, QuitAfter
from crumb.tui.session import CaptureSession, merge_tag_suggestions
from crumb.tui.state import Focus


def make_session(store: EntryStore, fixed_now, **kwargs) -> CaptureSession:
    config = kwargs.pop("config", CrumbConfig(favorite_tags=["favourite"]))
    return CaptureSession.from_config(
        config, store=store, now=fixed_now, author=lambda: "Ada", **kwargs
    )


def type_text(session: CaptureSession, text: str) -> None:
    for character in text:
        session.dispatch(KeyPress.char(character))


class TestMergeTagSuggestions:
    """Test combining favourite and frequent tags."""

    def test_favourites_first_no_duplicates(self):
        """Test order and de-duplication."""
        assert merge_tag_suggestions(["design"], ["debugging", "design"]) == [
            "design",
            "debugging",
        ]


class TestFromConfig:
    """Test building a session from config."""

    def test_defaults(self, store, fixed_now):
        """Test default tool and suggestions from favourites."""
        session = make_session(store, fixed_now)

        assert session.state.tool.selected == "Claude Code"
        assert session.state.tags.suggestions == ("favourite",)
        assert session.state.destination == "crumbs"

    def test_frequent_tags_suggested(self, store, entries_dir, fixed_now, write_entry):
        """Test that tags already used in the directory are suggested."""
        write_entry(entries_dir, "2024-01-01-a.md", tags=["debugging"])

        session = make_session(store, fixed_now)

        assert session.state.tags.suggestions == ("favourite", "debugging")

    def test_tool_override(self, store, fixed_now):
        """Test --tool style preselection, including unknown tools."""
        session = make_session(store, fixed_now, tool="Zed AI")

        assert session.state.tool.selected == "Zed AI"
        assert session.state.tool.options[-1] == "Zed AI"


class TestDispatchSave:
    """Test saving through the session."""

    def test_save_writes_file_and_schedules_quit(self, store, entries_dir, fixed_now):
        """Test a full capture: type, save, file on disk."""
        session = make_session(store, fixed_now)
        type_text(session, "Fix the bug")
        session.dispatch(KeyPress("tab"))
        session.dispatch(Paste("Here is the fix."))

        effects = session.dispatch(KeyPress("ctrl+s"))

        assert effects == [QuitAfter(0.5)]
        saved = entries_dir / "2024-01-15-fix-the-bug.md"
        assert session.state.saved_paths == (saved.absolute(),)
        content = saved.read_text()
        assert "title: Fix the bug" in content
        assert "author: Ada" in content
        assert "tool: Claude Code" in content
        assert "## Output\n\nHere is the fix.\n" in content

    def test_empty_prompt_writes_nothing(self, store, entries_dir, fixed_now):
        """Test that validation failure leaves the filesystem untouched."""
        session = make_session(store, fixed_now)

        effects = session.dispatch(KeyPress("ctrl+s"))

        assert not entries_dir.exists()
        assert session.state.toast.message == "Prompt is required"
        assert len(effects) == 1

    def test_write_failure_shows_error(self, tmp_path: Path, fixed_now):
        """Test that a persistence error becomes an error toast, not an exception."""
        blocker = tmp_path / "crumbs"
        blocker.write_text("not a directory")
        session = make_session(EntryStore(blocker), fixed_now)
        type_text(session, "Fix it")

        session.dispatch(KeyPress("ctrl+s"))

        assert session.state.toast.is_error
        assert session.state.toast.message.startswith("Error: ")
        assert session.state.prompt.value == "Fix it"
        assert session.state.saved_paths == ()

    def test_second_save_before_quit_writes_nothing(self, store, entries_dir, fixed_now):
        """Test that pressing Ctrl+S twice leaves a single file."""
        session = make_session(store, fixed_now)
        type_text(session, "hi")

        session.dispatch(KeyPress("ctrl+s"))
        effects = session.dispatch(KeyPress("ctrl+s"))

        assert effects == []
        assert [path.name for path in entries_dir.glob("*.md")] == ["2024-01-15-hi.md"]
        assert len(session.state.saved_paths) == 1


class TestStayOpenSession:
    """Test capturing several entries in one session."""

    def test_two_saves(self, store, entries_dir, fixed_now):
        """Test that each save writes a file and refreshes suggestions."""
        session = make_session(store, fixed_now, stay_open=True, tool="Cursor", title="Custom")

        type_text(session, "First prompt")
        session.dispatch(KeyPress("shift+tab"))
        type_text(session, "newtag")
        effects = session.dispatch(KeyPress("ctrl+s"))

        assert not any(isinstance(effect, QuitAfter) for effect in effects)
        assert session.state.focus == Focus.PROMPT
        assert session.state.tool.selected == "Cursor"
        assert "newtag" in session.state.tags.suggestions

        type_text(session, "Second prompt")
        session.dispatch(KeyPress("ctrl+s"))

        names = sorted(path.name for path in session.state.saved_paths)
        assert names == ["2024-01-15-custom.md", "2024-01-15-second-prompt.md"]
        assert all(path.exists() for path in session.state.saved_paths)
        assert (entries_dir / "2024-01-15-custom.md").read_text().count("tool: Cursor") == 1

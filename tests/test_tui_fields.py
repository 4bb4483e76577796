"""
Unit tests for the capture form's editable fields.
"""

from crumb.tui.events import KeyPress
from crumb.tui.fields import TagInput, TextField, ToolSelector


def type_into(field, text: str):
    for character in text:
        field = field.handle_key(KeyPress.char(character))
    return field


class TestTextField:
    """Test the multi-line text field."""

    def test_typing_and_newline(self):
        """Test inserting characters and Enter."""
        field = type_into(TextField(), "ab")
        field = field.handle_key(KeyPress("enter"))
        field = type_into(field, "c")

        assert field.value == "ab\nc"
        assert field.cursor_position() == (1, 1)

    def test_char_limit(self):
        """Test that input beyond the limit is dropped."""
        field = TextField(char_limit=5).paste("abcdefgh")

        assert field.value == "abcde"
        assert field.handle_key(KeyPress.char("x")).value == "abcde"

    def test_backspace_and_delete(self):
        """Test deleting around the cursor."""
        field = type_into(TextField(), "abc").move_to(1)

        assert field.handle_key(KeyPress("backspace")).value == "bc"
        assert field.handle_key(KeyPress("delete")).value == "ac"
        assert TextField().handle_key(KeyPress("backspace")).value == ""

    def test_insert_in_middle(self):
        """Test inserting at a moved cursor."""
        field = type_into(TextField(), "ac").handle_key(KeyPress("left"))
        assert type_into(field, "b").value == "abc"

    def test_vertical_movement_clamps_column(self):
        """Test moving up into a shorter line."""
        field = TextField().paste("ab\nlonger line")
        field = field.handle_key(KeyPress("up"))

        assert field.cursor_position() == (0, 2)
        assert field.handle_key(KeyPress("up")).cursor == 0

    def test_home_end(self):
        """Test jumping to line start and end."""
        field = TextField().paste("one\ntwo")

        assert field.handle_key(KeyPress("home")).cursor_position() == (1, 0)
        assert field.move_to(0).handle_key(KeyPress("end")).cursor_position() == (0, 3)

    def test_paste_normalizes_newlines(self):
        """Test that CRLF and CR become LF."""
        assert TextField().paste("a\r\nb\rc").value == "a\nb\nc"

    def test_reset_keeps_settings(self):
        """Test that reset clears text but keeps limit and placeholder."""
        field = TextField(char_limit=9, placeholder="type").paste("hello").reset()

        assert (field.value, field.cursor) == ("", 0)
        assert (field.char_limit, field.placeholder) == (9, "type")


class TestToolSelector:
    """Test the tool dropdown."""

    def test_preselect(self):
        """Test that the requested tool is selected."""
        selector = ToolSelector.create(["Claude Code", "Cursor", "Aider"], "Cursor")
        assert selector.selected == "Cursor"

    def test_unknown_tool_appended(self):
        """Test that an unknown tool is added and selected."""
        selector = ToolSelector.create(["Claude Code", "Cursor"], "Zed AI")

        assert selector.options == ("Claude Code", "Cursor", "Zed AI")
        assert selector.selected == "Zed AI"

    def test_arrows_wrap(self):
        """Test that moving past either end wraps."""
        selector = ToolSelector.create(["A", "B", "C"], "A")

        assert selector.handle_key(KeyPress("up")).selected == "C"
        assert selector.handle_key(KeyPress("down")).selected == "B"
        assert selector.handle_key(KeyPress("end")).handle_key(KeyPress("down")).selected == "A"

    def test_jump_to_letter(self):
        """Test typing a letter jumps to the next matching tool."""
        selector = ToolSelector.create(["Claude Code", "Cursor", "Aider", "ChatGPT"], "Claude Code")

        selector = selector.handle_key(KeyPress.char("c"))
        assert selector.selected == "Cursor"
        selector = selector.handle_key(KeyPress.char("c"))
        assert selector.selected == "ChatGPT"
        assert selector.handle_key(KeyPress.char("z")).selected == "ChatGPT"


class TestTagInput:
    """Test the tag token input."""

    def test_comma_and_enter_commit(self):
        """Test both commit keys."""
        tags = type_into(TagInput(), "debugging,design")
        tags = tags.handle_key(KeyPress("enter"))

        assert tags.tags == ("debugging", "design")
        assert tags.text == ""

    def test_duplicates_and_blanks_ignored(self):
        """Test that repeated or empty tags are not added."""
        tags = type_into(TagInput(), "x,x, ,")
        assert tags.tags == ("x",)

    def test_backspace_removes_last_tag_when_empty(self):
        """Test Backspace on empty text."""
        tags = type_into(TagInput(), "a,b,c")

        tags = tags.handle_key(KeyPress("backspace"))
        assert (tags.tags, tags.text) == (("a", "b"), "")

        tags = tags.handle_key(KeyPress("backspace"))
        assert tags.tags == ("a",)

    def test_suggestion_matching(self):
        """Test prefix matching that skips tags already used."""
        tags = TagInput(tags=("debugging",), suggestions=("debugging", "design", "docs"))
        tags = type_into(tags, "De")

        assert tags.matches() == ["design"]
        assert tags.handle_key(KeyPress("right")).text == "design"

    def test_right_without_text_does_nothing(self):
        """Test that Right needs some typed text first."""
        tags = TagInput(suggestions=("design",))
        assert tags.handle_key(KeyPress("right")) == tags

    def test_all_tags_includes_pending_text(self):
        """Test that uncommitted text counts as a tag when saving."""
        tags = type_into(TagInput(), "a,pending")
        assert tags.all_tags() == ["a", "pending"]

    def test_paste_splits(self):
        """Test pasting a comma or newline separated list."""
        tags = TagInput().paste("one, two\nthree")

        assert tags.tags == ("one", "two")
        assert tags.text == "three"

    def test_reset_replaces_suggestions(self):
        """Test clearing tags with fresh suggestions."""
        tags = type_into(TagInput(suggestions=("old",)), "x,")

        assert tags.reset().suggestions == ("old",)
        assert tags.reset(("new",)) == TagInput(suggestions=("new",))

"""
Editable fields of the capture form.

Each field is an immutable value: editing returns a new instance, so
the form reducer stays a pure function of (state, event).
"""

from dataclasses import dataclass, replace

from crumb.tui.events import KeyPress

PROMPT_CHAR_LIMIT = 10000
OUTPUT_CHAR_LIMIT = 50000


@dataclass(frozen=True)
class TextField:
    """
    Multi-line text with a cursor.

    The cursor is a flat offset into ``value`` (0 to ``len(value)``);
    rows and columns are derived from it when needed.
    """

    value: str = ""
    cursor: int = 0
    char_limit: int = PROMPT_CHAR_LIMIT
    placeholder: str = ""

    @property
    def lines(self) -> list[str]:
        return self.value.split("\n")

    def cursor_position(self) -> tuple[int, int]:
        """Return the cursor as ``(row, column)``."""
        before = self.value[: self.cursor]
        row = before.count("\n")
        column = len(before) - (before.rfind("\n") + 1)
        return row, column

    def _offset(self, row: int, column: int) -> int:
        lines = self.lines
        row = max(0, min(row, len(lines) - 1))
        column = max(0, min(column, len(lines[row])))
        return sum(len(line) + 1 for line in lines[:row]) + column

    def insert(self, text: str) -> "TextField":
        """Insert text at the cursor, clipped to the character limit."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        room = self.char_limit - len(self.value)
        if room <= 0 or not text:
            return self
        text = text[:room]
        value = self.value[: self.cursor] + text + self.value[self.cursor :]
        return replace(self, value=value, cursor=self.cursor + len(text))

    def backspace(self) -> "TextField":
        if self.cursor == 0:
            return self
        value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        return replace(self, value=value, cursor=self.cursor - 1)

    def delete(self) -> "TextField":
        if self.cursor >= len(self.value):
            return self
        value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
        return replace(self, value=value)

    def move_to(self, cursor: int) -> "TextField":
        return replace(self, cursor=max(0, min(cursor, len(self.value))))

    def move_vertical(self, delta: int) -> "TextField":
        row, column = self.cursor_position()
        target = row + delta
        if target < 0:
            return self.move_to(0)
        if target >= len(self.lines):
            return self.move_to(len(self.value))
        return self.move_to(self._offset(target, column))

    def line_start(self) -> "TextField":
        row, _ = self.cursor_position()
        return self.move_to(self._offset(row, 0))

    def line_end(self) -> "TextField":
        row, _ = self.cursor_position()
        return self.move_to(self._offset(row, len(self.lines[row])))

    def reset(self) -> "TextField":
        return replace(self, value="", cursor=0)

    def handle_key(self, key: KeyPress) -> "TextField":
        """Apply an editing key; unknown keys leave the field unchanged."""
        if key.character is not None:
            return self.insert(key.character)
        if key.key == "enter":
            return self.insert("\n")
        if key.key == "backspace":
            return self.backspace()
        if key.key == "delete":
            return self.delete()
        if key.key == "left":
            return self.move_to(self.cursor - 1)
        if key.key == "right":
            return self.move_to(self.cursor + 1)
        if key.key == "up":
            return self.move_vertical(-1)
        if key.key == "down":
            return self.move_vertical(1)
        if key.key == "home":
            return self.line_start()
        if key.key == "end":
            return self.line_end()
        return self

    def paste(self, text: str) -> "TextField":
        return self.insert(text)


@dataclass(frozen=True)
class ToolSelector:
    """Dropdown of tool names with one selected entry."""

    options: tuple[str, ...]
    index: int = 0

    @classmethod
    def create(cls, tools: list[str], selected: str) -> "ToolSelector":
        """
        Build a selector with ``selected`` pre-selected.

        A tool that is not in the known list (e.g. from ``--tool``) is
        appended so it can still be chosen.
        """
        options = list(tools)
        if selected and selected not in options:
            options.append(selected)
        if not options:
            options = [selected or ""]
        index = options.index(selected) if selected in options else 0
        return cls(options=tuple(options), index=index)

    @property
    def selected(self) -> str:
        return self.options[self.index]

    def move(self, delta: int) -> "ToolSelector":
        return replace(self, index=(self.index + delta) % len(self.options))

    def jump_to_letter(self, letter: str) -> "ToolSelector":
        """Select the next option starting with ``letter``, wrapping around."""
        count = len(self.options)
        for step in range(1, count + 1):
            candidate = (self.index + step) % count
            if self.options[candidate][:1].lower() == letter.lower():
                return replace(self, index=candidate)
        return self

    def handle_key(self, key: KeyPress) -> "ToolSelector":
        if key.key in ("up", "left"):
            return self.move(-1)
        if key.key in ("down", "right"):
            return self.move(1)
        if key.key == "home":
            return replace(self, index=0)
        if key.key == "end":
            return replace(self, index=len(self.options) - 1)
        if key.character is not None and key.character.strip():
            return self.jump_to_letter(key.character)
        return self


@dataclass(frozen=True)
class TagInput:
    """
    Token input for tags.

    Typing builds the pending ``text``; Enter or a comma turns it into a
    tag, Backspace on empty text removes the last tag, and Right accepts
    the first matching suggestion.
    """

    tags: tuple[str, ...] = ()
    text: str = ""
    suggestions: tuple[str, ...] = ()

    def matches(self) -> list[str]:
        """Suggestions not yet used whose name starts with the pending text."""
        prefix = self.text.strip().lower()
        return [
            tag
            for tag in self.suggestions
            if tag not in self.tags and tag.lower().startswith(prefix)
        ]

    def commit(self) -> "TagInput":
        tag = " ".join(self.text.split())
        if not tag or tag in self.tags:
            return replace(self, text="")
        return replace(self, tags=(*self.tags, tag), text="")

    def all_tags(self) -> list[str]:
        """Committed tags plus the pending text, if any."""
        return list(self.commit().tags)

    def accept_suggestion(self) -> "TagInput":
        matches = self.matches()
        if not self.text or not matches:
            return self
        return replace(self, text=matches[0])

    def reset(self, suggestions: tuple[str, ...] | None = None) -> "TagInput":
        return TagInput(suggestions=self.suggestions if suggestions is None else suggestions)

    def handle_key(self, key: KeyPress) -> "TagInput":
        if key.character == ",":
            return self.commit()
        if key.character is not None:
            return replace(self, text=self.text + key.character)
        if key.key == "enter":
            return self.commit()
        if key.key == "backspace":
            if self.text:
                return replace(self, text=self.text[:-1])
            return replace(self, tags=self.tags[:-1])
        if key.key == "right":
            return self.accept_suggestion()
        return self

    def paste(self, text: str) -> "TagInput":
        field = self
        for character in text:
            if character in "\r\n,":
                field = field.commit()
            else:
                field = replace(field, text=field.text + character)
        return field

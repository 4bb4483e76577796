"""
Entry data models for crumb.

An Entry is one captured prompt. It is written exactly once, as a
markdown file with front matter, and only read back for indexing and
tag statistics.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from crumb.core.entries.front_matter import dump_front_matter
from crumb.core.entries.slug import TITLE_MAX_LENGTH, generate_filename

UNKNOWN_AUTHOR = "Unknown"


class EntryDraft(BaseModel):
    """
    What the capture form hands over when the user saves.

    The draft carries only what the user typed; the title, timestamp, and
    author are resolved at save time.
    """

    prompt: str
    output: str = ""
    tool: str = ""
    tags: list[str] = Field(default_factory=list)
    title: str | None = Field(
        default=None,
        description="Explicit title; derived from the prompt when None",
    )


class Entry(BaseModel):
    """
    A single captured prompt.

    Example:
        >>> entry = Entry(
        ...     title="Fix the bug",
        ...     date=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        ...     author="Ada",
        ...     tool="Claude Code",
        ...     prompt="Fix the bug",
        ... )
        >>> entry.filename
        '2024-01-15-fix-the-bug.md'
    """

    title: str = Field(..., max_length=TITLE_MAX_LENGTH)
    date: datetime = Field(..., description="Capture time, written as RFC3339")
    author: str = Field(default=UNKNOWN_AUTHOR)
    tool: str = Field(default="")
    tags: list[str] = Field(default_factory=list)
    prompt: str
    output: str = ""

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v: str) -> str:
        """Reject prompts that are empty after trimming."""
        if not v.strip():
            raise ValueError("prompt must not be empty")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def filename(self) -> str:
        """The generated ``YYYY-MM-DD-<slug>.md`` filename."""
        return generate_filename(self.title, self.date)

    def to_front_matter_dict(self) -> dict[str, str | list[str]]:
        """
        Convert the entry to the ordered header mapping.

        Tags are included only when present.
        """
        fields: dict[str, str | list[str]] = {
            "title": self.title,
            "date": format_timestamp(self.date),
            "author": self.author,
            "tool": self.tool,
        }
        if self.tags:
            fields["tags"] = list(self.tags)
        return fields

    def to_markdown(self) -> str:
        """
        Render the full entry file.

        The Output section is omitted entirely when the output is blank.
        """
        body = f"## Prompt\n\n{self.prompt}"
        if self.output.strip():
            body += f"\n\n## Output\n\n{self.output}"
        return dump_front_matter(self.to_front_matter_dict(), body)


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as RFC3339 with second precision."""
    return value.isoformat(timespec="seconds")


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 / RFC3339 timestamp from front matter.

    A trailing ``Z`` is accepted and naive values are treated as UTC.

    Returns:
        Timezone-aware datetime, or None if the value is missing or invalid
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

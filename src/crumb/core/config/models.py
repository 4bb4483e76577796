"""
Configuration data models for crumb.

These models define the structure of ``~/.config/crumb/config.yaml``,
with validation and type safety via Pydantic.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

DEFAULT_TOOL = "Claude Code"
DEFAULT_OUTPUT_DIR = "crumbs"

BUILTIN_TOOLS: tuple[str, ...] = (
    "Claude Code",
    "Cursor",
    "Kiro",
    "ChatGPT",
    "Copilot",
    "Warp AI",
    "Windsurf",
    "Aider",
    "Gemini",
    "Perplexity",
)


class CrumbConfig(BaseModel):
    """
    Top-level crumb configuration.

    Loaded once at startup and never changed for the life of the process;
    ``crumb config`` edits the file and the next invocation re-reads it.

    Example:
        >>> config = CrumbConfig(custom_tools=["Zed AI"])
        >>> config.default_tool
        'Claude Code'
        >>> get_all_tools(config)[-1]
        'Zed AI'
    """

    default_tool: str = Field(
        default=DEFAULT_TOOL,
        description="Tool pre-selected in the capture form",
    )
    custom_tools: list[str] = Field(
        default_factory=list,
        description="Tools offered after the built-in ones",
    )
    favorite_tags: list[str] = Field(
        default_factory=list,
        description="Tags always suggested first in the tag input",
    )
    output_dir: str = Field(
        default=DEFAULT_OUTPUT_DIR,
        description="Entry directory, relative to the working directory or absolute",
    )

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )

    @field_validator("default_tool", "output_dir", mode="before")
    @classmethod
    def default_blank_strings(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat a missing or blank scalar as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("custom_tools", "favorite_tags", mode="before")
    @classmethod
    def default_null_lists(cls, v: Any) -> Any:
        """Treat ``key:`` with no items as an empty list."""
        if v is None:
            return []
        return v


def get_all_tools(config: CrumbConfig | None) -> list[str]:
    """
    Get the built-in tools followed by the configured custom tools.

    Args:
        config: Loaded config, or None for built-ins only

    Returns:
        Tool names in dropdown order
    """
    tools = list(BUILTIN_TOOLS)
    if config is not None:
        tools.extend(config.custom_tools)
    return tools

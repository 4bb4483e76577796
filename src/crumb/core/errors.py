"""
Typed exceptions for crumb.

Every error the application raises on purpose derives from CrumbError so
the CLI layer can catch the whole family in one place and map it to an
exit code.
"""

from pathlib import Path


class CrumbError(Exception):
    """Base exception for crumb errors."""


class ConfigError(CrumbError):
    """Config file could not be read, parsed, or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config at {path}: {reason}")


class PromptRequiredError(CrumbError):
    """The prompt field was empty after trimming whitespace."""

    def __init__(self) -> None:
        super().__init__("Prompt is required")


class PersistenceError(CrumbError):
    """Writing to or listing the output directory failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)


class DirectoryMissingError(CrumbError):
    """The output directory does not exist yet."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Prompts directory does not exist: {path}")

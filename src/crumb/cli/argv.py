"""
Argv preprocessor for forgiving CLI flag and command handling.

Normalizes sys.argv before Typer parses it, handling common user patterns:
- ``crumb --version`` / ``crumb -v`` → ``crumb version``
- ``crumb help readme`` → ``crumb readme --help``
- ``crumb notes.md`` → ``crumb show notes.md``
- ``crumb readme --debug`` → ``crumb --debug readme``
"""

_GLOBAL_FLAGS = {"--debug", "--stay"}

# Top-level options that consume the following token as their value
_VALUE_OPTIONS = {"-t", "--tool", "--title"}

_COMMANDS = {"init", "readme", "config", "show", "version"}


def preprocess_argv(argv: list[str]) -> list[str]:
    """Normalize CLI arguments for Typer compatibility.

    Applied rules (in order):
    1. ``--version`` / ``-v`` as first arg → ``version`` subcommand
    2. ``help`` pseudo-command → ``--help`` appended to subcommands
    3. A markdown file in command position → ``show <file>``
    4. Global flags hoisted before the subcommand
    """
    if not argv:
        return argv

    # Rule 1: --version / -v at top level → version subcommand
    if argv[0] in ("--version", "-v"):
        return ["version"]

    # Rule 2: help pseudo-command → --help
    if argv[0] == "help":
        return _rewrite_help(argv[1:])

    # Rule 3: bare markdown path → show subcommand
    argv = _rewrite_markdown_path(argv)

    # Rule 4: hoist global flags
    return _hoist_global_flags(argv)


def _rewrite_help(rest: list[str]) -> list[str]:
    """Rewrite ``help [subcmd]`` into ``[subcmd] --help``."""
    for token in rest:
        if token.startswith("-") or token == "help":
            continue
        return [token, "--help"]
    return ["--help"]


def _rewrite_markdown_path(argv: list[str]) -> list[str]:
    """Insert ``show`` before the first positional token if it is a ``.md`` path."""
    skip_next = False
    for index, token in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if token in _VALUE_OPTIONS:
            skip_next = True
            continue
        if token.startswith("-"):
            continue
        if token not in _COMMANDS and token.lower().endswith(".md"):
            return [*argv[:index], "show", *argv[index:]]
        return argv
    return argv


def _hoist_global_flags(argv: list[str]) -> list[str]:
    """Move global flags (e.g. ``--debug``) before the subcommand."""
    hoisted: list[str] = []
    rest: list[str] = []
    seen: set[str] = set()
    for token in argv:
        if token in _GLOBAL_FLAGS:
            if token not in seen:
                hoisted.append(token)
                seen.add(token)
            # Drop duplicates entirely
        else:
            rest.append(token)
    return [*hoisted, *rest]

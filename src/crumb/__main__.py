"""Allow ``python -m crumb``."""

from crumb.cli import cli_main

if __name__ == "__main__":
    cli_main()

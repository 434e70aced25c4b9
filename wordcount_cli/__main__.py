"""Allow running the CLI with ``python -m wordcount_cli``."""

from .main import cli_entry_point

cli_entry_point()

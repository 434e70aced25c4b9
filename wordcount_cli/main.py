"""Main entry point for the word count CLI."""

import logging
import sys
from typing import List

from .cli import parse_cli_args
from .counting import count_input
from .input import read_input
from .logging_config import setup_logging
from .output import format_human_readable, format_json

logger = logging.getLogger(__name__)


def main(args: List[str] = None) -> int:
    """Main entry point for the word count CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=input could not be read)

    Raises:
        SystemExit: With status 2 on invalid arguments
    """
    if args is None:
        args = sys.argv[1:]

    config = parse_cli_args(args)
    setup_logging(config.verbose)
    logger.debug(
        "Counting %s units from %s", config.mode.value, config.input_source.value
    )

    try:
        input_data = read_input(config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = count_input(input_data, config.mode)

    if config.json_output:
        output = format_json(result)
    else:
        output = format_human_readable(result)

    if output:
        print(output)
    return 0


def cli_entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry_point()

"""CLI argument parsing and configuration for word count."""

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .models import CountMode


class InputSource(Enum):
    """Source of input data."""

    STDIN = "stdin"
    FILE = "file"


@dataclass
class CLIConfig:
    """Configuration parsed from CLI arguments."""

    mode: CountMode
    input_source: InputSource
    input_path: Optional[Path]
    json_output: bool
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_mode()
        self._validate_input()

    def _validate_mode(self) -> None:
        """Validate the counting mode.

        The parser already resolves names through CountMode.from_name, so this
        only rejects configs built directly with a raw value.
        """
        if not isinstance(self.mode, CountMode):
            raise ValueError(
                f"Unknown count mode: {self.mode}. "
                f"Valid modes: {', '.join(CountMode.choices())}"
            )

    def _validate_input(self) -> None:
        """Validate that the input path matches the input source."""
        if self.input_source == InputSource.FILE and self.input_path is None:
            raise ValueError("A file path is required when reading from a file")
        if self.input_source == InputSource.STDIN and self.input_path is not None:
            raise ValueError("A file path cannot be combined with stdin input")


class CLIArgumentParser:
    """Handles CLI argument parsing and validation."""

    def __init__(self) -> None:
        """Initialize the argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = argparse.ArgumentParser(
            prog="wordcount",
            description="Count the frequency of characters, words or lines in text",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  wordcount notes.txt
  echo "aa bb aa" | wordcount
  wordcount --mode char notes.txt
  wordcount --mode line access.log --json
            """.strip(),
        )

        parser.add_argument(
            "path",
            nargs="?",
            type=Path,
            metavar="PATH",
            help="Text file to count (reads stdin when omitted)",
        )

        parser.add_argument(
            "-m",
            "--mode",
            default=CountMode.default().value,
            metavar="MODE",
            help=(
                "Unit to count: "
                f"{', '.join(CountMode.choices())} "
                f"(default: {CountMode.default().value})"
            ),
        )

        # Output format
        parser.add_argument(
            "--json", action="store_true", help="Output results in JSON format"
        )

        parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> CLIConfig:
        """Parse command line arguments into CLIConfig.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Parsed and validated configuration

        Raises:
            SystemExit: On argument parsing errors or validation failures
        """
        if args is None:
            args = sys.argv[1:]

        try:
            parsed_args = self.parser.parse_args(args)
            return self._build_config(parsed_args)
        except ValueError as e:
            self.parser.error(str(e))

    def _build_config(self, args: argparse.Namespace) -> CLIConfig:
        """Build CLIConfig from parsed arguments."""
        if args.path is not None:
            input_source = InputSource.FILE
            input_path = args.path
        else:
            input_source = InputSource.STDIN
            input_path = None

        return CLIConfig(
            mode=CountMode.from_name(args.mode),
            input_source=input_source,
            input_path=input_path,
            json_output=args.json,
            verbose=args.verbose,
        )


def parse_cli_args(args: Optional[List[str]] = None) -> CLIConfig:
    """Parse CLI arguments and return configuration.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed and validated configuration

    Raises:
        SystemExit: On argument parsing errors or validation failures
    """
    parser = CLIArgumentParser()
    return parser.parse_args(args)

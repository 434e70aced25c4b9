"""Input handling for the word count CLI."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .cli import CLIConfig, InputSource

logger = logging.getLogger(__name__)


@dataclass
class InputData:
    """Container for input text with metadata."""

    content: str
    source: str  # for error reporting


class InputHandler:
    """Handles reading input from a file or stdin."""

    def read_input(self, config: CLIConfig) -> InputData:
        """Read input based on configuration.

        Args:
            config: CLI configuration specifying input source

        Returns:
            InputData containing the text to count

        Raises:
            FileNotFoundError: If specified file doesn't exist
            IsADirectoryError: If specified path is a directory
            PermissionError: If file cannot be read
            UnicodeDecodeError: If input cannot be decoded as UTF-8
        """
        if config.input_source == InputSource.FILE:
            return self._read_text_file(config.input_path)
        else:  # InputSource.STDIN
            return self._read_stdin()

    def _read_stdin(self) -> InputData:
        """Read UTF-8 text from stdin without translating line terminators.

        Returns:
            InputData with content from stdin

        Raises:
            UnicodeDecodeError: If stdin cannot be decoded as UTF-8
        """
        # Decode the raw bytes so "\r\n" and "\r" reach the counter untranslated
        stream = getattr(sys.stdin, "buffer", None)
        try:
            if stream is not None:
                content = stream.read().decode("utf-8")
            else:
                content = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise UnicodeDecodeError(
                e.encoding,
                e.object,
                e.start,
                e.end,
                f"Failed to decode stdin as UTF-8: {e.reason}",
            )
        logger.debug("Read %d characters from stdin", len(content))
        return InputData(content=content, source="stdin")

    def _read_text_file(self, file_path: Path) -> InputData:
        """Read UTF-8 text from a file without translating line terminators.

        Args:
            file_path: Path to the text file

        Returns:
            InputData with file content

        Raises:
            FileNotFoundError: If file doesn't exist
            IsADirectoryError: If path is a directory
            PermissionError: If file cannot be read
            UnicodeDecodeError: If file cannot be decoded as UTF-8
        """
        try:
            with file_path.open(encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {file_path}")
        except IsADirectoryError:
            raise IsADirectoryError(f"Is a directory, not a file: {file_path}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading file: {file_path}")
        except UnicodeDecodeError as e:
            raise UnicodeDecodeError(
                e.encoding,
                e.object,
                e.start,
                e.end,
                f"Failed to decode file {file_path} as UTF-8: {e.reason}",
            )
        logger.debug("Read %d characters from %s", len(content), file_path)
        return InputData(content=content, source=str(file_path))


def read_input(config: CLIConfig) -> InputData:
    """Read input based on configuration.

    This is a convenience function that creates an InputHandler instance
    and calls the read_input method.
    """
    handler = InputHandler()
    return handler.read_input(config)

"""Counting modes and table types for the word count CLI."""

from enum import Enum
from typing import Dict, List

FrequencyTable = Dict[str, int]


class CountMode(Enum):
    """Unit of counting applied to the input text."""

    CHARACTER = "char"
    WORD = "word"
    LINE = "line"

    @classmethod
    def default(cls) -> "CountMode":
        """Return the mode used when none is requested."""
        return cls.WORD

    @classmethod
    def from_name(cls, name: str) -> "CountMode":
        """Look up a mode by value or member name.

        Args:
            name: Mode name such as "char", "character" or "WORD"

        Returns:
            Matching CountMode

        Raises:
            ValueError: If name does not match any mode
        """
        key = name.strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(
            f"Unknown count mode: {name}. Valid modes: {', '.join(cls.choices())}"
        )

    @classmethod
    def choices(cls) -> List[str]:
        """Get the mode values accepted on the command line."""
        return [mode.value for mode in cls]

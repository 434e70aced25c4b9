"""Frequency counting of characters, words and lines."""

import logging
import re
from dataclasses import dataclass, field
from typing import List

from .input import InputData
from .models import CountMode, FrequencyTable

logger = logging.getLogger(__name__)

LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")


@dataclass
class CountingResult:
    """Result of a frequency counting operation."""

    mode: CountMode
    table: FrequencyTable = field(default_factory=dict)
    source: str = "input"

    @property
    def total_units(self) -> int:
        """Number of units the input was split into."""
        return sum(self.table.values())

    @property
    def distinct_units(self) -> int:
        """Number of different units seen."""
        return len(self.table)


class FrequencyCounter:
    """Splits text into units and tallies how often each one occurs."""

    def split_units(self, text: str, mode: CountMode) -> List[str]:
        """Split text into the units counted under a mode.

        Characters include whitespace and line terminators. Words are the
        non-empty tokens between runs of whitespace. Lines are the segments
        between "\\n", "\\r\\n" or "\\r" terminators, so blank lines count as ""
        while a single trailing terminator does not add an extra line. Other
        separators such as form feeds stay inside their line.

        Args:
            text: Text to split
            mode: Counting mode selecting the split policy

        Returns:
            Units in the order they appear in text

        Raises:
            TypeError: If mode is not a CountMode
        """
        if mode is CountMode.CHARACTER:
            return list(text)
        elif mode is CountMode.WORD:
            return text.split()
        elif mode is CountMode.LINE:
            lines = LINE_TERMINATOR.split(text)
            if lines[-1] == "":
                lines.pop()
            return lines
        raise TypeError(f"Unsupported count mode: {mode!r}")

    def count(self, text: str, mode: CountMode) -> FrequencyTable:
        """Count how often each unit occurs in text.

        Args:
            text: Text to count, possibly empty
            mode: Counting mode selecting the unit

        Returns:
            New mapping from unit to occurrence count
        """
        freqs: FrequencyTable = {}
        for unit in self.split_units(text, mode):
            freqs[unit] = freqs.get(unit, 0) + 1
        return freqs

    def count_input(self, input_data: InputData, mode: CountMode) -> CountingResult:
        """Count the content of an input and keep track of where it came from.

        Args:
            input_data: Input data to count
            mode: Counting mode selecting the unit

        Returns:
            CountingResult with the frequency table
        """
        table = self.count(input_data.content, mode)
        result = CountingResult(mode=mode, table=table, source=input_data.source)
        logger.debug(
            "Counted %d %s units (%d distinct) from %s",
            result.total_units,
            mode.value,
            result.distinct_units,
            input_data.source,
        )
        return result


def split_units(text: str, mode: CountMode) -> List[str]:
    """Split text into the units counted under a mode.

    This is a convenience function that creates a FrequencyCounter instance
    and calls the split_units method.
    """
    return FrequencyCounter().split_units(text, mode)


def count(text: str, mode: CountMode = CountMode.WORD) -> FrequencyTable:
    """Count how often each unit occurs in text.

    This is a convenience function that creates a FrequencyCounter instance
    and calls the count method.

    Args:
        text: Text to count, possibly empty
        mode: Counting mode selecting the unit (defaults to words)

    Returns:
        New mapping from unit to occurrence count
    """
    counter = FrequencyCounter()
    return counter.count(text, mode)


def count_input(input_data: InputData, mode: CountMode) -> CountingResult:
    """Count the content of an input.

    This is a convenience function that creates a FrequencyCounter instance
    and calls the count_input method.
    """
    counter = FrequencyCounter()
    return counter.count_input(input_data, mode)

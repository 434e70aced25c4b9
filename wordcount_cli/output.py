"""Output formatting for word count CLI."""

import json
import unicodedata
from typing import List, Tuple

from .counting import CountingResult


class OutputFormatter:
    """Handles output formatting for both human-readable and JSON formats."""

    def format_human_readable(self, result: CountingResult) -> str:
        """Generate space-separated table output.

        Rows are ordered by descending count; equal counts keep the order in
        which the units were first seen.

        Args:
            result: Result of the counting operation

        Returns:
            Human-readable table as string
        """
        if not result.table:
            return ""

        headers = ["unit", "count"]
        rows = [
            [self._display_unit(unit), str(freq)]
            for unit, freq in self._ordered_items(result)
        ]

        # Calculate column widths
        col_widths = []
        for i, header in enumerate(headers):
            max_width = self._display_width(header)
            for row in rows:
                max_width = max(max_width, self._display_width(row[i]))
            col_widths.append(max_width)

        lines = []
        lines.append(
            "  ".join(
                self._pad(header, col_widths[i]) for i, header in enumerate(headers)
            )
        )
        for row in rows:
            # Counts are right-aligned, and the last column carries no padding
            lines.append(
                f"{self._pad(row[0], col_widths[0])}  {row[1].rjust(col_widths[1])}"
            )

        return "\n".join(lines)

    def format_json(self, result: CountingResult) -> str:
        """Generate JSON object output.

        Args:
            result: Result of the counting operation

        Returns:
            JSON string with proper schema
        """
        json_result = {
            "mode": result.mode.value,
            "source": result.source,
            "total_units": result.total_units,
            "distinct_units": result.distinct_units,
            "counts": dict(result.table),
        }

        return json.dumps(json_result, indent=2, ensure_ascii=False)

    def _ordered_items(self, result: CountingResult) -> List[Tuple[str, int]]:
        """Order table entries by descending count."""
        return sorted(result.table.items(), key=lambda item: -item[1])

    def _display_unit(self, unit: str) -> str:
        """Make a unit visible in a table cell.

        Units that are empty, carry surrounding whitespace or contain
        non-printable characters are shown as quoted Python literals.

        Args:
            unit: Unit to display

        Returns:
            Text to place in the unit column
        """
        if not unit or not unit.isprintable() or unit != unit.strip():
            return repr(unit)
        return unit

    def _display_width(self, text: str) -> int:
        """Count terminal columns, with wide East Asian characters taking two."""
        width = 0
        for ch in text:
            if unicodedata.combining(ch):
                continue
            width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        return width

    def _pad(self, text: str, width: int) -> str:
        """Left-justify text to a display width."""
        return text + " " * (width - self._display_width(text))


def format_human_readable(result: CountingResult) -> str:
    """Generate space-separated table output.

    This is a convenience function that creates an OutputFormatter instance
    and calls the format_human_readable method.

    Args:
        result: Result of the counting operation

    Returns:
        Human-readable table as string
    """
    formatter = OutputFormatter()
    return formatter.format_human_readable(result)


def format_json(result: CountingResult) -> str:
    """Generate JSON object output.

    This is a convenience function that creates an OutputFormatter instance
    and calls the format_json method.

    Args:
        result: Result of the counting operation

    Returns:
        JSON string with proper schema
    """
    formatter = OutputFormatter()
    return formatter.format_json(result)

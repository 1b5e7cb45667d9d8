"""
Layout planning: how many month columns fit on one printed line.
"""

import shutil
from dataclasses import dataclass

from git_heatmap.history_calculator import Month, Year

# Six week-columns per month, followed by a one-character delimiter
MONTH_WIDTH = 6
DELIMITER_WIDTH = 1
# Weekday label margin, e.g. "Sun: "
LABEL_WIDTH = 5
MIN_OFFSET = LABEL_WIDTH + 1
DEFAULT_WIDTH = 80
MONTHS_IN_YEAR = 12


@dataclass(frozen=True)
class LayoutPlan:
    """Months per printed line and the month columns of each line."""

    months_per_line: int
    lines: tuple[tuple[Month, ...], ...]

    @property
    def line_width(self) -> int:
        return LABEL_WIDTH + self.months_per_line * (MONTH_WIDTH + DELIMITER_WIDTH)

    @property
    def drawn_width(self) -> int:
        """Width of the widest line actually drawn."""
        widest = max((len(line) for line in self.lines), default=0)
        return LABEL_WIDTH + widest * (MONTH_WIDTH + DELIMITER_WIDTH)


def terminal_width(fallback: int = DEFAULT_WIDTH) -> int:
    """Current terminal width in columns, or fallback when it is unknown."""
    return shutil.get_terminal_size((fallback, 24)).columns


def months_per_line(width: int) -> int:
    """
    Number of month columns that fit exactly in the given width.

    Searches upward from the minimum offset for an offset that leaves a
    multiple of the column width. At most one column width of offsets is
    tried; if none fits (the terminal is narrower than a single month
    column) one month per line is used. A line never holds more than a
    year of months.

    Args:
        width: Available terminal width in columns

    Returns:
        Months per line, always >= 1
    """
    column = MONTH_WIDTH + DELIMITER_WIDTH
    for offset in range(MIN_OFFSET, MIN_OFFSET + column):
        span = width + 1 - offset
        if span < column:
            break
        if span % column == 0:
            return min(span // column, MONTHS_IN_YEAR)
    return 1


def plan(year: Year, width: int) -> LayoutPlan:
    """
    Group a year's present months into printed lines.

    Lines are built from consecutive calendar month slots starting at the
    year's first present month, so a year that begins in June packs
    June onward. Absent months take no column.

    Args:
        year: Year to lay out
        width: Available terminal width in columns

    Returns:
        LayoutPlan for the year
    """
    per_line = months_per_line(width)
    first = year.first_month

    lines = []
    for line_start in range(first, 13, per_line):
        line = []
        for number in range(line_start, min(line_start + per_line, 13)):
            month = year.month(number)
            if month is not None:
                line.append(month)
        if line:
            lines.append(tuple(line))

    return LayoutPlan(months_per_line=per_line, lines=tuple(lines))

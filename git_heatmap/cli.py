"""
Terminal display functions for git-heatmap.
"""

import logging
from typing import Callable, TextIO

from git_heatmap.history_calculator import CalendarRange, Month, Year
from git_heatmap.intensity import LEGEND_LABELS, LEVEL_COLORS, IntensityLevel, color_for
from git_heatmap.layout import LayoutPlan, MONTH_WIDTH, plan, terminal_width

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"
FG_RESET = "\x1b[39m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
BANNER = "\x1b[30;102m"  # black on light green

SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
NO_DATA_MESSAGE = "No commits were found!"


def _paint(style: str, text: str) -> str:
    return f"{style}{text}{RESET}"


def _background(rgb: tuple[int, int, int], text: str) -> str:
    r, g, b = rgb
    return f"\x1b[48;2;{r};{g};{b}m{text}{RESET}"


def day_number_for(month: Month, weekday: int, week: int) -> int:
    """
    Day-of-month shown at a weekday row and week column of a month.

    Args:
        month: Month being drawn
        weekday: Row index, Sunday = 0 through Saturday = 6
        week: Week column, 1 through 6

    Returns:
        Day number; values outside 1..last_day are blank cells
    """
    return 7 * week - month.first_weekday - 6 + weekday


def format_cell(month: Month, weekday: int, week: int) -> str:
    """Render one day cell: a colored glyph, or a space outside the month."""
    number = day_number_for(month, weekday, week)
    if number < 1 or number > month.last_day:
        return " "

    day = month.day(number)
    glyph = "." if day.commit_count == 0 else "*"
    return _background(color_for(day.commit_count), glyph)


def render_year(year: Year, layout: LayoutPlan, out: TextIO) -> None:
    """
    Render one year as a weekday x month grid.

    Args:
        year: Year to draw
        layout: Line grouping from plan()
        out: Text sink to write to
    """
    print(file=out)
    print(_paint(BANNER, str(year.number).ljust(layout.drawn_width)), file=out)

    for line in layout.lines:
        header = " " * 5
        for month in line:
            header += "  " + _paint(GREEN, month.abbr) + _paint(YELLOW, " |")
        print(header, file=out)

        for weekday, name in enumerate(SHORT_DAY_NAMES):
            row = _paint(BLUE, name) + _paint(YELLOW, ": ")
            for month in line:
                for week in range(1, MONTH_WIDTH + 1):
                    row += format_cell(month, weekday, week)
                row += _paint(YELLOW, "|")
            print(row, file=out)


def render_legend(out: TextIO) -> None:
    """Print the commit count guide, one colored sample per intensity level."""
    print(file=out)
    guide = _paint(BLUE, "commits count guide:")
    for level in IntensityLevel:
        label = RED + LEGEND_LABELS[level] + FG_RESET
        guide += " " + _background(LEVEL_COLORS[level], label) + " "
    print(guide, file=out)


def render_report(
    calendar_range: CalendarRange,
    out: TextIO,
    width_provider: Callable[[], int] = terminal_width,
) -> None:
    """
    Render the full heatmap: every year in order, then the legend.

    Args:
        calendar_range: Aggregated calendar from aggregate()
        out: Text sink to write to
        width_provider: Returns the terminal width; queried once per year
    """
    if calendar_range.is_empty:
        print(NO_DATA_MESSAGE, file=out)
        return

    for year in calendar_range.years:
        width = width_provider()
        layout = plan(year, width)
        logger.debug(
            "Year %d: width %d, %d months per line, %d lines",
            year.number,
            width,
            layout.months_per_line,
            len(layout.lines),
        )
        render_year(year, layout, out)

    render_legend(out)

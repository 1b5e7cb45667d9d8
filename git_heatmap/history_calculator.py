"""
Calendar aggregation for the commit heatmap.

Turns per-day commit observations into a contiguous Year -> Month -> Day
calendar covering every day of every month touched by the observations.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Iterator, Optional


class CalendarError(Exception):
    """Raised when the aggregated calendar is internally inconsistent."""

    pass


@dataclass(frozen=True)
class DayObservation:
    """Number of commits observed on one calendar date."""

    date: date
    commit_count: int

    def __post_init__(self):
        if self.commit_count < 0:
            raise ValueError(
                f"Commit count must be non-negative, got {self.commit_count} "
                f"for {self.date.isoformat()}"
            )


@dataclass(frozen=True)
class Day:
    """A calendar day slot. Days without observations have a count of 0."""

    date: date
    commit_count: int = 0

    @property
    def number(self) -> int:
        return self.date.day


@dataclass(frozen=True)
class Month:
    """One month of day slots, keyed by day-of-month."""

    year: int
    number: int
    days: dict[int, Day] = field(default_factory=dict)

    @property
    def abbr(self) -> str:
        """Three-letter English month name, e.g. 'Jan'."""
        return calendar.month_abbr[self.number]

    @property
    def last_day(self) -> int:
        return calendar.monthrange(self.year, self.number)[1]

    @property
    def first_weekday(self) -> int:
        """Weekday of day 1, with Sunday = 0 through Saturday = 6."""
        return (date(self.year, self.number, 1).weekday() + 1) % 7

    def day(self, number: int) -> Day:
        """
        Look up the slot for a day of this month.

        Raises:
            CalendarError: If the day belongs to the month but has no slot
        """
        if number not in self.days:
            raise CalendarError(
                f"Missing day slot {self.year}-{self.number:02d}-{number:02d}"
            )
        return self.days[number]

    def ordered_days(self) -> list[Day]:
        return [self.days[n] for n in sorted(self.days)]


@dataclass(frozen=True)
class Year:
    """A calendar year holding only the months the range overlaps."""

    number: int
    months_by_number: dict[int, Month] = field(default_factory=dict)

    def months(self) -> list[Month]:
        """Present months in month-number order."""
        return [self.months_by_number[n] for n in sorted(self.months_by_number)]

    def month(self, number: int) -> Optional[Month]:
        return self.months_by_number.get(number)

    @property
    def first_month(self) -> int:
        if not self.months_by_number:
            raise CalendarError(f"Year {self.number} has no months")
        return min(self.months_by_number)


@dataclass(frozen=True)
class CalendarRange:
    """Aggregated calendar, years sorted ascending. Empty when there is no data."""

    years: tuple[Year, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.years

    @property
    def start(self) -> Optional[date]:
        if self.is_empty:
            return None
        return self.years[0].months()[0].ordered_days()[0].date

    @property
    def end(self) -> Optional[date]:
        if self.is_empty:
            return None
        return self.years[-1].months()[-1].ordered_days()[-1].date

    def year(self, number: int) -> Optional[Year]:
        for year in self.years:
            if year.number == number:
                return year
        return None

    def days(self) -> Iterator[Day]:
        """Every day slot in chronological order."""
        for year in self.years:
            for month in year.months():
                yield from month.ordered_days()


def _month_end(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def aggregate(observations: Iterable[DayObservation]) -> CalendarRange:
    """
    Build a calendar from per-day commit observations.

    The range is expanded to whole months: it starts on the first day of
    the month of the earliest observation and ends on the last day of the
    month of the latest one. Every day in between gets a slot, with a
    count of 0 when nothing was observed.

    Args:
        observations: DayObservation items in any order. Counts for
            repeated dates are summed.

    Returns:
        CalendarRange with years sorted ascending, or an empty
        CalendarRange when there are no observations
    """
    commits_by_date: dict[date, int] = {}
    for observation in observations:
        commits_by_date[observation.date] = (
            commits_by_date.get(observation.date, 0) + observation.commit_count
        )

    if not commits_by_date:
        return CalendarRange()

    range_start = min(commits_by_date).replace(day=1)
    range_end = _month_end(max(commits_by_date))

    # Arena of day slots keyed by (year, month, day)
    arena: dict[tuple[int, int, int], Day] = {}
    current = range_start
    while current <= range_end:
        arena[(current.year, current.month, current.day)] = Day(
            date=current, commit_count=commits_by_date.get(current, 0)
        )
        current += timedelta(days=1)

    # Group slots in explicit (year, month, day) order
    grouped: dict[int, dict[int, dict[int, Day]]] = {}
    for year_number, month_number, day_number in sorted(arena):
        month_days = grouped.setdefault(year_number, {}).setdefault(month_number, {})
        month_days[day_number] = arena[(year_number, month_number, day_number)]

    years = []
    for year_number in sorted(grouped):
        months = {
            month_number: Month(year_number, month_number, days)
            for month_number, days in sorted(grouped[year_number].items())
        }
        years.append(Year(year_number, months))

    return CalendarRange(tuple(years))

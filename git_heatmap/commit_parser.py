"""
Parse commit timestamps into per-day observations.
"""

from datetime import date, datetime
from typing import Iterable

from git_heatmap.history_calculator import DayObservation


def parse_commit_times(commit_times: Iterable[datetime]) -> list[DayObservation]:
    """
    Count commits per calendar day.

    Timestamps are bucketed by their own calendar date, so they should
    already be converted to the local time zone.

    Args:
        commit_times: Author timestamps of the commits to count

    Returns:
        One DayObservation per distinct date, sorted by date
    """
    counts: dict[date, int] = {}
    for commit_time in commit_times:
        day = commit_time.date()
        counts[day] = counts.get(day, 0) + 1

    return [DayObservation(day, counts[day]) for day in sorted(counts)]

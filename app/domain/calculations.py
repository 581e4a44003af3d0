"""
Time accounting on finalized entries.

Worked time is always clamped at zero before it is rounded or displayed, so a
break longer than the period itself never shows up as negative hours.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List

from app.domain.models import TimeEntry


def worked_minutes(entry: TimeEntry) -> float:
    """
    Minutes actually worked for an entry.

    Args:
        entry: A time entry

    Returns:
        Elapsed minutes minus break minutes, never below zero.
        Open entries (no end time) count as 0.
    """
    if entry.end_time is None:
        return 0.0
    elapsed = (entry.end_time - entry.start_time).total_seconds() / 60
    return max(0.0, elapsed - entry.break_duration)


def worked_hours(entry: TimeEntry) -> float:
    return worked_minutes(entry) / 60


def total_worked_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum of worked hours over all closed entries"""
    return sum(worked_hours(e) for e in entries if e.end_time is not None)


def group_by_calendar_day(entries: Iterable[TimeEntry]) -> Dict[date, List[TimeEntry]]:
    """
    Partition entries by their `date` field (not by start time).

    Buckets keep the order in which entries were given.
    """
    groups: Dict[date, List[TimeEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.date, []).append(entry)
    return groups


def sort_for_display(entries: Iterable[TimeEntry]) -> List[TimeEntry]:
    """Newest day first; entries of the same day keep insertion order"""
    return sorted(entries, key=lambda e: e.date, reverse=True)


def roll_over_end_time(start: datetime, end: datetime) -> datetime:
    """Move an end time to the following day(s) until it is not before start"""
    while end < start:
        end += timedelta(days=1)
    return end


def format_worked_time(minutes: float) -> str:
    """Format minutes as e.g. '7h 30min'"""
    total = int(round(max(0.0, minutes)))
    hours, mins = divmod(total, 60)
    return f"{hours}h {mins}min"


def format_clock(seconds: int, show_seconds: bool = True) -> str:
    """Format seconds as HH:MM:SS, or HH:MM with seconds hidden"""
    hours, remainder = divmod(max(0, int(seconds)), 3600)
    minutes, seconds = divmod(remainder, 60)
    if not show_seconds:
        return f"{hours:02d}:{minutes:02d}"
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

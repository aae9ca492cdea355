"""Calendar arithmetic used by the date rules.

All helpers take the current date explicitly so callers decide what "today"
is. Nothing here raises on bad calendar numbers; impossible dates come back
as ``None``.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

# Sunday-first, matching how weekday keywords are indexed.
WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


def days_from(today: date, days: int) -> date:
    return today + timedelta(days=days)


def weekday_index(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def next_weekday(today: date, weekday: int) -> date:
    """Next date falling on ``weekday`` strictly after ``today``.

    When today already is that weekday the result is a week out, never today.
    """
    days_until = (weekday - weekday_index(today) + 7) % 7
    return today + timedelta(days=days_until or 7)


def safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def closest_future(month: int, day: int, today: date) -> date | None:
    """Month/day in the current year, or next year if it has already passed."""
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    candidate = safe_date(today.year, month, day)
    if candidate is None:
        # 2/29 outside a leap year, 4/31 and friends
        return None
    if candidate < today:
        return safe_date(today.year + 1, month, day)
    return candidate


def parse_us_date(match: re.Match[str], today: date) -> date | None:
    month, day, year = (int(g) for g in match.groups())
    return safe_date(year, month, day)


def parse_us_short_year(match: re.Match[str], today: date) -> date | None:
    month, day, year = (int(g) for g in match.groups())
    return safe_date(2000 + year, month, day)


def parse_month_day(match: re.Match[str], today: date) -> date | None:
    month, day = (int(g) for g in match.groups())
    return closest_future(month, day, today)


def parse_iso_date(match: re.Match[str], today: date) -> date | None:
    year, month, day = (int(g) for g in match.groups())
    return safe_date(year, month, day)


def describe_due_date(due: date, today: date) -> str:
    """Short label for a due date chip: Today, Tomorrow, or e.g. "Dec 25"."""
    if due == today:
        return "Today"
    if due == today + timedelta(days=1):
        return "Tomorrow"
    label = f"{due:%b} {due.day}"
    if due.year != today.year:
        label += f", {due.year}"
    return label

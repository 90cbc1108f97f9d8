"""
Calendar-day helpers for date-stable message selection.

The day seed is the sum of the character codes of the day's
human-readable string ("Mon Oct 19 2026"). It is not a hash and
not random: it only changes when the date does.
"""

from __future__ import annotations

from datetime import date, datetime

from .config import get_settings

# Fixed English names so the seed does not move with the process locale.
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def today() -> date:
    """Current calendar date in the configured timezone (local time if unset)."""
    return datetime.now(get_settings().timezone).date()


def format_day(day: date) -> str:
    """Human-readable day string, e.g. 'Mon Oct 05 2026'."""
    return f"{_DAY_NAMES[day.weekday()]} {_MONTH_NAMES[day.month - 1]} {day.day:02d} {day.year}"


def day_seed(day: date) -> int:
    """Sum of character codes of format_day(day)."""
    return sum(ord(ch) for ch in format_day(day))

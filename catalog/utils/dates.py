"""Date formatting helpers for form inputs and display strings."""

from datetime import date


def input_format(value: date | None) -> str:
    """Format a date for an HTML date input (YYYY-MM-DD), '' if missing."""
    if value is None:
        return ""
    return value.isoformat()


def ordinal(day: int) -> str:
    """
    Return the day of month with its English ordinal suffix.

        >>> ordinal(1), ordinal(12), ordinal(22)
        ('1st', '12th', '22nd')
    """
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def long_format(value: date | None) -> str:
    """Format a date as 'June 8th, 2024', '' if missing."""
    if value is None:
        return ""
    return f"{value:%B} {ordinal(value.day)}, {value.year}"

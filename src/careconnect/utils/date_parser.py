"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including a few relative dates:
    - Absolute dates: "2025-01-15", "January 15, 2025", "15/01/2025", etc.
    - Relative dates: "today", "tomorrow", "next month", "next year"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "next month": today + relativedelta(months=1),
        "next year": today + relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str, dayfirst=_looks_day_first(date_str))
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def _looks_day_first(date_str: str) -> bool:
    """Slash or dot separated dates are read as day/month/year."""
    return ("/" in date_str or "." in date_str) and not date_str[:4].isdigit()

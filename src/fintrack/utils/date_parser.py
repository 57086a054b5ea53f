"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_KEY_RE = re.compile(r"^\d{4}-\d{2}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

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
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def to_iso_date(value: Union[date, str, None]) -> str:
    """Normalize a transaction date to its stored ISO form ("YYYY-MM-DD").

    Raises:
        ValueError: If the value is missing or not an ISO calendar date
    """
    if isinstance(value, date):
        return value.isoformat()
    if value is None or not str(value).strip():
        raise ValueError("Date is required")
    text = str(value).strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError as e:
        raise ValueError(f"Invalid date '{text}', expected YYYY-MM-DD") from e


def month_key(day: date) -> str:
    """Return the "YYYY-MM" prefix that dates in the same month start with."""
    return day.strftime("%Y-%m")


def month_label(day: date) -> str:
    """Human-readable month, e.g. "March 2024"."""
    return day.strftime("%B %Y")


def parse_month(month_str: Optional[str], today: Optional[date] = None) -> str:
    """Parse a month reference into a "YYYY-MM" key.

    Accepts "YYYY-MM", "this month", "last month", "next month" and anything
    dateutil can read as a date. None means the current month.
    """
    today = today or date.today()
    if month_str is None:
        return month_key(today)

    text = month_str.strip().lower()
    if MONTH_KEY_RE.match(text):
        return text
    if text in ("this month", "this-month"):
        return month_key(today)
    if text in ("last month", "last-month"):
        return month_key(today - relativedelta(months=1))
    if text in ("next month", "next-month"):
        return month_key(today + relativedelta(months=1))

    return month_key(parse_date(text))

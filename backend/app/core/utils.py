"""
Utility functions for the application.
"""
from typing import Any, Optional
from datetime import date, datetime, time, timezone
from decimal import Decimal


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching how DateTime columns store it."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric value to Decimal without going through binary float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def day_bounds(start_date: Optional[date], end_date: Optional[date]):
    """
    Turn an inclusive date range into datetime bounds.
    Returns None unless both ends are given.
    """
    if not start_date or not end_date:
        return None
    return datetime.combine(start_date, time.min), datetime.combine(end_date, time.max)


def day_label(value: date) -> str:
    """Short chart label for a day, e.g. 'Oct 17'."""
    return value.strftime("%b %d")

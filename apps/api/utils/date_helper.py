"""
Calendar helpers for subscription periods
"""
import calendar
from datetime import datetime


def add_months(value: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month.

    Jan 31 + 1 month -> Feb 28 (or 29); Feb 29 + 12 months -> Feb 28.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)

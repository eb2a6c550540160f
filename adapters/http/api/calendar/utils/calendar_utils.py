"""Date helpers for month/year calendar grids."""

import calendar
from datetime import date
from typing import List


def is_workday(check_date: date) -> bool:
    """Monday to Friday."""
    return check_date.weekday() < 5


def month_days(year: int, month: int) -> List[date]:
    """Every date of the month, in order."""
    _, days_in_month = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, days_in_month + 1)]


def month_bounds(year: int, month: int) -> tuple:
    """(first, last) ISO dates of the month."""
    days = month_days(year, month)
    return days[0].isoformat(), days[-1].isoformat()


def leading_blank_days(year: int, month: int, first_weekday: int = 0) -> int:
    """Empty cells before day 1 in a grid whose weeks start on ``first_weekday``."""
    return (date(year, month, 1).weekday() - first_weekday) % 7

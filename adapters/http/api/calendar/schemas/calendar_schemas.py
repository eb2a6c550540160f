"""Calendar grid response schemas."""

from typing import List
from pydantic import BaseModel

from .event_schemas import EventResponse
from .holiday_schemas import HolidayResponse


class CalendarDayResponse(BaseModel):
    date: str
    day: int
    weekday: int  # 0=Monday, 6=Sunday
    is_workday: bool
    is_today: bool
    event_count: int
    color: str
    holidays: List[str] = []


class MonthViewResponse(BaseModel):
    year: int
    month: int
    country: str
    today: str
    leading_blank_days: int
    days: List[CalendarDayResponse]


class YearDaySummary(BaseModel):
    date: str
    event_count: int
    is_holiday: bool


class YearMonthSummary(BaseModel):
    month: int
    event_count: int
    days: List[YearDaySummary]


class YearViewResponse(BaseModel):
    year: int
    country: str
    months: List[YearMonthSummary]


class DayViewResponse(BaseModel):
    date: str
    is_workday: bool
    color: str
    country: str
    events: List[EventResponse]
    holidays: List[HolidayResponse]

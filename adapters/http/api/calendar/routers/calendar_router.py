"""Month, year and day calendar views."""
import datetime as dt
from collections import defaultdict
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from src.calendar_bc.event.infrastructure.services import EventService
from src.calendar_bc.holiday.infrastructure.services import HolidayCacheManager
from src.calendar_bc.settings.infrastructure.services import SettingsService
from adapters.http.api.calendar.dependencies import get_holiday_manager, get_settings_service
from adapters.http.api.calendar.utils.calendar_utils import (
    is_workday,
    month_days,
    month_bounds,
    leading_blank_days,
)
from adapters.http.api.calendar.utils.mood_utils import mood_color
from adapters.http.api.calendar.schemas import (
    CalendarDayResponse,
    MonthViewResponse,
    YearDaySummary,
    YearMonthSummary,
    YearViewResponse,
    DayViewResponse,
    EventResponse,
    HolidayResponse,
)


router = APIRouter(prefix="/calendar", tags=["Calendar"])


def _holiday_names_by_date(manager: HolidayCacheManager, country: str, year: int) -> Dict[str, List[str]]:
    names: Dict[str, List[str]] = defaultdict(list)
    for record in manager.get_holidays(country, year):
        names[record.date].append(record.name)
    return names


@router.get("/month", response_model=MonthViewResponse)
def get_month_view(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    manager: HolidayCacheManager = Depends(get_holiday_manager),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Month grid with event counts, mood colors and holiday overlay.

    Defaults to the current month.
    """
    today = dt.date.today()
    year = year or today.year
    month = month or today.month
    country = settings_service.get_country()

    start, end = month_bounds(year, month)
    events_by_date = EventService(db).get_events_between(start, end)
    holidays = _holiday_names_by_date(manager, country, year)

    days = []
    for day in month_days(year, month):
        key = day.isoformat()
        day_events = events_by_date.get(key, [])
        days.append(
            CalendarDayResponse(
                date=key,
                day=day.day,
                weekday=day.weekday(),
                is_workday=is_workday(day),
                is_today=day == today,
                event_count=len(day_events),
                color=mood_color(e.text for e in day_events),
                holidays=holidays.get(key, []),
            )
        )

    return MonthViewResponse(
        year=year,
        month=month,
        country=country,
        today=today.isoformat(),
        leading_blank_days=leading_blank_days(year, month),
        days=days,
    )


@router.get("/year", response_model=YearViewResponse)
def get_year_view(
    year: Optional[int] = Query(None, ge=1, le=9999),
    db: Session = Depends(get_db),
    manager: HolidayCacheManager = Depends(get_holiday_manager),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Twelve month summaries with per-day event counts and holiday flags."""
    year = year or dt.date.today().year
    country = settings_service.get_country()

    events_by_date = EventService(db).get_events_between(f"{year:04d}-01-01", f"{year:04d}-12-31")
    holidays = _holiday_names_by_date(manager, country, year)

    months = []
    for month in range(1, 13):
        days = [
            YearDaySummary(
                date=day.isoformat(),
                event_count=len(events_by_date.get(day.isoformat(), [])),
                is_holiday=day.isoformat() in holidays,
            )
            for day in month_days(year, month)
        ]
        months.append(
            YearMonthSummary(
                month=month,
                event_count=sum(d.event_count for d in days),
                days=days,
            )
        )

    return YearViewResponse(year=year, country=country, months=months)


@router.get("/day/{date}", response_model=DayViewResponse)
def get_day_view(
    date: dt.date,
    db: Session = Depends(get_db),
    manager: HolidayCacheManager = Depends(get_holiday_manager),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Events, holidays and mood color for one date."""
    country = settings_service.get_country()
    key = date.isoformat()
    events = EventService(db).get_events(key)
    holidays = [h for h in manager.get_holidays(country, date.year) if h.date == key]

    return DayViewResponse(
        date=key,
        is_workday=is_workday(date),
        color=mood_color(e.text for e in events),
        country=country,
        events=[EventResponse(**e.to_dict()) for e in events],
        holidays=[HolidayResponse(**h.to_dict()) for h in holidays],
    )

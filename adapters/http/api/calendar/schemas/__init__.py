"""Centralized API schemas for calendar endpoints."""

from .holiday_schemas import (
    HolidayResponse,
    RefreshHolidaysRequest,
    RefreshHolidaysResponse,
    HolidayCacheStatusResponse,
)

from .event_schemas import (
    CreateEventRequest,
    EventResponse,
    CreateEventResponse,
    DeleteEventResponse,
    CategoryResponse,
)

from .calendar_schemas import (
    CalendarDayResponse,
    MonthViewResponse,
    YearDaySummary,
    YearMonthSummary,
    YearViewResponse,
    DayViewResponse,
)

from .emoji_schemas import UploadEmojiRequest, EmojiResponse

from .settings_schemas import SettingsResponse, UpdateSettingsRequest

from .snapshot_schemas import ImportRequest, ImportResponse, BackupResponse

__all__ = [
    "HolidayResponse", "RefreshHolidaysRequest", "RefreshHolidaysResponse", "HolidayCacheStatusResponse",
    "CreateEventRequest", "EventResponse", "CreateEventResponse", "DeleteEventResponse", "CategoryResponse",
    "CalendarDayResponse", "MonthViewResponse", "YearDaySummary", "YearMonthSummary",
    "YearViewResponse", "DayViewResponse",
    "UploadEmojiRequest", "EmojiResponse",
    "SettingsResponse", "UpdateSettingsRequest",
    "ImportRequest", "ImportResponse", "BackupResponse",
]

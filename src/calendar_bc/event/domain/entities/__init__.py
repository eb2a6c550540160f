from .event import CalendarEvent, EVENT_CATEGORIES, DEFAULT_CATEGORY

__all__ = ["CalendarEvent", "EVENT_CATEGORIES", "DEFAULT_CATEGORY"]

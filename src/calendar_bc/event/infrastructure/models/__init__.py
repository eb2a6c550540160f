from .event_model import CalendarEventModel

__all__ = ["CalendarEventModel"]

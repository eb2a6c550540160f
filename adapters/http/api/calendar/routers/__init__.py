from .holiday_router import router as holiday_router
from .event_router import router as event_router
from .calendar_router import router as calendar_router
from .emoji_router import router as emoji_router
from .settings_router import router as settings_router
from .snapshot_router import router as snapshot_router

__all__ = [
    "holiday_router", "event_router", "calendar_router",
    "emoji_router", "settings_router", "snapshot_router",
]

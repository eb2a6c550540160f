# Models registry for Alembic autogenerate and init_db
# Import all SQLAlchemy models here so they are registered on Base.metadata

from src.calendar_bc.holiday.infrastructure.models import HolidayRecordModel, HolidayCacheStatusModel
from src.calendar_bc.event.infrastructure.models import CalendarEventModel
from src.calendar_bc.emoji.infrastructure.models import CustomEmojiModel
from src.calendar_bc.settings.infrastructure.models import UserSettingModel

__all__ = [
    "HolidayRecordModel",
    "HolidayCacheStatusModel",
    "CalendarEventModel",
    "CustomEmojiModel",
    "UserSettingModel",
]

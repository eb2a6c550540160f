from .holiday_model import HolidayRecordModel, HolidayCacheStatusModel

__all__ = ["HolidayRecordModel", "HolidayCacheStatusModel"]

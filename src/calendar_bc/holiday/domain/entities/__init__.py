from .holiday_record import HolidayRecord

__all__ = ["HolidayRecord"]

from .holiday_provider import (
    HolidayProvider,
    HolidayProviderError,
    NagerDateProvider,
    LocalHolidaysProvider,
    build_holiday_provider,
)
from .holiday_store import HolidayStore
from .holiday_cache_manager import (
    HolidayCacheManager,
    HolidayMemoryCache,
    HolidayCacheStatus,
    RefreshOutcome,
)

__all__ = [
    "HolidayProvider", "HolidayProviderError", "NagerDateProvider",
    "LocalHolidaysProvider", "build_holiday_provider",
    "HolidayStore",
    "HolidayCacheManager", "HolidayMemoryCache", "HolidayCacheStatus", "RefreshOutcome",
]
